"""Viewer launchers deciding where a running gadget is displayed.

A viewer is a callable taking the gadget URL. Hosting environments (an IDE
pane, a desktop shell) register hooks with :func:`register_viewer_hook`; when
no hook is available the gadget opens in the system web browser.
"""

from __future__ import annotations

import logging
import threading
import webbrowser
from typing import Callable, Dict, Optional, Union

from .tracing import log_event

_LOGGER = logging.getLogger("webgadgets.viewer")

Viewer = Callable[[str], None]
MinHeight = Union[int, str, None]

PANE = "pane"
DIALOG = "dialog"

_HOOKS: Dict[str, Callable[..., None]] = {}
_HOOKS_LOCK = threading.Lock()


def register_viewer_hook(kind: str, hook: Optional[Callable[..., None]]) -> None:
    """Install (or with ``None`` remove) the host hook for ``"pane"`` or ``"dialog"``.

    Pane hooks are called as ``hook(url, min_height)``; dialog hooks as
    ``hook(name, url, width=..., height=...)``.
    """

    if kind not in (PANE, DIALOG):
        raise ValueError(f"Unsupported viewer kind '{kind}'")
    with _HOOKS_LOCK:
        if hook is None:
            _HOOKS.pop(kind, None)
        else:
            _HOOKS[kind] = hook


def _hook(kind: str) -> Optional[Callable[..., None]]:
    with _HOOKS_LOCK:
        return _HOOKS.get(kind)


def _open_in_browser(url: str, browser: Optional[str] = None) -> None:
    log_event(_LOGGER, logging.INFO, "viewer.browser", url=url, browser=browser)
    controller = webbrowser.get(browser) if browser else webbrowser
    controller.open(url)


def pane_viewer(min_height: MinHeight = None) -> Viewer:
    """Show the gadget in the host's viewer pane.

    Args:
        min_height: Minimum pane height in pixels, ``None`` to keep the
            current size, or ``"maximize"`` for all available space.
    """

    if isinstance(min_height, str) and min_height != "maximize":
        raise ValueError(f"Unsupported min_height '{min_height}'")
    hook = _hook(PANE)
    if hook is None:
        return _open_in_browser

    def _view(url: str) -> None:
        log_event(_LOGGER, logging.INFO, "viewer.pane", url=url, min_height=min_height)
        hook(url, min_height)

    return _view


def dialog_viewer(dialog_name: str, width: int = 600, height: int = 600) -> Viewer:
    """Show the gadget in a modal dialog of ``width`` x ``height`` pixels."""

    hook = _hook(DIALOG)
    if hook is None:
        return _open_in_browser

    def _view(url: str) -> None:
        log_event(_LOGGER, logging.INFO, "viewer.dialog", url=url, name=dialog_name)
        hook(dialog_name, url, width=width, height=height)

    return _view


def browser_viewer(browser: Optional[str] = None) -> Viewer:
    """Always open the gadget in a web browser (``browser`` names a :mod:`webbrowser` type)."""

    def _view(url: str) -> None:
        _open_in_browser(url, browser)

    return _view


def viewer_by_name(name: str, *, title: str = "Gadget") -> Viewer:
    """Resolve a configured viewer name (``pane``, ``dialog`` or ``browser``)."""

    key = name.strip().lower()
    if key == PANE:
        return pane_viewer()
    if key == DIALOG:
        return dialog_viewer(title)
    if key == "browser":
        return browser_viewer()
    raise ValueError(f"Unsupported viewer '{name}'")


__all__ = [
    "Viewer",
    "browser_viewer",
    "dialog_viewer",
    "pane_viewer",
    "register_viewer_hook",
    "viewer_by_name",
]
