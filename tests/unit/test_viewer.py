"""Tests for :mod:`webgadgets.viewer`."""

from __future__ import annotations

import webbrowser
from typing import List

import pytest

from webgadgets import viewer


@pytest.fixture
def opened(monkeypatch: pytest.MonkeyPatch) -> List[str]:
    urls: List[str] = []
    monkeypatch.setattr(webbrowser, "open", lambda url, *args, **kwargs: urls.append(url))
    return urls


def test_pane_viewer_falls_back_to_browser(opened: List[str]) -> None:
    """Given no pane hook When a pane viewer opens a URL Then the system browser is used."""

    viewer.pane_viewer()("http://127.0.0.1:8000/")

    assert opened == ["http://127.0.0.1:8000/"]


def test_pane_viewer_uses_registered_hook(opened: List[str]) -> None:
    calls = []
    viewer.register_viewer_hook(viewer.PANE, lambda url, min_height: calls.append((url, min_height)))

    viewer.pane_viewer(min_height="maximize")("http://gadget/")

    assert calls == [("http://gadget/", "maximize")]
    assert opened == []


def test_pane_viewer_rejects_unknown_height_keyword() -> None:
    with pytest.raises(ValueError):
        viewer.pane_viewer(min_height="tall")


def test_dialog_viewer_passes_dimensions() -> None:
    calls = []
    viewer.register_viewer_hook(
        viewer.DIALOG,
        lambda name, url, width, height: calls.append((name, url, width, height)),
    )

    viewer.dialog_viewer("Pick", width=800, height=400)("http://gadget/")

    assert calls == [("Pick", "http://gadget/", 800, 400)]


def test_dialog_viewer_without_hook_opens_browser(opened: List[str]) -> None:
    viewer.dialog_viewer("Pick")("http://gadget/")

    assert opened == ["http://gadget/"]


def test_browser_viewer_with_named_browser(monkeypatch: pytest.MonkeyPatch) -> None:
    urls = []

    class _Controller:
        def open(self, url: str) -> bool:
            urls.append(url)
            return True

    requested = []
    monkeypatch.setattr(webbrowser, "get", lambda name: requested.append(name) or _Controller())

    viewer.browser_viewer("firefox")("http://gadget/")

    assert requested == ["firefox"]
    assert urls == ["http://gadget/"]


def test_unknown_hook_kind_is_rejected() -> None:
    with pytest.raises(ValueError):
        viewer.register_viewer_hook("window", lambda url: None)


def test_viewer_by_name(opened: List[str]) -> None:
    calls = []
    viewer.register_viewer_hook(viewer.DIALOG, lambda name, url, **size: calls.append(name))

    viewer.viewer_by_name(" Dialog ", title="Explorer")("http://gadget/")
    viewer.viewer_by_name("browser")("http://gadget/")

    assert calls == ["Explorer"]
    assert opened == ["http://gadget/"]
    with pytest.raises(ValueError):
        viewer.viewer_by_name("window")
