"""Stylesheet and script dependencies attached to markup trees."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

from .markup import Node, TagList, iter_nodes

STATIC_DIR = Path(__file__).resolve().parent / "static"
ASSET_PREFIX = "/assets"

_BOOTSTRAP_VERSION = "3.4.1"
_BOOTSTRAP_CSS = f"https://cdn.jsdelivr.net/npm/bootstrap@{_BOOTSTRAP_VERSION}/dist/css/bootstrap.min.css"
_BOOTSTRAP_JS = f"https://cdn.jsdelivr.net/npm/bootstrap@{_BOOTSTRAP_VERSION}/dist/js/bootstrap.min.js"
_JQUERY_JS = "https://cdn.jsdelivr.net/npm/jquery@3.7.1/dist/jquery.min.js"


@dataclass(frozen=True, slots=True)
class HtmlDependency:
    """A named, versioned bundle of stylesheets and scripts.

    With ``src`` set, files are served from that directory under
    :attr:`mount_path`; otherwise the entries are absolute URLs.
    """

    name: str
    version: str
    stylesheets: Tuple[str, ...] = ()
    scripts: Tuple[str, ...] = ()
    src: Optional[Path] = None

    @property
    def mount_path(self) -> str:
        return f"{ASSET_PREFIX}/{self.name}-{self.version}"

    def _href(self, filename: str) -> str:
        if self.src is None:
            return filename
        return f"{self.mount_path}/{filename}"

    def stylesheet_hrefs(self) -> List[str]:
        return [self._href(name) for name in self.stylesheets]

    def script_srcs(self) -> List[str]:
        return [self._href(name) for name in self.scripts]


def _version_key(version: str) -> Tuple[int, ...]:
    return tuple(int(part) for part in re.findall(r"\d+", version))


def attach_dependencies(node: Node, dependencies: Iterable[HtmlDependency]) -> TagList:
    """Return ``node`` wrapped in a fragment carrying ``dependencies``."""

    return TagList((node,), tuple(dependencies))


def find_dependencies(node: Node) -> List[HtmlDependency]:
    """Collect dependencies in document order; for duplicate names the newest version wins."""

    resolved: Dict[str, HtmlDependency] = {}
    for current in iter_nodes(node):
        if not isinstance(current, TagList):
            continue
        for dependency in current.dependencies:
            existing = resolved.get(dependency.name)
            if existing is None or _version_key(dependency.version) > _version_key(existing.version):
                resolved[dependency.name] = dependency
    return list(resolved.values())


def gadget_dependencies() -> List[HtmlDependency]:
    from . import __version__

    return [
        HtmlDependency(
            name="webgadgets",
            version=__version__,
            stylesheets=("webgadgets.css",),
            scripts=("webgadgets.js",),
            src=STATIC_DIR,
        )
    ]


def bootstrap_dependency(theme: Optional[str] = None) -> HtmlDependency:
    """Bootstrap 3 with jQuery; ``theme`` replaces the stock stylesheet URL."""

    return HtmlDependency(
        name="bootstrap",
        version=_BOOTSTRAP_VERSION,
        stylesheets=(theme or _BOOTSTRAP_CSS,),
        scripts=(_JQUERY_JS, _BOOTSTRAP_JS),
    )


__all__ = [
    "ASSET_PREFIX",
    "HtmlDependency",
    "STATIC_DIR",
    "attach_dependencies",
    "bootstrap_dependency",
    "find_dependencies",
    "gadget_dependencies",
]
