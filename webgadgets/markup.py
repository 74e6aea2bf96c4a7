"""Immutable markup-tree primitives used to assemble gadget interfaces.

Nodes are constructed once and never patched afterwards: every transform
(:meth:`Tag.with_attrs`, :meth:`Tag.add_class`, ...) returns a new node.
Plain strings are escaped on render, :class:`markupsafe.Markup` strings are
emitted verbatim.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Dict, Iterable, Iterator, List, Mapping, Tuple, Union

from markupsafe import Markup, escape

if TYPE_CHECKING:  # pragma: no cover
    from .dependencies import HtmlDependency

__all__ = [
    "Markup",
    "Node",
    "flatten",
    "Tag",
    "TagList",
    "icon",
    "iter_nodes",
    "render",
    "tag",
    "tags",
]

_VOID_ELEMENTS = frozenset(
    {"area", "base", "br", "col", "embed", "hr", "img", "input", "link", "meta", "source", "track", "wbr"}
)

Node = Union["Tag", "TagList", str]


def _attr_name(name: str) -> str:
    # class_ -> class, data_toggle -> data-toggle
    return name.rstrip("_").replace("_", "-")


def _normalise_attr_value(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        parts = [str(part) for part in value if part]
        return " ".join(parts) if parts else None
    return value


def flatten(children: Iterable[Any]) -> Tuple[Node, ...]:
    flat: List[Node] = []
    for child in children:
        if child is None:
            continue
        if isinstance(child, (list, tuple)):
            flat.extend(flatten(child))
        elif isinstance(child, (Tag, TagList, str)):
            flat.append(child)
        else:
            flat.append(str(child))
    return tuple(flat)


def _render_attrs(attrs: Mapping[str, Any]) -> str:
    parts: List[str] = []
    for name, value in attrs.items():
        if value is None or value is False:
            continue
        if value is True:
            parts.append(f" {name}")
        else:
            parts.append(f' {name}="{escape(str(value))}"')
    return "".join(parts)


def _render_child(child: Node) -> str:
    if isinstance(child, (Tag, TagList)):
        return child.render()
    return str(escape(child))


@dataclass(frozen=True, slots=True)
class Tag:
    """A single HTML element with ordered attributes and children."""

    name: str
    attrs: Mapping[str, Any] = field(default_factory=dict)
    children: Tuple[Node, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "attrs", MappingProxyType(dict(self.attrs)))
        object.__setattr__(self, "children", flatten(self.children))

    def __hash__(self) -> int:
        # Order-insensitive over attrs, matching mapping equality.
        return hash((self.name, frozenset(self.attrs.items()), self.children))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def attr(self, name: str, default: Any = None) -> Any:
        return self.attrs.get(name, default)

    @property
    def classes(self) -> List[str]:
        raw = self.attrs.get("class")
        return str(raw).split() if raw else []

    def has_class(self, name: str) -> bool:
        return name in self.classes

    # ------------------------------------------------------------------
    # Transforms
    # ------------------------------------------------------------------
    def with_attrs(self, **attrs: Any) -> "Tag":
        """Return a copy with ``attrs`` set; ``None`` values remove an attribute."""

        merged: Dict[str, Any] = dict(self.attrs)
        for key, value in attrs.items():
            name = _attr_name(key)
            value = _normalise_attr_value(value)
            if value is None:
                merged.pop(name, None)
            else:
                merged[name] = value
        return Tag(self.name, merged, self.children)

    def add_class(self, *names: str) -> "Tag":
        """Return a copy with ``names`` appended to the class attribute."""

        classes = self.classes
        for name in names:
            for part in (name or "").split():
                if part not in classes:
                    classes.append(part)
        return self.with_attrs(class_=classes)

    def without_attrs(self, *names: str) -> "Tag":
        remaining = {key: value for key, value in self.attrs.items() if key not in names}
        return Tag(self.name, remaining, self.children)

    def append(self, *children: Any) -> "Tag":
        return Tag(self.name, self.attrs, self.children + flatten(children))

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def render(self) -> Markup:
        opening = f"<{self.name}{_render_attrs(self.attrs)}>"
        if self.name in _VOID_ELEMENTS:
            return Markup(opening)
        inner = "".join(_render_child(child) for child in self.children)
        return Markup(f"{opening}{inner}</{self.name}>")

    def __html__(self) -> str:
        return str(self.render())

    def __str__(self) -> str:
        return str(self.render())


@dataclass(frozen=True, slots=True)
class TagList:
    """An ordered fragment of sibling nodes, optionally carrying asset dependencies."""

    children: Tuple[Node, ...] = ()
    dependencies: Tuple["HtmlDependency", ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", flatten(self.children))
        object.__setattr__(self, "dependencies", tuple(self.dependencies))

    def render(self) -> Markup:
        return Markup("".join(_render_child(child) for child in self.children))

    def __html__(self) -> str:
        return str(self.render())

    def __str__(self) -> str:
        return str(self.render())


def tag(name: str, *children: Any, **attrs: Any) -> Tag:
    """Create a :class:`Tag`.

    Keyword names are converted to attribute names (``class_`` becomes
    ``class``, ``data_value`` becomes ``data-value``). ``None`` attributes
    and children are dropped, nested lists of children are flattened.
    """

    normalised: Dict[str, Any] = {}
    for key, value in attrs.items():
        value = _normalise_attr_value(value)
        if value is None:
            continue
        normalised[_attr_name(key)] = value
    return Tag(name, normalised, flatten(children))


class _TagFactory:
    """Attribute access shortcut: ``tags.div(...)`` is ``tag("div", ...)``."""

    def __getattr__(self, name: str):
        if name.startswith("__"):
            raise AttributeError(name)

        def _make(*children: Any, **attrs: Any) -> Tag:
            return tag(name, *children, **attrs)

        _make.__name__ = name
        return _make


tags = _TagFactory()


def icon(class_name: str) -> Tag:
    """Render an inline icon for a font-icon class string."""

    return tag("i", class_=class_name, role="presentation")


def iter_nodes(node: Node) -> Iterator[Node]:
    """Yield ``node`` and all of its descendants, depth first."""

    yield node
    if isinstance(node, (Tag, TagList)):
        for child in node.children:
            yield from iter_nodes(child)


def render(node: Node) -> Markup:
    return Markup(_render_child(node))
