"""Data models shared across the gadget toolkit."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .css import validate_css_unit
from .markup import Markup, Node, Tag, flatten

__all__ = [
    "GadgetDocument",
    "MenuNode",
    "MenuSpec",
    "TabEntry",
    "TabNode",
    "TabSpec",
    "TabsetResult",
    "TextItem",
]


@dataclass(frozen=True, slots=True)
class TabNode:
    """A leaf tab: navigation title plus the body of its content pane.

    ``value`` is the key used for selection. When omitted, a plain string
    ``title`` doubles as the value; markup titles have no implicit value.
    """

    title: Node
    body: Tuple[Node, ...] = ()
    value: Optional[str] = None
    icon_class: Optional[str] = None

    def __post_init__(self) -> None:
        body = self.body if isinstance(self.body, (list, tuple)) else (self.body,)
        object.__setattr__(self, "body", flatten(body))

    @property
    def effective_value(self) -> Optional[str]:
        if self.value is not None:
            return self.value
        if isinstance(self.title, str) and not isinstance(self.title, Markup):
            return self.title
        return None


@dataclass(frozen=True, slots=True)
class MenuNode:
    """A dropdown grouping nested entries; it owns no pane of its own."""

    title: Node
    items: Tuple["TabEntry", ...] = ()
    icon_class: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))


@dataclass(frozen=True, slots=True)
class TextItem:
    """Decorative navigation text such as a separator or a header."""

    text: str


TabEntry = Union[TabNode, MenuNode, TextItem]


@dataclass(frozen=True, slots=True)
class TabsetResult:
    navigation: Tag
    content: Tag


# ----------------------------------------------------------------------
# Declarative gadget documents (JSON input for the command line)
# ----------------------------------------------------------------------
class TabSpec(BaseModel):
    """One tab in a gadget document."""

    model_config = ConfigDict(extra="forbid")

    title: str = Field(..., description="Label shown in the tab strip")
    body: str = Field(default="", description="Pane content")
    html: bool = Field(default=False, description="Treat body as trusted HTML")
    value: Optional[str] = Field(default=None, description="Explicit selection key")
    icon: Optional[str] = Field(default=None, description="Icon class, e.g. 'fa fa-table'")

    @field_validator("title", mode="before")
    @classmethod
    def _ensure_title(cls, value: str) -> str:
        text = str(value or "").strip()
        if not text:
            raise ValueError("Tab title must be a non-empty string")
        return text

    def to_entry(self) -> TabNode:
        body: Node = Markup(self.body) if self.html else self.body
        return TabNode(title=self.title, body=(body,), value=self.value, icon_class=self.icon)


class MenuSpec(BaseModel):
    """A dropdown menu of nested tabs in a gadget document."""

    model_config = ConfigDict(extra="forbid")

    menu: str = Field(..., description="Dropdown label")
    icon: Optional[str] = None
    tabs: List[Union[TabSpec, "MenuSpec", str]] = Field(default_factory=list)

    def to_entry(self) -> MenuNode:
        return MenuNode(
            title=self.menu,
            items=tuple(_spec_to_entry(item) for item in self.tabs),
            icon_class=self.icon,
        )


def _spec_to_entry(spec: Union[TabSpec, MenuSpec, str]) -> TabEntry:
    if isinstance(spec, str):
        return TextItem(spec)
    return spec.to_entry()


class GadgetDocument(BaseModel):
    """A whole gadget: title bar, tab strip and optional button row."""

    model_config = ConfigDict(extra="forbid")

    title: str = Field(default="Gadget", description="Title bar text and window title")
    tabstrip_id: Optional[str] = Field(default=None, description="Input id bound to the active tab")
    selected: Optional[str] = Field(default=None, description="Initially selected tab value")
    padding: Union[int, str, List[Union[int, str]]] = Field(
        default=10, description="Pane padding: one CSS size or a list of one to four"
    )
    done_label: str = Field(default="Done")
    tabs: List[Union[TabSpec, MenuSpec, str]] = Field(default_factory=list)

    @field_validator("title", "done_label", mode="before")
    @classmethod
    def _strip(cls, value: Optional[str]) -> str:
        return str(value or "").strip()

    @field_validator("padding")
    @classmethod
    def _check_padding(
        cls, value: Union[int, str, List[Union[int, str]]]
    ) -> Union[int, str, List[Union[int, str]]]:
        sizes = value if isinstance(value, list) else [value]
        if not 1 <= len(sizes) <= 4:
            raise ValueError("Padding takes one to four CSS sizes")
        for size in sizes:
            validate_css_unit(size)
        return value

    def entries(self) -> List[TabEntry]:
        return [_spec_to_entry(item) for item in self.tabs]


MenuSpec.model_rebuild()
