"""Page and panel composition for gadgets.

These helpers only assemble markup; the one piece of real logic they call
into is :class:`webgadgets.tabset.TabsetBuilder`.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable, Optional, Sequence, Union

from .css import CssSize, collapse_sizes, css_list, padding_to_position
from .dependencies import attach_dependencies, bootstrap_dependency, gadget_dependencies
from .markup import Markup, Node, Tag, TagList, tags
from .models import GadgetDocument, MenuNode, TabEntry, TabNode
from .tabset import TabsetBuilder

_LOGGER = logging.getLogger("webgadgets.layout")

_FILL_CSS = "html, body { width: 100%; height: 100%; overflow: hidden; }"

_ALLOWED_BORDERS = ("top", "bottom")
_ALLOWED_FLEX_DIRECTIONS = ("row", "row-reverse", "column", "column-reverse")
_ALLOWED_FLEX_WRAPS = ("nowrap", "wrap", "wrap-reverse")
_ALLOWED_JUSTIFY = ("flex-start", "flex-end", "center", "space-between", "space-around")
_ALLOWED_ALIGN_ITEMS = ("stretch", "flex-start", "flex-end", "center", "baseline")
_ALLOWED_ALIGN_CONTENT = ("stretch", "flex-start", "flex-end", "center", "space-between", "space-around")
_ALLOWED_ALIGN_SELF = ("auto", "flex-start", "flex-end", "center", "baseline", "stretch")

Padding = Union[CssSize, Sequence[CssSize]]


# ----------------------------------------------------------------------
# Tab constructors
# ----------------------------------------------------------------------
def tab_panel(
    title: Node,
    *body: Node,
    value: Optional[str] = None,
    icon: Optional[str] = None,
) -> TabNode:
    """Create a tab whose pane holds ``body``."""

    return TabNode(title=title, body=body, value=value, icon_class=icon)


def navbar_menu(title: Node, *items: Union[TabEntry, str], icon: Optional[str] = None) -> MenuNode:
    """Group tabs (and text separators) under a dropdown entry."""

    return MenuNode(title=title, items=items, icon_class=icon)


# ----------------------------------------------------------------------
# Pages
# ----------------------------------------------------------------------
def fill_page(
    *children: Node,
    padding: Padding = 0,
    title: Optional[str] = None,
    bootstrap: bool = True,
    theme: Optional[str] = None,
) -> TagList:
    """Create a page whose body always fills the browser window.

    Args:
        padding: One to four CSS sizes for the body padding (numbers are pixels).
        title: Browser window title; not shown in the document.
        bootstrap: Attach the Bootstrap stylesheet and scripts.
        theme: URL of an alternative Bootstrap stylesheet.
    """

    fill_css = tags.head(
        tags.style(
            Markup(f"{_FILL_CSS}\nbody {{ padding: {collapse_sizes(padding)}; margin: 0; }}"),
            type="text/css",
        )
    )
    page = TagList(
        (
            fill_css,
            tags.head(tags.title(title)) if title is not None else None,
            children,
        )
    )
    if bootstrap:
        return attach_dependencies(page, [bootstrap_dependency(theme)])
    return page


def gadget_page(*children: Node, title: Optional[str] = None, theme: Optional[str] = None) -> TagList:
    """Outermost container for a gadget UI (title bar, tab strip, panels)."""

    # Bootstrap stays outermost so its stylesheet precedes the gadget one.
    return fill_page(
        attach_dependencies(tags.div(children, class_="gadget-container"), gadget_dependencies()),
        title=title,
        theme=theme,
    )


# ----------------------------------------------------------------------
# Tab strip
# ----------------------------------------------------------------------
def tabstrip_panel(
    *tabs: Union[TabEntry, str],
    input_id: Optional[str] = None,
    selected: Optional[str] = None,
    between: Optional[Node] = None,
    builder: Optional[TabsetBuilder] = None,
) -> TagList:
    """A bottom tab strip optimised for small viewports.

    Args:
        tabs: Tabs, menus and text entries.
        input_id: Id the host binds to the active tab value.
        selected: Value (or title) of the initially active tab; the first
            tab is used when omitted or unknown.
        between: Content placed between the panes (above) and the strip (below).
        builder: Builder to use, e.g. one with a deterministic id source.
    """

    tabset = (builder or TabsetBuilder()).build(
        tabs,
        "gadget-tabs",
        input_id=input_id,
        selected=selected,
    )
    return attach_dependencies(
        TagList(
            (
                tags.div(tabset.content, class_="gadget-tabs-content-container"),
                between,
                tags.div(tabset.navigation, class_="gadget-tabs-container"),
            )
        ),
        gadget_dependencies(),
    )


# ----------------------------------------------------------------------
# Title bar
# ----------------------------------------------------------------------
def titlebar_button(input_id: str, label: Node, primary: Union[bool, str] = False) -> Tag:
    """A small action button for a title bar.

    ``primary`` may be ``True`` (primary style), ``False`` (default style) or
    the name of a Bootstrap button style such as ``"danger"``.
    """

    if primary is True:
        style = "primary"
    elif primary is False:
        style = "default"
    else:
        style = str(primary)

    return tags.button(
        label,
        id=input_id,
        type="button",
        class_=f"btn btn-{style} btn-sm action-button",
    )


def titlebar(
    title: Node,
    left: Optional[Tag] = None,
    right: Optional[Tag] = titlebar_button("done", "Done", primary=True),
) -> TagList:
    """Title bar with an optional button on each side (a "Done" button on the right by default)."""

    return attach_dependencies(
        tags.div(
            tags.h1(title),
            left.add_class("pull-left") if left is not None else None,
            right.add_class("pull-right") if right is not None else None,
            class_="gadget-title",
        ),
        gadget_dependencies(),
    )


# ----------------------------------------------------------------------
# Panels
# ----------------------------------------------------------------------
def scroll_panel(*children: Node) -> TagList:
    return attach_dependencies(tags.div(children, class_="gadget-scroll"), gadget_dependencies())


def content_panel(*children: Node, padding: Padding = 10, scrollable: bool = True) -> TagList:
    """Flex-friendly panel with padding and, optionally, scrolling.

    Wrapping content in a content panel also fixes percentage heights of
    widgets placed inside a gadget.
    """

    content = tags.div(
        tags.div(
            children,
            class_="gadget-absfill",
            style=f"position:absolute;{padding_to_position(padding)}",
        ),
        class_="gadget-content",
    )
    if scrollable:
        return scroll_panel(content)
    return attach_dependencies(content, gadget_dependencies())


def button_block(*buttons: Node, border: Union[str, Iterable[str], None] = ("top",)) -> Tag:
    """Full-width row of buttons sharing the horizontal space evenly.

    Raises:
        ValueError: If ``border`` names a side other than top or bottom.
    """

    if border is None:
        sides: list = []
    elif isinstance(border, str):
        sides = [border]
    else:
        sides = list(border)
    for side in sides:
        if side not in _ALLOWED_BORDERS:
            raise ValueError(f"Unsupported button block border '{side}'")

    return tags.div(
        buttons,
        class_=["gadget-block-button", *(f"gadget-block-button-{side}" for side in sides)],
    )


# ----------------------------------------------------------------------
# Flexbox
# ----------------------------------------------------------------------
def _check_choice(name: str, value: Optional[str], allowed: Sequence[str]) -> Optional[str]:
    if value is not None and value not in allowed:
        raise ValueError(f"Unsupported {name} '{value}'. Expected one of: {', '.join(allowed)}.")
    return value


def flexbox_container(
    *children: Node,
    flex_direction: Optional[str] = None,
    flex_wrap: Optional[str] = None,
    justify_content: Optional[str] = None,
    align_items: Optional[str] = None,
    align_content: Optional[str] = None,
) -> Tag:
    style = css_list(
        {
            "display": "flex",
            "flex_direction": _check_choice("flex_direction", flex_direction, _ALLOWED_FLEX_DIRECTIONS),
            "flex_wrap": _check_choice("flex_wrap", flex_wrap, _ALLOWED_FLEX_WRAPS),
            "justify_content": _check_choice("justify_content", justify_content, _ALLOWED_JUSTIFY),
            "align_items": _check_choice("align_items", align_items, _ALLOWED_ALIGN_ITEMS),
            "align_content": _check_choice("align_content", align_content, _ALLOWED_ALIGN_CONTENT),
        }
    )
    return tags.div(children, style=style)


def flexbox_item(
    *children: Node,
    order: Optional[int] = None,
    flex: Optional[str] = None,
    align_self: Optional[str] = None,
) -> Tag:
    style = css_list(
        {
            "order": order,
            "flex": flex,
            "align_self": _check_choice("align_self", align_self, _ALLOWED_ALIGN_SELF),
        }
    )
    return tags.div(children, style=style or None)


# ----------------------------------------------------------------------
# Documents
# ----------------------------------------------------------------------
def _wrap_bodies(entry: TabEntry, padding: Padding) -> TabEntry:
    if isinstance(entry, TabNode):
        return replace(entry, body=(content_panel(*entry.body, padding=padding),))
    if isinstance(entry, MenuNode):
        return replace(entry, items=tuple(_wrap_bodies(item, padding) for item in entry.items))
    return entry


def gadget_from_document(
    document: GadgetDocument,
    *,
    builder: Optional[TabsetBuilder] = None,
    theme: Optional[str] = None,
) -> TagList:
    """Compose a full gadget page from a :class:`GadgetDocument`."""

    entries = [_wrap_bodies(entry, document.padding) for entry in document.entries()]
    _LOGGER.debug("Composing gadget %r with %d top-level entries", document.title, len(entries))
    return gadget_page(
        titlebar(document.title, right=titlebar_button("done", document.done_label, primary=True)),
        tabstrip_panel(
            *entries,
            input_id=document.tabstrip_id,
            selected=document.selected,
            builder=builder,
        ),
        title=document.title,
        theme=theme,
    )


__all__ = [
    "button_block",
    "content_panel",
    "fill_page",
    "flexbox_container",
    "flexbox_item",
    "gadget_from_document",
    "gadget_page",
    "navbar_menu",
    "scroll_panel",
    "tab_panel",
    "tabstrip_panel",
    "titlebar",
    "titlebar_button",
]
