"""Composable HTML building blocks for small embeddable "gadget" UIs.

The package centres on :class:`~webgadgets.tabset.TabsetBuilder`, which turns
tabs and nested menus into a synchronised navigation list and content
container. The layout helpers compose it into full gadget pages that can be
rendered to HTML or served with :func:`~webgadgets.server.run_gadget`.
"""

__version__ = "0.1.0"

from .ids import CounterTabsetIds, RandomTabsetIds, TabsetIdSource
from .layout import (
    button_block,
    content_panel,
    fill_page,
    flexbox_container,
    flexbox_item,
    gadget_from_document,
    gadget_page,
    navbar_menu,
    scroll_panel,
    tab_panel,
    tabstrip_panel,
    titlebar,
    titlebar_button,
)
from .markup import Markup, Tag, TagList, icon, tag, tags
from .models import GadgetDocument, MenuNode, TabNode, TabsetResult, TextItem
from .page import render_page
from .tabset import InvalidTabEntryError, TabsetBuilder, build_tabset
from .viewer import browser_viewer, dialog_viewer, pane_viewer

__all__ = [
    "CounterTabsetIds",
    "GadgetDocument",
    "InvalidTabEntryError",
    "Markup",
    "MenuNode",
    "RandomTabsetIds",
    "TabNode",
    "Tag",
    "TagList",
    "TabsetBuilder",
    "TabsetIdSource",
    "TabsetResult",
    "TextItem",
    "__version__",
    "browser_viewer",
    "build_tabset",
    "button_block",
    "content_panel",
    "dialog_viewer",
    "fill_page",
    "flexbox_container",
    "flexbox_item",
    "gadget_from_document",
    "gadget_page",
    "icon",
    "navbar_menu",
    "pane_viewer",
    "render_page",
    "scroll_panel",
    "tab_panel",
    "tabstrip_panel",
    "tag",
    "tags",
    "titlebar",
    "titlebar_button",
]
