"""Tab-strip builder.

Turns an ordered list of tab entries into two synchronised trees: a
navigation list (``<ul>``) and a content container (``<div class="tab-content">``).
Every leaf tab gets a generated DOM id ``tab-{tabset}-{sequence}`` shared by
its navigation link and its pane. Menus are rendered as dropdowns whose panes
are flattened into the same content container.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional, Sequence, Set, Tuple

from .ids import TabsetIdSource, get_default_id_source
from .markup import Node, Tag, icon, tag
from .models import MenuNode, TabEntry, TabNode, TabsetResult, TextItem
from .tracing import log_event

_LOGGER = logging.getLogger("webgadgets.tabset")

DROPDOWN_MENU_CLASS = "dropdown-menu"
TAB_INPUT_CLASS = "gadget-tab-input"

# Font icon families (``fa-`` prefixed classes) get a fixed-width modifier so
# that labels line up in vertical menus.
_FIXED_WIDTH_MARKER = "fa-"
_FIXED_WIDTH_CLASS = "fa-fw"

_MAX_ID_DRAWS = 100

TextFilter = Callable[[str], Optional[Node]]
IconRenderer = Callable[[str], Node]


class InvalidTabEntryError(TypeError):
    """Raised when a tab list contains something other than a tab, menu or text."""

    def __init__(self, entry: object) -> None:
        super().__init__(f"Invalid tab entry of type {type(entry).__name__}: {entry!r}")
        self.entry = entry


def coerce_entry(entry: object) -> TabEntry:
    """Return ``entry`` as a tab variant; plain strings become :class:`TextItem`."""

    if isinstance(entry, (TabNode, MenuNode, TextItem)):
        return entry
    if isinstance(entry, str):
        return TextItem(entry)
    raise InvalidTabEntryError(entry)


def fixed_width_icon_class(icon_class: str) -> str:
    if _FIXED_WIDTH_MARKER in icon_class and _FIXED_WIDTH_CLASS not in icon_class.split():
        return f"{icon_class} {_FIXED_WIDTH_CLASS}"
    return icon_class


def _selected_index(entries: Sequence[TabEntry], selected: Optional[str]) -> Optional[int]:
    leaves = [index for index, entry in enumerate(entries) if isinstance(entry, TabNode)]
    if not leaves:
        return None
    if selected is not None:
        for index in leaves:
            if entries[index].effective_value == selected:
                return index
    return leaves[0]


class TabsetBuilder:
    """Build ``{navigation, content}`` pairs from tab entries.

    The builder holds no state between calls. Tabset ids come from the
    injected ``id_source`` (the process wide random source by default) and
    icons are rendered with ``icon_renderer``.
    """

    def __init__(
        self,
        id_source: Optional[TabsetIdSource] = None,
        icon_renderer: IconRenderer = icon,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._id_source = id_source
        self._icon_renderer = icon_renderer
        self._logger = logger or _LOGGER

    @property
    def id_source(self) -> TabsetIdSource:
        return self._id_source or get_default_id_source()

    def build(
        self,
        items: Iterable[object],
        nav_class: str,
        input_id: Optional[str] = None,
        selected: Optional[str] = None,
        text_filter: Optional[TextFilter] = None,
    ) -> TabsetResult:
        """Build the navigation list and content container for ``items``.

        Args:
            items: Ordered tabs, menus and text entries (plain strings allowed).
            nav_class: Class applied to the navigation ``<ul>``.
            input_id: When given, the navigation list gets this id and the
                input sentinel class so the host can observe the active tab.
            selected: Value (or string title) of the tab to activate. Unknown
                values fall back to the first top-level tab.
            text_filter: Optional transform applied to text entries before
                they are placed in the navigation.

        Raises:
            InvalidTabEntryError: If an entry is not a tab, menu or string.
        """

        return self._build(
            items,
            nav_class,
            input_id=input_id,
            selected=selected,
            text_filter=text_filter,
            nested=False,
            used_ids=set(),
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _build(
        self,
        items: Iterable[object],
        nav_class: str,
        *,
        input_id: Optional[str],
        selected: Optional[str],
        text_filter: Optional[TextFilter],
        nested: bool,
        used_ids: Set[int],
    ) -> TabsetResult:
        entries = [coerce_entry(item) for item in items]
        tabset_id = self._mint_tabset_id(used_ids)
        active_index = None if nested else _selected_index(entries, selected)

        if (
            selected is not None
            and not nested
            and (active_index is None or entries[active_index].effective_value != selected)
        ):
            log_event(
                self._logger,
                logging.DEBUG,
                "tabset.selection.fallback",
                tabset_id=tabset_id,
                requested=selected,
            )

        nav_items: List[Node] = []
        panes: List[Node] = []
        sequence = 0
        for index, entry in enumerate(entries):
            if isinstance(entry, TextItem):
                nav_items.append(text_filter(entry.text) if text_filter else entry.text)
            elif isinstance(entry, MenuNode):
                menu_item, menu_panes = self._menu_item(entry, text_filter, used_ids)
                nav_items.append(menu_item)
                panes.extend(menu_panes)
            else:
                sequence += 1
                tab_id = f"tab-{tabset_id}-{sequence}"
                active = index == active_index
                nav_items.append(self._nav_item(entry, tab_id, active))
                panes.append(self._pane(entry, tab_id, active))

        navigation = tag(
            "ul",
            nav_items,
            class_=[nav_class, TAB_INPUT_CLASS if input_id is not None else None],
            id=input_id,
        )
        content = tag("div", panes, class_="tab-content")

        log_event(
            self._logger,
            logging.DEBUG,
            "tabset.build",
            tabset_id=tabset_id,
            tabs=sequence,
            panes=len(panes),
            nested=nested,
            active=None if active_index is None else entries[active_index].effective_value,
        )
        return TabsetResult(navigation=navigation, content=content)

    def _mint_tabset_id(self, used_ids: Set[int]) -> int:
        source = self.id_source
        for _ in range(_MAX_ID_DRAWS):
            candidate = source.next_tabset_id()
            if candidate not in used_ids:
                used_ids.add(candidate)
                return candidate
        raise RuntimeError(
            f"Tabset id source produced no unused id in {_MAX_ID_DRAWS} draws"
        )

    def _icon(self, icon_class: Optional[str]) -> Optional[Node]:
        if not icon_class:
            return None
        return self._icon_renderer(fixed_width_icon_class(icon_class))

    def _nav_item(self, entry: TabNode, tab_id: str, active: bool) -> Tag:
        link = tag(
            "a",
            self._icon(entry.icon_class),
            entry.title,
            href=f"#{tab_id}",
            data_toggle="tab",
            data_value=entry.effective_value,
        )
        return tag("li", link, class_="active" if active else None)

    def _pane(self, entry: TabNode, tab_id: str, active: bool) -> Tag:
        return tag(
            "div",
            entry.body,
            class_=["tab-pane", "active" if active else None],
            id=tab_id,
            data_value=entry.effective_value,
            data_icon_class=entry.icon_class,
        )

    def _menu_item(
        self,
        menu: MenuNode,
        text_filter: Optional[TextFilter],
        used_ids: Set[int],
    ) -> Tuple[Tag, Tuple[Node, ...]]:
        submenu = self._build(
            menu.items,
            DROPDOWN_MENU_CLASS,
            input_id=None,
            selected=None,
            text_filter=text_filter,
            nested=True,
            used_ids=used_ids,
        )
        toggle = tag(
            "a",
            self._icon(menu.icon_class),
            menu.title,
            tag("b", class_="caret"),
            href="#",
            class_="dropdown-toggle",
            data_toggle="dropdown",
        )
        item = tag("li", toggle, submenu.navigation, class_="dropdown")
        return item, submenu.content.children


def build_tabset(
    items: Iterable[object],
    nav_class: str,
    *,
    input_id: Optional[str] = None,
    selected: Optional[str] = None,
    text_filter: Optional[TextFilter] = None,
    id_source: Optional[TabsetIdSource] = None,
) -> TabsetResult:
    """Shortcut for ``TabsetBuilder(id_source).build(...)``."""

    return TabsetBuilder(id_source=id_source).build(
        items,
        nav_class,
        input_id=input_id,
        selected=selected,
        text_filter=text_filter,
    )


__all__ = [
    "DROPDOWN_MENU_CLASS",
    "InvalidTabEntryError",
    "TAB_INPUT_CLASS",
    "TabsetBuilder",
    "build_tabset",
    "coerce_entry",
    "fixed_width_icon_class",
]
