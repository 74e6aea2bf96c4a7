"""Shared pytest fixtures for the webgadgets test-suite."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Callable, Iterable, List

import sys

import pytest
from bs4 import BeautifulSoup

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from webgadgets.ids import CounterTabsetIds, set_default_id_source
from webgadgets.layout import navbar_menu, tab_panel
from webgadgets.markup import Node, render
from webgadgets.models import TabEntry
from webgadgets.tabset import TabsetBuilder
from webgadgets import viewer


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the root directory containing reusable fixture files."""

    return Path(__file__).parent / "fixtures"


@pytest.fixture
def json_fixture(fixtures_dir: Path) -> Callable[[str], dict]:
    """Return a callable that loads JSON fixture payloads by name."""

    def _load(name: str) -> dict:
        path = fixtures_dir / "json" / name
        return json.loads(path.read_text(encoding="utf-8"))

    return _load


@pytest.fixture
def counter_ids() -> CounterTabsetIds:
    """Deterministic tabset ids starting at 1000."""

    return CounterTabsetIds(start=1000)


@pytest.fixture
def builder(counter_ids: CounterTabsetIds) -> TabsetBuilder:
    """Return a builder whose ids are predictable."""

    return TabsetBuilder(id_source=counter_ids)


@pytest.fixture
def soup() -> Callable[[Node], BeautifulSoup]:
    """Return a callable rendering a node and parsing it with BeautifulSoup."""

    def _parse(node: Node) -> BeautifulSoup:
        return BeautifulSoup(str(render(node)), "html.parser")

    return _parse


@pytest.fixture
def sample_tabs() -> List[TabEntry]:
    """Two top-level tabs, a separator and a menu with two nested tabs."""

    return [
        tab_panel("Data", "Pick a data set"),
        tab_panel("Plot", "The chart", value="plot"),
        "----",
        navbar_menu(
            "More",
            tab_panel("Summary", "Numbers"),
            tab_panel("About", "Text", icon="fa fa-info"),
        ),
    ]


@pytest.fixture
def restore_root_logging() -> Iterable[None]:
    """Undo handler and level changes made by ``configure_logging``."""

    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture(autouse=True)
def isolate_process_state(monkeypatch: pytest.MonkeyPatch) -> Iterable[None]:
    """Reset process wide id source, viewer hooks and settings env vars."""

    for key in ("HOST", "PORT", "VIEWER", "THEME", "LOG_LEVEL"):
        monkeypatch.delenv(f"WEBGADGETS_{key}", raising=False)
    set_default_id_source(None)
    yield
    set_default_id_source(None)
    viewer.register_viewer_hook(viewer.PANE, None)
    viewer.register_viewer_hook(viewer.DIALOG, None)
