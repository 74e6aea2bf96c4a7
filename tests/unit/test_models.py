"""Tests for :mod:`webgadgets.models`."""

from __future__ import annotations

from typing import Callable

import pytest
from pydantic import ValidationError

from webgadgets.markup import Markup, tags
from webgadgets.models import GadgetDocument, MenuNode, MenuSpec, TabNode, TabSpec, TextItem


def test_tab_node_value_defaults_to_plain_title() -> None:
    """Given a tab without value When effective_value is read Then the string title is used."""

    assert TabNode(title="Data").effective_value == "Data"
    assert TabNode(title="Data", value="data").effective_value == "data"


def test_tab_node_markup_title_has_no_implicit_value() -> None:
    assert TabNode(title=tags.b("Data")).effective_value is None
    assert TabNode(title=Markup("<b>Data</b>")).effective_value is None


def test_tab_node_single_string_body_is_not_split() -> None:
    node = TabNode(title="A", body="hello")  # type: ignore[arg-type]

    assert node.body == ("hello",)


def test_tab_node_body_is_flattened() -> None:
    node = TabNode(title="A", body=("one", None, ["two", ("three",)]))

    assert node.body == ("one", "two", "three")


def test_menu_node_items_become_tuple() -> None:
    menu = MenuNode(title="More", items=[TabNode(title="A")])  # type: ignore[arg-type]

    assert isinstance(menu.items, tuple)


def test_gadget_document_converts_entries(json_fixture: Callable[[str], dict]) -> None:
    """Given the explorer fixture When entries() is called Then tabs, text and menus are produced."""

    document = GadgetDocument.model_validate(json_fixture("explorer.json"))

    entries = document.entries()

    assert [type(entry) for entry in entries] == [TabNode, TabNode, TextItem, MenuNode]
    assert entries[0].icon_class == "fa fa-table"
    assert entries[1].effective_value == "plot"
    assert isinstance(entries[1].body[0], Markup)
    assert entries[2].text == "----"
    assert [item.title for item in entries[3].items] == ["Summary", "About"]
    assert document.padding == 12
    assert document.done_label == "Finish"


def test_plain_body_is_not_trusted_html() -> None:
    entry = TabSpec(title="A", body="<b>x</b>").to_entry()

    assert not isinstance(entry.body[0], Markup)


def test_nested_menu_specs_are_supported() -> None:
    spec = MenuSpec.model_validate(
        {"menu": "Outer", "tabs": [{"menu": "Inner", "tabs": [{"title": "Deep"}]}, "text"]}
    )

    entry = spec.to_entry()

    inner = entry.items[0]
    assert isinstance(inner, MenuNode)
    assert inner.items[0].title == "Deep"
    assert entry.items[1] == TextItem("text")


def test_document_defaults() -> None:
    document = GadgetDocument()

    assert document.title == "Gadget"
    assert document.done_label == "Done"
    assert document.padding == 10
    assert document.entries() == []


def test_document_strips_title() -> None:
    assert GadgetDocument(title="  Explorer  ").title == "Explorer"


@pytest.mark.parametrize(
    "payload",
    [
        {"tabs": [{"title": "   "}]},
        {"tabs": [{"title": "A", "colour": "red"}]},
        {"tabs": [42]},
        {"unknown": True},
    ],
)
def test_invalid_documents_are_rejected(payload: dict) -> None:
    with pytest.raises(ValidationError):
        GadgetDocument.model_validate(payload)


@pytest.mark.parametrize("padding", [0, "8", "1em", [4, "2%"], [1, 2, 3, 4]])
def test_document_accepts_css_padding(padding) -> None:
    assert GadgetDocument(padding=padding).padding == padding


@pytest.mark.parametrize("padding", ["10px 5px", "abc", -3, [], [1, 2, 3, 4, 5], [10, "wide"]])
def test_document_rejects_invalid_padding(padding) -> None:
    """Given a padding that is not a CSS size When validated Then the document is rejected up front."""

    with pytest.raises(ValidationError):
        GadgetDocument.model_validate({"padding": padding, "tabs": [{"title": "A"}]})
