"""Full HTML document rendering for gadget pages."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Tuple

from jinja2 import Environment, FileSystemLoader, select_autoescape

from .dependencies import find_dependencies
from .markup import Markup, Node, Tag, TagList, render
from .tracing import trace

_LOGGER = logging.getLogger("webgadgets.page")
_TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"

_ENV = Environment(
    loader=FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=select_autoescape(["html", "xml", "html.jinja"]),
    trim_blocks=True,
    lstrip_blocks=True,
)


def _split_head(node: Node) -> Tuple[Optional[Node], List[Node]]:
    """Separate ``<head>`` fragments found anywhere in ``node`` from the body."""

    if isinstance(node, Tag):
        if node.name == "head":
            return None, list(node.children)
        head: List[Node] = []
        children: List[Node] = []
        for child in node.children:
            body_child, child_head = _split_head(child)
            head.extend(child_head)
            if body_child is not None:
                children.append(body_child)
        return Tag(node.name, node.attrs, tuple(children)), head
    if isinstance(node, TagList):
        head = []
        children = []
        for child in node.children:
            body_child, child_head = _split_head(child)
            head.extend(child_head)
            if body_child is not None:
                children.append(body_child)
        return TagList(tuple(children), node.dependencies), head
    return node, []


def _extract_title(head: List[Node]) -> Tuple[Optional[str], List[Node]]:
    title: Optional[str] = None
    remaining: List[Node] = []
    for item in head:
        if isinstance(item, Tag) and item.name == "title":
            title = "".join(str(child) for child in item.children)
        else:
            remaining.append(item)
    return title, remaining


def render_page(ui: Node, *, title: Optional[str] = None, lang: str = "en") -> str:
    """Render ``ui`` as a complete HTML document.

    ``<head>`` fragments are hoisted out of the body, and every attached
    dependency contributes its stylesheets and scripts exactly once.
    """

    with trace("page.render", logger=_LOGGER):
        body, head = _split_head(ui)
        head_title, head = _extract_title(head)
        dependencies = find_dependencies(ui)

        stylesheets: List[str] = []
        scripts: List[str] = []
        for dependency in dependencies:
            stylesheets.extend(dependency.stylesheet_hrefs())
            scripts.extend(dependency.script_srcs())

        template = _ENV.get_template("page.html.jinja")
        return template.render(
            lang=lang,
            title=title or head_title,
            stylesheets=stylesheets,
            scripts=scripts,
            head=Markup("\n  ".join(str(render(item)) for item in head)),
            body=render(body) if body is not None else Markup(""),
        )


__all__ = ["render_page"]
