"""Tests for :mod:`webgadgets.dependencies`."""

from __future__ import annotations

from webgadgets import __version__
from webgadgets.dependencies import (
    STATIC_DIR,
    HtmlDependency,
    attach_dependencies,
    bootstrap_dependency,
    find_dependencies,
    gadget_dependencies,
)
from webgadgets.markup import TagList, tags


def test_local_dependency_paths_use_mount_point() -> None:
    dependency = HtmlDependency("widget", "2.0", stylesheets=("w.css",), scripts=("w.js",), src=STATIC_DIR)

    assert dependency.mount_path == "/assets/widget-2.0"
    assert dependency.stylesheet_hrefs() == ["/assets/widget-2.0/w.css"]
    assert dependency.script_srcs() == ["/assets/widget-2.0/w.js"]


def test_remote_dependency_keeps_urls() -> None:
    dependency = bootstrap_dependency()

    assert dependency.src is None
    assert dependency.stylesheet_hrefs()[0].endswith("bootstrap.min.css")
    assert [src.rsplit("/", 1)[-1] for src in dependency.script_srcs()] == ["jquery.min.js", "bootstrap.min.js"]


def test_gadget_dependencies_ship_static_files() -> None:
    (dependency,) = gadget_dependencies()

    assert dependency.version == __version__
    for filename in dependency.stylesheets + dependency.scripts:
        assert (STATIC_DIR / filename).is_file()


def test_find_dependencies_deduplicates_newest_version() -> None:
    """Given the same dependency at two versions When collected Then the newest wins in first position."""

    old = HtmlDependency("lib", "1.2")
    new = HtmlDependency("lib", "1.10")
    other = HtmlDependency("other", "1.0")
    tree = TagList(
        (
            attach_dependencies(tags.div("a"), [old]),
            attach_dependencies(tags.div(attach_dependencies("b", [other, new])), []),
        )
    )

    assert find_dependencies(tree) == [new, other]


def test_find_dependencies_on_plain_tags() -> None:
    assert find_dependencies(tags.div("nothing")) == []
    assert find_dependencies("text") == []
