"""
Tests for the linking entities.

LinkFile validation, ChangeSet de-duplication and package naming.
"""

from __future__ import annotations

import pytest

from component_linker.core.entities import (
    ChangeSet,
    Component,
    ComponentWithDependencies,
    DependencyEdge,
    LinkFile,
    PlacementState,
    Symlink,
    package_name,
)


class TestLinkFile:
    """Tests for LinkFile."""

    def test_content_file(self) -> None:
        link_file = LinkFile(path="a/index.js", content="x")
        assert not link_file.is_symlink

    def test_symlink_file(self) -> None:
        link_file = LinkFile(path="a/b", symlink_target="c/d")
        assert link_file.is_symlink

    def test_both_set_rejected(self) -> None:
        with pytest.raises(ValueError, match="exactly one"):
            LinkFile(path="a/index.js", content="x", symlink_target="c")

    def test_neither_set_rejected(self) -> None:
        with pytest.raises(ValueError, match="exactly one"):
            LinkFile(path="a/index.js")

    def test_empty_path_rejected(self) -> None:
        with pytest.raises(ValueError):
            LinkFile(path=" ", content="x")

    def test_path_normalized(self) -> None:
        assert LinkFile(path="a/./b/../index.js", content="x").path == "a/index.js"


class TestChangeSet:
    """Tests for ChangeSet."""

    def test_first_entry_wins(self) -> None:
        changes = ChangeSet()
        changes.add_file(LinkFile(path="a.js", content="first"))
        changes.add_file(LinkFile(path="a.js", content="second"))
        assert [f.content for f in changes.files] == ["first"]

    def test_replace(self) -> None:
        changes = ChangeSet()
        changes.add_file(LinkFile(path="a.js", content="first"))
        changes.add_file(LinkFile(path="b.js", content="other"))
        changes.add_file(LinkFile(path="a.js", content="second"), replace=True)
        assert [(f.path, f.content) for f in changes.files] == [
            ("a.js", "second"),
            ("b.js", "other"),
        ]

    def test_symlink_last_target_wins(self) -> None:
        changes = ChangeSet()
        changes.add_symlink(Symlink(source="old", dest="node_modules/x"))
        changes.add_symlink(Symlink(source="new", dest="node_modules/x"))
        assert changes.symlinks == [Symlink(source="new", dest="node_modules/x")]

    def test_merge_keeps_order(self) -> None:
        first = ChangeSet(files=[LinkFile(path="a.js", content="1")])
        second = ChangeSet(
            files=[LinkFile(path="b.js", content="2")],
            symlinks=[Symlink(source="s", dest="d")],
        )
        assert ChangeSet.merge(first, second).paths() == ["a.js", "b.js", "d"]

    def test_is_empty(self) -> None:
        assert ChangeSet().is_empty()
        assert not ChangeSet(symlinks=[Symlink(source="s", dest="d")]).is_empty()


class TestComponent:
    """Tests for Component and DependencyEdge."""

    def test_main_dist_file(self) -> None:
        component = Component(
            id="a/b", root_dir="x", main_file="index.ts", dists={"index.ts": "dist/index.js"}
        )
        assert component.main_dist_file() == "dist/index.js"
        assert Component(id="a/b", root_dir="x", main_file="index.ts").main_dist_file() == (
            "index.ts"
        )

    @pytest.mark.parametrize(
        "specifier,expected",
        [
            ("./is-string", True),
            ("../utils/is-string", True),
            ("..", True),
            ("@org/utils.is-string", False),
            ("lodash", False),
        ],
    )
    def test_is_relative(self, specifier: str, expected: bool) -> None:
        edge = DependencyEdge(source_id="a", target_id="b", import_specifier=specifier)
        assert edge.is_relative is expected

    def test_all_components(self) -> None:
        a = Component(id="a", root_dir="a", main_file="index.js")
        b = Component(id="b", root_dir="b", main_file="index.js")
        assert ComponentWithDependencies(component=a, dependencies=(b,)).all_components == (a, b)

    def test_placement_exposed(self) -> None:
        assert PlacementState.AUTHORED.is_exposed
        assert PlacementState.IMPORTED.is_exposed
        assert not PlacementState.NESTED.is_exposed


def test_package_name() -> None:
    assert package_name("utils/is-string", "@org") == "@org/utils.is-string"
    assert package_name("utils/is-string", "@org/") == "@org/utils.is-string"
    assert package_name("button", "") == "button"
