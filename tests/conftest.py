"""
Shared fixtures.

The two-component workspace used throughout: utils/to-string (IMPORTED)
requires "./is-string", which points at utils/is-string, a NESTED
dependency stored under components/.dependencies.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from component_linker.adapters.fs import MemoryFileSystemAdapter
from component_linker.adapters.registry import InMemoryRegistry
from component_linker.core.config import LinkerConfig
from component_linker.core.entities import Component, DependencyEdge, PlacementState

PROJECT_ROOT = Path(__file__).parent.parent

NESTED_ROOT = "components/.dependencies/utils/is-string/v1"
IMPORTED_ROOT = "components/utils/is-string"
DEPENDENT_ROOT = "components/utils/to-string"
IS_TYPE_ROOT = "components/.dependencies/utils/is-type/v2"


@pytest.fixture
def config() -> LinkerConfig:
    return LinkerConfig(package_scope="@org")


@pytest.fixture
def is_string() -> Component:
    return Component(id="utils/is-string", root_dir=NESTED_ROOT, main_file="index.js")


@pytest.fixture
def to_string() -> Component:
    return Component(
        id="utils/to-string",
        root_dir=DEPENDENT_ROOT,
        main_file="index.js",
        dependencies=(
            DependencyEdge(
                source_id="utils/to-string",
                target_id="utils/is-string",
                import_specifier="./is-string",
                target_root_dir=NESTED_ROOT,
            ),
        ),
    )


@pytest.fixture
def registry(is_string: Component, to_string: Component) -> InMemoryRegistry:
    return InMemoryRegistry(
        [
            (is_string, PlacementState.NESTED),
            (to_string, PlacementState.IMPORTED),
        ]
    )


@pytest.fixture
def memory_fs() -> MemoryFileSystemAdapter:
    return MemoryFileSystemAdapter()


def build_chain_registry() -> InMemoryRegistry:
    """
    Three levels: app/main -> utils/to-string -> utils/is-string, plus an authored button.

    utils/to-string reaches its NESTED dependencies both ways: utils/is-string
    through a relative specifier, utils/is-type through its package name.
    """
    return InMemoryRegistry(
        [
            (
                Component(id="utils/is-string", root_dir=NESTED_ROOT, main_file="index.js"),
                PlacementState.NESTED,
            ),
            (
                Component(id="utils/is-type", root_dir=IS_TYPE_ROOT, main_file="index.js"),
                PlacementState.NESTED,
            ),
            (
                Component(
                    id="utils/to-string",
                    root_dir=DEPENDENT_ROOT,
                    main_file="to-string.ts",
                    dists={"to-string.ts": "dist/to-string.js"},
                    dependencies=(
                        DependencyEdge(
                            source_id="utils/to-string",
                            target_id="utils/is-string",
                            import_specifier="./is-string",
                            target_root_dir=NESTED_ROOT,
                            source_files=("to-string.ts", "lib/format.ts"),
                        ),
                        DependencyEdge(
                            source_id="utils/to-string",
                            target_id="utils/is-type",
                            import_specifier="@org/utils.is-type",
                            target_root_dir=IS_TYPE_ROOT,
                            source_files=("to-string.ts",),
                        ),
                    ),
                ),
                PlacementState.IMPORTED,
            ),
            (
                Component(
                    id="app/main",
                    root_dir="components/app/main",
                    main_file="main.js",
                    dependencies=(
                        DependencyEdge(
                            source_id="app/main",
                            target_id="utils/to-string",
                            import_specifier="@org/utils.to-string",
                            target_root_dir=DEPENDENT_ROOT,
                        ),
                    ),
                ),
                PlacementState.AUTHORED,
            ),
            (
                Component(
                    id="ui/button",
                    root_dir=None,
                    main_file="src/button.js",
                    files=("src/button.js",),
                ),
                PlacementState.AUTHORED,
            ),
        ]
    )
