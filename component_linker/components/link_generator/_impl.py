"""
Dependency link generation - functional core.

Computes the redirect modules that make each component's import
specifiers resolve to the real location of its dependencies.

Key behaviors:
- NESTED target: redirect content is a relative path to the target root
- IMPORTED/AUTHORED target: redirect content is the package name
- npm-style links address every target by package name
- Relative specifiers always get a redirect; bare specifiers only when
  the target is NESTED (otherwise the symlink namespace resolves them)
- Identical destinations collapse to the first computed entry
"""

from __future__ import annotations

import posixpath
from collections.abc import Iterable, Mapping

from component_linker.core.config import LinkerConfig
from component_linker.core.entities import (
    ChangeSet,
    Component,
    ComponentWithDependencies,
    DependencyEdge,
    LinkFile,
    PlacementState,
    package_name,
)
from component_linker.core.errors import ResolutionError
from component_linker.core.services.link_content import (
    extension_of,
    relative_import,
    render_link,
    split_ext,
    strip_ext,
)


def _target_file(edge: DependencyEdge, target: Component | None, config: LinkerConfig) -> str:
    if edge.target_file:
        return edge.target_file
    if target is not None:
        return target.main_dist_file()
    return f"{config.index_name}.js"


def _is_main(target_file: str, target: Component | None, config: LinkerConfig) -> bool:
    if target is not None:
        return target_file in (target.main_file, target.main_dist_file())
    return strip_ext(target_file) == config.index_name


def link_destinations(
    component: Component,
    edge: DependencyEdge,
    target_file: str,
    config: LinkerConfig,
) -> list[str]:
    """Redirect file paths for one edge, one per distinct referencing directory."""
    base = component.root_dir or ""
    ext = extension_of(target_file)

    if not edge.is_relative:
        index_file = config.index_name + ext
        return [posixpath.join(base, config.modules_dir, edge.import_specifier, index_file)]

    destinations: list[str] = []
    for source_file in edge.source_files or ("",):
        path = posixpath.normpath(
            posixpath.join(base, posixpath.dirname(source_file), edge.import_specifier)
        )
        if not split_ext(path)[1]:
            path = path + ext
        destinations.append(path)
    return list(dict.fromkeys(destinations))


def needs_redirect(edge: DependencyEdge, placement: PlacementState) -> bool:
    return placement is PlacementState.NESTED or edge.is_relative


def import_target(
    edge: DependencyEdge,
    target: Component | None,
    target_file: str,
    link_path: str,
    placement: PlacementState,
    config: LinkerConfig,
    npm_style: bool,
) -> str:
    """The string a redirect at link_path must require."""
    if npm_style or placement.is_exposed:
        name = package_name(edge.target_id, config.package_scope)
        if _is_main(target_file, target, config):
            return name
        return f"{name}/{strip_ext(target_file)}"

    assert edge.target_root_dir is not None
    destination = posixpath.join(edge.target_root_dir, strip_ext(target_file))
    return relative_import(posixpath.dirname(link_path), destination)


def compute_component_links(
    component: Component,
    known: Mapping[str, Component],
    placements: Mapping[str, PlacementState],
    config: LinkerConfig,
    npm_style: bool = False,
) -> tuple[ChangeSet, list[ResolutionError]]:
    """Redirect files for every dependency edge of one component."""
    changes = ChangeSet()
    errors: list[ResolutionError] = []

    for edge in component.dependencies:
        placement = placements.get(edge.target_id, PlacementState.NESTED)
        if not needs_redirect(edge, placement):
            continue

        if edge.target_root_dir is None and placement is not PlacementState.AUTHORED:
            errors.append(ResolutionError(component.id, edge.target_id))
            continue

        target = known.get(edge.target_id)
        target_file = _target_file(edge, target, config)

        for link_path in link_destinations(component, edge, target_file, config):
            import_path = import_target(
                edge, target, target_file, link_path, placement, config, npm_style
            )
            changes.add_file(
                LinkFile(
                    path=link_path,
                    content=render_link(config, extension_of(link_path), import_path),
                    npm_style=npm_style,
                )
            )

    return changes, errors


def compute_dependency_links(
    components_with_dependencies: Iterable[ComponentWithDependencies],
    placements: Mapping[str, PlacementState],
    config: LinkerConfig,
    npm_style: bool = False,
) -> tuple[ChangeSet, list[ResolutionError]]:
    """
    Redirect files for a batch of components and their dependencies.

    Pure: the same input always yields the same ChangeSet, in the same order.

    Returns:
        Tuple of (changes, errors). Errors hold the edges whose target root
        is unknown; every other edge is still computed.
    """
    items = list(components_with_dependencies)
    known: dict[str, Component] = {}
    for item in items:
        for component in item.all_components:
            known.setdefault(component.id, component)

    changes = ChangeSet()
    errors: list[ResolutionError] = []
    visited: set[str] = set()

    for item in items:
        for component in item.all_components:
            if component.id in visited:
                continue
            visited.add(component.id)
            component_changes, component_errors = compute_component_links(
                component, known, placements, config, npm_style
            )
            changes.extend(component_changes)
            errors.extend(component_errors)

    return changes, errors
