"""
Linker component - one complete linking pass.

Steps, strictly sequential (each step is one batch, joined before the next):
1) write link files connecting components to their dependencies
2) write entry-point files for written dependencies
3) write entry-point files for written components, unless their manifest
   is written with "main" (then the manifest is the entry point)
4) create symlink namespace entries for every touched component
5) re-link dependents of components whose placement changed

link_components applies each step as it goes; get_all_components_links
accumulates the same steps into one ChangeSet. Both run _run_pipeline, so
they cannot diverge.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from component_linker.components.entry_points import compute_entry_point
from component_linker.components.link_generator import compute_dependency_links
from component_linker.components.manifest import PatchMainInput, run_get_main_patch
from component_linker.components.node_modules import NodeModuleLinker
from component_linker.components.relink import RelinkInput, run_get_relink
from component_linker.core.config import DEFAULT_CONFIG, LinkerConfig
from component_linker.core.entities import (
    ChangeSet,
    Component,
    ComponentWithDependencies,
    PlacementState,
)
from component_linker.core.errors import LinkBatchError, ResolutionError
from component_linker.core.ports.filesystem import FileSystemPort
from component_linker.core.ports.registry import ManifestPort, RegistryPort
from component_linker.core.services.apply import apply_changes
from component_linker.core.services.placement import placement_map, referenced_ids

from .models import LinkRequest

logger = logging.getLogger(__name__)

StepSink = Callable[[str, ChangeSet], None]


def _run_pipeline(
    request: LinkRequest,
    registry: RegistryPort,
    manifests: ManifestPort,
    config: LinkerConfig,
    sink: StepSink,
) -> list[ResolutionError]:
    errors: list[ResolutionError] = []

    # 1) dependency links
    placements = placement_map(registry, referenced_ids(request.components_with_dependencies))
    link_changes, link_errors = compute_dependency_links(
        request.components_with_dependencies,
        placements,
        config,
        request.create_npm_link_files,
    )
    errors.extend(link_errors)
    sink("dependency-links", link_changes)

    # 2) entry points of written dependencies
    dependency_entries = ChangeSet()
    for component in request.written_dependencies or []:
        skip = (
            request.write_package_json
            and registry.get_placement_state(component.id) is PlacementState.IMPORTED
        )
        for link_file in compute_entry_point(component, config, skip=skip):
            dependency_entries.add_file(link_file)
    sink("dependency-entry-points", dependency_entries)

    # 3) entry points of written components
    component_entries = ChangeSet()
    for component in request.written_components:
        for link_file in compute_entry_point(
            component, config, skip=request.write_package_json
        ):
            component_entries.add_file(link_file)
    sink("entry-points", component_entries)

    # 4) symlink namespace
    sink("node-modules", NodeModuleLinker(request.all_components, registry, config).get_links())

    # 5) dependents
    relink = run_get_relink(
        RelinkInput(changed=tuple(request.written_components)),
        registry=registry,
        manifests=manifests,
        config=config,
    )
    errors.extend(relink.errors)
    sink("relink", relink.changes)

    return errors


def link_components(
    request: LinkRequest,
    *,
    registry: RegistryPort,
    manifests: ManifestPort,
    fs: FileSystemPort,
    config: LinkerConfig | None = None,
) -> list[Component]:
    """
    Link the components after import and write everything.

    Returns:
        Every touched component: written components, then written dependencies.

    Raises:
        LinkBatchError: If some dependency edges could not be resolved. All
            other links were written.
        LinkWriteError: If a filesystem operation failed. Earlier steps stay
            written.
    """
    config = config or DEFAULT_CONFIG
    written = ChangeSet()

    def apply_step(step: str, changes: ChangeSet) -> None:
        logger.debug("linker: %s (%d entries)", step, len(changes.paths()))
        if not changes.is_empty():
            apply_changes(changes, fs, max_workers=config.max_workers)
        written.extend(changes, replace=True)

    errors = _run_pipeline(request, registry, manifests, config, apply_step)
    if errors:
        raise LinkBatchError(errors, written)
    return request.all_components


def get_all_components_links(
    request: LinkRequest,
    *,
    registry: RegistryPort,
    manifests: ManifestPort,
    config: LinkerConfig | None = None,
) -> ChangeSet:
    """
    Compute every file and symlink link_components would write.

    A destination produced by more than one step holds the later step's
    entry, matching what the eager variant leaves on disk.

    Raises:
        LinkBatchError: If some dependency edges could not be resolved; the
            ChangeSet of the resolved edges is attached as partial.
    """
    config = config or DEFAULT_CONFIG
    changes = ChangeSet()

    def collect_step(step: str, step_changes: ChangeSet) -> None:
        logger.debug("linker: %s (%d entries)", step, len(step_changes.paths()))
        changes.extend(step_changes, replace=True)

    errors = _run_pipeline(request, registry, manifests, config, collect_step)
    if errors:
        raise LinkBatchError(errors, changes)
    return changes


# --- Build output ---


def get_links_in_dist(
    component: Component,
    *,
    registry: RegistryPort,
    manifests: ManifestPort,
    config: LinkerConfig | None = None,
) -> ChangeSet:
    """
    Links for an imported component after its build output was written.

    Dependency links, the manifest "main" pointing at the compiled main file
    and the symlink namespace entries. No entry-point file is generated
    because the manifest carries "main".

    Raises:
        ManifestNotFoundError: If the component is not imported or has no manifest.
        LinkBatchError: If some dependency edges could not be resolved.
    """
    config = config or DEFAULT_CONFIG
    dependencies = registry.resolve_components(
        list(dict.fromkeys(edge.target_id for edge in component.dependencies))
    )
    with_dependencies = [
        ComponentWithDependencies(component=component, dependencies=tuple(dependencies))
    ]

    placements = placement_map(registry, referenced_ids(with_dependencies))
    link_changes, errors = compute_dependency_links(with_dependencies, placements, config)

    main_patch = run_get_main_patch(
        PatchMainInput(component=component), registry=registry, manifests=manifests, config=config
    )

    changes = ChangeSet()
    changes.extend(link_changes)
    changes.add_file(main_patch, replace=True)
    changes.extend(NodeModuleLinker([component], registry, config).get_links(), replace=True)

    if errors:
        raise LinkBatchError(errors, changes)
    return changes


def link_in_dist(
    component: Component,
    *,
    registry: RegistryPort,
    manifests: ManifestPort,
    fs: FileSystemPort,
    config: LinkerConfig | None = None,
) -> ChangeSet:
    """
    Write the links computed by get_links_in_dist.

    Links of resolvable edges are written before LinkBatchError is re-raised.
    """
    config = config or DEFAULT_CONFIG
    try:
        changes = get_links_in_dist(
            component, registry=registry, manifests=manifests, config=config
        )
    except LinkBatchError as e:
        apply_changes(e.partial, fs, max_workers=config.max_workers)
        raise
    apply_changes(changes, fs, max_workers=config.max_workers)
    return changes
