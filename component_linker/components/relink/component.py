"""
Relink component - re-link direct dependents after a placement change.

Shell Layer - queries the registry for dependents and re-runs the link
generator, the node-modules linker and the manifest dependency syntax
rewrite for each of them.

Invariants:
- I1: only direct dependents are visited (single hop)
- I2: one pass leaves no visited dependent with stale redirect content
"""

from __future__ import annotations

import logging

from component_linker.components.link_generator import compute_component_links
from component_linker.components.manifest import DependencySyntaxInput, run_get_dependency_syntax
from component_linker.components.node_modules import NodeModuleLinker
from component_linker.core.config import DEFAULT_CONFIG, LinkerConfig
from component_linker.core.entities import ChangeSet
from component_linker.core.errors import ResolutionError
from component_linker.core.ports.filesystem import FileSystemPort
from component_linker.core.ports.registry import ManifestPort, RegistryPort
from component_linker.core.services.apply import apply_changes
from component_linker.core.services.placement import placement_map

from ._impl import dependency_ids, select_dependents
from .models import RelinkInput, RelinkOutput

logger = logging.getLogger(__name__)


def run_get_relink(
    inp: RelinkInput,
    *,
    registry: RegistryPort,
    manifests: ManifestPort,
    config: LinkerConfig | None = None,
) -> RelinkOutput:
    """
    Compute the links of every direct dependent of the changed components.

    Args:
        inp: Components just written or moved.
        registry: Registry port (dependents, placements, components).
        manifests: Manifest port for the dependency syntax rewrite.
        config: Linker configuration. Uses defaults if None.

    Returns:
        RelinkOutput with one ChangeSet covering all dependents.
    """
    config = config or DEFAULT_CONFIG
    logger.debug("linker: check whether there are direct dependents for re-linking")

    changed_ids = {c.id for c in inp.changed}
    candidates = registry.get_dependents_of([c.id for c in inp.changed])
    placements = placement_map(registry, (c.id for c in candidates))
    dependents = select_dependents(candidates, changed_ids, placements)

    if not dependents:
        return RelinkOutput(changes=ChangeSet())

    logger.debug("relink: found %d component(s) to re-link", len(dependents))

    # 1) redirect files for the dependents' own edges
    resolved = {c.id: c for c in registry.resolve_components(dependency_ids(dependents))}
    link_placements = placement_map(registry, dependency_ids(dependents))
    link_changes = ChangeSet()
    errors: list[ResolutionError] = []
    for dependent in dependents:
        dependent_changes, dependent_errors = compute_component_links(
            dependent, resolved, link_placements, config
        )
        link_changes.extend(dependent_changes)
        errors.extend(dependent_errors)
    for error in errors:
        logger.warning("relink: %s", error)

    # 2) symlink namespace
    node_modules_changes = NodeModuleLinker(dependents, registry, config).get_links()

    # 3) dependency declaration syntax
    manifest_output = run_get_dependency_syntax(
        DependencySyntaxInput(dependents=tuple(dependents), changed=tuple(inp.changed)),
        registry=registry,
        manifests=manifests,
        config=config,
    )
    manifest_changes = ChangeSet()
    for link_file in manifest_output.files:
        manifest_changes.add_file(link_file)

    visited = changed_ids | {d.id for d in dependents}
    unvisited = [
        c.id for c in registry.get_dependents_of([d.id for d in dependents]) if c.id not in visited
    ]
    if unvisited:
        logger.debug(
            "relink: indirect dependents not re-linked: %s", ", ".join(dict.fromkeys(unvisited))
        )

    return RelinkOutput(
        changes=ChangeSet.merge(link_changes, node_modules_changes, manifest_changes),
        dependents=[d.id for d in dependents],
        unvisited=list(dict.fromkeys(unvisited)),
        errors=errors,
        success=not errors,
    )


def run_relink(
    inp: RelinkInput,
    *,
    registry: RegistryPort,
    manifests: ManifestPort,
    fs: FileSystemPort,
    config: LinkerConfig | None = None,
) -> RelinkOutput:
    """
    Re-link direct dependents and write the result.

    Links of resolvable edges are written even when other edges fail;
    the failures are reported in the output.
    """
    config = config or DEFAULT_CONFIG
    output = run_get_relink(inp, registry=registry, manifests=manifests, config=config)
    if not output.changes.is_empty():
        apply_changes(output.changes, fs, max_workers=config.max_workers)
    return output
