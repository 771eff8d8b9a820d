"""Placement lookups against the registry snapshot."""

from __future__ import annotations

from collections.abc import Iterable

from component_linker.core.entities import ComponentWithDependencies, PlacementState
from component_linker.core.ports.registry import RegistryPort


def placement_map(registry: RegistryPort, ids: Iterable[str]) -> dict[str, PlacementState]:
    """Placement of every id, queried once per id."""
    placements: dict[str, PlacementState] = {}
    for component_id in ids:
        if component_id not in placements:
            placements[component_id] = registry.get_placement_state(component_id)
    return placements


def referenced_ids(components_with_dependencies: Iterable[ComponentWithDependencies]) -> list[str]:
    """Ids of every component and dependency target mentioned by the batch, in order."""
    ids: list[str] = []
    for item in components_with_dependencies:
        for component in item.all_components:
            ids.append(component.id)
            ids.extend(edge.target_id for edge in component.dependencies)
    return list(dict.fromkeys(ids))
