"""
Re-link propagation - functional core.

Needed when a component changes placement after its dependents were
linked:
1) a dependency is imported directly (NESTED -> IMPORTED)
2) a dependency is moved to another directory
In both cases the links from the dependents to the dependency are stale.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from component_linker.core.entities import Component, PlacementState


def select_dependents(
    candidates: Iterable[Component],
    changed_ids: set[str],
    placements: Mapping[str, PlacementState],
) -> list[Component]:
    """
    Authored and imported components with a direct edge onto a changed id.

    Order of first appearance is kept; duplicates are dropped.
    """
    selected: dict[str, Component] = {}
    for candidate in candidates:
        if candidate.id in selected:
            continue
        placement = placements.get(candidate.id, PlacementState.NESTED)
        if not placement.is_exposed:
            continue
        if any(candidate.depends_on(changed_id) for changed_id in changed_ids):
            selected[candidate.id] = candidate
    return list(selected.values())


def dependency_ids(components: Iterable[Component]) -> list[str]:
    ids: list[str] = []
    for component in components:
        ids.extend(edge.target_id for edge in component.dependencies)
    return list(dict.fromkeys(ids))
