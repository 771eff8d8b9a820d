"""
In-memory component registry.

Holds components and their placement in dicts. Used by tests and by
callers that already hold the resolved graph.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace

from component_linker.core.entities import Component, PlacementState


class InMemoryRegistry:
    """RegistryPort backed by dictionaries, in insertion order."""

    def __init__(
        self,
        components: Iterable[tuple[Component, PlacementState]] = (),
    ) -> None:
        self._components: dict[str, Component] = {}
        self._placements: dict[str, PlacementState] = {}
        for component, placement in components:
            self.add(component, placement)

    def add(self, component: Component, placement: PlacementState) -> Component:
        self._components[component.id] = component
        self._placements[component.id] = placement
        return component

    def move(
        self,
        component_id: str,
        root_dir: str,
        placement: PlacementState | None = None,
    ) -> Component:
        """
        Change where a component lives.

        Every edge pointing at the component is updated to the new root.
        """
        moved = replace(self._components[component_id], root_dir=root_dir)
        self._components[component_id] = moved
        if placement is not None:
            self._placements[component_id] = placement

        for other_id, other in list(self._components.items()):
            if not other.depends_on(component_id):
                continue
            edges = tuple(
                replace(edge, target_root_dir=root_dir) if edge.target_id == component_id else edge
                for edge in other.dependencies
            )
            self._components[other_id] = replace(other, dependencies=edges)
        return moved

    def get(self, component_id: str) -> Component:
        return self._components[component_id]

    # --- RegistryPort ---

    def resolve_components(self, ids: Iterable[str]) -> list[Component]:
        return [self._components[i] for i in ids if i in self._components]

    def get_placement_state(self, component_id: str) -> PlacementState:
        return self._placements.get(component_id, PlacementState.NESTED)

    def get_dependents_of(self, ids: Iterable[str]) -> list[Component]:
        wanted = set(ids)
        return [
            component
            for component in self._components.values()
            if any(edge.target_id in wanted for edge in component.dependencies)
        ]

    def tracked_ids(self) -> list[str]:
        return list(self._components)
