"""
Component registry interfaces.

The registry tracks which components exist, where each one lives and how
it was placed. The linker only reads from it, except for manifests which
are read and written through ManifestPort.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

from component_linker.core.entities import Component, PlacementState


class RegistryPort(Protocol):
    """
    Read-only snapshot of the component registry.

    Invariants:
    - I1: resolve_components returns components with dependency edges attached
    - I2: get_dependents_of returns direct dependents only
    """

    def resolve_components(self, ids: Iterable[str]) -> list[Component]:
        """Load components by id, preserving the requested order."""
        ...

    def get_placement_state(self, component_id: str) -> PlacementState:
        """Placement of a component."""
        ...

    def get_dependents_of(self, ids: Iterable[str]) -> list[Component]:
        """Components declaring a direct dependency edge onto any of ids."""
        ...

    def tracked_ids(self) -> list[str]:
        """Ids of every component currently tracked in the workspace."""
        ...


class ManifestPort(Protocol):
    """Access to the package manifest materialized at a component root."""

    def manifest_path(self, root_dir: str) -> str:
        """Project-relative path of the manifest for root_dir."""
        ...

    def read_manifest(self, root_dir: str) -> str | None:
        """Raw manifest content, or None if no manifest is materialized."""
        ...

    def write_manifest(self, root_dir: str, content: str) -> None:
        """Replace the manifest at root_dir."""
        ...
