"""
Relink component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from component_linker.core.entities import ChangeSet, Component
from component_linker.core.errors import ResolutionError


@dataclass(frozen=True)
class RelinkInput:
    """Components just written or moved."""

    changed: tuple[Component, ...]


@dataclass(frozen=True)
class RelinkOutput:
    """
    Result of re-linking direct dependents.

    unvisited lists indirect dependents that propagation does not reach.
    """

    changes: ChangeSet
    dependents: list[str] = field(default_factory=list)
    unvisited: list[str] = field(default_factory=list)
    errors: list[ResolutionError] = field(default_factory=list)
    success: bool = True
