"""
Link generator component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from component_linker.core.entities import ChangeSet, ComponentWithDependencies
from component_linker.core.errors import ResolutionError


@dataclass(frozen=True)
class GenerateLinksInput:
    """Input for generating dependency redirect links."""

    components_with_dependencies: tuple[ComponentWithDependencies, ...]
    npm_style: bool = False


@dataclass(frozen=True)
class GenerateLinksOutput:
    """Output of a link generation pass."""

    changes: ChangeSet
    errors: list[ResolutionError] = field(default_factory=list)
    success: bool = True
