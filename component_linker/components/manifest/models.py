"""
Manifest component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from component_linker.core.entities import Component, LinkFile


@dataclass(frozen=True)
class PatchMainInput:
    """
    Input for patching a manifest's "main" field.

    new_main defaults to the component's compiled main file.
    """

    component: Component
    new_main: str | None = None


@dataclass(frozen=True)
class DependencySyntaxInput:
    """Input for rewriting dependents' dependency declarations."""

    dependents: tuple[Component, ...]
    changed: tuple[Component, ...]


@dataclass(frozen=True)
class ManifestFilesOutput:
    """Rewritten manifests, scheduled for write."""

    files: list[LinkFile] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
