"""
Entry points component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from component_linker.core.entities import Component, LinkFile


@dataclass(frozen=True)
class EntryPointsInput:
    """Input for synthesizing entry points."""

    components: tuple[Component, ...]
    manifest_main_patched: bool = False


@dataclass(frozen=True)
class EntryPointsOutput:
    """Entry-point files, at most one per component."""

    files: list[LinkFile] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
