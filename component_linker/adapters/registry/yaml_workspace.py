"""
YAML workspace registry.

Loads the tracked components of a workspace from a YAML file:

    components:
      - id: utils/is-string
        root_dir: components/.dependencies/utils/is-string/v1
        placement: nested
        main_file: index.js
        dependencies:
          - target: utils/is-type
            specifier: ./is-type

Dependency edges get their target root from the target's entry, so moving
a component in the file re-targets every edge onto it.
"""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from component_linker.core.entities import Component, DependencyEdge, PlacementState

from .memory import InMemoryRegistry


class EdgeEntry(BaseModel):
    target: str
    specifier: str
    source_files: list[str] = Field(default_factory=list)
    target_file: str | None = None


class ComponentEntry(BaseModel):
    id: str
    root_dir: str | None = None
    placement: PlacementState = PlacementState.AUTHORED
    main_file: str = "index.js"
    files: list[str] = Field(default_factory=list)
    dists: dict[str, str] = Field(default_factory=dict)
    version: str | None = None
    dependencies: list[EdgeEntry] = Field(default_factory=list)


class WorkspaceFile(BaseModel):
    components: list[ComponentEntry] = Field(default_factory=list)


def _to_component(entry: ComponentEntry, roots: dict[str, str | None]) -> Component:
    return Component(
        id=entry.id,
        root_dir=entry.root_dir,
        main_file=entry.main_file,
        files=tuple(entry.files),
        dists=dict(entry.dists),
        version=entry.version,
        dependencies=tuple(
            DependencyEdge(
                source_id=entry.id,
                target_id=edge.target,
                import_specifier=edge.specifier,
                target_root_dir=roots.get(edge.target),
                source_files=tuple(edge.source_files),
                target_file=edge.target_file,
            )
            for edge in entry.dependencies
        ),
    )


def load_workspace(path: Path | str) -> InMemoryRegistry:
    """
    Load a workspace file into a registry.

    Raises:
        FileNotFoundError: If the file is missing.
        ValueError: If the YAML is invalid or does not match the schema.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Workspace file not found at: {path}")

    with open(path) as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML syntax in workspace file: {e}") from e

    try:
        workspace = WorkspaceFile.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Workspace validation failed:\n{e}") from e

    roots = {entry.id: entry.root_dir for entry in workspace.components}
    return InMemoryRegistry(
        (_to_component(entry, roots), entry.placement) for entry in workspace.components
    )
