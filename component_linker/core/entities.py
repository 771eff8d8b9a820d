"""
Domain entities for component linking.

These entities describe one linking pass:
- Component / DependencyEdge: the resolved dependency graph (input)
- PlacementState: where a component lives in the workspace (input)
- LinkFile / Symlink / ChangeSet: the artifacts a pass produces (output)

All paths are project-relative POSIX strings. Entities are ephemeral and
recomputed from the registry on every invocation.

Invariants:
- I1: a LinkFile carries exactly one of content or symlink_target
- I2: a ChangeSet never holds two entries for the same destination
"""

from __future__ import annotations

import posixpath
from dataclasses import dataclass, field
from enum import Enum

# --- Placement ---


class PlacementState(str, Enum):
    """Placement of a component in the workspace."""

    AUTHORED = "authored"
    IMPORTED = "imported"
    NESTED = "nested"

    @property
    def is_exposed(self) -> bool:
        """Authored and imported components are addressed by package name."""
        return self is not PlacementState.NESTED


# --- Dependency Graph ---


@dataclass(frozen=True)
class DependencyEdge:
    """
    One dependency of a component, as referenced from its source.

    source_files lists the dependent's files (relative to its root) that use
    import_specifier. Empty means the specifier is resolved from the root.
    target_file is the file inside the target the specifier points at; when
    None the target's main file is used.
    """

    source_id: str
    target_id: str
    import_specifier: str
    target_root_dir: str | None = None
    source_files: tuple[str, ...] = ()
    target_file: str | None = None

    @property
    def is_relative(self) -> bool:
        return self.import_specifier.startswith(("./", "../")) or self.import_specifier in (
            ".",
            "..",
        )


@dataclass(frozen=True)
class Component:
    """
    A versioned, independently stored unit of source code.

    root_dir is None for authored components whose files are spread across
    the workspace.
    """

    id: str
    root_dir: str | None
    main_file: str
    files: tuple[str, ...] = ()
    dists: dict[str, str] = field(default_factory=dict)
    dependencies: tuple[DependencyEdge, ...] = ()
    version: str | None = None

    def __hash__(self) -> int:
        return hash(self.id)

    def main_dist_file(self) -> str:
        """Compiled main file if a build output exists, else the source main file."""
        return self.dists.get(self.main_file, self.main_file)

    def depends_on(self, component_id: str) -> bool:
        return any(edge.target_id == component_id for edge in self.dependencies)


@dataclass(frozen=True)
class ComponentWithDependencies:
    """A component together with the components it depends on."""

    component: Component
    dependencies: tuple[Component, ...] = ()

    @property
    def all_components(self) -> tuple[Component, ...]:
        return (self.component, *self.dependencies)


# --- Link Artifacts ---


@dataclass(frozen=True)
class LinkFile:
    """
    Immutable description of one generated file.

    Either content (a redirect or entry-point module, or a manifest) or a
    symlink_target is set, never both.
    """

    path: str
    content: str | None = None
    symlink_target: str | None = None
    npm_style: bool = False

    def __post_init__(self) -> None:
        if not self.path or not self.path.strip():
            raise ValueError("LinkFile path is required")
        if (self.content is None) == (self.symlink_target is None):
            raise ValueError(
                f"LinkFile {self.path} must have exactly one of content or symlink_target"
            )
        object.__setattr__(self, "path", posixpath.normpath(self.path))

    @property
    def is_symlink(self) -> bool:
        return self.symlink_target is not None


@dataclass(frozen=True)
class Symlink:
    """Symlink entry: dest is the link path, source is what it points to."""

    source: str
    dest: str
    component_id: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "source", posixpath.normpath(self.source))
        object.__setattr__(self, "dest", posixpath.normpath(self.dest))


@dataclass
class ChangeSet:
    """
    Deferred representation of a linking pass.

    Files and symlinks keep insertion order. Adding an entry whose destination
    is already present keeps the existing entry unless replace=True.
    """

    files: list[LinkFile] = field(default_factory=list)
    symlinks: list[Symlink] = field(default_factory=list)

    def add_file(self, link_file: LinkFile, *, replace: bool = False) -> None:
        for i, existing in enumerate(self.files):
            if existing.path == link_file.path:
                if replace:
                    self.files[i] = link_file
                return
        self.files.append(link_file)

    def add_symlink(self, symlink: Symlink, *, replace: bool = True) -> None:
        for i, existing in enumerate(self.symlinks):
            if existing.dest == symlink.dest:
                if replace:
                    self.symlinks[i] = symlink
                return
        self.symlinks.append(symlink)

    def extend(self, other: ChangeSet, *, replace: bool = False) -> ChangeSet:
        """Append another ChangeSet in order. Returns self."""
        for link_file in other.files:
            self.add_file(link_file, replace=replace)
        for symlink in other.symlinks:
            self.add_symlink(symlink)
        return self

    @classmethod
    def merge(cls, *parts: ChangeSet) -> ChangeSet:
        merged = cls()
        for part in parts:
            merged.extend(part)
        return merged

    def is_empty(self) -> bool:
        return not self.files and not self.symlinks

    def paths(self) -> list[str]:
        return [f.path for f in self.files] + [s.dest for s in self.symlinks]


def package_name(component_id: str, package_scope: str) -> str:
    """
    Package identity of a component in the symlink namespace.

    "utils/is-string" with scope "@org" -> "@org/utils.is-string"
    """
    name = component_id.strip("/").replace("/", ".")
    if not package_scope:
        return name
    return f"{package_scope.rstrip('/')}/{name}"
