"""
Linker error taxonomy.

Errors are raised where detected and propagated to the caller.
Nothing here is retried, and nothing already written is rolled back.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from component_linker.core.entities import ChangeSet


class LinkerError(Exception):
    """Base class for linker errors."""


class ResolutionError(LinkerError):
    """Raised when a dependency's root directory is unknown at generation time."""

    def __init__(self, component_id: str, target_id: str) -> None:
        self.component_id = component_id
        self.target_id = target_id
        super().__init__(
            f"Unable to resolve dependency {target_id} of {component_id}: root directory unknown"
        )


class ManifestNotFoundError(LinkerError):
    """Raised when a manifest operation targets a component without a materialized manifest."""

    def __init__(self, path: str, reason: str | None = None) -> None:
        self.path = path
        self.reason = reason
        message = f"Manifest not found: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class ManifestMalformedError(LinkerError):
    """Raised when a manifest cannot be parsed as a JSON object."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Malformed manifest {path}: {reason}")


class NothingToLinkError(LinkerError):
    """Raised when a whole-workspace relink finds no tracked components."""

    def __init__(self) -> None:
        super().__init__("nothing to link")


class LinkWriteError(LinkerError):
    """Raised when a filesystem operation of a batch fails."""

    def __init__(self, path: str, cause: BaseException) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Failed writing {path}: {cause}")


class LinkBatchError(LinkerError):
    """
    Raised after a batch was computed but some edges failed to resolve.

    partial holds the ChangeSet computed for the edges that did resolve.
    """

    def __init__(self, errors: list[ResolutionError], partial: ChangeSet) -> None:
        self.errors = errors
        self.partial = partial
        details = "; ".join(str(e) for e in errors)
        super().__init__(f"{len(errors)} dependency link(s) failed: {details}")
