"""
ChangeSet applier - the thin I/O adapter behind every eager operation.

Each call is one barrier: all operations of the batch are submitted to a
bounded worker pool and joined before returning. Destinations within a
batch are disjoint, so operations may run in any order.

Key behaviors:
- Files are written before symlinks (a symlink may live inside a
  directory created by a file write)
- The first failure cancels pending operations and is re-raised as
  LinkWriteError with the offending path
- No retries, no rollback of operations that already completed
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from concurrent.futures import FIRST_EXCEPTION, Future, ThreadPoolExecutor, wait
from dataclasses import dataclass, field

from component_linker.core.entities import ChangeSet, LinkFile, Symlink
from component_linker.core.errors import LinkWriteError
from component_linker.core.ports.filesystem import FileSystemPort

logger = logging.getLogger(__name__)


@dataclass
class ApplyResult:
    """Outcome of applying a ChangeSet."""

    written: list[str] = field(default_factory=list)
    unchanged: list[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.written) + len(self.unchanged)


def _write_file(fs: FileSystemPort, link_file: LinkFile) -> bool:
    if link_file.is_symlink:
        assert link_file.symlink_target is not None
        return fs.create_symlink(link_file.symlink_target, link_file.path)
    assert link_file.content is not None
    return fs.write_file(link_file.path, link_file.content)


def _create_symlink(fs: FileSystemPort, symlink: Symlink) -> bool:
    return fs.create_symlink(symlink.source, symlink.dest)


def _run_batch(
    operations: list[tuple[str, Callable[[], bool]]],
    max_workers: int,
    result: ApplyResult,
) -> None:
    if not operations:
        return

    with ThreadPoolExecutor(max_workers=max(1, max_workers)) as pool:
        futures: dict[Future[bool], str] = {pool.submit(op): path for path, op in operations}
        done, pending = wait(futures, return_when=FIRST_EXCEPTION)

        for future in pending:
            future.cancel()

        for future, path in futures.items():
            if future not in done or future.cancelled():
                continue
            error = future.exception()
            if error is not None:
                raise LinkWriteError(path, error) from error

        # Order results by submission so reports are deterministic
        for future, path in futures.items():
            if future in done and not future.cancelled():
                if future.result():
                    result.written.append(path)
                else:
                    result.unchanged.append(path)


def apply_changes(
    changes: ChangeSet,
    fs: FileSystemPort,
    *,
    max_workers: int = 8,
) -> ApplyResult:
    """
    Apply a ChangeSet to the filesystem.

    Args:
        changes: Files and symlinks to materialize
        fs: Filesystem port
        max_workers: Upper bound on concurrent operations

    Returns:
        ApplyResult listing written and unchanged destinations

    Raises:
        LinkWriteError: If any operation fails
    """
    result = ApplyResult()

    file_ops = [
        (link_file.path, lambda lf=link_file: _write_file(fs, lf)) for link_file in changes.files
    ]
    _run_batch(file_ops, max_workers, result)

    symlink_ops = [
        (symlink.dest, lambda s=symlink: _create_symlink(fs, s)) for symlink in changes.symlinks
    ]
    _run_batch(symlink_ops, max_workers, result)

    logger.info(
        "Applied %d link(s): %d written, %d unchanged",
        result.total,
        len(result.written),
        len(result.unchanged),
    )
    return result
