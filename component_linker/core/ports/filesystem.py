"""
Filesystem interface used to apply link artifacts.

Paths are project-relative POSIX strings. Implementations resolve them
against their own project root.
"""

from __future__ import annotations

from typing import Protocol


class FileSystemPort(Protocol):
    """Writes generated files and symlinks."""

    def write_file(self, path: str, content: str) -> bool:
        """
        Write content to path, creating parent directories.

        Refuses (ValueError) a path whose parent directory is a symlink.

        Returns:
            True if written, False if the file already held content.
        """
        ...

    def create_symlink(self, source: str, dest: str) -> bool:
        """
        Point dest at source, replacing a stale entry.

        Returns:
            True if created or replaced, False if dest already pointed at source.
        """
        ...

    def read_text(self, path: str) -> str | None:
        """File content, or None if path does not exist."""
        ...

    def read_link(self, path: str) -> str | None:
        """Project-relative symlink target, or None if path is not a symlink."""
        ...
