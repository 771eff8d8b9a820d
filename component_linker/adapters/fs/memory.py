"""
In-memory filesystem adapter.

Implements FileSystemPort and ManifestPort over dictionaries. Used for
tests and for previewing a ChangeSet without touching the disk.
"""

from __future__ import annotations

import posixpath
import threading


class MemoryFileSystemAdapter:
    """Files and symlinks held in dicts keyed by project-relative path."""

    def __init__(self, manifest_name: str = "package.json") -> None:
        self.manifest_name = manifest_name
        self.files: dict[str, str] = {}
        self.symlinks: dict[str, str] = {}
        self.writes: list[str] = []
        self._lock = threading.Lock()

    def _symlinked_parent(self, path: str) -> str | None:
        parent = posixpath.dirname(path)
        while parent:
            if parent in self.symlinks:
                return parent
            parent = posixpath.dirname(parent)
        return None

    def write_file(self, path: str, content: str) -> bool:
        path = posixpath.normpath(path)
        with self._lock:
            linked = self._symlinked_parent(path)
            if linked is not None:
                raise ValueError(f"Refusing to write {path} through symlinked directory {linked}")
            if self.files.get(path) == content:
                return False
            self.files[path] = content
            self.writes.append(path)
        return True

    def create_symlink(self, source: str, dest: str) -> bool:
        source = posixpath.normpath(source)
        dest = posixpath.normpath(dest)
        with self._lock:
            if any(path.startswith(dest + "/") for path in self.files):
                raise IsADirectoryError(f"Cannot replace directory with symlink: {dest}")
            if self.symlinks.get(dest) == source:
                return False
            self.symlinks[dest] = source
            self.writes.append(dest)
        return True

    def read_text(self, path: str) -> str | None:
        return self.files.get(posixpath.normpath(path))

    def read_link(self, path: str) -> str | None:
        return self.symlinks.get(posixpath.normpath(path))

    # --- ManifestPort ---

    def manifest_path(self, root_dir: str) -> str:
        return posixpath.join(root_dir, self.manifest_name)

    def read_manifest(self, root_dir: str) -> str | None:
        return self.read_text(self.manifest_path(root_dir))

    def write_manifest(self, root_dir: str, content: str) -> None:
        self.write_file(self.manifest_path(root_dir), content)
