"""
Local filesystem adapter.

Implements FileSystemPort and ManifestPort against a project root.
Project-relative paths are resolved under the root; anything escaping it
is rejected. Symlinks are created relative to their own directory so the
workspace can be moved.
"""

from __future__ import annotations

import logging
import os
import posixpath
from pathlib import Path

logger = logging.getLogger(__name__)


class LocalFileSystemAdapter:
    """Filesystem and manifest access rooted at a project directory."""

    def __init__(self, project_root: str | Path, manifest_name: str = "package.json") -> None:
        self.project_root = Path(project_root).resolve()
        self.manifest_name = manifest_name

    def _safe_path(self, path: str) -> Path:
        # Prevent traversal; do not resolve the final component, it may be a symlink
        target = Path(os.path.normpath(self.project_root / path))
        if target != self.project_root and self.project_root not in target.parents:
            raise ValueError(f"Path traversal attempt detected: {path}")
        return target

    def _check_real_parents(self, target: Path, path: str) -> None:
        # Parent directories must be real directories of this project
        parent = target.parent
        while parent != self.project_root and self.project_root in parent.parents:
            if parent.is_symlink():
                raise ValueError(f"Refusing to write {path} through symlinked directory {parent}")
            parent = parent.parent

    # --- FileSystemPort ---

    def write_file(self, path: str, content: str) -> bool:
        target = self._safe_path(path)
        self._check_real_parents(target, path)
        if target.is_symlink():
            target.unlink()
        elif target.is_file() and target.read_text(encoding="utf-8") == content:
            return False
        target.parent.mkdir(parents=True, exist_ok=True)
        with open(target, "w", encoding="utf-8") as f:
            f.write(content)
        return True

    def create_symlink(self, source: str, dest: str) -> bool:
        source_path = self._safe_path(source)
        dest_path = self._safe_path(dest)
        relative_source = os.path.relpath(source_path, dest_path.parent)

        if dest_path.is_symlink():
            if os.readlink(dest_path) == relative_source:
                return False
            logger.debug("Replacing stale symlink %s", dest)
            dest_path.unlink()
        elif dest_path.is_dir():
            raise IsADirectoryError(f"Cannot replace directory with symlink: {dest}")
        elif dest_path.exists():
            dest_path.unlink()

        dest_path.parent.mkdir(parents=True, exist_ok=True)
        os.symlink(relative_source, dest_path, target_is_directory=True)
        return True

    def read_text(self, path: str) -> str | None:
        target = self._safe_path(path)
        if not target.is_file():
            return None
        with open(target, encoding="utf-8") as f:
            return f.read()

    def read_link(self, path: str) -> str | None:
        target = self._safe_path(path)
        if not target.is_symlink():
            return None
        resolved = os.path.normpath(target.parent / os.readlink(target))
        return Path(resolved).relative_to(self.project_root).as_posix()

    # --- ManifestPort ---

    def manifest_path(self, root_dir: str) -> str:
        return posixpath.join(root_dir, self.manifest_name)

    def read_manifest(self, root_dir: str) -> str | None:
        return self.read_text(self.manifest_path(root_dir))

    def write_manifest(self, root_dir: str, content: str) -> None:
        self.write_file(self.manifest_path(root_dir), content)
