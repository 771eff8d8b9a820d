"""
Tests for apply_changes.

Batches are joined before returning, the first failure is re-raised with
its path and re-applying an unchanged ChangeSet writes nothing new.
"""

from __future__ import annotations

import pytest

from component_linker.adapters.fs import MemoryFileSystemAdapter
from component_linker.core.entities import ChangeSet, LinkFile, Symlink
from component_linker.core.errors import LinkWriteError
from component_linker.core.services.apply import apply_changes


class FailingFileSystem(MemoryFileSystemAdapter):
    """Memory filesystem refusing writes to one path."""

    def __init__(self, failing_path: str) -> None:
        super().__init__()
        self.failing_path = failing_path

    def write_file(self, path: str, content: str) -> bool:
        if path == self.failing_path:
            raise PermissionError(f"read-only: {path}")
        return super().write_file(path, content)


def make_changes(count: int = 20) -> ChangeSet:
    changes = ChangeSet()
    for i in range(count):
        changes.add_file(LinkFile(path=f"components/c{i}/index.js", content=f"// {i}\n"))
    changes.add_symlink(Symlink(source="components/c0", dest="node_modules/@org/c0"))
    return changes


class TestApplyChanges:
    """Tests for apply_changes."""

    def test_everything_written(self) -> None:
        fs = MemoryFileSystemAdapter()
        result = apply_changes(make_changes(), fs, max_workers=4)

        assert len(fs.files) == 20
        assert fs.symlinks == {"node_modules/@org/c0": "components/c0"}
        assert result.total == 21
        assert result.written[-1] == "node_modules/@org/c0"

    def test_reapply_is_noop(self) -> None:
        fs = MemoryFileSystemAdapter()
        apply_changes(make_changes(), fs)
        writes = len(fs.writes)

        result = apply_changes(make_changes(), fs)

        assert result.written == []
        assert len(result.unchanged) == 21
        assert len(fs.writes) == writes

    def test_changed_content_rewritten(self) -> None:
        fs = MemoryFileSystemAdapter()
        fs.write_file("a/index.js", "old\n")
        changes = ChangeSet(files=[LinkFile(path="a/index.js", content="new\n")])

        result = apply_changes(changes, fs)

        assert fs.files["a/index.js"] == "new\n"
        assert result.written == ["a/index.js"]

    def test_file_through_symlink_fails(self) -> None:
        """A file under a symlinked directory is never written into the link target."""
        fs = MemoryFileSystemAdapter()
        fs.create_symlink("components/.dependencies/a/v1", "components/b/node_modules/@org/a")
        changes = ChangeSet(
            files=[LinkFile(path="components/b/node_modules/@org/a/index.js", content="x\n")]
        )

        with pytest.raises(LinkWriteError) as exc_info:
            apply_changes(changes, fs)

        assert exc_info.value.path == "components/b/node_modules/@org/a/index.js"
        assert fs.files == {}

    def test_failure_reports_path(self) -> None:
        fs = FailingFileSystem("components/c3/index.js")
        with pytest.raises(LinkWriteError) as exc_info:
            apply_changes(make_changes(), fs, max_workers=2)

        assert exc_info.value.path == "components/c3/index.js"
        assert isinstance(exc_info.value.cause, PermissionError)
        # symlink batch never starts after a failed file batch
        assert fs.symlinks == {}

    def test_empty(self) -> None:
        result = apply_changes(ChangeSet(), MemoryFileSystemAdapter())
        assert result.total == 0
