from .local import LocalFileSystemAdapter
from .memory import MemoryFileSystemAdapter

__all__ = ["LocalFileSystemAdapter", "MemoryFileSystemAdapter"]
