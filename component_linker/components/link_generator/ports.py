"""
Link generator component port definitions.
"""

from __future__ import annotations

from component_linker.core.ports.filesystem import FileSystemPort
from component_linker.core.ports.registry import RegistryPort

__all__ = ["FileSystemPort", "RegistryPort"]
