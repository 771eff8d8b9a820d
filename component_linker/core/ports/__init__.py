# component_linker - Ports (Protocol Interfaces)
# Abstract interfaces for adapters; no implementations here

from component_linker.core.ports.filesystem import FileSystemPort
from component_linker.core.ports.registry import ManifestPort, RegistryPort

__all__ = [
    "FileSystemPort",
    "ManifestPort",
    "RegistryPort",
]
