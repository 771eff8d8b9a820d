"""
Manifest component port definitions.
"""

from __future__ import annotations

from component_linker.core.ports.registry import ManifestPort, RegistryPort

__all__ = ["ManifestPort", "RegistryPort"]
