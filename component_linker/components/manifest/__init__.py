"""
Manifest component - package manifest "main" and dependency declarations.
"""

from ._impl import (
    dependency_reference,
    parse_manifest,
    patch_main,
    rewrite_dependency_syntax,
    serialize_manifest,
)
from .component import run_get_dependency_syntax, run_get_main_patch, run_patch_main
from .models import DependencySyntaxInput, ManifestFilesOutput, PatchMainInput
from .ports import ManifestPort, RegistryPort

__all__ = [
    # Entry points
    "run_get_dependency_syntax",
    "run_get_main_patch",
    "run_patch_main",
    # Models
    "DependencySyntaxInput",
    "ManifestFilesOutput",
    "PatchMainInput",
    # Ports
    "ManifestPort",
    "RegistryPort",
    # Functional core
    "dependency_reference",
    "parse_manifest",
    "patch_main",
    "rewrite_dependency_syntax",
    "serialize_manifest",
]
