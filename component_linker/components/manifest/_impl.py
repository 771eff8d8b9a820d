"""
Manifest patching - functional core.

Operates on manifest content already read from disk. Only the fields
being patched change; every other field keeps its value and position.
"""

from __future__ import annotations

import json
import posixpath
from collections.abc import Iterable, Mapping
from typing import Any

from component_linker.core.config import LinkerConfig
from component_linker.core.entities import Component, PlacementState, package_name
from component_linker.core.errors import ManifestMalformedError

RELATIVE_PREFIX = "file:"
ANY_VERSION = "*"


def parse_manifest(content: str, path: str) -> dict[str, Any]:
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ManifestMalformedError(path, str(e)) from e
    if not isinstance(data, dict):
        raise ManifestMalformedError(path, "expected a JSON object")
    return data


def serialize_manifest(data: dict[str, Any], indent: int) -> str:
    return json.dumps(data, indent=indent) + "\n"


def patch_main(content: str, new_main: str, path: str, indent: int = 4) -> str:
    """Set the "main" field, leaving everything else untouched."""
    data = parse_manifest(content, path)
    data["main"] = new_main
    return serialize_manifest(data, indent)


def dependency_reference(
    dependent: Component,
    target: Component,
    placement: PlacementState,
) -> str:
    """
    Declared version of target in dependent's manifest.

    NESTED targets are declared by relative path, exposed targets by version.
    """
    if placement is PlacementState.NESTED and target.root_dir and dependent.root_dir:
        relative = posixpath.relpath(target.root_dir, dependent.root_dir)
        return f"{RELATIVE_PREFIX}{relative}"
    return target.version or ANY_VERSION


def rewrite_dependency_syntax(
    content: str,
    path: str,
    dependent: Component,
    changed: Iterable[Component],
    placements: Mapping[str, PlacementState],
    config: LinkerConfig,
) -> str:
    """
    Rewrite dependent's declarations of the changed components.

    Only components dependent actually depends on are touched.
    """
    data = parse_manifest(content, path)
    dependencies = data.get("dependencies")
    if dependencies is None:
        dependencies = {}
    if not isinstance(dependencies, dict):
        raise ManifestMalformedError(path, '"dependencies" must be an object')

    for target in changed:
        if not dependent.depends_on(target.id):
            continue
        placement = placements.get(target.id, PlacementState.NESTED)
        name = package_name(target.id, config.package_scope)
        dependencies[name] = dependency_reference(dependent, target, placement)

    if dependencies:
        data["dependencies"] = dependencies
    return serialize_manifest(data, config.manifest_indent)
