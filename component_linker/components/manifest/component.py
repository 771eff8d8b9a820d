"""
Manifest component - "main" patching and dependency declaration syntax.

Shell Layer - reads manifests through ManifestPort, applies the pure
patches and returns or writes the results.

Invariants:
- I1: "main" is patched only for IMPORTED components (they own a working copy)
- I2: every field other than the patched ones passes through unchanged
"""

from __future__ import annotations

import logging

from component_linker.core.config import DEFAULT_CONFIG, LinkerConfig
from component_linker.core.entities import LinkFile, PlacementState
from component_linker.core.errors import ManifestNotFoundError
from component_linker.core.services.placement import placement_map

from ._impl import patch_main, rewrite_dependency_syntax
from .models import DependencySyntaxInput, ManifestFilesOutput, PatchMainInput
from .ports import ManifestPort, RegistryPort

logger = logging.getLogger(__name__)


def run_get_main_patch(
    inp: PatchMainInput,
    *,
    registry: RegistryPort,
    manifests: ManifestPort,
    config: LinkerConfig | None = None,
) -> LinkFile:
    """
    Compute the manifest with "main" pointing at the resolved main file.

    Raises:
        ManifestNotFoundError: If the component is not IMPORTED, has no
            root directory, or has no materialized manifest.
        ManifestMalformedError: If the manifest is not a JSON object.
    """
    config = config or DEFAULT_CONFIG
    component = inp.component
    placement = registry.get_placement_state(component.id)

    if placement is not PlacementState.IMPORTED or component.root_dir is None:
        raise ManifestNotFoundError(
            component.root_dir or component.id,
            reason="main can only be patched for imported components",
        )

    path = manifests.manifest_path(component.root_dir)
    content = manifests.read_manifest(component.root_dir)
    if content is None:
        raise ManifestNotFoundError(path)

    new_main = inp.new_main or component.main_dist_file()
    patched = patch_main(content, new_main, path, config.manifest_indent)
    return LinkFile(path=path, content=patched)


def run_patch_main(
    inp: PatchMainInput,
    *,
    registry: RegistryPort,
    manifests: ManifestPort,
    config: LinkerConfig | None = None,
) -> LinkFile:
    """Patch "main" and write the manifest back."""
    link_file = run_get_main_patch(inp, registry=registry, manifests=manifests, config=config)
    assert inp.component.root_dir is not None and link_file.content is not None
    manifests.write_manifest(inp.component.root_dir, link_file.content)
    logger.info("Patched main of %s", link_file.path)
    return link_file


def run_get_dependency_syntax(
    inp: DependencySyntaxInput,
    *,
    registry: RegistryPort,
    manifests: ManifestPort,
    config: LinkerConfig | None = None,
) -> ManifestFilesOutput:
    """
    Rewrite each dependent's declarations of the changed components.

    Dependents without a root directory or a materialized manifest are
    skipped.
    """
    config = config or DEFAULT_CONFIG
    placements = placement_map(registry, (c.id for c in inp.changed))
    files: list[LinkFile] = []
    skipped: list[str] = []

    for dependent in inp.dependents:
        content = manifests.read_manifest(dependent.root_dir) if dependent.root_dir else None
        if content is None:
            logger.debug("manifest: %s has no manifest, skipping dependency syntax", dependent.id)
            skipped.append(dependent.id)
            continue

        assert dependent.root_dir is not None
        path = manifests.manifest_path(dependent.root_dir)
        rewritten = rewrite_dependency_syntax(
            content, path, dependent, inp.changed, placements, config
        )
        files.append(LinkFile(path=path, content=rewritten))

    return ManifestFilesOutput(files=files, skipped=skipped)
