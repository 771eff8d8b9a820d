"""
Link generator component - dependency redirect links.

Shell Layer - resolves placements through the registry and applies the
computed ChangeSet. Compute and write modes share compute_dependency_links,
so both produce byte-identical files.
"""

from __future__ import annotations

import logging

from component_linker.core.config import DEFAULT_CONFIG, LinkerConfig
from component_linker.core.services.apply import apply_changes
from component_linker.core.services.placement import placement_map, referenced_ids

from ._impl import compute_dependency_links
from .models import GenerateLinksInput, GenerateLinksOutput
from .ports import FileSystemPort, RegistryPort

logger = logging.getLogger(__name__)


def run_get_links(
    inp: GenerateLinksInput,
    *,
    registry: RegistryPort,
    config: LinkerConfig | None = None,
) -> GenerateLinksOutput:
    """
    Compute dependency links without touching the filesystem.

    Args:
        inp: Components with their resolved dependencies.
        registry: Registry port for placement lookups.
        config: Linker configuration. Uses defaults if None.

    Returns:
        GenerateLinksOutput with the ChangeSet and any unresolved edges.
    """
    config = config or DEFAULT_CONFIG
    placements = placement_map(registry, referenced_ids(inp.components_with_dependencies))
    changes, errors = compute_dependency_links(
        inp.components_with_dependencies, placements, config, inp.npm_style
    )

    for error in errors:
        logger.warning("link-generator: %s", error)
    logger.debug("link-generator: computed %d link file(s)", len(changes.files))

    return GenerateLinksOutput(changes=changes, errors=errors, success=not errors)


def run_write_links(
    inp: GenerateLinksInput,
    *,
    registry: RegistryPort,
    fs: FileSystemPort,
    config: LinkerConfig | None = None,
) -> GenerateLinksOutput:
    """
    Compute dependency links and write them.

    Links of resolvable edges are written even when other edges fail;
    the failures are reported in the output.
    """
    config = config or DEFAULT_CONFIG
    output = run_get_links(inp, registry=registry, config=config)
    apply_changes(output.changes, fs, max_workers=config.max_workers)
    return output
