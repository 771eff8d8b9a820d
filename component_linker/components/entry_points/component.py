"""
Entry points component - root index files for components.

Shell Layer - applies computed entry points through the filesystem port.
"""

from __future__ import annotations

from component_linker.core.config import DEFAULT_CONFIG, LinkerConfig
from component_linker.core.entities import ChangeSet
from component_linker.core.ports.filesystem import FileSystemPort
from component_linker.core.services.apply import apply_changes

from ._impl import compute_entry_point
from .models import EntryPointsInput, EntryPointsOutput


def run_get_entry_points(
    inp: EntryPointsInput,
    *,
    config: LinkerConfig | None = None,
) -> EntryPointsOutput:
    """Compute entry points for the given components."""
    config = config or DEFAULT_CONFIG
    files = []
    skipped = []
    for component in inp.components:
        entry = compute_entry_point(component, config, skip=inp.manifest_main_patched)
        if entry:
            files.extend(entry)
        else:
            skipped.append(component.id)
    return EntryPointsOutput(files=files, skipped=skipped)


def run_write_entry_points(
    inp: EntryPointsInput,
    *,
    fs: FileSystemPort,
    config: LinkerConfig | None = None,
) -> EntryPointsOutput:
    """Compute and write entry points."""
    config = config or DEFAULT_CONFIG
    output = run_get_entry_points(inp, config=config)
    changes = ChangeSet()
    for link_file in output.files:
        changes.add_file(link_file)
    apply_changes(changes, fs, max_workers=config.max_workers)
    return output
