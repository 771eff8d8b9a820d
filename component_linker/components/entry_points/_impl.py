"""
Entry-point synthesis - functional core.

The entry point is the file resolved when a component's root directory is
imported. It re-exports the component's main file, or the compiled main
file when a build output exists.
"""

from __future__ import annotations

import posixpath

from component_linker.core.config import LinkerConfig
from component_linker.core.entities import Component, LinkFile
from component_linker.core.services.link_content import extension_of, render_link, strip_ext


def entry_point_path(component: Component, config: LinkerConfig) -> str | None:
    if component.root_dir is None:
        return None
    ext = extension_of(component.main_file)
    return posixpath.join(component.root_dir, config.index_name + ext)


def compute_entry_point(
    component: Component,
    config: LinkerConfig,
    *,
    skip: bool = False,
) -> list[LinkFile]:
    """
    Entry-point file for a component, or nothing.

    Nothing is produced when skip is set (the manifest "main" carries the
    entry instead), when the component has no root directory, or when the
    main file already is the root index file.
    """
    if skip:
        return []

    path = entry_point_path(component, config)
    if path is None:
        return []

    main_file = component.main_dist_file()
    assert component.root_dir is not None
    if posixpath.normpath(posixpath.join(component.root_dir, main_file)) == path:
        return []

    import_path = "./" + strip_ext(posixpath.normpath(main_file))
    return [
        LinkFile(
            path=path,
            content=render_link(config, extension_of(path), import_path),
        )
    ]
