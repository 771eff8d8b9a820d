"""
Path arithmetic and redirect content rendering.

Pure helpers shared by the link generator, the entry-point synthesizer and
the node-modules linker. No I/O.
"""

from __future__ import annotations

import posixpath

from component_linker.core.config import DEFAULT_EXTENSION, LinkerConfig


def split_ext(path: str) -> tuple[str, str]:
    """Split "lib/foo.js" into ("lib/foo", ".js")."""
    base, ext = posixpath.splitext(path)
    return base, ext


def strip_ext(path: str) -> str:
    return split_ext(path)[0]


def extension_of(path: str, default: str = DEFAULT_EXTENSION) -> str:
    return split_ext(path)[1] or default


def relative_import(from_dir: str, to_path: str) -> str:
    """
    Import string that resolves from from_dir to to_path.

    Both arguments are project-relative. The result always starts with
    "./" or "../" so module resolution treats it as a path.
    """
    relative = posixpath.relpath(to_path, from_dir or ".")
    if relative.startswith("../") or relative == "..":
        return relative
    return f"./{relative}"


def render_link(config: LinkerConfig, extension: str, import_path: str) -> str:
    """Redirect module content for a file with the given extension."""
    return config.template_for(extension).format(path=import_path) + "\n"
