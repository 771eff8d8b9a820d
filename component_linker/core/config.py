"""
Linker configuration.

Defaults mirror linker_rules.yaml; see component_linker.rules for loading.
"""

from __future__ import annotations

from dataclasses import dataclass, field

# Redirect module templates keyed by file extension. {path} is the import target.
DEFAULT_LINK_TEMPLATES: dict[str, str] = {
    ".js": "module.exports = require('{path}');",
    ".jsx": "module.exports = require('{path}');",
    ".cjs": "module.exports = require('{path}');",
    ".ts": "export * from '{path}';",
    ".tsx": "export * from '{path}';",
    ".css": "@import '{path}';",
    ".scss": "@import '{path}';",
    ".less": "@import '{path}';",
}

DEFAULT_EXTENSION = ".js"


@dataclass(frozen=True)
class LinkerConfig:
    """Linker configuration from rules."""

    # Symlink namespace
    package_scope: str = "@bit"
    modules_dir: str = "node_modules"

    # Manifest
    manifest_name: str = "package.json"
    manifest_indent: int = 4

    # Entry points
    index_name: str = "index"

    # Apply batches
    max_workers: int = 8

    link_templates: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_LINK_TEMPLATES))

    def template_for(self, extension: str) -> str:
        return self.link_templates.get(
            extension, self.link_templates.get(DEFAULT_EXTENSION, DEFAULT_LINK_TEMPLATES[".js"])
        )

    def __hash__(self) -> int:
        return hash((self.package_scope, self.modules_dir, self.manifest_name, self.index_name))


DEFAULT_CONFIG = LinkerConfig()
