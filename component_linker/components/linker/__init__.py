"""
Linker component - orchestrates a complete linking pass.

Eager (link_components) and deferred (get_all_components_links) variants
share one pipeline and produce the same files and symlinks.
"""

from component_linker.components.node_modules import link_all_to_node_modules

from .component import (
    get_all_components_links,
    get_links_in_dist,
    link_components,
    link_in_dist,
)
from .models import LinkRequest

__all__ = [
    # Entry points
    "get_all_components_links",
    "get_links_in_dist",
    "link_all_to_node_modules",
    "link_components",
    "link_in_dist",
    # Models
    "LinkRequest",
]
