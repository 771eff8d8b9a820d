"""
Link generator component - redirect modules between components.

Computes, for each component's dependency edges, the redirect files that
translate a literal import specifier into the dependency's real location.
"""

from ._impl import (
    compute_component_links,
    compute_dependency_links,
    import_target,
    link_destinations,
    needs_redirect,
)
from .component import run_get_links, run_write_links
from .models import GenerateLinksInput, GenerateLinksOutput

__all__ = [
    # Entry points
    "run_get_links",
    "run_write_links",
    # Models
    "GenerateLinksInput",
    "GenerateLinksOutput",
    # Functional core
    "compute_component_links",
    "compute_dependency_links",
    "import_target",
    "link_destinations",
    "needs_redirect",
]
