"""
Relink component - propagate placement changes to direct dependents.
"""

from ._impl import dependency_ids, select_dependents
from .component import run_get_relink, run_relink
from .models import RelinkInput, RelinkOutput

__all__ = [
    "run_get_relink",
    "run_relink",
    "RelinkInput",
    "RelinkOutput",
    "dependency_ids",
    "select_dependents",
]
