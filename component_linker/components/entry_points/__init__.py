"""
Entry points component - index files re-exporting a component's main file.
"""

from ._impl import compute_entry_point, entry_point_path
from .component import run_get_entry_points, run_write_entry_points
from .models import EntryPointsInput, EntryPointsOutput

__all__ = [
    "run_get_entry_points",
    "run_write_entry_points",
    "EntryPointsInput",
    "EntryPointsOutput",
    "compute_entry_point",
    "entry_point_path",
]
