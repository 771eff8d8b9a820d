from .memory import InMemoryRegistry
from .yaml_workspace import load_workspace

__all__ = ["InMemoryRegistry", "load_workspace"]
