"""
component_linker - linking core of a component-based package manager.

Synthesizes redirect modules, entry points, a node_modules-style symlink
namespace and manifest "main" pointers so independently stored components
can import each other as ordinary packages.
"""

__version__ = "0.1.0"
