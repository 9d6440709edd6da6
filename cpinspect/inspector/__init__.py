"""Geometric queries on the cells of a corner point grid."""

__all__ = ['GridInspector']

from ._grid_inspector import GridInspector

# Set "module" attribute of all public objects to this path.
for _name in __all__:
    _obj = eval(_name)
    if hasattr(_obj, "__module__"):
        _obj.__module__ = __name__
