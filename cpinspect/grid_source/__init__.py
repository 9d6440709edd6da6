"""Access to the keyword data describing a corner point grid."""

__all__ = ['GridDataSource', 'KeywordGridSource', 'SpecGrid']

from ._grid_data_source import GridDataSource
from ._keyword_grid_source import KeywordGridSource
from ._spec_grid import SpecGrid

# Set "module" attribute of all public objects to this path.
for _name in __all__:
    _obj = eval(_name)
    if hasattr(_obj, "__module__"):
        _obj.__module__ = __name__

from ._grid_data_source import COORD, ZCORN, SPECGRID, DIMENS

__all__ += ['COORD', 'ZCORN', 'SPECGRID', 'DIMENS']
