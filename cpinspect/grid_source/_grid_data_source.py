"""Submodule containing the GridDataSource abstract base class."""

import logging

log = logging.getLogger(__name__)

from abc import ABCMeta, abstractmethod
from typing import Iterable, Sequence

from cpinspect.grid_source._spec_grid import SpecGrid

# Eclipse keywords used by the grid inspector
COORD = 'COORD'  # pillar coordinates, 6 values per pillar
ZCORN = 'ZCORN'  # corner elevations, 8 values per cell
SPECGRID = 'SPECGRID'  # structured grid definition
DIMENS = 'DIMENS'  # raw dimension triple


class GridDataSource(metaclass = ABCMeta):
    """Read only access to the keyword data of a corner point grid description.

    notes:
       a parser of grid files, or any other holder of keyword data, can offer its data to a GridInspector
       by implementing this interface; field names are Eclipse keywords such as COORD, ZCORN, SPECGRID
       and DIMENS
    """

    @abstractmethod
    def has_field(self, name: str) -> bool:
        """Returns True if the named field is present."""
        raise NotImplementedError

    def has_fields(self, names: Iterable[str]) -> bool:
        """Returns True if all of the named fields are present."""
        return all(self.has_field(name) for name in names)

    @abstractmethod
    def get_floating_point_value(self, name: str) -> Sequence[float]:
        """Returns the flat floating point data for the named field; raises MissingFieldError if absent."""
        raise NotImplementedError

    @abstractmethod
    def get_integer_value(self, name: str) -> Sequence[int]:
        """Returns the flat integer data for the named field; raises MissingFieldError if absent."""
        raise NotImplementedError

    @abstractmethod
    def spec_grid(self) -> SpecGrid:
        """Returns the structured grid definition; raises MissingFieldError if SPECGRID is absent."""
        raise NotImplementedError
