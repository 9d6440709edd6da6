"""Submodule containing the KeywordGridSource class, an in memory grid data source."""

import logging

log = logging.getLogger(__name__)

import numpy as np
from typing import Mapping, Optional

from cpinspect.olio.exceptions import MissingFieldError
import cpinspect.grid_source._grid_data_source as gds
from cpinspect.grid_source._spec_grid import SpecGrid


class KeywordGridSource(gds.GridDataSource):
    """Grid data source backed by a mapping of Eclipse keyword to flat numeric data."""

    def __init__(self, keywords: Optional[Mapping] = None):
        """Creates a grid data source from keyword data already held in memory.

        arguments:
           keywords (dict, optional): maps keyword name to a flat sequence (list, tuple or numpy array) of
              values; names are not case sensitive; the SPECGRID entry may be a SpecGrid object or a raw record
              of 3 to 5 items (nx, ny, nz, numres, radial)

        note:
           arrays are held by reference; numpy arrays are not copied
        """

        self.keywords = {}
        if keywords is not None:
            for name, value in keywords.items():
                self.set_field(name, value)

    def set_field(self, name, value):
        """Adds or replaces the data for a keyword."""
        name = name.upper()
        if name == gds.SPECGRID and not isinstance(value, SpecGrid):
            value = SpecGrid.from_sequence(value)
        self.keywords[name] = value

    def has_field(self, name):
        return name.upper() in self.keywords

    def get_floating_point_value(self, name):
        return np.asarray(self._field(name), dtype = np.float64)

    def get_integer_value(self, name):
        return np.asarray(self._field(name), dtype = np.int64)

    def spec_grid(self):
        return self._field(gds.SPECGRID)

    def _field(self, name):
        try:
            return self.keywords[name.upper()]
        except KeyError:
            log.error(f'keyword {name.upper()} not present in grid data')
            raise MissingFieldError(f'keyword {name.upper()} not present in grid data') from None
