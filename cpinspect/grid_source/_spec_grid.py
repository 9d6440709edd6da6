"""Submodule containing the SpecGrid class."""

import logging

log = logging.getLogger(__name__)

from dataclasses import dataclass
from typing import Sequence, Tuple


@dataclass(frozen = True)
class SpecGrid:
    """Structured grid definition, as held by the SPECGRID keyword.

    attributes:
       dimensions (triple int): the number of cells in each logical direction (nx, ny, nz)
       numres (int, default 1): the number of reservoirs (coordinate sets) in the grid
       radial (str, default 'F'): 'T' for a radial grid, 'F' for a cartesian one
    """

    dimensions: Tuple[int, int, int]
    numres: int = 1
    radial: str = 'F'

    def __post_init__(self):
        assert len(self.dimensions) == 3, 'SPECGRID dimensions must be a triple'
        object.__setattr__(self, 'dimensions', tuple(int(d) for d in self.dimensions))

    @classmethod
    def from_sequence(cls, record: Sequence) -> 'SpecGrid':
        """Returns a SpecGrid built from a raw SPECGRID record: nx ny nz [numres [radial]]."""
        if len(record) < 3 or len(record) > 5:
            raise ValueError(f'SPECGRID record must hold between 3 and 5 items, got {len(record)}')
        numres = int(record[3]) if len(record) > 3 else 1
        radial = str(record[4]).upper() if len(record) > 4 else 'F'
        return cls(dimensions = tuple(record[:3]), numres = numres, radial = radial)
