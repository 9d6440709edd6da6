"""Submodule containing the GridInspector class."""

import logging

log = logging.getLogger(__name__)

import numpy as np
import pandas as pd
from typing import Tuple

import cpinspect.grid_source as rgs
import cpinspect.olio.cell_index as ci
from cpinspect.olio.exceptions import MissingFieldError, SizeMismatchError, OutOfRangeError

import cpinspect.inspector._cell_geometry as cg


class GridInspector:
    """Geometric queries on the cells of a corner point grid defined by COORD and ZCORN keyword data.

    notes:
       the inspector holds a reference to the grid data source, together with the logical grid size found when the
       inspector is created; keyword arrays are fetched from the source, and their sizes checked, for each query;
       geometry is computed on the assumption that pillars are vertical; logical coordinates (i, j, k) are zero based
       and whole grid arrays are indexed [k, j, i]
    """

    def __init__(self, grid_source):
        """Creates an inspector for the grid described by keyword data available from grid_source.

        arguments:
           grid_source (GridDataSource): provider of the COORD, ZCORN and SPECGRID or DIMENS keyword data

        notes:
           COORD and ZCORN must both be present; the logical grid size is taken from SPECGRID if present, otherwise
           from DIMENS; MissingFieldError is raised if a needed keyword is absent
        """

        self.grid_source = grid_source

        if not grid_source.has_fields([rgs.COORD, rgs.ZCORN]):
            log.error('grid data is missing COORD or ZCORN')
            raise MissingFieldError('needed field is missing in grid data: both COORD and ZCORN are required')

        if grid_source.has_field(rgs.SPECGRID):
            dimensions = grid_source.spec_grid().dimensions
            log.debug(f'logical grid size {dimensions} taken from SPECGRID')
            if grid_source.has_field(rgs.DIMENS):
                dimens = tuple(int(d) for d in grid_source.get_integer_value(rgs.DIMENS)[:3])
                if dimens != tuple(dimensions):
                    log.warning(f'DIMENS {dimens} does not match SPECGRID {tuple(dimensions)}; using SPECGRID')
        elif grid_source.has_field(rgs.DIMENS):
            dimens = grid_source.get_integer_value(rgs.DIMENS)
            if len(dimens) < 3:
                raise SizeMismatchError(f'DIMENS holds {len(dimens)} values; 3 are needed')
            dimensions = dimens[:3]
            log.debug(f'logical grid size {tuple(int(d) for d in dimensions)} taken from DIMENS')
        else:
            log.error('grid data has neither SPECGRID nor DIMENS')
            raise MissingFieldError('found neither SPECGRID nor DIMENS in grid data; at least one is needed')

        self.logical_grid_size = tuple(int(d) for d in dimensions)
        if any(d < 1 for d in self.logical_grid_size):
            log.error(f'invalid logical grid size: {self.logical_grid_size}')
            raise ValueError(f'logical grid size must be positive in each direction: {self.logical_grid_size}')

    @property
    def nx(self):
        """Number of cells in the I (x) direction."""
        return self.logical_grid_size[0]

    @property
    def ny(self):
        """Number of cells in the J (y) direction."""
        return self.logical_grid_size[1]

    @property
    def nz(self):
        """Number of layers, ie. cells in the K direction."""
        return self.logical_grid_size[2]

    @property
    def cell_count(self):
        """Total number of cells in the grid."""
        return self.nx * self.ny * self.nz

    @property
    def pillar_count(self):
        """Number of pillars in the grid."""
        return (self.nx + 1) * (self.ny + 1)

    def grid_size(self) -> Tuple[int, int, int]:
        """Returns the logical grid size (nx, ny, nz)."""
        return self.logical_grid_size

    def check_logical_coords(self, i, j, k):
        """Raises OutOfRangeError if (i, j, k) is not a cell of the grid."""
        for axis, (coord, extent) in enumerate(zip((i, j, k), self.logical_grid_size)):
            if coord < 0 or coord >= extent:
                ordinal = ('First', 'Second', 'Third')[axis]
                log.error(f'{ordinal} coordinate {coord} out of bounds for grid size {self.logical_grid_size}')
                raise OutOfRangeError(f'{ordinal} coordinate out of bounds: {coord} not in range [0, {extent})')

    def logical_coords_from_cell_index(self, cell_index) -> Tuple[int, int, int]:
        """Returns the zero based logical coordinates (i, j, k) for a zero based linear cell index."""
        if cell_index < 0 or cell_index >= self.cell_count:
            log.error(f'cell index {cell_index} out of bounds for grid with {self.cell_count} cells')
            raise OutOfRangeError(f'cell index out of bounds: {cell_index} not in range [0, {self.cell_count})')
        return ci.logical_coords_from_cell_index(int(cell_index), self.nx, self.ny)

    def cell_index_from_logical_coords(self, i, j, k) -> int:
        """Returns the zero based linear cell index for logical coordinates (i, j, k)."""
        self.check_logical_coords(i, j, k)
        return ci.cell_index_from_logical_coords(i, j, k, self.nx, self.ny)

    def cell_corners(self, i, j, k) -> Tuple[float, ...]:
        """Returns the ZCORN values for the 8 corners of cell (i, j, k).

        returns:
           tuple of 8 floats in the order LLL, HLL, LHL, HHL, LLH, HLH, LHH, HHH, where the letters denote the
           low or high side of the cell in the x, y & z directions respectively
        """

        self.check_logical_coords(i, j, k)
        return cg.cell_corner_z(self._zcorn(), i, j, k, self.nx, self.ny)

    def cell_volume(self, i, j, k) -> float:
        """Returns the volume of cell (i, j, k), computed as base area times mean height.

        note:
           the base area is found from the top points of the four pillars and the height from the ZCORN
           differences along each pillar, so the result is only exact when the pillars are vertical; the
           sign of the base area is kept, so a grid with left handed IJ axes yields negative volumes
        """

        self.check_logical_coords(i, j, k)
        coord = self._coord()
        zcorn = self._zcorn()
        return cg.cell_volume_vertical_pillars(coord, zcorn, i, j, k, self.nx, self.ny)

    def cell_volume_by_index(self, cell_index) -> float:
        """Returns the volume of the cell with the given zero based linear index."""
        return self.cell_volume(*self.logical_coords_from_cell_index(cell_index))

    def cell_dips(self, i, j, k) -> Tuple[float, float]:
        """Returns the dip slopes (x_dip, y_dip) of cell (i, j, k) relative to the xy plane.

        note:
           the x dip is the mean rise in the positive x direction over the four I edges of the cell, divided by
           the cell length in x; similarly for y; lengths are taken from the top pillar points, assuming regularly
           placed vertical pillars
        """

        self.check_logical_coords(i, j, k)
        coord = self._coord()
        zcorn = self._zcorn()
        return cg.cell_dips(coord, zcorn, i, j, k, self.nx, self.ny)

    def cell_dips_by_index(self, cell_index) -> Tuple[float, float]:
        """Returns the dip slopes (x_dip, y_dip) of the cell with the given zero based linear index."""
        return self.cell_dips(*self.logical_coords_from_cell_index(cell_index))

    def cell_volumes(self):
        """Returns a numpy float array of shape (nz, ny, nx) holding the vertical pillar volume of every cell."""
        return cg.cell_volume_array(self._coord(), self._zcorn(), self.nx, self.ny, self.nz)

    def cell_dips_arrays(self):
        """Returns a pair of numpy float arrays of shape (nz, ny, nx) holding x dip and y dip of every cell."""
        return cg.cell_dips_array(self._coord(), self._zcorn(), self.nx, self.ny, self.nz)

    def cell_geometry_dataframe(self):
        """Returns a pandas dataframe with one row per cell, indexed by linear cell index.

        returns:
           pandas.DataFrame with columns i, j, k, volume, x_dip, y_dip; rows are in linear cell index order
        """

        ijk = ci.all_logical_coords(self.nx, self.ny, self.nz)
        volumes = self.cell_volumes()
        x_dips, y_dips = self.cell_dips_arrays()
        df = pd.DataFrame({
            'i': ijk[:, 0],
            'j': ijk[:, 1],
            'k': ijk[:, 2],
            'volume': volumes[ijk[:, 2], ijk[:, 1], ijk[:, 0]],
            'x_dip': x_dips[ijk[:, 2], ijk[:, 1], ijk[:, 0]],
            'y_dip': y_dips[ijk[:, 2], ijk[:, 1], ijk[:, 0]]
        })
        df.index.name = 'cell'
        return df

    def grid_extents(self) -> Tuple[float, float, float, float, float, float]:
        """Returns the bounding box of the grid as (xmin, xmax, ymin, ymax, zmin, zmax).

        notes:
           SPECGRID, COORD and ZCORN must all be present, otherwise MissingFieldError is raised; x & y limits cover
           the top and bottom points of every pillar; z limits are those of the ZCORN data
        """

        if not self.grid_source.has_fields([rgs.COORD, rgs.ZCORN, rgs.SPECGRID]):
            log.error('grid extents need SPECGRID, COORD and ZCORN')
            raise MissingFieldError('grid does not have SPECGRID, COORD and ZCORN; cannot find extents')

        coord = self._coord().reshape((self.pillar_count, 6))
        zcorn = np.asarray(self.grid_source.get_floating_point_value(rgs.ZCORN), dtype = float)
        if zcorn.size == 0:
            raise SizeMismatchError('ZCORN holds no data; cannot find z extents')

        xy = np.concatenate((coord[:, 0:2], coord[:, 3:5]))
        return (float(np.min(xy[:, 0])), float(np.max(xy[:, 0])), float(np.min(xy[:, 1])), float(np.max(xy[:, 1])),
                float(np.min(zcorn)), float(np.max(zcorn)))

    def _coord(self):
        coord = np.asarray(self.grid_source.get_floating_point_value(rgs.COORD), dtype = float)
        if coord.size != 6 * self.pillar_count:
            log.error(f'COORD holds {coord.size} values; expected {6 * self.pillar_count}')
            raise SizeMismatchError(f'wrong size of COORD field: {coord.size} values instead of {6 * self.pillar_count}')
        return coord

    def _zcorn(self):
        zcorn = np.asarray(self.grid_source.get_floating_point_value(rgs.ZCORN), dtype = float)
        if zcorn.size != 8 * self.cell_count:
            log.error(f'ZCORN holds {zcorn.size} values; expected {8 * self.cell_count}')
            raise SizeMismatchError(f'wrong size of ZCORN field: {zcorn.size} values instead of {8 * self.cell_count}')
        return zcorn
