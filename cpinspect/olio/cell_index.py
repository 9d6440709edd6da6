"""Conversion between linear cell indices and logical (i, j, k) cell coordinates.

a linear cell index runs over the cells of a grid with I varying fastest, then J, then K:
   cell_index = i + j * nx + k * nx * ny
all indices and coordinates handled here are zero based; the arithmetic of the forward mapping works
internally with a one based index, following the simulator convention
"""

import logging

log = logging.getLogger(__name__)

import numpy as np
import numba  # type: ignore
from numba import njit  # type: ignore
from typing import Tuple


def logical_coords_from_cell_index(cell_index: int, nx: int, ny: int) -> Tuple[int, int, int]:
    """Returns the zero based logical coordinates (i, j, k) of the cell with the given linear index.

    arguments:
       cell_index (int): zero based linear index of the cell, with I varying fastest
       nx (int): number of cells in the I (x) direction
       ny (int): number of cells in the J (y) direction

    returns:
       triple int (i, j, k), each zero based

    notes:
       no bounds checking is done here; the caller must ensure that 0 <= cell_index < nx * ny * nz;
       the number of layers is not needed by the arithmetic
    """

    layer_size = nx * ny
    n = cell_index + 1  # one based from here on

    # position within the horizontal layer, in 1..layer_size
    hor_idx = n - (n // layer_size) * layer_size
    if hor_idx == 0:  # last cell of a layer
        hor_idx = layer_size

    # position within the row, in 1..nx
    i = hor_idx - (hor_idx // nx) * nx
    if i == 0:  # last cell of a row
        i = nx

    j = (hor_idx - i) // nx + 1
    k = (n - nx * (j - 1) - 1) // layer_size + 1

    return (i - 1, j - 1, k - 1)


def cell_index_from_logical_coords(i: int, j: int, k: int, nx: int, ny: int) -> int:
    """Returns the zero based linear cell index for zero based logical coordinates (i, j, k); no bounds checking."""
    return i + nx * (j + ny * k)


@njit
def logical_coords_for_cell_indices(cell_indices: np.ndarray, nx: int, ny: int) -> np.ndarray:
    """Returns an int array of shape (N, 3) holding zero based (i, j, k) for each of N linear cell indices.

    arguments:
       cell_indices (1D numpy int array): zero based linear cell indices
       nx (int): number of cells in the I (x) direction
       ny (int): number of cells in the J (y) direction

    returns:
       numpy int array of shape (N, 3) with i, j, k in the last axis

    note:
       uses the same arithmetic as logical_coords_from_cell_index(), compiled with numba
    """
    layer_size = nx * ny
    ijk = np.empty((len(cell_indices), 3), dtype = numba.int64)
    for c in numba.prange(len(cell_indices)):
        n = cell_indices[c] + 1
        hor_idx = n - (n // layer_size) * layer_size
        if hor_idx == 0:
            hor_idx = layer_size
        i = hor_idx - (hor_idx // nx) * nx
        if i == 0:
            i = nx
        j = (hor_idx - i) // nx + 1
        k = (n - nx * (j - 1) - 1) // layer_size + 1
        ijk[c, 0] = i - 1
        ijk[c, 1] = j - 1
        ijk[c, 2] = k - 1
    return ijk


def all_logical_coords(nx: int, ny: int, nz: int) -> np.ndarray:
    """Returns an int array of shape (nx * ny * nz, 3) holding (i, j, k) for every cell, in linear index order."""
    cell_count = nx * ny * nz
    return logical_coords_for_cell_indices(np.arange(cell_count, dtype = np.int64), nx, ny)
