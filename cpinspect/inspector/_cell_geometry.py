"""Functions computing cell geometry from flat COORD and ZCORN arrays; assumes vertical pillars.

COORD holds 6 values per pillar: x, y, z of the top point followed by x, y, z of the bottom point;
pillars are ordered with I varying fastest, there being (nx + 1) * (ny + 1) of them.

ZCORN holds 8 values per cell but is not in cell order: it is a (2 * nz, 2 * ny, 2 * nx) array in which the two
corners of a cell in each direction are adjacent, giving strides of (1, 2 * nx, 4 * nx * ny) between the low and
high corner of a cell in the I, J & K directions respectively.

the 8 corner values of a cell are returned in the order LLL, HLL, LHL, HHL, LLH, HLH, LHH, HHH, where the
letters denote the low or high side of the cell in x, y & z (I, J & K), ie. corner index = a + 2 * b + 4 * c
where a, b & c are 0 or 1 for the I, J & K sides respectively.

functions with names ending in _array work on the whole grid and return arrays indexed [k, j, i].
"""

import logging

log = logging.getLogger(__name__)

import numpy as np


def corner_z_strides(nx, ny):
    """Returns the ZCORN strides between low and high corners of a cell in the I, J & K directions."""
    return (1, 2 * nx, 4 * nx * ny)


def corner_z_indices(i, j, k, nx, ny):
    """Returns a list of the 8 ZCORN indices for the corners of cell (i, j, k), in LLL..HHH order."""
    d = corner_z_strides(nx, ny)
    ix = 2 * (i * d[0] + j * d[1] + k * d[2])
    return [ix + c * d[2] + b * d[1] + a * d[0] for c in (0, 1) for b in (0, 1) for a in (0, 1)]


def cell_corner_z(zcorn, i, j, k, nx, ny):
    """Returns a tuple of the 8 corner z values for cell (i, j, k)."""
    return tuple(float(zcorn[ix]) for ix in corner_z_indices(i, j, k, nx, ny))


def pillar_indices(i, j, nx):
    """Returns the indices of the 4 pillars bounding column (i, j): low-low, high-low, low-high, high-high."""
    numxpill = nx + 1
    pix = i + j * numxpill
    return (pix, pix + 1, pix + numxpill, pix + numxpill + 1)


def pillar_top_xy(coord, i, j, nx):
    """Returns a numpy float array of shape (4, 2) holding the top x, y of the 4 pillars bounding column (i, j)."""
    coord = np.asarray(coord)
    return np.array([coord[6 * p:6 * p + 2] for p in pillar_indices(i, j, nx)], dtype = float)


def _signed_quad_area(p0, p1, p2, p3):
    # half the 2D cross product of the diagonals p0->p3 and p1->p2
    diag1 = p3 - p0
    diag2 = p2 - p1
    return 0.5 * (diag1[..., 0] * diag2[..., 1] - diag1[..., 1] * diag2[..., 0])


def column_area(coord, i, j, nx):
    """Returns the signed area of the base of column (i, j), from the top pillar points.

    note:
       the area is positive when x increases with I and y increases with J; the sign is not removed
    """
    p = pillar_top_xy(coord, i, j, nx)
    return float(_signed_quad_area(p[0], p[1], p[2], p[3]))


def _mean_height(cellz):
    # mean of the z differences along each of the four pillars
    return 0.25 * ((cellz[..., 4] - cellz[..., 0]) + (cellz[..., 5] - cellz[..., 1]) +
                   (cellz[..., 6] - cellz[..., 2]) + (cellz[..., 7] - cellz[..., 3]))


def _mean_rises(cellz):
    # mean rise over the four edges in each of the I and J directions, not yet divided by cell length
    x_rise = 0.25 * ((cellz[..., 1] - cellz[..., 0]) + (cellz[..., 3] - cellz[..., 2]) +
                     (cellz[..., 5] - cellz[..., 4]) + (cellz[..., 7] - cellz[..., 6]))
    y_rise = 0.25 * ((cellz[..., 2] - cellz[..., 0]) + (cellz[..., 3] - cellz[..., 1]) +
                     (cellz[..., 6] - cellz[..., 4]) + (cellz[..., 7] - cellz[..., 5]))
    return x_rise, y_rise


def cell_volume_vertical_pillars(coord, zcorn, i, j, k, nx, ny):
    """Returns the volume of cell (i, j, k) as base area times mean height; exact only for vertical pillars.

    arguments:
       coord (1D numpy float array): COORD data, already checked for size
       zcorn (1D numpy float array): ZCORN data, already checked for size
       i, j, k (ints): zero based logical coordinates of the cell, already bounds checked
       nx, ny (ints): number of cells in the I and J directions

    returns:
       float, the cell volume; negative if the column area or the mean height is negative
    """

    area = column_area(coord, i, j, nx)
    cellz = np.array(cell_corner_z(zcorn, i, j, k, nx, ny))
    return float(_mean_height(cellz) * area)


def cell_dips(coord, zcorn, i, j, k, nx, ny):
    """Returns (x_dip, y_dip) for cell (i, j, k): mean rise over cell length in the x and y directions.

    note:
       cell lengths are taken from the top points of the pillars, which are assumed to be vertical and regularly
       placed
    """

    p = pillar_top_xy(coord, i, j, nx)
    cell_x_length = p[1, 0] - p[0, 0]
    cell_y_length = p[2, 1] - p[0, 1]
    x_rise, y_rise = _mean_rises(np.array(cell_corner_z(zcorn, i, j, k, nx, ny)))
    return (float(x_rise / cell_x_length), float(y_rise / cell_y_length))


def corner_z_array(zcorn, nx, ny, nz):
    """Returns a numpy float array of shape (nz, ny, nx, 8) holding the corner z values of every cell."""
    z = np.asarray(zcorn, dtype = float).reshape((nz, 2, ny, 2, nx, 2))  # [k, c, j, b, i, a]
    return z.transpose((0, 2, 4, 1, 3, 5)).reshape((nz, ny, nx, 8))


def _pillar_top_corners(coord, nx, ny):
    # returns 4 arrays of shape (ny, nx, 2) holding top x, y of the low-low, high-low, low-high & high-high pillars
    top = np.asarray(coord, dtype = float).reshape((ny + 1, nx + 1, 6))[..., :2]
    return top[:-1, :-1], top[:-1, 1:], top[1:, :-1], top[1:, 1:]


def cell_volume_array(coord, zcorn, nx, ny, nz):
    """Returns a numpy float array of shape (nz, ny, nx) holding vertical pillar volumes of all cells."""
    area = _signed_quad_area(*_pillar_top_corners(coord, nx, ny))
    return _mean_height(corner_z_array(zcorn, nx, ny, nz)) * area.reshape((1, ny, nx))


def cell_dips_array(coord, zcorn, nx, ny, nz):
    """Returns a pair of numpy float arrays of shape (nz, ny, nx) holding x dips and y dips of all cells."""
    p0, p1, p2, _ = _pillar_top_corners(coord, nx, ny)
    cell_x_length = (p1[..., 0] - p0[..., 0]).reshape((1, ny, nx))
    cell_y_length = (p2[..., 1] - p0[..., 1]).reshape((1, ny, nx))
    x_rise, y_rise = _mean_rises(corner_z_array(zcorn, nx, ny, nz))
    return x_rise / cell_x_length, y_rise / cell_y_length
