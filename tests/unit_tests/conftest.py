""" Shared fixtures for tests """

import logging

import numpy as np
import pytest

from cpinspect.grid_source import KeywordGridSource, SpecGrid
from cpinspect.inspector import GridInspector


@pytest.fixture(autouse = True)
def capture_logs(caplog):
    """Always capture log messages from cpinspect"""

    caplog.set_level(logging.DEBUG, logger = "cpinspect")


def _lattice_coord(nx, ny, dx = 1.0, dy = 1.0, origin = (0.0, 0.0), z_top = 0.0, z_bottom = 100.0):
    """Returns COORD data for a regular lattice of vertical pillars."""
    x = origin[0] + dx * np.arange(nx + 1, dtype = float)
    y = origin[1] + dy * np.arange(ny + 1, dtype = float)
    coord = np.empty((ny + 1, nx + 1, 6))
    coord[..., 0] = x.reshape((1, -1))
    coord[..., 1] = y.reshape((-1, 1))
    coord[..., 2] = z_top
    coord[..., 3] = x.reshape((1, -1))
    coord[..., 4] = y.reshape((-1, 1))
    coord[..., 5] = z_bottom
    return coord.flatten()


def _lattice_zcorn(nx, ny, nz, dz = 1.0, dx = 1.0, dy = 1.0, x_dip = 0.0, y_dip = 0.0, z0 = 0.0):
    """Returns ZCORN data for a grid of layers of constant thickness dz, optionally dipping in x and y."""
    z = np.empty((2 * nz, 2 * ny, 2 * nx))
    for kc in range(2 * nz):
        for jb in range(2 * ny):
            for ia in range(2 * nx):
                x = dx * (ia // 2 + ia % 2)
                y = dy * (jb // 2 + jb % 2)
                z[kc, jb, ia] = z0 + dz * (kc // 2 + kc % 2) + x_dip * x + y_dip * y
    return z.flatten()


def _lattice_source(nx, ny, nz, dx = 1.0, dy = 1.0, dz = 1.0, x_dip = 0.0, y_dip = 0.0, use_dimens = False):
    """Returns a KeywordGridSource for a regular lattice grid."""
    keywords = {
        'COORD': _lattice_coord(nx, ny, dx = dx, dy = dy),
        'ZCORN': _lattice_zcorn(nx, ny, nz, dz = dz, dx = dx, dy = dy, x_dip = x_dip, y_dip = y_dip)
    }
    if use_dimens:
        keywords['DIMENS'] = [nx, ny, nz]
    else:
        keywords['SPECGRID'] = SpecGrid((nx, ny, nz))
    return KeywordGridSource(keywords)


@pytest.fixture
def flat_source():
    """Grid data for 2x2x1 cells, pillars 1.0 apart, top at depth 0.0 and base at 10.0"""

    return _lattice_source(2, 2, 1, dz = 10.0)


@pytest.fixture
def flat_inspector(flat_source) -> GridInspector:
    return GridInspector(flat_source)


@pytest.fixture
def dipping_source():
    """Grid data for 4x3x2 cells of size 50.0 x 25.0 x 5.0, dipping 0.1 in x and -0.2 in y"""

    return _lattice_source(4, 3, 2, dx = 50.0, dy = 25.0, dz = 5.0, x_dip = 0.1, y_dip = -0.2)


@pytest.fixture
def dipping_inspector(dipping_source) -> GridInspector:
    return GridInspector(dipping_source)


@pytest.fixture
def lattice_coord():
    """Factory for COORD data of a regular lattice of vertical pillars"""

    return _lattice_coord


@pytest.fixture
def lattice_zcorn():
    """Factory for ZCORN data of layers of constant thickness"""

    return _lattice_zcorn


@pytest.fixture
def lattice_source():
    """Factory for a KeywordGridSource holding a regular lattice grid"""

    return _lattice_source
