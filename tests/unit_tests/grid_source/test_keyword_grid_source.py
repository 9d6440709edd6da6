import numpy as np
import pytest

from cpinspect.grid_source import KeywordGridSource, SpecGrid, GridDataSource
from cpinspect.olio.exceptions import MissingFieldError, GridInspectionError


def test_keyword_grid_source_is_grid_data_source():
    assert isinstance(KeywordGridSource(), GridDataSource)


def test_has_field_is_not_case_sensitive():
    # Arrange
    source = KeywordGridSource({'coord': [0.0] * 24, 'ZCORN': [0.0] * 8})

    # Assert
    assert source.has_field('COORD')
    assert source.has_field('zcorn')
    assert not source.has_field('SPECGRID')


def test_has_fields():
    # Arrange
    source = KeywordGridSource({'COORD': [0.0] * 24, 'ZCORN': [0.0] * 8})

    # Assert
    assert source.has_fields(['COORD', 'ZCORN'])
    assert not source.has_fields(['COORD', 'ZCORN', 'SPECGRID'])
    assert source.has_fields([])


def test_get_floating_point_value():
    # Arrange
    source = KeywordGridSource({'ZCORN': [1, 2, 3.5]})

    # Act
    zcorn = source.get_floating_point_value('ZCORN')

    # Assert
    assert zcorn.dtype == np.float64
    np.testing.assert_array_almost_equal(zcorn, (1.0, 2.0, 3.5))


def test_get_floating_point_value_does_not_copy_float_array():
    # Arrange
    coord = np.zeros(24)
    source = KeywordGridSource({'COORD': coord})

    # Act
    result = source.get_floating_point_value('COORD')

    # Assert
    assert np.shares_memory(result, coord)


def test_get_integer_value():
    # Arrange
    source = KeywordGridSource({'DIMENS': (4, 3, 2)})

    # Act
    dimens = source.get_integer_value('dimens')

    # Assert
    assert dimens.dtype == np.int64
    assert tuple(dimens) == (4, 3, 2)


@pytest.mark.parametrize('getter', ['get_floating_point_value', 'get_integer_value'])
def test_missing_field_raises(getter, caplog):
    # Arrange
    source = KeywordGridSource({'COORD': [0.0] * 24})

    # Act & Assert
    with pytest.raises(MissingFieldError, match = 'ZCORN'):
        getattr(source, getter)('zcorn')
    assert 'keyword ZCORN not present in grid data' in caplog.text


def test_missing_field_error_is_key_error():
    source = KeywordGridSource()
    with pytest.raises(KeyError):
        source.get_floating_point_value('COORD')
    with pytest.raises(GridInspectionError):
        source.spec_grid()


def test_spec_grid_from_raw_record():
    # Arrange
    source = KeywordGridSource({'SPECGRID': [4, 3, 2, 1, 'f']})

    # Act
    spec_grid = source.spec_grid()

    # Assert
    assert isinstance(spec_grid, SpecGrid)
    assert spec_grid.dimensions == (4, 3, 2)
    assert spec_grid.numres == 1
    assert spec_grid.radial == 'F'


def test_spec_grid_object_kept():
    # Arrange
    spec_grid = SpecGrid((5, 6, 7), numres = 2)
    source = KeywordGridSource()

    # Act
    source.set_field('specgrid', spec_grid)

    # Assert
    assert source.has_field('SPECGRID')
    assert source.spec_grid() is spec_grid


@pytest.mark.parametrize('record', [(4, 3), (4, 3, 2, 1, 'F', 0)])
def test_spec_grid_from_sequence_bad_length(record):
    with pytest.raises(ValueError):
        SpecGrid.from_sequence(record)


def test_spec_grid_dimensions_are_ints():
    # Act
    spec_grid = SpecGrid.from_sequence(np.array([3.0, 2.0, 1.0]))

    # Assert
    assert spec_grid.dimensions == (3, 2, 1)
    assert all(isinstance(d, int) for d in spec_grid.dimensions)


def test_set_field_replaces_data():
    # Arrange
    source = KeywordGridSource({'ZCORN': [0.0] * 8})

    # Act
    source.set_field('ZCORN', [1.0] * 8)

    # Assert
    np.testing.assert_array_almost_equal(source.get_floating_point_value('ZCORN'), np.ones(8))
