"""
Tests for positions relative to a reference point.
"""

import logging
import math

import pandas as pd
import pytest

from navgeo.exceptions import InvalidAngleError
from navgeo.fixes import FIX_COLUMNS, RelativeFix, fixes_to_frame, magnetic_to_true, parse_distance
from navgeo.models.geopoint import GeoPoint
from navgeo.units import DEFAULT_RADIUS
from navgeo.utils import dms

ONE_DEGREE_M = DEFAULT_RADIUS * math.radians(1)


class TestParseDistance:
    """Test cases for distances with unit suffixes."""

    def test_metres(self):
        assert parse_distance('500M') == 500.0
        assert parse_distance('500 m') == 500.0
        assert parse_distance('750') == 750.0

    def test_nautical_miles(self):
        assert parse_distance('1.2NM') == pytest.approx(2222.4)
        assert parse_distance('2.5 nm') == pytest.approx(4630)

    def test_kilometres(self):
        assert parse_distance('3km') == 3000.0

    def test_numbers_are_metres(self):
        assert parse_distance(1000) == 1000.0

    @pytest.mark.parametrize('value', ['', 'far', '1.2 miles', '-5NM', None, True, [1]])
    def test_unparsable(self, value):
        assert math.isnan(parse_distance(value))


class TestMagneticToTrue:
    """Test cases for applying magnetic variation."""

    def test_east_variation_is_added(self):
        assert magnetic_to_true(350, 20) == pytest.approx(10)

    def test_west_variation_is_subtracted(self):
        assert magnetic_to_true(10, -20) == pytest.approx(350)

    def test_variation_as_text(self):
        assert magnetic_to_true('10', '5W') == pytest.approx(5)

    def test_invalid(self):
        with pytest.raises(InvalidAngleError):
            magnetic_to_true('north', 0)


class TestRelativeFix:
    """Test cases for a single relative fix."""

    def test_position(self):
        fix = RelativeFix((0, 0), magnetic_bearing=80, distance_m=ONE_DEGREE_M, variation=10, label='EAST')
        assert fix.true_bearing == pytest.approx(90)
        position = fix.position
        assert position.name == 'EAST'
        assert position.latitude == pytest.approx(0, abs=1e-9)
        assert position.longitude == pytest.approx(1)

    def test_distance_text(self):
        fix = RelativeFix(GeoPoint(0, 0), 0, '8.5NM')
        assert fix.distance_m == pytest.approx(8.5 * 1852)
        assert fix.distance_nm == pytest.approx(8.5)

    def test_from_aerodrome_reference_point(self):
        arp = GeoPoint.parse('34 42 09S', '138 37 15E')
        position = RelativeFix(arp, 0, '10NM').position
        assert position.latitude == pytest.approx(-34.5359, abs=1e-3)
        assert position.longitude == pytest.approx(arp.longitude)

    def test_reference_is_not_modified(self):
        reference = GeoPoint(10, 10)
        RelativeFix(reference, 45, 10000).position
        assert (reference.latitude, reference.longitude) == (10, 10)

    @pytest.mark.parametrize('dist', ['far', -1, None, float('inf')])
    def test_invalid_distance(self, dist):
        with pytest.raises(InvalidAngleError):
            RelativeFix((0, 0), 10, dist)

    def test_invalid_bearing(self):
        with pytest.raises(InvalidAngleError):
            RelativeFix((0, 0), 'northeast', 100)

    def test_to_dict(self, plain_config):
        record = RelativeFix((0, 0), 80, ONE_DEGREE_M, 10, 'EAST').to_dict(plain_config)
        assert list(record) == FIX_COLUMNS
        assert record['label'] == 'EAST'
        assert record['position_dms'] == '00°00′00″N, 001°00′00″E'


class TestFixesToFrame:
    """Test cases for resolving a table of fixes."""

    def setup_method(self):
        self.rows = [
            {'label': 'EAST', 'bearing': 80, 'distance': ONE_DEGREE_M},
            {'label': 'NORTH', 'bearing': '350', 'distance': ONE_DEGREE_M, 'variation': 10},
            {'label': 'BAD', 'bearing': 'x', 'distance': '1NM'},
        ]

    def test_positions(self):
        frame = fixes_to_frame((0, 0), self.rows, variation=10)
        assert len(frame) == 3
        assert frame.loc[0, 'latitude'] == pytest.approx(0, abs=1e-9)
        assert frame.loc[0, 'longitude'] == pytest.approx(1)
        assert frame.loc[1, 'latitude'] == pytest.approx(1)
        assert frame.loc[1, 'longitude'] == pytest.approx(0, abs=1e-9)

    def test_columns(self):
        frame = fixes_to_frame((0, 0), self.rows)
        assert list(frame.columns) == ['bearing', 'distance'] + FIX_COLUMNS

    def test_row_variation_overrides_default(self):
        frame = fixes_to_frame((0, 0), self.rows, variation=10)
        assert frame.loc[0, 'variation'] == 10
        assert frame.loc[1, 'true_bearing'] == pytest.approx(0)

    def test_unresolved_row(self, caplog):
        with caplog.at_level(logging.WARNING):
            frame = fixes_to_frame((0, 0), self.rows)
        assert math.isnan(frame.loc[2, 'latitude'])
        assert frame.loc[2, 'distance_m'] == pytest.approx(1852)
        assert frame.loc[2, 'position_dms'] == dms.NOT_FORMATTABLE
        assert 'Cannot resolve fix BAD' in caplog.text

    def test_dataframe_input_is_not_modified(self):
        source = pd.DataFrame({'bearing': [80], 'distance': ['60NM']})
        frame = fixes_to_frame('0, 0', source, variation=10)
        assert 'latitude' not in source.columns
        assert frame.loc[0, 'longitude'] == pytest.approx(60 * 1852 / ONE_DEGREE_M)

    def test_empty(self):
        frame = fixes_to_frame((0, 0), [])
        assert frame.empty
        assert list(frame.columns) == FIX_COLUMNS

    def test_missing_column(self):
        with pytest.raises(ValueError, match='distance'):
            fixes_to_frame((0, 0), [{'bearing': 10}])

    def test_invalid_reference(self):
        with pytest.raises(InvalidAngleError):
            fixes_to_frame('nowhere', self.rows)
