"""
Tests for formatting configuration, units and exceptions.
"""

import dataclasses
import logging

import pytest

from navgeo import units
from navgeo.config import DEFAULT_DMS_SEPARATOR, DmsConfig, get_default_config, set_default_config
from navgeo.exceptions import GeodesyError, InvalidAngleError, InvalidFormatError
from navgeo.utils import dms


class TestDmsConfig:
    """Test cases for the formatting config value."""

    def test_defaults(self):
        config = DmsConfig()
        assert config.separator == DEFAULT_DMS_SEPARATOR
        assert config.thousands_separator == ','
        assert config.decimal_separator == '.'

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DmsConfig().separator = ' '

    def test_with_separator(self):
        config = DmsConfig(thousands_separator='.', decimal_separator=',')
        spaced = config.with_separator(' ')
        assert spaced.separator == ' '
        assert spaced.decimal_separator == ','
        assert config.separator == DEFAULT_DMS_SEPARATOR

    def test_from_locale(self):
        config = DmsConfig.from_locale(separator='')
        assert config.separator == ''
        assert config.decimal_separator

    def test_set_default_config(self):
        previous = get_default_config()
        try:
            set_default_config(DmsConfig(separator='|'))
            assert dms.to_dms(1.5, 'dms') == '001°|30′|00″'
        finally:
            set_default_config(previous)
        assert get_default_config() is previous

    def test_set_default_config_type(self):
        with pytest.raises(TypeError):
            set_default_config(' ')


class TestUnits:
    """Test cases for distance conversions."""

    def test_nautical_miles(self):
        assert units.metres_to_nm(1852) == pytest.approx(1)
        assert units.nm_to_metres(1) == 1852

    def test_kilometres(self):
        assert units.metres_to_km(1500) == pytest.approx(1.5)
        assert units.km_to_metres(1.5) == 1500

    def test_miles(self):
        assert units.metres_to_miles(1609.344) == pytest.approx(1)
        assert units.miles_to_metres(1) == pytest.approx(1609.344)

    def test_factors(self):
        assert units.METRES_TO_KM * 1000 == pytest.approx(1)
        assert units.METRES_TO_NAUTICAL_MILES * 1852 == pytest.approx(1)

    def test_radius_from_environment(self, monkeypatch):
        monkeypatch.setenv('NAVGEO_EARTH_RADIUS_M', '6378137')
        assert units._radius_from_env() == 6378137.0

    def test_radius_default(self, monkeypatch):
        monkeypatch.delenv('NAVGEO_EARTH_RADIUS_M', raising=False)
        assert units._radius_from_env() == units.EARTH_RADIUS_M

    @pytest.mark.parametrize('raw', ['big', '-1', '0'])
    def test_invalid_radius_from_environment(self, monkeypatch, caplog, raw):
        monkeypatch.setenv('NAVGEO_EARTH_RADIUS_M', raw)
        with caplog.at_level(logging.WARNING):
            assert units._radius_from_env() == units.EARTH_RADIUS_M
        assert 'NAVGEO_EARTH_RADIUS_M' in caplog.text


class TestExceptions:
    """Test cases for the exception hierarchy."""

    def test_invalid_angle(self):
        error = InvalidAngleError('lat', 'abc')
        assert isinstance(error, GeodesyError)
        assert isinstance(error, ValueError)
        assert str(error) == "invalid lat 'abc'"
        assert error.field == 'lat'
        assert error.value == 'abc'

    def test_custom_message(self):
        assert str(InvalidAngleError('point', (), 'invalid (empty) point')) == 'invalid (empty) point'

    def test_invalid_format(self):
        error = InvalidFormatError('format', 'utm')
        assert isinstance(error, ValueError)
        assert str(error) == "invalid format 'utm'"
