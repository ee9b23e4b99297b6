import pytest

from navgeo.config import DmsConfig
from navgeo.models.geopoint import GeoPoint


@pytest.fixture
def plain_config() -> DmsConfig:
    """Formatting config without separators between degrees, minutes and seconds."""
    return DmsConfig(separator='', thousands_separator=',', decimal_separator='.')


@pytest.fixture
def cambridge() -> GeoPoint:
    return GeoPoint(52.205, 0.119, 'Cambridge')


@pytest.fixture
def paris() -> GeoPoint:
    return GeoPoint(48.857, 2.351, 'Paris')


@pytest.fixture
def greenwich() -> GeoPoint:
    """Royal Observatory, Greenwich."""
    return GeoPoint(51.47788, -0.00147)
