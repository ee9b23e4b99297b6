#!/usr/bin/env python3

import sys
import math
import argparse
import logging
from typing import List, Optional

from navgeo.config import get_default_config
from navgeo.exceptions import GeodesyError
from navgeo.fixes import RelativeFix
from navgeo.geodesy import distance, initial_bearing, final_bearing, rhumb_distance, rhumb_bearing
from navgeo.models import GeoPoint
from navgeo.units import metres_to_km, metres_to_nm
from navgeo.utils import dms

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

COMMAND_ARGS = {
    'fix': 'LAT LON BEARING DISTANCE',
    'distance': 'LAT1 LON1 LAT2 LON2',
    'format': 'ANGLE [ANGLE ...]',
}


class Command:
    """Command-line interface for navgeo."""

    def __init__(self, args):
        """
        Initialize the command interface.

        Args:
            args: Command line arguments
        """
        self.args = args
        self.config = get_default_config()
        if args.separator is not None:
            self.config = self.config.with_separator(args.separator)

    def _values(self, count: int) -> List[str]:
        values = self.args.values
        if len(values) != count:
            raise SystemExit(f"{self.args.command} expects {COMMAND_ARGS[self.args.command]}")
        return values

    def _format_bearing(self, bearing: Optional[float]) -> str:
        if bearing is None:
            return 'undefined'
        return f"{dms.to_brng(bearing, self.args.format, self.args.precision, self.config)} ({dms.compass_point(bearing)})"

    def run_fix(self):
        """Position from a reference point, magnetic bearing and distance."""
        lat, lon, bearing, dist = self._values(4)
        fix = RelativeFix(GeoPoint.parse(lat, lon), bearing, dist, self.args.variation, self.args.label)
        position = fix.position

        logger.debug(f'Reference {fix.reference!r}, true bearing {fix.true_bearing}')
        print(position.to_string(self.args.format, self.args.precision, self.config))
        print(f"true bearing {self._format_bearing(fix.true_bearing)}, {fix.distance_nm:.2f} nm")

    def run_distance(self):
        """Great circle and rhumb line distance and bearings between two points."""
        lat1, lon1, lat2, lon2 = self._values(4)
        p1 = GeoPoint.parse(lat1, lon1)
        p2 = GeoPoint.parse(lat2, lon2)

        d = distance(p1, p2)
        rhumb = rhumb_distance(p1, p2)
        print(f"great circle: {metres_to_km(d):.3f} km, {metres_to_nm(d):.2f} nm")
        print(f"  initial bearing {self._format_bearing(initial_bearing(p1, p2))}")
        print(f"  final bearing {self._format_bearing(final_bearing(p1, p2))}")
        print(f"rhumb line: {metres_to_km(rhumb):.3f} km, {metres_to_nm(rhumb):.2f} nm")
        print(f"  bearing {self._format_bearing(rhumb_bearing(p1, p2))}")

    def run_format(self):
        """Show angles as latitude, longitude and bearing."""
        if not self.args.values:
            self._values(1)
        for value in self.args.values:
            degrees = dms.parse(dms.from_locale(value, self.config))
            if math.isnan(degrees):
                logger.warning(f'Cannot parse angle {value}')
                continue
            fmt, dp = self.args.format, self.args.precision
            print(f"{value}: {degrees}")
            print(f"  lat {dms.to_lat(degrees, fmt, dp, self.config)}")
            print(f"  lon {dms.to_lon(degrees, fmt, dp, self.config)}")
            print(f"  brng {dms.to_brng(degrees, fmt, dp, self.config)}")

    def run(self):
        """Run the specified command."""
        getattr(self, f'run_{self.args.command}')()


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(description='Spherical earth navigation calculations')
    parser.add_argument('command', help='Command to execute', choices=list(COMMAND_ARGS))
    parser.add_argument('values', help='Coordinates, bearings and distances for the command', nargs='*')
    parser.add_argument('-f', '--format', help='Angle format', choices=['d', 'dm', 'dms'], default='dms')
    parser.add_argument('-p', '--precision', help='Decimal places (default depends on format)', type=int)
    parser.add_argument('-m', '--variation', help='Magnetic variation, east positive', type=float, default=0.0)
    parser.add_argument('-l', '--label', help='Name of the computed fix')
    parser.add_argument('-s', '--separator', help='Separator between degrees, minutes and seconds')
    parser.add_argument('-v', '--verbose', help='Verbose output', action='store_true')

    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    cmd = Command(args)
    try:
        cmd.run()
    except GeodesyError as e:
        logger.error(f'{args.command} failed: {e}')
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
