"""
Type Definitions for Geographic Coordinates.

This module defines the coordinate value type shared by every distance
calculation. A `Coordinate` is an immutable latitude/longitude pair in
decimal degrees, cheap to copy and safe to share between threads.

Design Rationale
----------------
Out-of-range values are representable on purpose. Construction never
raises; instead `Coordinate.is_valid()` flags them, and every distance
function turns an invalid input into a NaN result. This keeps bulk
computations free of exception handling in their inner loops.
"""

import math
from dataclasses import dataclass
from typing import Tuple, Union

import numpy as np
import pint
from numpy.typing import NDArray

from common.units import STANDARD_UNITS, to_magnitude

LAT_LOWER_BOUND = -90.0
LAT_UPPER_BOUND = 90.0
LON_LOWER_BOUND = -180.0
LON_UPPER_BOUND = 180.0

_DEG_TO_RAD = math.pi / 180


@dataclass(frozen=True)
class Coordinate:
    """A geographic coordinate on the reference ellipsoid.

    Attributes
    ----------
    latitude : float
        Geodetic latitude in DEGREES. Valid range: [-90, 90].
    longitude : float
        Geodetic longitude in DEGREES. Valid range: [-180, 180].

    Notes
    -----
    - Latitude is positive north, negative south.
    - Longitude is positive east, negative west.
    - Non-finite values (±inf) are undefined input. They currently fail
      `is_valid()`, but callers must not rely on any particular result.

    Examples
    --------
    >>> melbourne = Coordinate(-37.8136, 144.9631)
    >>> melbourne.is_valid()
    True
    >>> Coordinate(91.0, 0.0).is_valid()
    False
    """
    latitude: float  # degrees
    longitude: float  # degrees

    @property
    def latitude_radians(self) -> float:
        """Latitude in radians."""
        return self.latitude * _DEG_TO_RAD

    @property
    def longitude_radians(self) -> float:
        """Longitude in radians."""
        return self.longitude * _DEG_TO_RAD

    def to_radians(self) -> Tuple[float, float]:
        """Return (latitude_radians, longitude_radians)."""
        return self.latitude_radians, self.longitude_radians

    def equals(self, other: 'Coordinate') -> bool:
        """Exact comparison of both components, without tolerance.

        This gates the zero-distance fast path of the distance functions,
        so two points compare equal only if they are the same point to the
        last bit of precision.
        """
        return self.latitude == other.latitude and self.longitude == other.longitude

    def antipode(self) -> 'Coordinate':
        """Return the antipode as (-lat, 180 - |lon|)."""
        return Coordinate(-self.latitude, 180 - abs(self.longitude))

    def is_antipode_of(self, other: 'Coordinate') -> bool:
        """Whether either point is the `antipode()` of the other.

        The check is symmetric: ``p.is_antipode_of(q) == q.is_antipode_of(p)``.
        """
        return (
            (self.latitude == -other.latitude
             and self.longitude == 180 - abs(other.longitude))
            or (other.latitude == -self.latitude
                and other.longitude == 180 - abs(self.longitude))
        )

    def is_valid(self) -> bool:
        """Inclusive range check on both components. NaN is never valid."""
        return (
            LAT_LOWER_BOUND <= self.latitude <= LAT_UPPER_BOUND
            and LON_LOWER_BOUND <= self.longitude <= LON_UPPER_BOUND
        )

    @classmethod
    def from_radians(cls, lat_rad: float, lon_rad: float) -> 'Coordinate':
        """Create coordinate from radians (convenience constructor)."""
        return cls(latitude=math.degrees(lat_rad), longitude=math.degrees(lon_rad))

    @classmethod
    def from_quantities(
        cls,
        latitude: Union[float, pint.Quantity],
        longitude: Union[float, pint.Quantity]
    ) -> 'Coordinate':
        """Create coordinate from angle quantities in any angular unit.

        Parameters
        ----------
        latitude, longitude : float or pint.Quantity
            Angles, e.g. ``Q_(0.5, 'radian')`` or ``Q_(30, 'degree')``. Bare
            numbers are read as degrees, with a warning.

        Returns
        -------
        Coordinate
            Coordinate with internally stored degrees.

        Raises
        ------
        ValueError
            If either quantity is not an angle.
        """
        return cls(
            latitude=to_magnitude(latitude, STANDARD_UNITS["latitude"], stacklevel=3),
            longitude=to_magnitude(longitude, STANDARD_UNITS["longitude"], stacklevel=3)
        )


def valid_coordinate_mask(
    latitudes: NDArray[np.float64],
    longitudes: NDArray[np.float64]
) -> NDArray[np.bool_]:
    """Element-wise `Coordinate.is_valid` for arrays of degrees."""
    return (
        (latitudes >= LAT_LOWER_BOUND) & (latitudes <= LAT_UPPER_BOUND)
        & (longitudes >= LON_LOWER_BOUND) & (longitudes <= LON_UPPER_BOUND)
    )
