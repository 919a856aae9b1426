"""
Reference Ellipsoid Models.

An ellipsoid of revolution is fully described by its semi-major axis `a`
and its flattening `f`. Every other geometric quantity used by the distance
calculations (semi-minor axis, mean radius, eccentricities) is derived from
that pair.

References
----------
- NIMA TR8350.2: WGS84 parameters
- Moritz, H. (2000). Geodetic Reference System 1980.
"""

import math
from dataclasses import dataclass

from common.constants import Constant, GRS80Constants, WGS84Constants


@dataclass(frozen=True)
class EllipsoidParameters:
    """Parameters defining a reference ellipsoid.

    Attributes
    ----------
    a : float
        Semi-major axis (equatorial radius) in meters.
    f : float
        Flattening: f = (a - b) / a
    name : str
        Identifier for the ellipsoid.

    Derived Parameters
    ------------------
    b : float
        Semi-minor axis (polar radius) in meters.
    flattening_inverse : float
        1 / f, infinite for a sphere.
    aspect_ratio : float
        b / a
    mean_radius : float
        Arithmetic mean radius (2a + b) / 3 in meters.
    e2 : float
        First eccentricity squared: e² = (a² - b²) / a²
    ep2 : float
        Second eccentricity squared: e'² = (a² - b²) / b²

    Notes
    -----
    Construction never validates. A malformed pair (a <= 0, f outside
    [0, 1), or NaN) is flagged by `is_valid()`, and every distance function
    answers NaN for it instead of raising.
    """
    a: float
    f: float
    name: str

    @property
    def b(self) -> float:
        """Semi-minor axis in meters."""
        return self.a * (1 - self.f)

    @property
    def flattening_inverse(self) -> float:
        if self.f == 0:
            return math.inf
        return 1 / self.f

    @property
    def aspect_ratio(self) -> float:
        return 1 - self.f

    @property
    def mean_radius(self) -> float:
        """Arithmetic mean radius R1 in meters."""
        return (2 * self.a + self.b) / 3

    @property
    def e2(self) -> float:
        """First eccentricity squared."""
        return self.f * (2 - self.f)

    @property
    def ep2(self) -> float:
        """Second eccentricity squared."""
        return self.e2 / (1 - self.e2)

    def is_valid(self) -> bool:
        """Whether (a, f) describes a real oblate ellipsoid or a sphere."""
        return math.isfinite(self.a) and self.a > 0 and 0 <= self.f < 1

    @classmethod
    def from_constants(
        cls,
        semi_major_axis: Constant,
        flattening: Constant,
        name: str
    ) -> 'EllipsoidParameters':
        """Build an ellipsoid from a pair of registry constants."""
        return cls(a=semi_major_axis.value, f=flattening.value, name=name)


# WGS84 ellipsoid - the default for every distance calculation
WGS84Ellipsoid = EllipsoidParameters.from_constants(
    WGS84Constants.SEMI_MAJOR_AXIS,
    WGS84Constants.FLATTENING,
    name="WGS84"
)

GRS80Ellipsoid = EllipsoidParameters.from_constants(
    GRS80Constants.SEMI_MAJOR_AXIS,
    GRS80Constants.FLATTENING,
    name="GRS80"
)
