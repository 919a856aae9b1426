"""
Reference Ellipsoid Constants.

This module provides the defining and derived constants of the WGS-84 and
GRS-80 reference ellipsoids, together with their uncertainty bounds and
sources. All constants are in SI units.

The two ellipsoids share the same semi-major axis and differ only in the
ninth significant digit of the flattening, which moves the semi-minor axis
by about 0.1 mm.

References
----------
- WGS84 parameters: NIMA TR8350.2, Third Edition, 2000
- GRS80 parameters: Moritz, H. (2000). Geodetic Reference System 1980.
  Journal of Geodesy, 74(1), 128-133.
- Featherstone, W. (1996). A Compendium of Earth Constants Relevant to
  Australian Geodetic Science.
"""

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class Constant:
    """A physical constant with uncertainty and provenance.

    Attributes
    ----------
    value : float
        The nominal value of the constant.
    uncertainty : float
        The standard uncertainty (1-sigma) of the constant.
    unit : str
        The SI unit of the constant.
    source : str
        Reference for the constant value.
    description : str
        Human-readable description of the constant.
    """
    value: float
    uncertainty: float
    unit: str
    source: str
    description: str


class WGS84Constants:
    """Registry of WGS-84 ellipsoid constants.

    The semi-major axis and the flattening are defining constants; every
    other geometric value is derived from them and rounded.
    """

    # =========================================================================
    # Defining geometrical constants
    # =========================================================================

    SEMI_MAJOR_AXIS: Final[Constant] = Constant(
        value=6_378_137.0,
        uncertainty=0.0,  # Defined exactly
        unit="m",
        source="WGS84, NIMA TR8350.2",
        description="Semi-major axis (equatorial radius) a"
    )

    FLATTENING: Final[Constant] = Constant(
        value=1.0 / 298.257223563,
        uncertainty=0.0,  # Defined exactly
        unit="dimensionless",
        source="WGS84, NIMA TR8350.2",
        description="Flattening f = (a - b) / a"
    )

    FLATTENING_INVERSE: Final[Constant] = Constant(
        value=298.257223563,
        uncertainty=0.0,
        unit="dimensionless",
        source="WGS84, NIMA TR8350.2",
        description="Inverse flattening 1/f"
    )

    # =========================================================================
    # Defining physical constants
    # =========================================================================

    GEOCENTRIC_GRAVITATIONAL_CONSTANT: Final[Constant] = Constant(
        value=3.986004418e14,
        uncertainty=8e5,
        unit="m³/s²",
        source="WGS84, NIMA TR8350.2",
        description="Geocentric gravitational constant GM"
    )

    DYNAMICAL_FORM_FACTOR: Final[Constant] = Constant(
        value=0.0010826298213129219,
        uncertainty=0.0,
        unit="dimensionless",
        source="WGS84, NIMA TR8350.2 (derived)",
        description="Dynamical form factor J2"
    )

    ANGULAR_VELOCITY: Final[Constant] = Constant(
        value=7.292115e-5,
        uncertainty=0.0,
        unit="rad/s",
        source="WGS84, NIMA TR8350.2",
        description="Nominal mean angular velocity of the Earth ω"
    )

    # =========================================================================
    # Derived geometrical constants (rounded)
    # =========================================================================

    SEMI_MINOR_AXIS: Final[Constant] = Constant(
        value=6_356_752.31424518,
        uncertainty=0.0001,
        unit="m",
        source="WGS84, NIMA TR8350.2 (derived)",
        description="Semi-minor axis (polar radius) b = a(1 - f)"
    )

    ASPECT_RATIO: Final[Constant] = Constant(
        value=0.9966471893352525,
        uncertainty=1e-16,
        unit="dimensionless",
        source="WGS84 (derived)",
        description="Aspect ratio b/a"
    )

    MEAN_RADIUS: Final[Constant] = Constant(
        value=6_371_008.771415059,
        uncertainty=0.001,
        unit="m",
        source="WGS84 (derived)",
        description="Arithmetic mean radius R1 = (2a + b) / 3"
    )

    AUTHALIC_MEAN_RADIUS: Final[Constant] = Constant(
        value=6_371_007.1809182055,
        uncertainty=0.001,
        unit="m",
        source="WGS84 (derived)",
        description="Authalic (equal-area) mean radius R2"
    )

    VOLUMETRIC_RADIUS: Final[Constant] = Constant(
        value=6_371_000.79000916,
        uncertainty=0.001,
        unit="m",
        source="WGS84 (derived)",
        description="Radius of the sphere of equal volume R3 = (a²b)^(1/3)"
    )

    POLAR_CURVATURE_RADIUS: Final[Constant] = Constant(
        value=6_399_593.625758493,
        uncertainty=0.001,
        unit="m",
        source="WGS84 (derived)",
        description="Polar radius of curvature a²/b"
    )

    MERIDIAN_CURVATURE_EQUATORIAL_RADIUS: Final[Constant] = Constant(
        value=6_335_439.327292821,
        uncertainty=0.001,
        unit="m",
        source="WGS84 (derived)",
        description="Equatorial meridian radius of curvature b²/a"
    )

    MERIDIAN_QUADRANT: Final[Constant] = Constant(
        value=10_001_965.729,
        uncertainty=0.001,
        unit="m",
        source="WGS84 (derived)",
        description="Length of the meridian quadrant (equator to pole)"
    )

    LINEAR_ECCENTRICITY: Final[Constant] = Constant(
        value=521_854.0084234,
        uncertainty=0.001,
        unit="m",
        source="WGS84 (derived)",
        description="Linear eccentricity c = sqrt(a² - b²)"
    )

    ECCENTRICITY: Final[Constant] = Constant(
        value=0.0818191908426215,
        uncertainty=1e-16,
        unit="dimensionless",
        source="WGS84 (derived)",
        description="First eccentricity e = sqrt(a² - b²) / a"
    )

    # =========================================================================
    # Derived physical constants
    # =========================================================================

    ROTATION_PERIOD: Final[Constant] = Constant(
        value=86_164.100637,
        uncertainty=1e-6,
        unit="s",
        source="WGS84 (derived)",
        description="Sidereal day 2π/ω"
    )


class GRS80Constants:
    """Registry of GRS-80 ellipsoid constants.

    GRS-80 is defined through a, GM, J2 and ω; the flattening and all
    geometric values below are derived and rounded.
    """

    SEMI_MAJOR_AXIS: Final[Constant] = Constant(
        value=6_378_137.0,
        uncertainty=0.0,  # Defined exactly
        unit="m",
        source="GRS80, Moritz (2000)",
        description="Semi-major axis (equatorial radius) a"
    )

    GEOCENTRIC_GRAVITATIONAL_CONSTANT: Final[Constant] = Constant(
        value=3.986005e14,
        uncertainty=0.0,  # Defined exactly
        unit="m³/s²",
        source="GRS80, Moritz (2000)",
        description="Geocentric gravitational constant GM"
    )

    DYNAMICAL_FORM_FACTOR: Final[Constant] = Constant(
        value=0.00108263,
        uncertainty=0.0,  # Defined exactly
        unit="dimensionless",
        source="GRS80, Moritz (2000)",
        description="Dynamical form factor J2"
    )

    ANGULAR_VELOCITY: Final[Constant] = Constant(
        value=7.292115e-5,
        uncertainty=0.0,  # Defined exactly
        unit="rad/s",
        source="GRS80, Moritz (2000)",
        description="Angular velocity of the Earth ω"
    )

    FLATTENING: Final[Constant] = Constant(
        value=0.003352810681183637418,
        uncertainty=1e-18,
        unit="dimensionless",
        source="GRS80, Moritz (2000) (derived)",
        description="Flattening f = (a - b) / a"
    )

    FLATTENING_INVERSE: Final[Constant] = Constant(
        value=298.257222100882711243,
        uncertainty=1e-12,
        unit="dimensionless",
        source="GRS80, Moritz (2000) (derived)",
        description="Inverse flattening 1/f"
    )

    SEMI_MINOR_AXIS: Final[Constant] = Constant(
        value=6_356_752.314140,
        uncertainty=0.000001,
        unit="m",
        source="GRS80, Moritz (2000) (derived)",
        description="Semi-minor axis (polar radius) b"
    )

    ASPECT_RATIO: Final[Constant] = Constant(
        value=0.996647189318816362,
        uncertainty=1e-18,
        unit="dimensionless",
        source="GRS80 (derived)",
        description="Aspect ratio b/a"
    )

    MEAN_RADIUS: Final[Constant] = Constant(
        value=6_371_008.7714,
        uncertainty=0.0001,
        unit="m",
        source="GRS80, Moritz (2000) (derived)",
        description="Arithmetic mean radius R1 = (2a + b) / 3"
    )

    AUTHALIC_MEAN_RADIUS: Final[Constant] = Constant(
        value=6_371_007.1810,
        uncertainty=0.0001,
        unit="m",
        source="GRS80, Moritz (2000) (derived)",
        description="Authalic (equal-area) mean radius R2"
    )

    VOLUMETRIC_RADIUS: Final[Constant] = Constant(
        value=6_371_000.7900,
        uncertainty=0.0001,
        unit="m",
        source="GRS80, Moritz (2000) (derived)",
        description="Radius of the sphere of equal volume R3 = (a²b)^(1/3)"
    )

    POLAR_CURVATURE_RADIUS: Final[Constant] = Constant(
        value=6_399_593.6259,
        uncertainty=0.0001,
        unit="m",
        source="GRS80, Moritz (2000) (derived)",
        description="Polar radius of curvature a²/b"
    )

    MERIDIAN_CURVATURE_EQUATORIAL_RADIUS: Final[Constant] = Constant(
        value=6_335_439.3271,
        uncertainty=0.0001,
        unit="m",
        source="GRS80, Moritz (2000) (derived)",
        description="Equatorial meridian radius of curvature b²/a"
    )

    MERIDIAN_QUADRANT: Final[Constant] = Constant(
        value=10_001_965.7293,
        uncertainty=0.0001,
        unit="m",
        source="GRS80, Moritz (2000) (derived)",
        description="Length of the meridian quadrant (equator to pole)"
    )

    LINEAR_ECCENTRICITY: Final[Constant] = Constant(
        value=521_854.0097,
        uncertainty=0.0001,
        unit="m",
        source="GRS80, Moritz (2000) (derived)",
        description="Linear eccentricity c = sqrt(a² - b²)"
    )

    ECCENTRICITY: Final[Constant] = Constant(
        value=0.0818191910428,
        uncertainty=1e-13,
        unit="dimensionless",
        source="GRS80, Moritz (2000) (derived)",
        description="First eccentricity e = sqrt(a² - b²) / a"
    )

    ROTATION_PERIOD: Final[Constant] = Constant(
        value=86_164.100637,
        uncertainty=1e-6,
        unit="s",
        source="GRS80 (derived)",
        description="Sidereal day 2π/ω"
    )
