"""
Vincenty Inverse Geodesic Solver.

Given two points on a reference ellipsoid, compute the ellipsoidal distance
between them and, optionally, the forward and reverse azimuths of the
geodesic joining them.

Scientific Context
------------------
Domain: Geodesy, geodesics on an ellipsoid of revolution
Model: Vincenty (1975) inverse formulae on the auxiliary sphere

The geodesic is mapped onto an auxiliary sphere by replacing each geodetic
latitude with its reduced latitude u = atan((1 - f) tan φ). On that sphere
the longitude difference λ is found by fixed-point iteration starting from
the ellipsoidal longitude difference L. Once λ settles, the arc length σ
is converted back to an ellipsoidal distance by a series in u².

Notation
--------
a, b, f     semi-major axis, semi-minor axis, flattening
u1, u2      reduced latitudes of the two points
L           longitude difference on the ellipsoid
λ           longitude difference on the auxiliary sphere
σ           angular separation of the points on the auxiliary sphere
σm          angular separation of the geodesic midpoint from the equator
α           azimuth of the geodesic at the equator
α1, α2      forward azimuth at p1 and reverse azimuth at p2

Failure Modes
-------------
The iteration is known not to converge for nearly antipodal points. Those
cases, exact antipodes and invalid coordinates all produce NaN for every
output. NaN is the result, not an error: callers test for it with
`math.isnan`.

References
----------
- Vincenty, T. (1975). Direct and inverse solutions of geodesics on the
  ellipsoid with application of nested equations. Survey Review, 23(176).
- Geoscience Australia, Geodetic Calculations: Vincenty's Formulae.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from common.logging_config import get_logger
from common.types import Coordinate
from geodesy.ellipsoid import EllipsoidParameters, WGS84Ellipsoid

logger = get_logger(__name__)


DEFAULT_TOLERANCE = 1e-12  # approximately 0.06 mm
MAX_ITERATIONS = 50

FULL_ANGLE_RAD = 2 * math.pi
RAD_TO_DEG = 180 / math.pi


class SolverState(Enum):
    """States of a single inverse solve.

    INIT and ITERATING are never returned: they only name the phases before
    and during the λ iteration. Every `InverseResult` carries one of the
    terminal states; only CONVERGED results are computed from the
    iteration, all others are fixed sentinel outputs.
    """
    INIT = "init"
    ITERATING = "iterating"
    CONVERGED = "converged"
    DIVERGED = "diverged"
    ANTIPODAL = "antipodal"
    DEGENERATE = "degenerate"
    INVALID = "invalid"


@dataclass
class SolverConfig:
    """Configuration for the inverse iteration.

    Attributes
    ----------
    tolerance : float
        Convergence threshold on successive λ estimates, in radians.
        Non-positive (or NaN) values are replaced by DEFAULT_TOLERANCE.
    max_iterations : int
        Iteration cap. Exceeding it reports the pair as non-convergent.
    """
    tolerance: float = DEFAULT_TOLERANCE
    max_iterations: int = MAX_ITERATIONS

    def __post_init__(self):
        if not self.tolerance > 0:
            self.tolerance = DEFAULT_TOLERANCE
        if self.max_iterations < 1:
            raise ValueError(
                f"max_iterations must be at least 1, got {self.max_iterations}"
            )


@dataclass(frozen=True)
class InverseResult:
    """Result of an inverse solve.

    Attributes
    ----------
    distance_m : float
        Ellipsoidal distance in meters, or NaN.
    azimuth_forward_deg : float
        Azimuth at p1 towards p2, degrees in [0, 360). NaN when not
        requested or not computable.
    azimuth_reverse_deg : float
        Azimuth at p2 back towards p1, degrees in [0, 360). NaN when not
        requested or not computable.
    state : SolverState
        Terminal state of the solve.
    iterations : int
        Number of λ updates performed (0 for fast paths).
    """
    distance_m: float
    azimuth_forward_deg: float
    azimuth_reverse_deg: float
    state: SolverState
    iterations: int = 0

    @property
    def converged(self) -> bool:
        """Whether the distance is a number."""
        return self.state in (SolverState.CONVERGED, SolverState.DEGENERATE)

    def as_tuple(self) -> Tuple[float, float, float]:
        return self.distance_m, self.azimuth_forward_deg, self.azimuth_reverse_deg


def _undefined(state: SolverState, iterations: int = 0) -> InverseResult:
    return InverseResult(math.nan, math.nan, math.nan, state, iterations)


def _sincos(angle: float) -> Tuple[float, float]:
    return math.sin(angle), math.cos(angle)


def _quadrant_rad_to_degrees(rad: float) -> float:
    """Map an atan2 result from (-π, π] to degrees in [0, 360)."""
    if rad < 0:
        return (rad + FULL_ANGLE_RAD) * RAD_TO_DEG
    return rad * RAD_TO_DEG


def solve_inverse(
    p1: Coordinate,
    p2: Coordinate,
    config: Optional[SolverConfig] = None,
    ellipsoid: EllipsoidParameters = WGS84Ellipsoid,
    compute_azimuth: bool = False
) -> InverseResult:
    """Solve the inverse geodesic problem with Vincenty's iteration.

    Parameters
    ----------
    p1, p2 : Coordinate
        End points in degrees.
    config : SolverConfig, optional
        Tolerance and iteration cap (default: SolverConfig()).
    ellipsoid : EllipsoidParameters
        Reference ellipsoid (default: WGS84).
    compute_azimuth : bool
        Whether to compute the forward and reverse azimuths.

    Returns
    -------
    InverseResult
        Distance, azimuths and the terminal solver state.

    Notes
    -----
    Checks are made in this order:

    1. Equal points: distance and both azimuths are 0 (DEGENERATE).
    2. Exact antipodes per `Coordinate.is_antipode_of`: NaN (ANTIPODAL).
    3. Out-of-range coordinates or a malformed ellipsoid: NaN (INVALID).

    Otherwise the λ iteration runs at least once and at most
    `config.max_iterations` times. A vanishing sin σ or an exhausted
    iteration budget yields NaN (DIVERGED).

    When either latitude is exactly 0 the correction coefficient C and the
    midpoint term cos(2σm) are both taken as 0.
    """
    if p1.equals(p2):
        return InverseResult(0.0, 0.0, 0.0, SolverState.DEGENERATE)

    if p1.is_antipode_of(p2):
        logger.debug(f"Antipodal points {p1} and {p2}; inverse iteration does not converge")
        return _undefined(SolverState.ANTIPODAL)

    if not (p1.is_valid() and p2.is_valid()):
        logger.debug(f"Invalid coordinate in pair {p1}, {p2}")
        return _undefined(SolverState.INVALID)

    if not ellipsoid.is_valid():
        logger.debug(f"Malformed ellipsoid {ellipsoid}")
        return _undefined(SolverState.INVALID)

    if config is None:
        config = SolverConfig()
    epsilon = config.tolerance

    # Initial conditions setup
    a = ellipsoid.a
    b = ellipsoid.b
    f = ellipsoid.f

    u1 = math.atan((1 - f) * math.tan(p1.latitude_radians))
    u2 = math.atan((1 - f) * math.tan(p2.latitude_radians))
    L = p2.longitude_radians - p1.longitude_radians
    lam = L

    sin_u1, cos_u1 = _sincos(u1)
    sin_u2, cos_u2 = _sincos(u2)

    f16 = f / 16
    on_equator = p1.latitude == 0 or p2.latitude == 0

    for iteration in range(1, config.max_iterations + 1):
        sin_lam, cos_lam = _sincos(lam)

        sin_sigma = math.sqrt(
            (cos_u2 * sin_lam) ** 2
            + (cos_u1 * sin_u2 - sin_u1 * cos_u2 * cos_lam) ** 2
        )
        if sin_sigma == 0:
            # Coincident or diametrically opposed on the auxiliary sphere:
            # the azimuth is indeterminate.
            logger.debug(f"sin σ vanished at iteration {iteration} for {p1}, {p2}")
            return _undefined(SolverState.DIVERGED, iteration)

        cos_sigma = sin_u1 * sin_u2 + cos_u1 * cos_u2 * cos_lam
        sigma = math.atan2(sin_sigma, cos_sigma)

        sin_alpha = cos_u1 * cos_u2 * sin_lam / sin_sigma
        cos2_alpha = 1 - sin_alpha * sin_alpha

        cos_2sigma_m = 0.0
        C = 0.0
        if not on_equator:
            if cos2_alpha != 0:
                cos_2sigma_m = cos_sigma - 2 * sin_u1 * sin_u2 / cos2_alpha
            C = f16 * cos2_alpha * (4 + f * (4 - 3 * cos2_alpha))

        lam_prev = lam
        lam = L + (1 - C) * f * sin_alpha * (
            sigma + C * sin_sigma * (
                cos_2sigma_m + C * cos_sigma * (-1 + 2 * cos_2sigma_m * cos_2sigma_m)
            )
        )

        if abs(lam - lam_prev) <= epsilon:
            break
    else:
        logger.debug(
            f"No convergence after {config.max_iterations} iterations for {p1}, {p2}"
        )
        return _undefined(SolverState.DIVERGED, config.max_iterations)

    b_squared = b * b
    u_squared = cos2_alpha * (a * a - b_squared) / b_squared

    A = 1 + u_squared / 16384 * (4096 + u_squared * (-768 + u_squared * (320 - 175 * u_squared)))
    B = u_squared / 1024 * (256 + u_squared * (-128 + u_squared * (74 - 47 * u_squared)))
    delta_sigma = B * sin_sigma * (
        cos_2sigma_m + B / 4 * (
            cos_sigma * (-1 + 2 * cos_2sigma_m * cos_2sigma_m)
            - B / 6 * cos_2sigma_m * (-3 + 4 * sin_sigma * sin_sigma)
            * (-3 + 4 * cos_2sigma_m * cos_2sigma_m)
        )
    )

    distance = b * A * (sigma - delta_sigma)

    azimuth1 = math.nan
    azimuth2 = math.nan
    if compute_azimuth:
        sin_lam, cos_lam = _sincos(lam)
        azimuth1 = _quadrant_rad_to_degrees(math.atan2(
            cos_u2 * sin_lam,
            cos_u1 * sin_u2 - sin_u1 * cos_u2 * cos_lam
        ))
        azimuth2 = _quadrant_rad_to_degrees(math.atan2(
            cos_u1 * sin_lam,
            -sin_u1 * cos_u2 + cos_u1 * sin_u2 * cos_lam
        ))
        # Express relative to north, pointing back along the geodesic
        azimuth2 = (azimuth2 + 180) % 360

    return InverseResult(distance, azimuth1, azimuth2, SolverState.CONVERGED, iteration)


def vincenty_inverse(
    p1: Coordinate,
    p2: Coordinate,
    tolerance: float = DEFAULT_TOLERANCE,
    compute_azimuth: bool = False,
    ellipsoid: EllipsoidParameters = WGS84Ellipsoid,
    max_iterations: int = MAX_ITERATIONS
) -> Tuple[float, float, float]:
    """Ellipsoidal distance and azimuths between two points.

    A `tolerance` of 0 or less selects DEFAULT_TOLERANCE (about 0.06 mm).

    Returns
    -------
    Tuple[float, float, float]
        (distance_m, azimuth1_deg, azimuth2_deg). Equal points give
        (0, 0, 0); antipodal, invalid and non-convergent pairs give NaN
        for all three; azimuths are NaN when not requested.

    Examples
    --------
    >>> d, az1, az2 = vincenty_inverse(
    ...     Coordinate(-37.57037203, 144.25295244),
    ...     Coordinate(-37.39101561, 143.55353839),
    ...     compute_azimuth=True
    ... )
    >>> print(f"{d:.3f} m, {az1:.3f}°, {az2:.3f}°")
    64985.585 m, 287.624°, 108.050°
    """
    config = SolverConfig(tolerance=tolerance, max_iterations=max_iterations)
    return solve_inverse(p1, p2, config, ellipsoid, compute_azimuth).as_tuple()
