"""
Distance Calculations on the Reference Ellipsoid.

This module is the single entry point for callers that do not care which
algorithm computes a distance. It dispatches between three methods:

1. HAVERSINE: spherical great-circle distance on the mean radius. Closed
   form and fast, but up to ~0.6% off the ellipsoidal value.

2. VINCENTY: iterative inverse solution on the ellipsoid, accurate to well
   under a millimetre, NaN for (nearly) antipodal pairs.

3. KARNEY: the GeographicLib algorithm as wrapped by `pyproj`. Converges
   for every pair, including antipodes, and serves as an independent
   reference for the other two.

All three share the same input contract: equal points give 0, and invalid
coordinates or a malformed ellipsoid give NaN.

References
----------
- Karney, C.F.F. (2013). Algorithms for geodesics. Journal of Geodesy, 87(1), 43-55.
- GeographicLib: https://geographiclib.sourceforge.io/
"""

import math
from enum import Enum
from functools import lru_cache
from typing import Optional, Tuple, Union

import numpy as np
import pint
from numpy.typing import ArrayLike, NDArray
from pyproj import Geod

from common.logging_config import get_logger
from common.types import Coordinate, valid_coordinate_mask
from common.units import Q_, STANDARD_UNITS
from geodesy.ellipsoid import EllipsoidParameters, WGS84Ellipsoid
from geodesy.haversine import haversine_distance, haversine_distance_batch
from geodesy.vincenty import SolverConfig, solve_inverse

logger = get_logger(__name__)


class DistanceMethod(Enum):
    """Available distance algorithms."""
    HAVERSINE = "haversine"
    VINCENTY = "vincenty"
    KARNEY = "karney"


@lru_cache(maxsize=None)
def _geod_for(ellipsoid: EllipsoidParameters) -> Geod:
    """Geodesic calculator for an ellipsoid, built once per ellipsoid."""
    return Geod(a=ellipsoid.a, f=ellipsoid.f)


def karney_inverse(
    p1: Coordinate,
    p2: Coordinate,
    ellipsoid: EllipsoidParameters = WGS84Ellipsoid
) -> Tuple[float, float, float]:
    """Solve the inverse geodesic problem with GeographicLib.

    Parameters
    ----------
    p1, p2 : Coordinate
        End points in degrees.
    ellipsoid : EllipsoidParameters
        Reference ellipsoid (default: WGS84).

    Returns
    -------
    Tuple[float, float, float]
        (distance_m, azimuth1_deg, azimuth2_deg) with the same conventions
        as `vincenty_inverse`: azimuths in [0, 360), the second one pointing
        from p2 back towards p1.
    """
    if p1.equals(p2):
        return 0.0, 0.0, 0.0

    if not (p1.is_valid() and p2.is_valid() and ellipsoid.is_valid()):
        return math.nan, math.nan, math.nan

    az_forward, az_back, distance = _geod_for(ellipsoid).inv(
        p1.longitude, p1.latitude, p2.longitude, p2.latitude
    )

    return float(distance), float(az_forward) % 360, float(az_back) % 360


def geodesic_distance(
    p1: Coordinate,
    p2: Coordinate,
    method: Union[DistanceMethod, str] = DistanceMethod.VINCENTY,
    ellipsoid: EllipsoidParameters = WGS84Ellipsoid,
    config: Optional[SolverConfig] = None
) -> float:
    """Compute the distance between two points with the chosen method.

    Parameters
    ----------
    p1, p2 : Coordinate
        End points in degrees.
    method : DistanceMethod or str
        Algorithm to use (default: VINCENTY).
    ellipsoid : EllipsoidParameters
        Reference ellipsoid (default: WGS84).
    config : SolverConfig, optional
        Solver settings, used by VINCENTY only.

    Returns
    -------
    float
        Distance in meters, or NaN.

    Raises
    ------
    ValueError
        If `method` is not a known DistanceMethod.
    """
    method = DistanceMethod(method)

    if method is DistanceMethod.HAVERSINE:
        return haversine_distance(p1, p2, ellipsoid)
    if method is DistanceMethod.VINCENTY:
        return solve_inverse(p1, p2, config, ellipsoid).distance_m
    return karney_inverse(p1, p2, ellipsoid)[0]


def geodesic_distance_quantity(
    p1: Coordinate,
    p2: Coordinate,
    method: Union[DistanceMethod, str] = DistanceMethod.VINCENTY,
    ellipsoid: EllipsoidParameters = WGS84Ellipsoid,
    config: Optional[SolverConfig] = None
) -> pint.Quantity:
    """Same as `geodesic_distance`, returned as a length quantity."""
    return Q_(
        geodesic_distance(p1, p2, method, ellipsoid, config),
        STANDARD_UNITS["distance"]
    )


def geodesic_distance_batch(
    lat1_deg: ArrayLike,
    lon1_deg: ArrayLike,
    lat2_deg: ArrayLike,
    lon2_deg: ArrayLike,
    method: Union[DistanceMethod, str] = DistanceMethod.VINCENTY,
    ellipsoid: EllipsoidParameters = WGS84Ellipsoid,
    config: Optional[SolverConfig] = None
) -> NDArray[np.float64]:
    """Compute distances for arrays of point pairs.

    Parameters
    ----------
    lat1_deg, lon1_deg : array_like
        First points in degrees.
    lat2_deg, lon2_deg : array_like
        Second points in degrees.
    method : DistanceMethod or str
        Algorithm to use (default: VINCENTY).
    ellipsoid : EllipsoidParameters
        Reference ellipsoid (default: WGS84).
    config : SolverConfig, optional
        Solver settings, used by VINCENTY only.

    Returns
    -------
    ndarray
        Distances in meters with the broadcast shape of the inputs. Pairs
        that fail (invalid, antipodal, non-convergent) are NaN.

    Notes
    -----
    HAVERSINE and KARNEY are vectorized. VINCENTY solves each pair in turn
    on the calling thread; split the arrays across workers to parallelize.
    """
    method = DistanceMethod(method)

    lat1, lon1, lat2, lon2 = np.broadcast_arrays(
        np.asarray(lat1_deg, dtype=np.float64),
        np.asarray(lon1_deg, dtype=np.float64),
        np.asarray(lat2_deg, dtype=np.float64),
        np.asarray(lon2_deg, dtype=np.float64),
    )

    if method is DistanceMethod.HAVERSINE:
        distances = haversine_distance_batch(lat1, lon1, lat2, lon2, ellipsoid)
    elif method is DistanceMethod.VINCENTY:
        if config is None:
            config = SolverConfig()
        distances = np.empty(lat1.shape, dtype=np.float64)
        for idx in np.ndindex(lat1.shape):
            result = solve_inverse(
                Coordinate(float(lat1[idx]), float(lon1[idx])),
                Coordinate(float(lat2[idx]), float(lon2[idx])),
                config,
                ellipsoid
            )
            distances[idx] = result.distance_m
    else:
        distances = _karney_distance_batch(lat1, lon1, lat2, lon2, ellipsoid)

    nan_count = int(np.count_nonzero(np.isnan(distances)))
    logger.info(
        f"Computed {distances.size} {method.value} distances on {ellipsoid.name}"
    )
    if nan_count:
        logger.warning(
            f"{nan_count} of {distances.size} {method.value} distances are NaN "
            f"(invalid, antipodal or non-convergent pairs)"
        )

    return distances


def _karney_distance_batch(
    lat1: NDArray[np.float64],
    lon1: NDArray[np.float64],
    lat2: NDArray[np.float64],
    lon2: NDArray[np.float64],
    ellipsoid: EllipsoidParameters
) -> NDArray[np.float64]:
    valid = valid_coordinate_mask(lat1, lon1) & valid_coordinate_mask(lat2, lon2)
    equal = (lat1 == lat2) & (lon1 == lon2)

    if not ellipsoid.is_valid():
        return np.where(equal, 0.0, np.nan)

    # Feed placeholders for invalid pairs, masked out below
    _, _, distances = _geod_for(ellipsoid).inv(
        np.where(valid, lon1, 0.0).ravel(),
        np.where(valid, lat1, 0.0).ravel(),
        np.where(valid, lon2, 0.0).ravel(),
        np.where(valid, lat2, 0.0).ravel(),
    )
    distances = np.asarray(distances, dtype=np.float64).reshape(lat1.shape)

    return np.where(equal, 0.0, np.where(valid, distances, np.nan))
