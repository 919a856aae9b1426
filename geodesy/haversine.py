"""
Great-Circle Distance via the Haversine Formula.

The haversine formula treats the Earth as a sphere of the ellipsoid's mean
radius. It is closed-form and cheap, but carries up to ~0.6% error compared
with the ellipsoidal geodesic; use `geodesy.vincenty` where that matters.

Invalid coordinates are reported as NaN, never as an exception. The
`h > 1` guard covers the same situation from inside the formula: `asin`
is undefined there, which can only happen with out-of-range input.
"""

import math

import numpy as np
from numpy.typing import ArrayLike, NDArray

from common.types import Coordinate, valid_coordinate_mask
from geodesy.ellipsoid import EllipsoidParameters, WGS84Ellipsoid


def haversine_distance(
    p1: Coordinate,
    p2: Coordinate,
    ellipsoid: EllipsoidParameters = WGS84Ellipsoid
) -> float:
    """Compute the great-circle distance between two points.

    Parameters
    ----------
    p1, p2 : Coordinate
        End points in degrees.
    ellipsoid : EllipsoidParameters
        Reference ellipsoid whose mean radius is used (default: WGS84).

    Returns
    -------
    float
        Distance in meters, or NaN if either point or the ellipsoid is
        invalid.

    Examples
    --------
    >>> d = haversine_distance(
    ...     Coordinate(-37.550643, -56.51251),
    ...     Coordinate(-34.555733, -58.520749)
    ... )
    >>> print(f"{d / 1000:.3f} km")
    378.781 km
    """
    if p1.equals(p2):
        return 0.0

    if not (p1.is_valid() and p2.is_valid() and ellipsoid.is_valid()):
        return math.nan

    phi1 = p1.latitude_radians
    phi2 = p2.latitude_radians

    lambda1 = p1.longitude_radians
    lambda2 = p2.longitude_radians

    lat_half_versine = math.sin((phi2 - phi1) / 2)
    lon_half_versine = math.sin((lambda2 - lambda1) / 2)

    h = math.sqrt(
        lat_half_versine * lat_half_versine
        + lon_half_versine * lon_half_versine * math.cos(phi1) * math.cos(phi2)
    )

    # d is only real for 0 <= h <= 1
    if h > 1:
        return math.nan

    return 2 * ellipsoid.mean_radius * math.asin(h)


def haversine_distance_batch(
    lat1_deg: ArrayLike,
    lon1_deg: ArrayLike,
    lat2_deg: ArrayLike,
    lon2_deg: ArrayLike,
    ellipsoid: EllipsoidParameters = WGS84Ellipsoid
) -> NDArray[np.float64]:
    """Vectorized haversine distance for arrays of point pairs.

    Parameters
    ----------
    lat1_deg, lon1_deg : array_like
        First points in degrees.
    lat2_deg, lon2_deg : array_like
        Second points in degrees.
    ellipsoid : EllipsoidParameters
        Reference ellipsoid (default: WGS84).

    Returns
    -------
    ndarray
        Distances in meters, NaN where a pair holds an invalid point.

    Notes
    -----
    Inputs broadcast against each other, so one point can be compared
    with many. The element-wise rules match `haversine_distance`.
    """
    lat1 = np.asarray(lat1_deg, dtype=np.float64)
    lon1 = np.asarray(lon1_deg, dtype=np.float64)
    lat2 = np.asarray(lat2_deg, dtype=np.float64)
    lon2 = np.asarray(lon2_deg, dtype=np.float64)

    phi1 = np.radians(lat1)
    phi2 = np.radians(lat2)

    lat_half_versine = np.sin((phi2 - phi1) / 2)
    lon_half_versine = np.sin((np.radians(lon2) - np.radians(lon1)) / 2)

    h = np.sqrt(
        lat_half_versine**2 + lon_half_versine**2 * np.cos(phi1) * np.cos(phi2)
    )

    valid = (
        valid_coordinate_mask(lat1, lon1)
        & valid_coordinate_mask(lat2, lon2)
        & (h <= 1)
        & ellipsoid.is_valid()
    )

    with np.errstate(invalid='ignore'):
        distances = 2 * ellipsoid.mean_radius * np.arcsin(np.where(valid, h, np.nan))

    equal = (lat1 == lat2) & (lon1 == lon2)
    return np.where(equal, 0.0, distances)
