"""
Geodesy Module for the Ellipsoidal Distance Library.

All Earth-surface distance and azimuth calculations originate from this
module.

This module provides:
- Reference ellipsoid models (WGS84, GRS80)
- Spherical great-circle distance (haversine)
- Ellipsoidal inverse geodesic solution (Vincenty)
- Method dispatch, batch helpers and a GeographicLib reference
"""

from geodesy.ellipsoid import (
    EllipsoidParameters,
    WGS84Ellipsoid,
    GRS80Ellipsoid,
)

from geodesy.haversine import (
    haversine_distance,
    haversine_distance_batch,
)

from geodesy.vincenty import (
    DEFAULT_TOLERANCE,
    MAX_ITERATIONS,
    InverseResult,
    SolverConfig,
    SolverState,
    solve_inverse,
    vincenty_inverse,
)

from geodesy.distance_calculations import (
    DistanceMethod,
    geodesic_distance,
    geodesic_distance_batch,
    geodesic_distance_quantity,
    karney_inverse,
)

__all__ = [
    # Ellipsoids
    "EllipsoidParameters",
    "WGS84Ellipsoid",
    "GRS80Ellipsoid",
    # Haversine
    "haversine_distance",
    "haversine_distance_batch",
    # Vincenty
    "DEFAULT_TOLERANCE",
    "MAX_ITERATIONS",
    "InverseResult",
    "SolverConfig",
    "SolverState",
    "solve_inverse",
    "vincenty_inverse",
    # Dispatch
    "DistanceMethod",
    "geodesic_distance",
    "geodesic_distance_batch",
    "geodesic_distance_quantity",
    "karney_inverse",
]
