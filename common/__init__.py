"""
Common utilities and infrastructure for the ellipsoidal distance library.

This package provides foundational components used across all modules:
- Reference ellipsoid constants with uncertainty bounds
- Unit registry for angle and length quantities
- The coordinate value type
- Logging infrastructure
"""

from common.constants import Constant, WGS84Constants, GRS80Constants
from common.units import ureg, Q_, ensure_quantity, to_magnitude
from common.types import (
    Coordinate,
    LAT_LOWER_BOUND,
    LAT_UPPER_BOUND,
    LON_LOWER_BOUND,
    LON_UPPER_BOUND,
    valid_coordinate_mask,
)
from common.logging_config import get_logger

__all__ = [
    "Constant",
    "WGS84Constants",
    "GRS80Constants",
    "ureg",
    "Q_",
    "ensure_quantity",
    "to_magnitude",
    "Coordinate",
    "LAT_LOWER_BOUND",
    "LAT_UPPER_BOUND",
    "LON_LOWER_BOUND",
    "LON_UPPER_BOUND",
    "valid_coordinate_mask",
    "get_logger",
]
