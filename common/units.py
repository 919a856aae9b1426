"""
Unit Registry for Distance and Angle Quantities.

This module provides a centralized unit system using the `pint` library.
Core computations work on bare floats (degrees in, metres out); the helpers
here let callers pass and receive tagged quantities instead, so that an
angle in radians is never silently read as degrees.

Example Usage
-------------
>>> from common.units import ureg, Q_
>>> distance = Q_(64_985.585, 'm')
>>> distance.to('km')
<Quantity(64.985585, 'kilometer')>
"""

import warnings
from typing import Union

import pint
from pint import UnitRegistry as PintUnitRegistry

# Create the global unit registry
ureg = PintUnitRegistry()

# Convenience alias for creating quantities
Q_ = ureg.Quantity


def ensure_quantity(
    value: Union[float, pint.Quantity],
    default_unit: str,
    stacklevel: int = 2
) -> pint.Quantity:
    """Tag `value` with `default_unit` unless it already carries units.

    Parameters
    ----------
    value : float or pint.Quantity
        Angle or length, bare or tagged.
    default_unit : str
        Unit the caller works in, e.g. ``STANDARD_UNITS["latitude"]``.
    stacklevel : int
        Passed to `warnings.warn`; wrappers add one per extra frame so the
        warning points at their caller.

    Returns
    -------
    pint.Quantity
        `value` itself if it was already a quantity.

    Raises
    ------
    ValueError
        If `value` is a quantity of a different dimension, such as a length
        passed where an angle is expected.

    Warnings
    --------
    A bare number triggers a UserWarning, since degrees and radians are
    indistinguishable once stripped of units.
    """
    if not isinstance(value, pint.Quantity):
        warnings.warn(
            f"Untagged value {value}; assuming {default_unit}. "
            f"Pass a quantity such as Q_({value}, '{default_unit}') to silence this.",
            UserWarning,
            stacklevel=stacklevel
        )
        return Q_(value, default_unit)

    try:
        value.to(default_unit)
    except pint.DimensionalityError as e:
        raise ValueError(
            f"{value} cannot be read as {default_unit}: "
            f"{value.dimensionality} is incompatible"
        ) from e
    return value


def to_magnitude(
    value: Union[float, pint.Quantity],
    unit: str,
    stacklevel: int = 2
) -> float:
    """Return the magnitude of `value` expressed in `unit`.

    Bare numbers are assumed to already be in `unit` (with a warning).
    """
    quantity = ensure_quantity(value, unit, stacklevel=stacklevel + 1)
    return float(quantity.to(unit).magnitude)


# Standard unit definitions for the system
STANDARD_UNITS = {
    "latitude": "degree",
    "longitude": "degree",
    "azimuth": "degree",
    "distance": "meter",
    "semi_major_axis": "meter",
    "tolerance": "radian",
}
