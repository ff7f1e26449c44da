# Copyright (c) 2024-2025 The gpst developers
#
# This file is part of gpst.
#
# gpst is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# gpst is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with gpst.  If not, see <http://www.gnu.org/licenses/>.

"""LIGOTimeGPS discovery and nanosecond arithmetic helpers."""

from __future__ import annotations

from decimal import (
    ROUND_HALF_EVEN,
    Decimal,
    InvalidOperation,
)
from importlib import import_module
from numbers import Integral
from typing import TYPE_CHECKING

from astropy.units import Quantity
from ligotimegps import LIGOTimeGPS

if TYPE_CHECKING:
    from typing import Any

__all__ = [
    "GPS_TYPES",
    "LIGOTimeGPS",
    "NANOSECONDS_PER_SECOND",
    "from_nanoseconds",
    "to_nanoseconds",
]

NANOSECONDS_PER_SECOND = 1_000_000_000


def _import_ligotimegps(
    modname: str,
) -> type | None:
    """Return the ``LIGOTimeGPS`` type provided by ``modname``, if any."""
    try:
        mod = import_module(modname)
    except ImportError:  # library not installed
        return None
    try:
        return mod.LIGOTimeGPS
    except AttributeError:  # no LIGOTimeGPS available
        return None


#: All importable types that represent a GPS time as (seconds, nanoseconds)
GPS_TYPES: tuple[type, ...] = tuple(filter(None, map(
    _import_ligotimegps,
    (
        "lal",
        "ligotimegps",
        "glue.lal",
    ),
)))


def to_nanoseconds(value: Any) -> int:
    """Convert a number of seconds into an integer number of nanoseconds.

    Parameters
    ----------
    value : `int`, `float`, `~decimal.Decimal`, `str`, `LIGOTimeGPS`
        The number of seconds to convert.
        `float` values are converted through their shortest `str`
        representation, so ``480613.1`` is taken to mean exactly
        480613.1 seconds.

    Returns
    -------
    nanoseconds : `int`
        The value in nanoseconds, rounded half-to-even to the nearest
        nanosecond.

    Raises
    ------
    ValueError
        If ``value`` cannot be interpreted as a finite number of seconds.

    Examples
    --------
    >>> to_nanoseconds(1.5)
    1500000000
    >>> to_nanoseconds(LIGOTimeGPS(12, 345))
    12000000345
    """
    if isinstance(value, GPS_TYPES):
        return (
            int(value.gpsSeconds) * NANOSECONDS_PER_SECOND
            + int(value.gpsNanoSeconds)
        )

    # Quantity -> float
    if isinstance(value, Quantity):
        value = value.to("second").value

    if isinstance(value, Integral) and not isinstance(value, bool):
        return int(value) * NANOSECONDS_PER_SECOND

    try:
        dec = Decimal(str(value).strip())
    except InvalidOperation as exc:
        msg = f"Cannot interpret {value!r} as a number of seconds"
        raise ValueError(msg) from exc
    if not dec.is_finite():
        msg = f"Cannot interpret {value!r} as a finite number of seconds"
        raise ValueError(msg)
    return int((dec * NANOSECONDS_PER_SECOND).to_integral_value(
        rounding=ROUND_HALF_EVEN,
    ))


def from_nanoseconds(nanoseconds: int) -> LIGOTimeGPS:
    """Return a `LIGOTimeGPS` for an integer number of nanoseconds.

    Examples
    --------
    >>> from_nanoseconds(790954213000000000)
    LIGOTimeGPS(790954213, 0)
    """
    return LIGOTimeGPS(*divmod(int(nanoseconds), NANOSECONDS_PER_SECOND))
