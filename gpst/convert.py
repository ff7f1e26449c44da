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

"""Convert between UTC date-times and GPS Standard Time (GPST).

GPST is counted in seconds from the GPS Epoch (1980-01-06 00:00:00 UTC),
and is typically represented as a week number (since the GPS Epoch) and
the number of seconds elapsed in that week.

All arithmetic is performed on integer nanoseconds, so conversions of
`datetime.datetime` objects (which have microsecond resolution) round-trip
exactly.
"""

from __future__ import annotations

import datetime
import logging
import operator
import warnings
from typing import (
    TYPE_CHECKING,
    NamedTuple,
)

from astropy.time import Time
from dateutil import parser as dateparser

from ._ligotimegps import (
    NANOSECONDS_PER_SECOND,
    LIGOTimeGPS,
    from_nanoseconds,
    to_nanoseconds,
)
from .errors import (
    BeforeEpochError,
    ConversionError,
    GpstError,
)
from .leapseconds import (
    DEFAULT_TABLE,
    GPS_EPOCH_UNIX,
    SECONDS_PER_WEEK,
)

if TYPE_CHECKING:
    from collections.abc import (
        Callable,
        Iterable,
    )
    from typing import Any

    from .leapseconds import LeapSecondTable

__all__ = [
    "Gpst",
    "from_gpst",
    "from_gpst_many",
    "from_gpst_seconds",
    "gps_week_start",
    "to_gpst",
    "to_gpst_many",
]

logger = logging.getLogger(__name__)

UNIX_EPOCH = datetime.datetime(1970, 1, 1, tzinfo=datetime.UTC)
NANOSECONDS_PER_WEEK = SECONDS_PER_WEEK * NANOSECONDS_PER_SECOND
_GPS_EPOCH_NS = GPS_EPOCH_UNIX * NANOSECONDS_PER_SECOND


class Gpst(NamedTuple):
    """A GPS Standard Time.

    Examples
    --------
    >>> Gpst.from_nanoseconds(790954213 * 10**9)
    Gpst(seconds=LIGOTimeGPS(790954213, 0), week=1307, week_seconds=LIGOTimeGPS(480613, 0))
    """

    #: Seconds since the GPS Epoch
    seconds: LIGOTimeGPS

    #: Weeks since the GPS Epoch
    week: int

    #: Seconds elapsed in the current week
    week_seconds: LIGOTimeGPS

    @classmethod
    def from_nanoseconds(cls, nanoseconds: int) -> Gpst:
        """Create a new `Gpst` from a number of nanoseconds since the GPS Epoch.
        """
        week, remainder = divmod(int(nanoseconds), NANOSECONDS_PER_WEEK)
        return cls(
            from_nanoseconds(nanoseconds),
            week,
            from_nanoseconds(remainder),
        )

    @property
    def nanoseconds(self) -> int:
        """Nanoseconds since the GPS Epoch."""
        return to_nanoseconds(self.seconds)


# -- UTC to GPST --------------------------

def to_gpst(
    t: Any,
    leap_seconds: bool = False,
    *,
    table: LeapSecondTable | None = None,
) -> Gpst:
    """Convert a UTC date-time into GPS Standard Time.

    Parameters
    ----------
    t : `datetime.datetime`, `datetime.date`, `str`, `~astropy.time.Time`
        The UTC time to convert.
        Naive `datetime.datetime` objects are assumed to be in UTC,
        `str` inputs are parsed with :func:`dateutil.parser.parse`
        (or can be one of ``'now'``, ``'today'``, ``'tomorrow'``, or
        ``'yesterday'``), and `tuple` inputs are passed to
        `datetime.datetime`.

    leap_seconds : `bool`, optional
        If `True` add the leap seconds inserted into UTC since the
        GPS Epoch, default: `False`.
        A leap second counts from the UTC midnight that follows it, so
        2017-01-01 00:00:00 UTC is GPS time 1167264018.

    table : `~gpst.leapseconds.LeapSecondTable`, optional
        The leap second table to use, defaults to the compiled-in table.

    Returns
    -------
    gpst : `Gpst`
        The GPS time as seconds since the GPS Epoch, the GPS week, and
        seconds elapsed in that week.

    Raises
    ------
    gpst.BeforeEpochError
        If ``t`` is earlier than the GPS Epoch.
    gpst.ConversionError
        If ``t`` cannot be interpreted as a UTC date-time.

    Examples
    --------
    >>> from datetime import datetime, UTC
    >>> to_gpst(datetime(2005, 1, 28, 13, 30, tzinfo=UTC), leap_seconds=True)
    Gpst(seconds=LIGOTimeGPS(790954213, 0), week=1307, week_seconds=LIGOTimeGPS(480613, 0))
    """
    if table is None:
        table = DEFAULT_TABLE
    dtm = _to_datetime(t)
    nanoseconds = _datetime_to_unix_nanoseconds(dtm) - _GPS_EPOCH_NS
    if leap_seconds:
        leaps = table.count_utc_ns(nanoseconds)
        logger.debug("Adding %d leap seconds to %s", leaps, dtm.isoformat())
        nanoseconds += leaps * NANOSECONDS_PER_SECOND
    if nanoseconds < 0:
        raise BeforeEpochError(dtm.isoformat())
    return Gpst.from_nanoseconds(nanoseconds)


# -- GPST to UTC --------------------------

def from_gpst_seconds(
    seconds: Any,
    leap_seconds: bool = False,
    *,
    table: LeapSecondTable | None = None,
) -> datetime.datetime:
    """Convert seconds since the GPS Epoch into a UTC date-time.

    Parameters
    ----------
    seconds : `int`, `float`, `~decimal.Decimal`, `str`, `LIGOTimeGPS`
        The number of seconds since the GPS Epoch.

    leap_seconds : `bool`, optional
        If `True` subtract the leap seconds inserted into UTC since the
        GPS Epoch, default: `False`.

    table : `~gpst.leapseconds.LeapSecondTable`, optional
        The leap second table to use, defaults to the compiled-in table.

    Returns
    -------
    datetime : `datetime.datetime`
        The timezone-aware UTC date-time, rounded to the nearest
        microsecond.

    Raises
    ------
    gpst.ConversionError
        If ``seconds`` is not a number, or the result cannot be represented
        as a `datetime.datetime`.

    Examples
    --------
    >>> from_gpst_seconds(790954213, leap_seconds=True)
    datetime.datetime(2005, 1, 28, 13, 30, tzinfo=datetime.timezone.utc)
    """
    try:
        nanoseconds = to_nanoseconds(seconds)
    except ValueError as exc:
        raise ConversionError(str(exc)) from exc
    return _from_gps_nanoseconds(nanoseconds, leap_seconds, table)


def from_gpst(
    week: int,
    week_seconds: Any,
    leap_seconds: bool = False,
    *,
    table: LeapSecondTable | None = None,
) -> datetime.datetime:
    """Convert a GPS week and week seconds into a UTC date-time.

    ``week_seconds`` is not required to be in the range ``[0, 604800)``,
    values outside of that range simply move the time into another week.

    Parameters
    ----------
    week : `int`
        The number of weeks since the GPS Epoch.

    week_seconds : `int`, `float`, `~decimal.Decimal`, `LIGOTimeGPS`
        The number of seconds elapsed in the week.

    leap_seconds : `bool`, optional
        If `True` subtract the leap seconds inserted into UTC since the
        GPS Epoch, default: `False`.

    table : `~gpst.leapseconds.LeapSecondTable`, optional
        The leap second table to use, defaults to the compiled-in table.

    Returns
    -------
    datetime : `datetime.datetime`
        The timezone-aware UTC date-time.

    Raises
    ------
    gpst.ConversionError
        If the inputs are not numbers, or the result cannot be represented
        as a `datetime.datetime`.

    Examples
    --------
    >>> from_gpst(1307, 480613, leap_seconds=True)
    datetime.datetime(2005, 1, 28, 13, 30, tzinfo=datetime.timezone.utc)
    """
    try:
        week = operator.index(week)
        nanoseconds = week * NANOSECONDS_PER_WEEK + to_nanoseconds(week_seconds)
    except (TypeError, ValueError) as exc:
        raise ConversionError(str(exc)) from exc
    return _from_gps_nanoseconds(nanoseconds, leap_seconds, table)


def gps_week_start(week: int) -> datetime.datetime:
    """Return the UTC date-time at the start of a GPS week.

    No leap seconds are applied, so this is always a Sunday at midnight.

    Examples
    --------
    >>> gps_week_start(1307)
    datetime.datetime(2005, 1, 23, 0, 0, tzinfo=datetime.timezone.utc)
    """
    return from_gpst(week, 0)


def _from_gps_nanoseconds(
    nanoseconds: int,
    leap_seconds: bool,
    table: LeapSecondTable | None,
) -> datetime.datetime:
    if table is None:
        table = DEFAULT_TABLE
    if leap_seconds:
        leaps = table.count_ns(nanoseconds)
        logger.debug("Removing %d leap seconds from GPS time", leaps)
        nanoseconds -= leaps * NANOSECONDS_PER_SECOND
    return _unix_nanoseconds_to_datetime(nanoseconds + _GPS_EPOCH_NS)


# -- batch conversions --------------------

def _as_result(func: Callable, *args: Any, **kwargs: Any) -> Any:
    """Call ``func``, returning any `GpstError` instead of raising it."""
    try:
        return func(*args, **kwargs)
    except GpstError as exc:
        return exc


def to_gpst_many(
    times: Iterable[Any],
    leap_seconds: bool = False,
    *,
    table: LeapSecondTable | None = None,
) -> list[Gpst | GpstError]:
    """Convert many UTC date-times into GPS Standard Time.

    Conversion errors do not interrupt the batch, the exception for each
    failed conversion is returned in place of its result.

    Parameters
    ----------
    times : `iterable`
        The UTC times to convert, see `to_gpst` for supported types.

    leap_seconds : `bool`, optional
        If `True` add leap seconds, default: `False`.

    table : `~gpst.leapseconds.LeapSecondTable`, optional
        The leap second table to use, defaults to the compiled-in table.

    Returns
    -------
    results : `list`
        A `Gpst` or `~gpst.GpstError` for each input, in order.
    """
    return [
        _as_result(to_gpst, t, leap_seconds, table=table)
        for t in times
    ]


def from_gpst_many(
    times: Iterable[tuple[int, Any]],
    leap_seconds: bool = False,
    *,
    table: LeapSecondTable | None = None,
) -> list[datetime.datetime | GpstError]:
    """Convert many ``(week, week_seconds)`` pairs into UTC date-times.

    As with `to_gpst_many`, each failed conversion is returned as its
    `~gpst.GpstError` in place of a result.
    """
    return [
        _as_result(from_gpst, week, week_seconds, leap_seconds, table=table)
        for week, week_seconds in times
    ]


# -- utilities ----------------------------
# special case strings

def _now() -> datetime.datetime:
    return datetime.datetime.now(datetime.UTC).replace(microsecond=0)


def _today() -> datetime.date:
    return datetime.datetime.now(datetime.UTC).date()


def _today_delta(**delta: int) -> datetime.date:
    return _today() + datetime.timedelta(**delta)


def _tomorrow() -> datetime.date:
    return _today_delta(days=1)


def _yesterday() -> datetime.date:
    return _today_delta(days=-1)


DATE_STRINGS: dict[str, Callable[[], datetime.date]] = {
    "now": _now,
    "today": _today,
    "tomorrow": _tomorrow,
    "yesterday": _yesterday,
}


def _str_to_datetime(datestr: str) -> datetime.date:
    """Convert `str` to `datetime.datetime`."""
    # try known string
    try:
        return DATE_STRINGS[datestr.strip().lower()]()
    except KeyError:  # any other string
        pass

    with warnings.catch_warnings():
        # don't allow lazy passing of time-zones
        warnings.simplefilter("error", RuntimeWarning)
        try:
            return dateparser.parse(datestr)
        except RuntimeWarning as exc:
            msg = f"Cannot parse date string {datestr!r} with unknown timezone"
            raise ConversionError(msg) from exc
        except (ValueError, OverflowError) as exc:
            msg = f"Cannot parse date string {datestr!r}: {exc}"
            raise ConversionError(msg) from exc


def _to_datetime(t: Any) -> datetime.datetime:
    """Convert any supported input into a timezone-aware UTC datetime."""
    # str -> datetime.datetime
    if isinstance(t, str):
        t = _str_to_datetime(t)

    # tuple -> datetime.datetime
    if isinstance(t, tuple | list):
        try:
            t = datetime.datetime(*t)
        except (TypeError, ValueError) as exc:
            msg = f"Cannot create datetime from {t!r}: {exc}"
            raise ConversionError(msg) from exc

    # Time -> datetime.datetime
    if isinstance(t, Time):
        if not t.isscalar:
            msg = "Cannot convert non-scalar Time, use to_gpst_many"
            raise ConversionError(msg)
        try:
            t = t.utc.datetime
        except ValueError as exc:  # e.g. 23:59:60
            raise ConversionError(str(exc)) from exc

    # datetime.date -> datetime.datetime
    if isinstance(t, datetime.date) and not isinstance(t, datetime.datetime):
        t = datetime.datetime.combine(t, datetime.time.min)

    if not isinstance(t, datetime.datetime):
        msg = f"Cannot interpret {t!r} as a UTC date-time"
        raise ConversionError(msg)

    if t.tzinfo is None:
        return t.replace(tzinfo=datetime.UTC)
    try:
        return t.astimezone(datetime.UTC)
    except OverflowError as exc:
        raise ConversionError(f"{t!r} cannot be represented in UTC") from exc


def _datetime_to_unix_nanoseconds(dtm: datetime.datetime) -> int:
    delta = dtm - UNIX_EPOCH
    return (
        (delta.days * 86400 + delta.seconds) * NANOSECONDS_PER_SECOND
        + delta.microseconds * 1000
    )


def _unix_nanoseconds_to_datetime(nanoseconds: int) -> datetime.datetime:
    # round half up to microseconds
    micro, remainder = divmod(nanoseconds, 1000)
    if remainder >= 500:
        micro += 1
    try:
        return UNIX_EPOCH + datetime.timedelta(microseconds=micro)
    except OverflowError as exc:
        msg = (
            f"{nanoseconds} nanoseconds since the Unix Epoch is outside "
            "the range of datetime.datetime"
        )
        raise ConversionError(msg) from exc
