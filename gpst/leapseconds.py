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

"""The GPS Epoch and the table of leap seconds inserted into UTC since then.

GPS Standard Time does not observe leap seconds, so for every leap second
inserted into UTC since the GPS Epoch, GPST runs one second further ahead
of UTC.

The table here is fixed, it is only valid up to the release date of this
package.
Announcement of a new leap second requires a new entry in `LEAP_SECONDS`
and a new release.
"""

from __future__ import annotations

from bisect import bisect_right
from datetime import (
    UTC,
    datetime,
    timedelta,
)
from typing import TYPE_CHECKING

from ._ligotimegps import (
    NANOSECONDS_PER_SECOND,
    to_nanoseconds,
)

if TYPE_CHECKING:
    from collections.abc import (
        Iterable,
        Iterator,
    )
    from typing import Any

__all__ = [
    "DEFAULT_TABLE",
    "GPS_EPOCH",
    "GPS_EPOCH_UNIX",
    "LEAP_SECONDS",
    "NANOSECONDS_PER_SECOND",
    "SECONDS_PER_WEEK",
    "LeapSecondTable",
    "num_leaps",
]

#: The GPS Epoch (1980-01-06 00:00:00 UTC) in seconds since the Unix Epoch
GPS_EPOCH_UNIX = 315964800

#: The GPS Epoch as a `datetime.datetime`
GPS_EPOCH = datetime(1980, 1, 6, tzinfo=UTC)

#: Number of seconds in one GPS week
SECONDS_PER_WEEK = 604800

#: GPS times (seconds since the GPS Epoch) at which each leap second
#: was inserted into UTC
LEAP_SECONDS: tuple[int, ...] = (
    46828800,  # 1981-07-01
    78364801,  # 1982-07-01
    109900802,  # 1983-07-01
    173059203,  # 1985-07-01
    252028804,  # 1988-01-01
    315187205,  # 1990-01-01
    346723206,  # 1991-01-01
    393984007,  # 1992-07-01
    425520008,  # 1993-07-01
    457056009,  # 1994-07-01
    504489610,  # 1996-01-01
    551750411,  # 1997-07-01
    599184012,  # 1999-01-01
    820108813,  # 2006-01-01
    914803214,  # 2009-01-01
    1025136015,  # 2012-07-01
    1119744016,  # 2015-07-01
    1167264017,  # 2017-01-01
)


class LeapSecondTable:
    """An immutable, sorted table of leap seconds.

    Each entry is the GPS time (in seconds since the GPS Epoch) at which
    a leap second was inserted into UTC.

    Parameters
    ----------
    entries : `iterable` of `int`
        The GPS times of each leap second, in strictly increasing order.

    Raises
    ------
    ValueError
        If any entry is not an integer, or if the entries are not strictly
        increasing.

    Examples
    --------
    >>> table = LeapSecondTable([100, 200])
    >>> table.count(99), table.count(100), table.count(1e9)
    (0, 1, 2)
    """

    __slots__ = ("_entries", "_nanoseconds", "_utc_nanoseconds")

    def __init__(self, entries: Iterable[int]) -> None:
        entries = tuple(entries)
        for entry in entries:
            if isinstance(entry, bool) or not isinstance(entry, int):
                msg = f"leap second entries must be integers, not {entry!r}"
                raise ValueError(msg)
        for previous, entry in zip(entries, entries[1:], strict=False):
            if entry <= previous:
                msg = (
                    "leap second entries must be strictly increasing, "
                    f"found {entry} after {previous}"
                )
                raise ValueError(msg)
        self._entries = entries
        self._nanoseconds = tuple(x * NANOSECONDS_PER_SECOND for x in entries)
        # UTC offsets (from the GPS Epoch) at which each leap second is
        # complete, i.e. each entry without the leap seconds before it
        self._utc_nanoseconds = tuple(
            (x - i) * NANOSECONDS_PER_SECOND for i, x in enumerate(entries)
        )

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[int]:
        return iter(self._entries)

    def __contains__(self, gps_seconds: Any) -> bool:
        return gps_seconds in self._entries

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LeapSecondTable):
            return NotImplemented
        return self._entries == other._entries

    def __hash__(self) -> int:
        return hash(self._entries)

    def __repr__(self) -> str:
        return f"<{type(self).__name__}: {len(self)} leap seconds>"

    def count_ns(self, gps_nanoseconds: int) -> int:
        """Return the number of leap seconds that have occurred by a GPS time.

        Parameters
        ----------
        gps_nanoseconds : `int`
            The GPS time, in nanoseconds since the GPS Epoch.

        Returns
        -------
        count : `int`
            The number of entries less than or equal to ``gps_nanoseconds``.
        """
        return bisect_right(self._nanoseconds, gps_nanoseconds)

    def count(self, gps_seconds: Any) -> int:
        """Return the number of leap seconds that have occurred by a GPS time.

        An entry exactly equal to ``gps_seconds`` is counted.

        Parameters
        ----------
        gps_seconds : `int`, `float`, `~decimal.Decimal`, `LIGOTimeGPS`
            The GPS time, in seconds since the GPS Epoch.

        Returns
        -------
        count : `int`
            The number of entries less than or equal to ``gps_seconds``.
        """
        return self.count_ns(to_nanoseconds(gps_seconds))

    def count_utc_ns(self, utc_nanoseconds: int) -> int:
        """Return the number of leap seconds that have occurred by a UTC time.

        Parameters
        ----------
        utc_nanoseconds : `int`
            The UTC time, in nanoseconds since the GPS Epoch, without any
            leap seconds applied.

        Returns
        -------
        count : `int`
            The number of leap seconds inserted at or before
            ``utc_nanoseconds``.

        Notes
        -----
        Each entry is compared after removing the leap seconds that
        precede it, so that the count is correct during the first seconds
        after each leap second.
        For all other times, and for a time exactly equal to an entry,
        this matches `count_ns`.
        """
        return bisect_right(self._utc_nanoseconds, utc_nanoseconds)

    def dates(self) -> list[datetime]:
        """Return the UTC date-times at which each leap second took effect.

        Each date-time is the first UTC instant after the inserted second,
        i.e. midnight at the start of the following day.

        Examples
        --------
        >>> DEFAULT_TABLE.dates()[-1]
        datetime.datetime(2017, 1, 1, 0, 0, tzinfo=datetime.timezone.utc)
        """
        # each entry includes the leap seconds before it
        return [
            GPS_EPOCH + timedelta(seconds=entry - i)
            for i, entry in enumerate(self._entries)
        ]


#: The compiled-in leap second table used by default
DEFAULT_TABLE = LeapSecondTable(LEAP_SECONDS)


def num_leaps(
    gps_seconds: Any,
    table: LeapSecondTable = DEFAULT_TABLE,
) -> int:
    """Count the leap seconds that have occurred by a given GPS time.

    Parameters
    ----------
    gps_seconds : `int`, `float`, `~decimal.Decimal`, `LIGOTimeGPS`
        The GPS time, in seconds since the GPS Epoch.

    table : `LeapSecondTable`, optional
        The table to search, defaults to the compiled-in table.

    Returns
    -------
    count : `int`
        The number of leap seconds at or before ``gps_seconds``,
        between ``0`` and ``len(table)``.

    Examples
    --------
    >>> num_leaps(0)
    0
    >>> num_leaps(790954200)
    13
    >>> num_leaps(1167264017)
    18
    """
    return table.count(gps_seconds)
