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

GPS Standard Time began at the GPS Epoch, 1980-01-06 00:00:00 UTC, and is
typically represented as a week number (since the GPS Epoch) and the
number of seconds elapsed in that week.
UTC observes leap seconds, GPST does not, so conversions can optionally
be adjusted for the leap seconds inserted into UTC since the GPS Epoch.

>>> from datetime import datetime, UTC
>>> import gpst
>>> gpst.to_gpst(datetime(2005, 1, 28, 13, 30, tzinfo=UTC), leap_seconds=True)
Gpst(seconds=LIGOTimeGPS(790954213, 0), week=1307, week_seconds=LIGOTimeGPS(480613, 0))
>>> gpst.from_gpst(1307, 480613, leap_seconds=True)
datetime.datetime(2005, 1, 28, 13, 30, tzinfo=datetime.timezone.utc)

The leap second table is compiled in, a new leap second requires a new
release of this package.
"""

import logging

from . import log
from ._version import version as __version__
from .convert import (
    Gpst,
    from_gpst,
    from_gpst_many,
    from_gpst_seconds,
    gps_week_start,
    to_gpst,
    to_gpst_many,
)
from .errors import (
    BeforeEpochError,
    ConversionError,
    GpstError,
)
from .leapseconds import (
    GPS_EPOCH,
    LEAP_SECONDS,
    LeapSecondTable,
    num_leaps,
)

__all__ = [
    "GPS_EPOCH",
    "LEAP_SECONDS",
    "BeforeEpochError",
    "ConversionError",
    "Gpst",
    "GpstError",
    "LeapSecondTable",
    "from_gpst",
    "from_gpst_many",
    "from_gpst_seconds",
    "gps_week_start",
    "init_logging",
    "num_leaps",
    "to_gpst",
    "to_gpst_many",
]


def init_logging(level: str | int | None = None) -> None:
    """Send gpst log records to stderr, mainly for debugging.

    Parameters
    ----------
    level : `int`, `str`, optional
        The logging level to use, defaults to ``GPST_LOG_LEVEL``, or
        ``INFO`` if that is not set.

    Examples
    --------
    >>> import gpst
    >>> gpst.init_logging("DEBUG")
    """
    if level is None:
        level = log.get_default_level() or logging.INFO
    logger = log.init_logger(__name__, level=level)
    logger.debug(
        "Initialised %s logging for %s",
        logging.getLevelName(logger.getEffectiveLevel()),
        logger.name,
    )


# Initialise logging for the package
if log.init_logging_requested():
    init_logging()
