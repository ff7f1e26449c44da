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

"""Exceptions raised by GPST conversions."""

from __future__ import annotations

__all__ = [
    "BeforeEpochError",
    "ConversionError",
    "GpstError",
]


class GpstError(ValueError):
    """Base class for errors raised when converting to or from GPST."""


class BeforeEpochError(GpstError):
    """Error raised when a date-time is earlier than the GPS Epoch.

    Parameters
    ----------
    instant : `str`
        The ISO-8601 representation of the offending date-time.
    """

    def __init__(self, instant: str) -> None:
        self.instant = instant
        super().__init__(
            f"Invalid date-time for GPST, is earlier than GPS Epoch: {instant}",
        )


class ConversionError(GpstError):
    """Error raised when a value cannot be converted to or from a date-time."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Could not convert to a UTC date-time: {detail}")
