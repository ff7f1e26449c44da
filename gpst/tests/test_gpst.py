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

"""Tests for the top-level :mod:`gpst` API."""

from datetime import (
    UTC,
    datetime,
)

import pytest

import gpst


@pytest.mark.parametrize("name", gpst.__all__)
def test_all(name):
    """Test that everything in ``__all__`` is importable."""
    assert getattr(gpst, name) is not None


def test_version():
    """Test that the package has a version."""
    assert gpst.__version__


def test_example():
    """Test the documented example round trip."""
    dtm = datetime(2005, 1, 28, 13, 30, tzinfo=UTC)
    gps = gpst.to_gpst(dtm, leap_seconds=True)
    assert gps == (790954213, 1307, 480613)
    assert gpst.from_gpst(gps.week, gps.week_seconds, True) == dtm
    assert gpst.from_gpst(1307, 480613, leap_seconds=True) == dtm


def test_errors():
    """Test the exception hierarchy."""
    assert issubclass(gpst.BeforeEpochError, gpst.GpstError)
    assert issubclass(gpst.ConversionError, gpst.GpstError)
    assert issubclass(gpst.GpstError, ValueError)
