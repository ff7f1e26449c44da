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

"""Tests for :mod:`gpst.leapseconds`."""

from datetime import (
    UTC,
    datetime,
)
from decimal import Decimal

import pytest
from astropy.time import Time

from .. import leapseconds as gpst_leapseconds
from .._ligotimegps import LIGOTimeGPS

LEAP_SECONDS = gpst_leapseconds.LEAP_SECONDS
NS = 10**9


def test_leap_seconds_table():
    """Test that the compiled-in table is sorted and complete."""
    assert len(LEAP_SECONDS) == 18
    assert list(LEAP_SECONDS) == sorted(set(LEAP_SECONDS))
    assert LEAP_SECONDS[0] == 46828800
    assert LEAP_SECONDS[-1] == 1167264017
    assert len(gpst_leapseconds.DEFAULT_TABLE) == 18
    assert tuple(gpst_leapseconds.DEFAULT_TABLE) == LEAP_SECONDS


def test_gps_epoch():
    """Test that the GPS Epoch constants agree."""
    assert gpst_leapseconds.GPS_EPOCH == datetime(1980, 1, 6, tzinfo=UTC)
    assert gpst_leapseconds.GPS_EPOCH.timestamp() == (
        gpst_leapseconds.GPS_EPOCH_UNIX
    )
    assert Time(gpst_leapseconds.GPS_EPOCH.replace(tzinfo=None),
                scale="utc").gps == pytest.approx(0, abs=1e-6)


def test_leap_seconds_dates():
    """Test that the table agrees with astropy's leap seconds."""
    dates = gpst_leapseconds.DEFAULT_TABLE.dates()
    assert dates[0] == datetime(1981, 7, 1, tzinfo=UTC)
    assert dates[4] == datetime(1988, 1, 1, tzinfo=UTC)
    assert dates[-1] == datetime(2017, 1, 1, tzinfo=UTC)
    for dtm, entry in zip(dates, LEAP_SECONDS, strict=True):
        # astropy counts GPS seconds including the leap second itself
        gps = Time(dtm.replace(tzinfo=None), scale="utc").gps
        assert round(gps) == entry + 1
        assert dtm.time().isoformat() == "00:00:00"
        assert (dtm.month, dtm.day) in {(1, 1), (7, 1)}


@pytest.mark.parametrize(("in_", "out"), [
    pytest.param(-1, 0, id="negative"),
    pytest.param(0, 0, id="epoch"),
    pytest.param(46828799, 0, id="first-before"),
    pytest.param(46828800, 1, id="first-exact"),
    pytest.param(46828800.5, 1, id="first-float"),
    pytest.param(LIGOTimeGPS(46828799, 999999999), 0, id="first-ns-before"),
    pytest.param(LIGOTimeGPS(46828800, 0), 1, id="first-LIGOTimeGPS"),
    pytest.param(Decimal("78364801"), 2, id="Decimal"),
    pytest.param(790954200, 13, id="2005"),
    pytest.param(1126259462, 17, id="GW150914"),
    pytest.param(1167264016, 17, id="last-before"),
    pytest.param(1167264017, 18, id="last-exact"),
    pytest.param(2**40, 18, id="future"),
])
def test_num_leaps(in_, out):
    """Test :func:`gpst.num_leaps`."""
    assert gpst_leapseconds.num_leaps(in_) == out


@pytest.mark.parametrize("index", range(len(LEAP_SECONDS)))
def test_num_leaps_inclusive(index):
    """Test that a time exactly on a leap second counts that leap second."""
    entry = LEAP_SECONDS[index]
    assert gpst_leapseconds.num_leaps(entry) == index + 1
    assert gpst_leapseconds.num_leaps(entry - 1) == index
    assert gpst_leapseconds.DEFAULT_TABLE.count_ns(entry * NS - 1) == index
    assert entry in gpst_leapseconds.DEFAULT_TABLE


def test_num_leaps_monotonic():
    """Test that :func:`gpst.num_leaps` never decreases."""
    samples = sorted(
        [-10**9, 0, 2**31, 2**40]
        + [x + delta for x in LEAP_SECONDS for delta in (-1, 0, 1)],
    )
    counts = [gpst_leapseconds.num_leaps(x) for x in samples]
    assert counts == sorted(counts)
    assert min(counts) == 0
    assert max(counts) == len(LEAP_SECONDS)


@pytest.mark.parametrize("index", range(len(LEAP_SECONDS)))
def test_count_utc_ns(index):
    """Test counting leap seconds for a UTC offset."""
    table = gpst_leapseconds.DEFAULT_TABLE
    entry = LEAP_SECONDS[index]
    midnight = (entry - index) * NS
    # the leap second is counted from midnight UTC
    assert table.count_utc_ns(midnight - 1) == index
    assert table.count_utc_ns(midnight) == index + 1
    # an exact entry matches the GPS count
    assert table.count_utc_ns(entry * NS) == table.count_ns(entry * NS)


def test_custom_table():
    """Test :class:`gpst.LeapSecondTable` with custom entries."""
    table = gpst_leapseconds.LeapSecondTable([100, 200])
    assert len(table) == 2
    assert repr(table) == "<LeapSecondTable: 2 leap seconds>"
    assert table.count(99) == 0
    assert table.count(100) == 1
    assert table.count(1e9) == 2
    assert gpst_leapseconds.num_leaps(150, table=table) == 1
    assert table == gpst_leapseconds.LeapSecondTable((100, 200))
    assert table != gpst_leapseconds.DEFAULT_TABLE
    assert gpst_leapseconds.LeapSecondTable([]).count(2**40) == 0


@pytest.mark.parametrize("entries", [
    pytest.param([2, 1], id="decreasing"),
    pytest.param([1, 1], id="duplicate"),
    pytest.param([1.5], id="float"),
    pytest.param([True], id="bool"),
])
def test_custom_table_error(entries):
    """Test that :class:`gpst.LeapSecondTable` rejects bad entries."""
    with pytest.raises(ValueError, match="leap second entries must be"):
        gpst_leapseconds.LeapSecondTable(entries)
