# Copyright 2024 inuex35
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""GNSS Time and Fractional Year Conversions

Reference frame transformations are parameterised in decimal years
("fractional years"). This module turns calendar dates and GNSS week/TOW
times into that representation.
"""

import calendar
from datetime import datetime, timedelta
from typing import Union

import numpy as np

from .constants import (
    BDT0,
    DAYS_PER_LEAP_YEAR,
    DAYS_PER_YEAR,
    GPS_BDS_OFFSET,
    GPST0,
    GST0,
    LEAP_SECOND_DATES,
    SECONDS_PER_DAY,
    SECONDS_PER_WEEK,
)


def get_leap_seconds(dt: datetime) -> int:
    """
    Get GPS-UTC leap seconds in effect at a given time

    Parameters:
    -----------
    dt : datetime
        Naive datetime

    Returns:
    --------
    int
        Number of leap seconds GPS time is ahead of UTC
    """
    for i, date in enumerate(LEAP_SECOND_DATES):
        if dt >= datetime(*date):
            return len(LEAP_SECOND_DATES) - i
    return 0


def fractional_year(dt: datetime) -> float:
    """
    Convert a calendar date and time into a fractional year

    1 January 00:00 of a year maps to exactly ``year.0``; leap years are
    divided into 366 days.

    Parameters:
    -----------
    dt : datetime
        Date and time (a timezone-aware value is converted to naive UTC)

    Returns:
    --------
    float
        Decimal year
    """
    if dt.utcoffset() is not None:
        dt = (dt - dt.utcoffset()).replace(tzinfo=None)

    start = datetime(dt.year, 1, 1)
    elapsed_days = (dt - start).total_seconds() / SECONDS_PER_DAY
    days_in_year = DAYS_PER_LEAP_YEAR if calendar.isleap(dt.year) else DAYS_PER_YEAR
    return dt.year + elapsed_days / days_in_year


class GNSSTime:
    """GNSS week and time of week in a given time system

    Only GPS, Galileo and BeiDou time are supported, since these are the
    systems that can be mapped to UTC through a leap second table.
    """

    _REFERENCE_EPOCHS = {'GPS': GPST0, 'GAL': GST0, 'BDS': BDT0}

    def __init__(self, week: int = 0, tow: float = 0.0, time_sys: str = 'GPS'):
        """
        Initialize GNSS time

        Parameters:
        -----------
        week : int
            Week number
        tow : float
            Time of week in seconds
        time_sys : str
            Time system ('GPS', 'GAL', 'BDS')
        """
        self.week = int(week)
        self.tow = float(tow)
        self.time_sys = time_sys.upper()

        if self.time_sys not in self._REFERENCE_EPOCHS:
            raise ValueError(
                f"Invalid time system: {time_sys}. Must be one of {list(self._REFERENCE_EPOCHS)}")

        # Normalize TOW to [0, 604800)
        extra_weeks, self.tow = divmod(self.tow, SECONDS_PER_WEEK)
        self.week += int(extra_weeks)

    @classmethod
    def from_datetime(cls, dt: datetime, time_sys: str = 'GPS') -> 'GNSSTime':
        """Create GNSSTime from a datetime expressed in the same time system"""
        ref_date = datetime(*cls._REFERENCE_EPOCHS[time_sys.upper()])
        delta = dt - ref_date
        weeks = delta.days // 7
        tow = (delta.days % 7) * SECONDS_PER_DAY + delta.seconds + delta.microseconds * 1e-6
        return cls(weeks, tow, time_sys)

    @classmethod
    def from_utc_datetime(cls, dt: datetime) -> 'GNSSTime':
        """Create GPS time from a UTC datetime using the leap second table"""
        return cls.from_datetime(dt + timedelta(seconds=get_leap_seconds(dt)), 'GPS')

    def to_datetime(self) -> datetime:
        """Convert to a datetime in this time system (no leap seconds applied)"""
        ref_date = datetime(*self._REFERENCE_EPOCHS[self.time_sys])
        return ref_date + timedelta(weeks=self.week, seconds=self.tow)

    def to_utc_datetime(self) -> datetime:
        """Convert to UTC using the hard coded leap second table

        The table will get out of date when new leap seconds are announced.
        """
        dt = self.to_datetime()
        if self.time_sys == 'BDS':
            dt = dt + timedelta(seconds=GPS_BDS_OFFSET)
        return dt - timedelta(seconds=get_leap_seconds(dt))

    def to_fractional_year(self) -> float:
        """Convert to a UTC fractional year"""
        return fractional_year(self.to_utc_datetime())

    def __eq__(self, other):
        if not isinstance(other, GNSSTime):
            return NotImplemented
        return self.time_sys == other.time_sys and self.week == other.week and abs(self.tow - other.tow) < 1e-9

    def __hash__(self):
        return hash((self.time_sys, self.week, round(self.tow, 6)))

    def __str__(self):
        return f"{self.time_sys} Week: {self.week}, TOW: {self.tow:.3f}"

    def __repr__(self):
        return f"GNSSTime({self.week}, {self.tow}, '{self.time_sys}')"


def to_fractional_year(epoch: Union[float, int, datetime, GNSSTime]) -> float:
    """
    Normalize an epoch into a fractional year

    Parameters:
    -----------
    epoch : float, int, datetime or GNSSTime
        Numbers are taken to already be decimal years

    Returns:
    --------
    float
        Decimal year

    Raises:
    -------
    TypeError
        If the epoch type is not supported
    """
    if isinstance(epoch, GNSSTime):
        return epoch.to_fractional_year()
    if isinstance(epoch, datetime):
        return fractional_year(epoch)
    if isinstance(epoch, (int, float, np.integer, np.floating)) and not isinstance(epoch, bool):
        return float(epoch)
    raise TypeError(f"Unsupported epoch type: {type(epoch).__name__}")
