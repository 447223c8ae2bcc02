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

"""Geodetic Constants and Unit Conversion Factors"""

import numpy as np

# Helmert parameter unit conversions
MM2M = 1.0e-3                               # millimeters to meters
PPB2SCALE = 1.0e-9                          # parts per billion to dimensionless
MAS2RAD = np.pi / 180.0 / 3600.0 / 1000.0   # milliarcseconds to radians

# Time System Parameters
GPST0 = [1980, 1, 6, 0, 0, 0]  # GPS time reference epoch
GST0 = [1999, 8, 22, 0, 0, 0]  # Galileo time reference epoch
BDT0 = [2006, 1, 1, 0, 0, 0]   # BeiDou time reference epoch

GPS_BDS_OFFSET = 14.0          # GPS-BeiDou time offset (seconds)

# Calendar
SECONDS_PER_DAY = 86400.0
SECONDS_PER_WEEK = 604800.0
DAYS_PER_YEAR = 365.0
DAYS_PER_LEAP_YEAR = 366.0

# UTC instants (year, month, day) at which GPS-UTC was incremented by one second,
# newest first. GPS-UTC before the first entry is 0.
LEAP_SECOND_DATES = [
    (2017, 1, 1),
    (2015, 7, 1),
    (2012, 7, 1),
    (2009, 1, 1),
    (2006, 1, 1),
    (1999, 1, 1),
    (1997, 7, 1),
    (1996, 1, 1),
    (1994, 7, 1),
    (1993, 7, 1),
    (1992, 7, 1),
    (1991, 1, 1),
    (1990, 1, 1),
    (1988, 1, 1),
    (1985, 7, 1),
    (1983, 7, 1),
    (1982, 7, 1),
    (1981, 7, 1),
]
