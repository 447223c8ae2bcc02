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

"""Core Module.

Foundation shared by the reference frame machinery:

- **Constants**: Helmert unit conversion factors, GNSS time reference epochs
  and the leap second table
- **Time**: Fractional year conversion for datetimes and GNSS week/TOW times
- **Exceptions**: Errors raised by frame transformations

Example Usage:
    >>> from datetime import datetime
    >>> from pyrefframe.core import GNSSTime, fractional_year
    >>>
    >>> fractional_year(datetime(2020, 1, 1))
    2020.0
    >>> t = GNSSTime.from_utc_datetime(datetime(2010, 1, 1))
    >>> round(t.to_fractional_year(), 6)
    2010.0
"""

from .constants import *
from .exceptions import FrameMismatchError, NoPathError, ReferenceFrameError
from .time import GNSSTime, fractional_year, get_leap_seconds, to_fractional_year
