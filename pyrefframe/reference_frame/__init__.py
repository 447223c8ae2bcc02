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

"""Reference Frame Module.

Transformations between geodetic reference frames:

- **Frames**: Well known ITRF, ETRF, NAD83, DREF91 and WGS84 realizations,
  plus custom frames identified by name
- **Helmert parameters**: 15-parameter time dependent Helmert transformation
- **Repository**: Graph of transformations with shortest path search

Example Usage:
    >>> from pyrefframe import Coordinate, ReferenceFrame, TransformationRepository
    >>>
    >>> repo = TransformationRepository.from_builtin()
    >>> coord = Coordinate.with_velocity(
    ...     ReferenceFrame.ITRF2020,
    ...     [4027894.006, 307045.600, 4919474.910],
    ...     [0.01, 0.2, 0.03],
    ...     2000.0)
    >>> etrf = repo.transform(coord, ReferenceFrame.ETRF2014)
    >>> repo.get_shortest_frame_path("ITRF2020", "ETRF2014")
    [ReferenceFrame.ITRF2020, ReferenceFrame.ITRF2014, ReferenceFrame.ETRF2014]
"""

from .frame import ReferenceFrame, WellKnownFrame
from .helmert import (SCALAR_FIELDS, WIRE_FIELDS, TimeDependentHelmertParams,
                      apply_helmert, helmert_matrix)
from .params import BUILTIN_RECORDS, builtin_transformations
from .repository import TransformationRepository
from .transformation import Transformation

__all__ = [
    'ReferenceFrame',
    'WellKnownFrame',
    'TimeDependentHelmertParams',
    'helmert_matrix',
    'apply_helmert',
    'WIRE_FIELDS',
    'SCALAR_FIELDS',
    'Transformation',
    'TransformationRepository',
    'BUILTIN_RECORDS',
    'builtin_transformations',
]
