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

"""Builtin reference frame transformation parameters

Sources:
    ITRF2020 -> ITRFxx : IERS ITRF2020 transformation parameters
    ITRFxx -> ETRFxx   : EUREF Technical Note 1 (Altamimi)
    ITRF -> NAD83      : NGS and NRCan published parameter sets
    ITRF2020 -> DREF91 : BKG, DREF91 (Realisierung 2016)

Units are mm, mm/yr, ppb, ppb/yr, mas and mas/yr; epochs are decimal years.
"""

from typing import List

from .helmert import WIRE_FIELDS
from .transformation import Transformation

_ROTATION_NAD83 = (-26.78138, 0.42027, -10.93206)
_ROTATION_RATE_NAD83 = (-0.06667, 0.75744, 0.05133)

# from, to, (tx, ty, tz), (tx_dot, ty_dot, tz_dot), (s, s_dot),
# (rx, ry, rz), (rx_dot, ry_dot, rz_dot), epoch
_TABLE = [
    ("ITRF2020", "ITRF2014", (-1.4, -0.9, 1.4), (0.0, -0.1, 0.2), (-0.42, 0.0),
     (0.0, 0.0, 0.0), (0.0, 0.0, 0.0), 2015.0),
    ("ITRF2020", "ITRF2008", (0.2, 1.0, 3.3), (0.0, -0.1, 0.1), (-0.29, 0.03),
     (0.0, 0.0, 0.0), (0.0, 0.0, 0.0), 2015.0),
    ("ITRF2020", "ITRF2005", (2.7, 0.1, -1.4), (0.3, -0.1, 0.1), (0.65, 0.03),
     (0.0, 0.0, 0.0), (0.0, 0.0, 0.0), 2015.0),
    ("ITRF2020", "ITRF2000", (-0.2, 0.8, -34.2), (0.1, 0.0, -1.7), (2.25, 0.11),
     (0.0, 0.0, 0.0), (0.0, 0.0, 0.0), 2015.0),
    ("ITRF2020", "ITRF97", (6.5, -3.9, -77.9), (0.1, -0.6, -3.1), (3.98, 0.12),
     (0.0, 0.0, 0.36), (0.0, 0.0, 0.02), 2015.0),
    ("ITRF2020", "ITRF96", (6.5, -3.9, -77.9), (0.1, -0.6, -3.1), (3.98, 0.12),
     (0.0, 0.0, 0.36), (0.0, 0.0, 0.02), 2015.0),
    ("ITRF2020", "ITRF94", (6.5, -3.9, -77.9), (0.1, -0.6, -3.1), (3.98, 0.12),
     (0.0, 0.0, 0.36), (0.0, 0.0, 0.02), 2015.0),
    ("ITRF2020", "ITRF93", (-65.8, 1.9, -71.3), (-2.8, -0.2, -2.3), (4.47, 0.12),
     (-3.36, -4.33, 0.75), (-0.11, -0.19, 0.07), 2015.0),
    ("ITRF2020", "ITRF92", (14.5, -1.9, -85.9), (0.1, -0.6, -3.1), (3.27, 0.12),
     (0.0, 0.0, 0.36), (0.0, 0.0, 0.02), 2015.0),
    ("ITRF2020", "ITRF91", (26.5, 12.1, -91.9), (0.1, -0.6, -3.1), (4.67, 0.12),
     (0.0, 0.0, 0.36), (0.0, 0.0, 0.02), 2015.0),
    ("ITRF2020", "ITRF90", (24.5, 8.1, -107.9), (0.1, -0.6, -3.1), (4.97, 0.12),
     (0.0, 0.0, 0.36), (0.0, 0.0, 0.02), 2015.0),
    ("ITRF2020", "ITRF89", (29.5, 32.1, -145.9), (0.1, -0.6, -3.1), (8.37, 0.12),
     (0.0, 0.0, 0.36), (0.0, 0.0, 0.02), 2015.0),
    ("ITRF2020", "ITRF88", (24.5, -3.9, -169.9), (0.1, -0.6, -3.1), (11.47, 0.12),
     (0.1, 0.0, 0.36), (0.0, 0.0, 0.02), 2015.0),

    # ETRS89 realizations: fixed offset plus the rotation of the Eurasian plate
    ("ITRF2020", "ETRF2020", (0.0, 0.0, 0.0), (0.0, 0.0, 0.0), (0.0, 0.0),
     (0.0, 0.0, 0.0), (0.086, 0.519, -0.753), 1989.0),
    ("ITRF2014", "ETRF2014", (0.0, 0.0, 0.0), (0.0, 0.0, 0.0), (0.0, 0.0),
     (0.0, 0.0, 0.0), (0.085, 0.531, -0.770), 1989.0),
    ("ITRF2005", "ETRF2005", (56.0, 48.0, -37.0), (0.0, 0.0, 0.0), (0.0, 0.0),
     (0.0, 0.0, 0.0), (0.054, 0.518, -0.781), 1989.0),
    ("ITRF2000", "ETRF2000", (54.0, 51.0, -48.0), (0.0, 0.0, 0.0), (0.0, 0.0),
     (0.0, 0.0, 0.0), (0.081, 0.490, -0.792), 1989.0),
    ("ITRF97", "ETRF97", (41.0, 41.0, -49.0), (0.0, 0.0, 0.0), (0.0, 0.0),
     (0.0, 0.0, 0.0), (0.200, 0.500, -0.650), 1989.0),
    ("ITRF96", "ETRF96", (41.0, 41.0, -49.0), (0.0, 0.0, 0.0), (0.0, 0.0),
     (0.0, 0.0, 0.0), (0.200, 0.500, -0.650), 1989.0),
    ("ITRF94", "ETRF94", (41.0, 41.0, -49.0), (0.0, 0.0, 0.0), (0.0, 0.0),
     (0.0, 0.0, 0.0), (0.200, 0.500, -0.650), 1989.0),
    ("ITRF93", "ETRF93", (19.0, 53.0, -21.0), (0.0, 0.0, 0.0), (0.0, 0.0),
     (0.0, 0.0, 0.0), (0.320, 0.780, -0.670), 1989.0),
    ("ITRF92", "ETRF92", (38.0, 40.0, -37.0), (0.0, 0.0, 0.0), (0.0, 0.0),
     (0.0, 0.0, 0.0), (0.210, 0.520, -0.680), 1989.0),
    ("ITRF91", "ETRF91", (21.0, 25.0, -37.0), (0.0, 0.0, 0.0), (0.0, 0.0),
     (0.0, 0.0, 0.0), (0.210, 0.520, -0.680), 1989.0),
    ("ITRF90", "ETRF90", (19.0, 28.0, -23.0), (0.0, 0.0, 0.0), (0.0, 0.0),
     (0.0, 0.0, 0.0), (0.110, 0.570, -0.710), 1989.0),
    ("ITRF89", "ETRF89", (0.0, 0.0, 0.0), (0.0, 0.0, 0.0), (0.0, 0.0),
     (0.0, 0.0, 0.0), (0.110, 0.570, -0.710), 1989.0),

    # North America
    ("ITRF2014", "NAD83(2011)", (1005.30, -1909.21, -541.57), (0.79, -0.60, -1.44),
     (0.36891, -0.07201), _ROTATION_NAD83, _ROTATION_RATE_NAD83, 2010.0),
    ("ITRF2008", "NAD83(CSRS)", (1003.70, -1911.11, -543.97), (0.79, -0.60, -1.34),
     (0.38891, -0.10201), _ROTATION_NAD83, _ROTATION_RATE_NAD83, 2010.0),
    ("ITRF2014", "NAD83(CSRS)", (1005.30, -1909.21, -541.57), (0.79, -0.60, -1.44),
     (0.36891, -0.07201), _ROTATION_NAD83, _ROTATION_RATE_NAD83, 2010.0),
    ("ITRF2020", "NAD83(CSRS)", (1003.90, -1909.61, -541.17), (0.79, -0.70, -1.24),
     (-0.05109, -0.07201), _ROTATION_NAD83, _ROTATION_RATE_NAD83, 2010.0),

    # Germany
    ("ITRF2020", "DREF91(R2016)", (-3.0821, 95.0769, -73.5435), (-20.3181, -20.3593, 23.6394),
     (7.4874, -0.3306), (2.5445, 17.6078, -27.6123), (-0.5966, 1.4967, -0.5284), 2021.0),
]


def _wire_record(from_name, to_name, t, t_dot, scale, r, r_dot, epoch) -> dict:
    values = t + t_dot + scale + r + r_dot + (epoch,)
    return {
        'from': from_name,
        'to': to_name,
        'params': dict(zip(WIRE_FIELDS, values)),
    }


# Wire format records, the same shape accepted by the transformation file readers
BUILTIN_RECORDS = [_wire_record(*row) for row in _TABLE]


def builtin_transformations() -> List[Transformation]:
    """
    Get the builtin transformations

    Returns
    -------
    List[Transformation]
        A new list on every call, in table order
    """
    return [Transformation.from_dict(record) for record in BUILTIN_RECORDS]
