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

"""Geodetic reference frame identifiers

A handful of well known reference frames are enumerated in
:class:`WellKnownFrame`. Any other frame is represented by a custom
:class:`ReferenceFrame` holding the frame name, so that user supplied
transformations can introduce new frames at runtime.
"""

from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import List, Optional


class WellKnownFrame(Enum):
    """Reference frames known to the library

    The value of each member is its canonical label. Members are declared
    in the order used to sort reference frames.
    """
    ITRF88 = "ITRF88"
    ITRF89 = "ITRF89"
    ITRF90 = "ITRF90"
    ITRF91 = "ITRF91"
    ITRF92 = "ITRF92"
    ITRF93 = "ITRF93"
    ITRF94 = "ITRF94"
    ITRF96 = "ITRF96"
    ITRF97 = "ITRF97"
    ITRF2000 = "ITRF2000"
    ITRF2005 = "ITRF2005"
    ITRF2008 = "ITRF2008"
    ITRF2014 = "ITRF2014"
    ITRF2020 = "ITRF2020"
    ETRF89 = "ETRF89"
    ETRF90 = "ETRF90"
    ETRF91 = "ETRF91"
    ETRF92 = "ETRF92"
    ETRF93 = "ETRF93"
    ETRF94 = "ETRF94"
    ETRF96 = "ETRF96"
    ETRF97 = "ETRF97"
    ETRF2000 = "ETRF2000"
    ETRF2005 = "ETRF2005"
    ETRF2014 = "ETRF2014"
    ETRF2020 = "ETRF2020"
    NAD83_2011 = "NAD83(2011)"
    NAD83_CSRS = "NAD83(CSRS)"  # Canadian Spatial Reference System
    DREF91_R2016 = "DREF91(R2016)"
    WGS84_G1762 = "WGS84(G1762)"
    WGS84_G2139 = "WGS84(G2139)"
    WGS84_G2296 = "WGS84(G2296)"


_DECLARATION_ORDER = {kind: index for index, kind in enumerate(WellKnownFrame)}

# Canonical labels plus member names (e.g. "NAD83_2011") as aliases
_LABELS = {kind.value: kind for kind in WellKnownFrame}
_LABELS.update({kind.name: kind for kind in WellKnownFrame})


@total_ordering
@dataclass(frozen=True, repr=False)
class ReferenceFrame:
    """Identifier of a geodetic reference frame

    Exactly one of ``well_known`` or ``custom_name`` is set. Well known
    frames are available as class attributes, e.g. ``ReferenceFrame.ITRF2020``;
    other frames are created with :meth:`custom` or :meth:`parse`.

    Attributes
    ----------
    well_known : WellKnownFrame, optional
        The enumerated frame, if this is a well known frame
    custom_name : str, optional
        The frame name, if this is a custom frame

    Examples
    --------
    >>> ReferenceFrame.parse("NAD83_2011") == ReferenceFrame.NAD83_2011
    True
    >>> str(ReferenceFrame.parse("MyLocalFrame"))
    'MyLocalFrame'
    """
    well_known: Optional[WellKnownFrame] = None
    custom_name: Optional[str] = None

    def __post_init__(self):
        if (self.well_known is None) == (self.custom_name is None):
            raise ValueError("Exactly one of well_known or custom_name must be given")
        if self.well_known is not None and not isinstance(self.well_known, WellKnownFrame):
            raise TypeError(f"well_known must be a WellKnownFrame, got {type(self.well_known).__name__}")
        if self.custom_name is not None and not isinstance(self.custom_name, str):
            raise TypeError(f"custom_name must be a str, got {type(self.custom_name).__name__}")
        if self.custom_name in _LABELS:
            raise ValueError(f"'{self.custom_name}' names a well known frame, use ReferenceFrame.parse")

    @classmethod
    def parse(cls, text: str) -> 'ReferenceFrame':
        """
        Parse a reference frame name

        Parsing never fails: names that are not a canonical label or alias
        of a well known frame produce a custom frame.

        Parameters:
        -----------
        text : str
            Frame name

        Returns:
        --------
        ReferenceFrame
            Parsed reference frame
        """
        if isinstance(text, ReferenceFrame):
            return text
        if not isinstance(text, str):
            raise TypeError(f"Reference frame name must be a str, got {type(text).__name__}")
        kind = _LABELS.get(text)
        if kind is not None:
            return cls(well_known=kind)
        return cls(custom_name=text)

    @classmethod
    def custom(cls, name: str) -> 'ReferenceFrame':
        """Create a custom (user defined) reference frame

        Raises ValueError for the label or alias of a well known frame.
        """
        return cls(custom_name=name)

    @classmethod
    def well_known_frames(cls) -> List['ReferenceFrame']:
        """All well known frames in sort order"""
        return [cls(well_known=kind) for kind in WellKnownFrame]

    @property
    def name(self) -> str:
        """Canonical string of the frame"""
        if self.well_known is not None:
            return self.well_known.value
        return self.custom_name

    @property
    def is_custom(self) -> bool:
        return self.well_known is None

    def _sort_key(self):
        if self.well_known is not None:
            return (0, _DECLARATION_ORDER[self.well_known], '')
        return (1, 0, self.custom_name)

    def __lt__(self, other):
        if not isinstance(other, ReferenceFrame):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __str__(self):
        return self.name

    def __repr__(self):
        if self.well_known is not None:
            return f"ReferenceFrame.{self.well_known.name}"
        return f"ReferenceFrame.custom({self.custom_name!r})"


for _kind in WellKnownFrame:
    setattr(ReferenceFrame, _kind.name, ReferenceFrame(well_known=_kind))
del _kind
