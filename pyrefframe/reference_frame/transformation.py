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

"""Directed transformation between two reference frames"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..core.exceptions import FrameMismatchError
from .frame import ReferenceFrame
from .helmert import TimeDependentHelmertParams

if TYPE_CHECKING:
    from ..coordinate.coordinate import Coordinate

FROM_KEYS = ('from', 'source', 'source_name')
TO_KEYS = ('to', 'destination', 'destination_name')


def _pick(data: dict, keys, what: str):
    present = [key for key in keys if key in data]
    if not present:
        raise ValueError(f"Transformation is missing its {what} frame (one of {list(keys)})")
    if len(present) > 1:
        raise ValueError(f"Transformation {what} frame given more than once as {present}")
    return data[present[0]]


@dataclass(frozen=True)
class Transformation:
    """A transformation from one reference frame to another

    Attributes
    ----------
    from_frame : ReferenceFrame
        Source frame (strings are parsed with :meth:`ReferenceFrame.parse`)
    to_frame : ReferenceFrame
        Destination frame
    params : TimeDependentHelmertParams
        Parameters taking coordinates from ``from_frame`` to ``to_frame``
    """
    from_frame: ReferenceFrame
    to_frame: ReferenceFrame
    params: TimeDependentHelmertParams

    def __post_init__(self):
        object.__setattr__(self, 'from_frame', ReferenceFrame.parse(self.from_frame))
        object.__setattr__(self, 'to_frame', ReferenceFrame.parse(self.to_frame))
        if not isinstance(self.params, TimeDependentHelmertParams):
            raise TypeError(f"params must be TimeDependentHelmertParams, got {type(self.params).__name__}")
        if self.from_frame == self.to_frame:
            raise ValueError(f"Transformation from {self.from_frame} to itself is not allowed")

    def transform(self, coord: 'Coordinate') -> 'Coordinate':
        """
        Transform a coordinate, producing a new coordinate

        Reference frame transformations do not change the epoch of the
        coordinate.

        Parameters
        ----------
        coord : Coordinate
            Coordinate expressed in ``from_frame``

        Returns
        -------
        Coordinate
            Coordinate expressed in ``to_frame``

        Raises
        ------
        FrameMismatchError
            If the coordinate is not expressed in ``from_frame``
        """
        if coord.reference_frame != self.from_frame:
            raise FrameMismatchError(self.from_frame, coord.reference_frame)

        position, velocity = self.params.transform(coord.position, coord.velocity, coord.epoch)
        return type(coord)(self.to_frame, position, velocity, coord.epoch)

    def invert(self) -> 'Transformation':
        """Reverse the transformation"""
        return Transformation(self.to_frame, self.from_frame, self.params.invert())

    def to_dict(self) -> dict:
        """Serialize with canonical field and frame names"""
        return {
            'from': str(self.from_frame),
            'to': str(self.to_frame),
            'params': self.params.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Transformation':
        """
        Deserialize a transformation record

        Accepts ``source``/``source_name`` for ``from`` and
        ``destination``/``destination_name`` for ``to``.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Transformation must be a mapping, got {type(data).__name__}")
        if 'params' not in data:
            raise ValueError("Transformation is missing 'params'")

        from_name = _pick(data, FROM_KEYS, 'source')
        to_name = _pick(data, TO_KEYS, 'destination')
        for name in (from_name, to_name):
            if not isinstance(name, str):
                raise ValueError(f"Frame names must be strings, got {name!r}")
        return cls(
            ReferenceFrame.parse(from_name),
            ReferenceFrame.parse(to_name),
            TimeDependentHelmertParams.from_dict(data['params']),
        )

    def __str__(self):
        return f"{self.from_frame} -> {self.to_frame}"
