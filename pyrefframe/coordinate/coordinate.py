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

"""Positions tied to a reference frame and an epoch"""

from typing import Optional, Union

import numpy as np

from ..core.time import to_fractional_year
from ..reference_frame.frame import ReferenceFrame

from ..reference_frame.repository import TransformationRepository


def _frozen_vector(value, name: str) -> np.ndarray:
    vector = np.array(value, dtype=np.float64)
    if vector.shape != (3,):
        raise ValueError(f"{name} must be an ECEF vector of shape (3,), got {vector.shape}")
    vector.setflags(write=False)
    return vector


class Coordinate:
    """ECEF position (and optional velocity) in a reference frame at an epoch

    Because of crustal motion a position is only meaningful together with
    the frame it is expressed in and the time it refers to. Coordinates
    are immutable; transformations and epoch adjustments return new
    coordinates.

    Parameters:
    -----------
    reference_frame : ReferenceFrame or str
        Frame of the position and velocity (strings are parsed)
    position : array_like, shape (3,)
        ECEF position in meters
    velocity : array_like, shape (3,), optional
        ECEF velocity in m/yr
    epoch : float, datetime or GNSSTime
        Epoch of the position, stored as a decimal year
    """

    __slots__ = ('_reference_frame', '_position', '_velocity', '_epoch')

    def __init__(self, reference_frame: Union[ReferenceFrame, str], position,
                 velocity=None, epoch=None):
        if epoch is None:
            raise ValueError("Coordinate epoch is required")
        self._reference_frame = ReferenceFrame.parse(reference_frame)
        self._position = _frozen_vector(position, "position")
        self._velocity = None if velocity is None else _frozen_vector(velocity, "velocity")
        self._epoch = to_fractional_year(epoch)

    @classmethod
    def with_velocity(cls, reference_frame, position, velocity, epoch) -> 'Coordinate':
        """Create a coordinate with a velocity"""
        if velocity is None:
            raise ValueError("velocity must not be None")
        return cls(reference_frame, position, velocity, epoch)

    @classmethod
    def without_velocity(cls, reference_frame, position, epoch) -> 'Coordinate':
        """Create a coordinate without a velocity"""
        return cls(reference_frame, position, None, epoch)

    @property
    def reference_frame(self) -> ReferenceFrame:
        return self._reference_frame

    @property
    def position(self) -> np.ndarray:
        """ECEF position [x, y, z] in meters"""
        return self._position.copy()

    @property
    def velocity(self) -> Optional[np.ndarray]:
        """ECEF velocity [vx, vy, vz] in m/yr, or None"""
        return None if self._velocity is None else self._velocity.copy()

    @property
    def epoch(self) -> float:
        """Epoch in decimal years"""
        return self._epoch

    def adjust_epoch(self, new_epoch) -> 'Coordinate':
        """
        Propagate the coordinate to another epoch using its velocity

        The position moves linearly by ``(new_epoch - epoch) * velocity``.
        A coordinate without velocity keeps its position. The reference
        frame is unchanged.

        Parameters:
        -----------
        new_epoch : float, datetime or GNSSTime
            Target epoch

        Returns:
        --------
        Coordinate
            Coordinate at the new epoch
        """
        new_epoch = to_fractional_year(new_epoch)
        position = self._position
        if self._velocity is not None:
            position = position + (new_epoch - self._epoch) * self._velocity
        return type(self)(self._reference_frame, position, self._velocity, new_epoch)

    def transform_to(self, reference_frame: Union[ReferenceFrame, str],
                     repository: Optional[TransformationRepository] = None) -> 'Coordinate':
        """
        Transform the coordinate into another reference frame

        Parameters:
        -----------
        reference_frame : ReferenceFrame or str
            Target frame
        repository : TransformationRepository, optional
            Repository providing the transformations, the builtin
            transformations if not given

        Returns:
        --------
        Coordinate
            Coordinate in the target frame at the same epoch

        Raises:
        -------
        NoPathError
            If the repository cannot connect the two frames
        """
        if repository is None:
            repository = TransformationRepository.from_builtin()
        return repository.transform(self, reference_frame)

    def __eq__(self, other):
        if not isinstance(other, Coordinate):
            return NotImplemented
        if (self._velocity is None) != (other._velocity is None):
            return False
        return (self._reference_frame == other._reference_frame
                and self._epoch == other._epoch
                and np.array_equal(self._position, other._position)
                and (self._velocity is None or np.array_equal(self._velocity, other._velocity)))

    __hash__ = None

    def __repr__(self):
        return (f"Coordinate({self._reference_frame!r}, position={self._position.tolist()}, "
                f"velocity={None if self._velocity is None else self._velocity.tolist()}, "
                f"epoch={self._epoch})")
