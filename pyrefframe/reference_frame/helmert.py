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

"""
15-parameter time dependent Helmert transformations.

The 7-parameter Helmert transformation (3 translations, 3 rotations and a
scale) is extended with a rate of change for every parameter and a
reference epoch. At epoch t each parameter takes the value

    p(t) = p + p_dot * (t - t0)

and a position is transformed as

    [X]        [X]        [Tx]   [  s  -Rz   Ry ] [X]
    [Y]      = [Y]      + [Ty] + [ Rz    s  -Rx ] [Y]
    [Z]_REF2   [Z]_REF1   [Tz]   [-Ry   Rx    s ] [Z]_REF1

Rotations follow the IERS sign convention: a positive Rz moves a point on
the +X axis towards +Y.

Units of the stored parameters are those used in the publications:
translations in mm (mm/yr), scale in ppb (ppb/yr), rotations in
milliarcseconds (mas/yr) and the reference epoch in decimal years.
"""

import math
import numbers
from dataclasses import dataclass, fields, replace
from typing import Optional, Tuple

import numpy as np
from numba import njit

from ..core.constants import MAS2RAD, MM2M, PPB2SCALE


@njit(cache=True, fastmath=True)
def helmert_matrix(s, r):
    """
    Build the scale/rotation matrix of a Helmert transformation.

    Parameters
    ----------
    s : float
        Dimensionless scale offset
    r : array_like, shape (3,)
        Rotations about X, Y, Z in radians

    Returns
    -------
    M : ndarray, shape (3, 3)
        [[ s, -rz,  ry],
         [ rz,  s, -rx],
         [-ry,  rx,  s]]
    """
    M = np.array([[  s,  -r[2],  r[1]],
                  [ r[2],    s, -r[0]],
                  [-r[1],  r[0],    s]],
                 dtype=np.double)
    return M


@njit(cache=True, fastmath=True)
def apply_helmert(vector, position, t, s, r):
    """
    Evaluate ``vector + t + M(s, r) @ position``.

    With ``vector`` equal to ``position`` this transforms a position; with
    ``vector`` set to a velocity and the rate terms passed as ``t``, ``s``
    and ``r`` it transforms a velocity.

    Parameters
    ----------
    vector : ndarray, shape (3,)
        Vector being transformed
    position : ndarray, shape (3,)
        ECEF position the scale and rotation act on
    t : ndarray, shape (3,)
        Translation in meters
    s : float
        Dimensionless scale offset
    r : ndarray, shape (3,)
        Rotations in radians

    Returns
    -------
    out : ndarray, shape (3,)
    """
    M = helmert_matrix(s, r)
    out = np.empty(3, dtype=np.double)
    for i in range(3):
        out[i] = vector[i] + t[i] + M[i, 0] * position[0] + M[i, 1] * position[1] + M[i, 2] * position[2]
    return out


# Alternative wire names accepted when reading parameters
PARAM_ALIASES = {
    's': ('scale', 'd'),
    's_dot': ('scale_dot', 'd_dot'),
}


def _as_vector(value, name: str) -> np.ndarray:
    vector = np.asarray(value, dtype=np.float64)
    if vector.shape != (3,):
        raise ValueError(f"{name} must have shape (3,), got {vector.shape}")
    return vector


@dataclass(frozen=True)
class TimeDependentHelmertParams:
    """15-parameter Helmert transformation parameters

    The parameter block carries no direction; the direction is given by the
    :class:`~pyrefframe.reference_frame.transformation.Transformation`
    holding it.

    Attributes
    ----------
    epoch : float
        Reference epoch t0 in decimal years
    tx, ty, tz : float
        Translations (mm)
    tx_dot, ty_dot, tz_dot : float
        Translation rates (mm/yr)
    s : float
        Scale (ppb)
    s_dot : float
        Scale rate (ppb/yr)
    rx, ry, rz : float
        Rotations (mas), IERS sign convention
    rx_dot, ry_dot, rz_dot : float
        Rotation rates (mas/yr)
    """
    epoch: float
    tx: float = 0.0
    tx_dot: float = 0.0
    ty: float = 0.0
    ty_dot: float = 0.0
    tz: float = 0.0
    tz_dot: float = 0.0
    s: float = 0.0
    s_dot: float = 0.0
    rx: float = 0.0
    rx_dot: float = 0.0
    ry: float = 0.0
    ry_dot: float = 0.0
    rz: float = 0.0
    rz_dot: float = 0.0

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise TypeError(f"Helmert parameter '{f.name}' must be a real number, got {value!r}")
            value = float(value)
            if not math.isfinite(value):
                raise ValueError(f"Helmert parameter '{f.name}' must be finite, got {value}")
            object.__setattr__(self, f.name, value)
        if self.epoch <= 0.0:
            raise ValueError(f"Reference epoch must be a positive year, got {self.epoch}")

    @property
    def translation(self) -> np.ndarray:
        """Translation [tx, ty, tz] in mm"""
        return np.array([self.tx, self.ty, self.tz])

    @property
    def translation_rate(self) -> np.ndarray:
        """Translation rate [tx_dot, ty_dot, tz_dot] in mm/yr"""
        return np.array([self.tx_dot, self.ty_dot, self.tz_dot])

    @property
    def rotation(self) -> np.ndarray:
        """Rotation [rx, ry, rz] in mas"""
        return np.array([self.rx, self.ry, self.rz])

    @property
    def rotation_rate(self) -> np.ndarray:
        """Rotation rate [rx_dot, ry_dot, rz_dot] in mas/yr"""
        return np.array([self.rx_dot, self.ry_dot, self.rz_dot])

    def invert(self) -> 'TimeDependentHelmertParams':
        """Reverse the transformation

        The small angle form is linear in its parameters, so the inverse is
        obtained by negating every term. The reference epoch is unchanged.
        """
        return replace(self, **{name: -getattr(self, name) for name in SCALAR_FIELDS})

    def transform_position(self, position, epoch: float) -> np.ndarray:
        """
        Apply the transformation to a position at a specific epoch

        Parameters
        ----------
        position : array_like, shape (3,)
            ECEF position in meters
        epoch : float
            Epoch of the position in decimal years

        Returns
        -------
        ndarray, shape (3,)
            Transformed ECEF position in meters
        """
        position = _as_vector(position, "position")
        dt = float(epoch) - self.epoch
        t = (self.translation + self.translation_rate * dt) * MM2M
        s = (self.s + self.s_dot * dt) * PPB2SCALE
        r = (self.rotation + self.rotation_rate * dt) * MAS2RAD
        return apply_helmert(position, position, t, s, r)

    def transform_velocity(self, velocity, position) -> np.ndarray:
        """
        Apply the transformation to a velocity at a specific position

        Only the rate terms contribute. The rotation rate acts on the
        position, which accounts for the rotation of the frame itself.

        Parameters
        ----------
        velocity : array_like, shape (3,)
            ECEF velocity in m/yr
        position : array_like, shape (3,)
            ECEF position in meters

        Returns
        -------
        ndarray, shape (3,)
            Transformed ECEF velocity in m/yr
        """
        velocity = _as_vector(velocity, "velocity")
        position = _as_vector(position, "position")
        t = self.translation_rate * MM2M
        s = self.s_dot * PPB2SCALE
        r = self.rotation_rate * MAS2RAD
        return apply_helmert(velocity, position, t, s, r)

    def transform(self, position, velocity, epoch: float) -> Tuple[np.ndarray, Optional[np.ndarray]]:
        """
        Transform a position and an optional velocity

        Parameters
        ----------
        position : array_like, shape (3,)
            ECEF position in meters
        velocity : array_like, shape (3,) or None
            ECEF velocity in m/yr
        epoch : float
            Epoch of the position in decimal years

        Returns
        -------
        tuple
            (position, velocity); velocity is None if none was given
        """
        new_position = self.transform_position(position, epoch)
        new_velocity = None
        if velocity is not None:
            new_velocity = self.transform_velocity(velocity, position)
        return new_position, new_velocity

    def to_dict(self) -> dict:
        """Serialize using the canonical wire field names"""
        return {name: getattr(self, name) for name in WIRE_FIELDS}

    @classmethod
    def from_dict(cls, data: dict) -> 'TimeDependentHelmertParams':
        """
        Deserialize from a mapping of wire field names

        ``scale``/``d`` are accepted for ``s`` and ``scale_dot``/``d_dot``
        for ``s_dot``. Unknown keys are ignored.

        Raises
        ------
        ValueError
            If a field is missing, given under more than one name or not a number
        """
        if not isinstance(data, dict):
            raise ValueError(f"Helmert parameters must be a mapping, got {type(data).__name__}")

        values = {}
        for name in WIRE_FIELDS:
            present = [key for key in (name,) + PARAM_ALIASES.get(name, ()) if key in data]
            if not present:
                raise ValueError(f"Missing Helmert parameter '{name}'")
            if len(present) > 1:
                raise ValueError(f"Helmert parameter '{name}' given more than once as {present}")
            value = data[present[0]]
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise ValueError(f"Helmert parameter '{present[0]}' must be a number, got {value!r}")
            values[name] = value
        return cls(**values)


# Wire field order, as emitted by to_dict
WIRE_FIELDS = (
    'tx', 'ty', 'tz', 'tx_dot', 'ty_dot', 'tz_dot',
    's', 's_dot',
    'rx', 'ry', 'rz', 'rx_dot', 'ry_dot', 'rz_dot',
    'epoch',
)
SCALAR_FIELDS = WIRE_FIELDS[:-1]
