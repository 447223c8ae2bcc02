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

"""Repository of reference frame transformations

The repository is a directed graph whose nodes are reference frames and
whose edges carry Helmert parameters. Every transformation added to the
repository is stored in both directions, so a chain of transformations
between any two connected frames can be found with a breadth-first search.

Example:
    >>> repo = TransformationRepository.from_builtin()
    >>> coord = Coordinate.with_velocity(
    ...     ReferenceFrame.ITRF2014,
    ...     [-2703764.0, -4261273.0, 3887158.0],
    ...     [-0.221, 0.254, 0.122],
    ...     2020.2)
    >>> nad83 = repo.transform(coord.adjust_epoch(2010.0), ReferenceFrame.NAD83_2011)
"""

import logging
from collections import deque
from typing import TYPE_CHECKING, Dict, Iterable, Iterator, List, Union

from ..core.exceptions import NoPathError
from ..logger import LogLevel
from .frame import ReferenceFrame
from .helmert import TimeDependentHelmertParams
from .params import builtin_transformations
from .transformation import Transformation

if TYPE_CHECKING:
    from ..coordinate.coordinate import Coordinate

logger = logging.getLogger(__name__)

TransformationGraph = Dict[ReferenceFrame, Dict[ReferenceFrame, TimeDependentHelmertParams]]


class TransformationRepository:
    """A repository for managing reference frame transformations

    Holds the builtin transformations and/or transformations supplied at
    runtime. Reads (``get_shortest_path``, ``transform``) do not modify the
    repository and can run concurrently; ``add_transformation`` and
    ``extend`` must not run concurrently with anything else.
    """

    def __init__(self):
        """Create an empty transformation repository"""
        self._graph: TransformationGraph = {}

    @classmethod
    def from_transformations(cls, transformations: Iterable[Transformation]) -> 'TransformationRepository':
        """
        Create a repository from a collection of transformations

        If the same pair of frames occurs more than once, the last
        occurrence takes priority.
        """
        repo = cls()
        repo.extend(transformations)
        return repo

    @classmethod
    def from_builtin(cls) -> 'TransformationRepository':
        """Create a repository holding the builtin transformations"""
        return cls.from_transformations(builtin_transformations())

    def add_transformation(self, transformation: Transformation):
        """
        Add a transformation and its inverse to the repository

        An existing transformation between the same two frames is replaced,
        in both directions.
        """
        if not isinstance(transformation, Transformation):
            raise TypeError(f"Expected a Transformation, got {type(transformation).__name__}")

        from_frame = transformation.from_frame
        to_frame = transformation.to_frame
        if to_frame in self._graph.get(from_frame, {}):
            logger.debug("Replacing transformation %s -> %s", from_frame, to_frame)
        else:
            logger.debug("Adding transformation %s -> %s", from_frame, to_frame)

        self._graph.setdefault(from_frame, {})[to_frame] = transformation.params
        self._graph.setdefault(to_frame, {})[from_frame] = transformation.params.invert()

    def extend(self, transformations: Iterable[Transformation]):
        """Add each transformation in order; later duplicates win"""
        for transformation in transformations:
            self.add_transformation(transformation)

    def _search(self, from_frame: ReferenceFrame, to_frame: ReferenceFrame) -> List[ReferenceFrame]:
        """Breadth-first search returning the frames along the shortest path"""
        if from_frame == to_frame:
            return [from_frame]

        visited = {from_frame}
        queue = deque([[from_frame]])
        while queue:
            path = queue.popleft()
            for neighbor in sorted(self._graph.get(path[-1], ())):
                if neighbor in visited:
                    continue
                if neighbor == to_frame:
                    return path + [neighbor]
                visited.add(neighbor)
                queue.append(path + [neighbor])

        raise NoPathError(from_frame, to_frame)

    def get_shortest_frame_path(self, from_frame: Union[ReferenceFrame, str],
                                to_frame: Union[ReferenceFrame, str]) -> List[ReferenceFrame]:
        """
        Get the frames visited by the shortest chain of transformations

        Returns
        -------
        List[ReferenceFrame]
            Frames from ``from_frame`` to ``to_frame`` inclusive; a single
            element when both are the same frame

        Raises
        ------
        NoPathError
            If the frames are not connected
        """
        return self._search(ReferenceFrame.parse(from_frame), ReferenceFrame.parse(to_frame))

    def get_shortest_path(self, from_frame: Union[ReferenceFrame, str],
                          to_frame: Union[ReferenceFrame, str]) -> List[TimeDependentHelmertParams]:
        """
        Get the shortest series of transformations between two frames

        Uses breadth-first search, so the path has the minimum number of
        steps. Neighbours are explored in reference frame sort order, which
        makes the result deterministic when several shortest paths exist.

        Parameters
        ----------
        from_frame : ReferenceFrame or str
            Source frame
        to_frame : ReferenceFrame or str
            Destination frame

        Returns
        -------
        List[TimeDependentHelmertParams]
            Parameters to apply in order; empty if both frames are the same

        Raises
        ------
        NoPathError
            If no path between the two frames exists
        """
        frames = self.get_shortest_frame_path(from_frame, to_frame)
        path = [self._graph[a][b] for a, b in zip(frames, frames[1:])]
        if logger.isEnabledFor(LogLevel.TRACE.value):
            logger.trace("Path %s", " -> ".join(str(frame) for frame in frames))
        return path

    def transform(self, coord: 'Coordinate', to_frame: Union[ReferenceFrame, str]) -> 'Coordinate':
        """
        Transform a coordinate to a new reference frame

        Finds the shortest series of transformations from the coordinate's
        frame to the requested one and applies them in sequence, all at the
        coordinate's epoch. The epoch is not modified; use
        ``Coordinate.adjust_epoch`` for that.

        Raises
        ------
        NoPathError
            If no path from the coordinate's frame to ``to_frame`` exists
        """
        to_frame = ReferenceFrame.parse(to_frame)
        epoch = coord.epoch

        position, velocity = coord.position, coord.velocity
        for params in self.get_shortest_path(coord.reference_frame, to_frame):
            position, velocity = params.transform(position, velocity, epoch)

        return type(coord)(to_frame, position, velocity, coord.epoch)

    def count(self) -> int:
        """Number of directed transformations, inverses included"""
        return sum(len(neighbors) for neighbors in self._graph.values())

    def frames(self) -> List[ReferenceFrame]:
        """All reference frames in the repository, sorted"""
        return sorted(self._graph)

    def transformations(self) -> Iterator[Transformation]:
        """Iterate over every stored directed transformation, sorted by frames"""
        for from_frame in sorted(self._graph):
            neighbors = self._graph[from_frame]
            for to_frame in sorted(neighbors):
                yield Transformation(from_frame, to_frame, neighbors[to_frame])

    def __iter__(self) -> Iterator[Transformation]:
        return self.transformations()

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, frame) -> bool:
        if isinstance(frame, str):
            frame = ReferenceFrame.parse(frame)
        return frame in self._graph

    def __repr__(self):
        return f"TransformationRepository(frames={len(self._graph)}, transformations={self.count()})"
