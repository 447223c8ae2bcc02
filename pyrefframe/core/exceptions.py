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

"""Errors raised by reference frame transformations"""


class ReferenceFrameError(Exception):
    """Base class for reference frame transformation errors"""


class FrameMismatchError(ReferenceFrameError, ValueError):
    """A coordinate was handed to a transformation for a different source frame

    Attributes
    ----------
    expected : ReferenceFrame
        Source frame of the transformation
    actual : ReferenceFrame
        Reference frame of the supplied coordinate
    """

    def __init__(self, expected, actual):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Transformation expects a coordinate in {expected}, got {actual}")


class NoPathError(ReferenceFrameError, LookupError):
    """No chain of transformations connects two reference frames

    Attributes
    ----------
    from_frame : ReferenceFrame
        Frame the search started from
    to_frame : ReferenceFrame
        Frame that could not be reached
    """

    def __init__(self, from_frame, to_frame):
        self.from_frame = from_frame
        self.to_frame = to_frame
        super().__init__(f"No transformation found from {from_frame} to {to_frame}")
