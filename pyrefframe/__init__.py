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
pyrefframe - Geodetic Reference Frame Transformations for GNSS

Transforms ECEF positions and velocities between ITRF, ETRF, NAD83 and other
reference frames using 15-parameter time dependent Helmert transformations,
chaining transformations through the shortest path between frames.
"""

__version__ = "1.0.0"
__author__ = "pyrefframe Development Team"
__title__ = "pyrefframe"
__description__ = "Geodetic reference frame transformations for GNSS"

from .core import *
from .reference_frame import *
from .coordinate import *
from .io import *
from .config import RepositoryConfig, load_repository
from .logger import setup_logger, setup_logger_from_config
