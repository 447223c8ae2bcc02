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

"""Repository configuration

A configuration file selects the transformations a repository starts with
and how the library logs::

    use_builtin: true
    transformation_files:
      - local_frames.yaml
    transformations:
      - from: ITRF2020
        to: MY_FRAME
        params: {tx: 1.0, ty: 0.0, tz: 0.0, ...}
    logging:
      default_level: INFO
      module_levels:
        pyrefframe.reference_frame.repository: TRACE

Transformations are added in order: builtin table, then each file, then
inline records, so later definitions of the same frame pair win.
"""

import json
import logging
from pathlib import Path
from typing import List, Optional, Union

import yaml

from .io.transformation_file import load_transformations, transformations_from_records
from .logger import LoggerConfig, setup_logger_from_config
from .reference_frame.repository import TransformationRepository

logger = logging.getLogger(__name__)


class RepositoryConfig:
    """Configuration for building a TransformationRepository"""

    def __init__(self):
        self.use_builtin = True
        self.transformation_files: List[Path] = []
        self.transformations: List[dict] = []
        self.logging: Optional[dict] = None
        self.base_dir: Optional[Path] = None

    def _resolve(self, path: Union[str, Path]) -> Path:
        path = Path(path)
        if not path.is_absolute() and self.base_dir is not None:
            path = self.base_dir / path
        return path

    def configure_from_dict(self, config: dict):
        """
        Configure from dictionary

        Unknown keys are ignored.

        Raises
        ------
        ValueError
            If a known key has the wrong type
        """
        if not isinstance(config, dict):
            raise ValueError(f"Configuration must be a mapping, got {type(config).__name__}")

        if 'use_builtin' in config:
            if not isinstance(config['use_builtin'], bool):
                raise ValueError(f"use_builtin must be true or false, got {config['use_builtin']!r}")
            self.use_builtin = config['use_builtin']

        if 'transformation_files' in config:
            files = config['transformation_files'] or []
            if not isinstance(files, list) or not all(isinstance(f, (str, Path)) for f in files):
                raise ValueError("transformation_files must be a list of paths")
            self.transformation_files = [self._resolve(f) for f in files]

        if 'transformations' in config:
            records = config['transformations'] or []
            if not isinstance(records, list):
                raise ValueError("transformations must be a list of records")
            self.transformations = list(records)

        if 'logging' in config:
            if not isinstance(config['logging'], dict):
                raise ValueError("logging must be a mapping")
            # Validate only; loggers are set up by build_repository
            LoggerConfig().configure_from_dict(config['logging'])
            self.logging = config['logging']

    def load_from_file(self, filepath: Union[str, Path]):
        """
        Load configuration from a YAML or JSON file

        Relative transformation file paths are resolved against the
        directory holding the configuration file.

        Raises
        ------
        ValueError
            If the file format is not supported
        FileNotFoundError
            If the file does not exist
        """
        filepath = Path(filepath)
        if filepath.suffix in ['.yaml', '.yml']:
            with open(filepath) as f:
                data = yaml.safe_load(f)
        elif filepath.suffix == '.json':
            with open(filepath) as f:
                data = json.load(f)
        else:
            raise ValueError(f"Unsupported file format: {filepath.suffix}")

        self.base_dir = filepath.resolve().parent
        self.configure_from_dict(data or {})

    def build_repository(self) -> TransformationRepository:
        """
        Build a repository from this configuration

        Applies the logging section, if any, before loading transformations.
        """
        if self.logging is not None:
            setup_logger_from_config(self.logging)

        repo = TransformationRepository.from_builtin() if self.use_builtin else TransformationRepository()
        for path in self.transformation_files:
            repo.extend(load_transformations(path))
        repo.extend(transformations_from_records(self.transformations))

        logger.info("Built repository with %d frames and %d transformations",
                    len(repo.frames()), repo.count())
        return repo


def load_repository(filepath: Union[str, Path]) -> TransformationRepository:
    """Build a repository from a configuration file"""
    config = RepositoryConfig()
    config.load_from_file(filepath)
    return config.build_repository()
