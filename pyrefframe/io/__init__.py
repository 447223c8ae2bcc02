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

"""Input/output for transformation tables (JSON, YAML and CSV)"""

from .transformation_file import (
    load_transformations,
    save_transformations,
    transformations_from_dataframe,
    transformations_from_json,
    transformations_from_records,
    transformations_to_dataframe,
    transformations_to_json,
    transformations_to_records,
)

__all__ = [
    'load_transformations',
    'save_transformations',
    'transformations_from_dataframe',
    'transformations_from_json',
    'transformations_from_records',
    'transformations_to_dataframe',
    'transformations_to_json',
    'transformations_to_records',
]
