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

"""Reading and writing transformation records

Transformations are exchanged as records of the form::

    {"from": "ITRF2020",
     "to": "ETRF2020",
     "params": {"tx": 0.0, "ty": 0.0, "tz": 0.0,
                "tx_dot": 0.0, "ty_dot": 0.0, "tz_dot": 0.0,
                "s": 0.0, "s_dot": 0.0,
                "rx": 0.0, "ry": 0.0, "rz": 0.0,
                "rx_dot": 0.086, "ry_dot": 0.519, "rz_dot": -0.753,
                "epoch": 1989.0}}

JSON and YAML files hold a list of records, or a mapping with the list
under ``transformations``. CSV files hold one record per row with the
frame names and parameters as columns.
"""

import json
import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

import pandas as pd
import yaml

from ..reference_frame.helmert import PARAM_ALIASES, WIRE_FIELDS
from ..reference_frame.transformation import FROM_KEYS, TO_KEYS, Transformation

logger = logging.getLogger(__name__)

FORMATS = {
    '.json': 'json',
    '.yaml': 'yaml',
    '.yml': 'yaml',
    '.csv': 'csv',
}

DATAFRAME_COLUMNS = ('from', 'to') + WIRE_FIELDS

_FRAME_COLUMNS = FROM_KEYS + TO_KEYS
_PARAM_COLUMNS = WIRE_FIELDS + tuple(alias for aliases in PARAM_ALIASES.values() for alias in aliases)


def _format_for(path: Path, format: Optional[str] = None) -> str:
    if format is not None:
        format = format.lower()
        if format not in FORMATS.values():
            raise ValueError(f"Unsupported format: {format}")
        return format
    try:
        return FORMATS[path.suffix.lower()]
    except KeyError:
        raise ValueError(f"Unsupported file format: {path.suffix}") from None


def _unwrap(data) -> list:
    """Record list from either a bare list or a ``transformations`` mapping"""
    if isinstance(data, dict):
        if 'transformations' not in data:
            raise ValueError("Transformation mapping has no 'transformations' key")
        data = data['transformations']
    if data is None:
        return []
    if not isinstance(data, list):
        raise ValueError(f"Expected a list of transformations, got {type(data).__name__}")
    return data


def transformations_from_records(records) -> List[Transformation]:
    """Parse wire format records (a list, or a mapping with ``transformations``)"""
    return [Transformation.from_dict(record) for record in _unwrap(records)]


def transformations_to_records(transformations: Iterable[Transformation]) -> List[dict]:
    """Wire format records with canonical names"""
    return [transformation.to_dict() for transformation in transformations]


def transformations_to_json(transformations: Iterable[Transformation], indent: Optional[int] = 2) -> str:
    """Serialize transformations to a JSON array"""
    return json.dumps(transformations_to_records(transformations), indent=indent)


def transformations_from_json(text: str) -> List[Transformation]:
    """Parse transformations from JSON text"""
    return transformations_from_records(json.loads(text))


def transformations_to_dataframe(transformations: Iterable[Transformation]) -> pd.DataFrame:
    """
    Tabulate transformations

    Returns
    -------
    pd.DataFrame
        One row per transformation with columns: from, to, tx, ty, tz,
        tx_dot, ty_dot, tz_dot, s, s_dot, rx, ry, rz, rx_dot, ry_dot,
        rz_dot, epoch
    """
    rows = []
    for transformation in transformations:
        row = {'from': str(transformation.from_frame), 'to': str(transformation.to_frame)}
        row.update(transformation.params.to_dict())
        rows.append(row)
    return pd.DataFrame(rows, columns=list(DATAFRAME_COLUMNS))


def transformations_from_dataframe(df: pd.DataFrame) -> List[Transformation]:
    """
    Build transformations from a table with one transformation per row

    Frame columns may use the same aliases as the wire format
    (``source``/``destination``), as may the scale columns.
    """
    frame_columns = [col for col in df.columns if col in _FRAME_COLUMNS]
    param_columns = [col for col in df.columns if col in _PARAM_COLUMNS]

    transformations = []
    for row in df.to_dict(orient='records'):
        record = {col: row[col] for col in frame_columns}
        record['params'] = {col: row[col] for col in param_columns}
        transformations.append(Transformation.from_dict(record))
    return transformations


def load_transformations(path: Union[str, Path]) -> List[Transformation]:
    """
    Load transformations from a file

    The file format is determined from the extension.

    Parameters
    ----------
    path : str or Path
        Path to a .json, .yaml, .yml or .csv file

    Returns
    -------
    List[Transformation]
        Transformations in file order

    Raises
    ------
    ValueError
        If the format is not supported or a record is invalid
    FileNotFoundError
        If the file does not exist
    """
    path = Path(path)
    format = _format_for(path)
    if not path.exists():
        raise FileNotFoundError(f"Transformation file not found: {path}")

    if format == 'csv':
        df = pd.read_csv(path, dtype={col: str for col in _FRAME_COLUMNS}, float_precision='round_trip')
        transformations = transformations_from_dataframe(df)
    elif format == 'yaml':
        with open(path) as f:
            transformations = transformations_from_records(yaml.safe_load(f))
    else:
        with open(path) as f:
            transformations = transformations_from_records(json.load(f))

    logger.info("Loaded %d transformations from %s", len(transformations), path)
    return transformations


def save_transformations(transformations: Iterable[Transformation],
                         path: Union[str, Path],
                         format: Optional[str] = None) -> None:
    """
    Save transformations to a file

    Parameters
    ----------
    transformations : iterable of Transformation
        Transformations to save; a TransformationRepository saves every
        directed transformation it holds
    path : str or Path
        Output file
    format : str, optional
        'json', 'yaml' or 'csv'; taken from the extension if not given
    """
    path = Path(path)
    format = _format_for(path, format)
    transformations = list(transformations)

    if format == 'csv':
        transformations_to_dataframe(transformations).to_csv(path, index=False)
    elif format == 'yaml':
        with open(path, 'w') as f:
            yaml.safe_dump(transformations_to_records(transformations), f,
                           default_flow_style=False, sort_keys=False)
    else:
        with open(path, 'w') as f:
            f.write(transformations_to_json(transformations))

    logger.info("Saved %d transformations to %s", len(transformations), path)
