"""Load sequences to fold from files or command line tokens."""
import json
import logging
from pathlib import Path

import pandas as pd

from .sparse import HOLE, SparseArray

_log = logging.getLogger(__name__)


def parse_value(token):
    """Decode a command line token as JSON, falling back to the raw string."""
    try:
        return json.loads(token)
    except ValueError:
        return token


def load_json(path):
    with open(path, mode="r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError(f"{path} must contain a JSON list, found {type(data).__name__}")
    return data


def load_csv(path, column=None):
    """Read one column of a CSV file into a SparseArray.

    Blank cells are holes. Numeric cells become Python numbers.

    Arguments:
    path - file path or buffer
    column - column name, defaults to the first column
    """
    df = pd.read_csv(path, keep_default_na=False, na_values=[""])
    if df.columns.empty:
        raise ValueError(f"{path} has no columns")

    if column is None:
        column = df.columns[0]
    elif column not in df.columns:
        raise ValueError(f"Column '{column}' not found, available: {', '.join(map(str, df.columns))}")

    series = df[column]
    values = [HOLE if pd.isna(v) else _to_native(v) for v in series.tolist()]
    _log.debug(f"Loaded {len(values)} rows from column '{column}'")
    return SparseArray(values)


def _to_native(value):
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def load_sequence(path, column=None):
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix == ".json":
        return load_json(path)
    if suffix == ".csv":
        return load_csv(path, column=column)
    raise ValueError(f"Unsupported file type '{suffix}', expected .csv or .json")
