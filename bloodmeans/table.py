"""
Table Module
------------
Column-typed tabular container used as input to the aggregators.
Each column is tagged once, at construction, as numeric or categorical.
"""
import logging
import numbers
from enum import Enum
from typing import Any, Dict, List, Mapping

import numpy as np
import pandas as pd
import polars as pl

from .errors import InvalidArgument

logger = logging.getLogger(__name__)


class ColumnKind(str, Enum):
    NUMERIC = "numeric"
    CATEGORICAL = "categorical"


def _is_missing(value: Any) -> bool:
    return pd.api.types.is_scalar(value) and bool(pd.isna(value))


def _is_real_number(value: Any) -> bool:
    # bool is a subclass of int; logical values are not measurements
    return isinstance(value, numbers.Real) and not isinstance(value, (bool, np.bool_))


def _classify_column(series: pd.Series) -> ColumnKind:
    dtype = series.dtype
    if pd.api.types.is_bool_dtype(dtype):
        return ColumnKind.CATEGORICAL
    if pd.api.types.is_numeric_dtype(dtype):
        return ColumnKind.NUMERIC
    if not pd.api.types.is_object_dtype(dtype):
        return ColumnKind.CATEGORICAL
    present = [v for v in series if not _is_missing(v)]
    # a column with no present values is an all-missing numeric column
    if all(_is_real_number(v) for v in present):
        return ColumnKind.NUMERIC
    return ColumnKind.CATEGORICAL


def _as_float_series(series: pd.Series) -> pd.Series:
    values = [np.nan if _is_missing(v) else float(v) for v in series]
    return pd.Series(values, index=series.index, name=series.name, dtype=float)


def _to_pandas(data: Any) -> pd.DataFrame:
    if isinstance(data, pd.DataFrame):
        return data.copy()
    if isinstance(data, pl.DataFrame):
        return data.to_pandas()
    if isinstance(data, Mapping):
        try:
            return pd.DataFrame(dict(data))
        except ValueError as e:
            raise InvalidArgument(f"Columns could not be combined into a table: {e}") from e
    raise InvalidArgument(f"Unsupported table input of type {type(data).__name__}.")


class Table:
    """
    Ordered collection of named, equal-length columns.

    Accepts a pandas DataFrame, a polars DataFrame or a mapping of column
    name to values. The input is copied, so later changes to it do not
    affect the Table. Object columns holding only real numbers (and missing
    values) are stored as float columns.
    """

    def __init__(self, data: Any):
        if isinstance(data, Table):
            self._frame = data._frame.copy()
            self._kinds = dict(data._kinds)
            return

        frame = _to_pandas(data)
        if frame.columns.has_duplicates:
            duplicated = list(frame.columns[frame.columns.duplicated()])
            raise InvalidArgument(f"Column names must be unique, found duplicates: {duplicated}")

        kinds: Dict[Any, ColumnKind] = {}
        for col in frame.columns:
            kind = _classify_column(frame[col])
            if kind is ColumnKind.NUMERIC:
                dtype = frame[col].dtype
                if pd.api.types.is_object_dtype(dtype):
                    frame[col] = _as_float_series(frame[col])
                elif pd.api.types.is_extension_array_dtype(dtype):
                    # nullable Int64/Float64 -> float64 with NaN for <NA>
                    frame[col] = frame[col].astype("float64")
            kinds[col] = kind

        self._frame = frame.reset_index(drop=True)
        self._kinds = kinds
        logger.debug(f"Table: {len(self._frame)} rows, column kinds {self._kinds}.")

    @property
    def columns(self) -> List[Any]:
        return list(self._frame.columns)

    @property
    def kinds(self) -> Dict[Any, ColumnKind]:
        return dict(self._kinds)

    @property
    def numeric_columns(self) -> List[Any]:
        return [col for col, kind in self._kinds.items() if kind is ColumnKind.NUMERIC]

    @property
    def categorical_columns(self) -> List[Any]:
        return [col for col, kind in self._kinds.items() if kind is ColumnKind.CATEGORICAL]

    @property
    def n_rows(self) -> int:
        return len(self._frame)

    def kind_of(self, column: Any) -> ColumnKind:
        if column not in self._kinds:
            raise InvalidArgument(f"Column '{column}' not found in table. Available columns: {self.columns}")
        return self._kinds[column]

    def to_pandas(self) -> pd.DataFrame:
        """Returns a copy of the underlying DataFrame."""
        return self._frame.copy()

    def __contains__(self, column: Any) -> bool:
        return column in self._kinds

    def __len__(self) -> int:
        return self.n_rows

    def __repr__(self) -> str:
        return f"Table(rows={self.n_rows}, numeric={self.numeric_columns}, categorical={self.categorical_columns})"
