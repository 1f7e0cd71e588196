"""
Mean Analyzer Module
--------------------
Computes column-wise arithmetic means of numeric columns, optionally
per group of a categorical column.
"""
import logging
from typing import Any, Dict, Optional

import pandas as pd

from ..errors import InvalidArgument
from ..table import Table

logger = logging.getLogger(__name__)


def aggregate(table: Any, group_key: Optional[Any] = None) -> pd.DataFrame:
    """
    Computes the mean of every numeric column of a table.

    Args:
        table: A Table, pandas DataFrame, polars DataFrame or mapping of column name to values.
        group_key: Optional name of the column whose values partition the rows.

    Returns:
        pd.DataFrame: Without grouping, a single row with one column per numeric input column.
                      With grouping, one row per distinct value of ``group_key`` (in order of
                      first appearance), the group value in the first column followed by the
                      numeric column means. Missing values are ignored; a group without any
                      present value in a column gets NaN.

    Raises:
        InvalidArgument: If ``group_key`` does not name a column of the table.
    """
    if not isinstance(table, Table):
        table = Table(table)
    frame = table.to_pandas()

    if group_key is None:
        means = {col: frame[col].mean() for col in table.numeric_columns}
        logger.debug(f"aggregate: ungrouped means over {len(frame)} rows for {list(means)}.")
        return pd.DataFrame(means, index=pd.RangeIndex(1))

    if group_key not in table:
        raise InvalidArgument(f"Grouping column '{group_key}' not found in table. Available columns: {table.columns}")

    value_cols = [col for col in table.numeric_columns if col != group_key]
    codes, uniques = pd.factorize(frame[group_key], sort=False, use_na_sentinel=False)
    result = pd.DataFrame({group_key: uniques})

    if len(uniques) == 0:
        for col in value_cols:
            result[col] = pd.Series(dtype=float)
        return result

    if value_cols:
        # codes number the groups in order of first appearance
        means = frame[value_cols].groupby(codes, sort=True).mean()
        for col in value_cols:
            result[col] = means[col].to_numpy()
    logger.debug(f"aggregate: {len(result)} groups by '{group_key}' for {value_cols}.")
    return result


bloodmeans = aggregate


class MeanAnalyzer:
    """
    Computes (grouped) means of numeric columns.
    - Wraps aggregate() with logging for use inside analysis pipelines.
    - Usable in any project (no project-specific assumptions).
    """
    def __init__(self, logger: logging.Logger):
        self.logger = logger
        self.logger.info("MeanAnalyzer initialized.")

    def compute_means(self, data_df: Any, group_col: Optional[Any] = None) -> pd.DataFrame:
        """
        Computes the means of all numeric columns, per group if group_col is given.
        Raises InvalidArgument if group_col is not a column of data_df.
        """
        table = data_df if isinstance(data_df, Table) else Table(data_df)
        if not table.numeric_columns or table.numeric_columns == [group_col]:
            self.logger.warning("MeanAnalyzer: No numeric columns to average. Result will only contain group identifiers.")
        if table.n_rows == 0:
            self.logger.warning("MeanAnalyzer: Input table has no rows.")
        try:
            result = aggregate(table, group_col)
        except InvalidArgument as e:
            self.logger.error(f"MeanAnalyzer: {e}")
            raise
        if group_col is None:
            self.logger.info(f"MeanAnalyzer: Computed means for {result.shape[1]} numeric columns over {table.n_rows} rows.")
        else:
            self.logger.info(f"MeanAnalyzer: Computed means for {result.shape[1] - 1} numeric columns across {len(result)} groups of '{group_col}'.")
        return result

    def summarize(self, data_df: Any, group_col: Optional[Any] = None,
                  means_df: Optional[pd.DataFrame] = None) -> Dict[str, Any]:
        """
        Returns the means with bookkeeping about the input, ready to be written as JSON.
        Pass means_df to reuse a result from compute_means instead of recomputing it.
        """
        table = data_df if isinstance(data_df, Table) else Table(data_df)
        result = means_df if means_df is not None else self.compute_means(table, group_col)
        numeric = [col for col in table.numeric_columns if col != group_col]
        dropped = [col for col in table.categorical_columns if col != group_col]
        return {
            'group_column': group_col,
            'n_rows': table.n_rows,
            'n_groups': len(result) if group_col is not None else 1,
            'numeric_columns': numeric,
            'dropped_columns': dropped,
            'means': result.astype(object).where(result.notna(), None).to_dict(orient='records'),
        }
