"""
Table Reader Module
-------------------
Loads tabular data files (CSV, TSV, Parquet) into a Table.
"""
import logging
import os

import polars as pl

from ..errors import InvalidArgument
from ..table import Table

SEPARATORS = {'.csv': ',', '.tsv': '\t', '.txt': '\t'}


class TableReader:
    """
    Reads CSV, tab separated and Parquet files with polars and wraps the
    result in a Table.
    """
    def __init__(self, logger: logging.Logger):
        self.logger = logger
        self.logger.info("TableReader initialized.")

    def read(self, file_path: str) -> Table:
        if not os.path.isfile(file_path):
            self.logger.error(f"TableReader: File not found: {file_path}")
            raise FileNotFoundError(file_path)

        ext = os.path.splitext(file_path)[1].lower()
        if ext == '.parquet':
            df = pl.read_parquet(file_path)
        elif ext in SEPARATORS:
            # scan every row so late floats or labels do not break type inference
            df = pl.read_csv(file_path, separator=SEPARATORS[ext], null_values=['', 'NA'], infer_schema_length=None)
        else:
            self.logger.error(f"TableReader: Unsupported file extension '{ext}' for {file_path}")
            raise InvalidArgument(f"Unsupported file extension '{ext}'. Expected one of: .csv, .tsv, .txt, .parquet")

        self.logger.info(f"TableReader: Loaded {file_path}, shape: {df.shape}")
        return Table(df)
