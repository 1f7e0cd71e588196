"""
CSV Reporter Module
------------------
Writes mean tables produced by MeanAnalyzer to CSV.
Group identifiers come first, followed by one column per averaged variable;
missing means are written as empty cells.
"""
import logging
import os

import pandas as pd


class CSVReporter:
    def __init__(self, logger: logging.Logger):
        self.logger = logger
        self.logger.info("CSVReporter initialized.")

    def save_dataframe(self, means_df: pd.DataFrame, output_dir: str, filename: str) -> str:
        os.makedirs(output_dir, exist_ok=True)
        path = os.path.join(output_dir, filename)
        means_df.to_csv(path, index=False)
        self.logger.info(f"CSVReporter: Saved {len(means_df)} mean rows x {means_df.shape[1]} columns to {path}.")
        return path
