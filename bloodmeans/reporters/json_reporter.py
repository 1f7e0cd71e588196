"""
JSON Reporter Module
-------------------
Handles saving aggregation summaries to JSON files.
NaN values are written as null.
"""
import json
import logging
import math
import os
from typing import Any, Dict

import numpy as np
import pandas as pd


class NpEncoder(json.JSONEncoder):
    def default(self, obj):
        if isinstance(obj, np.integer):
            return int(obj)
        elif isinstance(obj, np.floating):
            return float(obj)
        elif isinstance(obj, np.bool_):
            return bool(obj)
        elif isinstance(obj, np.ndarray):
            return obj.tolist()
        elif isinstance(obj, pd.Timestamp):
            return obj.isoformat()
        else:
            return super(NpEncoder, self).default(obj)


def _nan_to_none(value: Any) -> Any:
    # json would otherwise emit the non-standard NaN token
    if isinstance(value, dict):
        return {k: _nan_to_none(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_nan_to_none(v) for v in value]
    if isinstance(value, (float, np.floating)) and math.isnan(value):
        return None
    return value


class JSONReporter:
    def __init__(self, logger: logging.Logger):
        self.logger = logger
        self.logger.info("JSONReporter initialized.")

    def save_summary(self, summary: Dict[str, Any], output_dir: str, filename: str) -> str:
        os.makedirs(output_dir, exist_ok=True)
        path = os.path.join(output_dir, filename)
        with open(path, 'w') as f:
            json.dump(_nan_to_none(summary), f, indent=4, cls=NpEncoder)
        self.logger.info(f"JSONReporter: Saved summary to {path}.")
        return path
