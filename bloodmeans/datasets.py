"""
Datasets Module
---------------
Small example datasets shipped with the toolbox.
"""
import pandas as pd


def load_bloodsample() -> pd.DataFrame:
    """
    Returns the bloodsample example: six subjects with a measurement for
    males and females, sampled from blood (ids 1-3) or urine (ids 4-6).
    A new DataFrame is built on every call.
    """
    return pd.DataFrame({
        'id': [1, 2, 3, 4, 5, 6],
        'biofluid': ['blood', 'blood', 'blood', 'urine', 'urine', 'urine'],
        'males': [10, 20, 30, 40, 50, 60],
        'females': [12, 18, 27, 41, 45, 58],
    })
