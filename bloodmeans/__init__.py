"""
bloodmeans
----------
Column-wise means of tabular data, optionally per group.
"""
from .analyzers import MeanAnalyzer, aggregate, bloodmeans
from .datasets import load_bloodsample
from .errors import InvalidArgument
from .table import ColumnKind, Table

__version__ = '0.1.0'

__all__ = [
    'ColumnKind',
    'InvalidArgument',
    'MeanAnalyzer',
    'Table',
    'aggregate',
    'bloodmeans',
    'load_bloodsample',
]
