from .csv_reporter import CSVReporter
from .json_reporter import JSONReporter

__all__ = ['CSVReporter', 'JSONReporter']
