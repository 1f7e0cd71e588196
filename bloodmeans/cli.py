"""
Command-line runner: reads a table file, computes (grouped) means and
writes them next to an optional JSON summary.

Usage: bloodmeans <input_file> [group_column] [config.ini]

An empty group_column ("") uses [AGGREGATION] group_column from the config;
"-" averages over all rows even when the config names a group column.
"""
import os
import sys
from typing import List, Optional

from .analyzers import MeanAnalyzer
from .readers import TableReader
from .reporters import CSVReporter, JSONReporter
from .utils import get_group_column, load_config, setup_logging

NO_GROUPING = "-"
USAGE = ("[AGG] Usage: bloodmeans <input_file> [group_column] [config.ini]\n"
         "[AGG]   group_column: \"\" = use config, \"-\" = no grouping")


def get_output_filename(input_file: str, suffix: str) -> str:
    return f"{os.path.splitext(os.path.basename(input_file))[0]}_{suffix}"


def run(input_file: str, group_column: Optional[str], config_path: Optional[str],
        use_config_group: bool = True) -> None:
    config = load_config(config_path)
    logger = setup_logging(config.get('LOGGING', 'level', fallback='INFO'),
                           config.get('LOGGING', 'log_file', fallback='') or None)
    if group_column is None and use_config_group:
        group_column = get_group_column(config)
    output_dir = config.get('OUTPUT', 'output_dir', fallback='.')

    print(f"[AGG] Started for: {input_file}")
    table = TableReader(logger).read(input_file)
    analyzer = MeanAnalyzer(logger)
    means_df = analyzer.compute_means(table, group_column)

    csv_path = CSVReporter(logger).save_dataframe(means_df, output_dir, get_output_filename(input_file, 'means.csv'))
    print(f"[AGG] Means saved: {csv_path}")
    if config.getboolean('OUTPUT', 'write_summary', fallback=False):
        summary = analyzer.summarize(table, group_column, means_df=means_df)
        json_path = JSONReporter(logger).save_summary(summary, output_dir, get_output_filename(input_file, 'means_summary.json'))
        print(f"[AGG] Summary saved: {json_path}")


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if not 1 <= len(args) <= 3:
        print(USAGE)
        return 1
    input_file = args[0]
    group_arg = args[1] if len(args) > 1 else ""
    ungrouped = group_arg == NO_GROUPING
    group_column = group_arg if group_arg and not ungrouped else None
    config_path = args[2] if len(args) > 2 else None
    try:
        run(input_file, group_column, config_path, use_config_group=not ungrouped)
    except Exception as e:
        print(f"[AGG] Error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
