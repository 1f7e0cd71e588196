"""
Config Loader Module
--------------------
Reads INI configuration for the command-line runner.
Values are looked up with config.get(section, key, fallback=...).
"""
import configparser
import os
from typing import Optional

DEFAULT_CONFIG = {
    'LOGGING': {'level': 'INFO', 'log_file': ''},
    'AGGREGATION': {'group_column': ''},
    'OUTPUT': {'output_dir': '.', 'write_summary': 'false'},
}


def load_config(config_path: Optional[str] = None) -> configparser.ConfigParser:
    """
    Returns a ConfigParser holding the defaults, overridden by config_path if given.
    Raises FileNotFoundError if config_path does not exist.
    """
    config = configparser.ConfigParser()
    config.read_dict(DEFAULT_CONFIG)
    if config_path:
        if not os.path.isfile(config_path):
            raise FileNotFoundError(config_path)
        config.read(config_path)
    return config


def get_group_column(config: configparser.ConfigParser) -> Optional[str]:
    """Returns the configured grouping column, or None when it is empty."""
    value = config.get('AGGREGATION', 'group_column', fallback='').strip()
    return value or None
