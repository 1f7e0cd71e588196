from .config_loader import load_config, get_group_column
from .logging_utils import setup_logging

__all__ = ['load_config', 'get_group_column', 'setup_logging']
