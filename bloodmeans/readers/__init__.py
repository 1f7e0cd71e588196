from .table_reader import TableReader

__all__ = ['TableReader']
