"""
Errors Module
-------------
Exception types raised by the bloodmeans toolbox.
"""


class InvalidArgument(ValueError):
    """Raised when a caller-supplied argument cannot be resolved against the input table."""
