"""
Quake Log Sources

This package reads Quake 3 Arena server logs from local files or HTTP(S)
locations and feeds them to the parser.
"""

__all__ = ['log_source']

from .log_source import LogSource
