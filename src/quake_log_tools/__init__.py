"""
Quake Log Tools - Python package for Quake 3 Arena server log analysis

This package turns a Quake 3 Arena server log into per-match frag reports
and exposes them through command-line tools and a small HTTP API.

The package uses a flat structure with dependencies on the config module
for configuration management.
"""

__version__ = '1.0.0'
