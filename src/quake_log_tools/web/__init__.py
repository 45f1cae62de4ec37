"""
HTTP API for Quake 3 Arena match reports.
"""

from .app import create_app

__all__ = ['create_app']
