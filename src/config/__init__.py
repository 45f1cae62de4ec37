"""
Configuration package for Quake Log Tools.

Tools load a profile through QuakeTool.load_config, which builds a Config
instance on demand.
"""

from .config import Config

__all__ = ['Config']
