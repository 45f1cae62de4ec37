"""
Quake 3 Arena Log Parser

This package provides the log-to-report transformation: line classification,
kill extraction, per-match accumulation and the reducer driving them.
"""

from .models import MatchReport, KillEvent, LineKind, WORLD_PLAYER
from .classifier import classify_line
from .extractor import extract_kill
from .accumulator import MatchAccumulator
from .reducer import LogReducer

__all__ = [
    'MatchReport',
    'KillEvent',
    'LineKind',
    'WORLD_PLAYER',
    'classify_line',
    'extract_kill',
    'MatchAccumulator',
    'LogReducer',
]
