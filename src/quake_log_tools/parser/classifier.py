"""
Line classifier for Quake 3 Arena server logs.
"""

from .models import LineKind, INIT_GAME_TOKEN, KILL_TOKEN


def classify_line(line: str) -> LineKind:
    """
    Categorize a raw log line.

    The boundary check runs first, so a line carrying both tokens starts a
    new match. Every other line that is not a kill record is irrelevant.

    Args:
        line: Raw log line

    Returns:
        The LineKind of the line.
    """
    if INIT_GAME_TOKEN in line:
        return LineKind.BOUNDARY
    if KILL_TOKEN in line:
        return LineKind.FRAG_EVENT
    return LineKind.IRRELEVANT
