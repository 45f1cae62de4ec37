"""
Kill-event extractor.

A kill line looks like::

    21:42 Kill: 1022 2 22: <world> killed Isgalamido by MOD_TRIGGER_HURT

Everything up to the first colon after the ``Kill:`` tag (the numeric
killer/victim/means triple) and the cause after ``by`` are ignored; only the
two names around ``killed`` are returned.
"""

import logging
from typing import Optional

from .models import KillEvent, KILL_TOKEN

logger = logging.getLogger(__name__)

BY_SEPARATOR = " by "
KILLED_SEPARATOR = " killed "


def extract_kill(line: str) -> Optional[KillEvent]:
    """
    Extract killer and victim from a kill line.

    Args:
        line: Raw log line already classified as a frag event

    Returns:
        KillEvent, or None when the payload does not have the
        ``<killer> killed <victim> by <cause>`` shape.
    """
    tag_index = line.find(KILL_TOKEN)
    if tag_index == -1:
        return None
    payload = line[tag_index + len(KILL_TOKEN):].strip()

    colon_index = payload.find(":")
    if colon_index == -1:
        logger.debug(f"Kill line without description: {line!r}")
        return None
    description = payload[colon_index + 1:].strip()

    by_index = description.find(BY_SEPARATOR)
    if by_index == -1:
        logger.debug(f"Kill line without cause separator: {line!r}")
        return None
    kill_clause = description[:by_index].strip()

    parts = kill_clause.split(KILLED_SEPARATOR)
    if len(parts) != 2:
        logger.debug(f"Kill line without a single killer/victim pair: {line!r}")
        return None

    killer, victim = parts[0].strip(), parts[1].strip()
    if not killer or not victim:
        logger.debug(f"Kill line with an empty name: {line!r}")
        return None

    return KillEvent(killer, victim)
