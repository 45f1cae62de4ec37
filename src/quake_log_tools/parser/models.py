"""
Data model for parsed Quake 3 Arena matches.

Holds the log tokens the parser recognizes and the report types it produces.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, Any, Mapping, NamedTuple, Tuple

# Log tokens
INIT_GAME_TOKEN = "InitGame"
KILL_TOKEN = "Kill:"

# Pseudo-player used by the server for environmental deaths (lava, falling, ...)
WORLD_PLAYER = "<world>"

MATCH_NAME_PREFIX = "game_"


class LineKind(Enum):
    """Category of a single raw log line."""
    BOUNDARY = "boundary"
    FRAG_EVENT = "frag_event"
    IRRELEVANT = "irrelevant"


class KillEvent(NamedTuple):
    """Killer and victim extracted from a kill line."""
    killer: str
    victim: str


@dataclass(frozen=True)
class MatchReport:
    """
    Finalized frag report for a single match.

    Reports are read-only: kills is wrapped in a read-only mapping. They
    compare by value but are not hashable.
    """
    name: str
    total_kills: int = 0
    players: Tuple[str, ...] = ()
    kills: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, 'players', tuple(self.players))
        object.__setattr__(self, 'kills', MappingProxyType(dict(self.kills)))

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the report to its JSON wire shape.

        Returns:
            Dictionary with name, totalKills, players and kills keys.
        """
        return {
            "name": self.name,
            "totalKills": self.total_kills,
            "players": list(self.players),
            "kills": dict(self.kills),
        }


def match_name(ordinal: int) -> str:
    """Name of the match at the given 1-based position in the log."""
    return f"{MATCH_NAME_PREFIX}{ordinal}"
