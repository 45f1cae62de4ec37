"""
Per-match accumulator.

Holds the mutable state of the one match that is currently open while the
reducer walks a log: the roster, the score map and the frag counter.
"""

from typing import Dict

from .models import MatchReport, WORLD_PLAYER


class MatchAccumulator:
    """
    Mutable aggregate for the open match.

    Scoring rules:
    - every applied kill counts towards total_kills
    - a kill by the world pseudo-player costs the victim one point
    - any other kill gives the killer one point
    - both sides of a player kill get a score entry, starting at 0
    - the world pseudo-player never appears in the roster or the scores

    Attributes:
        name (str): Name of the open match
        total_kills (int): Number of kills applied so far
        kills (dict): Score per player
    """

    def __init__(self, name: str) -> None:
        self.reset(name)

    def reset(self, name: str) -> None:
        """
        Start accumulating a new match.

        Args:
            name: Name of the new match
        """
        self.name = name
        self.total_kills = 0
        # dict keeps roster insertion order without duplicates
        self._roster: Dict[str, None] = {}
        self.kills: Dict[str, int] = {}

    @property
    def players(self):
        return tuple(self._roster)

    def ensure_score(self, player: str) -> None:
        """Create a zero score entry for player unless one exists."""
        if player != WORLD_PLAYER and player not in self.kills:
            self.kills[player] = 0

    def apply(self, killer: str, victim: str) -> None:
        """
        Apply one successfully extracted kill.

        Args:
            killer: Killer name, possibly the world pseudo-player
            victim: Victim name
        """
        self.total_kills += 1

        if victim != WORLD_PLAYER:
            self._roster.setdefault(victim)
        if killer != WORLD_PLAYER:
            self._roster.setdefault(killer)

        if killer == WORLD_PLAYER:
            self.ensure_score(victim)
            if victim != WORLD_PLAYER:
                self.kills[victim] -= 1
        else:
            self.ensure_score(killer)
            self.ensure_score(victim)
            self.kills[killer] += 1

    def finalize(self) -> MatchReport:
        """
        Snapshot the open match into an immutable report.

        Returns:
            MatchReport holding copies of the roster and scores.
        """
        return MatchReport(
            name=self.name,
            total_kills=self.total_kills,
            players=self.players,
            kills=dict(self.kills),
        )
