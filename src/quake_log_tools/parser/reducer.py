"""
Log reducer.

Drives the classifier, the extractor and the accumulator over a sequence of
log lines. Both query modes share one lazy pass: ``iter_matches`` yields a
report as soon as it is finalized, so a lookup that stops consuming the
generator also stops reading lines.
"""

import logging
from typing import Iterable, Iterator, List, Optional

from .accumulator import MatchAccumulator
from .classifier import classify_line
from .extractor import extract_kill
from .models import LineKind, MatchReport, match_name

logger = logging.getLogger(__name__)


class LogReducer:
    """
    Single-pass state machine turning log lines into match reports.

    The reducer keeps no state between calls; every call builds its own
    accumulator, so one instance can serve concurrent callers.
    """

    def iter_matches(self, lines: Iterable[str]) -> Iterator[MatchReport]:
        """
        Yield finalized match reports in encounter order.

        Kill lines before the first InitGame line and malformed kill lines
        are skipped.

        Args:
            lines: Raw log lines

        Yields:
            MatchReport for each match, once its segment has ended.
        """
        current: Optional[MatchAccumulator] = None
        match_count = 0
        skipped = 0

        for line in lines:
            kind = classify_line(line)

            if kind is LineKind.BOUNDARY:
                if current is not None:
                    yield current.finalize()
                match_count += 1
                current = MatchAccumulator(match_name(match_count))
                logger.debug(f"Started {current.name}")

            elif kind is LineKind.FRAG_EVENT:
                if current is None:
                    skipped += 1
                    continue
                event = extract_kill(line)
                if event is None:
                    skipped += 1
                    continue
                current.apply(event.killer, event.victim)

        if current is not None:
            yield current.finalize()

        logger.debug(f"Reduced {match_count} matches, skipped {skipped} kill lines")

    def list_matches(self, lines: Iterable[str]) -> List[MatchReport]:
        """
        Parse every match in the log.

        Args:
            lines: Raw log lines

        Returns:
            List of MatchReport in encounter order.
        """
        return list(self.iter_matches(lines))

    def find_match(self, lines: Iterable[str], name: Optional[str]) -> Optional[MatchReport]:
        """
        Find one match by name, case-insensitively.

        Scanning stops once the requested match has been finalized; the
        remaining lines are never read.

        Args:
            lines: Raw log lines
            name: Match name such as "game_3"

        Returns:
            The MatchReport, or None when no match has that name.
        """
        if name is None or not name.strip():
            return None

        target = name.casefold()
        for report in self.iter_matches(lines):
            if report.name.casefold() == target:
                return report
        return None
