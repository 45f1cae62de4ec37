"""
Quake Log Source

This module supplies the parser with the raw lines of a Quake 3 Arena server
log, either from a local file or from an HTTP(S) location such as a game
host's file download URL.
"""

import logging
import os
from typing import Dict, Any, Iterator, List, Optional

import requests

from ..base import FileBasedTool
from ..parser import LogReducer, MatchReport

logger = logging.getLogger(__name__)

DEFAULT_LOG_FILE_NAME = "games.log"
REMOTE_SCHEMES = ("http://", "https://")


class LogSource(FileBasedTool):
    """
    Line source for a single Quake 3 Arena log.

    Every query reads the log again from the start with a fresh reducer state,
    so results always reflect the current content of the log.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None, location: Optional[str] = None) -> None:
        """
        Initialize the log source.

        Args:
            config: Optional configuration dictionary.
            location: Log file path or URL. Falls back to paths.games_log, then games.log.
        """
        super().__init__(config)
        self.timeout = self.get_config('log_source.timeout', 30)
        self.ssl_verify = self.get_config('log_source.ssl_verify', True)
        self.reducer = LogReducer()

        location = location or self.get_config('paths.games_log') or DEFAULT_LOG_FILE_NAME
        self.location = location if self.is_remote(location) else self.resolve_path(location)

    @staticmethod
    def is_remote(location: str) -> bool:
        """Whether the location is an HTTP(S) URL rather than a file path."""
        return location.lower().startswith(REMOTE_SCHEMES)

    def validate(self) -> None:
        """
        Check that a local log file exists and is readable.

        Raises:
            FileNotFoundError: If the log file does not exist.
            PermissionError: If the log file cannot be read.
        """
        if self.is_remote(self.location):
            return

        if not os.path.isfile(self.location):
            raise FileNotFoundError(f"Log file not found: {self.location}")

        if not os.access(self.location, os.R_OK):
            raise PermissionError(f"Log file is not readable: {self.location}")

    def _fetch_remote_lines(self) -> List[str]:
        """
        Download a remote log.

        Returns:
            The log lines.

        Raises:
            requests.RequestException: If the request fails.
        """
        try:
            response = requests.get(self.location, timeout=self.timeout, verify=self.ssl_verify)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error(f"Failed to fetch log from {self.location}: {e}")
            if getattr(e, 'response', None) is not None:
                logger.error(f"Response: {e.response.text}")
            raise

        logger.info(f"Fetched {len(response.content)} bytes from {self.location}")
        # decoded like local files, ignoring the charset the server reports
        return response.content.decode('utf-8', errors='ignore').splitlines()

    def iter_lines(self) -> Iterator[str]:
        """
        Yield the log lines without their line endings.

        Local files are read lazily, so a consumer that stops early leaves the
        rest of the file unread.

        Yields:
            One raw log line at a time.
        """
        if self.is_remote(self.location):
            yield from self._fetch_remote_lines()
            return

        with open(self.location, 'r', encoding='utf-8', errors='ignore') as file:
            for line in file:
                yield line.rstrip('\r\n')

    def list_matches(self) -> List[MatchReport]:
        """
        Parse every match in the log.

        Returns:
            List of MatchReport in encounter order.
        """
        self.validate()
        logger.info(f"Parsing log: {self.location}")
        matches = self.reducer.list_matches(self.iter_lines())
        logger.info(f"Found {len(matches)} matches in {self.location}")
        return matches

    def find_match(self, name: Optional[str]) -> Optional[MatchReport]:
        """
        Look up one match by name, case-insensitively.

        Args:
            name: Match name such as "game_2"

        Returns:
            The MatchReport, or None when no match has that name.
        """
        self.validate()
        logger.info(f"Looking up match '{name}' in {self.location}")
        return self.reducer.find_match(self.iter_lines(), name)

    def run(self) -> List[MatchReport]:
        """Run a full scan of the log."""
        return self.list_matches()
