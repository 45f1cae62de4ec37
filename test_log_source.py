#!/usr/bin/env python3
"""Tests for reading logs from local files and remote locations."""

import os
import tempfile
from unittest import mock

import pytest
import requests

from quake_log_tools.log import LogSource

LOG_CONTENT = """\
  0:00 InitGame: \\sv_floodProtect\\1
  0:01 Kill: 2 3 6: PlayerA killed PlayerB by MOD_ROCKET
  0:02 Kill: 1022 2 22: <world> killed PlayerA by MOD_TRIGGER_HURT
  1:00 InitGame: \\sv_floodProtect\\1
  1:01 Kill: 4 5 7: PlayerC killed PlayerD by MOD_RAILGUN
"""


@pytest.fixture
def log_file():
    with tempfile.NamedTemporaryFile(mode='w', suffix='.log', delete=False, encoding='utf-8') as f:
        f.write(LOG_CONTENT)
        path = f.name
    try:
        yield path
    finally:
        os.unlink(path)


def test_list_matches_from_file(log_file):
    matches = LogSource(location=log_file).list_matches()

    assert [m.name for m in matches] == ["game_1", "game_2"]
    assert matches[0].kills == {"PlayerA": 0, "PlayerB": 0}
    assert matches[1].kills == {"PlayerC": 1, "PlayerD": 0}


def test_find_match_from_file(log_file):
    source = LogSource(location=log_file)

    assert source.find_match("Game_2").total_kills == 1
    assert source.find_match("game_3") is None


def test_location_from_config(log_file):
    source = LogSource({'paths': {'games_log': log_file}})

    assert source.location == os.path.abspath(log_file)
    assert len(source.run()) == 2


def test_location_argument_overrides_config(log_file):
    source = LogSource({'paths': {'games_log': '/nonexistent/games.log'}}, log_file)
    assert source.location == os.path.abspath(log_file)


def test_default_location_is_games_log():
    assert LogSource().location == os.path.abspath("games.log")


def test_lines_are_read_without_line_endings():
    with tempfile.NamedTemporaryFile(mode='wb', suffix='.log', delete=False) as f:
        f.write(b"  0:00 InitGame:\r\n  0:01 Kill: 2 3 6: A killed B by MOD_ROCKET\r\n")
        path = f.name
    try:
        lines = list(LogSource(location=path).iter_lines())
        assert lines == ["  0:00 InitGame:", "  0:01 Kill: 2 3 6: A killed B by MOD_ROCKET"]
    finally:
        os.unlink(path)


def test_missing_file_raises_before_parsing():
    source = LogSource(location="/nonexistent/dir/games.log")

    with pytest.raises(FileNotFoundError, match="Log file not found"):
        source.list_matches()
    with pytest.raises(FileNotFoundError):
        source.find_match("game_1")


def test_each_query_reads_the_file_again(log_file):
    source = LogSource(location=log_file)
    assert len(source.list_matches()) == 2

    with open(log_file, 'a', encoding='utf-8') as f:
        f.write("  2:00 InitGame:\n")

    assert len(source.list_matches()) == 3


def test_remote_log_is_fetched_with_requests():
    response = mock.Mock()
    response.text = LOG_CONTENT
    response.content = LOG_CONTENT.encode()
    response.raise_for_status.return_value = None

    config = {'log_source': {'timeout': 5, 'ssl_verify': False}}
    url = "https://example.com/logs/games.log"

    with mock.patch("quake_log_tools.log.log_source.requests.get", return_value=response) as get:
        source = LogSource(config, url)
        assert source.location == url
        matches = source.list_matches()

    get.assert_called_once_with(url, timeout=5, verify=False)
    assert [m.name for m in matches] == ["game_1", "game_2"]


def test_remote_fetch_errors_propagate():
    error = requests.HTTPError("404 Client Error")
    error.response = mock.Mock(text="not found")

    with mock.patch("quake_log_tools.log.log_source.requests.get", side_effect=error):
        source = LogSource(location="http://example.com/missing.log")
        with pytest.raises(requests.HTTPError):
            source.list_matches()


def test_remote_log_is_decoded_like_local_files():
    raw = "  0:00 InitGame:\n  0:01 Kill: 2 3 6: Zé killed Joël by MOD_ROCKET\n".encode('utf-8')
    response = mock.Mock()
    response.content = raw
    # what requests guesses for text/plain without a charset
    response.text = raw.decode('iso-8859-1')
    response.raise_for_status.return_value = None

    with mock.patch("quake_log_tools.log.log_source.requests.get", return_value=response):
        match = LogSource(location="https://example.com/games.log").find_match("game_1")

    assert match.kills == {"Zé": 1, "Joël": 0}
    assert set(match.players) == {"Zé", "Joël"}
