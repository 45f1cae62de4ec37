#!/usr/bin/env python3
"""Tests for the match reducer: full scans and lookups by name."""

from quake_log_tools.parser import LogReducer, WORLD_PLAYER

SAMPLE_LOG = """\
  0:00 ------------------------------------------------------------
  0:00 InitGame: \\sv_floodProtect\\1\\sv_maxPing\\0\\sv_minPing\\0\\sv_maxRate\\10000
 15:00 Exit: Timelimit hit.
 20:34 ClientConnect: 2
 20:34 ClientUserinfoChanged: 2 n\\Isgalamido\\t\\0\\model\\xian/default
 20:37 InitGame: \\sv_floodProtect\\1\\sv_maxPing\\0\\sv_minPing\\0\\sv_maxRate\\10000
 20:38 ClientConnect: 2
 20:54 Kill: 1022 2 22: <world> killed Isgalamido by MOD_TRIGGER_HURT
 21:07 Kill: 1022 2 22: <world> killed Isgalamido by MOD_TRIGGER_HURT
 21:42 Kill: 1022 2 22: <world> killed Isgalamido by MOD_TRIGGER_HURT
 22:06 Kill: 2 3 7: Isgalamido killed Mocinha by MOD_ROCKET_SPLASH
 22:40 Kill: 2 2 7: Isgalamido killed Isgalamido by MOD_ROCKET_SPLASH
 23:06 Kill: 1022 2 22: <world> killed Isgalamido by MOD_TRIGGER_HURT
 25:05 Kill: 1022 2 22: <world> killed Isgalamido by MOD_TRIGGER_HURT
 25:41 Kill: 1022 2 19: <world> killed Isgalamido by MOD_FALLING
 26:09 say: Isgalamido: holy molly
  0:00 ------------------------------------------------------------
  0:00 InitGame: \\sv_floodProtect\\1\\sv_maxPing\\0\\sv_minPing\\0\\sv_maxRate\\10000
  1:08 Kill: 3 2 6: Isgalamido killed Dono da Bola by MOD_ROCKET
  1:26 Kill: 1022 4 22: <world> killed Zeh by MOD_TRIGGER_HURT
  1:32 ShutdownGame:
"""


def _lines(text):
    return text.splitlines()


def test_log_with_only_boundary_yields_empty_match():
    matches = LogReducer().list_matches(["  0:00 InitGame:"])

    assert len(matches) == 1
    assert matches[0].name == "game_1"
    assert matches[0].total_kills == 0
    assert matches[0].players == ()
    assert matches[0].kills == {}


def test_player_kills_are_scored():
    lines = [
        "  0:00 InitGame:",
        "  0:01 Kill: 2 3 6: A killed B by MOD_ROCKET",
        "  0:02 Kill: 3 2 7: B killed A by MOD_RAILGUN",
        "  0:03 Kill: 2 3 6: A killed B by MOD_ROCKET",
    ]
    match = LogReducer().list_matches(lines)[0]

    assert match.total_kills == 3
    assert match.kills == {"A": 2, "B": 1}
    assert set(match.players) == {"A", "B"}


def test_world_kills_are_subtracted():
    lines = [
        "  0:00 InitGame:",
        "  0:01 Kill: 2 3 6: PlayerA killed PlayerB by MOD_ROCKET",
        "  0:02 Kill: 1022 2 22: <world> killed PlayerA by MOD_TRIGGER_HURT",
        "  0:03 Kill: 1022 2 22: <world> killed PlayerA by MOD_TRIGGER_HURT",
    ]
    match = LogReducer().list_matches(lines)[0]

    assert match.kills == {"PlayerA": -1, "PlayerB": 0}
    assert match.total_kills == 3
    assert set(match.players) == {"PlayerA", "PlayerB"}
    assert WORLD_PLAYER not in match.players


def test_rosters_are_reset_per_match():
    lines = [
        "  0:00 InitGame:",
        "  0:01 Kill: 2 3 6: PlayerA killed PlayerB by MOD_ROCKET",
        "  1:00 InitGame:",
        "  1:01 Kill: 4 5 7: PlayerC killed PlayerD by MOD_RAILGUN",
        "  1:02 Kill: 5 4 8: PlayerD killed PlayerC by MOD_SHOTGUN",
    ]
    first, second = LogReducer().list_matches(lines)

    assert first.name == "game_1"
    assert first.total_kills == 1
    assert set(first.players) == {"PlayerA", "PlayerB"}

    assert second.name == "game_2"
    assert second.total_kills == 2
    assert set(second.players) == {"PlayerC", "PlayerD"}


def test_malformed_kill_lines_are_skipped():
    lines = [
        "  0:00 InitGame:",
        "  0:01 Kill: 2 3 6: PlayerA killed PlayerB by MOD_ROCKET",
        "  0:02 Kill: 2 3 6: PlayerA killed PlayerC",
        "  0:03 Kill: 2 3 6: PlayerA killed PlayerC killed PlayerD by MOD_ROCKET",
        "  0:04 Kill: garbage",
    ]
    match = LogReducer().list_matches(lines)[0]

    assert match.total_kills == 1
    assert set(match.players) == {"PlayerA", "PlayerB"}
    assert match.kills == {"PlayerA": 1, "PlayerB": 0}


def test_kills_before_first_boundary_are_ignored():
    lines = [
        "  0:01 Kill: 2 3 6: PlayerA killed PlayerB by MOD_ROCKET",
        "  0:02 Kill: 3 2 7: PlayerB killed PlayerA by MOD_RAILGUN",
        "  1:00 InitGame:",
        "  1:01 Kill: 2 3 6: PlayerA killed PlayerB by MOD_ROCKET",
    ]
    matches = LogReducer().list_matches(lines)

    assert len(matches) == 1
    assert matches[0].total_kills == 1
    assert matches[0].kills == {"PlayerA": 1, "PlayerB": 0}


def test_log_without_boundary_has_no_matches():
    lines = ["  0:01 Kill: 2 3 6: PlayerA killed PlayerB by MOD_ROCKET"]
    assert LogReducer().list_matches(lines) == []
    assert LogReducer().list_matches([]) == []


def test_empty_matches_keep_their_number():
    lines = [
        "  0:00 InitGame:",
        "  0:01 Kill: 2 3 6: PlayerA killed PlayerB by MOD_ROCKET",
        "  1:00 InitGame:",
        "  2:00 InitGame:",
        "  2:01 Kill: 4 5 7: PlayerC killed PlayerD by MOD_RAILGUN",
    ]
    matches = LogReducer().list_matches(lines)

    assert [m.name for m in matches] == ["game_1", "game_2", "game_3"]
    assert [m.total_kills for m in matches] == [1, 0, 1]


def test_sample_log():
    matches = LogReducer().list_matches(_lines(SAMPLE_LOG))

    assert [m.name for m in matches] == ["game_1", "game_2", "game_3"]

    game_2 = matches[1]
    assert game_2.total_kills == 8
    assert set(game_2.players) == {"Isgalamido", "Mocinha"}
    assert game_2.kills == {"Isgalamido": -4, "Mocinha": 0}

    game_3 = matches[2]
    assert game_3.total_kills == 2
    assert game_3.kills == {"Isgalamido": 1, "Dono da Bola": 0, "Zeh": -1}


def test_find_match_is_case_insensitive():
    reducer = LogReducer()
    lines = _lines(SAMPLE_LOG)

    assert reducer.find_match(lines, "game_2") == reducer.list_matches(lines)[1]
    assert reducer.find_match(lines, "GAME_2") == reducer.list_matches(lines)[1]


def test_find_match_agrees_with_full_scan():
    reducer = LogReducer()
    lines = _lines(SAMPLE_LOG)

    for match in reducer.list_matches(lines):
        assert reducer.find_match(lines, match.name) == match


def test_find_match_unknown_or_blank_name():
    reducer = LogReducer()
    lines = _lines(SAMPLE_LOG)

    assert reducer.find_match(lines, "game_99") is None
    assert reducer.find_match(lines, "") is None
    assert reducer.find_match(lines, "   ") is None
    assert reducer.find_match(lines, None) is None


def test_find_match_stops_after_next_boundary():
    consumed = []

    def tracked():
        for line in _lines(SAMPLE_LOG):
            consumed.append(line)
            yield line

    match = LogReducer().find_match(tracked(), "game_2")

    assert match.total_kills == 8
    # the line after game_3's InitGame is never read
    assert consumed[-1].startswith("  0:00 InitGame:")
    assert not any("Dono da Bola" in line for line in consumed)


def test_find_last_match_reads_to_end():
    match = LogReducer().find_match(iter(_lines(SAMPLE_LOG)), "game_3")

    assert match.total_kills == 2
    assert set(match.players) == {"Isgalamido", "Dono da Bola", "Zeh"}
