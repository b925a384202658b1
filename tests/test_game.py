import io

import pytest

from solong.game import (
    KEY_ESC,
    KEY_LEFT,
    KEY_UP,
    Direction,
    Event,
    Game,
    direction_for_key,
)
from solong.gamemap import GameMap, MapError


def make_game(lines):
    out = io.StringIO()
    return Game(GameMap.from_lines(lines), out), out


SIMPLE = ["11111\n", "1PCE1\n", "11111\n"]
EXIT_FIRST = ["111111\n", "1PEC01\n", "111111\n"]


def test_direction_for_key_letters_and_arrows():
    assert direction_for_key("w") is Direction.UP
    assert direction_for_key(KEY_UP) is Direction.UP
    assert direction_for_key(ord("d")) is Direction.RIGHT
    assert direction_for_key(KEY_LEFT) is Direction.LEFT
    assert direction_for_key("x") is None


def test_start_state():
    game, _ = make_game(SIMPLE)
    assert game.position == (1, 1)
    assert game.total_collectibles == 1
    assert game.facing is Direction.DOWN
    assert game.moves == 0


def test_blocked_move_changes_nothing():
    game, out = make_game(SIMPLE)
    assert game.step(Direction.UP) is Event.BLOCKED
    assert game.position == (1, 1)
    assert game.moves == 0
    assert out.getvalue() == ""


def test_collect_then_win():
    game, out = make_game(SIMPLE)
    assert game.step(Direction.RIGHT) is Event.COLLECTED
    assert game.collected == 1
    assert game.map.tile(1, 1) == "0"
    assert game.map.tile(2, 1) == "P"
    assert out.getvalue() == "Movements: 1\n"
    assert game.step(Direction.RIGHT) is Event.WON
    assert game.won and game.finished
    assert out.getvalue().endswith("You Win in 2 Moves!!\n")


def test_exit_before_collecting_is_not_counted():
    game, out = make_game(EXIT_FIRST)
    assert game.step(Direction.RIGHT) is Event.ON_EXIT
    assert game.position == (2, 1)
    assert game.moves == 0
    assert game.map.tile(1, 1) == "0"
    assert game.map.tile(2, 1) == "E"
    assert game.step(Direction.RIGHT) is Event.COLLECTED
    assert game.map.tile(2, 1) == "E"
    assert game.moves == 1
    assert out.getvalue() == "Movements: 1\n"


def test_facing_follows_last_move():
    game, _ = make_game(EXIT_FIRST)
    game.step(Direction.RIGHT)
    game.step(Direction.RIGHT)
    game.step(Direction.LEFT)
    assert game.facing is Direction.LEFT


def test_press_escape_quits_and_stops_game():
    game, _ = make_game(SIMPLE)
    assert game.press(KEY_ESC) is Event.QUIT
    assert game.finished
    with pytest.raises(RuntimeError):
        game.step(Direction.RIGHT)


def test_press_unknown_key_is_ignored():
    game, out = make_game(SIMPLE)
    assert game.press("q") is Event.IGNORED
    assert game.position == (1, 1)
    assert out.getvalue() == ""


def test_press_movement_key():
    game, _ = make_game(SIMPLE)
    assert game.press("d") is Event.COLLECTED
    assert game.position == (2, 1)


def test_map_without_player_is_rejected():
    with pytest.raises(MapError):
        Game(GameMap.from_lines(["111\n", "1C1\n", "111\n"]))