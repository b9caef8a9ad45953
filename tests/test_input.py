import pytest

from pong_input import Control, InputTracker
from pong_physics import apply_player_input, update


@pytest.fixture
def tracker(state):
    return InputTracker(state)


@pytest.mark.parametrize("key", ["ArrowUp", "Up", "up", "ARROWUP"])
def test_up_key_latches(tracker, state, key):
    assert tracker.key_down(key) is None
    assert state.input.up
    tracker.key_up(key)
    assert not state.input.up


@pytest.mark.parametrize("key", ["ArrowDown", "Down", "down"])
def test_down_key_latches(tracker, state, key):
    tracker.key_down(key)
    assert state.input.down
    tracker.key_up(key)
    assert not state.input.down


@pytest.mark.parametrize("key, control", [
    ("p", Control.PAUSE), ("P", Control.PAUSE),
    ("r", Control.RESET), ("R", Control.RESET),
])
def test_control_keys(tracker, key, control):
    assert tracker.key_down(key) is control


@pytest.mark.parametrize("key", ["x", "Shift", "", None, 42, "Escape"])
def test_unknown_keys_are_ignored(tracker, state, key):
    before = (state.input.up, state.input.down, state.input.pointer_y)
    assert tracker.key_down(key) is None
    tracker.key_up(key)
    assert (state.input.up, state.input.down, state.input.pointer_y) == before


def test_keys_move_player_each_tick(tracker, state):
    start = state.player.y
    tracker.key_down("ArrowDown")
    apply_player_input(state)
    apply_player_input(state)
    assert state.player.y == start + 12
    tracker.key_up("ArrowDown")
    tracker.key_down("ArrowUp")
    apply_player_input(state)
    assert state.player.y == start + 6


def test_both_keys_cancel(tracker, state):
    start = state.player.y
    tracker.key_down("Up")
    tracker.key_down("Down")
    apply_player_input(state)
    assert state.player.y == start


def test_pointer_is_scaled_to_surface(tracker, state):
    # 600 logical pixels shown 300 high, 100 from the top of the viewport
    tracker.pointer_move(250, 100, 300)
    assert state.input.pointer_y == 250
    apply_player_input(state)
    assert state.player.y == 250
    assert state.input.pointer_y is None


@pytest.mark.parametrize("client_y, expected", [(-1000, 0), (5000, 500), (0, 0), (600, 500)])
def test_pointer_is_clamped(tracker, state, client_y, expected):
    tracker.pointer_move(client_y, 0, 600)
    apply_player_input(state)
    assert state.player.y == expected


def test_zero_height_rect_is_ignored(tracker, state):
    tracker.pointer_move(100, 0, 0)
    assert state.input.pointer_y is None


def test_last_pointer_write_wins(tracker, state):
    tracker.pointer_move(100, 0, 600)
    tracker.pointer_move(400, 0, 600)
    apply_player_input(state)
    assert state.player.y == 350


def test_pointer_then_keys_in_same_tick(tracker, state, rng):
    tracker.pointer_move(300, 0, 600)
    tracker.key_down("ArrowDown")
    update(state, rng)
    assert state.player.y == 256
    update(state, rng)
    assert state.player.y == 262
