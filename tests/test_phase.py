"""
Tests for the phase state machine and phase listeners.
"""

import pytest

from src.pocket_snake.config import (
    UP, RIGHT, SPLASH, MENU, PLAYING, PAUSED, GAME_OVER, PHASES,
)
from src.pocket_snake.engine import TRANSITIONS

LEGAL = {
    (SPLASH, MENU),
    (MENU, PLAYING),
    (PLAYING, PAUSED),
    (PAUSED, PLAYING),
    (PAUSED, MENU),
    (GAME_OVER, PLAYING),
    (GAME_OVER, MENU),
}


def test_transition_table_matches_the_game_flow():
    table = {(src, dst) for src, targets in TRANSITIONS.items() for dst in targets}
    assert table == LEGAL


@pytest.mark.parametrize("src", sorted(PHASES))
@pytest.mark.parametrize("dst", sorted(PHASES))
def test_request_phase_only_applies_legal_transitions(engine, place, src, dst):
    place(engine, snake=[(3, 3), (2, 3)], phase=src)
    accepted = engine.request_phase(dst)
    assert accepted is ((src, dst) in LEGAL)
    assert engine.phase == (dst if accepted else src)


def test_game_over_cannot_be_requested(engine, place):
    place(engine, snake=[(3, 3)], phase=PLAYING)
    assert engine.request_phase(GAME_OVER) is False
    assert engine.phase == PLAYING


@pytest.mark.parametrize("bad", ["", "playing", "QUIT", None, ["MENU"], {"phase": MENU}, 3])
def test_unknown_phase_is_a_no_op(engine, bad):
    assert engine.request_phase(bad) is False
    assert engine.phase == SPLASH


class TestResetOnEntry:

    def test_start_from_menu_resets(self, engine, place, rng):
        place(engine, snake=[(1, 1), (1, 2)], direction=UP, food=(9, 9), phase=MENU, score=3)
        rng.values = [4, 4]
        engine.request_phase(PLAYING)
        assert engine.snake == ((7, 7),)
        assert engine.direction == RIGHT
        assert engine.score == 0
        assert engine.food == (4, 4)

    def test_play_again_resets(self, engine, place):
        place(engine, snake=[(1, 1), (1, 2), (2, 2)], phase=GAME_OVER, score=5)
        engine.request_phase(PLAYING)
        assert len(engine.snake) == 1
        assert engine.score == 0

    def test_resume_does_not_reset(self, engine, place):
        snake = [(1, 1), (1, 2), (2, 2)]
        place(engine, snake=snake, direction=UP, food=(9, 9), phase=PAUSED, score=5)
        engine.request_phase(PLAYING)
        assert list(engine.snake) == snake
        assert engine.food == (9, 9)
        assert engine.score == 5
        assert engine.direction == UP

    @pytest.mark.parametrize("src", [PAUSED, GAME_OVER])
    def test_back_to_menu_leaves_state_stale(self, engine, place, src):
        snake = [(1, 1), (1, 2), (2, 2)]
        place(engine, snake=snake, food=(9, 9), phase=src, score=5)
        engine.request_phase(MENU)
        assert engine.phase == MENU
        assert list(engine.snake) == snake
        assert engine.score == 5


def test_pause_and_resume_keep_the_board(engine, place):
    snake = [(5, 5), (4, 5), (3, 5)]
    place(engine, snake=snake, direction=RIGHT, food=(12, 12), phase=PLAYING, score=2)

    engine.request_phase(PAUSED)
    assert list(engine.snake) == snake
    assert engine.food == (12, 12)
    assert engine.score == 2

    engine.request_phase(PLAYING)
    engine.tick()
    assert engine.snake == ((6, 5), (5, 5), (4, 5))
    assert engine.score == 2


class TestListeners:

    def test_listener_sees_every_transition(self, engine):
        seen = []
        engine.add_phase_listener(lambda old, new: seen.append((old, new)))

        engine.request_phase(MENU)
        engine.request_phase(PLAYING)
        engine.request_phase(PAUSED)
        engine.request_phase(SPLASH)  # illegal, not reported

        assert seen == [(SPLASH, MENU), (MENU, PLAYING), (PLAYING, PAUSED)]

    def test_listener_sees_tick_driven_game_over(self, engine, place):
        seen = []
        engine.add_phase_listener(lambda old, new: seen.append((old, new)))
        place(engine, snake=[(5, 5), (5, 6), (6, 6), (6, 5), (6, 4)], direction=RIGHT)

        engine.tick()

        assert seen == [(PLAYING, GAME_OVER)]

    def test_listener_added_twice_fires_once(self, engine):
        calls = []

        def listener(old, new):
            calls.append(new)

        engine.add_phase_listener(listener)
        engine.add_phase_listener(listener)
        engine.request_phase(MENU)
        assert calls == [MENU]

    def test_removed_listener_is_not_called(self, engine):
        calls = []

        def listener(old, new):
            calls.append(new)

        engine.add_phase_listener(listener)
        engine.remove_phase_listener(listener)
        engine.remove_phase_listener(listener)  # unknown listener is fine
        engine.request_phase(MENU)
        assert calls == []

    def test_phase_is_updated_before_listeners_run(self, engine):
        observed = []
        engine.add_phase_listener(lambda old, new: observed.append(engine.phase))
        engine.request_phase(MENU)
        assert observed == [MENU]
