"""Game session tests: generation, clicks, undo, and hints."""

from __future__ import annotations

import random

import pytest

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gameplay import GamePlay
from backend.engine.gamestate import GameState
from backend.models import Puzzle


# -- generator ----------------------------------------------------------------


def test_generator_solved() -> None:
    assert GameGenerator.solved(3, 3) == Puzzle.solved(3, 3)


@pytest.mark.parametrize("width, height", [(3, 2), (4, 4), (6, 3)])
def test_generator_generate(width: int, height: int) -> None:
    puzzle = GameGenerator.generate(width, height, random.Random(11))
    assert puzzle.width == width
    assert puzzle.height == height
    assert puzzle.solvable
    assert puzzle.incorrect_tiles == puzzle.tile_count


def test_generator_scramble_stays_solvable() -> None:
    rng = random.Random(4)
    puzzle = GameGenerator.scramble(Puzzle.solved(4, 4), 30, rng)
    assert puzzle.solvable
    assert puzzle.length == 16


def test_generator_scramble_zero_clicks() -> None:
    solved = Puzzle.solved(3, 3)
    assert GameGenerator.scramble(solved, 0, random.Random(0)) == solved


# -- gameplay -----------------------------------------------------------------


def test_click_and_win() -> None:
    game = GamePlay.from_puzzle(Puzzle.raw(3, [0, 1, 2, 3, 5, 4]))
    assert not game.is_won
    assert not game.click(0)
    assert game.state.moves == 0
    assert game.click(4)
    assert game.is_won
    assert game.state.moves == 1


def test_undo_restores_previous_puzzle() -> None:
    start = Puzzle.raw(3, [1, 2, 0, 3, 4, 5])
    game = GamePlay.from_puzzle(start)
    assert game.click(3)
    assert game.puzzle != start
    assert game.undo()
    assert game.puzzle == start
    assert not game.undo()
    assert game.state.moves == 0


def test_new_game_is_scrambled() -> None:
    game = GamePlay(3, 3, rng=random.Random(21))
    assert not game.is_won
    assert game.puzzle.solvable
    assert game.click_random()
    assert game.state.moves == 1
    assert len(game.state.history) == 1


def test_click_random_vertical() -> None:
    game = GamePlay(4, 3, rng=random.Random(5))
    column = game.puzzle.open_position().x
    assert game.click_random(vertical=True)
    assert game.puzzle.open_position().x == column


def test_hint_solves_one_move_board() -> None:
    game = GamePlay.from_puzzle(Puzzle.raw(3, [0, 1, 2, 3, 5, 4]))
    assert game.hint() == 4
    game.click(4)
    assert game.hint() is None


# -- state --------------------------------------------------------------------


def test_state_clock_pauses() -> None:
    state = GameState(Puzzle.solved(3, 2))
    state.pause()
    paused = state.elapsed_time
    assert state.elapsed_time == paused
    state.resume()
    assert state.elapsed_time >= paused
    assert state.is_solved
