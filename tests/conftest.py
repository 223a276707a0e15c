"""Shared fixtures for the board, search and game tests."""

import pytest

from board_rules import AwaleBoard, TOTAL_HOLES, TOTAL_SEEDS


def build_board(holes=None, scores=None, current_player=1):
    """
    Board with only the given holes filled.

    ``holes`` maps hole index -> (red, blue). Without explicit ``scores`` the
    seeds missing from the board are split between the two captured totals so
    the position always holds 64 seeds.
    """
    holes = holes or {}
    red = [0] * TOTAL_HOLES
    blue = [0] * TOTAL_HOLES
    for hole, (r, b) in holes.items():
        red[hole] = r
        blue[hole] = b
    if scores is None:
        missing = TOTAL_SEEDS - sum(red) - sum(blue)
        scores = (missing // 2, missing - missing // 2)
    return AwaleBoard.from_counts(red, blue, scores=scores, current_player=current_player)


@pytest.fixture
def make_board():
    return build_board


@pytest.fixture
def forced_win_board():
    """Player 1 sows the single blue seed of hole 0 and leaves Player 2 without seeds."""
    return build_board({0: (0, 1), 1: (2, 0), 2: (4, 4)}, scores=(26, 27), current_player=1)


@pytest.fixture
def forced_loss_board():
    """Mirror of ``forced_win_board``: Player 2 empties Player 1's row."""
    return build_board({1: (0, 1), 2: (2, 0), 3: (4, 4)}, scores=(27, 26), current_player=2)
