import random

import numpy as np
import pytest

from agents import MinimaxAgent, RemoteAgent
from board_rules import AwaleBoard, GameEndReason, Move, SeedColor, TOTAL_SEEDS
from game import AwaleGame, TurnState


class RecordingRemote(RemoteAgent):
    def __init__(self):
        super().__init__(timeout=1)
        self.rejected = []

    def on_invalid_move(self, move, error):
        self.rejected.append(move)


def quick_agent(seed):
    return MinimaxAgent(max_time=None, min_depth=1, max_depth=1, rng=random.Random(seed))


def test_ai_game_runs_to_completion():
    game = AwaleGame(quick_agent(1), quick_agent(2), max_turns=200)

    status = game.run_game()

    assert status.is_over
    assert game.state is TurnState.GAME_OVER
    assert len(game.moves_log) == game.turn_number
    board = game.board
    assert board.seeds_on_board() + board.player1_captured + board.player2_captured == TOTAL_SEEDS
    if status.winner is not None:
        loser = 3 - status.winner
        assert board.captured(status.winner) >= board.captured(loser)


def test_players_alternate():
    first, second = RemoteAgent(timeout=1), RemoteAgent(timeout=1)
    game = AwaleGame(first, second)
    first.deliver(0, SeedColor.BLUE)
    second.deliver(3, SeedColor.RED)

    assert game.play_turn()
    assert game.board.current_player == 2
    assert game.play_turn()

    assert game.moves_log == [(1, Move(0, SeedColor.BLUE)), (2, Move(3, SeedColor.RED))]
    assert game.board.current_player == 1
    assert game.state is TurnState.WAITING_FOR_MOVE


def test_rejected_move_keeps_waiting():
    remote = RecordingRemote()
    game = AwaleGame(remote, quick_agent(0))
    before = game.board.board.copy()

    remote.deliver(1, SeedColor.RED)
    assert not game.play_turn()

    assert remote.rejected == [Move(1, SeedColor.RED)]
    assert game.state is TurnState.WAITING_FOR_MOVE
    assert game.turn_number == 0
    assert game.board.current_player == 1
    assert np.array_equal(game.board.board, before)

    remote.deliver(0, SeedColor.RED)
    assert game.play_turn()
    assert game.board.current_player == 2


def test_move_emptying_opponent_row_ends_game(forced_win_board):
    remote = RemoteAgent(timeout=1)
    game = AwaleGame(remote, quick_agent(0), board=forced_win_board)
    remote.deliver(0, SeedColor.BLUE)

    game.play_turn()

    assert game.state is TurnState.GAME_OVER
    assert game.status.winner == 1
    assert game.status.reason is GameEndReason.NO_LEGAL_MOVES
    assert game.board.player1_captured == 37
    assert game.board.seeds_on_board() == 0


def test_finished_board_starts_in_game_over(make_board):
    board = make_board({0: (2, 2)}, scores=(33, 27))
    game = AwaleGame(quick_agent(0), quick_agent(1), board=board)

    assert game.state is TurnState.GAME_OVER
    assert game.status.winner == 1
    with pytest.raises(RuntimeError):
        game.play_turn()


def test_turn_limit():
    game = AwaleGame(quick_agent(0), quick_agent(1), max_turns=1)

    status = game.run_game()

    assert game.turn_number == 1
    assert status.reason is GameEndReason.TURN_LIMIT
    assert status.winner == game.board.winner_by_totals()


def test_supplied_board_decides_who_starts():
    board = AwaleBoard(current_player=2)
    second = RemoteAgent(timeout=1)
    game = AwaleGame(quick_agent(0), second, board=board)
    second.deliver(1, SeedColor.BLUE)

    game.play_turn()

    assert game.moves_log == [(2, Move(1, SeedColor.BLUE))]
