#move_generator.py
from typing import List

from board_rules import AwaleBoard, Move, PLAYER_HOLES, SeedColor


def _captured_by(board: AwaleBoard, move: Move, player: int) -> int:
    # 1-ply simulation on a copy: how many seeds would this move capture?
    clone = board.copy()
    clone.current_player = player
    before = clone.captured(player)
    clone.sow_seeds(move.hole, move.color)
    return clone.captured(player) - before


def legal_moves(board: AwaleBoard, player: int, ordered: bool = True) -> List[Move]:
    """
    List every (hole, color) that ``player`` may sow on ``board``.

    Parameters:
        board (AwaleBoard): position to inspect, never modified.
        player (int): 1 or 2.
        ordered (bool): sort the moves for alpha-beta, best candidates first.

    Returns:
        list: Move tuples. Unordered moves come by ascending hole, red before
        blue. Ordered moves are sorted by seeds captured (most first), then by
        seeds taken from the origin hole (fewest first).
    """
    holes = PLAYER_HOLES[player]
    moves = [
        Move(int(hole), color)
        for hole in holes
        for color in (SeedColor.RED, SeedColor.BLUE)
        if board.board[hole, color] > 0
    ]
    if not ordered or len(moves) < 2:
        return moves

    return sorted(
        moves,
        key=lambda mv: (-_captured_by(board, mv, player), board.seeds(mv.hole, mv.color)),
    )
