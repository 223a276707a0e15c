#evaluation.py
"""
Static evaluation functions for the minimax search.

Every evaluator scores a board from Player 1's point of view: positive is
good for Player 1, negative is good for Player 2.
"""
import numpy as np

from board_rules import AwaleBoard, PLAYER_HOLES


def captured_difference(board: AwaleBoard) -> float:
    return float(board.player1_captured - board.player2_captured)


class HeuristicEvaluation:
    """
    Weighted evaluation considering:
        1) Captured seeds difference
        2) Board control (seeds in Player 1 holes - seeds in Player 2 holes)
        3) Vulnerable holes (1 to 3 seeds, one sow away from a capture)
    """

    def __init__(self, score_weight=50, control_weight=5, vulnerability_weight=3):
        self.SCORE_WEIGHT = score_weight
        self.CONTROL_WEIGHT = control_weight
        self.VULNERABILITY_WEIGHT = vulnerability_weight

    def __call__(self, board: AwaleBoard) -> float:
        p1_holes = PLAYER_HOLES[1]
        p2_holes = PLAYER_HOLES[2]

        score_diff = board.player1_captured - board.player2_captured

        board_control = int(np.sum(board.board[p1_holes])) - int(np.sum(board.board[p2_holes]))

        totals = np.sum(board.board, axis=1)
        vulnerable = (totals >= 1) & (totals <= 3)
        # Player 1's weak holes count against Player 1, and vice versa
        vulnerability = int(np.sum(vulnerable[p2_holes])) - int(np.sum(vulnerable[p1_holes]))

        return float(self.SCORE_WEIGHT * score_diff +
                     self.CONTROL_WEIGHT * board_control +
                     self.VULNERABILITY_WEIGHT * vulnerability)

    def __repr__(self):
        return (f"{self.__class__.__name__}(score_weight={self.SCORE_WEIGHT}, "
                f"control_weight={self.CONTROL_WEIGHT}, "
                f"vulnerability_weight={self.VULNERABILITY_WEIGHT})")
