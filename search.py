#search.py
import logging
import math
import random
import time
from typing import Callable, NamedTuple, Optional

from board_rules import AwaleBoard, GameEndReason, Move
from evaluation import captured_difference
from move_generator import legal_moves

logger = logging.getLogger(__name__)

WIN_SCORE = math.inf
LOSS_SCORE = -math.inf

# (more than N legal moves at the root, extra plies over the floor)
DEPTH_TABLE = ((8, 0), (6, 2), (4, 3), (3, 4), (2, 5))
FEWEST_MOVES_BONUS = 6


class SearchTimeExceeded(TimeoutError):
    """Raised inside the recursion when the time budget is spent."""


class SearchResult(NamedTuple):
    move: Optional[Move]
    score: float
    depth: int
    elapsed: float
    completed: bool


class MinimaxSearch:
    """
    Minimax with alpha-beta pruning. Scores are always from Player 1's point
    of view: Player 1 maximizes, Player 2 minimizes.

    Parameters:
        max_time (float): time budget per move in seconds, None for unlimited.
        min_depth (int): depth used when many moves are available.
        max_depth (int): upper bound of the adaptive depth.
        evaluate (callable): static evaluation, board -> float.
        rng (random.Random): source for the fallback move.
        clock (callable): monotonic time source in seconds.
    """

    def __init__(self, max_time: Optional[float] = 2, min_depth: int = 5, max_depth: int = 11,
                 evaluate: Callable[[AwaleBoard], float] = captured_difference,
                 rng: Optional[random.Random] = None,
                 clock: Callable[[], float] = time.perf_counter):
        if min_depth < 1 or max_depth < min_depth:
            raise ValueError(f"invalid depth bounds: min_depth={min_depth}, max_depth={max_depth}")
        self.max_time = max_time
        self.min_depth = min_depth
        self.max_depth = max_depth
        self.evaluate = evaluate
        self.rng = rng if rng is not None else random.Random()
        self.clock = clock
        self.start_time = 0.0
        self.nodes_visited = 0
        self.nodes_cut = 0

    def depth_for(self, move_count: int) -> int:
        """Fewer legal moves means a narrower tree, so search deeper."""
        extra = FEWEST_MOVES_BONUS
        for threshold, bonus in DEPTH_TABLE:
            if move_count > threshold:
                extra = bonus
                break
        return max(self.min_depth, min(self.max_depth, self.min_depth + extra))

    def select_move(self, board: AwaleBoard) -> Optional[Move]:
        """Best move for ``board.current_player``, or None when there is none."""
        return self.search(board).move

    def search(self, board: AwaleBoard, depth: Optional[int] = None) -> SearchResult:
        """
        Search from ``board`` without modifying it.

        Parameters:
            board (AwaleBoard): live position; only copies are played on.
            depth (int): fixed depth, or None for the adaptive depth.

        Returns:
            SearchResult: chosen move, its score, the depth used, elapsed
            seconds and whether every root branch was searched in time.
        """
        self.start_time = self.clock()
        self.nodes_visited = 0
        self.nodes_cut = 0

        player = board.current_player
        moves = legal_moves(board, player)
        if not moves:
            return SearchResult(None, self.evaluate(board), 0, 0.0, True)
        if depth is None:
            depth = self.depth_for(len(moves))

        maximizing = player == 1
        alpha, beta = -math.inf, math.inf
        best_value = -math.inf if maximizing else math.inf
        best_move = None
        completed = True

        for move in moves:
            child = board.copy()
            child.sow_seeds(move.hole, move.color)
            child.switch_player()
            try:
                value = self.minimax(child, depth - 1, alpha, beta, not maximizing)
            except SearchTimeExceeded:
                completed = False
                logger.warning("Time budget of %ss exceeded at depth %d, keeping best completed move",
                               self.max_time, depth)
                break

            if maximizing:
                if value > best_value:
                    best_value, best_move = value, move
                alpha = max(alpha, best_value)
            else:
                if value < best_value:
                    best_value, best_move = value, move
                beta = min(beta, best_value)
            if alpha >= beta:
                break

        if best_move is None:
            best_move = self.rng.choice(moves)
            logger.info("No scored move beat the initial bound, playing random move %s", best_move)

        elapsed = self.clock() - self.start_time
        logger.info("Player %d: %s (score=%s, depth=%d, %.2fs, %d nodes)",
                    player, best_move, best_value, depth, elapsed, self.nodes_visited)
        return SearchResult(best_move, best_value, depth, elapsed, completed)

    def _check_clock(self):
        if self.max_time is not None and self.clock() - self.start_time >= self.max_time:
            raise SearchTimeExceeded()

    def minimax(self, board: AwaleBoard, depth: int, alpha: float, beta: float,
                maximizing_player: bool) -> float:
        """Recursive alpha-beta. ``board`` must be a private copy: it gets mutated."""
        self._check_clock()
        self.nodes_visited += 1

        status = board.check_game_status()
        if status.is_over:
            if status.reason is GameEndReason.NO_LEGAL_MOVES and status.winner is not None:
                return WIN_SCORE if status.winner == 1 else LOSS_SCORE
            return self.evaluate(board)
        if depth <= 0:
            return self.evaluate(board)

        best_value = -math.inf if maximizing_player else math.inf
        for move in legal_moves(board, board.current_player):
            child = board.copy()
            child.sow_seeds(move.hole, move.color)
            child.switch_player()
            eval_val = self.minimax(child, depth - 1, alpha, beta, not maximizing_player)

            if maximizing_player:
                best_value = max(best_value, eval_val)
                alpha = max(alpha, eval_val)
            else:
                best_value = min(best_value, eval_val)
                beta = min(beta, eval_val)

            if alpha >= beta:
                self.nodes_cut += 1
                break

        return best_value
