#board_rules.py
import random
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import NamedTuple, Optional, Sequence

import numpy as np

TOTAL_HOLES = 16
INITIAL_SEEDS_PER_COLOR = 2
TOTAL_SEEDS = TOTAL_HOLES * INITIAL_SEEDS_PER_COLOR * 2
WINNING_THRESHOLD = 33
MIN_SEEDS_ON_BOARD = 8


class SeedColor(IntEnum):
    # Values double as the column index in AwaleBoard.board
    RED = 0
    BLUE = 1

    @property
    def letter(self) -> str:
        return self.name[0]


class Move(NamedTuple):
    hole: int
    color: SeedColor

    def __str__(self):
        return f"{self.hole + 1}{self.color.letter}"


class InvalidMove(ValueError):
    """Raised when a move is not playable on the current board."""


class GameEndReason(Enum):
    THRESHOLD_REACHED = "threshold reached"
    EVEN_SPLIT = "seeds evenly split"
    INSUFFICIENT_SEEDS = "insufficient seeds remain"
    NO_LEGAL_MOVES = "no legal moves"
    TURN_LIMIT = "turn limit reached"


@dataclass(frozen=True)
class GameStatus:
    is_over: bool
    winner: Optional[int] = None
    reason: Optional[GameEndReason] = None

    @property
    def is_draw(self) -> bool:
        return self.is_over and self.winner is None


NOT_OVER = GameStatus(False)

# Player 1 owns the even holes, Player 2 the odd ones
PLAYER_HOLES = {
    1: np.arange(0, TOTAL_HOLES, 2, dtype=np.int8),
    2: np.arange(1, TOTAL_HOLES, 2, dtype=np.int8),
}


def hole_owner(hole: int) -> int:
    return 1 if hole % 2 == 0 else 2


def opponent(player: int) -> int:
    return 3 - player


class AwaleBoard:
    def __init__(self, current_player: int = 1):
        if current_player not in (1, 2):
            raise ValueError(f"current_player must be 1 or 2, got {current_player!r}")
        # board[i] = [red seeds, blue seeds]
        self.board = np.full((TOTAL_HOLES, 2), INITIAL_SEEDS_PER_COLOR, dtype=np.int8)
        self.scores = np.zeros(2, dtype=np.int16)
        self.current_player = current_player

    @classmethod
    def with_random_start(cls, rng: random.Random) -> "AwaleBoard":
        """Fresh board whose starting player is drawn from ``rng``."""
        return cls(current_player=rng.choice((1, 2)))

    @classmethod
    def from_counts(cls, red: Sequence[int], blue: Sequence[int],
                    scores: Sequence[int] = (0, 0), current_player: int = 1) -> "AwaleBoard":
        """
        Build an arbitrary position.

        Parameters:
            red (sequence): 16 red seed counts, hole 0 first.
            blue (sequence): 16 blue seed counts, hole 0 first.
            scores (sequence): captured seeds of Player 1 and Player 2.
            current_player (int): player to move.

        Raises:
            ValueError: if a count is negative, a sequence has the wrong
                length, or the position does not hold exactly 64 seeds.
        """
        if len(red) != TOTAL_HOLES or len(blue) != TOTAL_HOLES:
            raise ValueError(f"expected {TOTAL_HOLES} red and blue counts")
        if len(scores) != 2:
            raise ValueError("expected two captured totals")
        if min(red) < 0 or min(blue) < 0 or min(scores) < 0:
            raise ValueError("seed counts cannot be negative")
        total = sum(red) + sum(blue) + sum(scores)
        if total != TOTAL_SEEDS:
            raise ValueError(f"position holds {total} seeds, expected {TOTAL_SEEDS}")

        new_board = cls(current_player=current_player)
        new_board.board[:, SeedColor.RED] = red
        new_board.board[:, SeedColor.BLUE] = blue
        new_board.scores[:] = scores
        return new_board

    # ------------------------------------------------------------------
    #   Read accessors
    # ------------------------------------------------------------------
    def seeds(self, hole: int, color: SeedColor) -> int:
        return int(self.board[hole, color])

    def hole_total(self, hole: int) -> int:
        return int(self.board[hole].sum())

    def seeds_on_board(self) -> int:
        return int(self.board.sum())

    def captured(self, player: int) -> int:
        return int(self.scores[player - 1])

    @property
    def player1_captured(self) -> int:
        return int(self.scores[0])

    @property
    def player2_captured(self) -> int:
        return int(self.scores[1])

    def has_seeds(self, player: int) -> bool:
        return bool(self.board[PLAYER_HOLES[player]].any())

    def is_valid_move(self, hole: int, color: int) -> bool:
        if not isinstance(hole, (int, np.integer)) or color is None:
            return False
        return (0 <= hole < TOTAL_HOLES and
                hole_owner(hole) == self.current_player and
                color in (SeedColor.RED, SeedColor.BLUE) and
                self.board[hole, color] > 0)

    def render(self) -> str:
        """Text table with hole numbers, red, blue and total seeds per hole."""
        separator = "     " + "-" * 47
        lines = [
            f"J1={self.player1_captured}, J2={self.player2_captured}, to move: J{self.current_player}",
            "  N: " + " ".join(f"{i + 1:02d}" for i in range(TOTAL_HOLES)),
            separator,
            "  R: " + " ".join(f"{hole[SeedColor.RED]:02d}" for hole in self.board),
            "  B: " + " ".join(f"{hole[SeedColor.BLUE]:02d}" for hole in self.board),
            separator,
            "  T: " + " ".join(f"{hole.sum():02d}" for hole in self.board),
        ]
        return "\n".join(lines)

    def __str__(self):
        return self.render()

    # ------------------------------------------------------------------
    #   Rules
    # ------------------------------------------------------------------
    def switch_player(self) -> None:
        self.current_player = opponent(self.current_player)

    def sow_seeds(self, hole: int, color: SeedColor) -> int:
        """
        Take every seed of ``color`` out of ``hole``, sow them, then resolve
        captures for the player to move.

        Blue seeds go into every following hole except the origin. Red seeds
        go into every second hole starting at ``hole + 1``, i.e. only into the
        opponent's row.

        Returns:
            int: the landing hole.

        Raises:
            InvalidMove: if the hole is out of range, not owned by the player
                to move, or empty of ``color``. The board is left untouched.
        """
        if not isinstance(hole, (int, np.integer)) or not 0 <= hole < TOTAL_HOLES:
            raise InvalidMove(f"Hole {hole!r} is out of range")
        if color not in (SeedColor.RED, SeedColor.BLUE):
            raise InvalidMove(f"Unknown seed color {color!r}")
        color = SeedColor(color)
        if hole_owner(hole) != self.current_player:
            raise InvalidMove(f"Player {self.current_player} cannot sow from hole {hole + 1}")
        if self.board[hole, color] == 0:
            raise InvalidMove(f"Hole {hole + 1} holds no {color.name.lower()} seeds")

        seeds_to_sow = int(self.board[hole, color])
        self.board[hole, color] = 0

        current_index = hole
        if color == SeedColor.BLUE:
            while seeds_to_sow > 0:
                current_index = (current_index + 1) % TOTAL_HOLES
                if current_index == hole:
                    continue
                self.board[current_index, color] += 1
                seeds_to_sow -= 1
        else:
            current_index = (hole + 1) % TOTAL_HOLES
            while True:
                self.board[current_index, color] += 1
                seeds_to_sow -= 1
                if seeds_to_sow == 0:
                    break
                current_index = (current_index + 2) % TOTAL_HOLES

        self.capture_seeds(self.current_player, current_index)
        assert self.seeds_on_board() + int(self.scores.sum()) == TOTAL_SEEDS, \
            "seed conservation broken"
        return current_index

    def capture_seeds(self, player: int, landing_hole: int) -> int:
        """Capture backward from ``landing_hole`` while holes hold 2 or 3 seeds."""
        if player not in (1, 2):
            raise ValueError(f"player must be 1 or 2, got {player!r}")
        captured = 0
        current_index = landing_hole
        while True:
            total_seeds = int(self.board[current_index].sum())
            if total_seeds not in (2, 3):
                break
            captured += total_seeds
            self.board[current_index] = 0
            current_index = (current_index - 1) % TOTAL_HOLES
        self.scores[player - 1] += captured
        return captured

    def winner_by_totals(self) -> Optional[int]:
        if self.scores[0] > self.scores[1]:
            return 1
        if self.scores[1] > self.scores[0]:
            return 2
        return None

    def check_game_status(self) -> GameStatus:
        """
        Decide whether the game is over. Rules are checked in priority order:
        capture threshold, 32/32 split, fewer than 8 seeds left, then the
        player to move having no seeds at all.

        The last rule hands every seed left on the board to the other player,
        so this mutates the board and must be called once per turn boundary.
        """
        if self.scores[0] >= WINNING_THRESHOLD:
            return GameStatus(True, 1, GameEndReason.THRESHOLD_REACHED)
        if self.scores[1] >= WINNING_THRESHOLD:
            return GameStatus(True, 2, GameEndReason.THRESHOLD_REACHED)
        if self.scores[0] == self.scores[1] == TOTAL_SEEDS // 2:
            return GameStatus(True, None, GameEndReason.EVEN_SPLIT)
        if self.seeds_on_board() < MIN_SEEDS_ON_BOARD:
            return GameStatus(True, self.winner_by_totals(), GameEndReason.INSUFFICIENT_SEEDS)
        if not self.has_seeds(self.current_player):
            self.scores[opponent(self.current_player) - 1] += self.seeds_on_board()
            self.board[:] = 0
            return GameStatus(True, self.winner_by_totals(), GameEndReason.NO_LEGAL_MOVES)
        return NOT_OVER

    def copy(self) -> "AwaleBoard":
        cloned = AwaleBoard.__new__(AwaleBoard)
        cloned.board = self.board.copy()
        cloned.scores = self.scores.copy()
        cloned.current_player = self.current_player
        return cloned
