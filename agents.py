# agents.py
import logging
import queue
import re
from typing import Callable, Optional

from board_rules import AwaleBoard, InvalidMove, Move, SeedColor, TOTAL_HOLES
from search import MinimaxSearch

logger = logging.getLogger(__name__)

MOVE_PATTERN = re.compile(r"^(\d{1,2})([RB])$")


def parse_move(text: str) -> Move:
    """
    Parse console notation such as ``"3B"`` or ``"11r"`` (1-based hole,
    R for red, B for blue).

    Raises:
        ValueError: if the text is not a hole number followed by R or B.
    """
    match = MOVE_PATTERN.match(text.strip().upper())
    if not match:
        raise ValueError(f"Invalid format {text!r}. Use a number (1-16) followed by R or B.")
    hole = int(match.group(1)) - 1
    if not 0 <= hole < TOTAL_HOLES:
        raise ValueError(f"Hole must be between 1 and {TOTAL_HOLES}, got {hole + 1}")
    color = SeedColor.RED if match.group(2) == "R" else SeedColor.BLUE
    return Move(hole, color)


class RemoteMoveTimeout(TimeoutError):
    """No remote move arrived within the allotted time."""


class Agent:
    """
    Abstract base class for all agents.
    """
    def make_move(self, board: AwaleBoard) -> Move:
        """
        Determine the next move.
        Must be overridden by subclasses.

        Parameters:
            board (AwaleBoard): The live board. Agents must not modify it.

        Returns:
            Move: A legal move for board.current_player.
        """
        raise NotImplementedError("This method should be overridden by subclasses.")

    def on_invalid_move(self, move: Move, error: InvalidMove) -> None:
        """Called by the game when the board rejected ``move``."""
        logger.warning("%s proposed rejected move %s: %s", self.__class__.__name__, move, error)


class HumanAgent(Agent):
    def __init__(self, read_move: Optional[Callable[[AwaleBoard], str]] = None):
        """
        Parameters:
            read_move (callable): returns the player's text input for a board.
                Defaults to a console prompt.
        """
        self.read_move = read_move if read_move is not None else self._prompt

    @staticmethod
    def _prompt(board: AwaleBoard) -> str:
        print(board.render())
        return input(f"\nJ{board.current_player}, enter your move (e.g., 1R or 01R for red, 1B for blue): ")

    def make_move(self, board: AwaleBoard) -> Move:
        while True:
            try:
                move = parse_move(self.read_move(board))
            except ValueError as e:
                print(e)
                continue
            if board.is_valid_move(move.hole, move.color):
                return move
            print("Invalid move. Please try again.")

    def on_invalid_move(self, move: Move, error: InvalidMove) -> None:
        print(error)


class MinimaxAgent(Agent):
    def __init__(self, max_time=2, search: Optional[MinimaxSearch] = None, **search_options):
        """
        Parameters:
            max_time (float): Maximum time allowed for move computation in seconds.
            search (MinimaxSearch): engine to use; built from ``max_time`` and
                ``search_options`` when omitted.
        """
        self.search = search if search is not None else MinimaxSearch(max_time=max_time, **search_options)
        self.last_result = None

    def make_move(self, board: AwaleBoard) -> Move:
        self.last_result = self.search.search(board)
        if self.last_result.move is None:
            raise InvalidMove(f"Player {board.current_player} has no legal move")
        return self.last_result.move


class RemoteAgent(Agent):
    """
    Opponent whose moves arrive from outside, e.g. a message subscriber
    thread. The transport calls ``deliver``; the game blocks in ``make_move``
    until a move is available.
    """

    def __init__(self, timeout: Optional[float] = None):
        self.timeout = timeout
        self._moves = queue.Queue()

    def deliver(self, hole: int, color) -> None:
        """Queue a move decoded by the transport. Safe to call from any thread."""
        self._moves.put(Move(hole, SeedColor(color)))

    def make_move(self, board: AwaleBoard) -> Move:
        try:
            return self._moves.get(timeout=self.timeout)
        except queue.Empty:
            raise RemoteMoveTimeout(f"No remote move received within {self.timeout}s") from None
