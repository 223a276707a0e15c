#game.py
import logging
from enum import Enum
from typing import List, Optional, Tuple

from agents import Agent
from board_rules import AwaleBoard, GameEndReason, GameStatus, InvalidMove, Move

logger = logging.getLogger(__name__)


class TurnState(Enum):
    WAITING_FOR_MOVE = "waiting for move"
    APPLYING = "applying"
    CHECKING_STATUS = "checking status"
    GAME_OVER = "game over"


class AwaleGame:
    """
    Alternates the two agents on one live board until the game ends.

    The game owns the board; agents only see it while ``make_move`` runs.
    """

    def __init__(self, player1_agent: Agent, player2_agent: Agent,
                 board: Optional[AwaleBoard] = None, max_turns: Optional[int] = None):
        self.board = board if board is not None else AwaleBoard()
        self.player_agents = {
            1: player1_agent,
            2: player2_agent
        }
        self.max_turns = max_turns
        self.turn_number = 0
        self.moves_log: List[Tuple[int, Move]] = []
        self.status = GameStatus(False)
        self.state = TurnState.WAITING_FOR_MOVE
        # A board handed over mid-game may already be finished
        self._check_status()

    @property
    def current_agent(self) -> Agent:
        return self.player_agents[self.board.current_player]

    def _check_status(self) -> GameStatus:
        self.state = TurnState.CHECKING_STATUS
        status = self.board.check_game_status()
        if not status.is_over and self.max_turns is not None and self.turn_number >= self.max_turns:
            status = GameStatus(True, self.board.winner_by_totals(), GameEndReason.TURN_LIMIT)
        self.status = status
        if status.is_over:
            self.state = TurnState.GAME_OVER
            logger.info("Game over after %d turns: winner=%s (%s), J1=%d, J2=%d",
                        self.turn_number, status.winner or "draw", status.reason.value,
                        self.board.player1_captured, self.board.player2_captured)
        else:
            self.state = TurnState.WAITING_FOR_MOVE
        return status

    def play_turn(self) -> bool:
        """
        Ask the current agent for a move and apply it.

        Returns:
            bool: True if the move was applied, False if the board rejected it
            (the state stays WAITING_FOR_MOVE and the agent is told why).
        """
        if self.state is TurnState.GAME_OVER:
            raise RuntimeError("The game is already over")

        player = self.board.current_player
        agent = self.current_agent
        move = agent.make_move(self.board)

        self.state = TurnState.APPLYING
        try:
            captured_before = self.board.captured(player)
            self.board.sow_seeds(move.hole, move.color)
        except InvalidMove as e:
            self.state = TurnState.WAITING_FOR_MOVE
            agent.on_invalid_move(move, e)
            return False

        self.turn_number += 1
        self.moves_log.append((player, move))
        logger.info("T%d J%d (%s): %s, captured %d", self.turn_number, player,
                    agent.__class__.__name__, move, self.board.captured(player) - captured_before)

        self.board.switch_player()
        logger.debug("\n%s", self.board.render())
        self._check_status()
        return True

    def run_game(self) -> GameStatus:
        logger.debug("\n%s", self.board.render())
        while self.state is not TurnState.GAME_OVER:
            self.play_turn()
        return self.status
