# main.py
import logging
import random

from agents import HumanAgent, MinimaxAgent
from board_rules import AwaleBoard
from evaluation import HeuristicEvaluation
from game import AwaleGame

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s [%(levelname)s] %(message)s'
)

if __name__ == "__main__":
    # Instantiate agents
    # Example configurations:

    # Human vs. Minimax
    # player1_agent = HumanAgent()
    # player2_agent = MinimaxAgent(max_time=2)

    # Minimax (captured difference) vs. Minimax (weighted heuristic)
    player1_agent = MinimaxAgent(max_time=2)
    player2_agent = MinimaxAgent(max_time=2, evaluate=HeuristicEvaluation())

    board = AwaleBoard.with_random_start(random.Random())
    game = AwaleGame(player1_agent, player2_agent, board=board, max_turns=150)
    status = game.run_game()

    print(board.render())
    if status.is_draw:
        print(f"\nWINNER: TIE ({status.reason.value})")
    else:
        print(f"\nWINNER: J{status.winner} ({game.player_agents[status.winner].__class__.__name__}, "
              f"{status.reason.value})")
