"""
Logic module for TicTacToe.
Handles game state, rules, and status.
"""

from .game_state import GameState, Mark, reset_game, parse_board
from .win_checker import GameStatus, Outcome, evaluate_winner, is_full, derive_status
from .move_validator import MoveError, MoveResult, apply_move
from .engine import GameEngine

__version__ = "1.0.0"
