"""
Game engine for TicTacToe.
Owns one game for a single caller (the UI or the console loop).
"""

from typing import List, Optional, Tuple

from .config import EngineConfig
from .game_state import GameState, reset_game
from .move_validator import MoveResult, apply_move, get_valid_moves
from .win_checker import GameStatus, derive_status, get_winning_line, status_message


class GameEngine:
    """
    Holds the current GameState and swaps it for the next one on each move.

    The rules live in the pure functions of this package; this class only
    keeps the latest state around for callers that want in-place semantics.
    """

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        verbose: Optional[bool] = None
    ):
        """
        Args:
            config: Engine configuration. Uses defaults if not provided.
            verbose: Print a notice for every rejected move.
                Defaults to config.DEBUG_MODE.
        """
        self.config = config or EngineConfig()
        self.verbose = self.config.DEBUG_MODE if verbose is None else verbose
        self.state: GameState = reset_game()

    @property
    def status(self) -> GameStatus:
        return derive_status(self.state.board)

    @property
    def is_over(self) -> bool:
        return self.status.is_over

    @property
    def message(self) -> str:
        return status_message(self.state)

    @property
    def winning_line(self) -> Optional[Tuple[int, int, int]]:
        return get_winning_line(self.state.board)

    def valid_moves(self) -> List[int]:
        """Indices of cells that can still be played (none once the game is over)."""
        return get_valid_moves(self.state)

    def play(self, index: int) -> MoveResult:
        """
        Play the current player's mark at index.

        The held state is replaced only if the move is accepted.
        """
        result = apply_move(self.state, index)
        if result.is_valid:
            self.state = result.state
        elif self.verbose:
            print(f"Move {index} rejected: {result.error_message}")
        return result

    def reset(self) -> GameState:
        """Start a new game."""
        self.state = reset_game()
        return self.state
