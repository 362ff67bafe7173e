"""
Move validator for TicTacToe.
Validates moves and applies them to produce the next game state.
"""

from enum import Enum
from typing import Optional, List
from dataclasses import dataclass
from .game_state import BOARD_CELLS, GameState
from .win_checker import derive_status


class MoveError(Enum):
    """Why a move was rejected."""
    INVALID_INDEX = "invalid_index"
    GAME_ALREADY_OVER = "game_already_over"
    CELL_OCCUPIED = "cell_occupied"

    @property
    def message(self) -> str:
        return _ERROR_MESSAGES[self]


_ERROR_MESSAGES = {
    MoveError.INVALID_INDEX: f"Invalid cell. Must be 0-{BOARD_CELLS - 1}.",
    MoveError.GAME_ALREADY_OVER: "Game is already over!",
    MoveError.CELL_OCCUPIED: "Cell is already occupied!",
}


@dataclass(frozen=True)
class MoveResult:
    """
    Result of applying a move.

    On success state is the new game state and error is None.
    On failure state is the unchanged input state.
    """
    state: GameState
    error: Optional[MoveError] = None

    @property
    def is_valid(self) -> bool:
        return self.error is None

    @property
    def error_message(self) -> Optional[str]:
        return self.error.message if self.error else None


def validate_move(state: GameState, index: int) -> Optional[MoveError]:
    """
    Validate a move.

    Checks, in order: index range, game not over, cell empty.

    Args:
        state: Current game state.
        index: Cell to mark (0-8).

    Returns:
        The first failing check as a MoveError, or None if the move is legal.
    """
    if isinstance(index, bool) or not isinstance(index, int):
        return MoveError.INVALID_INDEX
    if not 0 <= index < BOARD_CELLS:
        return MoveError.INVALID_INDEX

    if derive_status(state.board).is_over:
        return MoveError.GAME_ALREADY_OVER

    if state.board[index] is not None:
        return MoveError.CELL_OCCUPIED

    return None


def apply_move(state: GameState, index: int) -> MoveResult:
    """
    Place the current player's mark at index.

    The input state is never modified. A successful move returns a new
    state with the cell set and the turn flipped.
    """
    error = validate_move(state, index)
    if error is not None:
        return MoveResult(state=state, error=error)

    board = list(state.board)
    board[index] = state.turn
    return MoveResult(state=GameState(board=tuple(board), turn=state.turn.opposite()))


def get_valid_moves(state: GameState) -> List[int]:
    """
    Get all valid moves for the current player.

    Returns:
        Indices of empty cells, or an empty list once the game is over.
    """
    if derive_status(state.board).is_over:
        return []
    return state.get_empty_cells()
