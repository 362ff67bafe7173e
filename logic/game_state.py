"""
Game state for TicTacToe.
Holds the board and whose turn it is. Every move produces a new GameState.
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass


class Mark(Enum):
    """The two marks a player can place."""
    X = "X"
    O = "O"

    def opposite(self) -> "Mark":
        """Get the other player's mark."""
        return Mark.O if self == Mark.X else Mark.X


# A cell is either empty (None) or holds a mark
Cell = Optional[Mark]
Board = Tuple[Cell, ...]

BOARD_SIZE = 3
BOARD_CELLS = BOARD_SIZE * BOARD_SIZE

EMPTY_BOARD: Board = (None,) * BOARD_CELLS


@dataclass(frozen=True)
class GameState:
    """
    The complete state of a TicTacToe game.

    Tracks:
    - The board, 9 cells in row-major order (index = row * 3 + col)
    - Which mark moves next

    Whether the game is won or tied is never stored here. It is always
    derived from the board (see win_checker.derive_status).
    """

    board: Board = EMPTY_BOARD
    turn: Mark = Mark.X

    def __post_init__(self):
        board = tuple(self.board)
        if len(board) != BOARD_CELLS:
            raise ValueError(
                f"Board must have exactly {BOARD_CELLS} cells, got {len(board)}"
            )
        for cell in board:
            if cell is not None and not isinstance(cell, Mark):
                raise ValueError(f"Invalid cell value: {cell!r}")
        if not isinstance(self.turn, Mark):
            raise ValueError(f"Invalid turn: {self.turn!r}")
        # Lists are accepted for convenience but always stored as a tuple
        object.__setattr__(self, "board", board)

    @property
    def move_count(self) -> int:
        """Number of marks on the board."""
        return sum(1 for cell in self.board if cell is not None)

    def get_empty_cells(self) -> List[int]:
        """
        Get all empty cells on the board.

        Returns:
            List of cell indices (0-8).
        """
        return [index for index, cell in enumerate(self.board) if cell is None]

    def cell_at(self, row: int, col: int) -> Cell:
        """Get the cell at (row, col)."""
        return self.board[row_col_to_index(row, col)]


def reset_game() -> GameState:
    """Return a fresh game: empty board, X to move."""
    return GameState()


def index_to_row_col(index: int) -> Tuple[int, int]:
    """
    Convert a board index to (row, col).

    Raises:
        ValueError: If index is outside 0-8.
    """
    if not 0 <= index < BOARD_CELLS:
        raise ValueError(f"Invalid index {index}. Must be 0-{BOARD_CELLS - 1}.")
    return divmod(index, BOARD_SIZE)


def row_col_to_index(row: int, col: int) -> int:
    """
    Convert (row, col) to a board index.

    Raises:
        ValueError: If row or col is outside 0-2.
    """
    if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
        raise ValueError(f"Invalid position ({row}, {col}). Must be 0-2.")
    return row * BOARD_SIZE + col


_CHAR_TO_CELL = {"X": Mark.X, "O": Mark.O, ".": None}


def parse_board(text: str) -> Board:
    """
    Build a board from text.

    Uses one character per cell: 'X', 'O' or '.' for empty.
    Whitespace is ignored, so rows can be written on separate lines:

        parse_board('''
            XO.
            .X.
            ..O
        ''')

    Raises:
        ValueError: On unknown characters or a cell count other than 9.
    """
    chars = [ch for ch in text.upper() if not ch.isspace()]
    if len(chars) != BOARD_CELLS:
        raise ValueError(f"Expected {BOARD_CELLS} cells, got {len(chars)}")

    board = []
    for ch in chars:
        if ch not in _CHAR_TO_CELL:
            raise ValueError(f"Unknown cell character: {ch!r}")
        board.append(_CHAR_TO_CELL[ch])
    return tuple(board)
