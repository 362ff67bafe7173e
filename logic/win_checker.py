"""
Win checker for TicTacToe.
Works out whether a board is won, tied, or still in progress.
"""

from enum import Enum
from typing import Optional, Tuple
from dataclasses import dataclass
from .game_state import Board, GameState, Mark


# All possible winning lines, checked in this order
WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)


class Outcome(Enum):
    """Where a game stands."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    TIE = "tie"


@dataclass(frozen=True)
class GameStatus:
    """
    Status derived from a board.

    winner is only set when outcome is WON.
    """
    outcome: Outcome
    winner: Optional[Mark] = None

    @classmethod
    def won(cls, mark: Mark) -> "GameStatus":
        return cls(Outcome.WON, mark)

    @property
    def is_over(self) -> bool:
        """True for WON and TIE."""
        return self.outcome != Outcome.IN_PROGRESS


IN_PROGRESS = GameStatus(Outcome.IN_PROGRESS)
TIE = GameStatus(Outcome.TIE)


def _line_owner(board: Board, line: Tuple[int, int, int]) -> Optional[Mark]:
    """Mark that fills the whole line, or None."""
    a, b, c = line
    if board[a] is not None and board[a] == board[b] == board[c]:
        return board[a]
    return None


def evaluate_winner(board: Board) -> Optional[Mark]:
    """
    Check if there's a winner.

    Args:
        board: The 9-cell board.

    Returns:
        The mark of the first completed line, or None if no winner yet.
    """
    for line in WINNING_LINES:
        winner = _line_owner(board, line)
        if winner is not None:
            return winner
    return None


def get_winning_line(board: Board) -> Optional[Tuple[int, int, int]]:
    """
    Get the winning line if there is one.

    Returns:
        The first completed line as three cell indices, or None.
    """
    for line in WINNING_LINES:
        if _line_owner(board, line) is not None:
            return line
    return None


def is_full(board: Board) -> bool:
    """True if no cell is empty."""
    return all(cell is not None for cell in board)


def derive_status(board: Board) -> GameStatus:
    """
    Work out the game status from the board alone.

    A win takes precedence over a full board.
    """
    winner = evaluate_winner(board)
    if winner is not None:
        return GameStatus.won(winner)
    if is_full(board):
        return TIE
    return IN_PROGRESS


def status_message(state: GameState) -> str:
    """Status line shown above the board."""
    status = derive_status(state.board)
    if status.outcome == Outcome.WON:
        return f"Winner: {status.winner.value}!"
    if status.outcome == Outcome.TIE:
        return "It's a tie!"
    return f"Next player: {state.turn.value}"
