"""
Main entry point for TicTacToe.

Launches the Tkinter UI by default, or a console game with --no-ui.
Both front ends drive the same GameEngine.
"""

from typing import Callable, Optional

from config import GameConfig
from logic.engine import GameEngine
from logic.game_state import BOARD_SIZE, GameState, row_col_to_index


def render_board(state: GameState) -> str:
    """
    Draw the board for the console, with row and column guides.

    Empty cells show their index so the player knows what to type.
    """
    lines = ["", "    0   1   2", "  +---+---+---+"]
    for row in range(BOARD_SIZE):
        row_str = f"{row} |"
        for col in range(BOARD_SIZE):
            cell = state.cell_at(row, col)
            symbol = cell.value if cell is not None else GameConfig.EMPTY_SYMBOL
            row_str += f" {symbol} |"
        lines.append(row_str)
        lines.append("  +---+---+---+")
    return "\n".join(lines)


def parse_move(text: str) -> int:
    """
    Parse a move typed at the console.

    Accepts a cell index ("4") or a row and column ("1 1" or "1,1").

    Raises:
        ValueError: If the text is not one of those forms.
    """
    parts = text.replace(",", " ").split()
    if len(parts) == 1:
        return int(parts[0])
    if len(parts) == 2:
        return row_col_to_index(int(parts[0]), int(parts[1]))
    raise ValueError(f"Could not understand move: {text!r}")


def play_console(
    engine: Optional[GameEngine] = None,
    input_func: Callable[[str], str] = input
) -> None:
    """
    Play games in the terminal until the player quits.

    Args:
        engine: Engine to drive. A new one is created if not given.
        input_func: Source of player input (replaceable for tests).
    """
    engine = engine or GameEngine()

    print("\n" + "="*60)
    print("   TicTacToe - Console Mode")
    print("="*60)
    print("Enter a cell index (0-8) or 'row col'. Type 'q' to quit.")

    try:
        while True:
            print(render_board(engine.state))
            print(f"\n{engine.message}")

            if engine.is_over:
                answer = input_func("Play again? [y/N] ").strip().lower()
                if answer not in ("y", "yes"):
                    break
                engine.reset()
                continue

            prompt = f"Move {engine.state.move_count + 1} ({engine.state.turn.value}) > "
            text = input_func(prompt).strip().lower()
            if text in GameConfig.QUIT_COMMANDS:
                break

            try:
                index = parse_move(text)
            except ValueError as e:
                print(f"  Invalid input: {e}")
                continue

            engine.play(index)
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Don't print a notice for rejected moves"
    )

    args = parser.parse_args(argv)

    engine = GameEngine(verbose=False if args.quiet else None)

    if args.no_ui:
        play_console(engine)
        return

    from ui import TicTacToeUI
    print("\n" + "="*60)
    print("   TicTacToe UI")
    print("="*60 + "\n")
    ui = TicTacToeUI(engine)
    ui.run()


if __name__ == "__main__":
    main()
