"""
TicTacToe UI
A graphical interface for the game using Tkinter.

Shows:
- The 3x3 board as clickable buttons
- Game status (next player, winner, or tie)
- A "Play Again" button once the game is over
"""

import tkinter as tk
from tkinter import ttk
from typing import Optional

from config import GameConfig
from logic.engine import GameEngine
from logic.game_state import BOARD_CELLS, Mark, index_to_row_col


class TicTacToeUI:
    """
    Main UI class for TicTacToe.
    """

    def __init__(self, engine: Optional[GameEngine] = None):
        """Initialize the UI."""
        self.engine = engine or GameEngine()
        self.config = GameConfig

        self._create_ui()
        self._refresh()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title(self.config.WINDOW_TITLE)
        self.root.configure(bg=self.config.BG_COLOR)
        self.root.geometry(self.config.WINDOW_GEOMETRY)
        self.root.minsize(*self.config.WINDOW_MIN_SIZE)

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=self.config.BG_COLOR)
        style.configure('TLabel', background=self.config.BG_COLOR, foreground='white',
                        font=(self.config.FONT_FAMILY, 11))
        style.configure('Title.TLabel', font=self.config.TITLE_FONT,
                        foreground=self.config.TITLE_COLOR)
        style.configure('Status.TLabel', font=self.config.STATUS_FONT,
                        foreground=self.config.STATUS_COLOR)
        style.configure('TButton', font=self.config.BUTTON_FONT)

        ttk.Label(main_frame, text=self.config.WINDOW_TITLE, style='Title.TLabel').pack(pady=(0, 2))
        ttk.Label(main_frame, text=self.config.WINDOW_SUBTITLE).pack(pady=(0, 10))

        self.status_label = ttk.Label(main_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=5)

        # Board grid
        board_frame = ttk.Frame(main_frame)
        board_frame.pack(pady=10)

        self.board_cells = []
        for index in range(BOARD_CELLS):
            row, col = index_to_row_col(index)
            cell = tk.Button(
                board_frame,
                text="",
                font=self.config.CELL_FONT,
                width=self.config.CELL_WIDTH,
                height=self.config.CELL_HEIGHT,
                bg=self.config.CELL_COLOR,
                activebackground=self.config.CELL_COLOR,
                relief='ridge',
                borderwidth=2,
                command=lambda i=index: self._on_cell_click(i)
            )
            cell.grid(row=row, column=col, padx=2, pady=2)
            self.board_cells.append(cell)

        # Only packed while the game is over
        self.reset_button = ttk.Button(main_frame, text="Play Again", command=self._reset_game)

        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _on_cell_click(self, index: int):
        """Forward a clicked cell to the engine and redraw."""
        self.engine.play(index)
        self._refresh()

    def _refresh(self):
        """Redraw the board, status line and reset button from engine state."""
        self._update_board_display()
        self.status_label.configure(text=self.engine.message)

        if self.engine.is_over:
            self.reset_button.pack(pady=15)
        else:
            self.reset_button.pack_forget()

    def _update_board_display(self):
        """Update the board grid display."""
        winning_line = self.engine.winning_line or ()
        playable = set(self.engine.valid_moves())

        for index, cell in enumerate(self.board_cells):
            mark = self.engine.state.board[index]
            bg_color = self.config.CELL_WIN_COLOR if index in winning_line else self.config.CELL_COLOR
            state = tk.NORMAL if index in playable else tk.DISABLED

            if mark is None:
                cell.configure(text="", bg=bg_color, state=state)
            else:
                fg_color = self.config.X_COLOR if mark == Mark.X else self.config.O_COLOR
                # Disabled buttons draw their text with disabledforeground
                cell.configure(text=mark.value, bg=bg_color, fg=fg_color,
                               disabledforeground=fg_color, state=state)

    def _reset_game(self):
        """Reset the game."""
        print("Resetting game...")
        self.engine.reset()
        self._refresh()

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()
