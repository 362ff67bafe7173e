"""
Configuration for TicTacToe.
Settings for the window, board display, and console mode.
"""


class GameConfig:
    """
    Configuration class for the game front ends.
    Change these values to restyle the game!
    """

    # ==================== WINDOW SETTINGS ====================
    WINDOW_TITLE = "Tic Tac Toe"
    WINDOW_SUBTITLE = "Click a square to play"
    WINDOW_GEOMETRY = "420x560"
    WINDOW_MIN_SIZE = (360, 480)

    # ==================== COLORS ====================
    BG_COLOR = '#1a1a2e'
    CELL_COLOR = '#16213e'
    CELL_WIN_COLOR = '#065f46'  # Highlight for the winning line
    X_COLOR = '#f87171'
    O_COLOR = '#10b981'
    TITLE_COLOR = '#00d4ff'
    STATUS_COLOR = '#ffd700'

    # ==================== FONTS ====================
    FONT_FAMILY = 'Segoe UI'
    TITLE_FONT = (FONT_FAMILY, 20, 'bold')
    STATUS_FONT = (FONT_FAMILY, 14)
    CELL_FONT = (FONT_FAMILY, 28, 'bold')
    BUTTON_FONT = (FONT_FAMILY, 11, 'bold')

    # Cell button size in text units
    CELL_WIDTH = 4
    CELL_HEIGHT = 2

    # ==================== CONSOLE SETTINGS ====================
    EMPTY_SYMBOL = " "
    QUIT_COMMANDS = ("q", "quit", "exit")
