"""
Configuration for the TicTacToe engine.
"""


class EngineConfig:
    """
    Configuration class for GameEngine.
    """

    # ==================== DEBUG SETTINGS ====================
    # Print a notice whenever a move is rejected
    DEBUG_MODE = True
