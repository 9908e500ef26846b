"""
Game configuration for console TicTacToe.
Board layout, players, and logging settings.
"""


class GameConfig:
    """
    Configuration class for game settings.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3

    # Labels players type to pick a cell, e.g. "a1" or "C3"
    COLUMN_LABELS = "abc"
    ROW_LABELS = "123"

    # ==================== PLAYER SETTINGS ====================
    TOTAL_PLAYERS = 2
    FIRST_PLAYER = 1

    # Occupancy key for cells nobody has claimed yet
    UNCLAIMED = 0

    # What each player's cells look like on the board
    PLAYER_MARKERS = {
        1: "X",
        2: "O",
    }
    EMPTY_MARKER = " "

    # ==================== LOGGING SETTINGS ====================
    # Diagnostics go to stderr so they don't mix with the game itself
    LOG_FORMAT = "%(asctime)s %(levelname)s: %(message)s"
    DEFAULT_LOG_LEVEL = "WARNING"
    LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]
