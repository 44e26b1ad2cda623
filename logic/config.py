"""
Game configuration for GRIDz.
All the tunable settings for the rules, the AI and the front ends.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Change these values to tune the game!
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid, stored row-major (index = 3 * row + col)
    BOARD_SIZE = 3
    NUM_CELLS = BOARD_SIZE * BOARD_SIZE  # 9 cells

    # ==================== PLAYER SETTINGS ====================
    # In the AI modes the human always plays X and moves first
    HUMAN_SYMBOL = "X"
    AI_SYMBOL = "O"

    # ==================== AI SETTINGS ====================
    # Minimax score for a win at the search root.
    # A win found at depth d scores WIN_SCORE - d, a loss d - WIN_SCORE.
    WIN_SCORE = 10

    # Chance that MEDIUM plays the HARD move instead of a random one
    MEDIUM_OPTIMAL_PROBABILITY = 0.5

    # Difficulty preselected on the mode screen
    DEFAULT_DIFFICULTY = "MEDIUM"

    # ==================== PACING SETTINGS ====================
    # Blitz mode clears the board this long after a round ends
    BLITZ_RESET_DELAY_MS = 600
