"""
Logic module for GRIDz.
Handles game state, rules, and the AI opponent.
"""

from .config import GameConfig
from .game_state import GameState, Player, Difficulty, GameMode, Verdict, Scores
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker, evaluate
from .ai_player import AIPlayer, InvalidBoardError, minimax, select_move
from .session import GameSession

__version__ = "1.0.0"
