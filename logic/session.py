"""
Session controller for GRIDz.
Routes clicks to the board, lets the AI reply and keeps the score.
"""

import logging
import random
from typing import Optional, Tuple

from .game_state import GameState, GameMode, Difficulty
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker
from .ai_player import AIPlayer

logger = logging.getLogger(__name__)


class GameSession:
    """
    Ties the game logic together for a front end.

    Game flow:
    1. Player picks a mode (and a difficulty for the AI modes)
    2. Human clicks a cell
    3. Unless playing a friend, the AI replies straight away
    4. The board is checked for a win or tie and the score is updated
    5. Restart clears the board, Home also clears mode and scores
    """

    def __init__(self, rng: Optional[random.Random] = None):
        """
        Initialize the session.

        Args:
            rng: Random source shared with the AI. Pass a seeded
                random.Random for reproducible games.
        """
        self.state = GameState()
        self.validator = MoveValidator()
        self.win_checker = WinChecker()
        self.ai = AIPlayer(
            self.state.ai_player,
            self.state.human_player,
            difficulty=self.state.difficulty,
            rng=rng
        )

    def start(self, mode: GameMode, difficulty: Optional[Difficulty] = None):
        """
        Start playing in a mode.

        Args:
            mode: The mode picked on the mode screen.
            difficulty: AI difficulty. Ignored when playing a friend,
                kept from the previous session when None.
        """
        # Fresh round first, difficulty is only open between rounds
        self.state.mode = mode
        self.state.reset_board()

        if difficulty is not None and mode.uses_ai:
            self.set_difficulty(difficulty)

        if mode.uses_ai:
            logger.info("Starting %s game on %s", mode.value, self.state.difficulty.name)
        else:
            logger.info("Starting %s game", mode.value)

    def set_difficulty(self, difficulty: Difficulty) -> bool:
        """
        Change the AI difficulty.

        The difficulty is fixed while a round is being played, so a change
        is refused once the first move is on the board.

        Returns:
            True if the difficulty was changed.
        """
        state = self.state
        if state.moves and not state.is_game_over:
            logger.warning(
                "Cannot change difficulty to %s during a round", difficulty.name
            )
            return False

        state.difficulty = difficulty
        self.ai.difficulty = difficulty
        return True

    def handle_click(self, index: int) -> ValidationResult:
        """
        Handle a click on a cell.

        Invalid clicks (occupied cell, finished round, no mode) are
        ignored and leave the state untouched.

        Args:
            index: Board index (0-8).

        Returns:
            ValidationResult for the human's move.
        """
        # Check the click is a legal move
        result = self.validator.validate_move(self.state, index)
        if not result.is_valid:
            logger.debug("Ignoring click on %d: %s", index, result.error_message)
            return result

        state = self.state
        state.last_ai_move = None

        # Human move
        state.make_move(index)
        state.verdict = self.win_checker.evaluate(state.board)

        # AI replies straight away unless the human just ended the round
        if state.mode.uses_ai and not state.is_game_over:
            move = self.ai.select_move(state.board)
            state.make_move(move)
            state.last_ai_move = move
            state.verdict = self.win_checker.evaluate(state.board)

        # Update score
        if state.is_game_over:
            state.scores.record(state.verdict)
            logger.info("Round over: %s", state.verdict.value)

        return result

    @property
    def winning_line(self) -> Optional[Tuple[int, int, int]]:
        return self.win_checker.get_winning_line(self.state.board)

    def reset_board(self):
        """Clear the board for a new round. Scores are kept."""
        self.state.reset_board()

    def go_home(self):
        """Back to the mode screen. Clears the board and the scores."""
        self.state.mode = None
        self.state.reset_board()
        self.state.scores.reset()
