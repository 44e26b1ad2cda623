"""
AI player for GRIDz.
Uses the Minimax algorithm to choose the best move, diluted with random
moves on the lower difficulty levels.
"""

import logging
import random
from typing import Optional, List, MutableSequence

from .config import GameConfig
from .game_state import Player, Difficulty, Verdict
from .move_validator import MoveValidator
from .win_checker import WinChecker

logger = logging.getLogger(__name__)

Board = MutableSequence[Optional[Player]]


class InvalidBoardError(ValueError):
    """Raised when the AI is asked to move on a board with no legal move."""


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    On HARD the AI always plays optimally - it will win if possible,
    block the opponent if needed, and never lose (at worst, draw).
    MEDIUM plays the HARD move half of the time and EASY plays randomly.
    """

    def __init__(
        self,
        player: Player = Player.O,
        opponent: Optional[Player] = None,
        difficulty: Difficulty = Difficulty.HARD,
        rng: Optional[random.Random] = None
    ):
        """
        Initialize the AI player.

        Args:
            player: Which player the AI controls (default: O)
            opponent: Which player the human controls (default: the other one)
            difficulty: How much of the search the AI actually uses.
            rng: Random source for EASY and MEDIUM. Pass a seeded
                random.Random for reproducible games.
        """
        if opponent is None:
            opponent = player.opposite()
        if opponent == player:
            raise InvalidBoardError(f"AI and human cannot both play {player.value}")

        self.player = player
        self.opponent = opponent
        self.difficulty = difficulty
        self.rng = rng if rng is not None else random.Random()
        self.win_checker = WinChecker()
        self.validator = MoveValidator()

        # Keep track of how many positions the last search visited (for debugging)
        self.positions_evaluated = 0

    def select_move(self, board: Board) -> int:
        """
        Choose the AI's next cell for the configured difficulty.

        The board is used as scratch space during the search and is
        restored before this returns.

        Args:
            board: 9 cells, row-major.

        Returns:
            Index of an empty cell.

        Raises:
            InvalidBoardError: If the board is full or already decided.
        """
        # Check the board still has a move to make
        verdict = self.win_checker.evaluate(board)
        if verdict.is_terminal:
            raise InvalidBoardError(
                f"No move to make, board is already decided ({verdict.value})"
            )

        if self.difficulty == Difficulty.EASY:
            return self.get_random_move(board)

        if self.difficulty == Difficulty.MEDIUM:
            if self.rng.random() < GameConfig.MEDIUM_OPTIMAL_PROBABILITY:
                return self.get_best_move(board)
            return self.get_random_move(board)

        return self.get_best_move(board)

    def get_random_move(self, board: Board) -> int:
        """Pick any empty cell, uniformly."""
        valid_moves = self.validator.get_valid_moves(board)
        if not valid_moves:
            raise InvalidBoardError("No empty cells left")
        return valid_moves[self.rng.randrange(len(valid_moves))]

    def get_best_move(self, board: Board) -> int:
        """
        Get the best move for the current position.

        Cells are tried in ascending order and only a strictly better
        score replaces the current best, so ties go to the lowest index.

        Args:
            board: 9 cells, row-major.

        Returns:
            Index of the best move.
        """
        self.positions_evaluated = 0

        valid_moves = self.validator.get_valid_moves(board)
        if not valid_moves:
            raise InvalidBoardError("No empty cells left")

        best_score = float('-inf')
        best_move = valid_moves[0]

        # Try every empty cell, keep the first best one
        for index in valid_moves:
            score = self._score_move(board, index, self.player, 0, False)
            if score > best_score:
                best_score = score
                best_move = index

        logger.debug(
            "AI evaluated %d positions. Best move: %d (score: %d)",
            self.positions_evaluated, best_move, best_score
        )

        return best_move

    def minimax(self, board: Board, depth: int, is_maximizing: bool) -> int:
        """
        Exhaustive Minimax, no pruning.

        Args:
            board: State to evaluate. Mutated and restored in place.
            depth: Plies played since the search root.
            is_maximizing: True if it is the AI's turn.

        Returns:
            WIN_SCORE - depth for an AI win, depth - WIN_SCORE for a loss,
            0 for a tie, otherwise the best score reachable with perfect play.
        """
        self.positions_evaluated += 1

        # Check terminal states
        verdict = self.win_checker.evaluate(board)

        if verdict.winner == self.player:
            return GameConfig.WIN_SCORE - depth  # Prefer faster wins
        elif verdict.winner == self.opponent:
            return depth - GameConfig.WIN_SCORE  # Prefer slower losses
        elif verdict == Verdict.TIE:
            return 0

        mover = self.player if is_maximizing else self.opponent
        scores: List[int] = [
            self._score_move(board, index, mover, depth + 1, not is_maximizing)
            for index in self.validator.get_valid_moves(board)
        ]
        return max(scores) if is_maximizing else min(scores)

    def _score_move(
        self,
        board: Board,
        index: int,
        mover: Player,
        depth: int,
        is_maximizing: bool
    ) -> int:
        """Try a mark at index, score the result, then take the mark back."""
        board[index] = mover
        try:
            return self.minimax(board, depth, is_maximizing)
        finally:
            board[index] = None


def minimax(
    board: Board,
    depth: int,
    is_maximizing: bool,
    ai_player: Player,
    human_player: Player
) -> int:
    """Score a position for ai_player. See AIPlayer.minimax."""
    return AIPlayer(ai_player, human_player).minimax(board, depth, is_maximizing)


def select_move(
    board: Board,
    ai_player: Player,
    human_player: Player,
    difficulty: Difficulty,
    rng: Optional[random.Random] = None
) -> int:
    """Choose ai_player's next cell. See AIPlayer.select_move."""
    ai = AIPlayer(ai_player, human_player, difficulty=difficulty, rng=rng)
    return ai.select_move(board)
