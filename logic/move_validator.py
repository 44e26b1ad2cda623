"""
Move validator for GRIDz.
Validates that clicks follow the rules before they reach the board.
"""

from typing import Optional, List, Sequence
from dataclasses import dataclass

from .config import GameConfig
from .game_state import GameState, Player


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates GRIDz moves.

    Rules:
    1. A mode must be selected
    2. The round must not be over
    3. Can only place on empty cells inside the board
    """

    def validate_move(self, game_state: GameState, index: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            index: Board index to place a mark (0-8).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # Check if a mode was picked
        if game_state.mode is None:
            return ValidationResult(
                is_valid=False,
                error_message="No game mode selected!"
            )

        # Check if game is over
        if game_state.is_game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        # Check if index is in valid range
        if not 0 <= index < GameConfig.NUM_CELLS:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position {index}. Must be 0-{GameConfig.NUM_CELLS - 1}."
            )

        # Check if cell is empty
        occupant = game_state.board[index]
        if occupant is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already occupied by {occupant.value}"
            )

        # All checks passed!
        return ValidationResult(is_valid=True)

    def get_valid_moves(self, board: Sequence[Optional[Player]]) -> List[int]:
        """
        Get all empty cells in ascending index order.

        Args:
            board: 9 cells, row-major.

        Returns:
            List of empty board indices.
        """
        return [i for i, cell in enumerate(board) if cell is None]
