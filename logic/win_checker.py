"""
Win checker for GRIDz.
Checks if a player has won or if the game is a tie.
"""

from typing import Optional, Sequence, Tuple

from .config import GameConfig
from .game_state import Player, Verdict


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 marks of the same player in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines as board indices, in scan order
    WINNING_LINES = (
        # Rows
        (0, 1, 2),
        (3, 4, 5),
        (6, 7, 8),
        # Columns
        (0, 3, 6),
        (1, 4, 7),
        (2, 5, 8),
        # Diagonals
        (0, 4, 8),
        (2, 4, 6),
    )

    def evaluate(self, board: Sequence[Optional[Player]]) -> Verdict:
        """
        Get the verdict for a board.

        The first winning line in scan order decides. A board with two
        winners cannot come from legal play, so which one is reported
        for it is not guaranteed.

        Args:
            board: 9 cells, row-major.

        Returns:
            The win verdict, TIE for a full board, PENDING otherwise.
        """
        winner = self.check_winner(board)
        if winner is not None:
            return Verdict.win_for(winner)
        if self.is_full(board):
            return Verdict.TIE
        return Verdict.PENDING

    def check_winner(self, board: Sequence[Optional[Player]]) -> Optional[Player]:
        """
        Check if there's a winner.

        Args:
            board: 9 cells, row-major.

        Returns:
            The winning Player, or None if no winner yet.
        """
        line = self.get_winning_line(board)
        if line is None:
            return None
        return board[line[0]]

    def get_winning_line(
        self,
        board: Sequence[Optional[Player]]
    ) -> Optional[Tuple[int, int, int]]:
        """
        Get the winning line if there is one.

        Args:
            board: 9 cells, row-major.

        Returns:
            The winning line as a tuple of indices, or None.
        """
        self._check_board(board)
        for line in self.WINNING_LINES:
            a, b, c = line
            if board[a] is not None and board[a] == board[b] == board[c]:
                return line
        return None

    def check_draw(self, board: Sequence[Optional[Player]]) -> bool:
        """A draw is a full board with no winner."""
        return self.evaluate(board) == Verdict.TIE

    def is_full(self, board: Sequence[Optional[Player]]) -> bool:
        return all(cell is not None for cell in board)

    def _check_board(self, board: Sequence[Optional[Player]]):
        if len(board) != GameConfig.NUM_CELLS:
            raise ValueError(
                f"Board must have {GameConfig.NUM_CELLS} cells, got {len(board)}"
            )


_checker = WinChecker()


def evaluate(board: Sequence[Optional[Player]]) -> Verdict:
    """Get the verdict for a board. See WinChecker.evaluate."""
    return _checker.evaluate(board)
