"""
Game state management for GRIDz.
Tracks the board, whose turn it is, the round verdict and the score tally.
"""

import logging
from enum import Enum
from functools import total_ordering
from typing import Optional, List, Tuple
from dataclasses import dataclass, field

from .config import GameConfig

logger = logging.getLogger(__name__)


class Player(Enum):
    """The two players in the game."""
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X


@total_ordering
class Difficulty(Enum):
    """AI difficulty levels, ordered from weakest to strongest."""
    EASY = 1      # Random moves
    MEDIUM = 2    # Coin flip between HARD and EASY
    HARD = 3      # Full minimax

    def __lt__(self, other: "Difficulty") -> bool:
        if not isinstance(other, Difficulty):
            return NotImplemented
        return self.value < other.value


class GameMode(Enum):
    """How the second seat is played."""
    SINGLE = "single"   # Human vs AI
    BLITZ = "blitz"     # Human vs AI, board clears itself after each round
    FRIEND = "friend"   # Human vs human on the same board

    @property
    def uses_ai(self) -> bool:
        return self != GameMode.FRIEND


class Verdict(Enum):
    """Result of evaluating a board."""
    PENDING = "pending"
    X_WINS = "X"
    O_WINS = "O"
    TIE = "tie"

    @classmethod
    def win_for(cls, player: Player) -> "Verdict":
        """Get the winning verdict for a player."""
        return cls.X_WINS if player == Player.X else cls.O_WINS

    @property
    def winner(self) -> Optional[Player]:
        if self == Verdict.X_WINS:
            return Player.X
        if self == Verdict.O_WINS:
            return Player.O
        return None

    @property
    def is_terminal(self) -> bool:
        return self != Verdict.PENDING


# A board is 9 cells, row-major. None means empty.
Board = List[Optional[Player]]


def empty_board() -> Board:
    """Create an empty 3x3 board."""
    return [None] * GameConfig.NUM_CELLS


def index_to_cell(index: int) -> Tuple[int, int]:
    """Convert a board index to (row, col)."""
    return divmod(index, GameConfig.BOARD_SIZE)


def cell_to_index(row: int, col: int) -> int:
    """Convert (row, col) to a board index."""
    return row * GameConfig.BOARD_SIZE + col


@dataclass
class Scores:
    """Wins for each player and ties, kept across rounds of one session."""
    x: int = 0
    o: int = 0
    ties: int = 0

    def record(self, verdict: Verdict):
        """
        Count a finished round.

        Args:
            verdict: A terminal verdict. PENDING is ignored.
        """
        if verdict == Verdict.X_WINS:
            self.x += 1
        elif verdict == Verdict.O_WINS:
            self.o += 1
        elif verdict == Verdict.TIE:
            self.ties += 1

    def reset(self):
        self.x = 0
        self.o = 0
        self.ties = 0


@dataclass
class GameState:
    """
    The complete state of a GRIDz session.

    Tracks:
    - The 3x3 board (flat, row-major)
    - The selected mode and AI difficulty
    - Whose turn it is
    - The verdict of the current round
    - The score tally across rounds
    """

    board: Board = field(default_factory=empty_board)

    # None until a mode is picked on the mode screen
    mode: Optional[GameMode] = None
    difficulty: Difficulty = Difficulty[GameConfig.DEFAULT_DIFFICULTY]

    human_player: Player = Player(GameConfig.HUMAN_SYMBOL)
    ai_player: Player = Player(GameConfig.AI_SYMBOL)

    # The human (or the first friend) always opens a round
    current_player: Player = Player(GameConfig.HUMAN_SYMBOL)

    verdict: Verdict = Verdict.PENDING
    scores: Scores = field(default_factory=Scores)

    # Indices of the moves made this round, in order
    moves: List[int] = field(default_factory=list)
    last_ai_move: Optional[int] = None

    @property
    def is_game_over(self) -> bool:
        return self.verdict.is_terminal

    @property
    def should_auto_reset(self) -> bool:
        """True when a finished blitz round should clear itself."""
        return self.mode == GameMode.BLITZ and self.is_game_over

    def make_move(self, index: int) -> bool:
        """
        Place the current player's mark and pass the turn.

        Args:
            index: Board index (0-8).

        Returns:
            True if move was successful, False otherwise.
        """
        # Check if game is over
        if self.is_game_over:
            logger.warning("Game is already over!")
            return False

        # Check if index is on the board
        if not 0 <= index < GameConfig.NUM_CELLS:
            logger.warning("Invalid position %d!", index)
            return False

        # Check if cell is empty
        if self.board[index] is not None:
            logger.warning("Cell %d is already occupied!", index)
            return False

        # Place the mark and switch turns
        self.board[index] = self.current_player
        self.moves.append(index)
        self.current_player = self.current_player.opposite()
        return True

    def reset_board(self):
        """Start a fresh round. Scores are kept."""
        self.board = empty_board()
        self.current_player = self.human_player
        self.verdict = Verdict.PENDING
        self.moves = []
        self.last_ai_move = None

    def format_board(self) -> str:
        """Render the board as text, numbering the empty cells."""
        size = GameConfig.BOARD_SIZE
        lines = []
        for row in range(size):
            cells = []
            for col in range(size):
                index = cell_to_index(row, col)
                piece = self.board[index]
                cells.append(piece.value if piece else str(index))
            lines.append(" " + " | ".join(cells))
            if row < size - 1:
                lines.append("---+---+---")
        return "\n".join(lines)
