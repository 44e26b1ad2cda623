"""
Tests for the AI player.
"""

import random

import pytest

from logic.ai_player import AIPlayer, InvalidBoardError, minimax, select_move
from logic.game_state import Player, Difficulty, Verdict
from logic.win_checker import evaluate

X, O, _ = Player.X, Player.O, None


class FixedRandom(random.Random):
    """Random source that always flips the same coin and picks the same slot."""

    def __init__(self, coin: float, slot: int = 0):
        super().__init__(0)
        self.coin = coin
        self.slot = slot

    def random(self):
        return self.coin

    def randrange(self, start, stop=None, step=1):
        size = start if stop is None else stop - start
        return self.slot % size


def _empty_cells(board):
    return [i for i, cell in enumerate(board) if cell is None]


def test_takes_immediate_win():
    board = [O, O, _,
             X, X, _,
             _, _, X]
    assert select_move(board, O, X, Difficulty.HARD) == 2


def test_blocks_immediate_loss():
    board = [X, X, _,
             _, O, _,
             _, _, _]
    assert select_move(board, O, X, Difficulty.HARD) == 2


def test_blocks_column_threat():
    board = [X, O, _,
             X, _, _,
             _, _, _]
    assert select_move(board, O, X, Difficulty.HARD) == 6


def test_only_non_losing_reply_to_corner_opening_is_center():
    board = [X, _, _,
             _, _, _,
             _, _, _]
    assert select_move(board, O, X, Difficulty.HARD) == 4


def test_ties_go_to_lowest_index():
    # O at 7 or 8 both end in a tie, so the first empty cell is kept
    board = [X, X, O,
             O, O, X,
             X, _, _]
    assert select_move(board, O, X, Difficulty.HARD) == 7


def test_hard_is_deterministic():
    board = [X, _, _,
             _, O, _,
             _, _, X]
    moves = {
        select_move(board, O, X, Difficulty.HARD, rng=random.Random(seed))
        for seed in range(5)
    }
    assert len(moves) == 1


def test_board_is_restored_after_search():
    board = [X, _, _,
             _, O, _,
             _, _, X]
    before = list(board)
    select_move(board, O, X, Difficulty.HARD)
    assert board == before


def test_positions_are_counted():
    ai = AIPlayer(O, X)
    ai.get_best_move([X, _, _, _, O, _, _, _, X])
    assert ai.positions_evaluated > 0


@pytest.mark.parametrize("board, depth, expected", [
    ([O, O, O, X, X, _, X, _, _], 3, 7),     # AI won
    ([X, X, X, O, O, _, _, _, _], 2, -8),    # human won
    ([X, O, X, X, O, O, O, X, X], 5, 0),     # tie
])
def test_minimax_terminal_scores(board, depth, expected):
    assert minimax(board, depth, True, O, X) == expected


def test_minimax_discounts_win_by_depth():
    board = [O, O, O,
             X, X, _,
             _, _, X]
    ai = AIPlayer(O, X)
    assert ai.minimax(board, 1, False) == 9
    assert ai.minimax(board, 4, False) == 6


def test_minimax_minimizing_side_takes_its_win():
    # Human X to move with a win available: the minimizing side takes it
    board = [X, X, _,
             O, O, _,
             _, _, _]
    assert minimax(board, 0, False, O, X) == 1 - 10


def _outcomes_against_every_opponent(board, ai, to_move, cache):
    """All verdicts reachable when the human tries every line of play."""
    verdict = evaluate(board)
    if verdict.is_terminal:
        return {verdict}

    if to_move == ai.player:
        key = tuple(board)
        if key not in cache:
            cache[key] = ai.select_move(board)
        moves = [cache[key]]
    else:
        moves = _empty_cells(board)

    outcomes = set()
    for index in moves:
        board[index] = to_move
        outcomes |= _outcomes_against_every_opponent(board, ai, to_move.opposite(), cache)
        board[index] = None
    return outcomes


def test_hard_never_loses_playing_second():
    ai = AIPlayer(O, X, difficulty=Difficulty.HARD)
    outcomes = _outcomes_against_every_opponent([None] * 9, ai, X, {})
    assert Verdict.X_WINS not in outcomes
    assert Verdict.TIE in outcomes


def test_hard_never_loses_playing_first():
    ai = AIPlayer(X, O, difficulty=Difficulty.HARD)
    outcomes = _outcomes_against_every_opponent([None] * 9, ai, X, {})
    assert Verdict.O_WINS not in outcomes


@pytest.mark.parametrize("difficulty", [Difficulty.EASY, Difficulty.MEDIUM])
def test_random_tiers_play_legal_moves(difficulty):
    board = [X, _, O,
             _, X, _,
             _, _, _]
    empties = set(_empty_cells(board))
    ai = AIPlayer(O, X, difficulty=difficulty)

    seen = set()
    for _trial in range(200):
        move = ai.select_move(board)
        assert move in empties
        seen.add(move)

    assert len(seen) > 1


def test_easy_ignores_search():
    board = [O, O, _,
             X, X, _,
             _, _, X]
    # Slot 1 of the empty cells [2, 5, 6, 7] is 5, not the winning 2
    ai = AIPlayer(O, X, difficulty=Difficulty.EASY, rng=FixedRandom(coin=0.0, slot=1))
    assert ai.select_move(board) == 5


def test_medium_plays_hard_move_on_heads():
    board = [O, O, _,
             X, X, _,
             _, _, X]
    ai = AIPlayer(O, X, difficulty=Difficulty.MEDIUM, rng=FixedRandom(coin=0.1, slot=3))
    assert ai.select_move(board) == 2


def test_medium_plays_random_move_on_tails():
    board = [O, O, _,
             X, X, _,
             _, _, X]
    ai = AIPlayer(O, X, difficulty=Difficulty.MEDIUM, rng=FixedRandom(coin=0.9, slot=3))
    assert ai.select_move(board) == 7


def test_full_board_raises():
    board = [X, O, X,
             X, O, O,
             O, X, X]
    for difficulty in Difficulty:
        with pytest.raises(InvalidBoardError):
            select_move(board, O, X, difficulty)


def test_decided_board_raises():
    board = [X, X, X,
             O, O, _,
             _, _, _]
    with pytest.raises(InvalidBoardError):
        select_move(board, O, X, Difficulty.HARD)


def test_same_player_for_both_sides_raises():
    with pytest.raises(InvalidBoardError):
        select_move([None] * 9, O, O, Difficulty.HARD)


def test_invalid_board_error_is_value_error():
    assert issubclass(InvalidBoardError, ValueError)
