"""
Main entry point for GRIDz.

Launches the Tkinter UI by default. With --no-ui the game is played in the
console: type a cell number (0-8) to play, 'r' to restart the round and
'q' to quit.

Run this script to play TicTacToe against the computer or a friend!
"""

import argparse
import logging
import random
from typing import Callable, Optional

from logic.config import GameConfig
from logic.game_state import GameMode, Difficulty
from logic.session import GameSession

logger = logging.getLogger(__name__)


class ConsoleGame:
    """
    Console front end for GRIDz.

    Game flow:
    1. Print the board and ask the current player for a cell
    2. Pass the cell to the session (the AI replies in AI modes)
    3. When a round ends, show the result and the score
    4. Blitz starts the next round straight away, the other modes ask first
    """

    def __init__(
        self,
        session: GameSession,
        mode: GameMode,
        difficulty: Optional[Difficulty] = None,
        input_func: Optional[Callable[[str], str]] = None
    ):
        self.session = session
        self.input = input_func if input_func is not None else input
        self.session.start(mode, difficulty)

    def start(self):
        """Play rounds until the player quits."""
        state = self.session.state
        print("\n" + "="*60)
        print("   GRIDz")
        print("="*60)
        print(f"   Mode: {state.mode.value}")
        if state.mode.uses_ai:
            print(f"   Difficulty: {state.difficulty.name.capitalize()}")
            print(f"   You play {state.human_player.value}, computer plays {state.ai_player.value}")
        print("="*60)

        try:
            self._game_loop()
        except (KeyboardInterrupt, EOFError):
            print("\n\nGame interrupted by user.")
        finally:
            self._show_scores()
            print("Goodbye!")

    def _game_loop(self):
        state = self.session.state
        while True:
            print("\n" + state.format_board())

            if state.is_game_over:
                self._show_round_result()
                if state.should_auto_reset:
                    self.session.reset_board()
                    continue
                answer = self.input("\nPress Enter for a new round, 'q' to quit: ").strip().lower()
                if answer == "q":
                    return
                self.session.reset_board()
                continue

            answer = self.input(
                f"\n{state.current_player.value} to play. Cell (0-8), 'r' restart, 'q' quit: "
            ).strip().lower()

            if answer == "q":
                return
            if answer == "r":
                print("Resetting round...")
                self.session.reset_board()
                continue

            try:
                index = int(answer)
            except ValueError:
                print(f"Not a cell: {answer!r}")
                continue

            result = self.session.handle_click(index)
            if not result.is_valid:
                print(result.error_message)
            elif state.last_ai_move is not None:
                print(f"Computer plays {state.last_ai_move}")

    def _show_round_result(self):
        winner = self.session.state.verdict.winner
        if winner is None:
            print("\nTIE!")
        else:
            print(f"\n{winner.value} WINS!")

    def _show_scores(self):
        scores = self.session.state.scores
        print(f"\nX Wins: {scores.x}  O Wins: {scores.o}  Ties: {scores.ties}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="GRIDz TicTacToe")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in GameMode],
        default=GameMode.SINGLE.value,
        help="Game mode for console play (default: single)"
    )
    parser.add_argument(
        "--difficulty",
        choices=[difficulty.name.lower() for difficulty in Difficulty],
        default=GameConfig.DEFAULT_DIFFICULTY.lower(),
        help="AI difficulty (default: medium)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed the AI's random moves"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log AI search details"
    )
    return parser


def main(argv=None):
    """Main entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    session = GameSession(rng=random.Random(args.seed))
    difficulty = Difficulty[args.difficulty.upper()]

    # Launch UI by default
    if not args.no_ui:
        from ui import GridzUI
        logger.info("Launching GRIDz UI")
        session.set_difficulty(difficulty)
        ui = GridzUI(session)
        ui.run()
        return

    game = ConsoleGame(session, GameMode(args.mode), difficulty)
    game.start()


if __name__ == "__main__":
    main()
