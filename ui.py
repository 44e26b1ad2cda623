"""
GRIDz UI
A graphical interface for GRIDz using Tkinter.

Shows:
- Mode screen with difficulty selection
- The 3x3 board (click a cell to play)
- Score board, Restart and Home buttons
- A winner banner when a round ends
"""

import logging
import random
import tkinter as tk
from tkinter import ttk
from typing import Optional, List

from logic.config import GameConfig
from logic.game_state import GameMode, Difficulty, Verdict, Player, index_to_cell
from logic.session import GameSession

logger = logging.getLogger(__name__)

BG_COLOR = '#1a1a2e'
CELL_COLOR = '#16213e'
WIN_CELL_COLOR = '#065f46'
MARK_COLORS = {Player.X: '#00d4ff', Player.O: '#f87171'}

DIFFICULTY_COLORS = {
    Difficulty.EASY: "#4ade80",
    Difficulty.MEDIUM: "#fbbf24",
    Difficulty.HARD: "#f87171",
}


class GridzUI:
    """
    Main UI class for GRIDz.
    """

    def __init__(self, session: Optional[GameSession] = None):
        """Initialize the UI."""
        self.session = session if session is not None else GameSession()
        self.selected_difficulty = self.session.state.difficulty

        # Pending blitz reset, so Restart/Home can cancel it
        self._reset_job: Optional[str] = None

        self._create_ui()
        self._show_mode_screen()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title("GRIDz")
        self.root.configure(bg=BG_COLOR)
        self.root.minsize(480, 520)

        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=BG_COLOR)
        style.configure('TLabel', background=BG_COLOR, foreground='white', font=('Segoe UI', 11))
        style.configure('Title.TLabel', font=('Segoe UI', 28, 'bold'), foreground='#00d4ff')
        style.configure('Subtitle.TLabel', font=('Segoe UI', 14), foreground='#ffd700')
        style.configure('Banner.TLabel', font=('Segoe UI', 24, 'bold'), foreground='#00ff88')

        self.mode_frame = self._create_mode_screen()
        self.game_frame = self._create_game_screen()

        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _create_mode_screen(self) -> ttk.Frame:
        frame = ttk.Frame(self.root)

        ttk.Label(frame, text="GRIDz", style='Title.TLabel').pack(pady=(30, 5))
        ttk.Label(frame, text="Choose Mode & Difficulty", style='Subtitle.TLabel').pack(pady=(0, 20))

        diff_frame = ttk.Frame(frame)
        diff_frame.pack(pady=10)

        self.difficulty_buttons = {}
        for difficulty in Difficulty:
            btn = tk.Button(
                diff_frame,
                text=difficulty.name.capitalize(),
                font=('Segoe UI', 10, 'bold'),
                width=8,
                command=lambda d=difficulty: self._set_difficulty(d)
            )
            btn.pack(side=tk.LEFT, padx=5)
            self.difficulty_buttons[difficulty] = btn
        self._paint_difficulty_buttons()

        mode_frame = ttk.Frame(frame)
        mode_frame.pack(pady=20)

        modes = [
            ("Single vs AI", GameMode.SINGLE),
            ("Blitz vs AI", GameMode.BLITZ),
            ("VS Friend", GameMode.FRIEND),
        ]
        for text, mode in modes:
            tk.Button(
                mode_frame,
                text=text,
                font=('Segoe UI', 11, 'bold'),
                bg='#6366f1',
                fg='white',
                width=20,
                command=lambda m=mode: self._select_mode(m)
            ).pack(pady=5)

        return frame

    def _create_game_screen(self) -> ttk.Frame:
        frame = ttk.Frame(self.root)

        self.banner_label = ttk.Label(frame, text="", style='Banner.TLabel', cursor='hand2')
        self.banner_label.pack(pady=(10, 0))
        self.banner_label.bind("<Button-1>", lambda _event: self._on_banner_click())

        board_frame = ttk.Frame(frame)
        board_frame.pack(pady=10)

        self.board_cells: List[tk.Button] = []
        for index in range(GameConfig.NUM_CELLS):
            row, col = index_to_cell(index)
            cell = tk.Button(
                board_frame,
                text="",
                font=('Segoe UI', 24, 'bold'),
                width=4,
                height=2,
                bg=CELL_COLOR,
                fg='white',
                relief='ridge',
                borderwidth=2,
                command=lambda i=index: self._on_cell_click(i)
            )
            cell.grid(row=row, column=col, padx=2, pady=2)
            self.board_cells.append(cell)

        ttk.Separator(frame, orient='horizontal').pack(fill=tk.X, pady=10)

        self.score_label = ttk.Label(frame, text="")
        self.score_label.pack()

        control_frame = ttk.Frame(frame)
        control_frame.pack(pady=10)

        tk.Button(
            control_frame,
            text="Restart",
            font=('Segoe UI', 11, 'bold'),
            bg='#10b981',
            fg='white',
            width=12,
            command=self._restart
        ).pack(side=tk.LEFT, padx=5)

        tk.Button(
            control_frame,
            text="Home",
            font=('Segoe UI', 11, 'bold'),
            bg='#ef4444',
            fg='white',
            width=12,
            command=self._go_home
        ).pack(side=tk.LEFT, padx=5)

        return frame

    def _set_difficulty(self, difficulty: Difficulty):
        """Set the AI difficulty level."""
        self.selected_difficulty = difficulty
        self._paint_difficulty_buttons()
        logger.info("Difficulty set to: %s", difficulty.name)

    def _paint_difficulty_buttons(self):
        for difficulty, btn in self.difficulty_buttons.items():
            if difficulty == self.selected_difficulty:
                btn.configure(bg=DIFFICULTY_COLORS[difficulty], fg='black')
            else:
                btn.configure(bg='#2d3748', fg='white')

    def _select_mode(self, mode: GameMode):
        self.session.start(mode, self.selected_difficulty)
        self.mode_frame.pack_forget()
        self.game_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)
        self._refresh()

    def _show_mode_screen(self):
        self.game_frame.pack_forget()
        self.mode_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

    def _on_cell_click(self, index: int):
        result = self.session.handle_click(index)
        if not result.is_valid:
            return

        self._refresh()

        if self.session.state.should_auto_reset:
            self._cancel_reset()
            self._reset_job = self.root.after(GameConfig.BLITZ_RESET_DELAY_MS, self._on_blitz_timeout)

    def _on_blitz_timeout(self):
        self._reset_job = None
        self._restart()

    def _on_banner_click(self):
        # Blitz clears itself, the other modes wait for a click
        if self.session.state.is_game_over and self.session.state.mode != GameMode.BLITZ:
            self._restart()

    def _refresh(self):
        """Update board, banner and scores from the session."""
        state = self.session.state
        winning_line = self.session.winning_line or ()

        for index, cell in enumerate(self.board_cells):
            piece = state.board[index]
            bg = WIN_CELL_COLOR if index in winning_line else CELL_COLOR
            if piece is None:
                cell.configure(text="", bg=bg)
            else:
                cell.configure(text=piece.value, bg=bg, fg=MARK_COLORS[piece])

        if state.verdict == Verdict.TIE:
            self.banner_label.configure(text="TIE!")
        elif state.verdict.winner is not None:
            self.banner_label.configure(text=f"{state.verdict.winner.value} WINS!")
        else:
            self.banner_label.configure(text="")

        scores = state.scores
        self.score_label.configure(
            text=f"X Wins: {scores.x}    O Wins: {scores.o}    Ties: {scores.ties}"
        )

    def _cancel_reset(self):
        if self._reset_job is not None:
            self.root.after_cancel(self._reset_job)
            self._reset_job = None

    def _restart(self):
        """Reset the board."""
        self._cancel_reset()
        self.session.reset_board()
        self._refresh()

    def _go_home(self):
        self._cancel_reset()
        self.session.go_home()
        self._show_mode_screen()

    def _quit(self):
        """Quit the application."""
        logger.info("Quitting...")
        self._cancel_reset()
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="GRIDz UI")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed the AI's random moves"
    )

    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(message)s', datefmt='%H:%M:%S')

    ui = GridzUI(GameSession(rng=random.Random(args.seed)))
    ui.run()


if __name__ == "__main__":
    main()
