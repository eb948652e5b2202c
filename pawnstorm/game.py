"""The main loop tying the window to the board."""

from __future__ import annotations

import sys

import pygame

from .board import Board
from .geometry import to_board
from .window import Window

_CLEAR_SCREEN = "\033[2J\033[H"


class Game:
    """Runs a board in a window until the window is closed."""

    def __init__(self, window: Window | None = None) -> None:
        self.window = window if window is not None else Window()
        self.board = Board(self.window.choose_promotion)
        self.board.update()

    def _show_report(self) -> None:
        print(_CLEAR_SCREEN + self.board.report(), end="", flush=True)

    def _display(self) -> None:
        self.window.clear()
        self.board.draw(self.window)
        self.window.display()

    def run(self) -> None:
        """Draw and handle events until the window closes."""
        self._show_report()
        while self.window.is_open():
            self._display()
            self.handle_event(self.window.wait_event())

    def handle_event(self, event: pygame.event.Event) -> None:
        """Pass one event to the board: a click plays, 'r' restarts."""
        if self.window.was_closed(event):
            return
        if event.type == pygame.MOUSEBUTTONDOWN:
            if self.board.game_over:
                return
            self.board.click(to_board(event.pos))
            self._show_report()
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_r:
            self.board.restart()
            self._show_report()


def main(argv: list[str] | None = None) -> int:
    """Open the window and play."""
    Game().run()
    return 0