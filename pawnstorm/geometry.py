"""Board dimensions, team colours and square coordinates."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from functools import total_ordering

WINDOW_HEIGHT = 128 * 8
WINDOW_WIDTH = 128 * 8
BOARD_HEIGHT = 128 * 8
BOARD_WIDTH = 128 * 8
SQUARE_WIDTH = WINDOW_WIDTH // 8
SQUARE_HEIGHT = WINDOW_HEIGHT // 8


class TeamColour(IntEnum):
    """The two sides; white moves up the board (towards higher ranks)."""

    BLACK = 0
    WHITE = 1

    @property
    def forward(self) -> int:
        """Rank step that points towards the opponent's side."""
        return 2 * int(self) - 1

    @property
    def opponent(self) -> TeamColour:
        return TeamColour.WHITE if self is TeamColour.BLACK else TeamColour.BLACK


@total_ordering
@dataclass(frozen=True)
class Coordinates:
    """A square on the board: file ``x`` and rank ``y``, both counted from 0."""

    x: int
    y: int

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Coordinates):
            return NotImplemented
        return (self.y, self.x) < (other.y, other.x)

    @property
    def on_board(self) -> bool:
        return 0 <= self.x <= 7 and 0 <= self.y <= 7

    @property
    def label(self) -> str:
        """Square name such as ``E2``."""
        return chr(ord("A") + self.x) + chr(ord("1") + self.y)


def _trunc_div(value: int, divisor: int) -> int:
    return int(value / divisor)


def to_position(coordinates: Coordinates) -> tuple[int, int]:
    """Pixel position of the top-left corner of a square."""
    return coordinates.x * SQUARE_WIDTH, (7 - coordinates.y) * SQUARE_HEIGHT


def to_board(pos: tuple[int, int]) -> Coordinates:
    """Square that contains the pixel position ``pos``."""
    px, py = pos
    return Coordinates(_trunc_div(px, SQUARE_WIDTH), 7 - _trunc_div(py, SQUARE_HEIGHT))