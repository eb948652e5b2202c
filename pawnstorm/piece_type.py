"""Shared board state and the behaviour common to every kind of piece."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar

from .geometry import Coordinates, TeamColour, to_position


class BoardState:
    """State shared by every piece of one board: occupancy and check status."""

    def __init__(self) -> None:
        self.position_info: dict[Coordinates, PieceType] = {}
        self.dangerous_pieces: list[Coordinates] = []
        self.checked = False
        self.checked_colour = TeamColour.BLACK

    def reset(self) -> None:
        """Forget all pieces and any check."""
        self.position_info.clear()
        self.dangerous_pieces.clear()
        self.checked = False
        self.checked_colour = TeamColour.BLACK

    def occupied(self, square: Coordinates) -> bool:
        return square in self.position_info

    def king_of(self, colour: TeamColour) -> Coordinates:
        """Square of the king of ``colour``; LookupError if there is none."""
        for square, piece in self.position_info.items():
            if piece.is_king and piece.colour == colour:
                return square
        raise LookupError(f"no {colour.name.lower()} king on the board")


class PieceType(ABC):
    """A piece's kind, square, candidate moves and check handling."""

    letter: ClassVar[str] = ""
    is_king: ClassVar[bool] = False

    def __init__(self, x: int, y: int, colour: TeamColour, value: int,
                 state: BoardState) -> None:
        self.coordinates = Coordinates(x, y)
        self.colour = TeamColour(colour)
        self.value = value
        self.state = state
        self.first_move = True
        self.possible_moves: list[Coordinates] = []
        self.position = to_position(self.coordinates)

    @property
    def name(self) -> str:
        """Two-letter name used in the move list."""
        return type(self).__name__[:2]

    @property
    def texture(self) -> str:
        prefix = "w" if self.colour is TeamColour.WHITE else "b"
        return f"Images/Pieces/{prefix}{self.letter}.png"

    def update_move_list(self, move_list: list[str]) -> None:
        """Record this piece's arrival on its square; black completes white's entry."""
        entry = self.name + self.coordinates.label
        if self.colour is TeamColour.WHITE:
            move_list.append(entry + ":")
        else:
            move_list[-1] += entry

    def check_the_king(self) -> None:
        """Mark the opposing king as checked if one of our moves reaches it."""
        state = self.state
        king_pos = state.king_of(self.colour.opponent)
        if (not state.checked or state.checked_colour != self.colour) \
                and king_pos in self.possible_moves:
            state.checked = True
            state.checked_colour = state.position_info[king_pos].colour
            state.dangerous_pieces.append(self.coordinates)

    def try_to_prevent_check(self) -> None:
        """Keep only moves that answer a check against our own king."""
        state = self.state
        if state.checked and state.checked_colour == self.colour and not self.is_king:
            if len(state.dangerous_pieces) > 1:
                self.possible_moves.clear()
            else:
                attacker = state.position_info[state.dangerous_pieces[0]]
                attacker.erase_dangerous_cells(
                    self.possible_moves, self.find_my_king_position(), False)

    def check_if_is_pinned(self, move_list: list[str]) -> None:
        """Drop moves that would expose our king.

        The piece is taken off the shared map while opponents recompute their
        moves; it is put back when the board next updates.
        """
        if not self.possible_moves:
            return
        king_pos = self.find_my_king_position()
        info = self.state.position_info
        info.pop(self.coordinates, None)

        for _, other in sorted(info.items(), key=lambda item: item[0]):
            if other.colour == self.colour:
                continue
            other.calculate_possible_moves(move_list)
            if king_pos != self.coordinates:
                if self.state.checked:
                    break
                if king_pos in other.possible_moves:
                    other.erase_dangerous_cells(self.possible_moves, king_pos, False)
                    return
            else:
                other.erase_dangerous_cells(self.possible_moves, self.coordinates, True)

        self.possible_moves[:] = [
            move for move in self.possible_moves
            if not (move in info and info[move].colour == self.colour)
        ]

    def find_my_king_position(self) -> Coordinates:
        return self.state.king_of(self.colour)

    @abstractmethod
    def calculate_possible_moves(self, move_list: list[str]) -> None:
        """Fill ``possible_moves`` with every candidate move, legal or not."""

    @abstractmethod
    def erase_dangerous_cells(self, possible_moves: list[Coordinates],
                              king_pos: Coordinates, is_king: bool) -> None:
        """Remove from ``possible_moves`` the squares this piece makes illegal."""

    @abstractmethod
    def _add_move(self, x: int, y: int) -> bool:
        """Consider square (x, y); return whether a line of moves may continue."""