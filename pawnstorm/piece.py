"""A piece on the board: selection, moving and the special moves."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable
from weakref import WeakKeyDictionary

from .geometry import (
    SQUARE_HEIGHT,
    SQUARE_WIDTH,
    Coordinates,
    TeamColour,
    to_board,
    to_position,
)
from .kinds import King, Pawn
from .piece_type import BoardState, PieceType

PromotionChooser = Callable[[TeamColour], "type[PieceType]"]

# King's destination file, rook's starting file, rook's destination file.
_CASTLINGS = ((2, 0, 3), (6, 7, 5))


@dataclass
class _TurnFlags:
    """Turn progress shared by all pieces of one board."""

    turn_over: bool = False
    any_selected: bool = False


_FLAGS: WeakKeyDictionary[BoardState, _TurnFlags] = WeakKeyDictionary()


def _turn_flags(state: BoardState) -> _TurnFlags:
    flags = _FLAGS.get(state)
    if flags is None:
        flags = _FLAGS[state] = _TurnFlags()
    return flags


class Piece:
    """A piece as the player handles it: it can be selected, moved, captured.

    ``choose_promotion`` callables receive the pawn's colour and return the
    class of the piece it becomes (Rook, Knight, Bishop or Queen).
    """

    def __init__(self, kind: PieceType) -> None:
        self.kind = kind
        self.selected = False
        self.hidden = False

    @property
    def _flags(self) -> _TurnFlags:
        return _turn_flags(self.kind.state)

    @property
    def value(self) -> int:
        """Material value; a captured piece counts for nothing."""
        return 0 if self.hidden else self.kind.value

    def process_events(self, board_pos: Coordinates, move_list: list[str],
                       choose_promotion: PromotionChooser) -> None:
        """React to a click on ``board_pos``: select, move or deselect."""
        if self.hidden:
            return
        kind = self.kind
        flags = self._flags

        if kind.coordinates == board_pos and not flags.any_selected:
            if not kind.state.checked and not kind.possible_moves:
                kind.calculate_possible_moves(move_list)
            kind.check_if_is_pinned(move_list)
            if kind.possible_moves:
                self.selected = True
                flags.any_selected = True
        elif self.selected and flags.any_selected:
            if board_pos in kind.possible_moves:
                self._move_to(board_pos, move_list, choose_promotion)
            elif kind.coordinates == board_pos:
                self.selected = False
                flags.any_selected = False

    def _move_to(self, target: Coordinates, move_list: list[str],
                 choose_promotion: PromotionChooser) -> None:
        state = self.kind.state
        info = state.position_info
        flags = self._flags

        state.dangerous_pieces.clear()
        state.checked = False

        self.kind.position = to_position(target)
        self._check_for_en_passant(self.kind.coordinates, target)
        info.pop(self.kind.coordinates, None)
        self.kind.coordinates = to_board(self.kind.position)

        self._check_for_promotion(choose_promotion)

        kind = self.kind
        info.pop(kind.coordinates, None)
        info[kind.coordinates] = kind

        self._check_for_castling()

        self.selected = False
        flags.any_selected = False
        flags.turn_over = True
        kind.first_move = False
        kind.update_move_list(move_list)

    def update(self, move_list: list[str]) -> None:
        """Re-register on the shared map; recompute moves once a turn is over."""
        if self.hidden:
            return
        kind = self.kind
        kind.coordinates = to_board(kind.position)
        occupant = kind.state.position_info.setdefault(kind.coordinates, kind)
        if occupant.colour != kind.colour:
            # Our square was taken by the opponent: the piece is captured.
            self.hidden = True
            kind.possible_moves.clear()
            return

        if self._flags.turn_over:
            kind.calculate_possible_moves(move_list)
            kind.check_the_king()
            kind.try_to_prevent_check()

    def _check_for_en_passant(self, current: Coordinates, target: Coordinates) -> None:
        info = self.kind.state.position_info
        if isinstance(self.kind, Pawn) and target not in info and target.x != current.x:
            victim_square = Coordinates(target.x, current.y)
            # Moving the victim onto our square makes it hide itself on update.
            info[victim_square].position = self.kind.position
            del info[victim_square]

    def _check_for_promotion(self, choose_promotion: PromotionChooser) -> None:
        kind = self.kind
        if not (isinstance(kind, Pawn)
                and kind.coordinates.y == 7 * int(kind.colour)
                and self.selected):
            return
        chosen = choose_promotion(kind.colour)
        kind.possible_moves.clear()
        promoted = chosen(kind.coordinates.x, kind.coordinates.y, kind.colour, kind.state)
        promoted.position = kind.position
        self.kind = promoted

    def _check_for_castling(self) -> None:
        kind = self.kind
        if not (isinstance(kind, King) and kind.first_move):
            return
        y = kind.coordinates.y
        info = kind.state.position_info
        for king_file, rook_file, rook_target in _CASTLINGS:
            if kind.coordinates == Coordinates(king_file, y):
                target = Coordinates(rook_target, y)
                info.setdefault(target, info[Coordinates(rook_file, y)])
                del info[Coordinates(rook_file, y)]
                info[target].position = (SQUARE_WIDTH * rook_target,
                                         SQUARE_HEIGHT * (7 - y))
                break