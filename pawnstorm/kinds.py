"""The six kinds of chess piece and how each one moves."""

from __future__ import annotations

from .geometry import Coordinates, TeamColour
from .piece_type import BoardState, PieceType

_DIAGONALS = ((-1, 1), (1, 1), (-1, -1), (1, -1))
_ORTHOGONALS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def _on_rook_line(move: Coordinates, own: Coordinates, king: Coordinates) -> bool:
    """Whether ``move`` lies on the file or rank between ``own`` (inclusive) and ``king``."""
    on_file = (move.x == king.x and own.x == king.x
               and (own.y <= move.y < king.y or king.y < move.y <= own.y))
    on_rank = (move.y == king.y and own.y == king.y
               and (own.x <= move.x < king.x or king.x < move.x <= own.x))
    return on_file or on_rank


def _on_bishop_line(move: Coordinates, own: Coordinates, king: Coordinates) -> bool:
    """Whether ``move`` lies on the diagonal between ``own`` (inclusive) and ``king``."""
    same_anti = (own.x + own.y == move.x + move.y
                 and king.x + king.y == move.x + move.y)
    same_main = (own.x - own.y == move.x - move.y
                 and king.x - king.y == move.x - move.y)
    between = own.x <= move.x < king.x or king.x < move.x <= own.x
    return (same_anti or same_main) and between


class _SlidingPiece(PieceType):
    """A piece that moves along lines until it meets another piece."""

    def _walk(self, directions: tuple[tuple[int, int], ...]) -> None:
        for dx, dy in directions:
            square = Coordinates(self.coordinates.x + dx, self.coordinates.y + dy)
            while square.on_board and self._add_move(square.x, square.y):
                square = Coordinates(square.x + dx, square.y + dy)

    def _add_move(self, x: int, y: int) -> bool:
        # Squares holding any piece are included, so a king cannot take a
        # protected piece.
        square = Coordinates(x, y)
        self.possible_moves.append(square)
        return not self.state.occupied(square)

    def _erase_own_reach(self, possible_moves: list[Coordinates]) -> None:
        reach = self.possible_moves
        possible_moves[:] = [move for move in possible_moves if move not in reach]


class Pawn(PieceType):
    """Moves forward, captures diagonally, and may take en passant."""

    letter = "P"

    def __init__(self, x: int, y: int, colour: TeamColour, state: BoardState) -> None:
        super().__init__(x, y, colour, 1, state)

    def calculate_possible_moves(self, move_list: list[str]) -> None:
        self.possible_moves.clear()
        here = self.coordinates
        forward = self.colour.forward
        ahead = here.y + forward

        if 0 <= ahead <= 7:
            if not self.state.occupied(Coordinates(here.x, ahead)):
                self.possible_moves.append(Coordinates(here.x, ahead))
                double = Coordinates(here.x, ahead + forward)
                if self.first_move and not self.state.occupied(double):
                    self.possible_moves.append(double)
            self._add_move(here.x - 1, ahead)
            self._add_move(here.x + 1, ahead)

        if ahead in (2, 5):
            self._en_passant(here.x + 1, ahead, move_list)
            self._en_passant(here.x - 1, ahead, move_list)

    def _en_passant(self, x: int, ahead: int, move_list: list[str]) -> None:
        info = self.state.position_info
        neighbour = info.get(Coordinates(x, self.coordinates.y))
        if (not move_list or Coordinates(x, ahead) in info
                or neighbour is None or neighbour.colour == self.colour):
            return
        start = int(self.colour) * 5
        last_move = move_list[-1][start:start + 4]
        if last_move == "Pa" + Coordinates(x, self.coordinates.y).label:
            self.possible_moves.append(Coordinates(x, ahead))

    def erase_dangerous_cells(self, possible_moves: list[Coordinates],
                              king_pos: Coordinates, is_king: bool) -> None:
        here = self.coordinates
        attack_rank = here.y + self.colour.forward

        def dangerous(move: Coordinates) -> bool:
            if is_king:
                return abs(move.x - here.x) == 1 and move.y == attack_rank
            return move != here

        possible_moves[:] = [move for move in possible_moves if not dangerous(move)]

    def _add_move(self, x: int, y: int) -> bool:
        other = self.state.position_info.get(Coordinates(x, y))
        if other is not None and other.colour != self.colour:
            self.possible_moves.append(Coordinates(x, y))
        return True


class Rook(_SlidingPiece):
    """Slides along files and ranks."""

    letter = "R"

    def __init__(self, x: int, y: int, colour: TeamColour, state: BoardState) -> None:
        super().__init__(x, y, colour, 5, state)

    def calculate_possible_moves(self, move_list: list[str]) -> None:
        self.possible_moves.clear()
        self._walk(_ORTHOGONALS)

    def erase_dangerous_cells(self, possible_moves: list[Coordinates],
                              king_pos: Coordinates, is_king: bool) -> None:
        here = self.coordinates
        if not is_king:
            possible_moves[:] = [move for move in possible_moves
                                 if _on_rook_line(move, here, king_pos)]
        elif abs(king_pos.x - here.x) <= 1 or abs(king_pos.y - here.y) <= 1:
            self._erase_own_reach(possible_moves)


class Knight(PieceType):
    """Jumps in an L shape."""

    letter = "N"

    _JUMPS = ((-2, 1), (-2, -1), (-1, 2), (-1, -2),
              (1, 2), (1, -2), (2, 1), (2, -1))

    def __init__(self, x: int, y: int, colour: TeamColour, state: BoardState) -> None:
        super().__init__(x, y, colour, 3, state)

    def calculate_possible_moves(self, move_list: list[str]) -> None:
        self.possible_moves.clear()
        for dx, dy in self._JUMPS:
            self._add_move(self.coordinates.x + dx, self.coordinates.y + dy)

    def erase_dangerous_cells(self, possible_moves: list[Coordinates],
                              king_pos: Coordinates, is_king: bool) -> None:
        here = self.coordinates
        if abs(king_pos.x - here.x) > 3 or abs(king_pos.y - here.y) > 3:
            return
        if is_king:
            reach = self.possible_moves
            possible_moves[:] = [move for move in possible_moves if move not in reach]
        else:
            possible_moves[:] = [move for move in possible_moves if move == here]

    def _add_move(self, x: int, y: int) -> bool:
        square = Coordinates(x, y)
        if square.on_board:
            self.possible_moves.append(square)
        return True


class Bishop(_SlidingPiece):
    """Slides along diagonals."""

    letter = "B"

    def __init__(self, x: int, y: int, colour: TeamColour, state: BoardState) -> None:
        super().__init__(x, y, colour, 3, state)

    def calculate_possible_moves(self, move_list: list[str]) -> None:
        self.possible_moves.clear()
        self._walk(_DIAGONALS)

    def erase_dangerous_cells(self, possible_moves: list[Coordinates],
                              king_pos: Coordinates, is_king: bool) -> None:
        if not is_king:
            here = self.coordinates
            possible_moves[:] = [move for move in possible_moves
                                 if _on_bishop_line(move, here, king_pos)]
        else:
            self._erase_own_reach(possible_moves)


class Queen(_SlidingPiece):
    """Slides along diagonals, files and ranks."""

    letter = "Q"

    def __init__(self, x: int, y: int, colour: TeamColour, state: BoardState) -> None:
        super().__init__(x, y, colour, 9, state)

    def calculate_possible_moves(self, move_list: list[str]) -> None:
        self.possible_moves.clear()
        self._walk(_DIAGONALS)
        self._walk(_ORTHOGONALS)

    def erase_dangerous_cells(self, possible_moves: list[Coordinates],
                              king_pos: Coordinates, is_king: bool) -> None:
        if is_king:
            self._erase_own_reach(possible_moves)
            return
        here = self.coordinates
        on_line = (_on_rook_line if king_pos.x == here.x or king_pos.y == here.y
                   else _on_bishop_line)
        possible_moves[:] = [move for move in possible_moves
                             if on_line(move, here, king_pos)]


class King(PieceType):
    """Steps one square in any direction and may castle."""

    letter = "K"
    is_king = True

    def __init__(self, x: int, y: int, colour: TeamColour, state: BoardState) -> None:
        super().__init__(x, y, colour, 0, state)

    @property
    def texture(self) -> str:
        if self.colour is TeamColour.WHITE:
            return "Images/Pieces/wK.png"
        return "Images/Pieces/bk.png"

    def calculate_possible_moves(self, move_list: list[str]) -> None:
        self.possible_moves.clear()
        here = self.coordinates
        forward = self.colour.forward
        for dx in (-1, 0, 1):
            self._add_move(here.x + dx, here.y + forward)
            if dx:
                self._add_move(here.x + dx, here.y)
            self._add_move(here.x + dx, here.y - forward)

        state = self.state
        if self.first_move and (not state.checked or state.checked_colour != self.colour):
            self._add_castling()

    def _add_castling(self) -> None:
        info = self.state.position_info
        y = self.coordinates.y

        def passage_is_safe(files: tuple[int, ...]) -> bool:
            guarded = {Coordinates(x, y) for x in files}
            return not any(
                other.colour != self.colour and guarded.intersection(other.possible_moves)
                for other in info.values()
            )

        def can_castle(rook_file: int, empty_files: tuple[int, ...],
                       guarded_files: tuple[int, ...]) -> bool:
            rook = info.get(Coordinates(rook_file, y))
            return (rook is not None and rook.first_move
                    and not any(Coordinates(x, y) in info for x in empty_files)
                    and passage_is_safe(guarded_files))

        if can_castle(0, (1, 2, 3), (1, 3)):
            self.possible_moves.append(Coordinates(2, y))
        if can_castle(7, (5, 6), (5,)):
            self.possible_moves.append(Coordinates(6, y))

    def erase_dangerous_cells(self, possible_moves: list[Coordinates],
                              king_pos: Coordinates, is_king: bool) -> None:
        here = self.coordinates
        if abs(king_pos.x - here.x) <= 2 and abs(king_pos.y - here.y) <= 2:
            possible_moves[:] = [
                move for move in possible_moves
                if not (abs(move.x - here.x) <= 1 and abs(move.y - here.y) <= 1)
            ]

    def _add_move(self, x: int, y: int) -> bool:
        square = Coordinates(x, y)
        other = self.state.position_info.get(square)
        if (other is None or other.colour != self.colour) and square.on_board:
            self.possible_moves.append(square)
        return True