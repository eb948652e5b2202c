"""The board: both teams, whose turn it is, the move list and the score."""

from __future__ import annotations

from itertools import product
from typing import Protocol

from .geometry import SQUARE_HEIGHT, SQUARE_WIDTH, Coordinates, TeamColour, to_position
from .kinds import Bishop, King, Knight, Pawn, Queen, Rook
from .piece import Piece, PromotionChooser, _turn_flags
from .piece_type import BoardState

_BACK_RANK = (Rook, Knight, Bishop, Queen, King, Bishop, Knight, Rook)

_DARK = (112, 112, 112, 255)
_LIGHT = (181, 181, 181, 255)
_HIGHLIGHT = (200, 0, 128, 100)


class Canvas(Protocol):
    def draw_rect(self, position: tuple[int, int], size: tuple[int, int],
                  colour: tuple[int, int, int, int]) -> None: ...

    def draw_image(self, path: str, position: tuple[int, int]) -> None: ...


class Board:
    """A game of chess between two players at one board.

    Call :meth:`update` once after construction so that the pieces take their
    places on the shared map.
    """

    def __init__(self, choose_promotion: PromotionChooser) -> None:
        self.state = BoardState()
        self.black: list[Piece] = []
        self.white: list[Piece] = []
        self.move_list: list[str] = []
        self.turn = TeamColour.WHITE
        self.game_over = False
        self._choose_promotion = choose_promotion
        self._initialize_teams()

    def _initialize_teams(self) -> None:
        self.black = self._new_team(TeamColour.BLACK)
        self.white = self._new_team(TeamColour.WHITE)

    def _new_team(self, colour: TeamColour) -> list[Piece]:
        back_rank = 7 * (1 - int(colour))
        pawn_rank = 6 - int(colour) * 5
        team = [Piece(kind(x, back_rank, colour, self.state))
                for x, kind in enumerate(_BACK_RANK)]
        team.extend(Piece(Pawn(x, pawn_rank, colour, self.state)) for x in range(8))
        return team

    def _team_of(self, colour: TeamColour) -> list[Piece]:
        return self.white if colour is TeamColour.WHITE else self.black

    def click(self, board_pos: Coordinates) -> None:
        """Handle a click on a square by the player whose turn it is."""
        if self.game_over:
            return
        _turn_flags(self.state).turn_over = False
        for piece in self._team_of(self.turn):
            piece.process_events(board_pos, self.move_list, self._choose_promotion)
        self.update()

    def update(self) -> None:
        """Settle the pieces, pass the turn after a move and detect mate."""
        movers = self._team_of(self.turn)
        waiting = self._team_of(self.turn.opponent)
        for piece in movers:
            piece.update(self.move_list)
        for piece in waiting:
            piece.update(self.move_list)

        if _turn_flags(self.state).turn_over:
            self.turn = self.turn.opponent
        elif self._has_no_moves(movers):
            self.game_over = True
            self.move_list.append(f"{self.turn.opponent.name} WINS!\n")

    def _has_no_moves(self, team: list[Piece]) -> bool:
        state = self.state
        return all(
            not piece.kind.possible_moves
            and state.checked
            and state.checked_colour == piece.kind.colour
            for piece in team
        )

    def restart(self) -> None:
        """Set up a fresh game."""
        flags = _turn_flags(self.state)
        flags.turn_over = False
        flags.any_selected = False
        self.state.reset()
        self.move_list.clear()
        self._initialize_teams()
        self.game_over = False
        self.turn = TeamColour.WHITE
        self.update()

    def score_line(self) -> str:
        """Material balance, e.g. ``Score: WHITE +3``."""
        black = sum(piece.value for piece in self.black)
        white = sum(piece.value for piece in self.white)
        if white > black:
            return f"Score: WHITE +{white - black}"
        if black > white:
            return f"Score: BLACK +{black - white}"
        return "Score: 0-0"

    def report(self) -> str:
        """Score, help line and the moves played so far."""
        lines = [self.score_line(), "Press 'r' to restart", "=====Moves=====",
                 *self.move_list]
        return "\n".join(lines) + "\n"

    def draw(self, canvas: Canvas) -> None:
        """Draw the squares, the pieces and the selected piece's moves."""
        size = (SQUARE_WIDTH, SQUARE_HEIGHT)
        for row, column in product(range(8), range(8)):
            colour = _DARK if (row + column) % 2 else _LIGHT
            canvas.draw_rect((column * SQUARE_WIDTH, row * SQUARE_HEIGHT), size, colour)

        for piece in (*self._team_of(self.turn), *self._team_of(self.turn.opponent)):
            if piece.hidden:
                continue
            canvas.draw_image(piece.kind.texture, piece.kind.position)
            if piece.selected:
                for move in piece.kind.possible_moves:
                    canvas.draw_rect(to_position(move), size, _HIGHLIGHT)