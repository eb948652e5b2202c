import pytest

from pawnstorm.geometry import Coordinates, TeamColour
from pawnstorm.kinds import Bishop, King, Knight, Pawn, Queen, Rook
from pawnstorm.piece_type import BoardState

WHITE = TeamColour.WHITE
BLACK = TeamColour.BLACK


def place(state, cls, x, y, colour):
    piece = cls(x, y, colour, state)
    state.position_info[Coordinates(x, y)] = piece
    return piece


@pytest.fixture
def state():
    return BoardState()


def test_pawn_first_move_has_one_and_two_steps(state):
    pawn = place(state, Pawn, 4, 1, WHITE)
    pawn.calculate_possible_moves([])
    assert set(pawn.possible_moves) == {Coordinates(4, 2), Coordinates(4, 3)}


def test_pawn_blocked_straight_ahead_has_no_moves(state):
    pawn = place(state, Pawn, 4, 1, WHITE)
    place(state, Knight, 4, 2, BLACK)
    pawn.calculate_possible_moves([])
    assert pawn.possible_moves == []


def test_pawn_captures_only_opponents(state):
    pawn = place(state, Pawn, 4, 1, WHITE)
    place(state, Knight, 5, 2, BLACK)
    place(state, Knight, 3, 2, WHITE)
    pawn.calculate_possible_moves([])
    assert Coordinates(5, 2) in pawn.possible_moves
    assert Coordinates(3, 2) not in pawn.possible_moves


def test_pawn_after_first_move_takes_single_step(state):
    pawn = place(state, Pawn, 4, 2, WHITE)
    pawn.first_move = False
    pawn.calculate_possible_moves([])
    assert pawn.possible_moves == [Coordinates(4, 3)]


def test_black_pawn_moves_down(state):
    pawn = place(state, Pawn, 2, 6, BLACK)
    pawn.calculate_possible_moves([])
    assert all(move.y < 6 for move in pawn.possible_moves)
    assert Coordinates(2, 5) in pawn.possible_moves


def test_en_passant_after_double_step(state):
    black = place(state, Pawn, 3, 3, BLACK)
    black.first_move = False
    place(state, Pawn, 4, 3, WHITE)
    black.calculate_possible_moves(["PaE4:"])
    assert Coordinates(4, 2) in black.possible_moves


def test_no_en_passant_when_last_move_was_elsewhere(state):
    black = place(state, Pawn, 3, 3, BLACK)
    black.first_move = False
    place(state, Pawn, 4, 3, WHITE)
    black.calculate_possible_moves(["KnF3:"])
    assert Coordinates(4, 2) not in black.possible_moves


def test_no_en_passant_with_empty_move_list(state):
    black = place(state, Pawn, 3, 3, BLACK)
    black.first_move = False
    place(state, Pawn, 4, 3, WHITE)
    black.calculate_possible_moves([])
    assert Coordinates(4, 2) not in black.possible_moves


def test_pawn_erase_for_non_king_keeps_only_pawn_square(state):
    pawn = place(state, Pawn, 3, 3, BLACK)
    moves = [Coordinates(3, 3), Coordinates(5, 5), Coordinates(2, 2)]
    pawn.erase_dangerous_cells(moves, Coordinates(4, 2), False)
    assert moves == [Coordinates(3, 3)]


def test_pawn_erase_for_king_removes_attacked_squares(state):
    pawn = place(state, Pawn, 3, 3, BLACK)
    moves = [Coordinates(2, 2), Coordinates(4, 2), Coordinates(3, 2)]
    pawn.erase_dangerous_cells(moves, Coordinates(3, 1), True)
    assert moves == [Coordinates(3, 2)]


def test_rook_on_empty_board_covers_rank_and_file(state):
    rook = place(state, Rook, 3, 3, WHITE)
    rook.calculate_possible_moves([])
    here = rook.coordinates
    assert len(rook.possible_moves) == 14
    assert all((m.x == here.x) != (m.y == here.y) for m in rook.possible_moves)
    assert len(set(rook.possible_moves)) == len(rook.possible_moves)


def test_rook_stops_at_any_piece_including_its_square(state):
    rook = place(state, Rook, 0, 0, WHITE)
    place(state, Knight, 0, 3, WHITE)
    rook.calculate_possible_moves([])
    assert Coordinates(0, 3) in rook.possible_moves
    assert Coordinates(0, 4) not in rook.possible_moves


def test_rook_erase_keeps_line_to_king(state):
    rook = place(state, Rook, 4, 7, BLACK)
    king_pos = Coordinates(4, 0)
    moves = [Coordinates(4, 3), Coordinates(3, 3), Coordinates(4, 7), Coordinates(4, 0)]
    rook.erase_dangerous_cells(moves, king_pos, False)
    assert moves == [Coordinates(4, 3), Coordinates(4, 7)]


def test_rook_erase_for_nearby_king_removes_reach(state):
    rook = place(state, Rook, 0, 1, BLACK)
    rook.calculate_possible_moves([])
    moves = [Coordinates(3, 1), Coordinates(3, 0)]
    rook.erase_dangerous_cells(moves, Coordinates(4, 0), True)
    assert moves == [Coordinates(3, 0)]


def test_knight_in_corner(state):
    knight = place(state, Knight, 0, 0, WHITE)
    knight.calculate_possible_moves([])
    assert set(knight.possible_moves) == {Coordinates(1, 2), Coordinates(2, 1)}


def test_knight_moves_are_l_shaped_and_on_board(state):
    knight = place(state, Knight, 4, 4, WHITE)
    knight.calculate_possible_moves([])
    assert len(knight.possible_moves) == 8
    for move in knight.possible_moves:
        assert move.on_board
        assert {abs(move.x - 4), abs(move.y - 4)} == {1, 2}


def test_knight_erase_non_king_keeps_own_square(state):
    knight = place(state, Knight, 2, 2, BLACK)
    moves = [Coordinates(2, 2), Coordinates(1, 1)]
    knight.erase_dangerous_cells(moves, Coordinates(3, 0), False)
    assert moves == [Coordinates(2, 2)]


def test_knight_erase_ignores_far_king(state):
    knight = place(state, Knight, 0, 7, BLACK)
    moves = [Coordinates(5, 0), Coordinates(4, 1)]
    knight.erase_dangerous_cells(moves, Coordinates(4, 0), True)
    assert moves == [Coordinates(5, 0), Coordinates(4, 1)]


def test_bishop_moves_are_diagonal(state):
    bishop = place(state, Bishop, 2, 0, WHITE)
    bishop.calculate_possible_moves([])
    assert bishop.possible_moves
    assert all(abs(m.x - 2) == abs(m.y) for m in bishop.possible_moves)
    assert all(m.on_board for m in bishop.possible_moves)


def test_bishop_erase_keeps_diagonal_to_king(state):
    bishop = place(state, Bishop, 7, 3, BLACK)
    king_pos = Coordinates(4, 0)
    moves = [Coordinates(5, 1), Coordinates(7, 3), Coordinates(5, 2), Coordinates(4, 0)]
    bishop.erase_dangerous_cells(moves, king_pos, False)
    assert moves == [Coordinates(5, 1), Coordinates(7, 3)]


def test_queen_is_rook_plus_bishop(state):
    queen = place(state, Queen, 3, 3, WHITE)
    rook = Rook(3, 3, WHITE, state)
    bishop = Bishop(3, 3, WHITE, state)
    place(state, Pawn, 5, 5, BLACK)
    place(state, Pawn, 3, 1, WHITE)
    for piece in (queen, rook, bishop):
        piece.calculate_possible_moves([])
    assert set(queen.possible_moves) == set(rook.possible_moves) | set(bishop.possible_moves)


def test_queen_erase_uses_line_matching_king(state):
    queen = place(state, Queen, 4, 7, BLACK)
    moves = [Coordinates(4, 5), Coordinates(2, 5)]
    queen.erase_dangerous_cells(moves, Coordinates(4, 0), False)
    assert moves == [Coordinates(4, 5)]


def test_king_skips_own_pieces_but_not_opponents(state):
    king = place(state, King, 4, 4, WHITE)
    place(state, Pawn, 4, 5, WHITE)
    place(state, Pawn, 5, 5, BLACK)
    king.first_move = False
    king.calculate_possible_moves([])
    assert Coordinates(4, 5) not in king.possible_moves
    assert Coordinates(5, 5) in king.possible_moves
    assert all(max(abs(m.x - 4), abs(m.y - 4)) == 1 for m in king.possible_moves)


def test_king_castles_both_sides(state):
    king = place(state, King, 4, 0, WHITE)
    place(state, Rook, 0, 0, WHITE)
    place(state, Rook, 7, 0, WHITE)
    king.calculate_possible_moves([])
    assert Coordinates(2, 0) in king.possible_moves
    assert Coordinates(6, 0) in king.possible_moves


def test_king_cannot_castle_through_attacked_square(state):
    king = place(state, King, 4, 0, WHITE)
    place(state, Rook, 0, 0, WHITE)
    place(state, Rook, 7, 0, WHITE)
    attacker = place(state, Rook, 5, 7, BLACK)
    attacker.calculate_possible_moves([])
    king.calculate_possible_moves([])
    assert Coordinates(6, 0) not in king.possible_moves
    assert Coordinates(2, 0) in king.possible_moves


def test_king_cannot_castle_when_checked(state):
    king = place(state, King, 4, 0, WHITE)
    place(state, Rook, 0, 0, WHITE)
    state.checked = True
    state.checked_colour = WHITE
    king.calculate_possible_moves([])
    assert Coordinates(2, 0) not in king.possible_moves


def test_king_cannot_castle_with_moved_rook(state):
    king = place(state, King, 4, 0, WHITE)
    rook = place(state, Rook, 7, 0, WHITE)
    rook.first_move = False
    king.calculate_possible_moves([])
    assert Coordinates(6, 0) not in king.possible_moves


def test_king_erase_keeps_kings_apart(state):
    black_king = place(state, King, 4, 2, BLACK)
    moves = [Coordinates(4, 1), Coordinates(3, 0)]
    black_king.erase_dangerous_cells(moves, Coordinates(4, 0), True)
    assert moves == [Coordinates(3, 0)]


def test_values_and_textures():
    state = BoardState()
    assert Queen(0, 0, WHITE, state).value == 9
    assert Pawn(0, 0, WHITE, state).value == 1
    assert King(4, 7, BLACK, state).texture == "Images/Pieces/bk.png"
    assert Knight(1, 0, WHITE, state).texture == "Images/Pieces/wN.png"


def test_move_list_uses_two_letter_kind_names(state):
    knight = place(state, Knight, 5, 2, WHITE)
    moves = []
    knight.update_move_list(moves)
    assert moves[0].startswith("Kn")
    assert moves[0].endswith(knight.coordinates.label + ":")