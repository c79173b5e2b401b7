import pytest

from chessboard import BoardState, Color, Move, OutOfBoundsError, Piece, PieceKind, initial_position

STARTING_CODES = [
    ["BR", "BN", "BB", "BQ", "BK", "BB", "BN", "BR"],
    ["BP", "BP", "BP", "BP", "BP", "BP", "BP", "BP"],
    ["", "", "", "", "", "", "", ""],
    ["", "", "", "", "", "", "", ""],
    ["", "", "", "", "", "", "", ""],
    ["", "", "", "", "", "", "", ""],
    ["WP", "WP", "WP", "WP", "WP", "WP", "WP", "WP"],
    ["WR", "WN", "WB", "WQ", "WK", "WB", "WN", "WR"],
]


def test_initial_position_layout():
    board = initial_position()
    assert board.to_codes() == STARTING_CODES
    assert board.side_to_move == Color.WHITE
    assert board == BoardState.from_codes(STARTING_CODES)


def test_occupant_in_range_never_fails():
    board = initial_position()
    for r in range(8):
        for c in range(8):
            board.occupant(r, c)


@pytest.mark.parametrize("row,col", [(-1, 0), (0, -1), (8, 0), (0, 8), (10, 10)])
def test_occupant_out_of_range_raises(row, col):
    board = initial_position()
    with pytest.raises(OutOfBoundsError):
        board.occupant(row, col)
    # Also usable as a plain IndexError
    with pytest.raises(IndexError):
        board.occupant(row, col)


def test_apply_move_returns_captured_and_clears_source():
    board = initial_position()
    captured = board.apply_move((7, 3), (1, 3))
    assert captured == Piece(Color.BLACK, PieceKind.PAWN)
    assert board.occupant(7, 3) is None
    assert board.occupant(1, 3) == Piece(Color.WHITE, PieceKind.QUEEN)


def test_apply_move_does_not_validate():
    board = initial_position()
    # A rook jumping through its own pawns is still carried out
    assert board.apply_move((7, 0), (2, 0)) is None
    assert board.occupant(2, 0) == Piece(Color.WHITE, PieceKind.ROOK)


def test_reverse_restores_capture():
    board = initial_position()
    before = board.copy()
    captured = board.apply_move((7, 3), (1, 3))
    board.reverse(Move((7, 3), (1, 3), captured), captured)
    assert board == before


def test_toggle_turn():
    board = initial_position()
    board.toggle_turn()
    assert board.side_to_move == Color.BLACK
    board.toggle_turn()
    assert board.side_to_move == Color.WHITE


def test_copy_is_independent():
    board = initial_position()
    clone = board.copy()
    clone.apply_move((6, 0), (5, 0))
    assert board.occupant(6, 0) == Piece(Color.WHITE, PieceKind.PAWN)
    assert board != clone


def test_find_king():
    board = initial_position()
    assert board.find_king(Color.WHITE) == (7, 4)
    assert board.find_king(Color.BLACK) == (0, 4)
    board.set_occupant(0, 4, None)
    assert board.find_king(Color.BLACK) is None


def test_pieces_filter_by_color():
    board = initial_position()
    white = list(board.pieces(Color.WHITE))
    assert len(white) == 16
    assert all(p.color == Color.WHITE for _, p in white)
    assert len(list(board.pieces())) == 32


def test_from_codes_rejects_bad_input():
    with pytest.raises(ValueError):
        BoardState.from_codes([[""] * 8] * 7)
    rows = [[""] * 8 for _ in range(8)]
    rows[3][3] = "XX"
    with pytest.raises(ValueError):
        BoardState.from_codes(rows)


def test_piece_codes():
    assert Piece.from_code("BN") == Piece(Color.BLACK, PieceKind.KNIGHT)
    assert str(Piece(Color.WHITE, PieceKind.KING)) == "WK"
    with pytest.raises(ValueError):
        Piece.from_code("W")


def test_render_shows_codes():
    text = initial_position().render(show_coordinates=False)
    lines = text.splitlines()
    assert len(lines) == 8
    assert lines[0].split() == STARTING_CODES[0]
    assert "♔" in initial_position().render(use_unicode=True)
