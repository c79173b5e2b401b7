from chessboard import Color, Move, MoveHistory, Piece, PieceKind


def test_pop_on_empty_is_none():
    history = MoveHistory()
    assert history.pop() is None
    assert len(history) == 0
    assert not history


def test_stack_discipline():
    history = MoveHistory()
    first = Move((6, 4), (5, 4))
    second = Move((1, 4), (2, 4))
    history.push(first)
    history.push(second)
    assert len(history) == 2
    assert history.peek() == second
    assert history.pop() == second
    assert history.pop() == first
    assert history.pop() is None
    assert len(history) == 0


def test_iteration_is_oldest_first_and_clear():
    history = MoveHistory()
    moves = [Move((6, c), (5, c)) for c in range(3)]
    for m in moves:
        history.push(m)
    assert list(history) == moves
    history.clear()
    assert len(history) == 0


def test_move_records_capture():
    pawn = Piece(Color.BLACK, PieceKind.PAWN)
    move = Move((7, 3), (1, 3), captured=pawn, piece=Piece(Color.WHITE, PieceKind.QUEEN))
    assert move.is_capture
    assert str(move) == "WQ 7,3x1,3"
    assert not Move((6, 4), (5, 4)).is_capture
