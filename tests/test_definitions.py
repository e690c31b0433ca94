import pytest

from wylath.definitions import (
    MASK64,
    NOT_A_FILE,
    NOT_H_FILE,
    PIECE_SYMBOLS,
    CastlingRights,
    Piece,
    Side,
    Square,
    count_bits,
    get_bit,
    iter_squares,
    lsb_index,
    pop_bit,
    set_bit,
)


def test_square_numbering_follows_board_layout():
    assert Square.from_algebraic("a1") == 0
    assert Square.from_algebraic("h1") == 7
    assert Square.from_algebraic("a8") == 56
    assert Square.from_algebraic("h8") == 63
    assert Square(64) is Square.NO_SQUARE


def test_square_rank_and_file():
    for square in list(Square)[:64]:
        parsed = Square.from_algebraic(square.algebraic)
        assert parsed.rank * 8 + parsed.file == square.value


def test_square_algebraic_round_trip():
    for square in list(Square)[:64]:
        assert Square.from_algebraic(square.algebraic) is square
    assert Square.E4.algebraic == "e4"


@pytest.mark.parametrize("name", ["", "e", "i4", "e9", "e44"])
def test_square_from_bad_name(name):
    with pytest.raises(ValueError):
        Square.from_algebraic(name)


def test_no_square_has_no_rank():
    with pytest.raises(ValueError):
        Square(64).rank


def test_piece_symbols_round_trip():
    for piece in Piece:
        assert Piece.from_symbol(piece.symbol) is piece
    assert "".join(piece.symbol for piece in Piece) == PIECE_SYMBOLS


def test_piece_sides():
    assert Piece.from_symbol("K").side is Side.WHITE
    assert Piece.from_symbol("p").side is Side.BLACK
    assert all(
        Piece.from_symbol(symbol).side is (Side.WHITE if symbol.isupper() else Side.BLACK)
        for symbol in PIECE_SYMBOLS
    )


@pytest.mark.parametrize("symbol", ["x", "", "PP", "1"])
def test_piece_from_bad_symbol(symbol):
    with pytest.raises(ValueError):
        Piece.from_symbol(symbol)


def test_castling_rights_are_distinct_single_bits():
    assert set_bit(0, 0) == CastlingRights.WK
    assert set_bit(0, 1) == CastlingRights.WQ
    assert set_bit(0, 2) == CastlingRights.BK
    assert set_bit(0, 3) == CastlingRights.BQ
    assert lsb_index(int(CastlingRights.BQ)) == 3
    combined = (
        int(CastlingRights.WK)
        | int(CastlingRights.WQ)
        | int(CastlingRights.BK)
        | int(CastlingRights.BQ)
    )
    assert count_bits(combined) == 4


def test_set_get_pop_round_trip():
    for square in range(64):
        board = set_bit(0, square)
        assert get_bit(board, square)
        assert count_bits(board) == 1
        assert pop_bit(board, square) == 0


def test_set_bit_is_idempotent():
    board = set_bit(set_bit(0, Square.E4), Square.E4)
    assert board == set_bit(0, Square.E4)


def test_pop_bit_leaves_other_bits():
    board = set_bit(set_bit(0, Square.A1), Square.H8)
    assert pop_bit(board, Square.A1) == set_bit(0, Square.H8)


def test_count_bits_full_board():
    assert count_bits(MASK64) == 64
    assert count_bits(0) == 0


def test_lsb_index():
    board = set_bit(set_bit(0, Square.C3), Square.F7)
    assert lsb_index(board) == Square.C3


def test_lsb_index_of_empty_raises():
    with pytest.raises(ValueError):
        lsb_index(0)


def test_iter_squares_in_ascending_order():
    squares = [Square.H8, Square.A1, Square.D4]
    board = 0
    for square in squares:
        board = set_bit(board, square)
    assert list(iter_squares(board)) == sorted(squares)
    assert len(list(iter_squares(NOT_A_FILE))) == count_bits(NOT_A_FILE)


def test_file_masks_exclude_their_files():
    for rank in range(8):
        assert not get_bit(NOT_A_FILE, rank * 8)
        assert get_bit(NOT_A_FILE, rank * 8 + 1)
        assert not get_bit(NOT_H_FILE, rank * 8 + 7)
        assert get_bit(NOT_H_FILE, rank * 8 + 6)