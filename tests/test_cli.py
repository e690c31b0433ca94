import pytest

from wylath.board import Board, format_bitboard
from wylath.cli import main
from wylath.definitions import START_POSITION, Piece, Side


def test_start_position_output(capsys):
    assert main(["--no-tables", "--no-color"]) == 0
    out = capsys.readouterr().out
    board = Board.from_fen(START_POSITION)
    assert board.render() in out
    assert out.count("Unsigned Decimal Number Form:") == len(Piece) + len(Side)


def test_output_order(capsys):
    main(["--no-tables", "--no-color"])
    out = capsys.readouterr().out
    board = Board.from_fen(START_POSITION)
    pieces_text = "".join(format_bitboard(board.pieces[p], False) for p in Piece)
    occupancy_text = "".join(format_bitboard(board.occupancy(s), False) for s in Side)
    assert out == pieces_text + board.render() + occupancy_text


def test_custom_fen(capsys):
    fen = "4k3/8/8/8/8/8/8/4K3 w - - 0 1"
    assert main(["--no-tables", "--fen", fen]) == 0
    out = capsys.readouterr().out
    assert Board.from_fen(fen).render() in out
    assert "\x1b[92m1\x1b[0m" in out


def test_plain_output_has_no_escapes(capsys):
    main(["--no-tables", "--no-color"])
    assert "\x1b" not in capsys.readouterr().out


def test_invalid_fen_exits(capsys):
    with pytest.raises(SystemExit) as info:
        main(["--no-tables", "--fen", "not a fen"])
    assert info.value.code == 2
    assert "invalid FEN" in capsys.readouterr().err