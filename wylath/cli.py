"""Command that sets up a position and prints its bitboards and board."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from wylath.attacks import AttackTables
from wylath.board import Board, format_bitboard
from wylath.definitions import NAME, START_POSITION, Piece, Side


def main(argv: Sequence[str] | None = None) -> int:
    """Parse a position, print each piece bitboard, the board and the occupancies."""
    parser = argparse.ArgumentParser(prog=NAME.lower(), description=f"{NAME} chess engine.")
    parser.add_argument("--fen", default=START_POSITION, help="position to set up")
    parser.add_argument("--no-color", action="store_true", help="print without colours")
    parser.add_argument(
        "--no-tables", action="store_true", help="skip building the attack tables"
    )
    args = parser.parse_args(argv)

    try:
        board = Board.from_fen(args.fen)
    except ValueError as exc:
        parser.error(f"invalid FEN: {exc}")

    color = not args.no_color
    for piece in Piece:
        print(format_bitboard(board.pieces[piece], color), end="")

    if not args.no_tables:
        AttackTables()

    print(board.render(), end="")

    for side in Side:
        print(format_bitboard(board.occupancy(side), color), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())