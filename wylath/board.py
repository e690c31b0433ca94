"""Board state parsed from FEN, with text rendering of boards and bitboards."""

from __future__ import annotations

from dataclasses import dataclass, field

from wylath.definitions import (
    CastlingRights,
    Piece,
    Side,
    Square,
    get_bit,
    set_bit,
)

RESET = "\x1b[0m"
BRIGHT_GREEN = "\x1b[92m"

_RULE = "----------------------\n"
_FILES_FOOTER = "\n     a b c d e f g h\n"
_CASTLING_LETTERS = {
    "K": CastlingRights.WK,
    "Q": CastlingRights.WQ,
    "k": CastlingRights.BK,
    "q": CastlingRights.BQ,
}
_SIDE_LETTERS = {"w": Side.WHITE, "b": Side.BLACK}
_FIFTY_MOVE_PLIES = 100


def _parse_placement(placement: str) -> list[int]:
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise ValueError(f"piece placement needs 8 ranks, got {len(ranks)}")
    pieces = [0] * len(Piece)
    for rank, row in zip(range(7, -1, -1), ranks):
        file = 0
        for char in row:
            if char in "12345678":
                file += int(char)
            else:
                piece = Piece.from_symbol(char)
                if file >= 8:
                    raise ValueError(f"rank {rank + 1} has more than 8 squares")
                pieces[piece] = set_bit(pieces[piece], rank * 8 + file)
                file += 1
        if file != 8:
            raise ValueError(f"rank {rank + 1} covers {file} squares, not 8")
    return pieces


def _parse_castling(text: str) -> CastlingRights:
    if text == "-":
        return CastlingRights.NONE
    rights = CastlingRights.NONE
    for char in text:
        if char not in _CASTLING_LETTERS:
            raise ValueError(f"unknown castling letter: {char!r}")
        rights |= _CASTLING_LETTERS[char]
    return rights


def _parse_counter(text: str, name: str) -> int:
    if not text.isdigit():
        raise ValueError(f"{name} is not a number: {text!r}")
    return int(text)


@dataclass
class Board:
    """Piece bitboards and game state of one position."""

    pieces: list[int] = field(default_factory=lambda: [0] * len(Piece))
    side: Side = Side.WHITE
    castling: CastlingRights = CastlingRights.NONE
    en_passant: Square = Square.NO_SQUARE
    halfmove_clock: int = 0
    full_moves: int = 1
    position_key: int = 0

    @classmethod
    def from_fen(cls, fen: str) -> "Board":
        """Build a board from a FEN string.

        The halfmove clock is capped at 100, where the fifty-move rule applies
        in any case.
        """
        fields = fen.split()
        if len(fields) < 4:
            raise ValueError("FEN needs at least placement, side, castling and en passant")
        if len(fields) > 6:
            raise ValueError("FEN has more than six fields")

        pieces = _parse_placement(fields[0])
        if fields[1] not in _SIDE_LETTERS:
            raise ValueError(f"unknown side to move: {fields[1]!r}")
        side = _SIDE_LETTERS[fields[1]]
        castling = _parse_castling(fields[2])
        en_passant = (
            Square.NO_SQUARE if fields[3] == "-" else Square.from_algebraic(fields[3])
        )
        halfmove = 0
        if len(fields) > 4:
            halfmove = min(_parse_counter(fields[4], "halfmove clock"), _FIFTY_MOVE_PLIES)
        full_moves = 1
        if len(fields) > 5:
            full_moves = _parse_counter(fields[5], "fullmove number")

        return cls(
            pieces=pieces,
            side=side,
            castling=castling,
            en_passant=en_passant,
            halfmove_clock=halfmove,
            full_moves=full_moves,
        )

    def occupancy(self, side: int) -> int:
        """Bitboard of the squares occupied by WHITE, BLACK or BOTH."""
        side = Side(side)
        white = 0
        black = 0
        for piece in Piece:
            if piece.side is Side.WHITE:
                white |= self.pieces[piece]
            else:
                black |= self.pieces[piece]
        if side is Side.WHITE:
            return white
        if side is Side.BLACK:
            return black
        return white | black

    def piece_at(self, square: int) -> Piece | None:
        """The piece on square, or None if it is empty."""
        if not 0 <= square < 64:
            raise ValueError(f"square out of range: {square}")
        for piece in Piece:
            if get_bit(self.pieces[piece], square):
                return piece
        return None

    def render(self) -> str:
        """The board as text, rank 8 at the top, '-' for empty squares."""
        lines = [_RULE]
        for rank in range(7, -1, -1):
            cells = []
            for file in range(8):
                piece = self.piece_at(rank * 8 + file)
                cells.append(f" {piece.symbol if piece is not None else '-'}")
            lines.append(f"  {rank + 1} {''.join(cells)}\n")
        lines.append(_FILES_FOOTER)
        lines.append(_RULE)
        return "".join(lines)


def format_bitboard(bitboard: int, color: bool = True) -> str:
    """A bitboard as an 8x8 grid of 1s and 0s, followed by its decimal value."""
    one = f" {BRIGHT_GREEN}1{RESET}" if color else " 1"
    zero = f"{RESET} 0" if color else " 0"
    lines = [_RULE]
    for rank in range(7, -1, -1):
        cells = "".join(
            one if get_bit(bitboard, rank * 8 + file) else zero for file in range(8)
        )
        lines.append(f"  {rank + 1} {cells}\n")
    lines.append(_FILES_FOOTER)
    lines.append(f"Unsigned Decimal Number Form: {bitboard}\n")
    lines.append(_RULE)
    return "".join(lines)