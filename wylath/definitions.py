"""Board geometry, piece and side enumerations, and bitboard primitives."""

from __future__ import annotations

from enum import IntEnum, IntFlag
from typing import Iterator

NAME = "Wylath"
BRD_SQ_NUM = 64

START_POSITION = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

MASK64 = (1 << 64) - 1

NOT_A_FILE = 18374403900871474942
NOT_H_FILE = 9187201950435737471
NOT_AB_FILE = 18229723555195321596
NOT_GH_FILE = 4557430888798830399

PIECE_SYMBOLS = "PNBRQKpnbrqk"
FILE_NAMES = "abcdefgh"


class Square(IntEnum):
    """Board squares, numbered from a1 (0) to h8 (63)."""

    A1, B1, C1, D1, E1, F1, G1, H1 = range(0, 8)
    A2, B2, C2, D2, E2, F2, G2, H2 = range(8, 16)
    A3, B3, C3, D3, E3, F3, G3, H3 = range(16, 24)
    A4, B4, C4, D4, E4, F4, G4, H4 = range(24, 32)
    A5, B5, C5, D5, E5, F5, G5, H5 = range(32, 40)
    A6, B6, C6, D6, E6, F6, G6, H6 = range(40, 48)
    A7, B7, C7, D7, E7, F7, G7, H7 = range(48, 56)
    A8, B8, C8, D8, E8, F8, G8, H8 = range(56, 64)
    NO_SQUARE = 64

    @property
    def rank(self) -> int:
        """Zero-based rank index (0 is rank 1)."""
        if self is Square.NO_SQUARE:
            raise ValueError("NO_SQUARE has no rank")
        return self.value // 8

    @property
    def file(self) -> int:
        """Zero-based file index (0 is file a)."""
        if self is Square.NO_SQUARE:
            raise ValueError("NO_SQUARE has no file")
        return self.value % 8

    @property
    def algebraic(self) -> str:
        """The square's name in algebraic notation, e.g. 'e4'."""
        return f"{FILE_NAMES[self.file]}{self.rank + 1}"

    @classmethod
    def from_algebraic(cls, name: str) -> "Square":
        """Look up a square by its algebraic name, e.g. 'e4'."""
        if len(name) != 2 or name[0].lower() not in FILE_NAMES or name[1] not in "12345678":
            raise ValueError(f"not a square name: {name!r}")
        return cls((int(name[1]) - 1) * 8 + FILE_NAMES.index(name[0].lower()))


class Side(IntEnum):
    """Side to move; BOTH also indexes the combined occupancy."""

    WHITE = 0
    BLACK = 1
    BOTH = 2


class Piece(IntEnum):
    """Pieces, white first, in the order P N B R Q K p n b r q k."""

    WHITE_PAWN = 0
    WHITE_KNIGHT = 1
    WHITE_BISHOP = 2
    WHITE_ROOK = 3
    WHITE_QUEEN = 4
    WHITE_KING = 5
    BLACK_PAWN = 6
    BLACK_KNIGHT = 7
    BLACK_BISHOP = 8
    BLACK_ROOK = 9
    BLACK_QUEEN = 10
    BLACK_KING = 11

    @property
    def symbol(self) -> str:
        """FEN letter: uppercase for white, lowercase for black."""
        return PIECE_SYMBOLS[self.value]

    @property
    def side(self) -> Side:
        return Side.WHITE if self.value < 6 else Side.BLACK

    @classmethod
    def from_symbol(cls, symbol: str) -> "Piece":
        """Look up a piece by its FEN letter."""
        if len(symbol) != 1 or symbol not in PIECE_SYMBOLS:
            raise ValueError(f"not a piece letter: {symbol!r}")
        return cls(PIECE_SYMBOLS.index(symbol))


class CastlingRights(IntFlag):
    """Castling rights as bit flags."""

    NONE = 0
    WK = 1
    WQ = 2
    BK = 4
    BQ = 8


def set_bit(bitboard: int, square: int) -> int:
    """Return the bitboard with the bit for square set."""
    return (bitboard | (1 << square)) & MASK64


def get_bit(bitboard: int, square: int) -> bool:
    """Tell whether the bit for square is set."""
    return bool(bitboard & (1 << square))


def pop_bit(bitboard: int, square: int) -> int:
    """Return the bitboard with the bit for square cleared."""
    return bitboard & ~(1 << square) & MASK64


def count_bits(bitboard: int) -> int:
    """Number of set bits."""
    return (bitboard & MASK64).bit_count()


def lsb_index(bitboard: int) -> int:
    """Index of the least significant set bit."""
    bitboard &= MASK64
    if not bitboard:
        raise ValueError("empty bitboard has no least significant bit")
    return (bitboard & -bitboard).bit_length() - 1


def iter_squares(bitboard: int) -> Iterator[int]:
    """Yield the indices of the set bits, lowest first."""
    bitboard &= MASK64
    while bitboard:
        lowest = bitboard & -bitboard
        yield lowest.bit_length() - 1
        bitboard ^= lowest