"""Precomputed attack tables for every piece, with magic lookup for sliders."""

from __future__ import annotations

import random
from typing import Sequence

from wylath.definitions import MASK64, Side, count_bits
from wylath.magic import BISHOP_BITS_SEEN, ROOK_BITS_SEEN, find_magic
from wylath.masks import (
    bishop_attack_mask,
    bishop_blocker_mask,
    king_attack_mask,
    knight_attack_mask,
    pawn_attack_mask,
    rook_attack_mask,
    rook_blocker_mask,
)

# Entries left as None are searched for when the tables are built.
BISHOP_MAGICS: tuple[int | None, ...] = (
    0x420c80100408202, None, 0x2008208102030000, 0x24081001000ca,
    0x488484041002110, 0x1a080c2c010018, 0x20a02a2400084, 0x440404400a01000,
    0x8931041080080, 0x200484108221, 0x80460802188000, 0x4000090401080092,
    0x4000011040a00004, 0x20011048040504, None, 0x102422a101a02,
    0x2040801082420404, 0x8104900210440100, 0x202101012820109, 0x248090401409004,
    0x44820404a00020, 0x40808110100100, 0x480a80100882000, 0x184820208a011010,
    None, 0x1050010104201, 0x4008480070008010, 0x8440040018410120,
    0x41010000104000, 0x4010004080241000, 0x1244082061040, 0x51060000288441,
    0x2215410a05820, 0x6000941020a0c220, 0xf2080100020201, 0x8010020081180080,
    0x940012060060080, 0x620008284290800, 0x8468100140900, 0x418400aa01802100,
    0x4000882440015002, 0x420220a11081, 0x401a26030000804, 0x2184208000084,
    0xa430820a0410c201, 0x640053805080180, 0x4a04010a44100601, 0x10014901001021,
    0x422411031300100, 0x824222110280000, 0x8800020a0b340300, 0xa8000441109088,
    0x404000861010208, 0x40112002042200, 0x2141006480b00a0, None,
    0x2010804070100803, 0x7a0011010090ac31, 0x18005100880400, 0x8010001081084805,
    0x400200021202020a, 0x4100342100a0221, 0x404408801010204, 0x6360041408104012,
)

ROOK_MAGICS: tuple[int | None, ...] = (
    0x8080008118604002, 0x4040100040002002, 0x80100018e00380, 0x100041002200900,
    0x200020008100420, 0x4100040002880100, 0x80008002000100, 0x8100014028820300,
    0x860802080004008, 0x112004081020024, 0x1042002010408200, 0x410010000b0020,
    0x20800800800400, 0x4808026000400, 0x820800100800200, 0xd43000a00a04900,
    0x4080818000400068, 0x20818040002005, 0xa0010018410020, 0x8010004008040041,
    0x28008008800400, 0x809010002080400, 0x1040240048311230, 0x88020000d28425,
    0x1480004440002010, 0x2020400440201000, 0x2000200080100080, None,
    0x4028002500181100, 0x8040040080800200, 0x800020400108108, 0x3041120004408c,
    0x80804008800020, None, 0x2000100080802000, 0x8300810804801000,
    0x8011001205000800, 0x810800601800400, 0x4301083214000150, 0x204026458e001401,
    0x40204000808000, 0x8001008040010020, 0x8410820820420010, None,
    0x804040008008080, 0x12000810020004, None, 0x430000a044020001,
    0x280009023410300, 0xe0100040002240, 0x200100401700, 0x2244100408008080,
    0x8000400801980, 0x2000810040200, 0x8010100228810400, 0x2000009044210200,
    0x4080008040102101, 0x40002080411d01, 0x2005524060000901, 0x502001008400422,
    0x489a000810200402, 0x1004400080a13, 0x4000011008020084, 0x26002114058042,
)

_SEARCH_SEED = 1


def _check_square(square: int) -> None:
    if not 0 <= square < 64:
        raise ValueError(f"square out of range: {square}")


def _subsets(mask: int):
    """Every subset of mask, starting with the empty set."""
    subset = 0
    while True:
        yield subset
        subset = (subset - mask) & mask
        if not subset:
            return


def _fill(subsets: list[tuple[int, int]], magic: int, bits: int) -> list[int] | None:
    """The magic-indexed table, or None if two different attack sets collide."""
    shift = 64 - bits
    table: list[int | None] = [None] * (1 << bits)
    for blockers, attacks in subsets:
        index = ((blockers * magic) & MASK64) >> shift
        stored = table[index]
        if stored is None:
            table[index] = attacks
        elif stored != attacks:
            return None
    return [0 if entry is None else entry for entry in table]


class _SliderTable:
    """Blocker masks, magics and attack lists for one sliding piece."""

    def __init__(self, bishop: bool, magics: Sequence[int | None] | None, rng: random.Random):
        strict = magics is not None
        if magics is None:
            magics = BISHOP_MAGICS if bishop else ROOK_MAGICS
        magics = list(magics)
        if len(magics) != 64:
            raise ValueError(f"expected 64 magic numbers, got {len(magics)}")

        blocker_mask = bishop_blocker_mask if bishop else rook_blocker_mask
        attack_mask = bishop_attack_mask if bishop else rook_attack_mask
        self.bits = BISHOP_BITS_SEEN if bishop else ROOK_BITS_SEEN
        self.masks: list[int] = []
        self.magics: list[int] = []
        self.tables: list[list[int]] = []

        for square in range(64):
            mask = blocker_mask(square)
            bits = self.bits[square]
            if count_bits(mask) > bits:
                raise ValueError(f"square {square} needs more index bits than allowed")
            subsets = [(blockers, attack_mask(square, blockers)) for blockers in _subsets(mask)]
            magic = magics[square]
            table = None if magic is None else _fill(subsets, magic & MASK64, bits)
            if table is None:
                if magic is not None and strict:
                    raise ValueError(f"magic number for square {square} causes collisions")
                magic = find_magic(square, bits, bishop, rng)
                table = _fill(subsets, magic, bits)
            self.masks.append(mask)
            self.magics.append(magic & MASK64)
            self.tables.append(table)

    def lookup(self, square: int, occupancy: int) -> int:
        _check_square(square)
        product = ((occupancy & self.masks[square]) * self.magics[square]) & MASK64
        return self.tables[square][product >> (64 - self.bits[square])]


class AttackTables:
    """Attack bitboards for every piece on every square."""

    def __init__(
        self,
        bishop_magics: Sequence[int | None] | None = None,
        rook_magics: Sequence[int | None] | None = None,
    ):
        """Build all tables; magics given explicitly must be collision-free."""
        self._pawn = tuple(
            tuple(pawn_attack_mask(square, side) for square in range(64))
            for side in (Side.WHITE, Side.BLACK)
        )
        self._knight = tuple(knight_attack_mask(square) for square in range(64))
        self._king = tuple(king_attack_mask(square) for square in range(64))
        rng = random.Random(_SEARCH_SEED)
        self._bishop = _SliderTable(True, bishop_magics, rng)
        self._rook = _SliderTable(False, rook_magics, rng)

    @property
    def bishop_magics(self) -> tuple[int, ...]:
        """The bishop magic numbers in use."""
        return tuple(self._bishop.magics)

    @property
    def rook_magics(self) -> tuple[int, ...]:
        """The rook magic numbers in use."""
        return tuple(self._rook.magics)

    def pawn_attacks(self, square: int, side: int) -> int:
        """Squares a pawn of side on square attacks."""
        _check_square(square)
        side = Side(side)
        if side is Side.BOTH:
            raise ValueError("pawn attacks need WHITE or BLACK")
        return self._pawn[side][square]

    def knight_attacks(self, square: int) -> int:
        """Squares a knight on square attacks."""
        _check_square(square)
        return self._knight[square]

    def king_attacks(self, square: int) -> int:
        """Squares a king on square attacks."""
        _check_square(square)
        return self._king[square]

    def bishop_attacks(self, square: int, occupancy: int) -> int:
        """Squares a bishop on square attacks given the board occupancy."""
        return self._bishop.lookup(square, occupancy)

    def rook_attacks(self, square: int, occupancy: int) -> int:
        """Squares a rook on square attacks given the board occupancy."""
        return self._rook.lookup(square, occupancy)

    def queen_attacks(self, square: int, occupancy: int) -> int:
        """Union of bishop and rook attacks from square."""
        return self.bishop_attacks(square, occupancy) | self.rook_attacks(square, occupancy)