"""Attack and blocker masks computed square by square."""

from __future__ import annotations

from typing import Iterator

from wylath.definitions import (
    MASK64,
    NOT_A_FILE,
    NOT_AB_FILE,
    NOT_GH_FILE,
    NOT_H_FILE,
    Side,
    iter_squares,
)

_BISHOP_DIRECTIONS = ((1, 1), (1, -1), (-1, 1), (-1, -1))
_ROOK_DIRECTIONS = ((0, 1), (0, -1), (1, 0), (-1, 0))


def _check_square(square: int) -> None:
    if not 0 <= square < 64:
        raise ValueError(f"square out of range: {square}")


def _ray(square: int, d_rank: int, d_file: int, *, inner: bool = False) -> Iterator[int]:
    """Yield squares along a direction; with inner, stop before the board edge."""
    rank, file = divmod(square, 8)
    while True:
        rank += d_rank
        file += d_file
        if not (0 <= rank < 8 and 0 <= file < 8):
            return
        if inner and ((d_rank and rank in (0, 7)) or (d_file and file in (0, 7))):
            return
        yield rank * 8 + file


def pawn_attack_mask(square: int, side: int) -> int:
    """Squares a pawn of the given side on square attacks."""
    _check_square(square)
    side = Side(side)
    bitboard = 1 << square
    if side is Side.WHITE:
        attacks = ((bitboard << 7) & NOT_H_FILE) | ((bitboard << 9) & NOT_A_FILE)
    elif side is Side.BLACK:
        attacks = ((bitboard >> 7) & NOT_A_FILE) | ((bitboard >> 9) & NOT_H_FILE)
    else:
        raise ValueError("pawn attacks need WHITE or BLACK")
    return attacks & MASK64


def knight_attack_mask(square: int) -> int:
    """Squares a knight on square attacks."""
    _check_square(square)
    bitboard = 1 << square
    attacks = (
        ((bitboard << 17) & NOT_A_FILE)
        | ((bitboard << 15) & NOT_H_FILE)
        | ((bitboard << 10) & NOT_AB_FILE)
        | ((bitboard << 6) & NOT_GH_FILE)
        | ((bitboard >> 6) & NOT_AB_FILE)
        | ((bitboard >> 10) & NOT_GH_FILE)
        | ((bitboard >> 15) & NOT_A_FILE)
        | ((bitboard >> 17) & NOT_H_FILE)
    )
    return attacks & MASK64


def king_attack_mask(square: int) -> int:
    """Squares a king on square attacks."""
    _check_square(square)
    bitboard = 1 << square
    attacks = (
        ((bitboard >> 9) & NOT_H_FILE)
        | (bitboard >> 8)
        | ((bitboard >> 7) & NOT_A_FILE)
        | ((bitboard >> 1) & NOT_H_FILE)
        | ((bitboard << 1) & NOT_A_FILE)
        | ((bitboard << 7) & NOT_H_FILE)
        | (bitboard << 8)
        | ((bitboard << 9) & NOT_A_FILE)
    )
    return attacks & MASK64


def _blocker_mask(square: int, directions: tuple[tuple[int, int], ...]) -> int:
    _check_square(square)
    mask = 0
    for d_rank, d_file in directions:
        for target in _ray(square, d_rank, d_file, inner=True):
            mask |= 1 << target
    return mask


def _attack_mask(square: int, blockers: int, directions: tuple[tuple[int, int], ...]) -> int:
    _check_square(square)
    attacks = 0
    for d_rank, d_file in directions:
        for target in _ray(square, d_rank, d_file):
            bit = 1 << target
            attacks |= bit
            if blockers & bit:
                break
    return attacks


def bishop_blocker_mask(square: int) -> int:
    """Squares a bishop sees from square, without the board edges."""
    return _blocker_mask(square, _BISHOP_DIRECTIONS)


def rook_blocker_mask(square: int) -> int:
    """Squares a rook sees from square, without the ends of its lines."""
    return _blocker_mask(square, _ROOK_DIRECTIONS)


def blocker_bitboard(index: int, bits_in_mask: int, blocker_mask: int) -> int:
    """The index-th subset of blocker_mask, bit i of index choosing its i-th lowest square."""
    squares = list(iter_squares(blocker_mask))
    if bits_in_mask > len(squares):
        raise ValueError(
            f"mask has {len(squares)} bits, fewer than the {bits_in_mask} requested"
        )
    blockers = 0
    for bit, square in enumerate(squares[:bits_in_mask]):
        if index & (1 << bit):
            blockers |= 1 << square
    return blockers


def bishop_attack_mask(square: int, blockers: int) -> int:
    """Squares a bishop on square attacks, stopping at the first blocker on each diagonal."""
    return _attack_mask(square, blockers, _BISHOP_DIRECTIONS)


def rook_attack_mask(square: int, blockers: int) -> int:
    """Squares a rook on square attacks, stopping at the first blocker on each line."""
    return _attack_mask(square, blockers, _ROOK_DIRECTIONS)