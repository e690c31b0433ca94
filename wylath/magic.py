"""Search for magic multipliers that index slider attack tables."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Sequence

from wylath.definitions import MASK64, count_bits
from wylath.masks import (
    bishop_attack_mask,
    bishop_blocker_mask,
    blocker_bitboard,
    rook_attack_mask,
    rook_blocker_mask,
)

BISHOP_BITS_SEEN = (
    6, 5, 5, 5, 5, 5, 5, 6,
    5, 5, 5, 5, 5, 5, 5, 5,
    5, 5, 7, 7, 7, 7, 5, 5,
    5, 5, 7, 9, 9, 7, 5, 5,
    5, 5, 7, 9, 9, 7, 5, 5,
    5, 5, 7, 7, 7, 7, 5, 5,
    5, 5, 5, 5, 5, 5, 5, 5,
    6, 5, 5, 5, 5, 5, 5, 6,
)

ROOK_BITS_SEEN = (
    12, 11, 11, 11, 11, 11, 11, 12,
    11, 10, 10, 10, 10, 10, 10, 11,
    11, 10, 10, 10, 10, 10, 10, 11,
    11, 10, 10, 10, 10, 10, 10, 11,
    11, 10, 10, 10, 10, 10, 10, 11,
    11, 10, 10, 10, 10, 10, 10, 11,
    11, 10, 10, 10, 10, 10, 10, 11,
    12, 11, 11, 11, 11, 11, 11, 12,
)

DEFAULT_ATTEMPTS = 100_000_000

_TOP_BYTE = 0xFF00000000000000
_default_rng = random.Random()


class MagicNotFoundError(RuntimeError):
    """No magic number was found within the allowed number of attempts."""


def random_u64(rng: random.Random | None = None) -> int:
    """A random 64-bit number assembled from four 16-bit pieces."""
    rng = _default_rng if rng is None else rng
    value = 0
    for shift in (0, 16, 32, 48):
        value |= rng.getrandbits(16) << shift
    return value


def random_u64_fewbits(rng: random.Random | None = None) -> int:
    """A random 64-bit number with few bits set."""
    return random_u64(rng) & random_u64(rng) & random_u64(rng)


def find_magic(
    square: int,
    bits_seen: int,
    bishop: bool,
    rng: random.Random | None = None,
    attempts: int = DEFAULT_ATTEMPTS,
) -> int:
    """Find a multiplier mapping every blocker set of square to a collision-free index."""
    if not 0 <= square < 64:
        raise ValueError(f"square out of range: {square}")
    if not 0 < bits_seen <= 64:
        raise ValueError(f"bits_seen out of range: {bits_seen}")

    blocker_mask = bishop_blocker_mask(square) if bishop else rook_blocker_mask(square)
    attack_mask = bishop_attack_mask if bishop else rook_attack_mask
    bits_in_mask = count_bits(blocker_mask)
    blocker_sets = [
        blocker_bitboard(index, bits_in_mask, blocker_mask)
        for index in range(1 << bits_in_mask)
    ]
    subsets = [(blockers, attack_mask(square, blockers)) for blockers in blocker_sets]
    shift = 64 - bits_seen

    for _ in range(attempts):
        magic = random_u64_fewbits(rng)
        if count_bits((blocker_mask * magic) & _TOP_BYTE) < 6:
            continue
        used: dict[int, int] = {}
        for blockers, attacks in subsets:
            index = ((blockers * magic) & MASK64) >> shift
            if used.setdefault(index, attacks) != attacks:
                break
        else:
            return magic

    piece = "bishop" if bishop else "rook"
    raise MagicNotFoundError(f"no {piece} magic number found for square {square}")


def find_all_magics(bishop: bool, rng: random.Random | None = None) -> list[int]:
    """Magic numbers for all 64 squares, for bishops or rooks."""
    bits_table = BISHOP_BITS_SEEN if bishop else ROOK_BITS_SEEN
    return [find_magic(square, bits_table[square], bishop, rng) for square in range(64)]


def main(argv: Sequence[str] | None = None) -> int:
    """Search for magic numbers and print them as tables."""
    parser = argparse.ArgumentParser(
        prog="wylath-magic", description="Search for slider magic numbers."
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for the random generator")
    parser.add_argument(
        "--pieces",
        choices=("bishop", "rook", "both"),
        default="both",
        help="which tables to search for",
    )
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)

    jobs = []
    if args.pieces in ("bishop", "both"):
        jobs.append(("BISHOP_MAGICS", True))
    if args.pieces in ("rook", "both"):
        jobs.append(("ROOK_MAGICS", False))

    for name, bishop in jobs:
        try:
            magics = find_all_magics(bishop, rng)
        except MagicNotFoundError as exc:
            print(exc, file=sys.stderr)
            return 1
        print(f"{name} = (")
        for magic in magics:
            print(f"    0x{magic:x},")
        print(")")
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())