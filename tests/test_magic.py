import random

import pytest

from wylath.definitions import MASK64, count_bits
from wylath.magic import (
    BISHOP_BITS_SEEN,
    ROOK_BITS_SEEN,
    MagicNotFoundError,
    find_magic,
    main,
    random_u64,
    random_u64_fewbits,
)
from wylath.masks import (
    bishop_attack_mask,
    bishop_blocker_mask,
    blocker_bitboard,
    rook_attack_mask,
    rook_blocker_mask,
)


def _collision_free(square, bits, bishop, magic):
    mask = bishop_blocker_mask(square) if bishop else rook_blocker_mask(square)
    attack = bishop_attack_mask if bishop else rook_attack_mask
    n = count_bits(mask)
    seen = {}
    for i in range(1 << n):
        blockers = blocker_bitboard(i, n, mask)
        attacks = attack(square, blockers)
        index = ((blockers * magic) & MASK64) >> (64 - bits)
        if seen.setdefault(index, attacks) != attacks:
            return False
    return True


def test_random_u64_in_range_and_reproducible():
    first = [random_u64(random.Random(7)) for _ in range(3)]
    rng_a = random.Random(7)
    rng_b = random.Random(7)
    seq_a = [random_u64(rng_a) for _ in range(50)]
    seq_b = [random_u64(rng_b) for _ in range(50)]
    assert seq_a == seq_b
    assert all(0 <= value <= MASK64 for value in seq_a)
    assert first[0] == first[1] == first[2] == seq_a[0]


def test_random_u64_reaches_high_bits():
    rng = random.Random(3)
    values = [random_u64(rng) for _ in range(100)]
    assert any(value >= 1 << 48 for value in values)


def test_fewbits_is_sparser():
    rng = random.Random(5)
    dense = sum(count_bits(random_u64(rng)) for _ in range(200))
    sparse = sum(count_bits(random_u64_fewbits(rng)) for _ in range(200))
    assert sparse < dense
    assert all(0 <= random_u64_fewbits(rng) <= MASK64 for _ in range(20))


def test_bits_seen_tables_match_masks():
    for square in range(64):
        assert BISHOP_BITS_SEEN[square] == count_bits(bishop_blocker_mask(square))
        assert ROOK_BITS_SEEN[square] == count_bits(rook_blocker_mask(square))


def test_find_magic_bishop_corner_is_valid():
    magic = find_magic(0, BISHOP_BITS_SEEN[0], True, random.Random(3))
    assert _collision_free(0, BISHOP_BITS_SEEN[0], True, magic)
    top = (bishop_blocker_mask(0) * magic) & 0xFF00000000000000
    assert count_bits(top) >= 6


def test_find_magic_rook_is_valid():
    magic = find_magic(27, ROOK_BITS_SEEN[27], False, random.Random(9))
    assert 0 < magic <= MASK64
    top = (rook_blocker_mask(27) * magic) & 0xFF00000000000000
    assert count_bits(top) >= 6
    assert _collision_free(27, ROOK_BITS_SEEN[27], False, magic) is True


def test_find_magic_is_reproducible():
    a = find_magic(18, BISHOP_BITS_SEEN[18], True, random.Random(42))
    b = find_magic(18, BISHOP_BITS_SEEN[18], True, random.Random(42))
    assert a == b


def test_find_magic_without_attempts_fails():
    with pytest.raises(MagicNotFoundError):
        find_magic(0, BISHOP_BITS_SEEN[0], True, random.Random(1), attempts=0)


def test_find_magic_with_too_few_bits_fails():
    with pytest.raises(MagicNotFoundError):
        find_magic(0, 1, True, random.Random(1), attempts=200)


@pytest.mark.parametrize("bits", [0, 65])
def test_find_magic_rejects_bad_bits(bits):
    with pytest.raises(ValueError):
        find_magic(0, bits, True, random.Random(1), attempts=10)


def test_find_magic_rejects_bad_square():
    with pytest.raises(ValueError):
        find_magic(64, 6, True, random.Random(1), attempts=10)


def test_main_prints_valid_bishop_table(capsys):
    assert main(["--pieces", "bishop", "--seed", "11"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "BISHOP_MAGICS = ("
    entries = lines[1:65]
    assert lines[65] == ")"
    assert all(line.startswith("    0x") and line.endswith(",") for line in entries)
    magics = [int(line.strip().rstrip(","), 16) for line in entries]
    for square, magic in enumerate(magics):
        assert _collision_free(square, BISHOP_BITS_SEEN[square], True, magic)