# wylath

The core of a bitboard chess engine: 64-bit bitboard helpers, attack masks,
magic-number search for sliding pieces, magic-indexed attack tables and a
board read from FEN and drawn as text.

## Modules

- `wylath.definitions` – the `Square`, `Piece`, `Side` and `CastlingRights`
  enumerations, the `START_POSITION` FEN, and bitboard helpers `set_bit`,
  `get_bit`, `pop_bit`, `count_bits`, `lsb_index` and `iter_squares`.
  `Square` has `rank`, `file`, `algebraic` and `Square.from_algebraic("e4")`;
  `Piece` has `symbol`, `side` and `Piece.from_symbol("q")`.
- `wylath.masks` – attack masks computed square by square:
  `pawn_attack_mask`, `knight_attack_mask`, `king_attack_mask`,
  `bishop_attack_mask`, `rook_attack_mask`, the blocker masks
  `bishop_blocker_mask` and `rook_blocker_mask`, and `blocker_bitboard`, which
  picks one subset of a blocker mask by index.
- `wylath.magic` – `random_u64`, `random_u64_fewbits`, `find_magic` and
  `find_all_magics`, plus the index-bit tables `BISHOP_BITS_SEEN` and
  `ROOK_BITS_SEEN`. `find_magic` raises `MagicNotFoundError` when no number is
  found within the allowed attempts.
- `wylath.attacks` – `AttackTables`, holding pawn, knight and king attacks for
  every square and magic-indexed bishop and rook tables, with
  `pawn_attacks`, `knight_attacks`, `king_attacks`, `bishop_attacks`,
  `rook_attacks` and `queen_attacks`. The built-in magic tables
  `BISHOP_MAGICS` and `ROOK_MAGICS` have a few missing entries; those are
  searched for (with a fixed seed) when the tables are built. Magic numbers
  passed to `AttackTables(bishop_magics=..., rook_magics=...)` must be
  collision-free, or `ValueError` is raised; `None` entries are searched for.
- `wylath.board` – `Board.from_fen`, `Board.occupancy`, `Board.piece_at`,
  `Board.render`, and `format_bitboard` for printing a bitboard as an 8×8
  grid followed by its decimal value. The halfmove clock read from FEN is
  capped at 100. Malformed FEN raises `ValueError`.

Squares are numbered from A1 = 0 to H8 = 63, rank by rank.

## Installation

```
pip install .
```

## Command line

Show a position: every piece bitboard, the board itself and the white, black
and combined occupancy bitboards. The starting position is used by default.

```
wylath
wylath --fen "r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1" --no-color
```

`--no-tables` skips building the attack tables before the board is printed.

Search for fresh bishop and rook magic numbers and print them as tables:

```
wylath-magic --seed 42 --pieces rook
```

`--pieces` is one of `bishop`, `rook` or `both` (the default).

## Library use

```python
from wylath.attacks import AttackTables
from wylath.board import Board, format_bitboard
from wylath.definitions import START_POSITION, Side, Square

board = Board.from_fen(START_POSITION)
print(board.render())

tables = AttackTables()
rook = tables.rook_attacks(Square.A1, board.occupancy(Side.BOTH))
print(format_bitboard(rook, color=False))
```

## What it does not do

There is no move generation, no legality checking, no search or evaluation,
and no protocol for talking to chess interfaces. The package provides the
board representation and attack tables such an engine would be built on.

## Tests

```
pip install .[test]
pytest
```