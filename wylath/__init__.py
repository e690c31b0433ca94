"""Bitboard chess core: FEN board state, attack masks, magic numbers and attack tables."""

__version__ = "0.1.0"