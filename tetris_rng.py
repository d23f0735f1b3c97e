"""Uniform next-piece randomizer"""
import random
from typing import Optional

from tetris_piece import PIECE_TYPES

class PieceRandomizer:
    """Independent uniform draws over the seven types; repeats are allowed.

    Pass a seed for a reproducible sequence, None for OS entropy.
    """
    PIECES = PIECE_TYPES

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def next_piece(self) -> str:
        return self._rng.choice(self.PIECES)
