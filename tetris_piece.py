"""Piece model: canonical shapes, colors, spawn and clockwise rotation"""
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

PIECE_TYPES = ("I", "J", "L", "O", "S", "T", "Z")

SHAPES: Dict[str, List[List[int]]] = {
    "I": [[0,0,0,0],[1,1,1,1],[0,0,0,0],[0,0,0,0]],
    "J": [[1,0,0],[1,1,1],[0,0,0]],
    "L": [[0,0,1],[1,1,1],[0,0,0]],
    "O": [[1,1],[1,1]],
    "S": [[0,1,1],[1,1,0],[0,0,0]],
    "T": [[0,1,0],[1,1,1],[0,0,0]],
    "Z": [[1,1,0],[0,1,1],[0,0,0]],
}

COLORS: Dict[str, Tuple[int,int,int]] = {
    "I": (0,240,240),
    "J": (0,0,240),
    "L": (240,160,0),
    "O": (240,240,0),
    "S": (0,240,0),
    "T": (160,0,240),
    "Z": (240,0,0),
}

def rotate_cw(m): return [list(r) for r in zip(*m[::-1])]

def copy_shape(m): return [r[:] for r in m]


@dataclass
class Piece:
    t: str
    shape: List[List[int]]
    x: int
    y: int

    @staticmethod
    def create(t: str, x: int, y: int) -> "Piece":
        if t not in SHAPES:
            raise ValueError(f"unknown piece type {t!r}")
        return Piece(t, copy_shape(SHAPES[t]), x, y)

    def copy(self) -> "Piece":
        return Piece(self.t, copy_shape(self.shape), self.x, self.y)

    def cells(self):
        """Absolute (x, y) of every occupied cell, including rows above the board."""
        return [(self.x + c, self.y + r)
                for r, row in enumerate(self.shape)
                for c, v in enumerate(row) if v]


def spawn_x(cols: int) -> int:
    return max(0, (cols - 4) // 2)

# spawn

def spawn(board, t: str) -> Optional[Piece]:
    """Place a fresh piece of type t at the spawn anchor, or None if it does not fit."""
    from tetris_board import collides
    cols = len(board[0]) if board else 0
    piece = Piece.create(t, spawn_x(cols), 0)
    if collides(board, piece.shape, piece.x, piece.y):
        return None
    return piece
