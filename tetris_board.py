"""Board helpers: collides, lock, clear_lines, drop_distance"""
from typing import List, Optional, Tuple
from tetris_piece import Piece

Board = List[List[Optional[str]]]

def empty_board(cols: int, rows: int) -> Board:
    if cols < 1 or rows < 1:
        raise ValueError(f"board must be at least 1x1, got {cols}x{rows}")
    return [[None] * cols for _ in range(rows)]

def copy_board(board: Board) -> Board:
    return [row[:] for row in board]

def collides(board: Board, shape, x: int, y: int) -> bool:
    rows, cols = len(board), len(board[0])
    for r,row in enumerate(shape):
        for c,v in enumerate(row):
            if not v: continue
            bx,by = x+c, y+r
            if bx<0 or bx>=cols or by>=rows: return True
            if by>=0 and board[by][bx] is not None: return True
    return False

def lock(board: Board, piece: Piece) -> Board:
    """Return a copy of board with the piece stamped in; cells off the board are dropped."""
    rows, cols = len(board), len(board[0])
    out = copy_board(board)
    for bx,by in piece.cells():
        if 0<=by<rows and 0<=bx<cols:
            out[by][bx] = piece.t
    return out

def clear_lines(board: Board) -> Tuple[Board, int]:
    cols = len(board[0])
    kept = [row[:] for row in board if not all(cell is not None for cell in row)]
    cleared = len(board) - len(kept)
    return [[None] * cols for _ in range(cleared)] + kept, cleared

def drop_distance(board: Board, piece: Piece) -> int:
    """How many rows the piece can fall before it would collide."""
    d = 0
    while not collides(board, piece.shape, piece.x, piece.y + d + 1):
        d += 1
    return d
