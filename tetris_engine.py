"""
Game-state engine
=================

Owns the authoritative game state and exposes the command set the
front-end drives:

  • move(dx, dy)   : shift the active piece; a blocked downward move locks it
  • rotate()       : clockwise rotation with a small wall-kick search
  • hard_drop()    : fall to the lowest legal row and lock
  • toggle_pause() : suspend gravity and commands
  • reset_game()   : discard everything and start over
  • tick(dt_ms)    : gravity accumulator, at most one row per call

Nothing here raises for gameplay situations. Blocked moves are ignored,
commands while paused or over are ignored, and a spawn that does not fit
sets the game-over flag.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Optional

from tetris_board import Board, empty_board, copy_board, collides, lock, clear_lines, drop_distance
from tetris_piece import Piece, rotate_cw, spawn
from tetris_rng import PieceRandomizer

log = logging.getLogger("tetris.engine")

# -------------------------------------------------------------
# SCORING & GRAVITY
# -------------------------------------------------------------
LINES_PER_LEVEL = 10
LINE_POINTS = [0, 40, 100, 300, 1200]   # indexed by rows cleared at once, capped at 4

# Rotation kick search order: horizontal first, then one row up, then one row down
KICK_X = [0, 1, -1, 2, -2]
KICK_Y = [-1, 1]


def level_for_lines(lines: int) -> int:
    return lines // LINES_PER_LEVEL + 1


def line_score(cleared: int, level: int) -> int:
    return LINE_POINTS[min(cleared, 4)] * level


def drop_interval_ms(level: int) -> int:
    """Milliseconds between gravity steps: 1s at level 1, 100ms faster per level, floor 100ms."""
    return max(100, 1000 - (level - 1) * 100)


# -------------------------------------------------------------
# STATE
# -------------------------------------------------------------
@dataclass
class GameState:
    board: Board
    current: Optional[Piece]
    next_type: str
    score: int = 0
    lines: int = 0
    game_over: bool = False
    paused: bool = False

    @property
    def level(self) -> int:
        return level_for_lines(self.lines)

    @property
    def rows(self) -> int:
        return len(self.board)

    @property
    def cols(self) -> int:
        return len(self.board[0])


def new_game(cols: int, rows: int, randomizer: PieceRandomizer) -> GameState:
    """Fresh state: empty board, first piece spawned, next type queued."""
    board = empty_board(cols, rows)
    first = randomizer.next_piece()
    next_type = randomizer.next_piece()
    current = spawn(board, first)
    return GameState(board=board, current=current, next_type=next_type,
                     game_over=current is None)


# -------------------------------------------------------------
# ENGINE
# -------------------------------------------------------------
class TetrisEngine:
    """
    Single writer over a GameState.

    Every public method finishes its read-modify-write before returning,
    and the queries hand out copies, so callers never hold a live
    reference into the state.
    """

    def __init__(self, cols: int = 10, rows: int = 20,
                 randomizer: Optional[PieceRandomizer] = None):
        self.cols = cols
        self.rows = rows
        self.randomizer = randomizer or PieceRandomizer()
        self.drop_counter = 0.0
        self._state: GameState = new_game(cols, rows, self.randomizer)
        log.info("new game %dx%d, first piece %s",
                 cols, rows, self._state.current.t if self._state.current else None)

    # ---------- commands ----------
    def _accepts_commands(self) -> bool:
        s = self._state
        return not (s.game_over or s.paused or s.current is None)

    def move(self, dx: int, dy: int) -> bool:
        """Shift the active piece by (dx, dy).

        A free target is committed. A blocked downward move locks the piece,
        clears lines, scores and spawns the queued next piece. Any other
        blocked move is ignored. Always returns True.
        """
        if not self._accepts_commands():
            return True
        s = self._state
        p = s.current
        if not collides(s.board, p.shape, p.x + dx, p.y + dy):
            p.x += dx
            p.y += dy
        elif dy > 0:
            self._lock_current()
        return True

    def _lock_current(self):
        s = self._state
        piece = s.current
        board, cleared = clear_lines(lock(s.board, piece))
        level_before = s.level
        s.board = board
        s.score += line_score(cleared, level_before)
        s.lines += cleared
        log.debug("locked %s at (%d,%d), cleared %d", piece.t, piece.x, piece.y, cleared)
        if s.level != level_before:
            log.info("level up: %d (lines %d)", s.level, s.lines)

        queued = s.next_type
        s.next_type = self.randomizer.next_piece()
        s.current = spawn(s.board, queued)
        if s.current is None:
            s.game_over = True
            log.info("game over: score %d, lines %d, level %d", s.score, s.lines, s.level)

    def rotate(self):
        """Rotate clockwise, trying KICK_X at the same row, then with each KICK_Y."""
        if not self._accepts_commands():
            return
        s = self._state
        p = s.current
        shape = rotate_cw(p.shape)
        for dy in [0] + KICK_Y:
            for dx in KICK_X:
                if not collides(s.board, shape, p.x + dx, p.y + dy):
                    p.shape = shape
                    p.x += dx
                    p.y += dy
                    return

    def hard_drop(self):
        if not self._accepts_commands():
            return
        p = self._state.current
        p.y += drop_distance(self._state.board, p)
        self.move(0, 1)

    def toggle_pause(self):
        # no pausing once the game is over
        if self._state.game_over:
            return
        self._state.paused = not self._state.paused
        log.info("paused" if self._state.paused else "resumed")

    def reset_game(self):
        self._state = new_game(self.cols, self.rows, self.randomizer)
        self.drop_counter = 0.0
        log.info("game reset")

    def tick(self, dt_ms: float):
        """Advance gravity by dt_ms; issues at most one downward move."""
        if dt_ms < 0:
            raise ValueError(f"dt_ms must be non-negative, got {dt_ms}")
        s = self._state
        if s.paused or s.game_over:
            return
        self.drop_counter += dt_ms
        if self.drop_counter > drop_interval_ms(s.level):
            self.move(0, 1)
            self.drop_counter = 0.0

    # ---------- queries ----------
    def display_board(self) -> Board:
        """Board copy with the active piece merged in (on-board cells only)."""
        s = self._state
        if s.current is None:
            return copy_board(s.board)
        return lock(s.board, s.current)

    @property
    def board(self) -> Board:
        return copy_board(self._state.board)

    @property
    def current(self) -> Optional[Piece]:
        return self._state.current.copy() if self._state.current else None

    @property
    def score(self) -> int: return self._state.score

    @property
    def level(self) -> int: return self._state.level

    @property
    def lines(self) -> int: return self._state.lines

    @property
    def next_type(self) -> str: return self._state.next_type

    @property
    def game_over(self) -> bool: return self._state.game_over

    @property
    def paused(self) -> bool: return self._state.paused
