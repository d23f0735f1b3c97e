import itertools

import pytest

from tetris_engine import TetrisEngine
from tetris_rng import PieceRandomizer


class FixedRandomizer(PieceRandomizer):
    """Deals the given piece types in order, cycling forever."""

    def __init__(self, types):
        super().__init__(seed=0)
        self._cycle = itertools.cycle(types)

    def next_piece(self):
        return next(self._cycle)


def make_engine(types=("O", "T", "I"), cols=10, rows=20):
    return TetrisEngine(cols, rows, FixedRandomizer(types))


def fill_row(engine, y, except_cols=(), t="Z"):
    engine._state.board[y] = [None if x in except_cols else t for x in range(engine.cols)]


@pytest.fixture
def engine():
    return make_engine()
