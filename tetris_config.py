import os

CONFIG = {
    "BOARD_COLS": 10,
    "BOARD_ROWS": 20,
    "CELL_SIZE": 30,
    "FPS": 60,
    "SEED": None,
    "SWIPE_THRESHOLD": 30,
    "HIGH_SCORE_PATH": os.path.join(os.path.expanduser("~"), ".tetris", "highscore.json"),
    "LOG_LEVEL": "INFO",
}
