import logging
import sys

import pygame
from tetris_config import CONFIG
from tetris_engine import TetrisEngine
from tetris_highscore import HighScoreStore
from tetris_input import TouchTracker, handle_key
from tetris_layout import compute_dims
from tetris_render import Renderer
from tetris_rng import PieceRandomizer

logging.basicConfig(
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    level=getattr(logging, str(CONFIG["LOG_LEVEL"]).upper(), logging.INFO),
)
log = logging.getLogger("tetris")


def create_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def main():
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, pygame.FINGERDOWN, pygame.FINGERUP])

    dims = compute_dims()
    screen = create_window(dims)
    pygame.display.set_caption("Tetris")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 42)
    render = Renderer(dims, font, big_font)
    clock = pygame.time.Clock()

    engine = TetrisEngine(dims.cols, dims.rows, PieceRandomizer(CONFIG["SEED"]))
    touch = TouchTracker((dims.total_w, dims.total_h))
    scores = HighScoreStore()
    high_score = scores.load()
    result = None
    recorded = False

    while True:
        dt = clock.tick(CONFIG["FPS"])

        for e in pygame.event.get():
            if e.type == pygame.QUIT or (e.type == pygame.KEYDOWN and e.key == pygame.K_ESCAPE):
                log.info("quit with score %d", engine.score)
                pygame.quit(); sys.exit()
            if e.type == pygame.KEYDOWN:
                if handle_key(engine, e.key) == "reset":
                    result, recorded = None, False
            else:
                touch.handle(engine, e)

        engine.tick(dt)

        # record once, on the first frame after the game ends
        if engine.game_over and not recorded:
            recorded = True
            try:
                result = scores.record(engine.score, engine.lines, engine.level)
            except OSError:
                log.warning("high score not saved this game")
            else:
                high_score = result.high_score

        render.draw(screen, engine, high_score, result)
        pygame.display.flip()


if __name__ == '__main__':
    main()
