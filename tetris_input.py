"""Keyboard and touch mapping onto engine commands"""
from typing import Callable, Dict, Optional, Tuple
import pygame
from tetris_config import CONFIG

# Command name -> how to apply it to a TetrisEngine
COMMANDS: Dict[str, Callable] = {
    "left":   lambda e: e.move(-1, 0),
    "right":  lambda e: e.move(1, 0),
    "down":   lambda e: e.move(0, 1),
    "rotate": lambda e: e.rotate(),
    "drop":   lambda e: e.hard_drop(),
    "pause":  lambda e: e.toggle_pause(),
    "reset":  lambda e: e.reset_game(),
}

KEY_COMMANDS: Dict[int, str] = {
    pygame.K_LEFT: "left",
    pygame.K_RIGHT: "right",
    pygame.K_DOWN: "down",
    pygame.K_UP: "rotate",
    pygame.K_SPACE: "drop",
    pygame.K_RETURN: "drop",
    pygame.K_p: "pause",
    pygame.K_r: "reset",
}

def apply_command(engine, cmd: Optional[str]) -> Optional[str]:
    if cmd is None: return None
    COMMANDS[cmd](engine)
    return cmd

def handle_key(engine, key: int) -> Optional[str]:
    """Run the command bound to key, returning its name (None if unbound)."""
    return apply_command(engine, KEY_COMMANDS.get(key))

def classify_swipe(dx: float, dy: float, threshold: float = 30) -> Optional[str]:
    """Horizontal swipe moves, downward swipe hard-drops, a short touch rotates."""
    if abs(dx) > abs(dy):
        if abs(dx) > threshold:
            return "right" if dx > 0 else "left"
        return None
    if abs(dy) > threshold:
        return "drop" if dy > 0 else None
    return "rotate"

class TouchTracker:
    """Pairs FINGERDOWN/FINGERUP events into one swipe command.

    pygame reports finger positions normalized to 0..1, so they are scaled
    by the window size before comparing against the pixel threshold.
    """
    def __init__(self, size: Tuple[int,int], threshold: Optional[float] = None):
        self.size = size
        self.threshold = CONFIG["SWIPE_THRESHOLD"] if threshold is None else threshold
        self.start: Optional[Tuple[float,float]] = None

    def down(self, x: float, y: float):
        self.start = (x*self.size[0], y*self.size[1])

    def up(self, x: float, y: float) -> Optional[str]:
        if self.start is None: return None
        sx, sy = self.start
        self.start = None
        return classify_swipe(x*self.size[0]-sx, y*self.size[1]-sy, self.threshold)

    def handle(self, engine, e) -> Optional[str]:
        if e.type == pygame.FINGERDOWN:
            self.down(e.x, e.y); return None
        if e.type == pygame.FINGERUP:
            return apply_command(engine, self.up(e.x, e.y))
        return None
