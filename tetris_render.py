"""
Pygame drawing for the engine's read-only outputs.

- Static background (grid + panel frame) is pre-rendered once per Dims.
- Cell sprites are pre-rendered per piece color and blitted.
- HUD text surfaces are cached and re-rendered only when values change.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, List, Optional
from tetris_layout import Dims
from tetris_piece import SHAPES, COLORS
from tetris_highscore import GameResult

TEXT = (200,210,240)
DIM_TEXT = (165,175,215)

@dataclass
class HudCache:
    score: int = -1
    level: int = -1
    lines: int = -1
    high: int = -1
    score_s: Optional[pygame.Surface] = None
    level_s: Optional[pygame.Surface] = None
    lines_s: Optional[pygame.Surface] = None
    high_s: Optional[pygame.Surface] = None

class Renderer:
    def __init__(self, dims: Dims, font: pygame.font.Font, big_font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self.big_font = big_font
        self.hud = HudCache()
        self._make_static()
        self._make_cells()
        self.controls = [font.render(s, True, DIM_TEXT) for s in (
            "Controls:", "←/→ Move", "↓ Soft drop", "↑ Rotate",
            "Space Hard drop", "P Pause • R Restart", "Esc Quit")]

    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((17,24,39))
        grid_col = (31,41,55)
        for x in range(d.cols+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, grid_col, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(d.rows+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, grid_col, (d.board_x, Y), (d.board_x + d.board_w, Y))
        panel = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)
        pygame.draw.rect(self.bg, (31,41,55), panel)
        self.pv_cell = max(12, int(d.cell*0.66))
        self.pv_x = d.panel_x + 12
        self.pv_y = d.panel_y + 150

    def _make_cells(self):
        c = self.dims.cell
        self.cell_surf: Dict[str, pygame.Surface] = {}
        for t, col in COLORS.items():
            s = pygame.Surface((c-2, c-2))
            s.fill(col)
            self.cell_surf[t] = s

    def _text(self, attr: str, value: int, label: str) -> pygame.Surface:
        if getattr(self.hud, attr) != value:
            setattr(self.hud, attr, value)
            setattr(self.hud, attr + "_s", self.font.render(f"{label}: {value}", True, TEXT))
        return getattr(self.hud, attr + "_s")

    def draw(self, screen: pygame.Surface, engine, high_score: int,
             result: Optional[GameResult] = None):
        d = self.dims
        screen.blit(self.bg, (0,0))
        self.draw_board(screen, engine.display_board())

        x = d.panel_x + 12
        screen.blit(self._text("score", engine.score, "Score"), (x, d.panel_y + 12))
        screen.blit(self._text("level", engine.level, "Level"), (x, d.panel_y + 36))
        screen.blit(self._text("lines", engine.lines, "Lines"), (x, d.panel_y + 60))
        screen.blit(self._text("high", max(high_score, engine.score), "High"), (x, d.panel_y + 84))
        screen.blit(self.font.render("Next:", True, TEXT), (x, d.panel_y + 122))
        self.draw_preview(screen, engine.next_type)
        y = d.panel_y + 260
        for surf in self.controls:
            screen.blit(surf, (x, y)); y += 20

        if engine.game_over:
            self.banner(screen, "GAME OVER", self.result_lines(result))
        elif engine.paused:
            self.banner(screen, "PAUSED", ["P to resume"])

    def draw_board(self, screen: pygame.Surface, board: List[List[Optional[str]]]):
        d = self.dims
        for by, row in enumerate(board):
            for bx, t in enumerate(row):
                if t:
                    screen.blit(self.cell_surf[t], (d.board_x + bx*d.cell + 1, d.board_y + by*d.cell + 1))

    def draw_preview(self, screen: pygame.Surface, t: str):
        shape = SHAPES[t]
        offx = (4 - len(shape[0])) // 2
        for y, row in enumerate(shape):
            for x, v in enumerate(row):
                if v:
                    rect = ((x + offx)*self.pv_cell + self.pv_x + 1, y*self.pv_cell + self.pv_y + 1,
                            self.pv_cell - 2, self.pv_cell - 2)
                    pygame.draw.rect(screen, COLORS[t], rect)

    @staticmethod
    def result_lines(result: Optional[GameResult]) -> List[str]:
        if result is None:
            return ["R to restart"]
        out = [f"Score {result.score}  Lines {result.lines}  Level {result.level}"]
        if result.is_new_record:
            out.append("New record!")
        out.append("R to restart")
        return out

    def banner(self, screen: pygame.Surface, title: str, lines: List[str]):
        d = self.dims
        shade = pygame.Surface((d.total_w, d.total_h), pygame.SRCALPHA)
        shade.fill((0,0,0,200))
        screen.blit(shade, (0,0))
        cx, cy = d.total_w // 2, d.total_h // 2
        msg = self.big_font.render(title, True, (255,255,255))
        screen.blit(msg, msg.get_rect(center=(cx, cy - 30)))
        for i, line in enumerate(lines):
            s = self.font.render(line, True, TEXT)
            screen.blit(s, s.get_rect(center=(cx, cy + 10 + i*24)))
