"""
Rendering helpers for the Tetris front end.

- Pre-render cell Surfaces per colour (solid + translucent ghost) and blit them.
- Pre-render the static background (grid, panel frame, preview frame).
- Cache HUD text surfaces; re-render only when values change.
- Cache a BOARD SURFACE with all settled cells; rebuild it only when they change.

Reads the engine's State and never writes to it.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, List, Optional
from tetris_config import GRID_WIDTH, GRID_HEIGHT, CELL_WIDTH, CELL_HEIGHT
from tetris_layout import Dims
from tetris_piece import SHAPES, Block
from tetris_board import occupancy
from tetris_state import State

GHOST_ALPHA = 77  # ~0.3 opacity

Grid = List[List[Optional[str]]]

@dataclass
class HudCache:
    score: int = -1
    level: int = -1
    high_score: int = -1
    title: Optional[pygame.Surface] = None
    score_s: Optional[pygame.Surface] = None
    level_s: Optional[pygame.Surface] = None
    high_s: Optional[pygame.Surface] = None
    controls: Optional[list] = None

class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font, big_font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self.big_font = big_font
        self.cw = CELL_WIDTH * dims.scale
        self.ch = CELL_HEIGHT * dims.scale
        self._make_static()
        self._make_cells()
        self.hud = HudCache()
        # Board surface cache (only settled cells)
        self.board_surface = pygame.Surface((dims.board_w, dims.board_h), pygame.SRCALPHA)
        self._board_grid: Optional[Grid] = None

    # ---------- Static background (grid + panel) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((10,13,34))
        grid_col = (40,50,90)
        for x in range(GRID_WIDTH+1):
            X = d.board_x + x*self.cw
            pygame.draw.line(self.bg, grid_col, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(GRID_HEIGHT+1):
            Y = d.board_y + y*self.ch
            pygame.draw.line(self.bg, grid_col, (d.board_x, Y), (d.board_x + d.board_w, Y))
        self.pv_x = d.panel_x
        self.pv_y = d.panel_y + 150
        frame = pygame.Rect(self.pv_x, self.pv_y, d.preview_w, d.preview_h)
        pygame.draw.rect(self.bg, (15,18,40), frame)
        pygame.draw.rect(self.bg, (55,65,110), frame, 1)

    # ---------- Cell sprites (solid + ghost) ----------
    def _make_cells(self):
        self.cell_surf: Dict[str, pygame.Surface] = {}
        self.ghost_surf: Dict[str, pygame.Surface] = {}
        for d in SHAPES.values():
            col = pygame.Color(d.color)
            s = pygame.Surface((self.cw-2, self.ch-2))
            s.fill(col)
            self.cell_surf[d.color] = s
            g = pygame.Surface((self.cw-2, self.ch-2), pygame.SRCALPHA)
            g.fill((col.r, col.g, col.b, GHOST_ALPHA))
            self.ghost_surf[d.color] = g

    # ---------- Board surface cache ----------
    def rebuild_board_surface(self, grid: Grid):
        """Rebuilds the settled-cells surface from the occupancy grid."""
        self.board_surface.fill((0,0,0,0))
        for r in range(GRID_HEIGHT):
            for c in range(GRID_WIDTH):
                color = grid[r][c]
                if color:
                    self.board_surface.blit(self.cell_surf[color], (c*self.cw + 1, r*self.ch + 1))
        self._board_grid = grid

    # ---------- Blocks ----------
    def draw_block(self, screen: pygame.Surface, block: Block, ghost: bool = False):
        d = self.dims
        sprites = self.ghost_surf if ghost else self.cell_surf
        for p in block.pieces:
            if p.y < 0:
                continue  # hidden spawn row
            screen.blit(sprites[p.color], (d.board_x + p.x*d.scale + 1, d.board_y + p.y*d.scale + 1))

    def draw_preview(self, screen: pygame.Surface, block: Block):
        d = self.dims
        # same offset the board uses, pulled two cells left and down into the pane
        for p in block.pieces:
            x = self.pv_x + (p.x - CELL_WIDTH*2)*d.scale
            y = self.pv_y + (p.y + CELL_HEIGHT*2)*d.scale
            screen.blit(self.cell_surf[p.color], (x + 1, y + 1))

    # ---------- HUD / Panel ----------
    def draw_panel_hud(self, screen: pygame.Surface, s: State):
        d = self.dims
        f = self.font
        if self.hud.title is None:
            self.hud.title = f.render("Tetris", True, (197,202,233))
        if s.level != self.hud.level:
            self.hud.level = s.level
            self.hud.level_s = f.render(f"Level: {s.level}", True, (200,210,240))
        if s.score != self.hud.score:
            self.hud.score = s.score
            self.hud.score_s = f.render(f"Score: {s.score}", True, (200,210,240))
        if s.high_score != self.hud.high_score:
            self.hud.high_score = s.high_score
            self.hud.high_s = f.render(f"High Score: {s.high_score}", True, (200,210,240))
        screen.blit(self.hud.title, (d.panel_x, d.panel_y))
        screen.blit(self.hud.level_s, (d.panel_x, d.panel_y + 32))
        screen.blit(self.hud.score_s, (d.panel_x, d.panel_y + 56))
        screen.blit(self.hud.high_s, (d.panel_x, d.panel_y + 80))
        screen.blit(f.render("Next:", True, (200,210,240)), (d.panel_x, d.panel_y + 126))
        if not self.hud.controls:
            self.hud.controls = [
                f.render("Controls:", True, (200,210,240)),
                f.render("A/D Move", True, (165,175,215)),
                f.render("S Soft drop", True, (165,175,215)),
                f.render("W Rotate", True, (165,175,215)),
                f.render("Space Hard drop", True, (165,175,215)),
                f.render("R Restart", True, (165,175,215)),
            ]
        y = self.pv_y + d.preview_h + 24
        for surf in self.hud.controls:
            screen.blit(surf, (d.panel_x, y)); y += 20

    def draw_game_over(self, screen: pygame.Surface):
        d = self.dims
        cx = d.board_x + d.board_w // 2
        cy = d.board_y + d.board_h // 2
        msg = self.big_font.render("GAME OVER", True, (255,220,220))
        screen.blit(msg, msg.get_rect(center=(cx, cy)))
        hint = self.font.render("R to Restart", True, (255,220,220))
        screen.blit(hint, hint.get_rect(center=(cx, cy + 36)))

    # ---------- Whole frame ----------
    def draw(self, screen: pygame.Surface, s: State):
        grid = occupancy(s)
        if grid != self._board_grid:
            self.rebuild_board_surface(grid)
        screen.blit(self.bg, (0,0))
        screen.blit(self.board_surface, (self.dims.board_x, self.dims.board_y))
        if s.game_end:
            self.draw_game_over(screen)
        else:
            if s.ghost is not None:
                self.draw_block(screen, s.ghost, ghost=True)
            for b in s.blocks:
                if not b.stopped:
                    self.draw_block(screen, b)
        self.draw_preview(screen, s.next_block)
        self.draw_panel_hud(screen, s)
