"""Board helpers: collisions, row clearing, ghost"""
from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING, List, Optional, Set, Tuple

from tetris_config import (
    CANVAS_WIDTH, CANVAS_HEIGHT, GRID_WIDTH, GRID_HEIGHT,
    CELL_WIDTH, CELL_HEIGHT, CLEAR_SCORE, LEVEL_SCORE,
)
from tetris_piece import Block

if TYPE_CHECKING:
    from tetris_state import State

log = logging.getLogger(__name__)

RIGHT_EDGE = CANVAS_WIDTH - CELL_WIDTH
BOTTOM_EDGE = CANVAS_HEIGHT - CELL_HEIGHT


def stopped_blocks(s: State) -> Tuple[Block, ...]:
    return tuple(b for b in s.blocks if b.stopped)


def active_block(s: State) -> Optional[Block]:
    for b in s.blocks:
        if not b.stopped:
            return b
    return None


def settled_cells(s: State) -> Set[Tuple[int, int]]:
    return {(p.x, p.y) for b in stopped_blocks(s) for p in b.pieces}


# ---------- collisions ----------

def side_collision(s: State, block: Block, dx: int) -> bool:
    """True if moving `block` sideways toward `dx` is blocked."""
    if dx < 0 and any(p.x == 0 for p in block.pieces):
        return True
    if dx > 0 and any(p.x == RIGHT_EDGE for p in block.pieces):
        return True
    if not dx:
        return False
    step = CELL_WIDTH if dx > 0 else -CELL_WIDTH
    taken = settled_cells(s)
    return any((p.x + step, p.y) in taken for p in block.pieces)


def _resting(block: Block, taken: Set[Tuple[int, int]]) -> bool:
    if any(p.y == BOTTOM_EDGE for p in block.pieces):
        return True
    return any((p.x, p.y + CELL_HEIGHT) in taken for p in block.pieces)


def bottom_collision(s: State, block: Block) -> bool:
    """True if `block` rests on the floor or on a settled cell."""
    return _resting(block, settled_cells(s))


def wall_contact(block: Block) -> int:
    """-1 touching/past the left wall, 1 the right wall, 0 clear of both."""
    if any(p.x <= 0 for p in block.pieces):
        return -1
    if any(p.x >= RIGHT_EDGE for p in block.pieces):
        return 1
    return 0


def on_bottom(block: Block) -> bool:
    return any(p.y >= BOTTOM_EDGE for p in block.pieces)


def rotation_collision(s: State, rotated: Block) -> bool:
    """Judge a fully rotated candidate. Wall contact counts as a hit."""
    if wall_contact(rotated) or on_bottom(rotated):
        return True
    return overlaps_settled(s, rotated)


def overlaps_settled(s: State, block: Block) -> bool:
    taken = settled_cells(s)
    return any((p.x, p.y) in taken for p in block.pieces)


def top_out(block: Block) -> bool:
    """A settled block reaching the top row (or the spawn row above it) ends the game."""
    return any(p.y <= 0 for p in block.pieces)


# ---------- full rows ----------

def full_row(s: State, row: int) -> bool:
    y = row * CELL_HEIGHT
    return sum(1 for b in s.blocks for p in b.pieces if p.y == y) == GRID_WIDTH


def clear_row(s: State, row: int) -> State:
    """Remove one row, drop everything above it by a cell, and score it."""
    y = row * CELL_HEIGHT
    blocks = []
    for b in s.blocks:
        kept = tuple(
            replace(p, y=p.y + CELL_HEIGHT) if p.y < y else p
            for p in b.pieces if p.y != y
        )
        if kept:
            blocks.append(replace(b, pieces=kept))
    score = s.score + CLEAR_SCORE
    log.debug("cleared row %d, score %d", row, score)
    return replace(
        s,
        blocks=tuple(blocks),
        ghost=None,
        score=score,
        level=score // LEVEL_SCORE + 1,
        high_score=max(s.high_score, score),
    )


def remove_rows(s: State) -> State:
    """Clear every full row, bottom first, once all blocks have settled.

    A cleared row index is tested again since the row above has fallen into
    it. Row 0 is left alone; anything settling there tops out.
    """
    if s.clearing and all(b.stopped for b in s.blocks):
        row = GRID_HEIGHT - 1
        # each clear removes GRID_WIDTH cells, so at most GRID_HEIGHT clears
        budget = GRID_HEIGHT
        while row > 0:
            if budget and full_row(s, row):
                s = clear_row(s, row)
                budget -= 1
            else:
                row -= 1
    return replace(s, clearing=False)


def occupancy(s: State) -> List[List[Optional[str]]]:
    """Colour per settled cell, row-major, None where empty."""
    grid: List[List[Optional[str]]] = [[None] * GRID_WIDTH for _ in range(GRID_HEIGHT)]
    for b in stopped_blocks(s):
        for p in b.pieces:
            c, r = p.x // CELL_WIDTH, p.y // CELL_HEIGHT
            if 0 <= r < GRID_HEIGHT and 0 <= c < GRID_WIDTH:
                grid[r][c] = p.color
    return grid


# ---------- ghost ----------

def place_ghost(s: State, block: Block) -> Block:
    """Where `block` would come to rest if dropped straight down."""
    taken = settled_cells(s)
    ghost = block
    for _ in range(GRID_HEIGHT + 2):
        if _resting(ghost, taken):
            break
        ghost = ghost.shifted(dy=CELL_HEIGHT)
    return ghost
