"""Block movement, rotation about the pivot, wall kicks"""
from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING, Tuple

from tetris_config import GRID_WIDTH, CELL_WIDTH, CELL_HEIGHT
from tetris_board import (
    bottom_collision, side_collision, rotation_collision, overlaps_settled,
    wall_contact, on_bottom,
)
from tetris_piece import Block

if TYPE_CHECKING:
    from tetris_state import State


def gravity_step(s: State, block: Block) -> Block:
    """Fall one row, or settle if something is underneath."""
    if (not block.stopped or s.clearing) and not bottom_collision(s, block):
        return block.shifted(dy=CELL_HEIGHT)
    return replace(block, stopped=True)


def move_x(s: State, block: Block, dx: int) -> Block:
    if block.stopped or side_collision(s, block, dx):
        return block
    return block.shifted(dx=dx)


def move_y(s: State, block: Block, dy: int = CELL_HEIGHT) -> Block:
    if block.stopped or bottom_collision(s, block):
        return block
    return block.shifted(dy=dy)


def rotate_about_pivot(block: Block) -> Block:
    """Quarter turn clockwise (screen coordinates) around the pivot cell."""
    c = block.pivot
    pieces = tuple(
        replace(p, x=c.x - (p.y - c.y), y=c.y + (p.x - c.x)) for p in block.pieces
    )
    return replace(block, pieces=pieces)


def wall_kick(block: Block) -> Tuple[Block, int]:
    """Push a rotated block off the wall it touches.

    Returns the pushed block and the offset to back off once the push has
    found room. The wall test is inclusive, so the push always goes one
    column past flush; the offset is that last column.
    """
    shift = 0
    for _ in range(GRID_WIDTH):
        side = wall_contact(block)
        if on_bottom(block) or not side:
            break
        step = -side * CELL_WIDTH
        block = block.shifted(dx=step)
        shift += step
    offset = CELL_WIDTH if shift > 0 else -CELL_WIDTH if shift < 0 else 0
    return block, offset


def rotate(s: State, block: Block) -> Block:
    if block.stopped or block.pivot is None:
        return block
    rotated = rotate_about_pivot(block)
    if not rotation_collision(s, rotated):
        return rotated
    kicked, offset = wall_kick(rotated)
    if rotation_collision(s, kicked):
        return block
    committed = kicked.shifted(dx=-offset)
    if overlaps_settled(s, committed):
        return block
    return committed


def instant_drop(s: State, block: Block) -> Block:
    """Swap the active block for its ghost; the next gravity tick settles it."""
    if s.ghost is not None:
        return s.ghost
    return block
