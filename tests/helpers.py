from dataclasses import replace

from tetris_config import CELL_WIDTH, CELL_HEIGHT, GRID_WIDTH
from tetris_piece import Block, Piece, make_block
from tetris_state import State


def settled_row(row, skip=(), block_id=100, color="gray"):
    """A settled filler block covering `row` except the columns in `skip`."""
    pieces = tuple(
        Piece(c * CELL_WIDTH, row * CELL_HEIGHT, color)
        for c in range(GRID_WIDTH) if c not in skip
    )
    return Block(block_id, "I", pieces, stopped=True)


def settled_cells(cells, block_id=200, color="gray"):
    pieces = tuple(Piece(c * CELL_WIDTH, r * CELL_HEIGHT, color) for c, r in cells)
    return Block(block_id, "I", pieces, stopped=True)


def falling(shape, cols=0, rows=0, block_id=1):
    return make_block(shape, block_id).shifted(dx=cols * CELL_WIDTH, dy=rows * CELL_HEIGHT)


def board(*blocks, **kw):
    kw.setdefault("next_block", make_block("O", 99))
    kw.setdefault("seed", 7)
    return State(blocks=tuple(blocks), **kw)


def footprint(block):
    return sorted(block.cells())


def settle(block):
    return replace(block, stopped=True)
