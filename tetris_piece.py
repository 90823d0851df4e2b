"""Piece model, shape catalog, block creation"""
from dataclasses import dataclass, replace
from typing import Dict, List, Optional, Tuple

from tetris_config import CELL_WIDTH, CELL_HEIGHT
from tetris_rng import next_shape_index, spawn_seed


@dataclass(frozen=True)
class Piece:
    """One occupied cell of a block, in pixel coordinates."""
    x: int
    y: int
    color: str
    pivot: bool = False


@dataclass(frozen=True)
class Block:
    id: int
    shape: str
    pieces: Tuple[Piece, ...]
    stopped: bool = False

    @property
    def pivot(self) -> Optional[Piece]:
        for p in self.pieces:
            if p.pivot:
                return p
        return None

    def shifted(self, dx: int = 0, dy: int = 0) -> "Block":
        return replace(self, pieces=tuple(replace(p, x=p.x + dx, y=p.y + dy) for p in self.pieces))

    def cells(self) -> List[Tuple[int, int]]:
        return [(p.x, p.y) for p in self.pieces]


@dataclass(frozen=True)
class ShapeDef:
    offsets: Tuple[Tuple[int, int], ...]  # (col, row); row -1 is the hidden spawn row
    color: str
    pivot: Optional[int]  # index into offsets, None if the shape never rotates


SHAPE_ORDER = ("I", "J", "L", "O", "S", "T", "Z")

SHAPES: Dict[str, ShapeDef] = {
    "I": ShapeDef(((3, -1), (4, -1), (5, -1), (6, -1)), "cyan", 2),
    "J": ShapeDef(((4, -1), (4, 0), (5, 0), (6, 0)), "blue", 2),
    "L": ShapeDef(((4, 0), (5, 0), (6, 0), (6, -1)), "orange", 1),
    "O": ShapeDef(((4, -1), (5, -1), (4, 0), (5, 0)), "yellow", None),
    "S": ShapeDef(((4, 0), (5, 0), (5, -1), (6, -1)), "green", 1),
    "T": ShapeDef(((5, -1), (4, 0), (5, 0), (6, 0)), "purple", 2),
    "Z": ShapeDef(((4, -1), (5, -1), (5, 0), (6, 0)), "red", 2),
}


def make_block(shape: str, block_id: int = 0) -> Block:
    """Build a shape at its spawn position."""
    d = SHAPES[shape]
    pieces = tuple(
        Piece(col * CELL_WIDTH, row * CELL_HEIGHT, d.color, i == d.pivot)
        for i, (col, row) in enumerate(d.offsets)
    )
    return Block(block_id, shape, pieces)


def create_block(obj_count: int, seed: Optional[int] = None) -> Block:
    shape = SHAPE_ORDER[next_shape_index(spawn_seed(obj_count, seed))]
    return make_block(shape, obj_count)
