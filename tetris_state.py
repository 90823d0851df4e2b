"""Game state, player actions and the per-tick reducer"""
import logging
from dataclasses import dataclass, replace
from typing import Callable, Optional, Tuple, Union

from tetris_config import CELL_HEIGHT, FAST_LEVEL, FAST_DIVISOR
from tetris_piece import Block, create_block
from tetris_board import active_block, place_ghost, remove_rows, top_out
from tetris_move import gravity_step, move_x, move_y, rotate, instant_drop

log = logging.getLogger(__name__)


# ---------- actions ----------

@dataclass(frozen=True)
class Shift:
    dx: int


@dataclass(frozen=True)
class SoftDrop:
    dy: int = CELL_HEIGHT


@dataclass(frozen=True)
class Rotate:
    pass


@dataclass(frozen=True)
class HardDrop:
    pass


@dataclass(frozen=True)
class Restart:
    pass


@dataclass(frozen=True)
class GravityTick:
    counter: int = 0


Action = Union[Shift, SoftDrop, Rotate, HardDrop, Restart, GravityTick]


# ---------- state ----------

@dataclass(frozen=True)
class State:
    next_block: Block
    blocks: Tuple[Block, ...] = ()
    ghost: Optional[Block] = None
    level: int = 1
    obj_count: int = 1
    high_score: int = 0
    score: int = 0
    game_end: bool = False
    clearing: bool = False
    seed: Optional[int] = None


def initial_state(seed: Optional[int] = None, high_score: int = 0) -> State:
    return State(next_block=create_block(0, seed), high_score=high_score, seed=seed)


# ---------- reducer ----------

Move = Callable[[State, Block], Block]


def tick(s: State, move: Move = gravity_step) -> State:
    """Advance one step, moving the active block with `move`.

    When nothing is falling the step is spent spawning the next block
    instead, and `move` is dropped.
    """
    if s.game_end:
        return s

    if not s.clearing and all(b.stopped for b in s.blocks):
        spawned = s.next_block
        log.debug("spawn %s #%d", spawned.shape, spawned.id)
        return replace(
            s,
            blocks=s.blocks + (spawned,),
            next_block=create_block(s.obj_count, s.seed),
            ghost=place_ghost(s, spawned),
            obj_count=s.obj_count + 1,
        )

    current = active_block(s)
    if current is None:
        return remove_rows(s)
    moved = move(s, current)
    blocks = tuple(b for b in s.blocks if b.stopped) + (moved,)
    s = replace(s, blocks=blocks, ghost=place_ghost(s, moved), clearing=True)
    s = remove_rows(s)

    landed = next((b for b in s.blocks if b.id == moved.id), None)
    if moved.stopped and landed is not None and top_out(landed):
        log.info("game over, score %d", s.score)
        return replace(s, game_end=True)
    return s


def fall_divisor(level: int) -> int:
    """Gravity ticks per row at `level`."""
    if level < FAST_LEVEL:
        return 105 - level * 15
    return FAST_DIVISOR


def reduce(s: State, action: Action) -> State:
    """Fold one action into the state. Actions that don't apply are ignored."""
    if isinstance(action, Shift):
        return tick(s, lambda st, b: move_x(st, b, action.dx))
    if isinstance(action, SoftDrop):
        return tick(s, lambda st, b: move_y(st, b, action.dy))
    if isinstance(action, Rotate):
        return tick(s, rotate)
    if isinstance(action, HardDrop):
        return tick(s, instant_drop)
    if isinstance(action, Restart):
        if not s.game_end:
            return s
        log.info("restart, high score %d", max(s.high_score, s.score))
        return initial_state(s.seed, high_score=max(s.high_score, s.score))
    if isinstance(action, GravityTick):
        if action.counter % fall_divisor(s.level):
            return s
        return tick(s)
    return s
