"""Key press / timer event -> action mapping"""
from typing import Optional

import pygame

from tetris_config import CELL_WIDTH
from tetris_state import Action, GravityTick, Shift, SoftDrop, Rotate, HardDrop, Restart

# posted by pygame.time.set_timer every TICK_RATE_MS, queued alongside key presses
GRAVITY_EVENT = pygame.USEREVENT + 1

KEY_ACTIONS = {
    pygame.K_a: Shift(-CELL_WIDTH),
    pygame.K_LEFT: Shift(-CELL_WIDTH),
    pygame.K_d: Shift(CELL_WIDTH),
    pygame.K_RIGHT: Shift(CELL_WIDTH),
    pygame.K_s: SoftDrop(),
    pygame.K_DOWN: SoftDrop(),
    pygame.K_w: Rotate(),
    pygame.K_UP: Rotate(),
    pygame.K_SPACE: HardDrop(),
    pygame.K_r: Restart(),
}


class TickCounter:
    """Numbers gravity ticks in the order the timer delivers them."""
    def __init__(self):
        self.counter = 0

    def next_tick(self) -> GravityTick:
        self.counter += 1
        return GravityTick(self.counter)


def action_for(event, ticks: TickCounter) -> Optional[Action]:
    """Action for a queued event, None for anything unbound."""
    if event.type == GRAVITY_EVENT:
        return ticks.next_tick()
    if event.type != pygame.KEYDOWN:
        return None
    return KEY_ACTIONS.get(event.key)
