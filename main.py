
import logging
import sys

import pygame
from tetris_config import CONFIG, TICK_RATE_MS
from tetris_state import initial_state, reduce
from tetris_input import GRAVITY_EVENT, TickCounter, action_for
from tetris_layout import compute_dims
from tetris_render import RenderAssets

log = logging.getLogger("tetris")


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def main():
    logging.basicConfig(level=CONFIG["LOG_LEVEL"], format="%(asctime)s %(name)s %(levelname)s %(message)s")
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, GRAVITY_EVENT])

    dims = compute_dims()
    screen = recreate_window(dims)
    pygame.display.set_caption("Tetris")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 42)

    render = RenderAssets(dims, font, big_font)
    clock = pygame.time.Clock()
    ticks = TickCounter()
    pygame.time.set_timer(GRAVITY_EVENT, TICK_RATE_MS)

    # unseeded games draw their shapes from the clock, which starts at init
    state = initial_state(CONFIG["SEED"])
    log.info("new game, seed %s", CONFIG["SEED"])

    while True:
        clock.tick(CONFIG["FPS"])

        # timer ticks and key presses share one queue, so they reduce in arrival order
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            action = action_for(e, ticks)
            if action is not None:
                state = reduce(state, action)

        render.draw(screen, state)
        pygame.display.flip()


if __name__ == '__main__':
    main()
