from __future__ import annotations

import argparse
import logging
from typing import Dict, Optional, Sequence

import pygame

from falling_blocks.game import Action, FallingBlockGame, GameConfig
from .renderer import Renderer

logger = logging.getLogger(__name__)

TICK_EVENT = pygame.USEREVENT + 1

KEY_TO_ACTION: Dict[int, Action] = {
    pygame.K_LEFT: Action.LEFT,
    pygame.K_RIGHT: Action.RIGHT,
    pygame.K_UP: Action.ROTATE,
    pygame.K_DOWN: Action.SOFT_DROP,
    pygame.K_SPACE: Action.HARD_DROP,
}

START_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_n)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play Falling Blocks with the keyboard")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--tick-ms", type=int, default=500, help="Gravity interval in milliseconds")
    p.add_argument("--width", type=int, default=10)
    p.add_argument("--height", type=int, default=20)
    p.add_argument("--cell-size", type=int, default=28)
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p


def run(config: GameConfig, cell_size: int = 28) -> None:
    pygame.init()
    try:
        clock = pygame.time.Clock()
        game = FallingBlockGame(config)
        renderer = Renderer(cell_size=cell_size)
        screen = pygame.display.set_mode(renderer.window_size(game))
        pygame.display.set_caption("Falling Blocks")

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == TICK_EVENT:
                    result = game.tick()
                    if result.game_over:
                        pygame.time.set_timer(TICK_EVENT, 0)
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key in START_KEYS:
                        pygame.time.set_timer(TICK_EVENT, 0)
                        game.new_game()
                        pygame.time.set_timer(TICK_EVENT, config.tick_ms)
                    else:
                        action = KEY_TO_ACTION.get(event.key)
                        if action is not None and game.step(action).game_over:
                            pygame.time.set_timer(TICK_EVENT, 0)

            renderer.draw(screen, game)
            clock.tick(60)
        logger.info("Session closed: %s", game.get_stats())
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s %(name)s %(levelname)s %(message)s")
    config = GameConfig(width=args.width, height=args.height,
                        random_seed=args.seed, tick_ms=args.tick_ms)
    run(config, cell_size=args.cell_size)


if __name__ == "__main__":  # pragma: no cover
    main()
