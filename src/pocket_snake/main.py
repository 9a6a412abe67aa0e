# main.py
import logging

import pygame # type: ignore
from .config import WIDTH, HEIGHT, FPS, CFG, SPLASH, MENU, PAUSED, GAME_OVER
from .controller import GameController
from .game import (
    handle_events, draw_splash, draw_menu, draw_game, draw_paused, draw_game_over,
)

def render(screen, font, controller: GameController, now: int) -> None:
    engine = controller.engine
    phase = engine.phase
    if phase == SPLASH:
        draw_splash(screen, font, controller.splash.alpha(now))
    elif phase == MENU:
        draw_menu(screen, font)
    elif phase == GAME_OVER:
        draw_game_over(screen, font, engine.score)
    else:
        draw_game(screen, font, engine)
        if phase == PAUSED:
            draw_paused(screen, font)

def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    pygame.init()
    font = pygame.font.SysFont(None, 24)
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()

    controller = GameController(CFG, now_ms=pygame.time.get_ticks())
    running = True

    while running:
        # 1) input
        running = handle_events(controller, pygame.time.get_ticks())
        if not running:
            break

        # 2) update (ticks are gated by the controller's GameClock)
        now = pygame.time.get_ticks()
        controller.update(now)

        # 3) render
        render(screen, font, controller, now)
        pygame.display.flip()
        clock.tick(FPS)

    pygame.quit()

if __name__ == "__main__":
    main()
