# game.py
from typing import Dict, Optional, Tuple
import pygame # type: ignore

from .config import (
    WIDTH, HEIGHT, CELL_SIZE, HUD_H,
    BG, SCREEN, DARK, DARKEST, FOOD, TEXT,
    UP, DOWN, LEFT, RIGHT,
    SPLASH_TITLE,
)
from .controller import GameController
from .engine import SimulationEngine

KEY_DIRECTIONS: Dict[int, Tuple[int, int]] = {
    pygame.K_UP: UP,       pygame.K_w: UP,
    pygame.K_DOWN: DOWN,   pygame.K_s: DOWN,
    pygame.K_LEFT: LEFT,   pygame.K_a: LEFT,
    pygame.K_RIGHT: RIGHT, pygame.K_d: RIGHT,
}
START_KEYS = (pygame.K_RETURN, pygame.K_SPACE)
SELECT_KEYS = (pygame.K_ESCAPE, pygame.K_BACKSPACE)

# ---------- Helpers ----------
def draw_cell(screen: pygame.Surface, gx: int, gy: int, color: Tuple[int, int, int]) -> None:
    rect = pygame.Rect(gx * CELL_SIZE, HUD_H + gy * CELL_SIZE, CELL_SIZE, CELL_SIZE)
    pygame.draw.rect(screen, color, rect.inflate(-2, -2))

def draw_centered(screen: pygame.Surface, font: pygame.font.Font, text: str, dy: int) -> None:
    surf = font.render(text, True, TEXT)
    screen.blit(surf, surf.get_rect(center=(WIDTH // 2, HEIGHT // 2 + dy)))

# ---------- Input ----------
def handle_events(controller: GameController, now_ms: Optional[int] = None) -> bool:
    """Forward key presses, stamped with now_ms, to the controller. Return False to quit."""
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            if event.key in KEY_DIRECTIONS:
                controller.press_direction(KEY_DIRECTIONS[event.key])
            elif event.key in START_KEYS:
                controller.press_start(now_ms)
            elif event.key in SELECT_KEYS:
                controller.press_select(now_ms)
    return True

# ---------- Draw ----------
def draw_splash(screen: pygame.Surface, font: pygame.font.Font, alpha: float) -> None:
    screen.fill(BG)
    title = font.render(SPLASH_TITLE, True, DARKEST)
    title.set_alpha(int(255 * max(0.0, min(1.0, alpha))))
    screen.blit(title, title.get_rect(center=(WIDTH // 2, HEIGHT // 2)))

def draw_menu(screen: pygame.Surface, font: pygame.font.Font) -> None:
    screen.fill(SCREEN)
    draw_centered(screen, font, "SNAKE", -24)
    draw_centered(screen, font, "Press START (Enter) to play", 16)

def draw_game(screen: pygame.Surface, font: pygame.font.Font, engine: SimulationEngine) -> None:
    screen.fill(SCREEN)
    pygame.draw.rect(screen, BG, pygame.Rect(0, 0, WIDTH, HUD_H))
    # food
    draw_cell(screen, engine.food[0], engine.food[1], FOOD)
    # snake, head drawn darker
    for i, (x, y) in enumerate(engine.snake):
        draw_cell(screen, x, y, DARKEST if i == 0 else DARK)
    # score
    txt = font.render(f"Score: {engine.score}", True, TEXT)
    screen.blit(txt, (8, 6))

def draw_paused(screen: pygame.Surface, font: pygame.font.Font) -> None:
    overlay = pygame.Surface((WIDTH, HEIGHT), pygame.SRCALPHA)
    overlay.fill((155, 188, 15, 160))
    screen.blit(overlay, (0, 0))
    draw_centered(screen, font, "PAUSED", -16)
    draw_centered(screen, font, "START to resume, SELECT for menu", 16)

def draw_game_over(screen: pygame.Surface, font: pygame.font.Font, score: int) -> None:
    screen.fill(SCREEN)
    draw_centered(screen, font, "GAME OVER", -32)
    draw_centered(screen, font, f"Score: {score}", 0)
    draw_centered(screen, font, "START: play again   SELECT: main menu", 32)
