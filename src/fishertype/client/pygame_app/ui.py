from __future__ import annotations

import pygame  # type: ignore[import-not-found]


Color = tuple[int, int, int]

TYPED_COLOR: Color = (120, 220, 140)
REMAINING_COLOR: Color = (200, 200, 200)


def draw_text(
    screen: pygame.Surface,
    font: pygame.font.Font,
    text: str,
    pos: tuple[int, int],
    color: Color = (240, 240, 240),
) -> None:
    img = font.render(text, True, color)
    screen.blit(img, pos)


def draw_bar(
    screen: pygame.Surface,
    rect: pygame.Rect,
    current: int,
    maximum: int,
    color: Color,
) -> None:
    pygame.draw.rect(screen, (30, 30, 30), rect, border_radius=4)
    if maximum > 0 and current > 0:
        filled = rect.copy()
        filled.width = int(rect.width * min(current, maximum) / maximum)
        pygame.draw.rect(screen, color, filled, border_radius=4)
    pygame.draw.rect(screen, (0, 0, 0), rect, width=2, border_radius=4)


def draw_progress(
    screen: pygame.Surface,
    font: pygame.font.Font,
    typed: str,
    remaining: str,
    center: tuple[int, int],
) -> None:
    """Typed part and remaining part of the current spelling, side by side."""
    left = font.render(typed, True, TYPED_COLOR)
    right = font.render(remaining, True, REMAINING_COLOR)
    total = left.get_width() + right.get_width()
    x = center[0] - total // 2
    y = center[1] - left.get_height() // 2
    screen.blit(left, (x, y))
    screen.blit(right, (x + left.get_width(), y))
