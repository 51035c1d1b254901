from __future__ import annotations

from dataclasses import dataclass

import pygame  # type: ignore[import-not-found]

# System fonts that can render kana, tried in order.
JAPANESE_FONTS = "notosanscjkjp,notosansjp,ipagothic,takaogothic,msgothic,hiraginosans,yugothic"


@dataclass
class Fonts:
    ui: pygame.font.Font
    small: pygame.font.Font
    big: pygame.font.Font
    word: pygame.font.Font


class AssetManager:
    """Fonts and procedurally drawn fish shadows. No image files are needed."""

    def __init__(self) -> None:
        self._cache: dict[int, pygame.Surface] = {}

        pygame.font.init()
        self.fonts = Fonts(
            ui=pygame.font.SysFont(None, 24),
            small=pygame.font.SysFont(None, 18),
            big=pygame.font.SysFont(None, 34),
            word=pygame.font.SysFont(JAPANESE_FONTS, 48),
        )

    def fish_shadow(self, shadow_size: int) -> pygame.Surface:
        size = max(1, min(5, shadow_size))
        if size in self._cache:
            return self._cache[size]
        w, h = 40 + size * 28, 16 + size * 10
        surf = pygame.Surface((w + h // 2, h), pygame.SRCALPHA)
        pygame.draw.ellipse(surf, (10, 20, 40, 170), pygame.Rect(0, 0, w, h))
        tail = [(w - 4, h // 2), (w + h // 2, 0), (w + h // 2, h)]
        pygame.draw.polygon(surf, (10, 20, 40, 170), tail)
        self._cache[size] = surf
        return surf
