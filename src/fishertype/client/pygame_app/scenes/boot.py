from __future__ import annotations

import logging
import traceback
from pathlib import Path

import pygame  # type: ignore[import-not-found]

from fishertype.services.content import ContentError
from ..app import GameContext, SceneTransition
from ..ui import draw_text
from .pond import PondScene

logger = logging.getLogger("fishertype.client")


class BootScene:
    def __init__(self, ctx: GameContext) -> None:
        self.ctx = ctx
        self._did_boot = False
        self._error: str | None = None

    def handle_event(self, event: pygame.event.Event) -> None:
        if self._error is not None and event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            pygame.event.post(pygame.event.Event(pygame.QUIT))

    def update(self, dt: float) -> SceneTransition | None:
        if self._did_boot:
            return None
        self._did_boot = True
        try:
            self.ctx.fish = self.ctx.content.load_fish()
            words_path = Path(self.ctx.words_path) if self.ctx.words_path else None
            self.ctx.words = self.ctx.content.load_word_bank(words_path)
            self.ctx.telemetry.log(
                "boot", {"ok": True, "words": len(self.ctx.words), "fish": len(self.ctx.fish.fish)}
            )
            return SceneTransition(PondScene(self.ctx))
        except ContentError as e:
            logger.error(f"Boot failed: {e}")
            tb = traceback.format_exc(limit=8)
            self._error = f"{e}\n\n{tb}"
            self.ctx.telemetry.log("boot", {"ok": False, "error": str(e)})
            return None

    def render(self, screen: pygame.Surface) -> None:
        screen.fill((8, 16, 28))
        font = self.ctx.assets.fonts.big
        draw_text(screen, font, "FisherType", (20, 20))

        font2 = self.ctx.assets.fonts.ui
        if self._error is None:
            draw_text(screen, font2, "Loading fish and words...", (20, 80))
        else:
            draw_text(screen, font2, "BOOT ERROR (press Esc to quit)", (20, 80), color=(240, 80, 80))
            y = 120
            for line in self._error.splitlines()[:22]:
                draw_text(screen, self.ctx.assets.fonts.small, line[:120], (20, y), color=(230, 230, 230))
                y += 18
