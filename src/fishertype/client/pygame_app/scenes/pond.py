from __future__ import annotations

import logging
import random

import pygame  # type: ignore[import-not-found]

from fishertype.engine.encounter import Encounter
from fishertype.engine.types import Captured, FishDefinition, Target, TerminalEvent

from ..app import GameContext, SceneTransition
from ..ui import draw_bar, draw_progress, draw_text

logger = logging.getLogger("fishertype.client")

MISS_FLASH_SECONDS = 0.25


class PondScene:
    """Cast, hook, and type. SPACE casts while idle; ESC lets the line go."""

    def __init__(self, ctx: GameContext) -> None:
        assert ctx.words is not None and ctx.fish is not None
        self.ctx = ctx
        self.rng = random.Random(ctx.seed)
        self.encounter = Encounter(ctx.words, config=ctx.config, seed=ctx.seed, rng=self.rng)
        self.encounter.add_listener(self._on_terminal)

        self.message = "Press SPACE to cast."
        self._max_health = 0
        self._max_countdown = 0
        self._flash = 0.0
        self._logged = 0

    def _pick_fish(self) -> FishDefinition | None:
        assert self.ctx.fish is not None
        ids = self.ctx.fish.all_ids()
        if not ids:
            return None
        return self.ctx.fish.get(self.rng.choice(ids))

    def cast(self) -> bool:
        if self.encounter.state != "idle":
            return False
        fish = self._pick_fish()
        if fish is None:
            self.message = "Nothing is biting."
            return False
        target = Target.from_fish(fish)
        if not self.encounter.hook(target):
            self.message = f"The {fish.name} slipped off the hook. Cast again."
            return False
        self._max_health = target.health
        self._max_countdown = target.countdown
        self.message = f"A {fish.name} took the bait! Type it in!"
        return True

    def _on_terminal(self, event: TerminalEvent) -> None:
        self.ctx.creel.record(event)
        name = event.target.name or "fish"
        if isinstance(event, Captured):
            self.message = f"Caught the {name}! +{event.target.price} coins. SPACE to cast."
        else:
            self.message = f"The {name} got away... SPACE to cast."

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type != pygame.KEYDOWN:
            return
        if event.key == pygame.K_ESCAPE:
            if self.encounter.state == "presenting":
                self.encounter.reset()
                self.message = "You let the line go. SPACE to cast."
            return
        if self.encounter.state == "idle":
            if event.key == pygame.K_SPACE:
                self.cast()
            return

        ch = getattr(event, "unicode", "")
        if not ch or len(ch) != 1 or not ch.isprintable() or ch.isspace():
            return
        result = self.encounter.input(ch)
        if result.outcome == "miss":
            self._flash = MISS_FLASH_SECONDS

    def update(self, dt: float) -> SceneTransition | None:
        self._flash = max(0.0, self._flash - dt)
        log = self.encounter.event_log
        if self._logged < len(log):
            self.ctx.telemetry.log_many(log[self._logged :])
            self._logged = len(log)
        return None

    def render(self, screen: pygame.Surface) -> None:
        screen.fill((60, 20, 20) if self._flash > 0 else (12, 40, 70))
        fonts = self.ctx.assets.fonts
        w, h = screen.get_size()

        creel = self.ctx.creel
        draw_text(screen, fonts.ui, f"Creel: {len(creel.catches)} fish  Coins: {creel.coins}", (20, 20))
        draw_text(screen, fonts.ui, self.message, (20, h - 40))

        enc = self.encounter
        target = enc.target
        if enc.state != "presenting" or target is None:
            return

        shadow = self.ctx.assets.fish_shadow(target.shadow_size)
        screen.blit(shadow, (w // 2 - shadow.get_width() // 2, h // 2 + 80))

        draw_text(screen, fonts.big, f"{target.name} (Lv {target.level})", (20, 60))
        draw_text(screen, fonts.small, "HP", (20, 104))
        draw_bar(screen, pygame.Rect(60, 100, 240, 18), target.health, self._max_health, (220, 80, 80))
        draw_text(screen, fonts.small, "Line", (20, 128))
        draw_bar(screen, pygame.Rect(60, 124, 240, 18), target.countdown, self._max_countdown, (80, 160, 220))

        word = fonts.word.render(enc.display_text, True, (250, 250, 250))
        screen.blit(word, (w // 2 - word.get_width() // 2, h // 2 - 100))
        draw_progress(screen, fonts.big, enc.typed, enc.remaining, (w // 2, h // 2))
