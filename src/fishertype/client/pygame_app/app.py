from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Protocol

import pygame  # type: ignore[import-not-found]

from fishertype.engine.encounter import EncounterConfig
from fishertype.engine.types import FishCatalog
from fishertype.engine.words import WordBank
from fishertype.paths import Paths
from fishertype.services.content import ContentService
from fishertype.services.creel import Creel
from fishertype.services.telemetry import TelemetryService

from .asset_manager import AssetManager

logger = logging.getLogger("fishertype.client")


@dataclass
class SceneTransition:
    next_scene: "Scene"


class Scene(Protocol):
    def handle_event(self, event: pygame.event.Event) -> None: ...
    def update(self, dt: float) -> SceneTransition | None: ...
    def render(self, screen: pygame.Surface) -> None: ...


@dataclass
class GameContext:
    screen: pygame.Surface
    clock: pygame.time.Clock
    paths: Paths
    assets: AssetManager
    content: ContentService
    telemetry: TelemetryService
    config: EncounterConfig = field(default_factory=EncounterConfig)
    seed: Optional[int] = None
    words_path: Optional[str] = None

    # Loaded at boot
    words: Optional[WordBank] = None
    fish: Optional[FishCatalog] = None
    creel: Creel = field(default_factory=Creel)


class App:
    """Drives one scene at a time until the window closes."""

    def __init__(self, ctx: GameContext, initial_scene: Scene, fps: int = 60) -> None:
        self.ctx = ctx
        self.scene: Scene = initial_scene
        self.fps = fps
        self.running = True

    def step(self) -> None:
        dt = self.ctx.clock.tick(self.fps) / 1000.0
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                logger.info("Quit requested")
                self.running = False
                return
            self.scene.handle_event(event)

        tr = self.scene.update(dt)
        if tr is not None:
            logger.debug(f"Scene {type(self.scene).__name__} -> {type(tr.next_scene).__name__}")
            self.scene = tr.next_scene

        self.scene.render(self.ctx.screen)
        pygame.display.flip()

    def run(self) -> int:
        while self.running:
            self.step()
        return 0
