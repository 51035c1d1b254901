from __future__ import annotations

import json
import os
from pathlib import Path
from types import SimpleNamespace

# Headless: no window is ever opened by these tests.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame  # type: ignore[import-not-found]  # noqa: E402

from fishertype.client.pygame_app.scenes.pond import PondScene  # noqa: E402
from fishertype.engine.encounter import EncounterConfig  # noqa: E402
from fishertype.engine.types import FishCatalog, FishDefinition, WordEntry  # noqa: E402
from fishertype.engine.words import WordBank  # noqa: E402
from fishertype.services.creel import Creel  # noqa: E402
from fishertype.services.telemetry import TelemetryService  # noqa: E402


def _scene(tmp_path: Path, hp: int = 10, timer: int = 3) -> PondScene:
    words = WordBank.from_entries([WordEntry(level=1, display_text="ねこ", romanization="neko")])
    fish = FishCatalog(
        fish={"funa": FishDefinition(id="funa", name="Crucian Carp", hp=hp, price=30, shadow_size=1, level=1, timer=timer)}
    )
    ctx = SimpleNamespace(
        words=words,
        fish=fish,
        config=EncounterConfig(),
        seed=3,
        creel=Creel(),
        telemetry=TelemetryService(tmp_path / "telemetry.jsonl"),
    )
    return PondScene(ctx)  # type: ignore[arg-type]


def _key(ch: str, key: int | None = None) -> pygame.event.Event:
    return pygame.event.Event(pygame.KEYDOWN, key=ord(ch) if key is None else key, unicode=ch)


def test_space_casts_and_typing_catches(tmp_path: Path) -> None:
    scene = _scene(tmp_path)
    scene.handle_event(_key("n"))  # ignored while idle
    assert scene.encounter.state == "idle"

    scene.handle_event(_key(" ", pygame.K_SPACE))
    assert scene.encounter.state == "presenting"
    assert scene.encounter.display_text == "ねこ"

    for ch in "neko":
        scene.handle_event(_key(ch))

    assert scene.encounter.state == "idle"
    assert len(scene.ctx.creel.catches) == 1
    assert scene.ctx.creel.coins == 30
    assert "Caught" in scene.message

    scene.update(0.016)
    lines = (tmp_path / "telemetry.jsonl").read_text(encoding="utf-8").splitlines()
    types = [json.loads(line)["type"] for line in lines]
    assert types[0] == "HOOKED"
    assert types[-1] == "CAPTURED"


def test_misses_let_the_fish_escape(tmp_path: Path) -> None:
    scene = _scene(tmp_path, timer=2)
    scene.handle_event(_key(" ", pygame.K_SPACE))
    scene.handle_event(_key("x"))
    assert scene._flash > 0
    scene.handle_event(_key("x"))
    assert scene.encounter.state == "idle"
    assert scene.ctx.creel.escaped == 1
    assert scene.ctx.creel.catches == []


def test_escape_key_lets_the_line_go(tmp_path: Path) -> None:
    scene = _scene(tmp_path)
    scene.handle_event(_key(" ", pygame.K_SPACE))
    scene.handle_event(_key("\x1b", pygame.K_ESCAPE))
    assert scene.encounter.state == "idle"
    assert scene.ctx.creel.escaped == 0
