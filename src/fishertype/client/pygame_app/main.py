from __future__ import annotations

import argparse
import logging

import pygame  # type: ignore[import-not-found]

from fishertype.engine.encounter import EncounterConfig
from fishertype.paths import get_paths
from fishertype.services.content import ContentService
from fishertype.services.telemetry import TelemetryService

from .app import App, GameContext
from .asset_manager import AssetManager
from .scenes.boot import BootScene


def main() -> int:
    parser = argparse.ArgumentParser(prog="fishertype")
    parser.add_argument("--width", type=int, default=1024)
    parser.add_argument("--height", type=int, default=768)
    parser.add_argument("--fps", type=int, default=60)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--words", default=None, help="path to a word bank CSV")
    parser.add_argument("--miss-policy", choices=("keep", "reset"), default="keep")
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    pygame.init()
    screen = pygame.display.set_mode((args.width, args.height))
    pygame.display.set_caption("FisherType")

    clock = pygame.time.Clock()
    paths = get_paths()

    ctx = GameContext(
        screen=screen,
        clock=clock,
        paths=paths,
        assets=AssetManager(),
        content=ContentService(data_dir=paths.data_dir, schema_dir=paths.schema_dir),
        telemetry=TelemetryService(paths.userdata_dir / "telemetry.jsonl", session=str(args.seed or "")),
        config=EncounterConfig(miss_policy=args.miss_policy),
        seed=args.seed,
        words_path=args.words,
    )

    app = App(ctx, BootScene(ctx), fps=args.fps)
    return app.run()


if __name__ == "__main__":
    raise SystemExit(main())
