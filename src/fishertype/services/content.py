from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable, Mapping

from jsonschema import Draft202012Validator

from fishertype.engine.types import FishCatalog, FishDefinition, WordEntry
from fishertype.engine.words import WordBank

logger = logging.getLogger("fishertype.content")


class ContentError(RuntimeError):
    pass


class MissingSourceError(ContentError):
    pass


def _load_json(path: Path, kind: str) -> object:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise MissingSourceError(f"Missing {kind}: {path}") from e
    except json.JSONDecodeError as e:
        raise ContentError(f"Invalid JSON in {kind} {path} (line {e.lineno}): {e.msg}") from e


def _location(path: Iterable[object]) -> str:
    # ["fish", 0, "level"] -> "fish[0].level"
    out = ""
    for p in path:
        out += f"[{p}]" if isinstance(p, int) else (f".{p}" if out else str(p))
    return out or "<root>"


def validate_json(instance: object, schema: object, *, context: str) -> None:
    validator = Draft202012Validator(schema)
    errors = sorted(validator.iter_errors(instance), key=lambda e: [str(p) for p in e.absolute_path])
    if errors:
        lines = [f"{context} failed schema validation ({len(errors)} error(s)):"]
        for err in errors[:10]:
            lines.append(f"- {_location(err.absolute_path)}: {err.message}")
        raise ContentError("\n".join(lines))


def _require_str(obj: Mapping[str, object], key: str, where: str) -> str:
    v = obj.get(key)
    if not isinstance(v, str):
        raise ContentError(f"{where}: expected string for {key}")
    return v


def _require_int(obj: Mapping[str, object], key: str, where: str) -> int:
    v = obj.get(key)
    if isinstance(v, bool) or not isinstance(v, int):
        raise ContentError(f"{where}: expected int for {key}")
    return v


def parse_word_rows(lines: Iterable[str]) -> list[WordEntry]:
    """Parse word-bank CSV rows.

    Format: a header row, then `level,display,romaji,display,romaji,...`.
    Fields are split on plain commas (no quoting) and trimmed. Rows whose
    level is not an integer are skipped, as are pairs with an empty half and
    a trailing field without a partner.
    """
    entries: list[WordEntry] = []
    seen_header = False
    for line in lines:
        if not line.strip():
            continue
        if not seen_header:
            seen_header = True
            continue
        fields = [f.strip() for f in line.split(",")]
        try:
            level = int(fields[0])
        except ValueError:
            logger.debug(f"Skipping row with non-integer level: {fields[0]!r}")
            continue
        if level < 1:
            logger.debug(f"Skipping row with level {level}")
            continue
        for i in range(1, len(fields) - 1, 2):
            display, romaji = fields[i], fields[i + 1]
            if display and romaji:
                entries.append(WordEntry(level=level, display_text=display, romanization=romaji))
    return entries


class ContentService:
    def __init__(self, data_dir: Path, schema_dir: Path) -> None:
        self._data_dir = data_dir
        self._schema_dir = schema_dir

    def load_word_bank(self, path: Path | None = None) -> WordBank:
        """Load the level-keyed word bank. A missing file yields an empty bank."""
        csv_path = path or self._data_dir / "words.csv"
        try:
            text = csv_path.read_text(encoding="utf-8-sig")
        except FileNotFoundError:
            logger.warning(f"Missing word bank: {csv_path}; continuing with an empty word bank")
            return WordBank()

        bank = WordBank.from_entries(parse_word_rows(text.splitlines()))
        logger.info(f"Loaded {len(bank)} words across levels {bank.levels()} from {csv_path}")
        return bank

    def load_fish(self) -> FishCatalog:
        path = self._data_dir / "fish.json"
        schema = _load_json(self._schema_dir / "fish.schema.json", "fish schema")
        raw = _load_json(path, "fish catalog")
        validate_json(raw, schema, context=f"Fish catalog {path}")

        if not isinstance(raw, dict):
            raise ContentError("fish.json must be an object")
        raw_fish = raw.get("fish")
        if not isinstance(raw_fish, list):
            raise ContentError("fish.json.fish must be a list")

        fish: dict[str, FishDefinition] = {}
        for i, item in enumerate(raw_fish):
            if not isinstance(item, dict):
                continue
            fish_id = _require_str(item, "id", f"fish[{i}]")
            where = f"fish {fish_id!r}"
            f = FishDefinition(
                id=fish_id,
                name=_require_str(item, "name", where),
                hp=_require_int(item, "hp", where),
                price=_require_int(item, "price", where),
                shadow_size=_require_int(item, "shadow_size", where),
                level=_require_int(item, "level", where),
                timer=_require_int(item, "timer", where),
            )
            if f.id in fish:
                raise ContentError(f"Duplicate fish id: {f.id}")
            fish[f.id] = f
        return FishCatalog(fish=fish)

    def validate_all(self) -> None:
        # Load is validation (schema + parse)
        catalog = self.load_fish()
        bank = self.load_word_bank()
        missing = sorted({f.level for f in catalog.fish.values()} - set(bank.levels()))
        if missing:
            logger.warning(f"No words authored for fish levels {missing}")
