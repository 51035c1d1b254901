from __future__ import annotations

import random
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from .types import WordEntry


@dataclass(frozen=True)
class WordBank:
    """Immutable level -> words mapping. Order within a level is load order."""

    by_level: dict[int, tuple[WordEntry, ...]] = field(default_factory=dict)

    @staticmethod
    def from_entries(entries: Iterable[WordEntry]) -> "WordBank":
        grouped: dict[int, list[WordEntry]] = {}
        for e in entries:
            grouped.setdefault(e.level, []).append(e)
        return WordBank(by_level={lvl: tuple(lst) for lvl, lst in grouped.items()})

    def entries(self, level: int) -> Sequence[WordEntry]:
        return self.by_level.get(level, ())

    def levels(self) -> list[int]:
        return sorted(self.by_level.keys())

    def sample_random(self, level: int, rng: random.Random) -> WordEntry | None:
        words = self.by_level.get(level)
        if not words:
            return None
        return rng.choice(words)

    def __len__(self) -> int:
        return sum(len(v) for v in self.by_level.values())
