from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal

Outcome = Literal["hit", "miss", "complete"]
MissPolicy = Literal["keep", "reset"]
EncounterState = Literal["idle", "presenting"]


@dataclass(frozen=True)
class WordEntry:
    level: int
    display_text: str
    romanization: str


@dataclass(frozen=True)
class FishDefinition:
    id: str
    name: str
    hp: int
    price: int
    shadow_size: int
    level: int
    timer: int


@dataclass(frozen=True)
class FishCatalog:
    """Immutable fish definitions, keyed by id."""

    fish: dict[str, FishDefinition]

    def get(self, fish_id: str) -> FishDefinition:
        return self.fish[fish_id]

    def all_ids(self) -> Sequence[str]:
        return list(self.fish.keys())


@dataclass
class Target:
    """The hooked fish. Only the encounter mutates health and countdown."""

    level: int
    health: int
    countdown: int
    name: str = ""
    price: int = 0
    shadow_size: int = 1

    @staticmethod
    def from_fish(fish: FishDefinition) -> "Target":
        return Target(
            level=fish.level,
            health=fish.hp,
            countdown=fish.timer,
            name=fish.name,
            price=fish.price,
            shadow_size=fish.shadow_size,
        )


@dataclass(frozen=True)
class Captured:
    target: Target


@dataclass(frozen=True)
class Escaped:
    target: Target


TerminalEvent = Captured | Escaped
