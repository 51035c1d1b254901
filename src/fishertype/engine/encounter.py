from __future__ import annotations

import logging
import random
from dataclasses import dataclass, replace
from typing import Callable, Iterable

from .candidates import generate_candidates
from .matcher import TypingMatcher
from .types import Captured, EncounterState, Escaped, MissPolicy, Outcome, Target, TerminalEvent, WordEntry
from .variants import STANDARD_TABLE, VariantTable
from .words import WordBank

logger = logging.getLogger("fishertype.encounter")

Event = dict[str, object]
Listener = Callable[[TerminalEvent], None]


@dataclass(frozen=True)
class EncounterConfig:
    hit_damage: int = 10
    miss_penalty: int = 1
    miss_policy: MissPolicy = "keep"


@dataclass
class InputResult:
    outcome: Outcome | None
    event: TerminalEvent | None = None


class Encounter:
    """One hooked-fish typing duel at a time.

    idle --hook--> presenting --(captured | escaped | reset)--> idle
    """

    def __init__(
        self,
        words: WordBank,
        table: VariantTable = STANDARD_TABLE,
        config: EncounterConfig | None = None,
        seed: int | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.words = words
        self.table = table
        self.config = config or EncounterConfig()
        self.seed = seed
        self.rng = rng or random.Random(seed)

        self.state: EncounterState = "idle"
        self.target: Target | None = None
        self.current_word: WordEntry | None = None
        self.matcher: TypingMatcher | None = None
        self.event_log: list[Event] = []
        self._listeners: list[Listener] = []

    # --- listeners -------------------------------------------------------

    def add_listener(self, callback: Listener) -> None:
        self._listeners.append(callback)

    def remove_listener(self, callback: Listener) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)

    # --- transitions -----------------------------------------------------

    def hook(self, target: Target | None) -> bool:
        if target is None:
            logger.info("hook() without a target, ignoring")
            return False

        entry = self.words.sample_random(target.level, self.rng)
        if entry is None:
            logger.warning(f"No words for level {target.level}, hook aborted")
            self._clear()
            return False

        self._clear()
        self.target = target
        self.state = "presenting"
        self.event_log.append(
            {
                "type": "HOOKED",
                "name": target.name,
                "level": target.level,
                "health": target.health,
                "countdown": target.countdown,
            }
        )
        logger.debug(f"Hooked {target.name or 'target'} (level {target.level})")
        self._present(entry)
        return True

    def input(self, char: str) -> InputResult:
        if self.state != "presenting" or self.matcher is None or self.target is None:
            logger.debug(f"Input {char!r} ignored while {self.state}")
            return InputResult(outcome=None)
        if len(char) != 1:
            return InputResult(outcome=None)

        target = self.target
        outcome = self.matcher.submit(char)

        if outcome == "miss":
            target.countdown -= self.config.miss_penalty
            self.event_log.append({"type": "KEY_MISSED", "char": char, "countdown": target.countdown})
            if target.countdown <= 0:
                return InputResult(outcome="miss", event=self._finish(Escaped(target)))
            return InputResult(outcome="miss")

        if outcome == "hit":
            self.event_log.append({"type": "KEY_HIT", "char": char})
            return InputResult(outcome="hit")

        target.health -= self.config.hit_damage
        assert self.current_word is not None
        self.event_log.append(
            {
                "type": "WORD_COMPLETED",
                "display_text": self.current_word.display_text,
                "typed": self.matcher.typed,
                "health": target.health,
            }
        )
        if target.health <= 0:
            return InputResult(outcome="complete", event=self._finish(Captured(target)))

        entry = self.words.sample_random(target.level, self.rng)
        if entry is None:
            # bank is immutable, so this only happens if it was swapped mid-encounter
            logger.warning(f"No further words for level {target.level}, resetting")
            self._clear()
            return InputResult(outcome="complete")
        self._present(entry)
        return InputResult(outcome="complete")

    def reset(self) -> None:
        if self.state != "idle":
            self.event_log.append({"type": "RESET"})
            logger.debug("Encounter reset")
        self._clear()

    # --- presentation ----------------------------------------------------

    @property
    def display_text(self) -> str:
        return self.current_word.display_text if self.current_word is not None else ""

    @property
    def typed(self) -> str:
        return self.matcher.typed if self.matcher is not None else ""

    @property
    def remaining(self) -> str:
        return self.matcher.remaining if self.matcher is not None else ""

    # --- internals -------------------------------------------------------

    def _present(self, entry: WordEntry) -> None:
        candidates = generate_candidates(entry.romanization, self.table)
        self.current_word = entry
        self.matcher = TypingMatcher(candidates, miss_policy=self.config.miss_policy)
        self.event_log.append(
            {
                "type": "WORD_PRESENTED",
                "display_text": entry.display_text,
                "romanization": entry.romanization,
                "candidates": len(candidates),
            }
        )

    def _finish(self, event: TerminalEvent) -> TerminalEvent:
        target = event.target
        kind = "CAPTURED" if isinstance(event, Captured) else "ESCAPED"
        self.event_log.append({"type": kind, "name": target.name, "price": target.price})
        logger.info(f"{target.name or 'Target'} {kind.lower()}")
        self._clear()
        for cb in list(self._listeners):
            cb(event)
        return event

    def _clear(self) -> None:
        self.state = "idle"
        self.target = None
        self.current_word = None
        self.matcher = None


def replay(
    words: WordBank,
    target: Target,
    seed: int,
    keys: Iterable[str],
    table: VariantTable = STANDARD_TABLE,
    config: EncounterConfig | None = None,
) -> Encounter:
    """Rebuild an encounter from a seed and the keys typed, on a copy of `target`."""
    enc = Encounter(words, table=table, config=config, seed=seed)
    enc.hook(replace(target))
    for k in keys:
        enc.input(k)
        if enc.state == "idle":
            break
    return enc
