from __future__ import annotations

from collections.abc import Sequence

from .types import MissPolicy, Outcome


class TypingMatcher:
    """Character-by-character matcher over a set of equivalent spellings.

    Each live candidate keeps its own cursor. A keystroke advances every
    candidate that expects it; candidates whose character just before their
    cursor is not the typed character are then dropped. Survivors are not
    required to share a cursor, since spellings of one word differ in length.
    """

    def __init__(self, candidates: Sequence[str], miss_policy: MissPolicy = "keep") -> None:
        if not candidates:
            raise ValueError("TypingMatcher needs at least one candidate.")
        self._all = tuple(candidates)
        self.miss_policy: MissPolicy = miss_policy
        self.live: list[str] = list(self._all)
        self.cursors: list[int] = [0] * len(self._all)
        self._anchor = 0

    def submit(self, char: str) -> Outcome:
        ch = char.lower()
        anchor: int | None = None
        for i, cand in enumerate(self.live):
            cur = self.cursors[i]
            if cur < len(cand) and cand[cur] == ch:
                self.cursors[i] = cur + 1
                if anchor is None:
                    anchor = i

        if anchor is None:
            if self.miss_policy == "reset":
                self.rewind()
            return "miss"

        anchor_text = self.live[anchor]
        for i in range(len(self.live) - 1, -1, -1):
            cand = self.live[i]
            cur = self.cursors[i]
            if cur == 0 or cur > len(cand) or cand[cur - 1] != ch:
                del self.live[i]
                del self.cursors[i]
        # the anchor always survives: it just consumed `ch`
        self._anchor = self.live.index(anchor_text)

        if self.is_complete:
            return "complete"
        return "hit"

    def rewind(self) -> None:
        self.live = list(self._all)
        self.cursors = [0] * len(self._all)
        self._anchor = 0

    @property
    def candidates(self) -> tuple[str, ...]:
        return self._all

    @property
    def is_complete(self) -> bool:
        return any(cur == len(cand) for cand, cur in zip(self.live, self.cursors))

    @property
    def anchor(self) -> str:
        return self.live[self._anchor]

    @property
    def typed(self) -> str:
        return self.anchor[: self.cursors[self._anchor]]

    @property
    def remaining(self) -> str:
        return self.anchor[self.cursors[self._anchor] :]
