from __future__ import annotations

from dataclasses import dataclass, field

from fishertype.engine.types import Captured, Escaped, TerminalEvent


@dataclass(frozen=True)
class CatchRecord:
    name: str
    level: int
    price: int


@dataclass
class Creel:
    """Fish caught this session. Nothing here outlives the process."""

    catches: list[CatchRecord] = field(default_factory=list)
    escaped: int = 0

    @property
    def coins(self) -> int:
        return sum(c.price for c in self.catches)

    def record(self, event: TerminalEvent) -> None:
        if isinstance(event, Captured):
            t = event.target
            self.catches.append(CatchRecord(name=t.name, level=t.level, price=t.price))
        elif isinstance(event, Escaped):
            self.escaped += 1

    def counts_by_name(self) -> dict[str, int]:
        out: dict[str, int] = {}
        for c in self.catches:
            out[c.name] = out.get(c.name, 0) + 1
        return dict(sorted(out.items()))
