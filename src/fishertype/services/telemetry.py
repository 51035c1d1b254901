from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, Mapping


@dataclass
class TelemetryService:
    """Append-only JSON-lines log of encounter events."""

    path: Path
    session: str = ""

    def log(self, event_type: str, payload: Mapping[str, object]) -> None:
        self.log_many([{"type": event_type, **payload}])

    def log_many(self, events: Iterable[Mapping[str, object]]) -> int:
        ts = datetime.now(tz=timezone.utc).isoformat()
        lines = []
        for ev in events:
            body = dict(ev)
            rec = {"ts": ts, "session": self.session, "type": body.pop("type", "unknown"), "payload": body}
            lines.append(json.dumps(rec, ensure_ascii=False))
        if not lines:
            return 0
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("a", encoding="utf-8") as f:
            f.write("\n".join(lines) + "\n")
        return len(lines)
