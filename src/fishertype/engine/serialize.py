from __future__ import annotations


from .encounter import Encounter
from .matcher import TypingMatcher
from .types import Target


def _target_to_dict(t: Target | None) -> dict[str, object] | None:
    if t is None:
        return None
    return {
        "name": t.name,
        "level": t.level,
        "health": t.health,
        "countdown": t.countdown,
        "price": t.price,
    }


def _matcher_to_dict(m: TypingMatcher | None) -> dict[str, object] | None:
    if m is None:
        return None
    return {
        "candidates": list(m.candidates),
        "live": list(m.live),
        "cursors": list(m.cursors),
        "typed": m.typed,
        "remaining": m.remaining,
    }


def snapshot(enc: Encounter) -> dict[str, object]:
    """Return a JSON-serializable canonical snapshot of the encounter."""
    word = enc.current_word
    return {
        "seed": enc.seed,
        "state": enc.state,
        "target": _target_to_dict(enc.target),
        "word": None if word is None else {
            "level": word.level,
            "display_text": word.display_text,
            "romanization": word.romanization,
        },
        "matcher": _matcher_to_dict(enc.matcher),
        "event_log": [dict(ev) for ev in enc.event_log],
    }
