"""Romanization variant table.

Maps a mora key (1-3 lowercase ASCII characters) to every spelling a player
may type for it. The key itself is always the first spelling, so joining the
first spelling of each token reproduces the canonical romanization.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

MAX_KEY_LENGTH = 3

VOWELS = "aiueo"
SMALL_TSU = ("xtu", "ltu")
GEMINATE_ONSETS = "kstcpgzdbhfjmr"


@dataclass(frozen=True)
class VariantTable:
    """Immutable mora-key -> spellings lookup."""

    entries: Mapping[str, tuple[str, ...]]

    def lookup(self, key: str) -> tuple[str, ...] | None:
        return self.entries.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def keys(self) -> list[str]:
        return list(self.entries.keys())

    @staticmethod
    def from_mapping(raw: Mapping[str, Iterable[str]]) -> "VariantTable":
        frozen: dict[str, tuple[str, ...]] = {}
        for key, spellings in raw.items():
            if not key or len(key) > MAX_KEY_LENGTH:
                raise ValueError(f"Variant key must be 1-{MAX_KEY_LENGTH} characters: {key!r}")
            if key != key.lower():
                raise ValueError(f"Variant key must be lowercase: {key!r}")
            variants = tuple(spellings)
            if not variants:
                raise ValueError(f"No spellings for {key!r}")
            if variants[0] != key:
                raise ValueError(f"First spelling of {key!r} must be the key itself")
            if len(set(variants)) != len(variants):
                raise ValueError(f"Duplicate spellings for {key!r}")
            if any(not v for v in variants):
                raise ValueError(f"Empty spelling for {key!r}")
            for v in variants:
                if any(w != v and w.startswith(v) for w in variants):
                    raise ValueError(f"Spelling {v!r} of {key!r} is a prefix of another spelling")
            frozen[key] = variants
        return VariantTable(entries=MappingProxyType(frozen))


def _alias_group(*spellings: str) -> dict[str, tuple[str, ...]]:
    # Every spelling in the group becomes a key listing itself first.
    out: dict[str, tuple[str, ...]] = {}
    for s in spellings:
        out[s] = (s,) + tuple(x for x in spellings if x != s)
    return out


def _plain(*keys: str) -> dict[str, tuple[str, ...]]:
    return {k: (k,) for k in keys}


def _row(consonant: str) -> dict[str, tuple[str, ...]]:
    return _plain(*(consonant + v for v in VOWELS))


def _palatal(consonant: str) -> dict[str, tuple[str, ...]]:
    return _plain(consonant + "ya", consonant + "yu", consonant + "yo")


def _base_variants() -> dict[str, tuple[str, ...]]:
    table: dict[str, tuple[str, ...]] = {}

    # vowels
    table.update(_plain("a", "e", "o"))
    table["i"] = ("i", "yi")
    table["u"] = ("u", "wu", "whu")

    # plain rows
    for consonant in ("k", "s", "t", "n", "h", "m", "r", "g", "z", "d", "b", "p"):
        table.update(_row(consonant))
    table.update(_plain("ya", "yu", "yo", "wa", "wo"))
    table["ka"] = ("ka", "ca")
    table["ku"] = ("ku", "cu", "qu")
    table["ko"] = ("ko", "co")
    table["se"] = ("se", "ce")
    table.update(_alias_group("si", "shi", "ci"))
    table.update(_alias_group("ti", "chi"))
    table.update(_alias_group("tu", "tsu"))
    table.update(_alias_group("hu", "fu"))
    table.update(_alias_group("zi", "ji"))
    table.update(_plain("fa", "fi", "fe", "fo", "thi", "dhi", "twu", "dwu"))

    # moraic n; "nn" is typed as n followed by n
    table["n"] = ("n", "xn")

    # palatalized
    for consonant in ("k", "n", "h", "m", "r", "g", "b", "p", "d"):
        table.update(_palatal(consonant))
    table.update(_alias_group("sya", "sha"))
    table.update(_alias_group("syu", "shu"))
    table.update(_alias_group("syo", "sho"))
    table.update(_alias_group("sye", "she"))
    table.update(_alias_group("tya", "cha", "cya"))
    table.update(_alias_group("tyu", "chu", "cyu"))
    table.update(_alias_group("tyo", "cho", "cyo"))
    table.update(_alias_group("tye", "che", "cye"))
    table.update(_alias_group("zya", "ja", "jya"))
    table.update(_alias_group("zyu", "ju", "jyu"))
    table.update(_alias_group("zyo", "jo", "jyo"))
    table.update(_alias_group("zye", "je", "jye"))

    # small letters
    for v in VOWELS:
        table.update(_alias_group("x" + v, "l" + v))
    for v in ("a", "u", "o"):
        table.update(_alias_group("xy" + v, "ly" + v))
    table.update(_alias_group("xtu", "ltu"))
    table.update(_alias_group("xwa", "lwa"))

    # punctuation
    table.update(_plain("-", ",", ".", "!", "?", "~"))
    return table


def _with_geminates(base: dict[str, tuple[str, ...]]) -> dict[str, tuple[str, ...]]:
    table = dict(base)
    for key, spellings in base.items():
        if len(key) != 2 or key[0] not in GEMINATE_ONSETS or key[1] not in VOWELS:
            continue
        doubled = key[0] + key
        if doubled in table:
            continue
        variants = [s[0] + s for s in spellings]
        variants += [tsu + s for tsu in SMALL_TSU for s in spellings]
        table[doubled] = tuple(dict.fromkeys(variants))
    return table


STANDARD_TABLE = VariantTable.from_mapping(_with_geminates(_base_variants()))
