from __future__ import annotations

from dataclasses import dataclass

from .variants import MAX_KEY_LENGTH, STANDARD_TABLE, VariantTable


@dataclass(frozen=True)
class Token:
    text: str
    variants: tuple[str, ...]


def tokenize(romanization: str, table: VariantTable = STANDARD_TABLE) -> list[Token]:
    """Split a romanization into morae by longest match against the table.

    Characters that start no known key become single-character tokens that
    only accept themselves.
    """
    text = romanization.lower()
    tokens: list[Token] = []
    pos = 0
    while pos < len(text):
        longest = min(MAX_KEY_LENGTH, len(text) - pos)
        for size in range(longest, 0, -1):
            key = text[pos : pos + size]
            variants = table.lookup(key)
            if variants is not None:
                tokens.append(Token(text=key, variants=variants))
                pos += size
                break
        else:
            ch = text[pos]
            tokens.append(Token(text=ch, variants=(ch,)))
            pos += 1
    return tokens


def expand(tokens: list[Token]) -> tuple[str, ...]:
    acc = [""]
    for token in tokens:
        if len(token.variants) == 1:
            only = token.variants[0]
            acc = [prefix + only for prefix in acc]
            continue
        acc = [prefix + v for prefix in acc for v in token.variants]
    return tuple(acc)


def generate_candidates(romanization: str, table: VariantTable = STANDARD_TABLE) -> tuple[str, ...]:
    """All full spellings of `romanization`, canonical spelling first."""
    return expand(tokenize(romanization, table))


def candidate_count(romanization: str, table: VariantTable = STANDARD_TABLE) -> int:
    n = 1
    for token in tokenize(romanization, table):
        n *= len(token.variants)
    return n
