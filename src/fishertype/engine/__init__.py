"""Headless typing-match engine for FisherType.

IMPORTANT: This package must never import pygame.
"""

from .candidates import generate_candidates, tokenize
from .encounter import Encounter, EncounterConfig, InputResult, replay
from .matcher import TypingMatcher
from .types import Captured, Escaped, Outcome, Target, WordEntry
from .variants import STANDARD_TABLE, VariantTable
from .words import WordBank

__all__ = [
    "Captured",
    "Encounter",
    "EncounterConfig",
    "Escaped",
    "InputResult",
    "Outcome",
    "STANDARD_TABLE",
    "Target",
    "TypingMatcher",
    "VariantTable",
    "WordBank",
    "WordEntry",
    "generate_candidates",
    "replay",
    "tokenize",
]
