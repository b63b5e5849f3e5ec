#!/usr/bin/env python3
"""
Scoring utilities shared by the task and complement scorers.

Clamping, half-up rounding, skill tag comparison and stable ranking.
"""

import math
from typing import Callable, Iterable, List, TypeVar

T = TypeVar('T')

SUBSTRING = "substring"
EXACT = "exact"


def clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return max(low, min(high, value))


def round_score(value: float) -> int:
    """Round half away from zero (84.5 -> 85), never to even."""
    if value < 0:
        return -int(math.floor(-value + 0.5))
    return int(math.floor(value + 0.5))


def normalize_skill(tag: str) -> str:
    return tag.strip().casefold()


def skills_match(a: str, b: str, mode: str = SUBSTRING) -> bool:
    """
    Case-insensitive skill comparison.

    In substring mode either tag may contain the other, so "ai" also
    matches "pain". Use exact mode to avoid such false positives.
    """
    left, right = normalize_skill(a), normalize_skill(b)
    if not left or not right:
        return False
    if mode == EXACT:
        return left == right
    return left in right or right in left


def skill_set(tags: Iterable[str]) -> set:
    return {normalize_skill(t) for t in tags if normalize_skill(t)}


def stable_rank(items: Iterable[T], key: Callable[[T], float]) -> List[T]:
    """Sort descending by key; equal keys keep their input order."""
    # sorted() is stable, so negating the key preserves first-seen order on ties
    return sorted(items, key=lambda item: -key(item))
