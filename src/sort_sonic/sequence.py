"""Sequence generation for the sorting runs."""

from __future__ import annotations

import random
from typing import Optional, Sequence


def create_random_sequence(n: int, rng: Optional[random.Random] = None) -> list[int]:
    """Return the integers 1..n in a uniformly shuffled order."""
    if n < 1:
        raise ValueError(f"sequence length must be positive, got {n}")
    values = list(range(1, n + 1))
    (rng or random.Random()).shuffle(values)
    return values


def is_permutation(values: Sequence[int]) -> bool:
    return sorted(values) == list(range(1, len(values) + 1))
