"""Shuffle primitive used by the board generators."""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def shuffled(items: Sequence[T], rng: random.Random | None = None) -> list[T]:
    """Return a new list holding *items* in uniformly random order.

    *items* is left untouched. Pass a seeded ``random.Random`` to make the
    result reproducible.
    """
    rng = rng or random.Random()
    out = list(items)
    rng.shuffle(out)
    return out
