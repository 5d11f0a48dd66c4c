from __future__ import annotations

"""Seeded, reproducible shuffling of the catalog.

The permutation is produced by :meth:`random.Random.shuffle` (a Fisher–Yates
shuffle) on a private ``random.Random`` instance seeded with the integer week
anchor, i.e. CPython's Mersenne Twister (MT19937). Integer seeding and
``shuffle`` are stable across CPython releases, so a given seed and input
order always yield the same output order. The global ``random`` state is
never touched.
"""

import random
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def seeded_shuffle(items: Sequence[T], seed: int) -> list[T]:
    """Return a new list holding ``items`` in the order dictated by ``seed``."""

    shuffled = list(items)
    random.Random(seed).shuffle(shuffled)
    return shuffled
