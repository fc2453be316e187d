"""Random selection helpers with an injectable random source.

Every generator in the package takes an optional ``rng`` argument. Passing a
seeded ``random.Random`` makes draws reproducible; omitting it uses a
process-wide instance seeded from system entropy.
"""

from __future__ import annotations

import random
from typing import Protocol, Sequence, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    """Minimal capability the helpers need: a uniform integer in ``[0, stop)``."""

    def randrange(self, stop: int) -> int: ...


_DEFAULT_RNG = random.Random()


def _resolve_rng(rng: RandomSource | None) -> RandomSource:
    return _DEFAULT_RNG if rng is None else rng


def pick_random(items: Sequence[T], rng: RandomSource | None = None) -> T:
    """Return one element chosen uniformly from ``items``.

    Args:
        items: Non-empty sequence.
        rng: Optional random source.

    Returns:
        The selected element.

    Raises:
        ValueError: If ``items`` is empty.
    """

    if not items:
        raise ValueError("Cannot pick from an empty collection.")
    return items[_resolve_rng(rng).randrange(len(items))]


def shuffle(items: Sequence[T], rng: RandomSource | None = None) -> list[T]:
    """Return a uniformly shuffled copy of ``items`` (Fisher–Yates).

    The input sequence is left untouched.

    Args:
        items: Sequence to shuffle; may be empty.
        rng: Optional random source.

    Returns:
        New list holding the same elements in random order.
    """

    source = _resolve_rng(rng)
    result = list(items)
    for i in range(len(result) - 1, 0, -1):
        j = source.randrange(i + 1)
        result[i], result[j] = result[j], result[i]
    return result
