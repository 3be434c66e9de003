import random
from typing import Optional, Sequence, TypeVar

T = TypeVar("T")


def pick_random(items: Sequence[T], count: int, rng: Optional[random.Random] = None) -> list[T]:
    """Return up to ``count`` elements of ``items`` in uniformly random order.

    The whole copy is shuffled before truncating, so every element is equally
    likely to land in every position. ``items`` itself is left untouched.
    """
    if count < 0:
        raise ValueError("count must be non-negative")

    shuffled = list(items)
    (rng or random).shuffle(shuffled)
    return shuffled[:count]
