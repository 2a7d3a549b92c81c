"""Random sampling helpers used when filling case templates."""

import random
from typing import List, Optional, Sequence, TypeVar

T = TypeVar("T")


def get_random_items(items: Sequence[T], count: int, rng: Optional[random.Random] = None) -> List[T]:
    """Return ``count`` distinct items from ``items`` in random order.

    The whole pool is shuffled and the first ``count`` items are taken, so a
    ``count`` larger than the pool returns the entire pool.

    Args:
        items: Pool to sample from (not modified)
        count: Number of items wanted
        rng: Random source; the module-level generator when omitted

    Raises:
        ValueError: If ``count`` is negative
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    rng = rng or random
    shuffled = list(items)
    rng.shuffle(shuffled)
    return shuffled[:count]


def pick_one(items: Sequence[T], rng: Optional[random.Random] = None) -> T:
    """Return a single random item from a non-empty pool."""
    if not items:
        raise ValueError("Cannot pick from an empty pool")
    rng = rng or random
    return items[rng.randrange(len(items))]
