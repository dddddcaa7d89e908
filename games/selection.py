"""Round selection with an injectable random source."""

from typing import Callable, Sequence, TypeVar

T = TypeVar('T')

ALPHABET = 'ABCDEFGHIJKLMNOPQRSTUVWXYZ'


def item_id(item) -> str:
    """Identity used for repeat avoidance: the item's id, or the item itself."""
    return getattr(item, 'id', item)


def _choose(candidates: Sequence[T], rng: Callable[[], float]) -> T:
    index = int(rng() * len(candidates))
    # rng() is documented as [0, 1) but a sloppy source may return 1.0
    return candidates[min(max(index, 0), len(candidates) - 1)]


def pick(pool: Sequence[T], rng: Callable[[], float], last_item_id=None,
         allow_immediate_repeat: bool = False) -> T | None:
    """Pick the next challenge item from a pool.

    Returns None for an empty pool; the caller ends the session. When repeats
    are not allowed and the pool has more than one item, the item whose id is
    last_item_id is never returned.
    """
    if not pool:
        return None
    if allow_immediate_repeat or len(pool) == 1:
        return _choose(pool, rng)
    candidates = [item for item in pool if item_id(item) != last_item_id]
    return _choose(candidates or list(pool), rng)


def random_letter(rng: Callable[[], float]) -> str:
    """Pick an uppercase letter for Wordfall free mode."""
    return _choose(ALPHABET, rng)
