"""Deterministic k-subset enumeration.

Brute force: C(n, k) subsets are produced. This is only tractable because a
booking is capped at 5 rooms and the whole hotel has 97 rooms. Allocation
tie-breaking depends on the exact order produced here, so do not swap in a
pruned or reordered search.
"""

from itertools import combinations
from typing import Iterator, List, Sequence, TypeVar

T = TypeVar("T")


def iter_combinations(items: Sequence[T], k: int) -> Iterator[List[T]]:
    """Yield every k-subset of items, preferring to include earlier items first.

    Equivalent to recursively including the head item (k - 1 left) before
    excluding it: the first subset is items[:k], and subsets come out in
    lexicographic order of input position.
    """
    if k < 0:
        return
    for combo in combinations(items, k):
        yield list(combo)


def get_combinations(items: Sequence[T], k: int) -> List[List[T]]:
    """Materialized list of iter_combinations(items, k)."""
    return list(iter_combinations(items, k))
