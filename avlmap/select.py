from __future__ import annotations

from typing import List, Tuple, TypeVar

from .tree import AVLMap

K = TypeVar("K")
V = TypeVar("V")


def top_k(tree: AVLMap[K, V], cnt: int) -> List[Tuple[K, V]]:
    """Return the `cnt` entries of `tree` with the largest values, largest
    first.

    Entries with equal values stay in ascending key order. If the tree holds
    fewer than `cnt` entries, all of them are returned.
    """
    if cnt < 0:
        raise ValueError("cnt must be non-negative, got {}".format(cnt))

    # to_vector() is already sorted by key and sorted() is stable, even
    # with reverse=True.
    items = sorted(tree.to_vector(), key=lambda kv: kv[1], reverse=True)
    return items[:cnt]
