from __future__ import annotations

import math
from typing import Iterable, Iterator

from numpy import random

from .tree import AVLMap


def ascending(n: int) -> Iterator[int]:
    return iter(range(n))


def descending(n: int) -> Iterator[int]:
    return iter(range(n - 1, -1, -1))


def zigzag(n: int) -> Iterator[int]:
    """Alternate between the lowest and highest remaining keys:
    0, n-1, 1, n-2, ...
    """
    lo = 0
    hi = n - 1
    while lo <= hi:
        yield lo
        if lo != hi:
            yield hi
        lo += 1
        hi -= 1


def shuffled(n: int, seed: int) -> Iterator[int]:
    rng = random.default_rng(seed)
    return iter(rng.permutation(n).tolist())


def height_bound(n: int) -> int:
    """Worst-case height of an AVL tree holding `n` keys."""
    return math.ceil(1.44 * math.log2(n + 2))


def build_map(keys: Iterable[int]) -> AVLMap[int, int]:
    tree: AVLMap[int, int] = AVLMap()
    for k in keys:
        tree.insert(k, k)
    return tree
