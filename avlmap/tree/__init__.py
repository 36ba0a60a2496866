from .node import (
    AVLNode,
    height,
    update_height,
    balance_factor,
    rotate_left,
    rotate_right,
    rebalance,
)
from .avl import AVLMap, TreeIntegrityError

__all__ = [
    "AVLNode",
    "AVLMap",
    "TreeIntegrityError",
    "height",
    "update_height",
    "balance_factor",
    "rotate_left",
    "rotate_right",
    "rebalance",
]
