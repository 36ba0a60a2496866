from __future__ import annotations

import copy
from typing import Generic, TypeVar, Optional

K = TypeVar("K")
V = TypeVar("V")


class AVLNode(Generic[K, V]):
    __slots__ = ("key", "value", "left", "right", "height")

    def __init__(self, key: K, value: V):
        self.key: K = key
        self.value: V = value
        self.left: Optional[AVLNode[K, V]] = None
        self.right: Optional[AVLNode[K, V]] = None
        self.height: int = 1

    def clone(self, memo: Optional[dict] = None) -> AVLNode[K, V]:
        """Copy this node and everything below it.

        Nodes are cloned in pre-order and values are deep-copied, so the copy
        shares nothing mutable with this one. Cached heights are carried over
        as-is.
        """
        if memo is None:
            memo = {}
        ret = AVLNode(self.key, copy.deepcopy(self.value, memo))
        if self.left is not None:
            ret.left = self.left.clone(memo)
        if self.right is not None:
            ret.right = self.right.clone(memo)
        ret.height = self.height
        return ret

    def min_node(self) -> AVLNode[K, V]:
        cur = self
        while cur.left is not None:
            cur = cur.left
        return cur

    def max_node(self) -> AVLNode[K, V]:
        cur = self
        while cur.right is not None:
            cur = cur.right
        return cur

    def to_vector(self, out: list):
        if self.left is not None:
            self.left.to_vector(out)
        out.append((self.key, self.value))
        if self.right is not None:
            self.right.to_vector(out)

    def print(self, level: int) -> str:
        ret = ""
        if self.right is not None:
            ret = self.right.print(level + 1)

        ret += ("    " * level) + "{} : {}\n".format(self.key, self.value)

        if self.left is not None:
            ret += self.left.print(level + 1)

        return ret

    def __repr__(self) -> str:
        return "AVLNode({!r}, {!r}, height={})".format(
            self.key, self.value, self.height
        )


def height(node: Optional[AVLNode]) -> int:
    return node.height if node is not None else 0


def update_height(node: AVLNode):
    node.height = 1 + max(height(node.left), height(node.right))


def balance_factor(node: Optional[AVLNode]) -> int:
    if node is None:
        return 0
    return height(node.left) - height(node.right)


def rotate_right(y: AVLNode[K, V]) -> AVLNode[K, V]:
    x = y.left
    y.left = x.right
    x.right = y

    # y is now below x, so its height has to be fixed first
    update_height(y)
    update_height(x)
    return x


def rotate_left(x: AVLNode[K, V]) -> AVLNode[K, V]:
    y = x.right
    x.right = y.left
    y.left = x

    update_height(x)
    update_height(y)
    return y


def rebalance(node: AVLNode[K, V]) -> AVLNode[K, V]:
    """Restore the balance constraint at `node` after a single insertion or
    deletion somewhere beneath it.

    Both children must already be balanced. Returns the (possibly new) root
    of the subtree, which the caller has to link back in place of `node`.
    """
    update_height(node)
    balance = balance_factor(node)

    if balance > 1:
        if balance_factor(node.left) < 0:
            # Left-right case:
            node.left = rotate_left(node.left)
        return rotate_right(node)
    elif balance < -1:
        if balance_factor(node.right) > 0:
            # Right-left case:
            node.right = rotate_right(node.right)
        return rotate_left(node)

    return node
