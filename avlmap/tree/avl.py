from __future__ import annotations

import logging
from collections.abc import Mapping, MutableMapping
from typing import (
    Callable,
    Generic,
    Iterable,
    Iterator,
    List,
    Optional,
    Tuple,
    TypeVar,
    Union,
)

from .node import AVLNode, height, rebalance

K = TypeVar("K")
V = TypeVar("V")

logger = logging.getLogger(__name__)

_MISSING = object()


class TreeIntegrityError(AssertionError):
    """Raised by `AVLMap.validate` when a structural invariant is broken."""


class AVLMap(Generic[K, V], MutableMapping):
    """An ordered mapping backed by a height-balanced binary search tree.

    Insertion, removal and lookup are O(log n) regardless of insertion order.
    If `default_factory` is given, reading an absent key through `m[key]`
    inserts `default_factory()` under that key and returns it, so counting
    can be written as `m[key] += 1`.
    """

    def __init__(
        self,
        source: Union[None, AVLMap[K, V], Mapping, Iterable[Tuple[K, V]]] = None,
        default_factory: Optional[Callable[[], V]] = None,
    ):
        self._root: Optional[AVLNode[K, V]] = None
        self._len: int = 0
        self.default_factory: Optional[Callable[[], V]] = default_factory

        if isinstance(source, AVLMap):
            if default_factory is None:
                self.default_factory = source.default_factory
            self._clone_from(source)
        elif isinstance(source, Mapping):
            for k, v in source.items():
                self.insert(k, v)
        elif source is not None:
            for k, v in source:
                self.insert(k, v)

    def _clone_from(self, src: AVLMap[K, V], memo: Optional[dict] = None):
        self._root = src._root.clone(memo) if src._root is not None else None
        self._len = src._len

    def _find(self, key: K) -> Optional[AVLNode[K, V]]:
        cur = self._root
        while cur is not None:
            if cur.key == key:
                return cur
            elif key < cur.key:
                cur = cur.left
            else:
                cur = cur.right
        return None

    def _insert(
        self, node: Optional[AVLNode[K, V]], key: K, val: V
    ) -> Tuple[AVLNode[K, V], bool]:
        if node is None:
            return (AVLNode(key, val), True)

        if node.key == key:
            node.value = val
            return (node, False)

        if key < node.key:
            node.left, created = self._insert(node.left, key, val)
        else:
            node.right, created = self._insert(node.right, key, val)

        if not created:
            return (node, False)
        return (rebalance(node), True)

    def _remove(
        self, node: Optional[AVLNode[K, V]], key: K
    ) -> Tuple[Optional[AVLNode[K, V]], bool]:
        if node is None:
            return (None, False)

        if node.key == key:
            if node.left is None:
                return (node.right, True)
            elif node.right is None:
                return (node.left, True)

            # Two children: pull the in-order successor's contents up into
            # this node, then remove the successor from the right subtree.
            successor = node.right.min_node()
            node.key = successor.key
            node.value = successor.value
            node.right, removed = self._remove(node.right, successor.key)
        elif key < node.key:
            node.left, removed = self._remove(node.left, key)
        else:
            node.right, removed = self._remove(node.right, key)

        if not removed:
            return (node, False)
        return (rebalance(node), True)

    def insert(self, key: K, val: V) -> AVLMap[K, V]:
        """Insert `key`, or overwrite its value if it is already present.

        Returns the map itself so calls can be chained.
        """
        self._root, created = self._insert(self._root, key, val)
        if created:
            self._len += 1
        return self

    def remove(self, key: K) -> AVLMap[K, V]:
        """Remove `key` if present. Removing an absent key does nothing.

        Returns the map itself so calls can be chained.
        """
        self._root, removed = self._remove(self._root, key)
        if removed:
            self._len -= 1
        return self

    def search(self, key: K) -> Tuple[bool, Optional[V]]:
        """Look up `key` without modifying the map.

        Returns a tuple containing:
            - Whether the key was found
            - The associated value, or None if the key was not found
        """
        node = self._find(key)
        if node is None:
            return (False, None)
        return (True, node.value)

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        node = self._find(key)
        if node is None:
            return default
        return node.value

    def setdefault(self, key: K, default: Optional[V] = None) -> Optional[V]:
        node = self._find(key)
        if node is None:
            self.insert(key, default)
            return default
        return node.value

    def pop(self, key: K, default=_MISSING) -> V:
        node = self._find(key)
        if node is None:
            if default is _MISSING:
                raise KeyError(key)
            return default

        val = node.value
        self.remove(key)
        return val

    def assign(self, src: AVLMap[K, V]) -> AVLMap[K, V]:
        """Replace the contents of this map with a copy of `src`."""
        if src is self:
            return self
        if not isinstance(src, AVLMap):
            raise TypeError(
                "can only assign from another AVLMap, not {}".format(
                    type(src).__name__
                )
            )

        logger.debug("assigning %d entries over %d existing", len(src), self._len)
        self.clear()
        self._clone_from(src)
        return self

    def copy(self) -> AVLMap[K, V]:
        return self.__class__(self)

    __copy__ = copy

    def __deepcopy__(self, memo: dict) -> AVLMap[K, V]:
        ret = self.__class__(default_factory=self.default_factory)
        memo[id(self)] = ret
        ret._clone_from(self, memo)
        return ret

    def clear(self):
        if self._root is not None:
            logger.debug("clearing tree with %d entries", self._len)
        self._root = None
        self._len = 0

    def to_vector(self) -> List[Tuple[K, V]]:
        """Export every entry as a list of (key, value) pairs in ascending key
        order.
        """
        ret = []
        if self._root is not None:
            self._root.to_vector(ret)
        return ret

    def size(self) -> int:
        return self._len

    def empty(self) -> bool:
        return self._root is None

    def height(self) -> int:
        return height(self._root)

    def min(self) -> Tuple[K, V]:
        if self._root is None:
            raise IndexError("Tree is empty")
        node = self._root.min_node()
        return (node.key, node.value)

    def max(self) -> Tuple[K, V]:
        if self._root is None:
            raise IndexError("Tree is empty")
        node = self._root.max_node()
        return (node.key, node.value)

    def print(self) -> str:
        if self._root is not None:
            return self._root.print(0)
        else:
            return "<empty tree>"

    def validate(self):
        """Check BST ordering, balance and cached heights for every node.

        Raises TreeIntegrityError on the first violation found.
        """
        count = self._validate_node(self._root, _MISSING, _MISSING)[1]
        if count != self._len:
            raise TreeIntegrityError(
                "stored length differs from number of nodes (got {}, expected {})".format(
                    self._len, count
                )
            )

    def _validate_node(self, node: Optional[AVLNode[K, V]], lo, hi) -> Tuple[int, int]:
        if node is None:
            return (0, 0)

        if lo is not _MISSING and not (lo < node.key):
            raise TreeIntegrityError(
                "key {} is not greater than ancestor key {}".format(node.key, lo)
            )
        if hi is not _MISSING and not (node.key < hi):
            raise TreeIntegrityError(
                "key {} is not less than ancestor key {}".format(node.key, hi)
            )

        left_height, left_count = self._validate_node(node.left, lo, node.key)
        right_height, right_count = self._validate_node(node.right, node.key, hi)

        if abs(left_height - right_height) > 1:
            raise TreeIntegrityError(
                "balance constraint violated at node {}".format(node.key)
            )

        h = 1 + max(left_height, right_height)
        if node.height != h:
            raise TreeIntegrityError(
                "cached height at node {} is {}, expected {}".format(
                    node.key, node.height, h
                )
            )

        return (h, left_count + right_count + 1)

    def __getitem__(self, key: K) -> V:
        node = self._find(key)
        if node is not None:
            return node.value

        if self.default_factory is None:
            raise KeyError(key)

        val = self.default_factory()
        self.insert(key, val)
        return val

    def __setitem__(self, key: K, val: V):
        self.insert(key, val)

    def __delitem__(self, key: K):
        self._root, removed = self._remove(self._root, key)
        if not removed:
            raise KeyError(key)
        self._len -= 1

    def __contains__(self, key: K) -> bool:
        return self._find(key) is not None

    def __iter__(self) -> Iterator[K]:
        # Iterates over a snapshot, so the map may be modified meanwhile.
        return iter([k for k, _ in self.to_vector()])

    def __reversed__(self) -> Iterator[K]:
        return reversed([k for k, _ in self.to_vector()])

    def __len__(self) -> int:
        return self._len

    def __repr__(self) -> str:
        return "{}({{{}}})".format(
            self.__class__.__name__,
            ", ".join("{!r}: {!r}".format(k, v) for k, v in self.to_vector()),
        )
