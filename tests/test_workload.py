from hypothesis import given, strategies as st
import pytest

from avlmap.workload import (
    ascending,
    build_map,
    descending,
    height_bound,
    shuffled,
    zigzag,
)


def test_height_bound():
    assert height_bound(1000) == 15
    assert height_bound(0) == 2
    assert type(height_bound(333)) is int


def test_zigzag():
    assert list(zigzag(5)) == [0, 4, 1, 3, 2]
    assert list(zigzag(4)) == [0, 3, 1, 2]
    assert list(zigzag(0)) == []


def test_shuffled_is_permutation():
    keys = list(shuffled(100, seed=1))
    assert sorted(keys) == list(range(100))
    assert keys == list(shuffled(100, seed=1))
    assert all(isinstance(k, int) for k in keys)


@pytest.mark.parametrize(
    "keys",
    [
        ascending(1000),
        descending(1000),
        zigzag(1000),
        shuffled(1000, seed=0),
    ],
    ids=["ascending", "descending", "zigzag", "shuffled"],
)
def test_logarithmic_height(keys):
    tree = build_map(keys)

    assert len(tree) == 1000
    assert tree.height() <= height_bound(1000)
    assert [k for k, _ in tree.to_vector()] == list(range(1000))
    tree.validate()


def test_ascending_is_perfect():
    # 2^k - 1 ascending keys produce a perfectly balanced tree.
    tree = build_map(ascending(1023))
    assert tree.height() == 10


def test_height_after_removals():
    tree = build_map(ascending(1000))
    for k in range(0, 1000, 3):
        tree.remove(k)
    for k in range(1, 1000, 3):
        tree.remove(k)

    assert len(tree) == 333
    assert tree.height() <= height_bound(333)
    tree.validate()


@given(st.integers(min_value=0, max_value=300), st.integers(min_value=0))
def test_shuffled_height(n, seed):
    tree = build_map(shuffled(n, seed))
    assert tree.height() <= height_bound(n)
    tree.validate()
