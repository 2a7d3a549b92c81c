"""Tests for random sampling helpers."""

import random

import pytest

from medsky.utils.sampling import get_random_items, pick_one


def test_returns_distinct_items_from_pool():
    """K <= N gives K distinct pool members."""
    pool = list(range(10))
    for seed in range(20):
        items = get_random_items(pool, 4, random.Random(seed))
        assert len(items) == 4
        assert len(set(items)) == 4
        assert set(items) <= set(pool)


def test_count_larger_than_pool_returns_whole_pool():
    pool = ["a", "b", "c"]
    items = get_random_items(pool, 10, random.Random(1))
    assert sorted(items) == pool


def test_zero_count_and_empty_pool():
    assert get_random_items(["a"], 0) == []
    assert get_random_items([], 3) == []


def test_pool_is_not_modified():
    pool = ("x", "y", "z")
    get_random_items(pool, 2, random.Random(3))
    assert pool == ("x", "y", "z")


def test_negative_count_raises():
    with pytest.raises(ValueError):
        get_random_items([1, 2], -1)


def test_same_seed_same_result():
    pool = list(range(20))
    assert get_random_items(pool, 5, random.Random(42)) == get_random_items(pool, 5, random.Random(42))


def test_pick_one():
    pool = ["only"]
    assert pick_one(pool) == "only"
    assert pick_one(["a", "b", "c"], random.Random(0)) in {"a", "b", "c"}


def test_pick_one_empty_pool_raises():
    with pytest.raises(ValueError):
        pick_one([])
