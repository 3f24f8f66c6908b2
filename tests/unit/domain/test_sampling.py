"""Tests for random review sampling."""

import random

import pytest

from review_sentiment.domain.errors import EmptyDatasetError
from review_sentiment.domain.policies.sampling import pick_random


def test_single_element_always_returned():
    for _ in range(20):
        assert pick_random(["only review"]) == "only review"


def test_empty_raises():
    with pytest.raises(EmptyDatasetError):
        pick_random([])


def test_pick_is_member():
    reviews = ["a", "b", "c"]
    assert pick_random(reviews) in reviews


def test_seeded_rng_is_reproducible():
    reviews = [f"review {i}" for i in range(50)]
    first = pick_random(reviews, random.Random(7))
    second = pick_random(reviews, random.Random(7))
    assert first == second


def test_all_indices_reachable():
    rng = random.Random(1)
    reviews = ["a", "b", "c"]
    seen = {pick_random(reviews, rng) for _ in range(200)}
    assert seen == {"a", "b", "c"}
