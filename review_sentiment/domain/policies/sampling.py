"""Dataset sampling — uniform random pick of one review."""

from __future__ import annotations

import random
from collections.abc import Sequence

from review_sentiment.domain.errors import EmptyDatasetError


def pick_random(reviews: Sequence[str], rng: random.Random | None = None) -> str:
    """Pick one review uniformly by index.

    Raises:
        EmptyDatasetError: if reviews is empty.
    """
    if not reviews:
        raise EmptyDatasetError("No reviews available")

    index = (rng or random).randrange(len(reviews))
    return reviews[index]
