"""
Reproducible string-seeded choices.
"""

import random
from typing import Sequence, TypeVar, TYPE_CHECKING

if TYPE_CHECKING:
    from .themes import ThemeCatalog

T = TypeVar("T")


def seeded_choice(items: Sequence[T], seed_string: str) -> T:
    """
    Pick one element of ``items`` determined only by ``seed_string``.

    A fresh ``random.Random`` is seeded per call, so the result never
    depends on earlier calls or on the clock.
    """
    if not items:
        raise ValueError("Cannot choose from an empty sequence")
    rng = random.Random(seed_string)
    return items[int(rng.random() * len(items))]


def choose_pair_index(seed: str, round_number: int, catalog: "ThemeCatalog") -> int:
    """Pick the theme pair for a room's round."""
    return seeded_choice(range(len(catalog)), f"{seed}|{round_number}|pair")
