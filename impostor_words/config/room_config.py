"""
Room configuration: the admin's round settings and roster.
"""

import random
from dataclasses import dataclass, field
from typing import List, Optional

from ..core.chooser import choose_pair_index
from ..core.names import normalize
from ..core.roles import RoundParams
from ..core.themes import DEFAULT_CATALOG, ThemeCatalog

ROOM_WORDS = [
    "amber", "basil", "cobalt", "dawn", "ember", "flint", "glint", "hazel", "indigo",
    "jade", "kepler", "lumen", "magma", "nectar", "onyx", "poppy", "quartz", "raven",
    "saffron", "topaz", "ultra", "velvet", "willow", "xenon", "yarrow", "zephyr",
]

DEFAULT_BASE_URL = "http://127.0.0.1:5000/"


def random_room_code(rng: Optional[random.Random] = None) -> str:
    """Generate a room code like "ember-417"."""
    rng = rng or random.Random()
    return f"{rng.choice(ROOM_WORDS)}-{rng.randint(100, 999)}"


@dataclass
class RoomConfig:
    """Configuration for a room's current round."""

    # Round parameters
    seed: str = field(default_factory=random_room_code)
    round_number: int = 1
    impostor_count: int = 1
    word_refresh: int = 0  # bump to reshuffle words without touching roles
    pair_index: int = 0

    # Players in display order
    roster: List[str] = field(default_factory=list)

    # Sharing
    base_url: str = DEFAULT_BASE_URL
    themes_path: Optional[str] = None  # custom theme catalog YAML, both sides must use the same one

    def to_params(self) -> RoundParams:
        """Freeze the current settings into round parameters."""
        return RoundParams(
            seed=self.seed,
            round_number=self.round_number,
            impostor_count=self.impostor_count,
            word_refresh=self.word_refresh,
            pair_index=self.pair_index,
        )

    def add_player(self, name: str) -> bool:
        """
        Add a player to the roster.
        Returns False if the name is blank or already present in normalized form.
        """
        key = normalize(name)
        if not key or any(normalize(existing) == key for existing in self.roster):
            return False
        self.roster.append(name.strip())
        return True

    def remove_player(self, name: str) -> bool:
        """Remove a player by name (case/whitespace insensitive)."""
        key = normalize(name)
        remaining = [n for n in self.roster if normalize(n) != key]
        removed = len(remaining) != len(self.roster)
        self.roster = remaining
        return removed

    def clear_roster(self) -> None:
        self.roster = []

    def next_round(self, catalog: ThemeCatalog = DEFAULT_CATALOG) -> None:
        """Advance to the next round with fresh words and a newly chosen theme."""
        self.round_number += 1
        self.word_refresh = 0
        self.pair_index = choose_pair_index(self.seed, self.round_number, catalog)

    def refresh_words(self) -> None:
        """Reshuffle every player's word while keeping roles."""
        self.word_refresh += 1

    def new_room(self, catalog: ThemeCatalog = DEFAULT_CATALOG, rng: Optional[random.Random] = None) -> None:
        """Start over in a new room at round 1."""
        self.seed = random_room_code(rng)
        self.round_number = 1
        self.word_refresh = 0
        self.pair_index = choose_pair_index(self.seed, self.round_number, catalog)


def default_config() -> RoomConfig:
    """Fresh configuration for a new room."""
    return RoomConfig()
