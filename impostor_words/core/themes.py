"""
Theme catalog: pairs of disjoint noun categories for crew and impostors.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, List, Tuple


@dataclass(frozen=True)
class Category:
    """A labelled list of words."""
    label: str
    words: Tuple[str, ...]

    def __post_init__(self):
        if not self.words:
            raise ValueError(f"Category '{self.label}' has no words")


@dataclass(frozen=True)
class ThemePair:
    """Main (crew) category and the impostor category played against it."""
    main: Category
    impostor: Category

    def __post_init__(self):
        shared = {w.lower() for w in self.main.words} & {w.lower() for w in self.impostor.words}
        if shared:
            raise ValueError(
                f"Theme '{self.label}' has words in both categories: {sorted(shared)}"
            )

    @property
    def label(self) -> str:
        return f"{self.main.label} vs {self.impostor.label}"


class ThemeCatalog:
    """Fixed, ordered sequence of theme pairs indexed by pair index."""

    def __init__(self, pairs: Iterable[ThemePair]):
        self._pairs: Tuple[ThemePair, ...] = tuple(pairs)
        if not self._pairs:
            raise ValueError("Theme catalog must contain at least one pair")

    def __len__(self) -> int:
        return len(self._pairs)

    def __getitem__(self, index: int) -> ThemePair:
        if not 0 <= index < len(self._pairs):
            raise IndexError(f"No theme pair at index {index}")
        return self._pairs[index]

    def __iter__(self) -> Iterator[ThemePair]:
        return iter(self._pairs)

    def labels(self) -> List[str]:
        return [pair.label for pair in self._pairs]

    @classmethod
    def from_dicts(cls, entries: Iterable[Dict[str, Any]]) -> "ThemeCatalog":
        """
        Build a catalog from plain records.

        Each entry looks like
        ``{"main": {"label": ..., "words": [...]}, "impostor": {...}}``.
        """
        pairs = []
        for entry in entries:
            pairs.append(ThemePair(
                main=Category(str(entry["main"]["label"]), tuple(str(w) for w in entry["main"]["words"])),
                impostor=Category(str(entry["impostor"]["label"]), tuple(str(w) for w in entry["impostor"]["words"])),
            ))
        return cls(pairs)


DEFAULT_CATALOG = ThemeCatalog.from_dicts([
    {
        "main": {"label": "Flowers", "words": [
            "rose", "jasmine", "sunflower", "lily", "tulip", "daisy", "orchid",
            "lavender", "hibiscus", "iris", "peony", "lotus", "daffodil"]},
        "impostor": {"label": "Grasses", "words": [
            "bermuda", "ryegrass", "fescue", "bluegrass", "wheatgrass", "pampas",
            "reed", "bamboo", "sedge", "zoysia", "bentgrass", "foxtail"]},
    },
    {
        "main": {"label": "Fruits", "words": [
            "apple", "banana", "orange", "mango", "grape", "pineapple", "papaya",
            "strawberry", "watermelon", "kiwi", "pear", "peach", "cherry"]},
        "impostor": {"label": "Vegetables", "words": [
            "carrot", "potato", "tomato", "cucumber", "lettuce", "spinach",
            "broccoli", "cabbage", "cauliflower", "eggplant", "zucchini", "pumpkin"]},
    },
    {
        "main": {"label": "Mammals", "words": [
            "lion", "tiger", "elephant", "giraffe", "zebra", "kangaroo", "whale",
            "bear", "wolf", "fox", "deer", "rabbit"]},
        "impostor": {"label": "Birds", "words": [
            "eagle", "sparrow", "pigeon", "parrot", "owl", "flamingo", "peacock",
            "penguin", "swan", "duck", "goose", "turkey"]},
    },
    {
        "main": {"label": "Sea Animals", "words": [
            "shark", "tuna", "mackerel", "sardine", "crab", "lobster", "shrimp",
            "jellyfish", "starfish", "seahorse", "clam", "oyster"]},
        "impostor": {"label": "Freshwater Animals", "words": [
            "carp", "catfish", "tilapia", "trout", "pike", "perch", "bass",
            "goldfish", "eel", "crayfish", "frog", "salamander"]},
    },
])
