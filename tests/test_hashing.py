"""
Tests for fingerprints, ordering keys and seeded choices.
"""

import hashlib
import pytest

from impostor_words.core import (
    fingerprint, ordering_key, sort_fingerprints, seeded_choice, choose_pair_index, DEFAULT_CATALOG
)


def test_fingerprint_is_sha256_of_normalized_name_seed_round():
    expected = hashlib.sha256("alice|room-42|1".encode("utf-8")).hexdigest()
    assert fingerprint("Alice", "room-42", 1) == expected
    assert len(expected) == 64


def test_fingerprint_is_deterministic():
    assert fingerprint("Bob", "room-42", 7) == fingerprint("Bob", "room-42", 7)


def test_fingerprint_ignores_case_and_whitespace():
    assert fingerprint(" alice ", "room-42", 1) == fingerprint("Alice", "room-42", 1)
    assert fingerprint("Mary  Jane", "s", 2) == fingerprint("mary jane", "s", 2)


def test_fingerprint_depends_on_seed_and_round():
    base = fingerprint("Alice", "room-42", 1)
    assert fingerprint("Alice", "room-43", 1) != base
    assert fingerprint("Alice", "room-42", 2) != base


def test_fingerprint_keeps_seed_case():
    assert fingerprint("Alice", "Room", 1) != fingerprint("Alice", "room", 1)


def test_ordering_key_reads_leading_hex_digits():
    fp = "000000000010" + "f" * 52
    assert ordering_key(fp) == 16
    assert ordering_key("ffffffffffff" + "0" * 52) == 2 ** 48 - 1


def test_sort_fingerprints_breaks_ties_lexicographically():
    a = "0" * 12 + "b" * 52
    b = "0" * 12 + "a" * 52
    c = "1" + "0" * 63
    assert sort_fingerprints([c, a, b]) == [b, a, c]


def test_seeded_choice_is_reproducible():
    items = ["rose", "lily", "tulip", "daisy", "iris"]
    picks = {seeded_choice(items, "room-42|1|0|alice|word") for _ in range(20)}
    assert len(picks) == 1
    assert picks.pop() in items


def test_seeded_choice_spreads_over_items():
    items = list(range(10))
    picks = {seeded_choice(items, f"seed-{i}") for i in range(200)}
    assert len(picks) > 5


def test_seeded_choice_rejects_empty_sequence():
    with pytest.raises(ValueError):
        seeded_choice([], "anything")


def test_choose_pair_index_is_in_range_and_stable():
    idx = choose_pair_index("room-42", 2, DEFAULT_CATALOG)
    assert 0 <= idx < len(DEFAULT_CATALOG)
    assert idx == choose_pair_index("room-42", 2, DEFAULT_CATALOG)
