"""
Tests for name normalization and roster deduplication.
"""

from impostor_words.core import normalize, dedupe_roster


def test_normalize_trims_collapses_and_lowercases():
    assert normalize("  Alice  ") == "alice"
    assert normalize("Mary \t  Jane") == "mary jane"
    assert normalize("BOB\nSMITH") == "bob smith"


def test_normalize_handles_empty_input():
    assert normalize("") == ""
    assert normalize("   ") == ""
    assert normalize(None) == ""


def test_dedupe_roster_keeps_first_spelling():
    roster = ["Alice", " alice ", "Bob", "ALICE", "bob", "Carol"]
    assert dedupe_roster(roster) == ["Alice", "Bob", "Carol"]


def test_dedupe_roster_drops_blanks():
    assert dedupe_roster(["", "  ", "Dave"]) == ["Dave"]
