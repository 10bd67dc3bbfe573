"""
Tests for the theme catalog.
"""

import pytest

from impostor_words.core import Category, ThemePair, ThemeCatalog, DEFAULT_CATALOG


def test_default_catalog_pairs_are_disjoint():
    assert len(DEFAULT_CATALOG) == 4
    for pair in DEFAULT_CATALOG:
        assert set(pair.main.words).isdisjoint(pair.impostor.words)
        assert pair.main.words and pair.impostor.words


def test_default_catalog_labels():
    assert DEFAULT_CATALOG.labels()[0] == "Flowers vs Grasses"
    assert DEFAULT_CATALOG[1].main.label == "Fruits"
    assert DEFAULT_CATALOG[1].impostor.label == "Vegetables"


def test_pair_rejects_shared_words():
    with pytest.raises(ValueError):
        ThemePair(Category("A", ("cat", "dog")), Category("B", ("Dog", "owl")))


def test_category_rejects_empty_word_list():
    with pytest.raises(ValueError):
        Category("Empty", ())


def test_catalog_index_out_of_range():
    with pytest.raises(IndexError):
        DEFAULT_CATALOG[len(DEFAULT_CATALOG)]
    with pytest.raises(IndexError):
        DEFAULT_CATALOG[-1]


def test_catalog_from_dicts():
    catalog = ThemeCatalog.from_dicts([
        {"main": {"label": "Tools", "words": ["hammer", "saw"]},
         "impostor": {"label": "Toys", "words": ["kite", "yoyo"]}},
    ])
    assert len(catalog) == 1
    assert catalog[0].label == "Tools vs Toys"
    assert catalog[0].impostor.words == ("kite", "yoyo")


def test_empty_catalog_rejected():
    with pytest.raises(ValueError):
        ThemeCatalog([])
