"""Shared test fixtures."""

import pytest

from morphology.segmentation import AffixTables
from semantics.features import KeywordSets


@pytest.fixture
def establish_tables():
    """The small affix tables from the antidisestablishmentarianism sample."""
    return AffixTables.from_lists(
        prefixes=["anti", "dis"],
        suffixes=["arianism", "ment"],
        roots=["establish"],
    )


@pytest.fixture
def empty_tables():
    return AffixTables.from_lists()


@pytest.fixture
def keywords():
    return KeywordSets(
        sensory=frozenset({"bright", "light", "glow"}),
        abstract=frozenset({"state", "change", "time"}),
    )


@pytest.fixture
def write_word_list(tmp_path):
    """Write a word list into tmp_path and return its path."""

    def _write(text, name="words.txt"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
