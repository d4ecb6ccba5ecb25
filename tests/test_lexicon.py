"""Tests for dictionary loading and word-list input."""

import pytest

from lexicon import BUILTIN_DICTIONARY, WordListError, load_dictionary, read_word_list


def test_builtin_dictionary():
    assert len(BUILTIN_DICTIONARY) == 9
    assert list(BUILTIN_DICTIONARY) == sorted(BUILTIN_DICTIONARY)
    assert BUILTIN_DICTIONARY["biblioklept"] == (
        "Oxford English Dictionary (paraphrased): a person who steals books; "
        "a book thief."
    )


def test_load_dictionary_lowercases_words(tmp_path):
    path = tmp_path / "dictionary.yaml"
    path.write_text("Kerfuffle: '  a fuss  '\nab: away\n", encoding="utf-8")
    assert load_dictionary(path) == {"ab": "away", "kerfuffle": "a fuss"}


def test_load_dictionary_missing_file(tmp_path):
    with pytest.raises(RuntimeError):
        load_dictionary(tmp_path / "absent.yaml")


def test_read_word_list_skips_comments_and_blanks(write_word_list):
    path = write_word_list(
        "# bundled favourites\n"
        "kerfuffle\n"
        "\n"
        "   biblioklept   \n"
        "cattywampus  # askew\n"
        "   # indented comment\n"
    )
    assert read_word_list(path) == ["kerfuffle", "biblioklept", "cattywampus"]


def test_read_word_list_keeps_lines_verbatim(write_word_list):
    path = write_word_list("Anti-Dis\nnaïveté\n42\n")
    assert read_word_list(path) == ["Anti-Dis", "naïveté", "42"]


def test_read_word_list_expands_home(monkeypatch, tmp_path, write_word_list):
    write_word_list("kerfuffle\n", name="mine.txt")
    monkeypatch.setenv("HOME", str(tmp_path))
    assert read_word_list("~/mine.txt") == ["kerfuffle"]


def test_read_word_list_missing_file(tmp_path):
    with pytest.raises(WordListError) as excinfo:
        read_word_list(tmp_path / "absent.txt")
    assert isinstance(excinfo.value.__cause__, OSError)
    assert "absent.txt" in str(excinfo.value)
