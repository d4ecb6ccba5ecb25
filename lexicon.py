"""Dictionary definitions and word-list input for the embedding pipeline."""

import logging
import os
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)


class WordListError(RuntimeError):
    """A word list could not be read."""


# ── Load the bundled dictionary from YAML ───────────────────────────────────

_DICTIONARY_PATH = Path(__file__).with_name("dictionary.yaml")


def load_dictionary(path=_DICTIONARY_PATH):
    """Read a ``word: definition`` mapping from a YAML file.

    Keys are trimmed and lowercased so lookups can use canonical words.
    Returns a plain dict sorted by word.
    """
    try:
        with open(path, encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except OSError as exc:
        raise RuntimeError(f"Failed to read dictionary from {path}.") from exc
    entries = {
        str(word).strip().lower(): str(definition).strip()
        for word, definition in raw.items()
    }
    logger.info("Loaded %d dictionary entries from %s", len(entries), path)
    return dict(sorted(entries.items()))


BUILTIN_DICTIONARY = load_dictionary()

# ── Word lists ───────────────────────────────────────────────────────────────


def read_word_list(path):
    """Read a newline-delimited word list.

    A leading ``~`` in *path* is expanded to the home directory.  Anything
    after ``#`` on a line is a comment; blank lines are skipped.  Remaining
    lines are returned stripped, in file order.
    """
    expanded = Path(os.path.expanduser(str(path)))
    try:
        with open(expanded, encoding="utf-8") as f:
            lines = f.read().splitlines()
    except (OSError, UnicodeDecodeError) as exc:
        raise WordListError(f"Failed to read word list from {expanded}: {exc}") from exc

    words = []
    for line in lines:
        word = line.split("#", 1)[0].strip()
        if word:
            words.append(word)
    logger.info("Read %d words from %s", len(words), expanded)
    return words
