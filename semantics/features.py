"""Numeric features derived from the text of a dictionary definition."""

import logging
import re
from collections import namedtuple
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

FEATURE_NAMES = (
    "token_count",
    "avg_token_length",
    "sensory_ratio",
    "abstract_ratio",
    "lexical_complexity",
)
FEATURE_COUNT = len(FEATURE_NAMES)

# Weights of the two terms in the lexical complexity slot.
UNIQUE_WEIGHT = 1.0
POLYSYLLABLE_WEIGHT = 1.0

_TOKEN_RE = re.compile(r"[A-Za-z]+")
_VOWEL_GROUP_RE = re.compile(r"[aeiouy]+")

KeywordSets = namedtuple("KeywordSets", ["sensory", "abstract"])

# ── Load keyword sets from YAML ─────────────────────────────────────────────

_KEYWORDS_PATH = Path(__file__).with_name("keywords.yaml")


def load_keywords(path=_KEYWORDS_PATH):
    """Read the sensory and abstract word sets from a YAML file.

    Returns a :class:`KeywordSets` of lowercase frozensets.
    """
    try:
        with open(path, encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except OSError as exc:
        raise RuntimeError(f"Failed to read keyword sets from {path}.") from exc
    keywords = KeywordSets(
        sensory=frozenset(w.lower() for w in raw.get("sensory") or []),
        abstract=frozenset(w.lower() for w in raw.get("abstract") or []),
    )
    logger.info(
        "Loaded %d sensory and %d abstract keywords from %s",
        len(keywords.sensory), len(keywords.abstract), path,
    )
    return keywords


KEYWORDS = load_keywords()

# ── Core logic ───────────────────────────────────────────────────────────────


def tokenize(text):
    """Return the runs of ASCII letters in *text*, lowercased."""
    return [t.lower() for t in _TOKEN_RE.findall(text)]


def estimate_syllables(token):
    """Rough syllable count: the number of vowel groups (``y`` included)."""
    return len(_VOWEL_GROUP_RE.findall(token))


def definition_to_features(definition, keywords=KEYWORDS):
    """Map a definition string to a 5-element feature vector.

    Slots, in order: token count, average token length, share of sensory
    tokens, share of abstract tokens, and a lexical complexity score that
    adds the distinct-token ratio to the share of multi-syllable tokens.
    Every slot is 0.0 for a definition with no letters in it.
    """
    tokens = tokenize(definition)
    if not tokens:
        return (0.0,) * FEATURE_COUNT

    count = len(tokens)
    avg_length = sum(len(t) for t in tokens) / count
    sensory = sum(1 for t in tokens if t in keywords.sensory) / count
    abstract = sum(1 for t in tokens if t in keywords.abstract) / count
    unique = len(set(tokens)) / count
    polysyllabic = sum(1 for t in tokens if estimate_syllables(t) > 1) / count
    complexity = UNIQUE_WEIGHT * unique + POLYSYLLABLE_WEIGHT * polysyllabic

    return (float(count), avg_length, sensory, abstract, complexity)
