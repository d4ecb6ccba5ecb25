"""Table-driven morpheme segmentation using greedy affix stripping.

A word is cleaned down to lowercase ASCII letters, stacked prefixes are
peeled from the front and stacked suffixes from the back, and whatever is
left is resolved into root morphemes: known root patterns where they occur,
fixed-width chunks everywhere else.  The token texts always concatenate back
to the cleaned word.
"""

import logging
import re
from collections import namedtuple
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

PREFIX = "prefix"
ROOT = "root"
SUFFIX = "suffix"

# Shortest span that affix stripping may leave behind for the root.
MIN_ROOT_LENGTH = 3

# Width of the pieces an unmatched span is cut into.
CHUNK_WIDTH = 4

_NON_LETTERS_RE = re.compile(r"[^A-Za-z]+")


class Morpheme(namedtuple("Morpheme", ["kind", "text"])):
    """A tagged morpheme.  The ``(kind, text)`` pair is its identity."""

    __slots__ = ()

    def display(self):
        """Render as ``kind(text)``, the per-word breakdown form."""
        return f"{self.kind}({self.text})"

    def describe(self):
        """Render as ``kind:text``, the embedding table form."""
        return f"{self.kind}:{self.text}"


class AffixTables(namedtuple("AffixTables", ["prefixes", "suffixes", "roots"])):
    """Immutable prefix, suffix and root-pattern tables in priority order."""

    __slots__ = ()

    @classmethod
    def from_lists(cls, prefixes=(), suffixes=(), roots=()):
        """Build tables from plain lists, keeping their order as priority.

        The first entry that matches wins, so a long affix must be listed
        before any shorter affix it starts (or ends) with.  Blank entries are
        dropped and everything is lowercased.
        """
        return cls(
            prefixes=_normalize_entries(prefixes),
            suffixes=_normalize_entries(suffixes),
            roots=_normalize_entries(roots),
        )


def _normalize_entries(entries):
    return tuple(e.strip().lower() for e in entries if e and e.strip())


# ── Load affix tables from YAML ─────────────────────────────────────────────

_AFFIXES_PATH = Path(__file__).with_name("affixes.yaml")


def load_affix_tables(path=_AFFIXES_PATH):
    """Read prefix, suffix and root tables from a YAML file.

    The file holds a mapping with ``prefixes``, ``suffixes`` and ``roots``
    lists; a missing list is treated as empty.
    """
    try:
        with open(path, encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except OSError as exc:
        raise RuntimeError(f"Failed to read affix tables from {path}.") from exc
    tables = AffixTables.from_lists(
        prefixes=raw.get("prefixes") or [],
        suffixes=raw.get("suffixes") or [],
        roots=raw.get("roots") or [],
    )
    logger.info(
        "Loaded %d prefixes, %d suffixes and %d root patterns from %s",
        len(tables.prefixes), len(tables.suffixes), len(tables.roots), path,
    )
    return tables


AFFIX_TABLES = load_affix_tables()

# ── Core logic ───────────────────────────────────────────────────────────────


def clean_word(word):
    """Drop everything in *word* that is not an ASCII letter, then lowercase."""
    return _NON_LETTERS_RE.sub("", word).lower()


def _strippable(span, affix, min_root_length):
    return len(span) - len(affix) >= min_root_length


def chunk_span(span, chunk_width=CHUNK_WIDTH):
    """Cut *span* into ``root`` morphemes of *chunk_width* letters each.

    The last chunk may be shorter.  An empty span yields no morphemes.
    """
    if chunk_width < 1:
        raise ValueError(f"chunk_width must be positive, got {chunk_width}")
    return [
        Morpheme(ROOT, span[i:i + chunk_width])
        for i in range(0, len(span), chunk_width)
    ]


def resolve_root(span, roots, chunk_width=CHUNK_WIDTH):
    """Split the post-affix *span* into ``root`` morphemes.

    The first root pattern (in table order) that occurs anywhere in the span
    becomes a token at its leftmost occurrence; the flanks on either side are
    resolved the same way.  A span no pattern occurs in falls back to
    fixed-width chunking.
    """
    if not span:
        return []
    for pattern in roots:
        start = span.find(pattern)
        if start < 0:
            continue
        end = start + len(pattern)
        return (
            resolve_root(span[:start], roots, chunk_width)
            + [Morpheme(ROOT, pattern)]
            + resolve_root(span[end:], roots, chunk_width)
        )
    return chunk_span(span, chunk_width)


_STRIP_PREFIXES = "stripping-prefixes"
_STRIP_SUFFIXES = "stripping-suffixes"
_RESOLVE_ROOT = "resolving-root"


def segment_into_morphemes(word, tables=AFFIX_TABLES,
                           min_root_length=MIN_ROOT_LENGTH,
                           chunk_width=CHUNK_WIDTH):
    """Segment *word* into an ordered list of :class:`Morpheme` tokens.

    Prefixes are stripped from the front and suffixes from the back.  Each
    phase takes the first table entry that matches and ends once nothing
    matches or stripping the match would leave fewer than *min_root_length*
    letters.  The remainder is handed to :func:`resolve_root`.

    Returns prefixes in removal order, then roots, then suffixes in reading
    order.  An empty list is returned only when the cleaned word is empty.
    """
    span = clean_word(word)
    if not span:
        return []

    prefixes = []
    suffixes = []
    state = _STRIP_PREFIXES

    while state != _RESOLVE_ROOT:
        if state == _STRIP_PREFIXES:
            match = next((p for p in tables.prefixes if span.startswith(p)), None)
            if match is None or not _strippable(span, match, min_root_length):
                state = _STRIP_SUFFIXES
                continue
            prefixes.append(Morpheme(PREFIX, match))
            span = span[len(match):]
        else:
            match = next((s for s in tables.suffixes if span.endswith(s)), None)
            if match is None or not _strippable(span, match, min_root_length):
                state = _RESOLVE_ROOT
                continue
            suffixes.append(Morpheme(SUFFIX, match))
            span = span[:-len(match)]

    # Suffixes were peeled outermost first.
    suffixes.reverse()
    morphemes = prefixes + resolve_root(span, tables.roots, chunk_width) + suffixes
    logger.debug("%s -> %s", word, " + ".join(m.display() for m in morphemes))
    return morphemes
