"""Morpheme embeddings averaged from dictionary-definition features.

Each word is looked up in the dictionary, segmented into prefix / root /
suffix morphemes with the affix tables, and its definition is reduced to a
small feature vector.  That vector is recorded once for every morpheme the
word produced, so a morpheme's embedding is the mean over all the words it
appears in.

Usage:
    python morpho_embed.py [word-list.txt]

Without a word list every word in the bundled dictionary is processed.
"""

import logging
import sys

from lexicon import BUILTIN_DICTIONARY, WordListError, read_word_list
from morphology.segmentation import AFFIX_TABLES, segment_into_morphemes
from semantics.embedding import EmbeddingAccumulator
from semantics.features import FEATURE_COUNT, KEYWORDS, definition_to_features

logger = logging.getLogger(__name__)

_KEY_WIDTH = 22


def embed_words(words, dictionary=BUILTIN_DICTIONARY, tables=AFFIX_TABLES,
                keywords=KEYWORDS):
    """Segment *words* and accumulate their definition features per morpheme.

    Returns:
        ``(results, accumulator)``.  ``results`` is a list of dicts with keys
        ``word``, ``morphemes`` and ``definition``, one per non-blank input
        word.  ``definition`` is None when the word has no dictionary entry;
        such words, and words that clean down to nothing, have an empty
        ``morphemes`` list and contribute nothing to the accumulator.
    """
    accumulator = EmbeddingAccumulator(FEATURE_COUNT)
    results = []
    for raw in words:
        word = raw.strip().lower()
        if not word:
            continue

        definition = dictionary.get(word)
        if definition is None:
            logger.warning("No dictionary entry for %r; skipping", word)
            results.append({"word": word, "morphemes": [], "definition": None})
            continue

        morphemes = segment_into_morphemes(word, tables)
        results.append({"word": word, "morphemes": morphemes, "definition": definition})
        if not morphemes:
            logger.warning("Segmenter produced no morphemes for %r", word)
            continue

        features = definition_to_features(definition, keywords)
        for morpheme in morphemes:
            accumulator.record(morpheme, features)
    return results, accumulator


def format_results(results):
    """Return the per-word breakdown as a string for console output."""
    lines = []
    for entry in results:
        word = entry["word"]
        if entry["definition"] is None:
            lines.append(f"- {word}: no Oxford entry available in the bundled data")
        elif not entry["morphemes"]:
            lines.append(f"- {word}: no morphemic chunks produced by the segmenter")
        else:
            breakdown = " + ".join(m.display() for m in entry["morphemes"])
            lines.append(f"- {word}: {breakdown}")
            lines.append(f"  definition: {entry['definition']}")
    return "\n".join(lines)


def format_embeddings(accumulator, precision=3):
    """Return the morpheme embedding matrix as a string for console output."""
    embeddings = accumulator.all_embeddings()
    lines = [
        f"Derived morpheme embedding matrix ({len(embeddings)} morphemes "
        f"× {accumulator.dimensions} features):"
    ]
    for morpheme, vector in embeddings.items():
        pretty = ", ".join(f"{value:.{precision}f}" for value in vector)
        lines.append(f"  {morpheme.describe():<{_KEY_WIDTH}} -> [{pretty}]")
    return "\n".join(lines)


def main(argv=None):
    """Run the pipeline over a word list (or the bundled words) and print it.

    Returns the process exit status.
    """
    argv = sys.argv[1:] if argv is None else argv
    if argv:
        try:
            words = read_word_list(argv[0])
        except WordListError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1
    else:
        words = list(BUILTIN_DICTIONARY)

    if not words:
        print(
            "No words supplied; provide a newline separated list "
            "or rely on the built-in sample."
        )
        return 0

    print(f"Processing {len(words)} words...")
    results, accumulator = embed_words(words)
    if results:
        print(format_results(results))

    if not any(entry["definition"] is not None for entry in results):
        print(
            "No dictionary entries matched the provided words. "
            "Try using the bundled examples."
        )
        return 0

    print()
    print(format_embeddings(accumulator))
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    sys.exit(main())
