"""Sentence tokenization for the bag-of-words sentiment model.

A sentence is lowercased, stripped of everything except ASCII letters,
digits and spaces, split on whitespace, and filtered against a fixed
English stop-word set. Order and duplicates are kept, since every
occurrence counts as one vote during training.

Note that the stop-word set contains contractions such as ``don't``.
Normalization removes the apostrophe first (``don't`` becomes ``dont``),
so those entries never match.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

# ---------------------------------------------------------------------------
# Stop words
# ---------------------------------------------------------------------------

STOP_WORDS: frozenset[str] = frozenset({
    "i", "me", "my", "myself", "we", "our", "ours", "ourselves", "you",
    "your", "yours", "yourself", "yourselves", "he", "him", "his",
    "himself", "she", "her", "hers", "herself", "it", "its", "itself",
    "they", "them", "their", "theirs", "themselves", "what", "which",
    "who", "whom", "this", "that", "these", "those", "am", "is", "are",
    "was", "were", "be", "been", "being", "have", "has", "had", "having",
    "do", "does", "did", "doing", "a", "an", "the", "and", "but", "if",
    "or", "because", "as", "until", "while", "of", "at", "by", "for",
    "with", "about", "against", "between", "into", "through", "during",
    "before", "after", "above", "below", "to", "from", "up", "down", "in",
    "out", "on", "off", "over", "under", "again", "further", "then",
    "once", "here", "there", "when", "where", "why", "how", "all", "any",
    "both", "each", "few", "more", "most", "other", "some", "such", "no",
    "nor", "not", "only", "same", "so", "than", "too", "very", "can",
    "will", "just", "don't", "should", "should've", "now", "aren't",
    "couldn't", "didn't", "doesn't", "hasn't", "haven't", "isn't",
    "shouldn't", "wasn't", "weren't", "won't", "wouldn't",
})

_DISALLOWED_RE = re.compile(r"[^a-z0-9 ]+")


# ---------------------------------------------------------------------------
# Tokenizer
# ---------------------------------------------------------------------------

class Tokenizer:
    """Turns raw sentences into content tokens.

    Example::

        tokenizer = Tokenizer()
        tokenizer.tokenize("The restaurant is excellent")
        # ['restaurant', 'excellent']

    Args:
        stop_words: Words to discard after normalization. Defaults to
            :data:`STOP_WORDS`.
    """

    def __init__(self, stop_words: Iterable[str] = STOP_WORDS) -> None:
        self._stop_words = frozenset(stop_words)

    @property
    def stop_words(self) -> frozenset[str]:
        return self._stop_words

    def normalize(self, sentence: str) -> str:
        """Lowercase and delete every character outside ``[a-z0-9 ]``.

        Deleted characters are not replaced by spaces, so ``"good\\nbad"``
        becomes ``"goodbad"``.
        """
        return _DISALLOWED_RE.sub("", sentence.lower())

    def tokenize(self, sentence: str) -> list[str]:
        """Split a sentence into non-stop-word tokens, in order."""
        return [
            word
            for word in self.normalize(sentence).split()
            if word not in self._stop_words
        ]

    def __call__(self, sentence: str) -> list[str]:
        return self.tokenize(sentence)


_DEFAULT_TOKENIZER = Tokenizer()


def tokenize(sentence: str, stop_words: Iterable[str] | None = None) -> list[str]:
    """Tokenize a sentence with the default or a custom stop-word set."""
    if stop_words is None:
        return _DEFAULT_TOKENIZER.tokenize(sentence)
    return Tokenizer(stop_words).tokenize(sentence)
