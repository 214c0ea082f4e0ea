"""Data models for sentiment classification."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Sentiment(str, Enum):
    """The two sentiment classes."""

    POSITIVE = "positive"
    NEGATIVE = "negative"


@dataclass
class ClassificationResult:
    """Scores for a single sentence plus the winning label.

    The scores are unnormalized relative likelihoods; only their ordering
    is meaningful. They do not sum to 1.
    """

    scores: dict[Sentiment, float]
    tokens: list[str] = field(default_factory=list)

    @property
    def label(self) -> Sentiment:
        """Predicted class. Ties resolve to negative."""
        if self.scores[Sentiment.POSITIVE] > self.scores[Sentiment.NEGATIVE]:
            return Sentiment.POSITIVE
        return Sentiment.NEGATIVE

    @property
    def positive(self) -> float:
        return self.scores[Sentiment.POSITIVE]

    @property
    def negative(self) -> float:
        return self.scores[Sentiment.NEGATIVE]

    def to_dict(self) -> dict:
        return {
            "label": self.label.value,
            "scores": {s.value: self.scores[s] for s in Sentiment},
            "tokens": list(self.tokens),
        }


@dataclass
class ClassifierStats:
    """Snapshot of what a classifier has learned.

    Attributes:
        sentence_counts: Number of training sentences per class.
        vocabulary_size: Number of distinct tokens seen in any class.
        word_counts: Total token occurrences per class.
        distinct_word_count: Per-class distinct tokens, summed over classes.
    """

    sentence_counts: dict[Sentiment, int] = field(default_factory=dict)
    vocabulary_size: int = 0
    word_counts: dict[Sentiment, int] = field(default_factory=dict)
    distinct_word_count: int = 0

    @property
    def total_sentences(self) -> int:
        return sum(self.sentence_counts.values())

    @property
    def total_words(self) -> int:
        return sum(self.word_counts.values())

    def to_dict(self) -> dict:
        return {
            "sentences": {s.value: n for s, n in self.sentence_counts.items()},
            "words": {s.value: n for s, n in self.word_counts.items()},
            "vocabulary_size": self.vocabulary_size,
            "distinct_word_count": self.distinct_word_count,
        }
