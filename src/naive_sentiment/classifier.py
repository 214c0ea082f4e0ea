"""Naive Bayes sentiment classifier with Laplace smoothing.

Training counts how often each token appears in positive and negative
sentences. Classification scores a sentence against each class as::

    score(c) = P(c) * prod((count(t, c) + 1) / (words(c) + V))
                    / prod((count(t) + 1) / (words + V))

where ``V`` is the per-class distinct-token tally (a token seen in both
classes counts twice). The second product divides out each token's
overall corpus frequency as a stand-in for the Bayes denominator. The
two scores are not normalized; only their ordering matters.

Everything is plain Python floats. Long sentences can underflow to 0.0.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Optional

from .models import ClassificationResult, ClassifierStats, Sentiment
from .tokenizer import Tokenizer

logger = logging.getLogger(__name__)


class UntrainedClassifierError(RuntimeError):
    """Raised when scoring is attempted before any sentence was ingested."""


def _as_sentiment(label: Sentiment | str) -> Sentiment:
    try:
        return Sentiment(label)
    except ValueError:
        raise ValueError(
            f"Unknown sentiment label: {label!r}. "
            f"Expected one of {[s.value for s in Sentiment]}"
        ) from None


# ---------------------------------------------------------------------------
# Frequency Table
# ---------------------------------------------------------------------------

class FrequencyTable:
    """Per-class occurrence counts for every token seen during training.

    Every token in the table has a counter for both classes, possibly zero.
    Counts only ever grow. Class totals and per-class distinct tallies are
    kept up to date on each :meth:`add_word` so queries are O(1).
    """

    def __init__(self) -> None:
        self._counts: dict[str, dict[Sentiment, int]] = {}
        self._class_totals: dict[Sentiment, int] = {s: 0 for s in Sentiment}
        self._class_distinct: dict[Sentiment, int] = {s: 0 for s in Sentiment}

    def add_word(self, token: str, sentiment: Sentiment) -> None:
        """Record one occurrence of ``token`` in a ``sentiment`` sentence."""
        counter = self._counts.get(token)
        if counter is None:
            counter = {s: 0 for s in Sentiment}
            self._counts[token] = counter

        if counter[sentiment] == 0:
            self._class_distinct[sentiment] += 1
        counter[sentiment] += 1
        self._class_totals[sentiment] += 1

    def count(self, token: str, sentiment: Sentiment) -> int:
        """Occurrences of ``token`` in ``sentiment`` sentences (0 if unknown)."""
        counter = self._counts.get(token)
        if counter is None:
            return 0
        return counter[sentiment]

    def total_occurrences(self, token: str) -> int:
        """Occurrences of ``token`` across both classes."""
        counter = self._counts.get(token)
        if counter is None:
            return 0
        return sum(counter.values())

    def class_word_count(self, sentiment: Sentiment) -> int:
        """Token occurrences (with repetition) observed for ``sentiment``."""
        return self._class_totals[sentiment]

    def total_word_count(self) -> int:
        return sum(self.class_word_count(s) for s in Sentiment)

    def distinct_word_count(self) -> int:
        """Number of (token, class) pairs with a non-zero count.

        A token seen only in positive sentences contributes 1; one seen in
        both classes contributes 2.
        """
        return sum(self._class_distinct.values())

    def most_common(
        self,
        sentiment: Sentiment,
        n: int = 10,
    ) -> list[tuple[str, int]]:
        """Return the ``n`` most frequent tokens for a class.

        Ties are broken alphabetically so output is stable.
        """
        ranked = sorted(
            ((token, counter[sentiment]) for token, counter in self._counts.items()
             if counter[sentiment] > 0),
            key=lambda x: (-x[1], x[0]),
        )
        return ranked[:n]

    def __len__(self) -> int:
        return len(self._counts)

    def __contains__(self, token: object) -> bool:
        return token in self._counts

    def __iter__(self) -> Iterator[str]:
        return iter(self._counts)


# ---------------------------------------------------------------------------
# Sentiment Classifier
# ---------------------------------------------------------------------------

class SentimentClassifier:
    """Two-class bag-of-words Naive Bayes classifier.

    Example::

        classifier = SentimentClassifier()
        classifier.train({
            "The restaurant is excellent": Sentiment.POSITIVE,
            "Their food is awful": Sentiment.NEGATIVE,
        })

        scores = classifier.classify("excellent food")
        result = classifier.predict("excellent food")
        print(result.label)  # Sentiment.POSITIVE

    Repeated calls to :meth:`train` accumulate; there is no reset.

    Args:
        tokenizer: Tokenizer used for both training and classification.
    """

    def __init__(self, tokenizer: Optional[Tokenizer] = None) -> None:
        self.tokenizer = tokenizer or Tokenizer()
        self._sentences: dict[Sentiment, list[str]] = {s: [] for s in Sentiment}
        self._words = FrequencyTable()

    @property
    def words(self) -> FrequencyTable:
        """The learned frequency table."""
        return self._words

    @property
    def is_trained(self) -> bool:
        """Whether at least one sentence has been ingested."""
        return any(self._sentences.values())

    @property
    def stats(self) -> ClassifierStats:
        return ClassifierStats(
            sentence_counts={s: len(self._sentences[s]) for s in Sentiment},
            vocabulary_size=len(self._words),
            word_counts={s: self._words.class_word_count(s) for s in Sentiment},
            distinct_word_count=self._words.distinct_word_count(),
        )

    def sentences(self, sentiment: Sentiment | str) -> list[str]:
        """Training sentences for a class, in the order they were ingested."""
        return list(self._sentences[_as_sentiment(sentiment)])

    # ------------------------------------------------------------------
    # Training
    # ------------------------------------------------------------------

    def train(self, corpus: Mapping[str, Sentiment | str]) -> None:
        """Ingest a labeled corpus.

        Args:
            corpus: Mapping of sentence text to its sentiment label.

        Raises:
            ValueError: If a label is not a known sentiment.
        """
        tokens_seen = 0
        for sentence, label in corpus.items():
            sentiment = _as_sentiment(label)
            self._sentences[sentiment].append(sentence)
            for token in self.tokenizer.tokenize(sentence):
                self._words.add_word(token, sentiment)
                tokens_seen += 1

        logger.info(
            "Trained on %d sentences (%d tokens); vocabulary now %d tokens",
            len(corpus), tokens_seen, len(self._words),
        )

    # ------------------------------------------------------------------
    # Inference
    # ------------------------------------------------------------------

    def prior_probability(self, sentiment: Sentiment | str) -> float:
        """Fraction of training sentences labeled ``sentiment``.

        Raises:
            UntrainedClassifierError: If no sentences have been ingested.
        """
        sentiment = _as_sentiment(sentiment)
        total = sum(len(s) for s in self._sentences.values())
        if total == 0:
            raise UntrainedClassifierError(
                "Classifier not trained. Call train() first."
            )
        return len(self._sentences[sentiment]) / total

    def probability(self, tokens: list[str], sentiment: Sentiment | str) -> float:
        """Unnormalized score of ``tokens`` under ``sentiment``.

        All likelihood multiplications run before all frequency divisions.
        If training produced no tokens at all, the smoothing denominators
        are zero and the score is just the prior.
        """
        sentiment = _as_sentiment(sentiment)
        prob = self.prior_probability(sentiment)

        distinct = self._words.distinct_word_count()
        class_denominator = self._words.class_word_count(sentiment) + distinct
        total_denominator = self._words.total_word_count() + distinct
        if class_denominator == 0 or total_denominator == 0:
            return prob

        for token in tokens:
            prob *= (self._words.count(token, sentiment) + 1) / class_denominator
        for token in tokens:
            prob /= (self._words.total_occurrences(token) + 1) / total_denominator

        return prob

    def classify(self, sentence: str) -> dict[Sentiment, float]:
        """Score a sentence against both classes.

        Returns:
            Mapping of sentiment to unnormalized score. The larger score
            wins; ties go to negative.

        Raises:
            UntrainedClassifierError: If the classifier has not been trained.
        """
        return self._score(self.tokenizer.tokenize(sentence))

    def predict(self, sentence: str) -> ClassificationResult:
        """Score a sentence and wrap the result with its winning label."""
        tokens = self.tokenizer.tokenize(sentence)
        return ClassificationResult(scores=self._score(tokens), tokens=tokens)

    def classify_batch(self, sentences: Iterable[str]) -> list[ClassificationResult]:
        return [self.predict(sentence) for sentence in sentences]

    def _score(self, tokens: list[str]) -> dict[Sentiment, float]:
        return {s: self.probability(tokens, s) for s in Sentiment}
