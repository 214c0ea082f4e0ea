"""Evaluation helpers: metrics and stratified cross-validation.

Used to measure how well the classifier generalizes to sentences it has
not seen, e.g. via ``naive-sentiment evaluate``. Everything here is
two-class: counts live in a 2x2 confusion table keyed by ``Sentiment``.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Optional

from .classifier import SentimentClassifier
from .models import Sentiment
from .tokenizer import Tokenizer

logger = logging.getLogger(__name__)


def _empty_confusion() -> dict[Sentiment, dict[Sentiment, int]]:
    return {actual: {predicted: 0 for predicted in Sentiment} for actual in Sentiment}


def _ratio(numerator: int | float, denominator: int | float) -> float:
    return numerator / denominator if denominator else 0.0


# ---------------------------------------------------------------------------
# Metrics
# ---------------------------------------------------------------------------

@dataclass
class ClassScore:
    """Precision, recall and F1 for one sentiment, treated as the target."""

    precision: float
    recall: float
    support: int

    @property
    def f1(self) -> float:
        return _ratio(2 * self.precision * self.recall, self.precision + self.recall)

    def to_dict(self) -> dict:
        return {
            "precision": round(self.precision, 4),
            "recall": round(self.recall, 4),
            "f1": round(self.f1, 4),
            "support": self.support,
        }


@dataclass
class ClassificationMetrics:
    """Agreement between true and predicted sentiments.

    ``confusion[actual][predicted]`` counts sentences; every other figure
    is derived from it.
    """

    confusion: dict[Sentiment, dict[Sentiment, int]] = field(default_factory=_empty_confusion)

    @property
    def total(self) -> int:
        return sum(sum(row.values()) for row in self.confusion.values())

    @property
    def correct(self) -> int:
        return sum(self.confusion[s][s] for s in Sentiment)

    @property
    def accuracy(self) -> float:
        return _ratio(self.correct, self.total)

    def score(self, sentiment: Sentiment) -> ClassScore:
        """Per-class scores with ``sentiment`` as the positive target."""
        hits = self.confusion[sentiment][sentiment]
        predicted = sum(self.confusion[actual][sentiment] for actual in Sentiment)
        actual = sum(self.confusion[sentiment].values())
        return ClassScore(
            precision=_ratio(hits, predicted),
            recall=_ratio(hits, actual),
            support=actual,
        )

    @property
    def macro_f1(self) -> float:
        """F1 averaged over both sentiments, unweighted."""
        return sum(self.score(s).f1 for s in Sentiment) / len(Sentiment)

    def to_dict(self) -> dict:
        return {
            "accuracy": round(self.accuracy, 4),
            "macro_f1": round(self.macro_f1, 4),
            "classes": {s.value: self.score(s).to_dict() for s in Sentiment},
            "confusion": {
                actual.value: {predicted.value: n for predicted, n in row.items()}
                for actual, row in self.confusion.items()
            },
        }


def compute_metrics(
    y_true: Sequence[Sentiment | str],
    y_pred: Sequence[Sentiment | str],
) -> ClassificationMetrics:
    """Tally true/predicted label pairs into a confusion table.

    Raises:
        ValueError: If the sequences differ in length or hold an unknown label.
    """
    if len(y_true) != len(y_pred):
        raise ValueError("y_true and y_pred must have the same length")

    metrics = ClassificationMetrics()
    for actual, predicted in zip(y_true, y_pred):
        metrics.confusion[Sentiment(actual)][Sentiment(predicted)] += 1
    return metrics


# ---------------------------------------------------------------------------
# Cross-Validation
# ---------------------------------------------------------------------------

def stratified_k_fold(
    labels: Sequence[Sentiment | str],
    k: int = 5,
    seed: int = 42,
) -> list[tuple[list[int], list[int]]]:
    """Split indices into ``k`` train/test pairs with balanced sentiments.

    Each sentiment's indices are shuffled and dealt round-robin across the
    folds, so every test split holds roughly the corpus-wide class balance.

    Raises:
        ValueError: If ``k`` is less than 2.
    """
    if k < 2:
        raise ValueError(f"k must be at least 2, got {k}")

    rng = random.Random(seed)
    held_out: list[list[int]] = [[] for _ in range(k)]

    for sentiment in Sentiment:
        indices = [i for i, label in enumerate(labels) if Sentiment(label) is sentiment]
        rng.shuffle(indices)
        for fold, test in enumerate(held_out):
            test.extend(indices[fold::k])

    everything = range(len(labels))
    folds = []
    for test in held_out:
        test_set = set(test)
        folds.append(([i for i in everything if i not in test_set], sorted(test)))
    return folds


def evaluate(
    classifier: SentimentClassifier,
    corpus: Mapping[str, Sentiment | str],
) -> ClassificationMetrics:
    """Score an already-trained classifier against a labeled corpus."""
    sentences = list(corpus.keys())
    y_true = [Sentiment(corpus[s]) for s in sentences]
    y_pred = [result.label for result in classifier.classify_batch(sentences)]
    return compute_metrics(y_true, y_pred)


def cross_validate(
    corpus: Mapping[str, Sentiment | str],
    k: int = 5,
    seed: int = 42,
    tokenizer: Optional[Tokenizer] = None,
) -> list[ClassificationMetrics]:
    """Run stratified k-fold cross-validation.

    A fresh classifier is trained on each fold's training split and
    scored on its held-out split.

    Returns:
        One ClassificationMetrics per fold. Folds with an empty train or
        test split (possible on tiny corpora) are skipped.
    """
    sentences = list(corpus.keys())
    labels = [Sentiment(corpus[s]) for s in sentences]

    results: list[ClassificationMetrics] = []
    for fold_idx, (train_idx, test_idx) in enumerate(stratified_k_fold(labels, k=k, seed=seed)):
        if not train_idx or not test_idx:
            logger.debug("Fold %d has an empty split, skipping", fold_idx)
            continue

        classifier = SentimentClassifier(tokenizer=tokenizer)
        classifier.train({sentences[i]: labels[i] for i in train_idx})

        metrics = evaluate(classifier, {sentences[i]: labels[i] for i in test_idx})
        logger.info("Fold %d/%d accuracy: %.4f", fold_idx + 1, k, metrics.accuracy)
        results.append(metrics)

    return results
