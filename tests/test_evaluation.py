"""Tests for evaluation metrics and cross-validation."""

from __future__ import annotations

import pytest

from naive_sentiment.classifier import SentimentClassifier
from naive_sentiment.corpus import load_corpus
from naive_sentiment.evaluation import (
    ClassificationMetrics,
    compute_metrics,
    cross_validate,
    evaluate,
    stratified_k_fold,
)
from naive_sentiment.models import Sentiment

POS = Sentiment.POSITIVE
NEG = Sentiment.NEGATIVE


# ---------------------------------------------------------------------------
# Metrics Tests
# ---------------------------------------------------------------------------

class TestComputeMetrics:
    def test_perfect_predictions(self):
        y = [POS, NEG, POS, NEG]
        metrics = compute_metrics(y, y)
        assert metrics.accuracy == 1.0
        assert metrics.macro_f1 == 1.0
        assert metrics.total == 4
        assert metrics.correct == 4

    def test_all_wrong(self):
        metrics = compute_metrics([POS, NEG], [NEG, POS])
        assert metrics.accuracy == 0.0
        assert metrics.score(POS).f1 == 0.0
        assert metrics.macro_f1 == 0.0

    def test_confusion_keyed_by_sentiment(self):
        metrics = compute_metrics([POS, POS, NEG, NEG], [POS, NEG, NEG, NEG])
        assert metrics.confusion == {
            POS: {POS: 1, NEG: 1},
            NEG: {POS: 0, NEG: 2},
        }
        assert metrics.accuracy == 0.75

    def test_per_class_scores_from_confusion(self):
        metrics = compute_metrics([POS, POS, NEG, NEG], [POS, NEG, NEG, NEG])
        positive = metrics.score(POS)
        assert positive.precision == 1.0
        assert positive.recall == 0.5
        assert positive.support == 2
        assert positive.f1 == pytest.approx(2 / 3)

        negative = metrics.score(NEG)
        assert negative.precision == pytest.approx(2 / 3)
        assert negative.recall == 1.0
        assert negative.support == 2
        assert negative.f1 == pytest.approx(0.8)

        assert metrics.macro_f1 == pytest.approx((2 / 3 + 0.8) / 2)

    def test_class_never_predicted_scores_zero(self):
        metrics = compute_metrics([POS, NEG], [POS, POS])
        negative = metrics.score(NEG)
        assert negative.precision == 0.0
        assert negative.recall == 0.0
        assert negative.f1 == 0.0

    def test_accepts_plain_strings(self):
        metrics = compute_metrics(["positive", "negative"], [POS, NEG])
        assert metrics.accuracy == 1.0
        assert metrics.confusion[POS][POS] == 1

    def test_unknown_label_raises(self):
        with pytest.raises(ValueError):
            compute_metrics(["neutral"], [POS])

    def test_length_mismatch_raises(self):
        with pytest.raises(ValueError, match="same length"):
            compute_metrics([POS], [POS, NEG])

    def test_empty_inputs(self):
        metrics = compute_metrics([], [])
        assert metrics.total == 0
        assert metrics.accuracy == 0.0
        assert metrics.macro_f1 == 0.0

    def test_to_dict(self):
        metrics = compute_metrics([POS, NEG], [POS, POS])
        data = metrics.to_dict()
        assert data["accuracy"] == 0.5
        assert data["classes"]["positive"] == {
            "precision": 0.5, "recall": 1.0, "f1": 0.6667, "support": 1,
        }
        assert data["classes"]["negative"]["support"] == 1
        assert data["confusion"] == {
            "positive": {"positive": 1, "negative": 0},
            "negative": {"positive": 1, "negative": 0},
        }


# ---------------------------------------------------------------------------
# Cross-Validation Tests
# ---------------------------------------------------------------------------

class TestStratifiedKFold:
    def test_folds_partition_all_indices(self):
        labels = [POS] * 10 + [NEG] * 10
        folds = stratified_k_fold(labels, k=5)
        assert len(folds) == 5
        all_test = sorted(i for _, test in folds for i in test)
        assert all_test == list(range(20))
        for train, test in folds:
            assert not set(train) & set(test)
            assert len(train) + len(test) == 20

    def test_folds_are_stratified(self):
        labels = [POS] * 10 + [NEG] * 10
        for _, test in stratified_k_fold(labels, k=5):
            assert sum(1 for i in test if labels[i] is POS) == 2
            assert sum(1 for i in test if labels[i] is NEG) == 2

    def test_deterministic_for_seed(self):
        labels = [POS, NEG] * 6
        assert stratified_k_fold(labels, k=3, seed=7) == stratified_k_fold(labels, k=3, seed=7)

    def test_k_below_two_raises(self):
        with pytest.raises(ValueError, match="at least 2"):
            stratified_k_fold([POS, NEG], k=1)


class TestCrossValidate:
    def test_returns_one_result_per_fold(self, sample_corpus_path):
        corpus = load_corpus(sample_corpus_path)
        results = cross_validate(corpus, k=5)
        assert len(results) == 5
        for metrics in results:
            assert isinstance(metrics, ClassificationMetrics)
            assert 0.0 <= metrics.accuracy <= 1.0

    def test_skips_folds_with_empty_split(self):
        corpus = {"great": POS, "awful": NEG}
        # Both sentences land in fold 0, leaving its training split empty
        assert cross_validate(corpus, k=3) == []

    def test_evaluate_trained_classifier(self, trained_classifier, excellent_corpus):
        metrics = evaluate(trained_classifier, excellent_corpus)
        assert metrics.accuracy == 1.0

    def test_evaluate_held_out(self):
        clf = SentimentClassifier()
        clf.train({"tasty fresh": POS, "stale cold": NEG})
        metrics = evaluate(clf, {"fresh bread": POS, "cold soup": NEG})
        assert metrics.accuracy == 1.0
