"""Tests for sentiment data models."""

from __future__ import annotations

from naive_sentiment.models import ClassificationResult, ClassifierStats, Sentiment


class TestSentiment:
    def test_values(self):
        assert Sentiment.POSITIVE.value == "positive"
        assert Sentiment.NEGATIVE.value == "negative"

    def test_exactly_two_classes(self):
        assert len(Sentiment) == 2

    def test_is_str(self):
        assert Sentiment("positive") is Sentiment.POSITIVE
        assert Sentiment.NEGATIVE == "negative"


class TestClassificationResult:
    def test_positive_wins_when_strictly_greater(self):
        result = ClassificationResult(scores={Sentiment.POSITIVE: 0.3, Sentiment.NEGATIVE: 0.1})
        assert result.label is Sentiment.POSITIVE

    def test_negative_wins_when_greater(self):
        result = ClassificationResult(scores={Sentiment.POSITIVE: 0.1, Sentiment.NEGATIVE: 0.3})
        assert result.label is Sentiment.NEGATIVE

    def test_tie_resolves_negative(self):
        result = ClassificationResult(scores={Sentiment.POSITIVE: 0.2, Sentiment.NEGATIVE: 0.2})
        assert result.label is Sentiment.NEGATIVE

    def test_underflow_tie_resolves_negative(self):
        result = ClassificationResult(scores={Sentiment.POSITIVE: 0.0, Sentiment.NEGATIVE: 0.0})
        assert result.label is Sentiment.NEGATIVE

    def test_to_dict(self):
        result = ClassificationResult(
            scores={Sentiment.POSITIVE: 0.5, Sentiment.NEGATIVE: 0.25},
            tokens=["tasty"],
        )
        assert result.to_dict() == {
            "label": "positive",
            "scores": {"positive": 0.5, "negative": 0.25},
            "tokens": ["tasty"],
        }

    def test_score_accessors(self):
        result = ClassificationResult(scores={Sentiment.POSITIVE: 0.4, Sentiment.NEGATIVE: 0.6})
        assert result.positive == 0.4
        assert result.negative == 0.6
        assert result.tokens == []


class TestClassifierStats:
    def test_defaults(self):
        stats = ClassifierStats()
        assert stats.total_sentences == 0
        assert stats.total_words == 0

    def test_totals_and_to_dict(self):
        stats = ClassifierStats(
            sentence_counts={Sentiment.POSITIVE: 3, Sentiment.NEGATIVE: 1},
            vocabulary_size=5,
            word_counts={Sentiment.POSITIVE: 6, Sentiment.NEGATIVE: 2},
            distinct_word_count=6,
        )
        assert stats.total_sentences == 4
        assert stats.total_words == 8
        assert stats.to_dict() == {
            "sentences": {"positive": 3, "negative": 1},
            "words": {"positive": 6, "negative": 2},
            "vocabulary_size": 5,
            "distinct_word_count": 6,
        }
