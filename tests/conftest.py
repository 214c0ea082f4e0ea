"""Shared test fixtures for naive-sentiment tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from naive_sentiment.classifier import SentimentClassifier
from naive_sentiment.models import Sentiment


@pytest.fixture
def sample_corpus_path() -> Path:
    """Path to the bundled sample corpus."""
    return Path(__file__).parent.parent / "datasets" / "sample_labelled.txt"


@pytest.fixture
def excellent_corpus() -> dict[str, Sentiment]:
    """Corpus where "excellent" appears only in positive sentences."""
    return {
        "Excellent food!": Sentiment.POSITIVE,
        "Excellent service.": Sentiment.POSITIVE,
        "Truly excellent": Sentiment.POSITIVE,
        "Awful food": Sentiment.NEGATIVE,
    }


@pytest.fixture
def trained_classifier(excellent_corpus: dict[str, Sentiment]) -> SentimentClassifier:
    """Classifier trained on the excellent corpus."""
    classifier = SentimentClassifier()
    classifier.train(excellent_corpus)
    return classifier


@pytest.fixture
def corpus_file(tmp_path: Path) -> Path:
    """Tab-separated corpus file matching ``excellent_corpus``, plus junk lines."""
    file = tmp_path / "labelled.txt"
    file.write_text(
        "Excellent food!\t1\n"
        "Excellent service.\t1\n"
        "this line has no label\n"
        "Truly excellent\t1\n"
        "too\tmany\tfields\n"
        "Awful food\t0\n",
        encoding="utf-8",
    )
    return file
