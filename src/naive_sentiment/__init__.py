"""naive-sentiment -- Naive Bayes sentiment classification for short sentences."""

__version__ = "0.1.0"

from .classifier import FrequencyTable, SentimentClassifier, UntrainedClassifierError
from .config import Settings
from .corpus import CorpusStats, load_corpus, load_corpus_with_stats, parse_line
from .evaluation import (
    ClassificationMetrics,
    ClassScore,
    compute_metrics,
    cross_validate,
    evaluate,
    stratified_k_fold,
)
from .models import ClassificationResult, ClassifierStats, Sentiment
from .tokenizer import STOP_WORDS, Tokenizer, tokenize

__all__ = [
    # Core
    "SentimentClassifier",
    "FrequencyTable",
    "UntrainedClassifierError",
    "Sentiment",
    "ClassificationResult",
    "ClassifierStats",
    # Tokenization
    "Tokenizer",
    "tokenize",
    "STOP_WORDS",
    # Corpus
    "load_corpus",
    "load_corpus_with_stats",
    "parse_line",
    "CorpusStats",
    # Evaluation
    "ClassificationMetrics",
    "ClassScore",
    "compute_metrics",
    "cross_validate",
    "evaluate",
    "stratified_k_fold",
    # Configuration
    "Settings",
]
