"""Loading labeled sentence corpora from disk.

The expected format is one example per line::

    <sentence>\\t<label>

A label of ``1`` marks a positive sentence; any other label is negative.
Lines that do not split into exactly two tab-separated fields are
skipped. This matches the UCI "Sentiment Labelled Sentences" files
(``amazon_cells_labelled.txt``, ``imdb_labelled.txt``,
``yelp_labelled.txt``), which can be loaded together.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from .models import Sentiment

logger = logging.getLogger(__name__)

POSITIVE_LABEL = "1"


@dataclass
class CorpusStats:
    """Line accounting for one or more loaded corpus files."""

    files: list[str] = field(default_factory=list)
    lines_read: int = 0
    accepted: int = 0
    skipped: int = 0

    def to_dict(self) -> dict:
        return {
            "files": self.files,
            "lines_read": self.lines_read,
            "accepted": self.accepted,
            "skipped": self.skipped,
        }


def parse_line(line: str) -> tuple[str, Sentiment] | None:
    """Parse a single ``sentence<TAB>label`` line.

    Returns:
        ``(sentence, sentiment)`` or ``None`` if the line is malformed.
    """
    fields = line.rstrip("\r\n").split("\t")
    if len(fields) != 2:
        return None
    sentence, label = fields
    if label == POSITIVE_LABEL:
        return sentence, Sentiment.POSITIVE
    return sentence, Sentiment.NEGATIVE


def load_corpus_with_stats(
    *paths: str | Path,
) -> tuple[dict[str, Sentiment], CorpusStats]:
    """Load and merge corpus files, returning the corpus and line counts.

    Later files (and later lines) win when a sentence repeats.

    Raises:
        FileNotFoundError: If any path does not exist.
    """
    corpus: dict[str, Sentiment] = {}
    stats = CorpusStats()

    for raw_path in paths:
        path = Path(raw_path)
        if not path.exists():
            raise FileNotFoundError(f"Corpus file not found: {path}")

        stats.files.append(str(path))
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            for lineno, line in enumerate(f, 1):
                stats.lines_read += 1
                parsed = parse_line(line)
                if parsed is None:
                    stats.skipped += 1
                    logger.debug("Skipping malformed line %s:%d", path, lineno)
                    continue
                sentence, sentiment = parsed
                corpus[sentence] = sentiment
                stats.accepted += 1

    logger.info(
        "Loaded %d sentences from %d file(s) (%d lines skipped)",
        len(corpus), len(stats.files), stats.skipped,
    )
    return corpus, stats


def load_corpus(*paths: str | Path) -> dict[str, Sentiment]:
    """Load and merge one or more corpus files into a sentence -> label map."""
    corpus, _ = load_corpus_with_stats(*paths)
    return corpus
