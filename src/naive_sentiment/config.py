"""Runtime settings read from the environment (and an optional ``.env``)."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_CORPUS = Path("datasets") / "sample_labelled.txt"
DEFAULT_PROMPT = "Enter your text: "

ENV_CORPUS = "NAIVE_SENTIMENT_CORPUS"
ENV_LOG_LEVEL = "NAIVE_SENTIMENT_LOG_LEVEL"
ENV_PROMPT = "NAIVE_SENTIMENT_PROMPT"


@dataclass(frozen=True)
class Settings:
    """Application settings.

    Attributes:
        corpus_paths: Corpus files to train on.
        log_level: Name of the logging level for the CLI.
        prompt: Prompt shown by the interactive shell.
    """

    corpus_paths: tuple[Path, ...] = field(default_factory=lambda: (DEFAULT_CORPUS,))
    log_level: str = "WARNING"
    prompt: str = DEFAULT_PROMPT

    @property
    def log_level_value(self) -> int:
        """Numeric logging level; unknown names fall back to WARNING."""
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.WARNING

    @classmethod
    def from_env(cls, dotenv: bool = True) -> "Settings":
        """Build settings from environment variables.

        Args:
            dotenv: Load a ``.env`` file first (existing variables win).
        """
        if dotenv:
            load_dotenv()

        raw_corpus = os.getenv(ENV_CORPUS, "")
        paths = tuple(Path(p) for p in raw_corpus.split(os.pathsep) if p.strip())

        return cls(
            corpus_paths=paths or (DEFAULT_CORPUS,),
            log_level=os.getenv(ENV_LOG_LEVEL, "WARNING"),
            prompt=os.getenv(ENV_PROMPT, DEFAULT_PROMPT),
        )
