"""Command-line interface for naive-sentiment.

Provides ``shell``, ``classify``, ``tokenize``, ``stats`` and ``evaluate``
commands with rich terminal output using the ``click`` and ``rich``
libraries.

Usage::

    naive-sentiment shell
    naive-sentiment classify "The food was wonderful"
    naive-sentiment evaluate --folds 10 -c datasets/imdb_labelled.txt
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .classifier import SentimentClassifier
from .config import Settings
from .corpus import CorpusStats, load_corpus_with_stats
from .evaluation import ClassificationMetrics, cross_validate
from .models import ClassificationResult, Sentiment
from .tokenizer import tokenize as tokenize_sentence

logger = logging.getLogger(__name__)

console = Console()

corpus_option = click.option(
    "--corpus", "-c", "corpus_paths", multiple=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Labeled corpus file (repeatable). Defaults to $NAIVE_SENTIMENT_CORPUS.",
)


def _get_label_style(label: Sentiment) -> str:
    """Return a rich style string for a sentiment."""
    return {
        Sentiment.POSITIVE: "bold green",
        Sentiment.NEGATIVE: "bold red",
    }.get(label, "")


def _resolve_paths(settings: Settings, corpus_paths: tuple[Path, ...]) -> tuple[Path, ...]:
    return corpus_paths or settings.corpus_paths


def _load_corpus(paths: tuple[Path, ...]) -> tuple[dict[str, Sentiment], CorpusStats]:
    try:
        return load_corpus_with_stats(*paths)
    except OSError as e:
        console.print(f"[bold red]Error:[/] {e}")
        sys.exit(1)


def _train(paths: tuple[Path, ...]) -> tuple[SentimentClassifier, CorpusStats]:
    corpus, corpus_stats = _load_corpus(paths)
    logger.debug("Training on %s", ", ".join(str(p) for p in paths))
    classifier = SentimentClassifier()
    with console.status("[bold blue]Training classifier...", spinner="dots"):
        classifier.train(corpus)
    if not classifier.is_trained:
        console.print("[bold red]Error:[/] corpus contains no usable sentences")
        sys.exit(1)
    return classifier, corpus_stats


@click.group()
@click.version_option(package_name="naive-sentiment")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """Naive Bayes sentiment classifier for short English sentences.

    Trains on a tab-separated labeled corpus and labels new sentences as
    positive or negative.
    """
    settings = Settings.from_env()
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level_value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = settings


@main.command()
@corpus_option
@click.pass_obj
def shell(settings: Settings, corpus_paths: tuple[Path, ...]) -> None:
    """Interactively classify sentences typed on stdin.

    Enter one sentence per line; end with Ctrl-D (EOF) or Ctrl-C.
    """
    classifier, _ = _train(_resolve_paths(settings, corpus_paths))

    while True:
        console.print(settings.prompt, end="")
        try:
            sentence = sys.stdin.readline()
        except KeyboardInterrupt:
            break
        if not sentence:
            break

        label = classifier.predict(sentence).label
        console.print(f"> Your text is [{_get_label_style(label)}]{label.value}[/]\n")

    console.print()


@main.command()
@click.argument("text")
@corpus_option
@click.option("--output", "-o", type=click.Choice(["rich", "json"]), default="rich",
              help="Output format.")
@click.pass_obj
def classify(
    settings: Settings,
    text: str,
    corpus_paths: tuple[Path, ...],
    output: str,
) -> None:
    """Classify a single sentence.

    Example: naive-sentiment classify "I loved this place"
    """
    classifier, _ = _train(_resolve_paths(settings, corpus_paths))
    result = classifier.predict(text)

    if output == "json":
        click.echo(json.dumps(result.to_dict(), indent=2))
    else:
        _render_result(text, result)


@main.command()
@click.argument("text")
def tokenize(text: str) -> None:
    """Show the tokens extracted from TEXT."""
    click.echo(json.dumps(tokenize_sentence(text)))


@main.command()
@corpus_option
@click.option("--top", "-n", default=10, show_default=True,
              help="Number of most frequent words to list per class.")
@click.option("--output", "-o", type=click.Choice(["rich", "json"]), default="rich",
              help="Output format.")
@click.pass_obj
def stats(
    settings: Settings,
    corpus_paths: tuple[Path, ...],
    top: int,
    output: str,
) -> None:
    """Show corpus and vocabulary statistics."""
    classifier, corpus_stats = _train(_resolve_paths(settings, corpus_paths))
    clf_stats = classifier.stats
    top_words = {s: classifier.words.most_common(s, top) for s in Sentiment}

    if output == "json":
        click.echo(json.dumps({
            "corpus": corpus_stats.to_dict(),
            "classifier": clf_stats.to_dict(),
            "top_words": {s.value: words for s, words in top_words.items()},
        }, indent=2))
        return

    console.print(Panel(
        f"Files: {', '.join(corpus_stats.files)}\n"
        f"Lines: {corpus_stats.lines_read} | "
        f"Accepted: {corpus_stats.accepted} | "
        f"Skipped: {corpus_stats.skipped}\n"
        f"Vocabulary: {clf_stats.vocabulary_size} | "
        f"Distinct (per class): {clf_stats.distinct_word_count}",
        title="Corpus",
        border_style="blue",
    ))

    table = Table(title="Training Data")
    table.add_column("Class", style="cyan")
    table.add_column("Sentences", justify="right")
    table.add_column("Words", justify="right")
    table.add_column("Prior", justify="right")
    for s in Sentiment:
        table.add_row(
            s.value,
            str(clf_stats.sentence_counts[s]),
            str(clf_stats.word_counts[s]),
            f"{classifier.prior_probability(s):.2%}",
        )
    console.print(table)

    for s in Sentiment:
        words = ", ".join(f"{w} ({n})" for w, n in top_words[s]) or "-"
        console.print(f"[{_get_label_style(s)}]{s.value}[/]: {words}")
    console.print()


@main.command()
@corpus_option
@click.option("--folds", "-k", default=5, show_default=True, type=click.IntRange(min=2),
              help="Number of cross-validation folds.")
@click.option("--seed", default=42, show_default=True, help="Random seed for fold assignment.")
@click.option("--output", "-o", type=click.Choice(["rich", "json"]), default="rich",
              help="Output format.")
@click.pass_obj
def evaluate(
    settings: Settings,
    corpus_paths: tuple[Path, ...],
    folds: int,
    seed: int,
    output: str,
) -> None:
    """Estimate accuracy with stratified k-fold cross-validation."""
    corpus, _ = _load_corpus(_resolve_paths(settings, corpus_paths))

    with console.status("[bold blue]Cross-validating...", spinner="dots"):
        results = cross_validate(corpus, k=folds, seed=seed)

    if not results:
        console.print("[bold red]Error:[/] corpus too small for cross-validation")
        sys.exit(1)

    mean_accuracy = sum(m.accuracy for m in results) / len(results)
    mean_f1 = sum(m.macro_f1 for m in results) / len(results)

    if output == "json":
        click.echo(json.dumps({
            "folds": [m.to_dict() for m in results],
            "mean_accuracy": round(mean_accuracy, 4),
            "mean_macro_f1": round(mean_f1, 4),
        }, indent=2))
    else:
        _render_folds(results, mean_accuracy, mean_f1)


# ------------------------------------------------------------------
# Rich rendering helpers
# ------------------------------------------------------------------

def _render_result(text: str, result: ClassificationResult) -> None:
    """Render a ClassificationResult with rich formatting."""
    label = result.label
    style = _get_label_style(label)

    table = Table(show_header=True)
    table.add_column("Class", style="cyan")
    table.add_column("Score", justify="right")
    for s in Sentiment:
        table.add_row(s.value, f"{result.scores[s]:.6g}")

    console.print(Panel(
        f"{escape(text.strip())}\n\n"
        f"Tokens: {', '.join(result.tokens) or '-'}\n"
        f"Label: [{style}]{label.value}[/]",
        title="Sentiment",
        border_style="blue",
    ))
    console.print(table)
    console.print()


def _render_folds(
    results: list[ClassificationMetrics],
    mean_accuracy: float,
    mean_f1: float,
) -> None:
    """Render per-fold cross-validation metrics as a rich table."""
    table = Table(title="Cross-Validation")
    table.add_column("Fold", justify="right", width=5)
    table.add_column("Accuracy", justify="right")
    for s in Sentiment:
        table.add_column(f"{s.value.title()} F1", justify="right")
    table.add_column("Macro F1", justify="right")

    for i, m in enumerate(results, 1):
        table.add_row(
            str(i),
            f"{m.accuracy:.2%}",
            *(f"{m.score(s).f1:.4f}" for s in Sentiment),
            f"{m.macro_f1:.4f}",
        )

    console.print(table)
    console.print(f"Mean accuracy: [bold]{mean_accuracy:.2%}[/] | Mean macro F1: [bold]{mean_f1:.4f}[/]")
    console.print()


if __name__ == "__main__":
    main()
