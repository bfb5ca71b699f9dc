"""Command-line entry point.

Usage:
    lesk-wsd data/semcor_test.txt
    lesk-wsd data/semcor_test.txt --context WINDOW --window-size 5 --similarity COSINE
    lesk-wsd data/semcor_test.txt --top-k 3 --by-pos --report reports/lesk.json

Output:
    One line ``<corpus>\\t<precision>\\t<recall>\\t<f1>`` on stdout.
    Options not given on the command line fall back to LESK_* environment
    variables (a ``.env`` file is honored), then to the defaults.
"""

import logging
from pathlib import Path
from typing import Optional

import typer

from lesk_wsd import pipeline
from lesk_wsd.config import load_settings
from lesk_wsd.errors import LeskError
from lesk_wsd.wsd.evaluation import compute_metrics_by_segment, evaluation_to_dataframe

logger = logging.getLogger(__name__)

app = typer.Typer(help="Lesk word sense disambiguation and top-K evaluation")


@app.command()
def main(
    corpus: Path = typer.Argument(..., help="Path to the sense-annotated test corpus"),
    context: Optional[str] = typer.Option(
        None,
        "--context",
        "-c",
        help="Context option: ALL_WORDS, ALL_WORDS_R, WINDOW or POS",
    ),
    window_size: Optional[int] = typer.Option(
        None,
        "--window-size",
        "-w",
        help="Odd window size >= 3 (WINDOW context)",
    ),
    similarity: Optional[str] = typer.Option(
        None,
        "--similarity",
        "-s",
        help="Similarity measure: JACCARD or COSINE",
    ),
    top_k: Optional[int] = typer.Option(
        None,
        "--top-k",
        "-k",
        help="Number of top-ranked senses to evaluate",
    ),
    stopwords: Optional[Path] = typer.Option(
        None,
        "--stopwords",
        help="Stopword list, one word per line",
    ),
    spacy_model: Optional[str] = typer.Option(
        None,
        "--spacy-model",
        help="spaCy model used for tokenization, lemmas and POS tags",
    ),
    workers: Optional[int] = typer.Option(
        None,
        "--workers",
        "-j",
        help="Number of worker threads",
    ),
    by_pos: bool = typer.Option(
        False,
        "--by-pos",
        help="Also print metrics per POS tag",
    ),
    report: Optional[Path] = typer.Option(
        None,
        "--report",
        "-o",
        help="Write a JSON report with per-occurrence top senses",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log progress to stderr",
    ),
) -> None:
    """Disambiguate every ambiguous word of CORPUS and print P/R/F1."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    try:
        settings = load_settings(
            stopwords_path=stopwords,
            spacy_model=spacy_model,
            context_option=context,
            window_size=window_size,
            similarity=similarity,
            top_k=top_k,
            workers=workers,
        )
        run = pipeline.run_lesk(corpus, settings, show_progress=verbose)
        if report is not None:
            pipeline.save_report(run, report)
    except LeskError as exc:
        logger.error(str(exc))
        raise typer.Exit(1)

    result = run.result
    typer.echo(f"{corpus}\t{result.precision}\t{result.recall}\t{result.f1}")

    if by_pos:
        df = evaluation_to_dataframe(run.predictions, k=settings.top_k)
        typer.echo(compute_metrics_by_segment(df, "pos").to_string())


if __name__ == "__main__":
    app()
