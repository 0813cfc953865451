import json
import sys
import time
from pathlib import Path
from typing import List, Optional

import chardet
import click
import structlog
from dotenv import load_dotenv

from .config import ServiceConfig
from .errors import BaseError, ContentInputError
from .insights import (
    analyze_content_depth,
    analyze_eeat,
    analyze_link_profile,
    analyze_readability_comprehensive,
    analyze_snippet_optimization,
    analyze_topic_coverage,
)
from .logging_config import configure_logging
from .metrics import record_analysis, record_error, start_metrics_server
from .models import SEOMetadata
from .scoring.engine import SEOScoringEngine
from .text_analysis.keywords import analyze_keyword
from .text_analysis.readability import calculate_readability_scores
from .text_analysis.structure import analyze_content_structure

logger = structlog.get_logger(__name__)


def read_content(path: Path) -> str:
    """Read a text file, detecting its encoding.

    Raises:
        ContentInputError: If the file cannot be read or decoded
    """
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise ContentInputError(f"Cannot read {path}: {e}", details={"path": str(path)}) from e

    encoding = chardet.detect(raw)["encoding"] or "utf-8"
    try:
        return raw.decode(encoding)
    except (UnicodeDecodeError, LookupError) as e:
        raise ContentInputError(
            f"Cannot decode {path} as {encoding}",
            details={"path": str(path), "encoding": encoding},
        ) from e


def load_corpus(corpus_dir: Optional[Path]) -> Optional[List[str]]:
    """Read every file in ``corpus_dir`` as one corpus document."""
    if corpus_dir is None:
        return None
    return [read_content(p) for p in sorted(corpus_dir.iterdir()) if p.is_file()]


def fail(error: BaseError):
    record_error(error.category.value)
    click.echo(f"Error: {error.message}", err=True)
    sys.exit(1)


def echo_json(data) -> None:
    click.echo(json.dumps(data, indent=2))


@click.group()
@click.option("--log-level", default=None, help="Logging level (overrides CONTENT_SCORING_LOG_LEVEL)")
@click.option("--json-logs", is_flag=True, help="Emit logs as JSON lines")
@click.pass_context
def cli(ctx, log_level, json_logs):
    """Content Scoring Engine CLI"""
    load_dotenv()
    try:
        config = ServiceConfig.from_env()
    except BaseError as e:
        fail(e)

    if log_level:
        config.log_level = log_level
    if json_logs:
        config.log_json = True
    configure_logging(config.log_level, config.log_json)
    ctx.obj = config


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--title", default="", help="SEO title")
@click.option("--meta-description", default="", help="Meta description")
@click.option("--slug", default="", help="URL slug")
@click.option("--keyword", "focus_keyword", default="", help="Focus keyword")
@click.option("--secondary", "secondary_keywords", multiple=True, help="Secondary keyword (repeatable)")
@click.option("--hero-image-url", default=None, help="Hero image URL")
@click.option("--hero-image-alt", default=None, help="Hero image alt text")
@click.option(
    "--corpus-dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Directory of reference documents for TF-IDF",
)
@click.option("--json", "as_json", is_flag=True, help="Print the full result as JSON")
def analyze(
    file,
    title,
    meta_description,
    slug,
    focus_keyword,
    secondary_keywords,
    hero_image_url,
    hero_image_alt,
    corpus_dir,
    as_json,
):
    """Score an article and list recommendations."""
    try:
        content = read_content(file)
        corpus = load_corpus(corpus_dir)
    except BaseError as e:
        fail(e)

    metadata = SEOMetadata(
        title=title,
        meta_description=meta_description,
        slug=slug,
        focus_keyword=focus_keyword,
        secondary_keywords=tuple(secondary_keywords),
        hero_image_url=hero_image_url,
        hero_image_alt=hero_image_alt,
    )

    start = time.perf_counter()
    result = SEOScoringEngine().analyze(content, metadata, corpus)
    duration = time.perf_counter() - start
    record_analysis(result, duration, operation="cli")
    logger.debug("file_analyzed", path=str(file), overall=result.scores.overall, duration=duration)

    if as_json:
        click.echo(result.to_json())
        return

    scores = result.scores
    click.echo(f"Overall score: {scores.overall}/100")
    click.echo("-" * 50)
    click.echo(f"{'Content quality':<30} {scores.content_quality:>5}")
    click.echo(f"{'Keyword optimization':<30} {scores.keyword_optimization:>5}")
    click.echo(f"{'Technical SEO':<30} {scores.technical_seo:>5}")
    click.echo(f"{'User experience':<30} {scores.user_experience:>5}")

    if result.recommendations:
        click.echo("\nRecommendations:")
        for rec in result.recommendations:
            click.echo(f"- [{rec.priority.value}] {rec.title}: {rec.suggestion}")
    else:
        click.echo("\nNo recommendations")


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Print scores as JSON")
def readability(file, as_json):
    """Print readability scores for a file."""
    try:
        content = read_content(file)
    except BaseError as e:
        fail(e)

    scores = calculate_readability_scores(content)
    if as_json:
        click.echo(scores.to_json())
        return

    click.echo(f"{'Flesch reading ease':<30} {scores.flesch_reading_ease:>8.1f}")
    click.echo(f"{'Flesch-Kincaid grade':<30} {scores.flesch_kincaid_grade:>8.1f}")
    click.echo(f"{'Gunning fog':<30} {scores.gunning_fog_index:>8.1f}")
    click.echo(f"{'SMOG':<30} {scores.smog_index:>8.1f}")
    click.echo(f"{'Automated readability':<30} {scores.automated_readability_index:>8.1f}")
    click.echo(f"{'Coleman-Liau':<30} {scores.coleman_liau_index:>8.1f}")
    click.echo(f"{'Reading time (min)':<30} {scores.reading_time_minutes:>8}")
    click.echo(f"Target audience: {scores.target_audience}")
    for tip in scores.recommendations:
        click.echo(f"- {tip}")


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("keyword")
@click.option(
    "--corpus-dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Directory of reference documents for TF-IDF",
)
def keyword(file, keyword, corpus_dir):
    """Analyze one keyword in a file."""
    try:
        content = read_content(file)
        corpus = load_corpus(corpus_dir)
    except BaseError as e:
        fail(e)

    click.echo(analyze_keyword(content, keyword, corpus).to_json())


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def structure(file):
    """Count headings, lists, images and links in a file."""
    try:
        content = read_content(file)
    except BaseError as e:
        fail(e)

    click.echo(analyze_content_structure(content).to_json())


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--keyword", "focus_keyword", default="", help="Focus keyword")
@click.option("--reference-year", type=int, default=None, help="Year treated as current")
def insights(file, focus_keyword, reference_year):
    """Print advisory insights (intent, snippets, depth, links, E-E-A-T)."""
    try:
        content = read_content(file)
    except BaseError as e:
        fail(e)

    echo_json(
        {
            "topic_coverage": analyze_topic_coverage(content, focus_keyword).to_dict(),
            "snippet_optimization": analyze_snippet_optimization(content).to_dict(),
            "content_depth": analyze_content_depth(
                content, focus_keyword, reference_year=reference_year
            ).to_dict(),
            "link_profile": analyze_link_profile(content).to_dict(),
            "readability": analyze_readability_comprehensive(content).to_dict(),
            "eeat": analyze_eeat(content).to_dict(),
        }
    )


@cli.command()
@click.option("--host", default=None, help="Interface to bind (default from config)")
@click.option("--port", type=int, default=None, help="Port to listen on (default from config)")
@click.pass_obj
def serve(config, host, port):
    """Run the HTTP API until interrupted."""
    from .api import start_api_server, stop_api_server

    host = host or config.api_host
    port = port or config.api_port

    if config.metrics_enabled:
        start_metrics_server(config.metrics_port)
        click.echo(f"Metrics available on port {config.metrics_port}")

    start_api_server(host=host, port=port, config=config)
    click.echo(f"Serving content scoring API on http://{host}:{port}")

    try:
        while True:
            time.sleep(1)
    except KeyboardInterrupt:
        click.echo("\nShutting down...")
    finally:
        stop_api_server()


if __name__ == "__main__":
    cli()
