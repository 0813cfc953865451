"""Prometheus metrics for the scoring service layers.

Metrics are recorded by the CLI and API around engine calls; the engine
itself stays free of side effects.
"""

from prometheus_client import Counter, Histogram, start_http_server

from .models import SEOAnalysisResult

ANALYSIS_DURATION = Histogram(
    "content_scoring_duration_seconds",
    "Time spent scoring content",
    ["operation"],
)
OVERALL_SCORE = Histogram(
    "content_scoring_overall_score",
    "Distribution of overall content scores",
    buckets=(10, 20, 30, 40, 50, 60, 70, 80, 90, 100),
)
RECOMMENDATIONS_EMITTED = Counter(
    "content_scoring_recommendations_total",
    "Number of recommendations emitted",
    ["priority"],
)
ANALYSIS_ERRORS = Counter(
    "content_scoring_errors_total",
    "Number of rejected scoring requests",
    ["error_type"],
)


def record_analysis(result: SEOAnalysisResult, duration: float, operation: str = "analyze") -> None:
    """Record one completed analysis.

    Args:
        result: The analysis result
        duration: Seconds the analysis took
        operation: Label for the calling surface
    """
    ANALYSIS_DURATION.labels(operation=operation).observe(duration)
    OVERALL_SCORE.observe(result.scores.overall)
    for recommendation in result.recommendations:
        RECOMMENDATIONS_EMITTED.labels(priority=recommendation.priority.value).inc()


def record_error(error_type: str) -> None:
    ANALYSIS_ERRORS.labels(error_type=error_type).inc()


def start_metrics_server(port: int = 9100) -> None:
    """Start the Prometheus metrics HTTP server."""
    start_http_server(port)
