"""Content scoring engine for article quality and SEO optimization."""

from .models import (
    ContentStructure,
    KeywordAnalysis,
    Priority,
    ReadabilityScores,
    RecommendationCategory,
    RecommendationType,
    ScoreBreakdown,
    SEOAnalysisResult,
    SEOMetadata,
    SEORecommendation,
    SEOScores,
    TextMetrics,
)
from .scoring.engine import SEOScoringEngine, analyze_content
from .text_analysis.keywords import analyze_keyword
from .text_analysis.metrics import get_text_metrics
from .text_analysis.readability import calculate_readability_scores
from .text_analysis.structure import analyze_content_structure

__version__ = "1.0.0"

__all__ = [
    "ContentStructure",
    "KeywordAnalysis",
    "Priority",
    "ReadabilityScores",
    "RecommendationCategory",
    "RecommendationType",
    "ScoreBreakdown",
    "SEOAnalysisResult",
    "SEOMetadata",
    "SEORecommendation",
    "SEOScores",
    "SEOScoringEngine",
    "TextMetrics",
    "analyze_content",
    "analyze_content_structure",
    "analyze_keyword",
    "calculate_readability_scores",
    "get_text_metrics",
]
