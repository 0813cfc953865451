"""Weighted scoring and recommendation generation."""

from .engine import SEOScoringEngine, analyze_content
from .recommendations import RULES, AnalysisContext, generate_recommendations

__all__ = [
    'AnalysisContext',
    'RULES',
    'SEOScoringEngine',
    'analyze_content',
    'generate_recommendations',
]
