"""Text analysis components for content scoring."""

from .html import split_words, strip_html
from .keywords import KeywordAnalyzer, analyze_keyword
from .metrics import count_syllables, get_text_metrics
from .readability import ReadabilityCalculator, calculate_readability_scores, score_readability
from .structure import analyze_content_structure

__all__ = [
    'KeywordAnalyzer',
    'ReadabilityCalculator',
    'analyze_content_structure',
    'analyze_keyword',
    'calculate_readability_scores',
    'count_syllables',
    'get_text_metrics',
    'score_readability',
    'split_words',
    'strip_html',
]
