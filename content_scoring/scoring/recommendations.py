"""Rule-based recommendations derived from analysis results.

Each rule inspects one metric against a fixed threshold and returns a
recommendation when triggered. Rules run in declaration order and the final
list is stably sorted by priority, highest first.
"""
from dataclasses import dataclass
from typing import Callable, List, Optional

from ..models import (
    ContentStructure,
    KeywordAnalysis,
    Priority,
    ReadabilityScores,
    RecommendationCategory,
    RecommendationType,
    SEOMetadata,
    SEORecommendation,
    SEOScores,
    TextMetrics,
)
from . import thresholds as t


@dataclass
class AnalysisContext:
    """Everything a recommendation rule may inspect."""

    content: str
    metadata: SEOMetadata
    text_metrics: TextMetrics
    readability: ReadabilityScores
    primary_keyword: Optional[KeywordAnalysis]
    structure: ContentStructure
    scores: SEOScores


Rule = Callable[[AnalysisContext], Optional[SEORecommendation]]


def content_length_rule(ctx: AnalysisContext) -> Optional[SEORecommendation]:
    words = ctx.text_metrics.word_count
    if words < t.CONTENT_LENGTH.minimum:
        return SEORecommendation(
            category=RecommendationCategory.CONTENT,
            type=RecommendationType.ERROR,
            priority=Priority.HIGH,
            title="Content Too Short",
            description=f"Your content has only {words} words.",
            suggestion=(
                f"Expand your content to at least {t.CONTENT_LENGTH.minimum} words "
                "for better SEO performance."
            ),
            current_value=f"{words} words",
            target_value=f"{t.CONTENT_LENGTH.minimum}+ words",
            impact_score=8,
        )
    if words < t.CONTENT_LENGTH.good:
        return SEORecommendation(
            category=RecommendationCategory.CONTENT,
            type=RecommendationType.SUGGESTION,
            priority=Priority.MEDIUM,
            title="Consider Expanding Content",
            description="Your content length is adequate but could be improved.",
            suggestion=(
                f"Consider expanding to {t.CONTENT_LENGTH.good}+ words "
                "for even better SEO performance."
            ),
            current_value=f"{words} words",
            target_value=f"{t.CONTENT_LENGTH.good}+ words",
            impact_score=6,
        )
    return None


def readability_rule(ctx: AnalysisContext) -> Optional[SEORecommendation]:
    flesch = ctx.readability.flesch_reading_ease
    if flesch >= t.DIFFICULT_READING_EASE:
        return None
    return SEORecommendation(
        category=RecommendationCategory.READABILITY,
        type=RecommendationType.WARNING,
        priority=Priority.MEDIUM,
        title="Content Difficult to Read",
        description="Your content may be too complex for most web users.",
        suggestion="Use shorter sentences and simpler words to improve readability.",
        current_value=f"{int(flesch + 0.5)} (Difficult)",
        target_value=f"{t.band_label(t.FLESCH_TARGET_BAND[:2])} (Good)",
        impact_score=7,
    )


def keyword_density_rule(ctx: AnalysisContext) -> Optional[SEORecommendation]:
    analysis = ctx.primary_keyword
    if analysis is None:
        return None

    bands = t.KEYWORD_DENSITY
    keyword = ctx.metadata.focus_keyword
    target = f"{bands.min:g}-{bands.ideal:g}%"
    current = f"{analysis.density:.2f}%"

    if analysis.density < bands.min:
        return SEORecommendation(
            category=RecommendationCategory.KEYWORDS,
            type=RecommendationType.WARNING,
            priority=Priority.HIGH,
            title="Keyword Density Too Low",
            description=f'Your focus keyword "{keyword}" appears too infrequently.',
            suggestion=(
                "Use your focus keyword more naturally throughout the content. "
                f"Target density: {target}"
            ),
            current_value=current,
            target_value=target,
            impact_score=8,
        )
    if analysis.density > bands.max:
        return SEORecommendation(
            category=RecommendationCategory.KEYWORDS,
            type=RecommendationType.ERROR,
            priority=Priority.HIGH,
            title="Keyword Over-Optimization",
            description=f'Your focus keyword "{keyword}" appears too frequently.',
            suggestion="Reduce keyword usage to avoid over-optimization penalties.",
            current_value=current,
            target_value=target,
            impact_score=9,
        )
    return None


def title_length_rule(ctx: AnalysisContext) -> Optional[SEORecommendation]:
    length = len(ctx.metadata.title)
    if t.in_range(length, t.TITLE_OPTIMAL_LENGTH):
        return None
    return SEORecommendation(
        category=RecommendationCategory.TECHNICAL,
        type=RecommendationType.WARNING,
        priority=Priority.HIGH,
        title="Title Length Not Optimal",
        description="Your title length is not in the optimal range for search engines.",
        suggestion=(
            f"Optimize your title to be between {t.band_label(t.TITLE_OPTIMAL_LENGTH)} "
            "characters for best results."
        ),
        current_value=f"{length} characters",
        target_value=t.band_label(t.TITLE_OPTIMAL_LENGTH, "characters"),
        impact_score=7,
    )


def title_keyword_rule(ctx: AnalysisContext) -> Optional[SEORecommendation]:
    keyword = ctx.metadata.focus_keyword.strip()
    if not keyword or keyword.lower() in ctx.metadata.title.lower():
        return None
    return SEORecommendation(
        category=RecommendationCategory.TECHNICAL,
        type=RecommendationType.ERROR,
        priority=Priority.HIGH,
        title="Focus Keyword Missing from Title",
        description="Your title does not contain the focus keyword.",
        suggestion=f'Include your focus keyword "{keyword}" in the title.',
        current_value="Not present",
        target_value="Present in title",
        impact_score=9,
    )


def meta_description_rule(ctx: AnalysisContext) -> Optional[SEORecommendation]:
    description = ctx.metadata.meta_description
    if description and t.in_range(len(description), t.META_OPTIMAL_LENGTH):
        return None
    return SEORecommendation(
        category=RecommendationCategory.TECHNICAL,
        type=RecommendationType.WARNING,
        priority=Priority.MEDIUM,
        title="Meta Description Length Not Optimal",
        description="Your meta description length is not in the optimal range.",
        suggestion=(
            f"Write a meta description between {t.band_label(t.META_OPTIMAL_LENGTH)} characters."
        ),
        current_value=f"{len(description)} characters",
        target_value=t.band_label(t.META_OPTIMAL_LENGTH, "characters"),
        impact_score=6,
    )


def h1_rule(ctx: AnalysisContext) -> Optional[SEORecommendation]:
    h1_count = ctx.structure.headings.h1
    if h1_count == 0:
        return SEORecommendation(
            category=RecommendationCategory.CONTENT,
            type=RecommendationType.ERROR,
            priority=Priority.HIGH,
            title="Missing H1 Tag",
            description="Your content does not have an H1 heading.",
            suggestion="Add one H1 heading as the main title of your content.",
            current_value="0 H1 tags",
            target_value="1 H1 tag",
            impact_score=8,
        )
    if h1_count > 1:
        return SEORecommendation(
            category=RecommendationCategory.CONTENT,
            type=RecommendationType.WARNING,
            priority=Priority.MEDIUM,
            title="Multiple H1 Tags",
            description="Your content has multiple H1 headings.",
            suggestion="Use only one H1 tag per page for better SEO.",
            current_value=f"{h1_count} H1 tags",
            target_value="1 H1 tag",
            impact_score=6,
        )
    return None


def h2_rule(ctx: AnalysisContext) -> Optional[SEORecommendation]:
    if ctx.structure.headings.h2 > 0:
        return None
    return SEORecommendation(
        category=RecommendationCategory.CONTENT,
        type=RecommendationType.SUGGESTION,
        priority=Priority.MEDIUM,
        title="Consider Adding H2 Headings",
        description="Your content lacks H2 headings for better structure.",
        suggestion="Add H2 headings to break up your content into logical sections.",
        current_value="0 H2 tags",
        target_value="2+ H2 tags",
        impact_score=5,
    )


def hero_image_rule(ctx: AnalysisContext) -> Optional[SEORecommendation]:
    url = ctx.metadata.hero_image_url
    alt = ctx.metadata.hero_image_alt
    if not url or not url.strip():
        return SEORecommendation(
            category=RecommendationCategory.USER_EXPERIENCE,
            type=RecommendationType.SUGGESTION,
            priority=Priority.MEDIUM,
            title="Missing Hero Image",
            description="Your article does not have a hero image.",
            suggestion="Add a relevant hero image to improve user engagement.",
            current_value="No hero image",
            target_value="Hero image with alt text",
            impact_score=5,
        )
    if not alt or not alt.strip():
        return SEORecommendation(
            category=RecommendationCategory.USER_EXPERIENCE,
            type=RecommendationType.WARNING,
            priority=Priority.MEDIUM,
            title="Missing Hero Image Alt Text",
            description="Your hero image does not have alt text.",
            suggestion="Add descriptive alt text to your hero image for accessibility and SEO.",
            current_value="No alt text",
            target_value="Descriptive alt text",
            impact_score=6,
        )
    return None


RULES: List[Rule] = [
    content_length_rule,
    readability_rule,
    keyword_density_rule,
    title_length_rule,
    title_keyword_rule,
    meta_description_rule,
    h1_rule,
    h2_rule,
    hero_image_rule,
]


def sort_by_priority(recommendations: List[SEORecommendation]) -> List[SEORecommendation]:
    """Stable sort, highest priority first."""
    return sorted(recommendations, key=lambda rec: rec.priority.rank, reverse=True)


def generate_recommendations(
    ctx: AnalysisContext, rules: Optional[List[Rule]] = None
) -> List[SEORecommendation]:
    """Run every rule against ``ctx`` and return the triggered recommendations.

    Args:
        ctx: Analysis results for one article
        rules: Rules to apply, defaults to :data:`RULES`

    Returns:
        Recommendations sorted by priority (critical > high > medium > low)
    """
    triggered = []
    for rule in rules if rules is not None else RULES:
        recommendation = rule(ctx)
        if recommendation is not None:
            triggered.append(recommendation)
    return sort_by_priority(triggered)
