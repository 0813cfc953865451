"""Weighted SEO scoring engine.

Combines the text analyzers into four category scores (content quality,
keyword optimization, technical SEO, user experience) and an overall 0-100
score. Each component is scored against graduated thresholds from
:mod:`content_scoring.scoring.thresholds` rather than pass/fail checks.

The engine is a pure function of its inputs: it performs no I/O, keeps no
state between calls and never raises for malformed drafts.
"""
import math
import re
from dataclasses import dataclass
from typing import List, Mapping, Optional, Sequence, Union

import structlog

from ..models import (
    AnalysisMetrics,
    ContentStructure,
    KeywordAnalysis,
    ReadabilityScores,
    ScoreBreakdown,
    SEOAnalysisResult,
    SEOMetadata,
    SEOScores,
    TextMetrics,
)
from ..text_analysis.keywords import KeywordAnalyzer, first_h1_text, first_paragraph_text
from ..text_analysis.metrics import get_text_metrics
from ..text_analysis.readability import score_readability
from ..text_analysis.structure import analyze_content_structure
from . import thresholds as t
from .recommendations import AnalysisContext, generate_recommendations

logger = structlog.get_logger(__name__)

WHITESPACE_RE = re.compile(r"\s+")
CLEAN_SLUG_RE = re.compile(r"[a-z0-9-]+")
ACCEPTABLE_SLUG_RE = re.compile(r"[a-z0-9_-]+", re.IGNORECASE)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up."""
    return int(math.floor(value + 0.5))


def clamp_score(value: float) -> float:
    return max(0.0, min(100.0, value))


def slug_contains(slug: str, keyword: str) -> bool:
    """True if the lower-cased ``keyword`` appears in ``slug``, spaces read as hyphens."""
    return WHITESPACE_RE.sub("-", keyword) in slug.lower()


@dataclass
class KeywordSet:
    """Analyses for the focus keyword and each secondary keyword."""

    primary: Optional[KeywordAnalysis]
    secondary: List[KeywordAnalysis]

    @property
    def all(self) -> List[KeywordAnalysis]:
        return ([self.primary] if self.primary else []) + self.secondary


class SEOScoringEngine:
    """Scores article content and metadata, and derives recommendations."""

    def __init__(self):
        self.keyword_analyzer = KeywordAnalyzer()

    def analyze(
        self,
        content: str,
        metadata: Union[SEOMetadata, Mapping],
        corpus: Optional[Sequence[str]] = None,
    ) -> SEOAnalysisResult:
        """Run the full analysis.

        Args:
            content: Article body as HTML or plain text
            metadata: SEOMetadata, or a dict accepted by ``SEOMetadata.from_dict``
            corpus: Optional documents for corpus-relative keyword weighting

        Returns:
            SEOAnalysisResult with scores, sorted recommendations and metrics
        """
        if not isinstance(metadata, SEOMetadata):
            metadata = SEOMetadata.from_dict(metadata or {})
        content = content or ""

        text_metrics = get_text_metrics(content)
        readability = score_readability(text_metrics)
        structure = analyze_content_structure(content)
        keywords = self.analyze_keywords(content, metadata, corpus)

        scores = self.calculate_scores(
            content, metadata, text_metrics, readability, keywords, structure
        )
        recommendations = generate_recommendations(
            AnalysisContext(
                content=content,
                metadata=metadata,
                text_metrics=text_metrics,
                readability=readability,
                primary_keyword=keywords.primary,
                structure=structure,
                scores=scores,
            )
        )

        logger.debug(
            "content_analyzed",
            overall=scores.overall,
            word_count=text_metrics.word_count,
            recommendations=len(recommendations),
        )

        return SEOAnalysisResult(
            scores=scores,
            recommendations=recommendations,
            metrics=AnalysisMetrics(
                text_metrics=text_metrics,
                readability_scores=readability,
                keyword_analysis=keywords.all,
                content_structure=structure,
            ),
        )

    def analyze_keywords(
        self, content: str, metadata: SEOMetadata, corpus: Optional[Sequence[str]]
    ) -> KeywordSet:
        primary = None
        if metadata.focus_keyword.strip():
            primary = self.keyword_analyzer.analyze(content, metadata.focus_keyword, corpus)

        secondary = [
            self.keyword_analyzer.analyze(content, keyword, corpus)
            for keyword in metadata.secondary_keywords
        ]
        return KeywordSet(primary=primary, secondary=secondary)

    def calculate_scores(
        self,
        content: str,
        metadata: SEOMetadata,
        text_metrics: TextMetrics,
        readability: ReadabilityScores,
        keywords: KeywordSet,
        structure: ContentStructure,
    ) -> SEOScores:
        """Score every component and blend them into weighted categories."""
        breakdown = ScoreBreakdown(
            content_length=self.content_length_score(text_metrics.word_count),
            readability=self.readability_score(readability),
            content_structure=self.content_structure_score(structure),
            keyword_density=self.keyword_density_score(
                keywords.primary.density if keywords.primary else 0
            ),
            keyword_distribution=self.keyword_distribution_score(
                keywords.primary, content, metadata
            ),
            lsi_keywords=self.lsi_keywords_score(keywords.secondary),
            title_optimization=self.title_score(metadata.title, metadata.focus_keyword),
            meta_description_optimization=self.meta_description_score(
                metadata.meta_description, metadata.focus_keyword
            ),
            url_structure=self.url_structure_score(metadata.slug, metadata.focus_keyword),
            internal_linking=self.internal_linking_score(structure.links.internal),
            content_engagement=self.engagement_score(text_metrics, readability),
            visual_content=self.visual_content_score(
                structure.images, metadata.hero_image_url, metadata.hero_image_alt
            ),
            content_scannability=self.scannability_score(structure),
        )

        content_quality = self._category(breakdown, t.CONTENT_QUALITY_MIX, "content_quality")
        keyword_optimization = self._category(
            breakdown, t.KEYWORD_OPTIMIZATION_MIX, "keyword_optimization"
        )
        technical_seo = self._category(breakdown, t.TECHNICAL_SEO_MIX, "technical_seo")
        user_experience = self._category(breakdown, t.USER_EXPERIENCE_MIX, "user_experience")

        overall = content_quality + keyword_optimization + technical_seo + user_experience

        return SEOScores(
            overall=min(overall, 100),
            content_quality=content_quality,
            keyword_optimization=keyword_optimization,
            technical_seo=technical_seo,
            user_experience=user_experience,
            breakdown=breakdown,
        )

    @staticmethod
    def _category(breakdown: ScoreBreakdown, mix: Mapping[str, float], category: str) -> int:
        blended = sum(getattr(breakdown, name) * share for name, share in mix.items())
        return round_half_up(blended * t.SCORE_WEIGHTS[category] / 100)

    # Content quality

    @staticmethod
    def content_length_score(word_count: int) -> float:
        return t.tier_points(word_count, t.CONTENT_LENGTH_TIERS)

    @staticmethod
    def readability_score(readability: ReadabilityScores) -> float:
        flesch = readability.flesch_reading_ease
        score = t.band_points(flesch, (t.FLESCH_TARGET_BAND,))
        if not score:
            score = t.tier_points(flesch, t.FLESCH_TIERS, t.FLESCH_FLOOR_POINTS)
        score += t.ceiling_points(readability.flesch_kincaid_grade, t.GRADE_LEVEL_CEILINGS)
        score += t.ceiling_points(readability.gunning_fog_index, t.GUNNING_FOG_CEILINGS)
        return clamp_score(score)

    @staticmethod
    def content_structure_score(structure: ContentStructure) -> float:
        score = 0.0
        if structure.headings.h1 == 1:
            score += t.SINGLE_H1_POINTS
        elif structure.headings.h1 > 1:
            score += t.MULTIPLE_H1_POINTS

        if structure.headings.h2 > 0:
            score += t.H2_POINTS
        if structure.headings.h3 > 0:
            score += t.H3_POINTS

        score += t.tier_points(structure.total_lists, t.STRUCTURE_LIST_TIERS)

        if structure.has_semantic_structure:
            score += t.SEMANTIC_STRUCTURE_POINTS
        else:
            score += t.PLAIN_STRUCTURE_POINTS

        return clamp_score(score)

    # Keyword optimization

    @staticmethod
    def keyword_density_score(density: float) -> float:
        bands = t.KEYWORD_DENSITY
        if bands.min <= density <= bands.ideal:
            return 100.0
        if density < bands.min:
            return max(0.0, (density / bands.min) * 100)
        if density <= bands.max:
            return float(bands.acceptable_score)
        if density >= bands.danger:
            return 0.0
        penalty = (density - bands.max) * bands.penalty_per_point
        return max(0.0, bands.acceptable_score - penalty)

    @staticmethod
    def keyword_distribution_score(
        analysis: Optional[KeywordAnalysis], content: str, metadata: SEOMetadata
    ) -> float:
        keyword = metadata.focus_keyword.strip().lower()
        if analysis is None or not keyword:
            return 0.0

        points = t.DISTRIBUTION_POINTS
        score = 0.0
        if keyword in metadata.title.lower():
            score += points["title"]
        if slug_contains(metadata.slug, keyword):
            score += points["slug"]
        if keyword in metadata.meta_description.lower():
            score += points["meta_description"]

        h1 = first_h1_text(content)
        if h1 is not None and keyword in h1.lower():
            score += points["h1"]

        paragraph = first_paragraph_text(content)
        if paragraph is not None and keyword in paragraph.lower():
            score += points["first_paragraph"]

        score += min(analysis.prominence * t.PROMINENCE_BONUS_RATE, t.MAX_PROMINENCE_BONUS)
        return clamp_score(score)

    @staticmethod
    def lsi_keywords_score(secondary: Sequence[KeywordAnalysis]) -> float:
        """Share of secondary keywords that appear at least once."""
        if not secondary:
            return 0.0
        found = sum(1 for analysis in secondary if analysis.frequency > 0)
        return clamp_score(found / len(secondary) * 100)

    # Technical SEO

    @staticmethod
    def title_score(title: str, focus_keyword: str) -> float:
        if not title.strip():
            return 0.0

        score = t.band_points(len(title), t.TITLE_LENGTH_BANDS, t.TITLE_LENGTH_FLOOR)

        keyword = focus_keyword.strip().lower()
        position = title.lower().find(keyword) if keyword else -1
        if position == 0:
            score += t.TITLE_KEYWORD_AT_START
        elif 0 < position <= len(title) * 0.5:
            score += t.TITLE_KEYWORD_FIRST_HALF
        elif position > 0:
            score += t.TITLE_KEYWORD_SECOND_HALF

        words = len(WHITESPACE_RE.split(title))
        score += t.band_points(words, t.TITLE_WORD_BANDS, t.TITLE_WORD_FLOOR)
        return clamp_score(score)

    @staticmethod
    def meta_description_score(description: str, focus_keyword: str) -> float:
        if not description.strip():
            return 0.0

        score = t.band_points(len(description), t.META_LENGTH_BANDS, t.META_LENGTH_FLOOR)

        lowered = description.lower()
        keyword = focus_keyword.strip().lower()
        if keyword and keyword in lowered:
            score += t.META_KEYWORD_POINTS
        if any(word in lowered for word in t.CTA_WORDS):
            score += t.META_CTA_POINTS
        return clamp_score(score)

    @staticmethod
    def url_structure_score(slug: str, focus_keyword: str) -> float:
        if not slug.strip():
            return 0.0

        score = t.ceiling_points(len(slug), t.SLUG_LENGTH_CEILINGS, t.SLUG_LENGTH_FLOOR)

        keyword = focus_keyword.strip().lower()
        if keyword and slug_contains(slug, keyword):
            score += t.SLUG_KEYWORD_POINTS

        if CLEAN_SLUG_RE.fullmatch(slug):
            score += t.SLUG_CLEAN_POINTS
        elif ACCEPTABLE_SLUG_RE.fullmatch(slug):
            score += t.SLUG_ACCEPTABLE_POINTS
        else:
            score += t.SLUG_POOR_POINTS
        return clamp_score(score)

    @staticmethod
    def internal_linking_score(internal_links: int) -> float:
        return t.tier_points(internal_links, t.INTERNAL_LINK_TIERS)

    # User experience

    @staticmethod
    def engagement_score(text_metrics: TextMetrics, readability: ReadabilityScores) -> float:
        score = t.band_points(
            readability.reading_time_minutes, t.READING_TIME_BANDS, t.READING_TIME_FLOOR
        )

        words_per_paragraph = text_metrics.word_count / text_metrics.paragraph_count
        score += t.band_points(
            words_per_paragraph, t.PARAGRAPH_LENGTH_BANDS, t.PARAGRAPH_LENGTH_FLOOR
        )
        score += t.band_points(
            text_metrics.average_sentence_length,
            t.SENTENCE_LENGTH_BANDS,
            t.SENTENCE_LENGTH_FLOOR,
        )
        return clamp_score(score)

    @staticmethod
    def visual_content_score(
        image_count: int, hero_image_url: Optional[str], hero_image_alt: Optional[str]
    ) -> float:
        score = 0.0
        if hero_image_url and hero_image_url.strip():
            score += t.HERO_IMAGE_POINTS
            if hero_image_alt and hero_image_alt.strip():
                score += t.HERO_ALT_POINTS

        score += t.tier_points(image_count, t.IMAGE_TIERS)
        return clamp_score(score)

    @staticmethod
    def scannability_score(structure: ContentStructure) -> float:
        score = t.tier_points(structure.total_headings, t.HEADING_TIERS)
        score += t.tier_points(structure.total_lists, t.SCANNABILITY_LIST_TIERS)
        score += t.tier_points(structure.total_links, t.LINK_TIERS)
        return clamp_score(score)


def analyze_content(
    content: str,
    metadata: Union[SEOMetadata, Mapping],
    corpus: Optional[Sequence[str]] = None,
) -> SEOAnalysisResult:
    """Score ``content`` with ``metadata``; see :meth:`SEOScoringEngine.analyze`."""
    return SEOScoringEngine().analyze(content, metadata, corpus)
