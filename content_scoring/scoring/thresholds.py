"""Policy constants for the scoring engine.

Every graduated threshold used by the scorers lives here so it can be tuned
without touching the scoring logic. Two table shapes are used:

* tiers: ``((minimum, points), ...)`` checked top to bottom, first
  ``value >= minimum`` wins;
* bands: ``((low, high, points), ...)`` checked top to bottom, first
  ``low <= value <= high`` wins.
"""
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

Tier = Tuple[float, float]
Band = Tuple[float, float, float]

# Category weights, summing to 100
SCORE_WEIGHTS = {
    "content_quality": 35,
    "keyword_optimization": 30,
    "technical_seo": 20,
    "user_experience": 15,
}

# Component weights within each category
CONTENT_QUALITY_MIX = {"content_length": 0.4, "readability": 0.4, "content_structure": 0.2}
KEYWORD_OPTIMIZATION_MIX = {"keyword_density": 0.5, "keyword_distribution": 0.35, "lsi_keywords": 0.15}
TECHNICAL_SEO_MIX = {
    "title_optimization": 0.4,
    "meta_description_optimization": 0.3,
    "url_structure": 0.15,
    "internal_linking": 0.15,
}
USER_EXPERIENCE_MIX = {"content_engagement": 0.55, "visual_content": 0.25, "content_scannability": 0.2}


@dataclass(frozen=True)
class ContentLengthThresholds:
    excellent: int = 2500
    good: int = 2000
    average: int = 1500
    minimum: int = 1000
    poor: int = 600


@dataclass(frozen=True)
class KeywordDensityBands:
    """Keyword density percentages.

    Attributes:
        min: Below this density the score scales down linearly
        ideal: Upper edge of the optimal band
        max: Above this density over-optimization penalties start
        danger: At or above this density the score is zero
    """

    min: float = 0.5
    ideal: float = 1.5
    max: float = 2.5
    danger: float = 5.0
    acceptable_score: float = 80
    penalty_per_point: float = 20


CONTENT_LENGTH = ContentLengthThresholds()
KEYWORD_DENSITY = KeywordDensityBands()

CONTENT_LENGTH_TIERS: Tuple[Tier, ...] = (
    (CONTENT_LENGTH.excellent, 100),
    (CONTENT_LENGTH.good, 70),
    (CONTENT_LENGTH.average, 60),
    (CONTENT_LENGTH.minimum, 40),
    (CONTENT_LENGTH.poor, 20),
)

# Readability component
FLESCH_TARGET_BAND: Band = (60, 80, 40)
FLESCH_TIERS: Tuple[Tier, ...] = ((50, 30), (30, 20))
FLESCH_FLOOR_POINTS = 10
GRADE_LEVEL_CEILINGS: Tuple[Tier, ...] = ((8, 30), (12, 20), (16, 10))
GUNNING_FOG_CEILINGS: Tuple[Tier, ...] = ((10, 30), (12, 20), (15, 10))

# Content structure component
SINGLE_H1_POINTS = 15
MULTIPLE_H1_POINTS = 5
H2_POINTS = 15
H3_POINTS = 10
STRUCTURE_LIST_TIERS: Tuple[Tier, ...] = ((3, 30), (2, 20), (1, 10))
SEMANTIC_STRUCTURE_POINTS = 30
PLAIN_STRUCTURE_POINTS = 10

# Keyword distribution component
DISTRIBUTION_POINTS = {
    "title": 25,
    "slug": 15,
    "meta_description": 15,
    "h1": 20,
    "first_paragraph": 10,
}
PROMINENCE_BONUS_RATE = 0.15
MAX_PROMINENCE_BONUS = 15

# Title component
TITLE_LENGTH_BANDS: Tuple[Band, ...] = ((30, 60, 40), (25, 70, 30), (20, 80, 20))
TITLE_LENGTH_FLOOR = 10
TITLE_OPTIMAL_LENGTH = (30, 60)
TITLE_KEYWORD_AT_START = 40
TITLE_KEYWORD_FIRST_HALF = 35
TITLE_KEYWORD_SECOND_HALF = 30
TITLE_WORD_BANDS: Tuple[Band, ...] = ((5, 12, 20), (3, 15, 15))
TITLE_WORD_FLOOR = 10

# Meta description component
META_LENGTH_BANDS: Tuple[Band, ...] = ((120, 160, 50), (100, 180, 40), (80, 200, 30))
META_LENGTH_FLOOR = 15
META_OPTIMAL_LENGTH = (120, 160)
META_KEYWORD_POINTS = 30
META_CTA_POINTS = 20
CTA_WORDS = ("learn", "discover", "find", "get", "try", "start", "explore", "read")

# Slug component
SLUG_LENGTH_CEILINGS: Tuple[Tier, ...] = ((75, 30), (100, 20))
SLUG_LENGTH_FLOOR = 10
SLUG_KEYWORD_POINTS = 40
SLUG_CLEAN_POINTS = 30
SLUG_ACCEPTABLE_POINTS = 20
SLUG_POOR_POINTS = 10

INTERNAL_LINK_TIERS: Tuple[Tier, ...] = ((5, 100), (3, 80), (1, 60))

# Engagement component
READING_TIME_BANDS: Tuple[Band, ...] = ((3, 8, 40), (2, 12, 30), (1, 15, 20))
READING_TIME_FLOOR = 10
PARAGRAPH_LENGTH_BANDS: Tuple[Band, ...] = ((40, 100, 30), (20, 150, 20))
PARAGRAPH_LENGTH_FLOOR = 10
SENTENCE_LENGTH_BANDS: Tuple[Band, ...] = ((12, 20, 30), (8, 25, 20))
SENTENCE_LENGTH_FLOOR = 10

# Visual content component
HERO_IMAGE_POINTS = 25
HERO_ALT_POINTS = 15
IMAGE_TIERS: Tuple[Tier, ...] = ((4, 60), (2, 40), (1, 20))

# Scannability component
HEADING_TIERS: Tuple[Tier, ...] = ((6, 50), (4, 40), (2, 30), (1, 20))
SCANNABILITY_LIST_TIERS: Tuple[Tier, ...] = ((2, 30), (1, 20))
LINK_TIERS: Tuple[Tier, ...] = ((5, 20), (3, 15), (1, 10))

# Recommendation triggers
DIFFICULT_READING_EASE = 50


def tier_points(value: float, tiers: Sequence[Tier], default: float = 0) -> float:
    """Points of the first tier whose minimum ``value`` reaches."""
    for minimum, points in tiers:
        if value >= minimum:
            return points
    return default


def ceiling_points(value: float, ceilings: Sequence[Tier], default: float = 0) -> float:
    """Points of the first ceiling ``value`` does not exceed."""
    for maximum, points in ceilings:
        if value <= maximum:
            return points
    return default


def band_points(value: float, bands: Sequence[Band], default: float = 0) -> float:
    """Points of the first inclusive band containing ``value``."""
    for low, high, points in bands:
        if low <= value <= high:
            return points
    return default


def in_range(value: float, bounds: Tuple[float, float]) -> bool:
    low, high = bounds
    return low <= value <= high


def band_label(bounds: Tuple[float, float], unit: Optional[str] = None) -> str:
    low, high = bounds
    label = f"{low:g}-{high:g}"
    return f"{label} {unit}" if unit else label
