"""
Data models for the content scoring engine.
"""
import json
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple


def _plain_dict_factory(items: List[Tuple[str, Any]]) -> Dict[str, Any]:
    """Dict factory for ``asdict`` that flattens enum members to their values."""
    return {key: (value.value if isinstance(value, Enum) else value) for key, value in items}


class _Serializable:
    """Mixin giving result dataclasses ``to_dict``/``to_json`` helpers."""

    def to_dict(self) -> Dict[str, Any]:
        """Convert the result to a plain dictionary."""
        return asdict(self, dict_factory=_plain_dict_factory)

    def to_json(self) -> str:
        """Convert the result to JSON."""
        return json.dumps(self.to_dict(), indent=2)


class RecommendationCategory(str, Enum):
    """Area of the article a recommendation refers to."""

    CONTENT = "content"
    KEYWORDS = "keywords"
    TECHNICAL = "technical"
    READABILITY = "readability"
    USER_EXPERIENCE = "user-experience"


class RecommendationType(str, Enum):
    """Severity of a recommendation."""

    ERROR = "error"
    WARNING = "warning"
    SUGGESTION = "suggestion"
    OPTIMIZATION = "optimization"


class Priority(str, Enum):
    """Priority of a recommendation, used for ordering."""

    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        return {"critical": 4, "high": 3, "medium": 2, "low": 1}[self.value]


@dataclass
class TextMetrics(_Serializable):
    """Token-level counts extracted from a piece of content."""

    word_count: int
    sentence_count: int
    paragraph_count: int
    syllable_count: int
    complex_word_count: int
    average_sentence_length: float
    average_syllables_per_word: float
    character_count: int
    polysyllabic_word_count: int


@dataclass
class ReadabilityScores(_Serializable):
    """Readability formula outputs plus derived audience and advice."""

    flesch_reading_ease: float
    flesch_kincaid_grade: float
    gunning_fog_index: float
    smog_index: float
    automated_readability_index: float
    coleman_liau_index: float
    reading_time_minutes: int
    target_audience: str
    recommendations: List[str] = field(default_factory=list)


@dataclass
class KeywordAnalysis(_Serializable):
    """Occurrence statistics for one keyword or key phrase.

    ``idf_score`` and ``tf_idf_score`` stay ``None`` when no corpus was
    supplied or no corpus document contains the keyword.
    """

    keyword: str
    frequency: int = 0
    density: float = 0.0
    prominence: float = 0.0
    positions: List[int] = field(default_factory=list)
    context_relevance: float = 0.0
    tf_score: float = 0.0
    idf_score: Optional[float] = None
    tf_idf_score: Optional[float] = None


@dataclass
class HeadingCounts:
    h1: int = 0
    h2: int = 0
    h3: int = 0
    h4: int = 0
    h5: int = 0
    h6: int = 0

    @property
    def total(self) -> int:
        return self.h1 + self.h2 + self.h3 + self.h4 + self.h5 + self.h6


@dataclass
class ListCounts:
    ordered: int = 0
    unordered: int = 0


@dataclass
class LinkCounts:
    internal: int = 0
    external: int = 0


@dataclass
class ContentStructure(_Serializable):
    """Markup structure counts for a content payload."""

    headings: HeadingCounts = field(default_factory=HeadingCounts)
    lists: ListCounts = field(default_factory=ListCounts)
    images: int = 0
    links: LinkCounts = field(default_factory=LinkCounts)
    has_semantic_structure: bool = False

    @property
    def total_headings(self) -> int:
        return self.headings.total

    @property
    def total_lists(self) -> int:
        return self.lists.ordered + self.lists.unordered

    @property
    def total_links(self) -> int:
        return self.links.internal + self.links.external


@dataclass(frozen=True)
class SEOMetadata:
    """Caller-supplied article metadata.

    Attributes:
        title: SEO title of the article
        meta_description: Meta description text
        slug: URL slug
        focus_keyword: Primary keyword or key phrase
        secondary_keywords: Related keywords checked for coverage
        hero_image_url: Optional hero image URL
        hero_image_alt: Optional hero image alt text
    """

    title: str = ""
    meta_description: str = ""
    slug: str = ""
    focus_keyword: str = ""
    secondary_keywords: Tuple[str, ...] = ()
    hero_image_url: Optional[str] = None
    hero_image_alt: Optional[str] = None

    _ALIASES = {
        "metaDescription": "meta_description",
        "focusKeyword": "focus_keyword",
        "secondaryKeywords": "secondary_keywords",
        "heroImageUrl": "hero_image_url",
        "heroImageAlt": "hero_image_alt",
    }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SEOMetadata":
        """Create metadata from a dictionary with camelCase or snake_case keys.

        Missing or ``None`` string fields become empty strings, empty hero
        image fields become ``None``, a scalar secondary keyword is wrapped
        in a tuple and unknown keys are ignored. Values of the wrong type are
        converted with ``str``.

        Args:
            data: Dictionary of metadata values

        Returns:
            SEOMetadata instance
        """
        values: Dict[str, Any] = {}
        for key, value in (data or {}).items():
            name = cls._ALIASES.get(key, key)
            if name in cls.__dataclass_fields__:
                values[name] = value

        for name in ("title", "meta_description", "slug", "focus_keyword"):
            values[name] = str(values.get(name) or "")
        for name in ("hero_image_url", "hero_image_alt"):
            value = values.get(name)
            values[name] = str(value) if value else None

        secondary = values.get("secondary_keywords") or ()
        if not isinstance(secondary, (list, tuple, set, frozenset)):
            secondary = (secondary,)
        values["secondary_keywords"] = tuple(str(k) for k in secondary if k is not None)

        return cls(**values)


@dataclass
class ScoreBreakdown(_Serializable):
    """Component scores, each independently on a 0-100 scale."""

    content_length: float = 0
    readability: float = 0
    content_structure: float = 0
    keyword_density: float = 0
    keyword_distribution: float = 0
    lsi_keywords: float = 0
    title_optimization: float = 0
    meta_description_optimization: float = 0
    url_structure: float = 0
    internal_linking: float = 0
    content_engagement: float = 0
    visual_content: float = 0
    content_scannability: float = 0


@dataclass
class SEOScores(_Serializable):
    """Overall score with its four weighted category scores."""

    overall: int
    content_quality: int
    keyword_optimization: int
    technical_seo: int
    user_experience: int
    breakdown: ScoreBreakdown


@dataclass
class SEORecommendation(_Serializable):
    """A single actionable recommendation."""

    category: RecommendationCategory
    type: RecommendationType
    priority: Priority
    title: str
    description: str
    suggestion: str
    impact_score: int
    current_value: Optional[str] = None
    target_value: Optional[str] = None


@dataclass
class AnalysisMetrics(_Serializable):
    """Intermediate analyzer outputs returned alongside the scores."""

    text_metrics: TextMetrics
    readability_scores: ReadabilityScores
    keyword_analysis: List[KeywordAnalysis]
    content_structure: ContentStructure


@dataclass
class SEOAnalysisResult(_Serializable):
    """Complete output of :func:`content_scoring.analyze_content`."""

    scores: SEOScores
    recommendations: List[SEORecommendation]
    metrics: AnalysisMetrics
