"""Advisory content insights outside the weighted score.

Search intent, topic coverage, featured-snippet readiness, E-E-A-T signals,
content depth and link profile checks shown next to the main score. None of
these feed into :class:`~content_scoring.models.SEOScores`.
"""
import math
import re
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Mapping, Optional

import textstat

from .models import _Serializable
from .text_analysis.html import split_words, strip_html

TOPIC_KNOWLEDGE_GRAPH: Dict[str, List[str]] = {
    "travel": ["vacation", "trip", "destination", "tourism", "journey", "explore", "adventure"],
    "credit cards": ["rewards", "points", "miles", "cashback", "apr", "credit score", "benefits"],
    "hotels": ["accommodation", "booking", "reservation", "luxury", "budget", "amenities", "hospitality"],
    "airlines": ["flights", "aviation", "aircraft", "airports", "frequent flyer", "business class", "economy"],
    "seo": ["search engine", "optimization", "ranking", "serp", "organic traffic", "keywords", "backlinks"],
    "deals": ["discounts", "offers", "promotions", "savings", "sale", "bargain", "value"],
}

COMMON_SUBTOPICS: Dict[str, List[str]] = {
    "credit cards": ["annual fees", "interest rates", "rewards program", "credit requirements"],
    "hotels": ["amenities", "location", "price range", "booking policies"],
    "airlines": ["baggage policies", "seat selection", "frequent flyer program", "route network"],
    "travel": ["budget planning", "best time to visit", "local customs", "transportation"],
}

# Checked in this order; the first list with a match decides the intent
INTENT_TERMS = (
    ("transactional", ("buy", "purchase", "deal", "discount", "price", "cheap", "best")),
    ("navigational", ("login", "website", "official", "contact", "customer service")),
    ("commercial", ("review", "comparison", "vs", "alternative", "top", "best")),
)
INTENT_CONTENT_TERMS = {
    "transactional": ["buy", "purchase", "order", "checkout", "payment", "shipping"],
    "commercial": ["review", "comparison", "pros", "cons", "rating", "testimonial"],
    "navigational": ["official", "website", "homepage", "contact", "about"],
    "informational": ["guide", "how to", "tutorial", "tips", "explanation", "definition"],
}

EXPERIENCE_TERMS = ("i tested", "my experience", "i tried", "personally used", "hands-on")
UNIQUE_INSIGHT_MARKERS = ("however", "surprisingly", "interestingly", "contrary to", "our analysis shows")
TRANSITION_WORDS = ("however", "therefore", "furthermore", "moreover", "consequently", "additionally")
JARGON_TERMS = ("utilize", "facilitate", "implement", "optimize", "leverage", "synergize")
PASSIVE_AUXILIARIES = frozenset(["was", "were", "been", "being", "is", "are"])
AUTHORITATIVE_DOMAINS = (".gov", ".edu", "wikipedia.org", "reuters.com", "bloomberg.com")

MAX_LISTED = 5
WORDS_PER_LINK = 150

CITATION_RE = re.compile(r"\[(\d+)\]|\(\d{4}\)|according to")
DATA_POINT_RE = re.compile(r"\d+%|\d+ study|\d+ research|\d+ survey")
YEAR_RE = re.compile(r"20\d{2}|19\d{2}")
QUESTION_RE = re.compile(r"[.!?]\s*([A-Z][^.!?]*\?)")
RECENCY_RE = re.compile(r"latest|recent|new|updated|current", re.IGNORECASE)
INTERNAL_HREF_RE = re.compile(r'href="/[^"]+"')
EXTERNAL_HREF_RE = re.compile(r'href="https?://[^"]+"')
ANCHOR_TEXT_RE = re.compile(r">[^<]*</a>")
SENTENCE_RE = re.compile(r"[.!?]+")
MARKDOWN_HEADING_RE = re.compile(r"#{1,3}\s")
HTML_SUBHEADING_RE = re.compile(r"<h[23][^>]*>", re.IGNORECASE)
DIRECT_ANSWER_RE = re.compile(r"^(the answer is|in summary|to summarize)", re.IGNORECASE | re.MULTILINE)
QUESTION_FORMAT_RE = re.compile(r"^(what|how|why|when|where|which)", re.IGNORECASE | re.MULTILINE)

SNIPPET_FORMATS = (
    ("paragraph", re.compile(r"^.{40,320}[.!?]$", re.MULTILINE)),
    ("list", re.compile(r"<ol>|<ul>|\n\d+\.|^\*\s|\n-\s", re.MULTILINE)),
    ("table", re.compile(r"<table>|^\|.*\|$", re.MULTILINE)),
    ("definition", re.compile(r"^(what is|definition of).+:", re.IGNORECASE | re.MULTILINE)),
)


@dataclass
class TopicCoverage(_Serializable):
    coverage: int
    missing_terms: List[str]
    search_intent: str
    semantic_relevance: float
    topic_completeness: float


@dataclass
class EEATAnalysis(_Serializable):
    """Experience, expertise, authority and trust signals."""

    experience_score: float
    expertise_score: float
    authority_score: float
    trust_score: float
    signals: Dict[str, Any] = field(default_factory=dict)


@dataclass
class SnippetOptimization(_Serializable):
    has_snippet_format: bool
    snippet_type: str
    optimization_tips: List[str]
    answer_box_potential: int


@dataclass
class Freshness:
    has_current_year: bool
    has_recent_data: bool
    statistics_age: List[str]


@dataclass
class ContentDepth(_Serializable):
    unique_insights: int
    comprehensiveness: int
    freshness: Freshness
    user_questions: List[str]
    content_gaps: List[str]


@dataclass
class LinkProfile(_Serializable):
    internal_link_count: int
    external_link_count: int
    link_ratio: float
    orphaned_content: bool
    link_velocity: int
    anchor_text_diversity: float
    authoritative_sources: int


@dataclass
class EnhancedReadability(_Serializable):
    flesch_kincaid: float
    gunning_fog: float
    smog: float
    avg_syllables_per_word: float
    passive_voice_percentage: float
    transition_words: int
    sentence_variation: float
    jargon_score: float


def classify_search_intent(keyword: str) -> str:
    """Classify a keyword as transactional, navigational, commercial or informational."""
    lowered = (keyword or "").lower()
    for intent, terms in INTENT_TERMS:
        if any(term in lowered for term in terms):
            return intent
    return "informational"


def analyze_topic_coverage(content: str, focus_keyword: str) -> TopicCoverage:
    """Measure how many terms related to the focus topic the content mentions.

    Args:
        content: Article body
        focus_keyword: Focus keyword, looked up in the topic graph

    Returns:
        TopicCoverage with up to five missing related terms
    """
    lowered = (content or "").lower()
    intent = classify_search_intent(focus_keyword)

    related = TOPIC_KNOWLEDGE_GRAPH.get((focus_keyword or "").strip().lower(), [])
    found = [term for term in related if term in lowered]
    missing = [term for term in related if term not in lowered]
    relevance = len(found) / max(len(related), 1)

    intent_terms = INTENT_CONTENT_TERMS[intent]
    completeness = sum(1 for term in intent_terms if term in lowered) / len(intent_terms)

    return TopicCoverage(
        coverage=int(relevance * 100 + 0.5),
        missing_terms=missing[:MAX_LISTED],
        search_intent=intent,
        semantic_relevance=relevance,
        topic_completeness=completeness,
    )


def analyze_eeat(
    content: str, author: Optional[Mapping[str, Any]] = None, has_publish_date: bool = True
) -> EEATAnalysis:
    """Score experience, expertise, authority and trust signals.

    Args:
        content: Article body
        author: Optional author record with ``bio``, ``title``,
            ``credentials`` and ``updated_at`` keys
        has_publish_date: Whether the article carries a publish date

    Returns:
        EEATAnalysis with 0-100 scores and the raw signals
    """
    content = content or ""
    author = author or {}
    lowered = content.lower()

    experience_hits = sum(1 for term in EXPERIENCE_TERMS if term in lowered)
    citations = len(CITATION_RE.findall(content))
    data_points = len(DATA_POINT_RE.findall(content))

    bio = author.get("bio") or ""
    title = author.get("title") or ""
    credentials = bool("expert" in bio or author.get("credentials") or "expert" in title)

    signals = {
        "author_credentials": credentials,
        "citations": citations,
        "first_person_experience": experience_hits > 0,
        "data_points": data_points,
        "has_author_bio": bool(bio),
        "has_publish_date": has_publish_date,
        "has_update_date": bool(author.get("updated_at")),
        "has_sources": any(marker in lowered for marker in ("according to", "study", "research")),
    }
    present = sum(1 for value in signals.values() if value)

    return EEATAnalysis(
        experience_score=min(experience_hits * 20, 100),
        expertise_score=min(citations * 10 + data_points * 15, 100),
        authority_score=100 if credentials else 50,
        trust_score=min(present * 12.5, 100),
        signals=signals,
    )


def analyze_snippet_optimization(content: str) -> SnippetOptimization:
    """Check whether content is shaped for featured snippets."""
    content = content or ""
    matched = [name for name, pattern in SNIPPET_FORMATS if pattern.search(content)]
    has_format = bool(matched)

    tips = []
    if "paragraph" not in matched:
        tips.append("Add a concise answer (40-320 characters) at the beginning")
    if "list" not in matched:
        tips.append("Include numbered or bulleted lists for step-by-step content")
    subheadings = len(MARKDOWN_HEADING_RE.findall(content)) + len(HTML_SUBHEADING_RE.findall(content))
    if subheadings < 2:
        tips.append("Use H2 and H3 headings to structure content for featured snippets")

    potential = 0
    if DIRECT_ANSWER_RE.search(content):
        potential += 50
    if QUESTION_FORMAT_RE.search(content):
        potential += 30
    if has_format:
        potential += 20

    return SnippetOptimization(
        has_snippet_format=has_format,
        snippet_type=matched[0] if matched else "none",
        optimization_tips=tips,
        answer_box_potential=potential,
    )


def analyze_content_depth(
    content: str, focus_keyword: str, reference_year: Optional[int] = None
) -> ContentDepth:
    """Assess insight markers, topic comprehensiveness and freshness.

    Args:
        content: Article body
        focus_keyword: Focus keyword, looked up in the topic graph
        reference_year: Year treated as "current"; defaults to today's year

    Returns:
        ContentDepth analysis
    """
    content = content or ""
    lowered = content.lower()
    year = reference_year or date.today().year
    topic = (focus_keyword or "").strip().lower()

    related = TOPIC_KNOWLEDGE_GRAPH.get(topic, [])
    covered = sum(1 for term in related if term in lowered)

    years: List[str] = []
    for match in YEAR_RE.findall(content):
        if match not in years:
            years.append(match)

    return ContentDepth(
        unique_insights=sum(1 for marker in UNIQUE_INSIGHT_MARKERS if marker in lowered),
        comprehensiveness=int(covered / max(len(related), 1) * 100 + 0.5),
        freshness=Freshness(
            has_current_year=str(year) in content or str(year - 1) in content,
            has_recent_data=bool(RECENCY_RE.search(content)),
            statistics_age=years[:MAX_LISTED],
        ),
        user_questions=[q.strip() for q in QUESTION_RE.findall(content)][:MAX_LISTED],
        content_gaps=[sub for sub in COMMON_SUBTOPICS.get(topic, []) if sub not in lowered],
    )


def analyze_link_profile(content: str) -> LinkProfile:
    """Summarize internal/external linking and anchor text variety."""
    content = content or ""
    internal = INTERNAL_HREF_RE.findall(content)
    external = EXTERNAL_HREF_RE.findall(content)

    word_count = len(split_words(content))
    optimal_links = math.ceil(word_count / WORDS_PER_LINK)

    anchors = ANCHOR_TEXT_RE.findall(content)
    diversity = len(set(anchors)) / len(anchors) if anchors else 0.0

    return LinkProfile(
        internal_link_count=len(internal),
        external_link_count=len(external),
        link_ratio=len(internal) / max(len(external), 1),
        orphaned_content=not internal,
        link_velocity=abs(len(internal) + len(external) - optimal_links),
        anchor_text_diversity=diversity,
        authoritative_sources=sum(
            1 for link in external if any(domain in link for domain in AUTHORITATIVE_DOMAINS)
        ),
    )


def _count_occurrences(text: str, terms) -> int:
    return sum(text.count(term) for term in terms)


def analyze_readability_comprehensive(content: str) -> EnhancedReadability:
    """Style-oriented readability metrics using dictionary syllable counts.

    Unlike :mod:`content_scoring.text_analysis.readability` this relies on
    ``textstat`` syllable counts and adds passive voice, transition word,
    sentence variation and jargon measures. Values are rounded for display.
    """
    text = strip_html(content or "")
    lowered = text.lower()
    words = split_words(text)
    sentences = [s for s in SENTENCE_RE.split(text) if s.strip()]
    word_total = max(len(words), 1)
    sentence_total = max(len(sentences), 1)

    syllables = [textstat.syllable_count(word) for word in words]
    complex_words = sum(1 for count in syllables if count >= 3)
    avg_sentence = len(words) / sentence_total
    avg_syllables = sum(syllables) / word_total

    fk_grade = 0.39 * avg_sentence + 11.8 * avg_syllables - 15.59
    fog = 0.4 * (avg_sentence + 100 * (complex_words / word_total))
    smog = 1.043 * math.sqrt(complex_words * (30 / sentence_total)) + 3.1291

    passive = sum(
        1
        for sentence in sentences
        if any(word.strip(",;:") in PASSIVE_AUXILIARIES for word in split_words(sentence.lower()))
    )

    lengths = [len(split_words(sentence)) for sentence in sentences]
    mean = sum(lengths) / max(len(lengths), 1)
    variance = sum((length - mean) ** 2 for length in lengths) / max(len(lengths), 1)

    jargon = _count_occurrences(lowered, JARGON_TERMS)

    return EnhancedReadability(
        flesch_kincaid=round(fk_grade, 1),
        gunning_fog=round(fog, 1),
        smog=round(smog, 1),
        avg_syllables_per_word=round(avg_syllables, 2),
        passive_voice_percentage=round(passive / sentence_total * 100, 1),
        transition_words=_count_occurrences(lowered, TRANSITION_WORDS),
        sentence_variation=round(math.sqrt(variance), 1),
        jargon_score=round(jargon / word_total * 1000, 1),
    )
