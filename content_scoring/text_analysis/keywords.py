"""Keyword and key-phrase analysis with optional corpus-relative TF-IDF."""
import math
import re
from typing import List, Optional, Sequence, Tuple

import structlog

from ..models import KeywordAnalysis
from .html import split_words, strip_html

logger = structlog.get_logger(__name__)

STOP_WORDS = frozenset(
    [
        "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for",
        "of", "with", "by", "is", "are", "was", "were", "be", "been", "have",
        "has", "had", "do", "does", "did", "will", "would", "could", "should",
        "this", "that", "these", "those",
    ]
)

# Prominence points for placement in markup
TITLE_PROMINENCE = 25
H1_PROMINENCE = 20
SUBHEADING_PROMINENCE = 15
FIRST_PARAGRAPH_PROMINENCE = 10
MAX_POSITION_BONUS = 10
MAX_PROMINENCE = 100

CONTEXT_WINDOW = 5
CONTEXT_POINTS_PER_WORD = 2
MAX_CONTEXT_POINTS = 20

TITLE_RE = re.compile(r"<title[^>]*>([^<]*)</title>", re.IGNORECASE)
H1_RE = re.compile(r"<h1[^>]*>([^<]*)</h1>", re.IGNORECASE)
SUBHEADING_RE = re.compile(r"<h[23][^>]*>([^<]*)</h[23]>", re.IGNORECASE)
PARAGRAPH_RE = re.compile(r"<p[^>]*>([^<]*)</p>", re.IGNORECASE)


def is_stop_word(word: str) -> bool:
    return word.lower() in STOP_WORDS


def first_paragraph_text(html: str) -> Optional[str]:
    """Text of the first ``<p>`` element without nested tags, if any."""
    match = PARAGRAPH_RE.search(html or "")
    return match.group(1) if match else None


def first_h1_text(html: str) -> Optional[str]:
    match = H1_RE.search(html or "")
    return match.group(1) if match else None


class KeywordAnalyzer:
    """Locates keyword occurrences and scores their placement and context."""

    def analyze(
        self, content: str, keyword: str, corpus: Optional[Sequence[str]] = None
    ) -> KeywordAnalysis:
        """Analyze a keyword or multi-word phrase within ``content``.

        Matching is case-insensitive on HTML-stripped text and exact per
        token, so "points" never matches inside "checkpoints".

        Args:
            content: Article body as HTML or plain text
            keyword: Keyword or key phrase to look for
            corpus: Optional documents used to compute IDF and TF-IDF

        Returns:
            KeywordAnalysis; an empty keyword yields an all-zero analysis
        """
        normalized = (keyword or "").lower().strip()
        if not normalized:
            return KeywordAnalysis(keyword=keyword or "")

        words = split_words(strip_html(content or "").lower())
        total_words = len(words)
        positions = self.find_positions(words, normalized)
        frequency = len(positions)

        density = (frequency / total_words) * 100 if total_words > 0 else 0.0
        tf_score = frequency / total_words if total_words > 0 else 0.0
        prominence = self.prominence(positions, total_words, content or "", normalized)
        relevance = self.context_relevance(words, positions)
        idf_score, tf_idf_score = self.tf_idf(tf_score, normalized, corpus)

        logger.debug(
            "keyword_analyzed",
            keyword=normalized,
            frequency=frequency,
            total_words=total_words,
        )

        return KeywordAnalysis(
            keyword=keyword,
            frequency=frequency,
            density=density,
            prominence=prominence,
            positions=positions,
            context_relevance=relevance,
            tf_score=tf_score,
            idf_score=idf_score,
            tf_idf_score=tf_idf_score,
        )

    @staticmethod
    def find_positions(words: List[str], keyword: str) -> List[int]:
        """Word indexes where the (already lower-cased) keyword starts."""
        keyword_words = split_words(keyword)
        if len(keyword_words) > 1:
            span = len(keyword_words)
            return [
                i for i in range(len(words) - span + 1) if words[i : i + span] == keyword_words
            ]
        return [i for i, word in enumerate(words) if word == keyword]

    @staticmethod
    def prominence(positions: List[int], total_words: int, html: str, keyword: str) -> float:
        """Placement score: markup locations plus a decaying positional bonus."""
        if not positions:
            return 0.0

        score = 0.0
        lowered = html.lower()

        title = TITLE_RE.search(lowered)
        if title and keyword in title.group(1):
            score += TITLE_PROMINENCE

        if any(keyword in text for text in H1_RE.findall(lowered)):
            score += H1_PROMINENCE

        if any(keyword in text for text in SUBHEADING_RE.findall(lowered)):
            score += SUBHEADING_PROMINENCE

        paragraph = first_paragraph_text(lowered)
        if paragraph is not None and keyword in paragraph:
            score += FIRST_PARAGRAPH_PROMINENCE

        for pos in positions:
            score += max(0.0, MAX_POSITION_BONUS - (pos / total_words) * MAX_POSITION_BONUS)

        return min(score, MAX_PROMINENCE)

    @staticmethod
    def context_relevance(words: List[str], positions: List[int]) -> float:
        """Average count of meaningful words around each occurrence, 0-100."""
        if not positions:
            return 0.0

        total = 0
        for pos in positions:
            window = words[max(0, pos - CONTEXT_WINDOW) : min(len(words), pos + CONTEXT_WINDOW + 1)]
            relevant = [w for w in window if len(w) > 3 and not is_stop_word(w)]
            total += min(len(relevant) * CONTEXT_POINTS_PER_WORD, MAX_CONTEXT_POINTS)

        return min(total / len(positions), 100.0)

    @staticmethod
    def tf_idf(
        tf_score: float, keyword: str, corpus: Optional[Sequence[str]]
    ) -> Tuple[Optional[float], Optional[float]]:
        """IDF and TF-IDF against ``corpus``; ``(None, None)`` when not computable."""
        if not corpus:
            return None, None

        containing = sum(1 for doc in corpus if keyword in (doc or "").lower())
        if containing == 0:
            return None, None

        idf = math.log(len(corpus) / containing)
        return idf, tf_score * idf


def analyze_keyword(
    content: str, keyword: str, corpus: Optional[Sequence[str]] = None
) -> KeywordAnalysis:
    """Analyze one keyword in ``content``; see :meth:`KeywordAnalyzer.analyze`."""
    return KeywordAnalyzer().analyze(content, keyword, corpus)
