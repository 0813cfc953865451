"""Readability formulas computed from extracted text metrics."""
import math
from typing import List, Tuple

from ..models import ReadabilityScores, TextMetrics
from .metrics import get_text_metrics

WORDS_PER_MINUTE = 200

# (minimum Flesch Reading Ease, audience), checked top to bottom
AUDIENCE_LADDER: Tuple[Tuple[float, str], ...] = (
    (90, "Elementary school students"),
    (80, "Middle school students"),
    (70, "High school students"),
    (60, "College students"),
    (50, "College graduates"),
    (30, "Advanced readers"),
)
DEFAULT_AUDIENCE = "Academic/Professional"


class ReadabilityCalculator:
    """Applies the standard readability formulas to :class:`TextMetrics`."""

    def score(self, metrics: TextMetrics) -> ReadabilityScores:
        """Calculate all readability scores for the given metrics.

        Args:
            metrics: Metrics produced by :func:`get_text_metrics`

        Returns:
            ReadabilityScores with audience label and advisory recommendations
        """
        flesch = self.flesch_reading_ease(metrics)
        grade = self.flesch_kincaid_grade(metrics)
        fog = self.gunning_fog_index(metrics)
        smog = self.smog_index(metrics)

        return ReadabilityScores(
            flesch_reading_ease=flesch,
            flesch_kincaid_grade=grade,
            gunning_fog_index=fog,
            smog_index=smog,
            automated_readability_index=self.automated_readability_index(metrics),
            coleman_liau_index=self.coleman_liau_index(metrics),
            reading_time_minutes=self.reading_time_minutes(metrics),
            target_audience=self.target_audience(flesch),
            recommendations=self.recommendations(flesch, grade, fog, smog),
        )

    @staticmethod
    def flesch_reading_ease(metrics: TextMetrics) -> float:
        """206.835 - 1.015 * ASL - 84.6 * ASW, clamped to [0, 100]."""
        score = (
            206.835
            - 1.015 * metrics.average_sentence_length
            - 84.6 * metrics.average_syllables_per_word
        )
        return max(0.0, min(100.0, score))

    @staticmethod
    def flesch_kincaid_grade(metrics: TextMetrics) -> float:
        """0.39 * ASL + 11.8 * ASW - 15.59, floored at 0."""
        grade = (
            0.39 * metrics.average_sentence_length
            + 11.8 * metrics.average_syllables_per_word
            - 15.59
        )
        return max(0.0, grade)

    @staticmethod
    def gunning_fog_index(metrics: TextMetrics) -> float:
        complex_ratio = metrics.complex_word_count / max(metrics.word_count, 1)
        return 0.4 * (metrics.average_sentence_length + 100 * complex_ratio)

    @staticmethod
    def smog_index(metrics: TextMetrics) -> float:
        return (
            1.043
            * math.sqrt(metrics.polysyllabic_word_count * (30 / max(metrics.sentence_count, 1)))
            + 3.1291
        )

    @staticmethod
    def automated_readability_index(metrics: TextMetrics) -> float:
        chars_per_word = metrics.character_count / max(metrics.word_count, 1)
        return 4.71 * chars_per_word + 0.5 * metrics.average_sentence_length - 21.43

    @staticmethod
    def coleman_liau_index(metrics: TextMetrics) -> float:
        words = max(metrics.word_count, 1)
        letters_per_100 = (metrics.character_count / words) * 100
        sentences_per_100 = (metrics.sentence_count / words) * 100
        return 0.0588 * letters_per_100 - 0.296 * sentences_per_100 - 15.8

    @staticmethod
    def reading_time_minutes(metrics: TextMetrics) -> int:
        return math.ceil(metrics.word_count / WORDS_PER_MINUTE)

    @staticmethod
    def target_audience(flesch_score: float) -> str:
        for minimum, audience in AUDIENCE_LADDER:
            if flesch_score >= minimum:
                return audience
        return DEFAULT_AUDIENCE

    @staticmethod
    def recommendations(flesch: float, grade: float, fog: float, smog: float) -> List[str]:
        """Advisory notes triggered by fixed thresholds; not scored."""
        notes = []
        if flesch < 60:
            notes.append("Consider using shorter sentences to improve readability")
            notes.append("Replace complex words with simpler alternatives where possible")
        if grade > 12:
            notes.append("Content may be too complex for general web audiences")
            notes.append("Target 8th-9th grade level for optimal web readability")
        if fog > 12:
            notes.append("Reduce use of complex words (3+ syllables)")
            notes.append("Break long sentences into shorter ones")
        if smog > 13:
            notes.append("Content requires high comprehension level")
            notes.append("Consider adding explanations for technical terms")
        return notes


def score_readability(metrics: TextMetrics) -> ReadabilityScores:
    """Calculate readability scores from precomputed metrics."""
    return ReadabilityCalculator().score(metrics)


def calculate_readability_scores(content: str) -> ReadabilityScores:
    """Extract metrics from ``content`` and score its readability."""
    return score_readability(get_text_metrics(content))
