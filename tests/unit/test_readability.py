import math
import unittest

import pytest

from content_scoring.models import TextMetrics
from content_scoring.text_analysis.readability import (
    DEFAULT_AUDIENCE,
    ReadabilityCalculator,
    calculate_readability_scores,
)


def make_metrics(**overrides):
    values = dict(
        word_count=100,
        sentence_count=5,
        paragraph_count=1,
        syllable_count=150,
        complex_word_count=10,
        average_sentence_length=20.0,
        average_syllables_per_word=1.5,
        character_count=500,
        polysyllabic_word_count=10,
    )
    values.update(overrides)
    return TextMetrics(**values)


class TestReadabilityCalculator(unittest.TestCase):
    def setUp(self):
        self.calculator = ReadabilityCalculator()
        self.scores = self.calculator.score(make_metrics())

    def test_flesch_reading_ease(self):
        self.assertAlmostEqual(self.scores.flesch_reading_ease, 59.635, places=6)

    def test_flesch_kincaid_grade(self):
        self.assertAlmostEqual(self.scores.flesch_kincaid_grade, 9.91, places=6)

    def test_gunning_fog(self):
        self.assertAlmostEqual(self.scores.gunning_fog_index, 12.0, places=6)

    def test_smog(self):
        expected = 1.043 * math.sqrt(10 * 30 / 5) + 3.1291
        self.assertAlmostEqual(self.scores.smog_index, expected, places=6)

    def test_automated_readability_and_coleman_liau(self):
        self.assertAlmostEqual(self.scores.automated_readability_index, 12.12, places=6)
        self.assertAlmostEqual(self.scores.coleman_liau_index, 12.12, places=6)

    def test_reading_time(self):
        self.assertEqual(self.scores.reading_time_minutes, 1)
        self.assertEqual(self.calculator.reading_time_minutes(make_metrics(word_count=401)), 3)
        self.assertEqual(self.calculator.reading_time_minutes(make_metrics(word_count=0)), 0)

    def test_target_audience(self):
        self.assertEqual(self.scores.target_audience, "College graduates")

    def test_recommendations_for_hard_text(self):
        self.assertIn(
            "Consider using shorter sentences to improve readability",
            self.scores.recommendations,
        )
        self.assertNotIn(
            "Target 8th-9th grade level for optimal web readability",
            self.scores.recommendations,
        )


@pytest.mark.parametrize(
    "flesch,audience",
    [
        (95, "Elementary school students"),
        (85, "Middle school students"),
        (70, "High school students"),
        (60, "College students"),
        (50, "College graduates"),
        (30, "Advanced readers"),
        (10, DEFAULT_AUDIENCE),
    ],
)
def test_audience_ladder(flesch, audience):
    assert ReadabilityCalculator.target_audience(flesch) == audience


def test_flesch_is_clamped():
    metrics = make_metrics(average_sentence_length=50.0, average_syllables_per_word=3.0)
    assert ReadabilityCalculator.flesch_reading_ease(metrics) == 0.0

    metrics = make_metrics(average_sentence_length=0.0, average_syllables_per_word=0.0)
    assert ReadabilityCalculator.flesch_reading_ease(metrics) == 100.0


def test_grade_is_floored_at_zero():
    metrics = make_metrics(average_sentence_length=1.0, average_syllables_per_word=1.0)
    assert ReadabilityCalculator.flesch_kincaid_grade(metrics) == 0.0


def test_empty_content_scores():
    scores = calculate_readability_scores("")

    assert scores.flesch_reading_ease == 100.0
    assert scores.flesch_kincaid_grade == 0.0
    assert scores.reading_time_minutes == 0
    assert scores.recommendations == []


def test_simple_text_has_no_recommendations():
    scores = calculate_readability_scores("The cat sat on the mat. The dog ran to the park.")

    assert 0 <= scores.flesch_reading_ease <= 100
    assert scores.recommendations == []


def test_dense_text_is_flagged():
    scores = calculate_readability_scores(
        "Extraordinarily complicated institutional documentation necessitates "
        "considerable interpretation across organizational hierarchies."
    )

    assert scores.flesch_reading_ease == 0.0
    assert scores.target_audience == DEFAULT_AUDIENCE
    assert "Content may be too complex for general web audiences" in scores.recommendations
