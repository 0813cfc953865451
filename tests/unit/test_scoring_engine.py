"""Tests for the weighted scoring engine."""

import unittest
from dataclasses import replace

import pytest

from content_scoring.models import (
    ContentStructure,
    HeadingCounts,
    KeywordAnalysis,
    LinkCounts,
    ListCounts,
    ReadabilityScores,
    SEOMetadata,
    TextMetrics,
)
from content_scoring.scoring.engine import (
    SEOScoringEngine,
    analyze_content,
    round_half_up,
    slug_contains,
)


@pytest.mark.parametrize(
    "word_count,expected",
    [(2600, 100), (2500, 100), (2000, 70), (1500, 60), (1000, 40), (600, 20), (599, 0), (0, 0)],
)
def test_content_length_score(word_count, expected):
    assert SEOScoringEngine.content_length_score(word_count) == expected


@pytest.mark.parametrize(
    "density,expected",
    [
        (0.0, 0.0),
        (0.25, 50.0),
        (0.5, 100.0),
        (1.0, 100.0),
        (1.5, 100.0),
        (2.0, 80.0),
        (2.5, 80.0),
        (3.0, 70.0),
        (4.0, 50.0),
        (5.0, 0.0),
        (12.0, 0.0),
    ],
)
def test_keyword_density_score(density, expected):
    assert SEOScoringEngine.keyword_density_score(density) == pytest.approx(expected)


@pytest.mark.parametrize("value,expected", [(2.5, 3), (3.5, 4), (2.4, 2), (0.0, 0)])
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected


def test_slug_contains_reads_spaces_as_hyphens():
    assert slug_contains("best-travel-rewards-cards", "travel rewards")
    assert slug_contains("Coffee-Guide", "coffee")
    assert not slug_contains("travelrewards", "travel rewards")


class TestComponentScores(unittest.TestCase):
    def test_title_score_optimal(self):
        score = SEOScoringEngine.title_score(
            "Travel Rewards Guide: Earn More Points on Every Trip", "travel rewards"
        )
        self.assertEqual(score, 100)

    def test_title_score_keyword_in_first_half(self):
        # 23 characters (20 points), keyword at index 9 (35), four words (15)
        self.assertEqual(SEOScoringEngine.title_score("Guide to travel rewards", "travel rewards"), 70)

    def test_title_score_empty(self):
        self.assertEqual(SEOScoringEngine.title_score("   ", "coffee"), 0)

    def test_meta_description_score(self):
        description = (
            "Learn how travel rewards cards turn everyday spending into free flights "
            "and hotel stays, and discover simple ways to earn more points."
        )
        self.assertEqual(SEOScoringEngine.meta_description_score(description, "travel rewards"), 100)
        self.assertEqual(SEOScoringEngine.meta_description_score("", "travel rewards"), 0)

    def test_meta_description_short_without_keyword(self):
        # below every length band (15), no keyword, no call to action
        self.assertEqual(SEOScoringEngine.meta_description_score("Short text.", "coffee"), 15)

    def test_url_structure_score(self):
        self.assertEqual(
            SEOScoringEngine.url_structure_score("travel-rewards-guide", "travel rewards"), 100
        )
        self.assertEqual(SEOScoringEngine.url_structure_score("Travel_Rewards", ""), 50)
        self.assertEqual(SEOScoringEngine.url_structure_score("travel rewards!", ""), 40)
        self.assertEqual(SEOScoringEngine.url_structure_score("", "coffee"), 0)
        self.assertEqual(SEOScoringEngine.url_structure_score("a" * 101, ""), 40)

    def test_internal_linking_score(self):
        self.assertEqual(SEOScoringEngine.internal_linking_score(0), 0)
        self.assertEqual(SEOScoringEngine.internal_linking_score(1), 60)
        self.assertEqual(SEOScoringEngine.internal_linking_score(3), 80)
        self.assertEqual(SEOScoringEngine.internal_linking_score(7), 100)

    def test_lsi_keywords_score(self):
        found = KeywordAnalysis(keyword="points", frequency=2)
        missing = KeywordAnalysis(keyword="miles")
        self.assertEqual(SEOScoringEngine.lsi_keywords_score([]), 0)
        self.assertEqual(SEOScoringEngine.lsi_keywords_score([found, missing]), 50)
        self.assertEqual(SEOScoringEngine.lsi_keywords_score([found]), 100)

    def test_visual_content_score(self):
        self.assertEqual(SEOScoringEngine.visual_content_score(0, None, None), 0)
        self.assertEqual(SEOScoringEngine.visual_content_score(4, "hero.jpg", "A hero"), 100)
        self.assertEqual(SEOScoringEngine.visual_content_score(1, "  ", "alt"), 20)
        self.assertEqual(SEOScoringEngine.visual_content_score(2, "hero.jpg", ""), 65)


class TestAnalyzeContent(unittest.TestCase):
    def setUp(self):
        self.content = (
            "<h1>Coffee Basics</h1>\n<p>Coffee is brewed from roasted beans and water.</p>\n\n"
            "<h2>Brewing</h2>\n<p>Good coffee needs fresh water.</p>"
        )
        self.metadata = {
            "title": "Coffee Basics: A Short Guide to Brewing at Home",
            "metaDescription": "Learn the basics of coffee.",
            "slug": "coffee-basics",
            "focusKeyword": "coffee",
            "secondaryKeywords": ["beans", "tea"],
        }

    def test_accepts_dict_metadata(self):
        result = analyze_content(self.content, self.metadata)
        self.assertEqual(result.metrics.keyword_analysis[0].keyword, "coffee")
        self.assertEqual(len(result.metrics.keyword_analysis), 3)

    def test_overall_is_sum_of_categories(self):
        scores = analyze_content(self.content, self.metadata).scores
        total = (
            scores.content_quality
            + scores.keyword_optimization
            + scores.technical_seo
            + scores.user_experience
        )
        self.assertEqual(scores.overall, min(total, 100))
        self.assertTrue(0 <= scores.overall <= 100)

    def test_lsi_counts_secondary_keywords(self):
        breakdown = analyze_content(self.content, self.metadata).scores.breakdown
        self.assertEqual(breakdown.lsi_keywords, 50)

    def test_breakdown_in_range(self):
        breakdown = analyze_content(self.content, self.metadata).scores.breakdown
        for name, value in breakdown.to_dict().items():
            self.assertTrue(0 <= value <= 100, name)

    def test_blank_focus_keyword(self):
        metadata = dict(self.metadata, focusKeyword="   ")
        result = analyze_content(self.content, metadata)

        self.assertEqual(result.scores.breakdown.keyword_density, 0)
        self.assertEqual(result.scores.breakdown.keyword_distribution, 0)
        self.assertEqual([k.keyword for k in result.metrics.keyword_analysis], ["beans", "tea"])

    def test_pure_function(self):
        first = analyze_content(self.content, self.metadata)
        second = analyze_content(self.content, self.metadata)
        self.assertEqual(first.to_json(), second.to_json())

    def test_engine_instance_reusable(self):
        engine = SEOScoringEngine()
        metadata = SEOMetadata.from_dict(self.metadata)
        self.assertEqual(
            engine.analyze(self.content, metadata).to_dict(),
            engine.analyze(self.content, metadata).to_dict(),
        )

    def test_corpus_passed_to_keyword_analysis(self):
        result = analyze_content(self.content, self.metadata, corpus=["coffee shop", "tea room"])
        primary = result.metrics.keyword_analysis[0]
        self.assertIsNotNone(primary.idf_score)

    def test_none_inputs_degrade_gracefully(self):
        result = analyze_content(None, None)
        self.assertTrue(0 <= result.scores.overall <= 100)
        self.assertEqual(result.metrics.keyword_analysis, [])


def text_metrics(word_count=500, paragraph_count=10, average_sentence_length=15.0):
    return TextMetrics(
        word_count=word_count,
        sentence_count=max(1, round(word_count / average_sentence_length)),
        paragraph_count=paragraph_count,
        syllable_count=word_count,
        complex_word_count=0,
        average_sentence_length=average_sentence_length,
        average_syllables_per_word=1.0,
        character_count=word_count * 5,
        polysyllabic_word_count=0,
    )


def readability(flesch=70.0, grade=8.0, fog=10.0, reading_time=5):
    return ReadabilityScores(
        flesch_reading_ease=flesch,
        flesch_kincaid_grade=grade,
        gunning_fog_index=fog,
        smog_index=8.0,
        automated_readability_index=8.0,
        coleman_liau_index=8.0,
        reading_time_minutes=reading_time,
        target_audience="General audience",
    )


def structure(h1=0, h2=0, h3=0, ordered=0, unordered=0, internal=0, external=0, semantic=False):
    return ContentStructure(
        headings=HeadingCounts(h1=h1, h2=h2, h3=h3),
        lists=ListCounts(ordered=ordered, unordered=unordered),
        links=LinkCounts(internal=internal, external=external),
        has_semantic_structure=semantic,
    )


@pytest.mark.parametrize(
    "flesch,grade,fog,expected",
    [
        (80, 8, 10, 100),
        (80.1, 8, 10, 90),
        (60, 8.1, 10, 90),
        (59.9, 12, 12, 70),
        (50, 12.1, 12.1, 50),
        (30, 16, 15, 40),
        (29.9, 16.1, 15.1, 10),
    ],
)
def test_readability_score_bands(flesch, grade, fog, expected):
    score = SEOScoringEngine.readability_score(readability(flesch=flesch, grade=grade, fog=fog))
    assert score == expected


@pytest.mark.parametrize(
    "kwargs,expected",
    [
        (dict(h1=1, h2=1, h3=1, ordered=2, unordered=1, semantic=True), 100),
        (dict(h1=2, h2=1, h3=1, ordered=2, unordered=1, semantic=True), 90),
        (dict(), 10),
        (dict(h1=1, unordered=1), 35),
        (dict(h1=1, unordered=2), 45),
        (dict(h1=1, ordered=1, unordered=2), 55),
        (dict(h2=3), 25),
    ],
)
def test_content_structure_score(kwargs, expected):
    assert SEOScoringEngine.content_structure_score(structure(**kwargs)) == expected


@pytest.mark.parametrize(
    "reading_time,expected",
    [(3, 100), (8, 100), (12, 90), (2, 90), (15, 80), (1, 80), (16, 70), (0, 70)],
)
def test_engagement_score_reading_time(reading_time, expected):
    score = SEOScoringEngine.engagement_score(
        text_metrics(word_count=500, paragraph_count=10),
        readability(reading_time=reading_time),
    )
    assert score == expected


@pytest.mark.parametrize(
    "word_count,paragraph_count,expected",
    [(400, 10, 100), (400, 4, 100), (600, 4, 90), (604, 4, 80), (390, 10, 90), (190, 10, 80)],
)
def test_engagement_score_paragraph_length(word_count, paragraph_count, expected):
    score = SEOScoringEngine.engagement_score(
        text_metrics(word_count=word_count, paragraph_count=paragraph_count),
        readability(reading_time=5),
    )
    assert score == expected


@pytest.mark.parametrize(
    "sentence_length,expected", [(12, 100), (20, 100), (8, 90), (25, 90), (26, 80), (7.9, 80)]
)
def test_engagement_score_sentence_length(sentence_length, expected):
    score = SEOScoringEngine.engagement_score(
        text_metrics(average_sentence_length=sentence_length), readability(reading_time=5)
    )
    assert score == expected


@pytest.mark.parametrize(
    "kwargs,expected",
    [
        (dict(), 0),
        (dict(h2=1), 20),
        (dict(h2=2), 30),
        (dict(h1=1, h2=3), 40),
        (dict(h1=1, h2=3, h3=2), 50),
        (dict(unordered=1), 20),
        (dict(ordered=1, unordered=1), 30),
        (dict(internal=1), 10),
        (dict(internal=2, external=1), 15),
        (dict(internal=5), 20),
        (dict(h2=6, unordered=2, internal=3, external=2), 100),
    ],
)
def test_scannability_score(kwargs, expected):
    assert SEOScoringEngine.scannability_score(structure(**kwargs)) == expected


class TestKeywordDistributionScore(unittest.TestCase):
    CONTENT = "<h1>Coffee at Home</h1>\n<p>Coffee starts with fresh beans.</p>"

    def setUp(self):
        self.metadata = SEOMetadata(
            title="Coffee Brewing Guide",
            meta_description="Everything about coffee brewing.",
            slug="coffee-brewing",
            focus_keyword="coffee",
        )
        self.analysis = KeywordAnalysis(keyword="coffee", frequency=2)

    def score(self, content=CONTENT, metadata=None, analysis=None):
        return SEOScoringEngine.keyword_distribution_score(
            analysis or self.analysis, content, metadata or self.metadata
        )

    def test_every_location(self):
        self.assertEqual(self.score(), 85)

    def test_prominence_bonus_is_capped(self):
        self.assertEqual(self.score(analysis=KeywordAnalysis(keyword="coffee", prominence=40)), 91)
        self.assertEqual(self.score(analysis=KeywordAnalysis(keyword="coffee", prominence=200)), 100)

    def test_missing_from_title(self):
        self.assertEqual(self.score(metadata=replace(self.metadata, title="Brewing Guide")), 60)

    def test_missing_from_slug(self):
        self.assertEqual(self.score(metadata=replace(self.metadata, slug="brewing-guide")), 70)

    def test_missing_from_meta_description(self):
        metadata = replace(self.metadata, meta_description="Everything about brewing.")
        self.assertEqual(self.score(metadata=metadata), 70)

    def test_missing_from_h1(self):
        content = "<h1>Brewing at Home</h1>\n<p>Coffee starts with fresh beans.</p>"
        self.assertEqual(self.score(content=content), 65)

    def test_missing_from_first_paragraph(self):
        content = "<h1>Coffee at Home</h1>\n<p>Start with fresh beans.</p>"
        self.assertEqual(self.score(content=content), 75)

    def test_no_focus_keyword(self):
        self.assertEqual(self.score(metadata=replace(self.metadata, focus_keyword="")), 0)
        self.assertEqual(SEOScoringEngine.keyword_distribution_score(None, self.CONTENT, self.metadata), 0)


class TestMalformedMetadata(unittest.TestCase):
    def test_non_string_hero_fields_are_converted(self):
        metadata = SEOMetadata.from_dict({"heroImageUrl": 1, "heroImageAlt": 2})
        self.assertEqual(metadata.hero_image_url, "1")
        self.assertEqual(metadata.hero_image_alt, "2")

    def test_empty_hero_fields_become_none(self):
        metadata = SEOMetadata.from_dict({"heroImageUrl": "", "heroImageAlt": 0})
        self.assertIsNone(metadata.hero_image_url)
        self.assertIsNone(metadata.hero_image_alt)

    def test_scalar_secondary_keywords_are_wrapped(self):
        self.assertEqual(SEOMetadata.from_dict({"secondaryKeywords": 5}).secondary_keywords, ("5",))
        self.assertEqual(
            SEOMetadata.from_dict({"secondaryKeywords": "beans"}).secondary_keywords, ("beans",)
        )


@pytest.mark.parametrize(
    "metadata,visual",
    [
        ({"heroImageUrl": 1}, 25),
        ({"heroImageUrl": "hero.jpg", "heroImageAlt": 7}, 40),
        ({"secondaryKeywords": 5}, 0),
    ],
)
def test_wrongly_typed_metadata_degrades(metadata, visual):
    result = analyze_content("<p>hello</p>", metadata)
    assert 0 <= result.scores.overall <= 100
    assert result.scores.breakdown.visual_content == visual
