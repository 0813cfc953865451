import logging

import pytest

from content_scoring.models import SEOMetadata

KEYWORD_SENTENCE = "Travel rewards help you save money on every trip."
PLAIN_SENTENCE = "Smart plans help you save money on every trip."
FILLER_SENTENCE = "Pick a card that fits the way you spend each month."
POINTS_SENTENCE = "Points add up fast when you book hotels and flights with it."


def build_article() -> str:
    """Roughly 2600 words: one H1, three H2s, two lists, two images, five internal links."""
    keyword_paragraph = " ".join(
        [KEYWORD_SENTENCE, FILLER_SENTENCE, POINTS_SENTENCE, FILLER_SENTENCE]
    )
    plain_paragraph = " ".join([PLAIN_SENTENCE, FILLER_SENTENCE, POINTS_SENTENCE, FILLER_SENTENCE])
    paragraphs = [
        f"<p>{keyword_paragraph if i % 2 == 0 else plain_paragraph}</p>" for i in range(60)
    ]
    blocks = ["\n".join(paragraphs[i : i + 2]) for i in range(0, 60, 2)]

    blocks[0] = "<h1>Travel Rewards Guide</h1>\n" + blocks[0]
    blocks[8] = "<h2>How Points Work</h2>\n" + blocks[8]
    blocks[16] = (
        "<h2>Picking a Card</h2>\n"
        + blocks[16]
        + "\n<ul><li>Earn points</li><li>Redeem miles</li></ul>"
    )
    blocks[24] = (
        "<h2>Booking Your Trip</h2>\n"
        + blocks[24]
        + "\n<ol><li>Apply</li><li>Spend</li></ol>"
        + '\n<img src="/img/card.jpg" alt="Card"><img src="/img/lounge.jpg" alt="Lounge">'
    )
    links = " ".join(
        f'<a href="/guides/{slug}">our guide</a>'
        for slug in ("points", "miles", "hotels", "flights", "cards")
    )
    blocks.append(f"<p>Read more: {links}.</p>")
    return "<article>\n" + "\n\n".join(blocks) + "\n</article>"


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo handlers installed by configure_logging during a test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture
def article_html():
    return build_article()


@pytest.fixture
def article_metadata():
    return SEOMetadata(
        title="Travel Rewards Guide: Earn More Points on Every Trip",
        meta_description=(
            "Learn how travel rewards cards turn everyday spending into free flights "
            "and hotel stays, and discover simple ways to earn more points."
        ),
        slug="travel-rewards-guide",
        focus_keyword="travel rewards",
        secondary_keywords=("points", "miles"),
        hero_image_url="https://example.com/hero.jpg",
        hero_image_alt="Travel rewards card on a desk",
    )


@pytest.fixture
def short_post():
    return (
        "<h1>Coffee Basics</h1>\n"
        "<p>Coffee is brewed from roasted beans.</p>\n\n"
        "<h2>Brewing</h2>\n"
        "<p>Good coffee needs fresh water and a clean grinder.</p>"
    )
