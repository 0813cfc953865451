"""Text metrics extraction: word, sentence, paragraph and syllable counts."""
import re

from ..models import TextMetrics
from .html import WHITESPACE_RE, remove_tags, split_words

VOWELS = set("aeiouy")
SENTENCE_BOUNDARY_RE = re.compile(r"[.!?]+")
PARAGRAPH_BOUNDARY_RE = re.compile(r"\n\s*\n")
NON_LETTER_RE = re.compile(r"[^a-z]")

COMPLEX_WORD_SYLLABLES = 3


def count_syllables(word: str) -> int:
    """Estimate the number of syllables in a single word.

    This is a heuristic, not a dictionary lookup: letters outside a-z are
    dropped, words of three letters or fewer count as one syllable, longer
    words count groups of consecutive vowels (``aeiouy``) minus one for a
    trailing silent ``e``, with a floor of one. Readability thresholds are
    calibrated against exactly this behaviour.

    Args:
        word: The word to measure

    Returns:
        Estimated syllable count, 0 for tokens without letters
    """
    word = NON_LETTER_RE.sub("", word.lower())
    if not word:
        return 0
    if len(word) <= 3:
        return 1

    count = 0
    prev_is_vowel = False
    for char in word:
        is_vowel = char in VOWELS
        if is_vowel and not prev_is_vowel:
            count += 1
        prev_is_vowel = is_vowel

    if word.endswith("e"):
        count -= 1

    return max(count, 1)


def count_sentences(text: str) -> int:
    """Count sentences split on runs of ``.``, ``!`` or ``?`` (minimum 1)."""
    sentences = [s for s in SENTENCE_BOUNDARY_RE.split(text) if s.strip()]
    return max(len(sentences), 1)


def count_paragraphs(text: str) -> int:
    """Count blank-line separated paragraphs (minimum 1)."""
    paragraphs = [p for p in PARAGRAPH_BOUNDARY_RE.split(text) if p.strip()]
    return max(len(paragraphs), 1)


def get_text_metrics(content: str) -> TextMetrics:
    """Extract token-level metrics from raw, possibly HTML-tagged content.

    Args:
        content: Article body as HTML or plain text

    Returns:
        TextMetrics for the content; empty content yields zero counts with
        sentence and paragraph counts floored at 1
    """
    untagged = remove_tags(content or "")
    plain_text = WHITESPACE_RE.sub(" ", untagged).strip()

    words = split_words(plain_text)
    word_count = len(words)
    sentence_count = count_sentences(plain_text)
    paragraph_count = count_paragraphs(untagged)
    character_count = len(WHITESPACE_RE.sub("", plain_text))

    syllables = [count_syllables(word) for word in words]
    syllable_count = sum(syllables)
    complex_word_count = sum(1 for s in syllables if s >= COMPLEX_WORD_SYLLABLES)

    return TextMetrics(
        word_count=word_count,
        sentence_count=sentence_count,
        paragraph_count=paragraph_count,
        syllable_count=syllable_count,
        complex_word_count=complex_word_count,
        average_sentence_length=word_count / sentence_count,
        average_syllables_per_word=syllable_count / max(word_count, 1),
        character_count=character_count,
        polysyllabic_word_count=complex_word_count,
    )
