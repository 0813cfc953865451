"""Markup helpers shared by the text analyzers.

Parsing is regex based: only opening tags are counted and nesting is not
validated.
"""
import re
from typing import List

SCRIPT_RE = re.compile(r"<script[^>]*>.*?</script>", re.IGNORECASE | re.DOTALL)
STYLE_RE = re.compile(r"<style[^>]*>.*?</style>", re.IGNORECASE | re.DOTALL)
TAG_RE = re.compile(r"<[^>]*>")
WHITESPACE_RE = re.compile(r"\s+")


def remove_tags(html: str) -> str:
    """Drop script/style blocks and replace every other tag with a space.

    Whitespace, including blank lines, is preserved.
    """
    if not html:
        return ""
    text = SCRIPT_RE.sub("", html)
    text = STYLE_RE.sub("", text)
    return TAG_RE.sub(" ", text)


def strip_html(html: str) -> str:
    """Return the plain text of ``html`` with whitespace collapsed."""
    return WHITESPACE_RE.sub(" ", remove_tags(html)).strip()


def split_words(text: str) -> List[str]:
    """Split text on whitespace, discarding empty tokens."""
    return [word for word in WHITESPACE_RE.split(text) if word]
