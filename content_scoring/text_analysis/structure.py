"""Structural analysis of article markup."""
import re

from ..models import ContentStructure, HeadingCounts, LinkCounts, ListCounts

SEMANTIC_TAGS = ("article", "section", "nav", "aside", "header", "footer", "main")

HEADING_RES = {
    level: re.compile(rf"<h{level}[^>]*>", re.IGNORECASE) for level in range(1, 7)
}
ORDERED_LIST_RE = re.compile(r"<ol[^>]*>", re.IGNORECASE)
UNORDERED_LIST_RE = re.compile(r"<ul[^>]*>", re.IGNORECASE)
IMAGE_RE = re.compile(r"<img[^>]*>", re.IGNORECASE)
LINK_RE = re.compile(r"<a[^>]*href[^>]*>", re.IGNORECASE)
EXTERNAL_HREF_RE = re.compile(r"""href\s*=\s*["']https?://[^"']*["']""", re.IGNORECASE)
SEMANTIC_RES = [re.compile(rf"<{tag}[^>]*>", re.IGNORECASE) for tag in SEMANTIC_TAGS]


def has_semantic_structure(html: str) -> bool:
    """True if any landmark tag (article, section, nav, ...) is opened."""
    return any(pattern.search(html) for pattern in SEMANTIC_RES)


def analyze_content_structure(html: str) -> ContentStructure:
    """Count headings, lists, images and links in raw markup.

    Only opening tags are counted and nesting is not validated, so malformed
    or unclosed markup is tolerated the same way a regex tolerates it.

    Args:
        html: Article markup

    Returns:
        ContentStructure with the counts found
    """
    html = html or ""

    headings = HeadingCounts(
        **{f"h{level}": len(pattern.findall(html)) for level, pattern in HEADING_RES.items()}
    )
    lists = ListCounts(
        ordered=len(ORDERED_LIST_RE.findall(html)),
        unordered=len(UNORDERED_LIST_RE.findall(html)),
    )

    links = LINK_RE.findall(html)
    external = sum(1 for link in links if EXTERNAL_HREF_RE.search(link))

    return ContentStructure(
        headings=headings,
        lists=lists,
        images=len(IMAGE_RE.findall(html)),
        links=LinkCounts(internal=len(links) - external, external=external),
        has_semantic_structure=has_semantic_structure(html),
    )
