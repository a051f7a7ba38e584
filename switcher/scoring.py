"""
Relevance scoring for free-text template search.

Each query word is credited to the first field it is found in:

    name      +10
    category   +8
    tags       +3

then templates matching several words get a bonus, and templates matching
every word get a larger one. A score of 0 means "not shown".
"""

from dataclasses import dataclass

from .catalog import CatalogItem
from .tags import TagSet


# =============================================================================
# STOP WORDS
# =============================================================================
# Terms that describe virtually every template, so they carry no signal.

STOP_WORDS = frozenset(
    {
        # Common filler words
        "and", "the", "with", "for", "that", "this", "from", "have", "has",
        # Generic template terms
        "template", "templates", "theme", "themes", "website", "web", "page",
        "pages", "site", "design", "designs", "download", "downloads",
        # Technology (all templates have these)
        "bootstrap", "responsive", "modern", "free", "html", "html5", "css",
        "css3", "mobile-friendly", "cross-browser", "w3c-valid",
        "well-documented", "seo", "fast", "retina", "accessible", "jquery",
        "javascript",
        # UI components (all templates have these)
        "slider", "carousel", "slideshow", "banner", "hero", "header",
        "contact-form", "form", "contact", "newsletter", "email", "social",
        "icons", "menu", "navbar", "navigation", "dropdown", "footer", "cards",
        "animated", "gallery", "grid", "sections", "testimonials", "team",
        "about", "services", "features", "button", "buttons", "cta",
        "call-to-action",
        # Design qualities
        "professional", "clean", "minimal", "landing", "landing-page",
        "one-page", "multi-page", "creative", "beautiful", "elegant",
        "stylish", "attractive", "quality", "best", "new", "latest",
        # Years
        "2024", "2025", "2026",
        # Other common but unhelpful
        "premium", "free-download",
    }
)

NAME_POINTS = 10
CATEGORY_POINTS = 8
TAG_POINTS = 3
MULTI_WORD_POINTS_PER_WORD = 2
ALL_WORDS_BONUS = 20

# Score given to every template when the query carries no usable words
NEUTRAL_SCORE = 1


@dataclass(frozen=True)
class ScoredItem:
    """Result of scoring one template against the current filters."""

    key: str
    score: int
    passes_facets: bool

    @property
    def visible(self) -> bool:
        return self.score > 0 and self.passes_facets


def query_words(query: str) -> list[str]:
    """Lowercase, split and drop stop words and single characters."""
    return [
        word
        for word in (query or "").lower().strip().split()
        if len(word) > 1 and word not in STOP_WORDS
    ]


def score(query: str, item: CatalogItem, tags: TagSet) -> int:
    """
    Score one template against a free-text query.

    Args:
        query: Raw search text
        item: Template to score
        tags: The template's synthesized tags

    Returns:
        Non-negative relevance score; 0 means the template is not a match
    """
    words = query_words(query)
    if not words:
        return NEUTRAL_SCORE

    name = item.name.lower()
    category = item.category.lower()
    tag_text = tags.text

    total = 0
    matched_words = 0
    for word in words:
        if word in name:
            total += NAME_POINTS
        elif word in category:
            total += CATEGORY_POINTS
        elif word in tag_text:
            total += TAG_POINTS
        else:
            continue
        matched_words += 1

    if matched_words == 0:
        return 0

    if matched_words > 1:
        total += matched_words * MULTI_WORD_POINTS_PER_WORD

    if matched_words == len(words) and len(words) > 1:
        total += ALL_WORDS_BONUS

    return total
