"""
Exact-match facet filters (category and color).
"""

from .catalog import ALL_CATEGORIES, ALL_COLORS, CatalogItem
from .tags import TagSet

# Dark-themed templates are rarely extracted as literally black
BLACK = "black"
DARK_TAG = "dark"


def matches_category(item: CatalogItem, active_category: str) -> bool:
    return active_category == ALL_CATEGORIES or item.category == active_category


def matches_color(item: CatalogItem, tags: TagSet, active_color: str) -> bool:
    """
    True when the template has ``active_color``.

    "black" also admits templates tagged "dark", whether or not the template
    has any extracted colors. The color map alone would leave dark templates
    without a color entry out of the black facet.
    """
    if active_color == ALL_COLORS:
        return True
    if active_color in item.colors:
        return True
    return active_color == BLACK and DARK_TAG in tags


def passes_facets(
    item: CatalogItem, tags: TagSet, active_category: str, active_color: str
) -> bool:
    """True when the template satisfies both the category and color facets."""
    return matches_category(item, active_category) and matches_color(
        item, tags, active_color
    )
