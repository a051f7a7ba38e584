"""
Template Switcher search core.

Finds one template out of a few hundred by free-text search, category and
color facets, and curated tabs (all / favorites / popular):

- Tag synthesis from sparse template metadata
- Relevance scoring of a free-text query against name, category and tags
- Exact-match category/color facets
- Tab-aware ordering of the visible set
"""

from .analytics import ConsoleAnalytics, RecordingAnalytics, track_event
from .catalog import Catalog, CatalogItem
from .debounce import SearchDebouncer
from .facets import passes_facets
from .favorites import FavoritesStore
from .scoring import STOP_WORDS, ScoredItem, query_words, score
from .session import SwitcherSession, ViewerFrame, load_session
from .tags import CATEGORY_SYNONYMS, FEATURE_PATTERNS, TagIndex, TagSet, synthesize
from .views import (
    TAB_ALL,
    TAB_FAVORITES,
    TAB_POPULAR,
    TABS,
    FilterState,
    ViewEntry,
    ViewResult,
    ViewSelector,
    select_view,
)

__all__ = [
    # Catalog
    "Catalog",
    "CatalogItem",
    # Search
    "CATEGORY_SYNONYMS",
    "FEATURE_PATTERNS",
    "TagIndex",
    "TagSet",
    "synthesize",
    "STOP_WORDS",
    "ScoredItem",
    "query_words",
    "score",
    "passes_facets",
    # Views
    "TAB_ALL",
    "TAB_FAVORITES",
    "TAB_POPULAR",
    "TABS",
    "FilterState",
    "ViewEntry",
    "ViewResult",
    "ViewSelector",
    "select_view",
    # Collaborators
    "FavoritesStore",
    "ConsoleAnalytics",
    "RecordingAnalytics",
    "track_event",
    "SearchDebouncer",
    # Session
    "SwitcherSession",
    "ViewerFrame",
    "load_session",
]
