"""
View selection: which templates are shown, and in what order.

Three tabs decide the rule:

    all        free-text score + category/color facets, best matches first
    favorites  the user's favorites in catalog order, filters ignored
    popular    the curated list in its own order, filters ignored

``select_view`` is a pure function of the filter state; ``ViewSelector``
holds the current ``FilterState`` and exposes the setters the UI calls.

Usage:
    selector = ViewSelector(catalog, tag_index, favorites_store, popular)
    view = selector.set_search_text("coffee shop")
    [entry.key for entry in view.visible_entries]
    view.count_label      # "3 of 120 templates"
"""

from dataclasses import dataclass, replace
from typing import Container, Optional, Sequence

from .analytics import (
    FAVORITE_ADD,
    FAVORITE_REMOVE,
    TAB_SWITCH,
    AnalyticsSink,
    track_event,
)
from .catalog import ALL_CATEGORIES, ALL_COLORS, Catalog
from .facets import passes_facets
from .favorites import FavoritesStore
from .scoring import ScoredItem, score
from .tags import TagIndex


# =============================================================================
# TABS
# =============================================================================

TAB_ALL = "all"
TAB_FAVORITES = "favorites"
TAB_POPULAR = "popular"
TABS = (TAB_ALL, TAB_FAVORITES, TAB_POPULAR)

EMPTY_MESSAGES = {
    TAB_ALL: "No templates found. Try different keywords.",
    TAB_FAVORITES: "No favorites yet. Click the heart icon on templates to add them.",
    TAB_POPULAR: "No popular templates available.",
}


def validate_tab(tab: str) -> str:
    if tab not in TABS:
        raise ValueError(f"Unknown tab '{tab}'. Expected one of: {', '.join(TABS)}")
    return tab


# =============================================================================
# STATE & RESULT TYPES
# =============================================================================


@dataclass(frozen=True)
class FilterState:
    """One value per filter axis."""

    search_text: str = ""
    active_category: str = ALL_CATEGORIES
    active_color: str = ALL_COLORS
    active_tab: str = TAB_ALL

    @property
    def is_default(self) -> bool:
        """True when nothing narrows the "all" tab."""
        return (
            self.active_tab == TAB_ALL
            and self.active_category == ALL_CATEGORIES
            and self.active_color == ALL_COLORS
            and not self.search_text.strip()
        )


@dataclass(frozen=True)
class ViewEntry:
    key: str
    visible: bool
    score: Optional[int] = None  # only set on the "all" tab


@dataclass(frozen=True)
class ViewResult:
    """Ordered entries plus the counts and empty state to display."""

    tab: str
    entries: tuple[ViewEntry, ...]
    visible_count: int
    total_count: int
    count_label: str
    empty_message: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return self.visible_count == 0

    @property
    def visible_entries(self) -> list[ViewEntry]:
        return [entry for entry in self.entries if entry.visible]

    @property
    def visible_keys(self) -> list[str]:
        return [entry.key for entry in self.entries if entry.visible]


# =============================================================================
# SELECTION RULES
# =============================================================================


def score_catalog(
    state: FilterState, catalog: Catalog, tag_index: TagIndex
) -> list[ScoredItem]:
    """Score every template against the search text and facets, in catalog order."""
    return [
        ScoredItem(
            key=item.key,
            score=score(state.search_text, item, tag_index[item.key]),
            passes_facets=passes_facets(
                item, tag_index[item.key], state.active_category, state.active_color
            ),
        )
        for item in catalog
    ]


def _rank_all(
    state: FilterState, catalog: Catalog, tag_index: TagIndex
) -> list[ViewEntry]:
    scored = score_catalog(state, catalog, tag_index)
    # sorted() is stable, so ties keep catalog order
    visible = sorted((s for s in scored if s.visible), key=lambda s: -s.score)
    hidden = [s for s in scored if not s.visible]
    return [ViewEntry(s.key, True, s.score) for s in visible] + [
        ViewEntry(s.key, False, s.score) for s in hidden
    ]


def _rank_favorites(catalog: Catalog, favorites: Container[str]) -> list[ViewEntry]:
    return [ViewEntry(item.key, item.key in favorites) for item in catalog]


def _rank_popular(catalog: Catalog, popular: Sequence[str]) -> list[ViewEntry]:
    ordered: list[str] = []
    for key in popular:
        if key in catalog and key not in ordered:
            ordered.append(key)
    chosen = set(ordered)
    return [ViewEntry(key, True) for key in ordered] + [
        ViewEntry(item.key, False) for item in catalog if item.key not in chosen
    ]


def count_label(state: FilterState, visible: int, total: int) -> str:
    if state.is_default:
        return f"{total} templates available"
    return f"{visible} of {total} templates"


def select_view(
    state: FilterState,
    catalog: Catalog,
    tag_index: TagIndex,
    favorites: Container[str] = (),
    popular: Sequence[str] = (),
) -> ViewResult:
    """
    Compute the ordered template list for a filter state.

    Args:
        state: Current filters and tab
        catalog: All templates
        tag_index: Precomputed tags for the catalog
        favorites: Favorite keys (used by the favorites tab)
        popular: Curated keys in display order (used by the popular tab)

    Returns:
        ViewResult with visible entries first
    """
    tab = validate_tab(state.active_tab)
    if tab == TAB_FAVORITES:
        entries = _rank_favorites(catalog, favorites)
    elif tab == TAB_POPULAR:
        entries = _rank_popular(catalog, popular)
    else:
        entries = _rank_all(state, catalog, tag_index)

    visible = sum(1 for entry in entries if entry.visible)
    total = len(catalog)
    return ViewResult(
        tab=tab,
        entries=tuple(entries),
        visible_count=visible,
        total_count=total,
        count_label=count_label(state, visible, total),
        empty_message=EMPTY_MESSAGES[tab] if visible == 0 else None,
    )


# =============================================================================
# VIEW SELECTOR
# =============================================================================


class ViewSelector:
    """
    Holds the filter state and recomputes the view after each change.

    Category, color and search changes are remembered while the favorites or
    popular tab is active and take effect again on returning to "all".
    """

    def __init__(
        self,
        catalog: Catalog,
        tag_index: Optional[TagIndex] = None,
        favorites: Optional[FavoritesStore] = None,
        popular: Sequence[str] = (),
        analytics: Optional[AnalyticsSink] = None,
    ):
        self.catalog = catalog
        self.tag_index = tag_index if tag_index is not None else TagIndex.build(catalog)
        self.favorites = favorites if favorites is not None else FavoritesStore()
        self.popular = list(popular)
        self.analytics = analytics
        self._state = FilterState()
        self._view = self._compute()

    @property
    def state(self) -> FilterState:
        return self._state

    @property
    def view(self) -> ViewResult:
        return self._view

    def _compute(self) -> ViewResult:
        return select_view(
            self._state, self.catalog, self.tag_index, self.favorites, self.popular
        )

    def _apply(self, state: FilterState) -> ViewResult:
        self._state = state
        self._view = self._compute()
        return self._view

    def set_search_text(self, text: str) -> ViewResult:
        return self._apply(replace(self._state, search_text=text or ""))

    def set_category(self, category: str) -> ViewResult:
        return self._apply(replace(self._state, active_category=category))

    def set_color(self, color: str) -> ViewResult:
        return self._apply(replace(self._state, active_color=color))

    def set_tab(self, tab: str) -> Optional[ViewResult]:
        """
        Switch tabs.

        Returns:
            The new view, or None when ``tab`` is already active
        """
        validate_tab(tab)
        if tab == self._state.active_tab:
            return None
        view = self._apply(replace(self._state, active_tab=tab))
        track_event(self.analytics, TAB_SWITCH, {"tab": tab})
        return view

    def toggle_favorite(self, key: str) -> bool:
        """Toggle a favorite; refreshes the view when the favorites tab is shown."""
        favorited = self.favorites.toggle(key)
        track_event(
            self.analytics,
            FAVORITE_ADD if favorited else FAVORITE_REMOVE,
            {"template_id": key},
        )
        if self._state.active_tab == TAB_FAVORITES:
            self._view = self._compute()
        return favorited

    def reset(self) -> ViewResult:
        """Back to the initial state, without a tab_switch event."""
        return self._apply(FilterState())
