"""
Switcher session: the template currently shown in the viewer, plus the
switcher modal that is opened to pick another one.

Opening the modal pre-selects the current template's category so related
templates show first; closing it clears search, facets and tab.
"""

from dataclasses import dataclass
from typing import Optional

from rich.console import Console

from config.settings import SwitcherConfig, config as default_config

from .analytics import PURCHASE_CLICK, TEMPLATE_VIEW, AnalyticsSink, track_event
from .catalog import Catalog
from .debounce import SearchDebouncer
from .favorites import FavoritesStore
from .tags import TagIndex
from .views import ViewResult, ViewSelector

console = Console()


@dataclass(frozen=True)
class ViewerFrame:
    """What the embedded viewer needs to show one template."""

    key: str
    name: str
    category: str
    url: str
    viewport_enabled: bool
    favorited: bool

    def to_dict(self) -> dict:
        return {
            "key": self.key,
            "name": self.name,
            "category": self.category,
            "url": self.url,
            "viewport_enabled": self.viewport_enabled,
            "favorited": self.favorited,
        }


class SwitcherSession:
    def __init__(
        self,
        selector: ViewSelector,
        debouncer: Optional[SearchDebouncer] = None,
        settings: Optional[SwitcherConfig] = None,
    ):
        self.settings = settings or default_config
        self.selector = selector
        self.debouncer = debouncer or SearchDebouncer(self.settings.search.debounce_ms)
        self.current_key: Optional[str] = None
        self.is_open = False

    @property
    def catalog(self) -> Catalog:
        return self.selector.catalog

    @property
    def favorites(self) -> FavoritesStore:
        return self.selector.favorites

    @property
    def analytics(self) -> Optional[AnalyticsSink]:
        return self.selector.analytics

    def resolve_initial_key(
        self, fragment: Optional[str] = None, product_param: Optional[str] = None
    ) -> Optional[str]:
        """
        Pick the template to show first.

        The URL fragment wins if it names a template, then the ``product``
        query parameter, then the first template in the catalog.
        """
        for candidate in (fragment, product_param):
            if candidate:
                key = candidate.lstrip("#")
                if key in self.catalog:
                    return key
        return self.catalog.first_key()

    def select(self, key: str) -> ViewerFrame:
        """Show ``key`` in the viewer. Raises KeyError for unknown templates."""
        item = self.catalog[key]
        self.current_key = key
        track_event(
            self.analytics,
            TEMPLATE_VIEW,
            {
                "template_id": key,
                "template_name": item.name,
                "template_category": item.category,
            },
        )
        return self.frame(key)

    def frame(self, key: str) -> ViewerFrame:
        item = self.catalog[key]
        return ViewerFrame(
            key=item.key,
            name=item.name,
            category=item.category,
            url=item.viewer_url,
            viewport_enabled=item.is_responsive,
            favorited=self.favorites.is_favorited(key),
        )

    def open_switcher(self) -> ViewResult:
        self.is_open = True
        if self.current_key is not None and self.current_key in self.catalog:
            return self.selector.set_category(self.catalog[self.current_key].category)
        return self.selector.view

    def close_switcher(self) -> ViewResult:
        self.is_open = False
        self.debouncer.cancel()
        return self.selector.reset()

    def type_search(self, text: str) -> int:
        """Record a keystroke; the search runs once input goes quiet."""
        return self.debouncer.submit(text)

    def poll_search(self) -> Optional[ViewResult]:
        """Apply the pending search if it is due."""
        text = self.debouncer.poll()
        if text is None:
            return None
        return self.selector.set_search_text(text)

    def toggle_current_favorite(self) -> Optional[bool]:
        if self.current_key is None:
            return None
        return self.selector.toggle_favorite(self.current_key)

    def purchase_url(self, key: Optional[str] = None) -> Optional[str]:
        """Purchase link for ``key`` (default: the template on screen)."""
        key = key or self.current_key
        if key is None or key not in self.catalog:
            return None
        item = self.catalog[key]
        track_event(
            self.analytics,
            PURCHASE_CLICK,
            {
                "template_id": item.key,
                "template_name": item.name,
                "template_category": item.category,
            },
        )
        return self.settings.viewer.purchase_url(item.key)


def load_session(
    settings: Optional[SwitcherConfig] = None,
    analytics: Optional[AnalyticsSink] = None,
) -> SwitcherSession:
    """Load catalog, colors and favorites from disk and build a session."""
    settings = settings or default_config
    storage = settings.storage

    catalog = Catalog.from_files(storage.catalog_path, storage.colors_path)
    tag_index = TagIndex.build(catalog)

    favorites = FavoritesStore(storage.favorites_path)
    favorites.load()
    if settings.logging.verbose:
        console.print(f"[dim]✓ {favorites.count} favorites loaded[/dim]")

    selector = ViewSelector(
        catalog,
        tag_index,
        favorites,
        popular=settings.search.popular_templates,
        analytics=analytics,
    )
    return SwitcherSession(selector, settings=settings)
