"""
Configuration settings for the template switcher.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env file from project root
load_dotenv(Path(__file__).parent.parent / ".env")


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class SearchConfig:
    """Configuration for search, facets and tabs."""

    # Quiet period after the last keystroke before re-filtering
    debounce_ms: int = 150

    # Category facet buttons (after "All")
    max_category_facets: int = 15
    pinned_category: str = "Business"

    # Curated "popular" tab, shown in exactly this order
    popular_templates: list = field(
        default_factory=lambda: [
            "glint",
            "jackson",
            "space",
            "ogani",
            "cozastore",
            "imagine",
            "photosen",
            "academia",
            "ronaldo",
            "consultingbiz",
            "shutter",
            "transcend",
            "appy",
            "photon",
            "constructioncompany",
            "fox",
            "unfold",
            "ashion",
            "confer",
            "launch",
            "dento",
            "rezume",
            "coffeeblend",
            "christian",
            "unioncorp",
            "kiddos",
            "magdesign",
            "docmed",
        ]
    )


@dataclass
class StorageConfig:
    """Configuration for catalog and favorites files."""

    # Base data directory
    base_dir: Path = field(
        default_factory=lambda: Path(
            os.getenv("SWITCHER_DATA_DIR") or Path(__file__).parent.parent / "data"
        )
    )

    catalog_file: str = "templates.json"
    colors_file: str = "colors.json"
    favorites_file: str = "favorites.json"

    @property
    def catalog_path(self) -> Path:
        return self.base_dir / self.catalog_file

    @property
    def colors_path(self) -> Path:
        return self.base_dir / self.colors_file

    @property
    def favorites_path(self) -> Path:
        return self.base_dir / self.favorites_file


@dataclass
class ViewerConfig:
    """Configuration for the web viewer."""

    port: int = field(default_factory=lambda: int(os.getenv("SWITCHER_PORT", "5000")))
    debug: bool = field(default_factory=lambda: _env_flag("SWITCHER_DEBUG"))

    # Where the purchase button sends the user
    purchase_url_template: str = "https://colorlib.com/wp/template/{key}/#pricing"

    def purchase_url(self, key: str) -> str:
        return self.purchase_url_template.format(key=key)


@dataclass
class LoggingConfig:
    """Configuration for console logging."""

    verbose: bool = field(default_factory=lambda: _env_flag("SWITCHER_VERBOSE"))
    log_analytics: bool = True


@dataclass
class SwitcherConfig:
    """Main configuration combining all settings."""

    search: SearchConfig = field(default_factory=SearchConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)
    viewer: ViewerConfig = field(default_factory=ViewerConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# Default configuration instance
config = SwitcherConfig()
