"""
pytest configuration and shared fixtures for template switcher tests.
"""

import sys
from pathlib import Path

import pytest

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from switcher.analytics import RecordingAnalytics  # noqa: E402
from switcher.catalog import Catalog  # noqa: E402
from switcher.favorites import FavoritesStore  # noqa: E402
from switcher.tags import TagIndex  # noqa: E402
from switcher.views import ViewSelector  # noqa: E402


SAMPLE_PRODUCTS = {
    "cozastore": {
        "name": "CozaStore",
        "tag": "ecommerce",
        "url": "https://example.com/preview/cozastore/",
        "img": "https://example.com/thumbs/cozastore.jpg",
        "responsive": 1,
    },
    "dento": {
        "name": "Dento",
        "tag": "medical",
        "url": "https://example.com/preview/dento/",
        "responsive": 1,
    },
    "docmed": {
        "name": "DocMed",
        "tag": "medical",
        "url": "https://example.com/preview/docmed/",
        "responsive": 1,
    },
    "nightfolio": {
        "name": "Night Folio",
        "tag": "Portfolio",
        "url": "https://example.com/preview/nightfolio/",
        "responsive": 1,
    },
    "homeland": {
        "name": "Homeland",
        "tag": "Real Estate",
        "url": "https://example.com/preview/homeland/",
        "responsive": 1,
    },
    "coffeeblend": {
        "name": "Coffee Blend",
        "tag": "Restaurant",
        "url": "https://example.com/preview/coffeeblend/",
        "responsive": 0,
    },
    "untitled": {
        "name": "Untitled",
        "url": "https://example.com/preview/untitled/",
    },
}

SAMPLE_COLORS = {
    "cozastore": ["White", "black"],
    "dento": ["blue", "white"],
    "nightfolio": ["grey"],
    "coffeeblend": ["brown"],
}

SAMPLE_POPULAR = ["dento", "missing", "cozastore", "dento"]


@pytest.fixture
def catalog():
    return Catalog.from_dict(SAMPLE_PRODUCTS, SAMPLE_COLORS)


@pytest.fixture
def tag_index(catalog):
    return TagIndex.build(catalog)


@pytest.fixture
def favorites():
    return FavoritesStore()


@pytest.fixture
def recorder():
    return RecordingAnalytics()


@pytest.fixture
def selector(catalog, tag_index, favorites, recorder):
    return ViewSelector(
        catalog, tag_index, favorites, popular=SAMPLE_POPULAR, analytics=recorder
    )
