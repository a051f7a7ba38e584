"""
Template catalog loading.

The catalog is the static map of template key -> metadata supplied by the
host application, plus the optional map of colors extracted from each
template's thumbnail. Both are read once at startup and never change.

Source format (templates.json):
    {
        "cozastore": {"name": "CozaStore", "tag": "eCommerce",
                      "url": "https://...", "img": "https://...",
                      "responsive": 1},
        ...
    }

Colors (colors.json):
    {"cozastore": ["white", "black"], ...}
"""

import json
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Optional

from rich.console import Console

console = Console()

DEFAULT_CATEGORY = "Other"
ALL_CATEGORIES = "All"
ALL_COLORS = "all"


@dataclass(frozen=True)
class CatalogItem:
    """One template in the catalog."""

    key: str
    name: str
    category: str = DEFAULT_CATEGORY
    colors: tuple[str, ...] = ()
    viewer_url: str = ""
    is_responsive: bool = True
    thumbnail: str = ""


def _normalize_colors(raw) -> tuple[str, ...]:
    if not isinstance(raw, (list, tuple)):
        return ()
    colors = []
    for value in raw:
        color = str(value).strip().lower()
        if color and color not in colors:
            colors.append(color)
    return tuple(colors)


def _is_responsive(raw) -> bool:
    # Source stores 0/1; a missing flag means responsive
    if raw is None:
        return True
    if isinstance(raw, str):
        return raw.strip().lower() not in ("0", "false", "no", "")
    return bool(raw)


@dataclass
class Catalog:
    """Ordered, read-only collection of catalog items."""

    items: dict[str, CatalogItem] = field(default_factory=dict)

    @classmethod
    def from_dict(
        cls, products: dict, colors: Optional[dict] = None
    ) -> "Catalog":
        """
        Build a catalog from the source product map.

        Args:
            products: Mapping of key -> {name, tag, url, img, responsive}
            colors: Optional mapping of key -> list of color names

        Returns:
            Catalog preserving the insertion order of ``products``
        """
        colors = colors or {}
        items: dict[str, CatalogItem] = {}

        for key, row in products.items():
            if not isinstance(row, dict):
                console.print(
                    f"[yellow]Warning: Skipping catalog entry '{key}' (not an object)[/yellow]"
                )
                continue

            name = str(row.get("name") or "").strip()
            if not name:
                console.print(
                    f"[yellow]Warning: Skipping catalog entry '{key}' (no name)[/yellow]"
                )
                continue

            items[str(key)] = CatalogItem(
                key=str(key),
                name=name,
                category=str(row.get("tag") or "").strip() or DEFAULT_CATEGORY,
                colors=_normalize_colors(colors.get(key)),
                viewer_url=str(row.get("url") or ""),
                is_responsive=_is_responsive(row.get("responsive")),
                thumbnail=str(row.get("img") or ""),
            )

        return cls(items=items)

    @classmethod
    def from_files(
        cls, catalog_path: Path, colors_path: Optional[Path] = None
    ) -> "Catalog":
        """Load the catalog (and optional color map) from JSON files."""
        catalog_path = Path(catalog_path)
        products = _read_json(catalog_path)
        if not isinstance(products, dict):
            raise ValueError(f"Catalog file {catalog_path} must contain a JSON object")

        colors: dict = {}
        if colors_path is not None and Path(colors_path).exists():
            try:
                loaded = _read_json(Path(colors_path))
            except ValueError as e:
                console.print(f"[yellow]Warning: Ignoring color map: {e}[/yellow]")
            else:
                if isinstance(loaded, dict):
                    colors = loaded
                else:
                    console.print(
                        f"[yellow]Warning: Ignoring color map {colors_path} (not an object)[/yellow]"
                    )

        catalog = cls.from_dict(products, colors)
        console.print(f"[dim]✓ Loaded {len(catalog)} templates from {catalog_path.name}[/dim]")
        return catalog

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[CatalogItem]:
        return iter(self.items.values())

    def __contains__(self, key) -> bool:
        return key in self.items

    def __getitem__(self, key: str) -> CatalogItem:
        return self.items[key]

    def get(self, key: str) -> Optional[CatalogItem]:
        return self.items.get(key)

    def keys(self) -> list[str]:
        return list(self.items)

    def first_key(self) -> Optional[str]:
        return next(iter(self.items), None)

    def category_facets(
        self, max_categories: int = 15, pinned: Optional[str] = "Business"
    ) -> list[tuple[str, int]]:
        """
        Category buttons with template counts.

        "All" comes first, then the pinned category, then the remaining
        categories by descending count (ties keep first-seen order).
        """
        counts = Counter(item.category for item in self)
        ordered = sorted(
            counts.items(),
            key=lambda entry: (entry[0] != pinned, -entry[1]),
        )
        return [(ALL_CATEGORIES, len(self))] + ordered[:max_categories]

    def color_facets(self) -> list[tuple[str, int]]:
        """Color swatches with template counts, most common first."""
        counts = Counter(color for item in self for color in item.colors)
        return [(ALL_COLORS, len(self))] + sorted(
            counts.items(), key=lambda entry: -entry[1]
        )


def _read_json(path: Path):
    with open(path, "r", encoding="utf-8") as f:
        try:
            return json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e
