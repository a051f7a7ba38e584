"""
Favorites store.

Keeps the set of liked template keys and persists it as a JSON list after
every change. Loading never fails: missing or corrupt data means "no
favorites". Saving never raises: a failed write is only reported.
"""

import json
import threading
from pathlib import Path
from typing import Optional

from rich.console import Console

console = Console()


class FavoritesStore:
    """
    Persisted set of favorite template keys.

    Args:
        path: JSON file to persist to; None keeps favorites in memory only
    """

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path is not None else None
        # dict keys give an insertion-ordered set
        self._favorites: dict[str, None] = {}
        self._lock = threading.Lock()

    def load(self) -> set[str]:
        """Read favorites from disk, replacing the in-memory set."""
        with self._lock:
            self._favorites = {key: None for key in self._read()}
            return set(self._favorites)

    def _read(self) -> list[str]:
        if self.path is None or not self.path.exists():
            return []
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                parsed = json.load(f)
        except (OSError, ValueError) as e:
            console.print(f"[yellow]Warning: Failed to load favorites: {e}[/yellow]")
            return []

        if not isinstance(parsed, list):
            console.print(
                "[yellow]Warning: Favorites file is not a list, starting empty[/yellow]"
            )
            return []
        return [str(key) for key in parsed]

    def save(self) -> None:
        """Write favorites to disk. Failures are reported, never raised."""
        if self.path is None:
            return
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(list(self._favorites), f)
        except OSError as e:
            console.print(f"[yellow]Warning: Failed to save favorites: {e}[/yellow]")

    def toggle(self, key: str) -> bool:
        """
        Add or remove a template.

        Returns:
            True if the template is a favorite after the call
        """
        with self._lock:
            if key in self._favorites:
                del self._favorites[key]
                favorited = False
            else:
                self._favorites[key] = None
                favorited = True
            self.save()
        return favorited

    def is_favorited(self, key: str) -> bool:
        return key in self._favorites

    def get_all(self) -> list[str]:
        return list(self._favorites)

    @property
    def count(self) -> int:
        return len(self._favorites)

    def __contains__(self, key) -> bool:
        return key in self._favorites
