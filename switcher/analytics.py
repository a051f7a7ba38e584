"""
Optional analytics sink.

A sink is any callable taking ``(event_name, params)``. The core never
depends on it: a missing sink is a no-op and a failing one only prints a
warning.
"""

from typing import Callable, Optional

from rich.console import Console

console = Console()

AnalyticsSink = Callable[[str, dict], None]

FAVORITE_ADD = "favorite_add"
FAVORITE_REMOVE = "favorite_remove"
TAB_SWITCH = "tab_switch"
TEMPLATE_VIEW = "template_view"
PURCHASE_CLICK = "purchase_click"


def track_event(sink: Optional[AnalyticsSink], event_name: str, params: dict) -> None:
    """Send an event to the sink, if there is one."""
    if sink is None:
        return
    try:
        sink(event_name, dict(params))
    except Exception as e:
        console.print(
            f"[yellow]Warning: Analytics event '{event_name}' failed: {e}[/yellow]"
        )


class ConsoleAnalytics:
    """Sink that prints events to the console."""

    def __init__(self, enabled: bool = True):
        self.enabled = enabled

    def __call__(self, event_name: str, params: dict) -> None:
        if not self.enabled:
            return
        details = ", ".join(f"{k}={v}" for k, v in params.items())
        console.print(f"[dim]event {event_name}: {details}[/dim]")


class RecordingAnalytics:
    """Sink that keeps events in memory."""

    def __init__(self):
        self.events: list[tuple[str, dict]] = []

    def __call__(self, event_name: str, params: dict) -> None:
        self.events.append((event_name, params))

    def names(self) -> list[str]:
        return [name for name, _ in self.events]
