#!/usr/bin/env python3
"""
Template Switcher - Command Line Search

Searches the template catalog the same way the switcher modal does and
prints the ranked result.

Usage:
    python main.py "coffee shop"              # Free-text search
    python main.py -c Medical                 # Category facet only
    python main.py --color black              # Color facet only
    python main.py --tab popular              # Curated popular list
    python main.py --facets                   # List categories and colors
"""
import argparse
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

from config.settings import SwitcherConfig, config
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from switcher.analytics import ConsoleAnalytics
from switcher.session import SwitcherSession, load_session
from switcher.views import TABS, ViewResult

console = Console()


class CustomHelpFormatter(argparse.RawDescriptionHelpFormatter):
    """Custom formatter that preserves formatting and adds width."""

    def __init__(self, prog):
        super().__init__(prog, max_help_position=40, width=100)


def parse_args(argv=None):
    """Parse command line arguments."""

    epilog = """
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
EXAMPLES
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
  Search:
    python main.py shop                     Templates related to shops
    python main.py "dark portfolio"         Both words: ranked first
    python main.py -c Medical               Every Medical template
    python main.py --color black            Black (or dark) templates

  Tabs:
    python main.py --tab favorites          Your favorites
    python main.py --tab popular            Curated popular templates

  Favorites & inspection:
    python main.py --favorite cozastore     Toggle a favorite
    python main.py --tags cozastore         Show synthesized search tags
    python main.py --facets                 Category and color counts
"""

    parser = argparse.ArgumentParser(
        description="Search the template catalog",
        formatter_class=CustomHelpFormatter,
        epilog=epilog,
    )
    parser.add_argument("query", nargs="?", default="", help="Free-text search")
    parser.add_argument(
        "-c", "--category", default="All", help="Category facet (default: All)"
    )
    parser.add_argument("--color", default="all", help="Color facet (default: all)")
    parser.add_argument(
        "--tab", default="all", choices=TABS, help="Tab to show (default: all)"
    )
    parser.add_argument(
        "-n", "--limit", type=int, default=20, help="Max rows to print (default: 20)"
    )
    parser.add_argument(
        "--facets", action="store_true", help="List category and color facets"
    )
    parser.add_argument("--favorite", metavar="KEY", help="Toggle a favorite")
    parser.add_argument("--tags", metavar="KEY", help="Show tags for a template")
    parser.add_argument(
        "--data-dir", type=Path, help="Directory with templates.json and colors.json"
    )
    return parser.parse_args(argv)


def print_view(session: SwitcherSession, view: ViewResult, limit: int) -> None:
    """Render a view as a table."""
    if view.is_empty:
        console.print(f"[yellow]{view.empty_message}[/yellow]")
        return

    table = Table(title=view.count_label)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Key", style="cyan")
    table.add_column("Name")
    table.add_column("Category", style="magenta")
    table.add_column("Score", justify="right")
    table.add_column("♥", justify="center")

    for rank, entry in enumerate(view.visible_entries[:limit], start=1):
        item = session.catalog[entry.key]
        table.add_row(
            str(rank),
            item.key,
            escape(item.name),
            item.category,
            "" if entry.score is None else str(entry.score),
            "♥" if session.favorites.is_favorited(item.key) else "",
        )

    console.print(table)
    if view.visible_count > limit:
        console.print(f"[dim]... and {view.visible_count - limit} more[/dim]")


def print_facets(session: SwitcherSession) -> None:
    search = session.settings.search
    categories = session.catalog.category_facets(
        search.max_category_facets, search.pinned_category
    )
    console.print(
        Panel(
            "\n".join(f"{label:<20} {count}" for label, count in categories),
            title="Categories",
        )
    )
    console.print(
        Panel(
            "\n".join(f"{color:<20} {count}" for color, count in session.catalog.color_facets()),
            title="Colors",
        )
    )


def print_tags(session: SwitcherSession, key: str) -> int:
    if key not in session.catalog:
        console.print(f"[red]Unknown template: {escape(key)}[/red]")
        return 1
    tags = session.selector.tag_index[key]
    console.print(Panel(", ".join(tags), title=f"{key} ({len(tags)} tags)"))
    return 0


def main(argv=None) -> int:
    args = parse_args(argv)

    settings = config
    if args.data_dir:
        settings = SwitcherConfig()
        settings.storage.base_dir = args.data_dir

    try:
        session = load_session(
            settings, analytics=ConsoleAnalytics(settings.logging.verbose)
        )
    except (OSError, ValueError) as e:
        console.print(f"[red]Failed to load catalog: {e}[/red]")
        return 1

    if args.facets:
        print_facets(session)
        return 0

    if args.tags:
        return print_tags(session, args.tags)

    if args.favorite:
        if args.favorite not in session.catalog:
            console.print(f"[red]Unknown template: {escape(args.favorite)}[/red]")
            return 1
        favorited = session.selector.toggle_favorite(args.favorite)
        state = "added to" if favorited else "removed from"
        console.print(f"[green]✓ {args.favorite} {state} favorites[/green]")
        return 0

    selector = session.selector
    selector.set_search_text(args.query)
    selector.set_category(args.category)
    selector.set_color(args.color)
    view = selector.set_tab(args.tab) or selector.view

    print_view(session, view, args.limit)
    return 0


if __name__ == "__main__":
    sys.exit(main())
