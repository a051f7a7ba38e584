#!/usr/bin/env python3
"""
Web viewer for browsing and previewing templates.

Serves a single page with the template switcher (search, category and color
facets, tabs) next to an iframe showing the selected template, plus the JSON
API the page calls.

Usage:
    python viewer.py              # Serve data/templates.json
    python viewer.py --port 8080

Then open http://localhost:5000 in your browser.
"""
import argparse
import threading
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, abort, jsonify, render_template_string, request

from config.settings import SwitcherConfig, config
from switcher.analytics import ConsoleAnalytics
from switcher.session import SwitcherSession, load_session
from switcher.views import FilterState, ViewResult, select_view, validate_tab

# Load environment variables
load_dotenv(Path(__file__).parent / ".env")

app = Flask(__name__)

# Session shared by all requests; favorites are the only mutable part
session: Optional[SwitcherSession] = None
_favorites_lock = threading.Lock()


def init_viewer(
    viewer_session: Optional[SwitcherSession] = None,
    settings: Optional[SwitcherConfig] = None,
) -> SwitcherSession:
    """Install the session the API serves (loads from disk when not given)."""
    global session
    settings = settings or config
    session = viewer_session or load_session(
        settings, analytics=ConsoleAnalytics(settings.logging.log_analytics)
    )
    return session


def get_session() -> SwitcherSession:
    if session is None:
        return init_viewer()
    return session


def view_to_dict(current: SwitcherSession, view: ViewResult) -> dict:
    """Serialize a view, enriching visible entries with display fields."""
    templates = []
    for entry in view.visible_entries:
        item = current.catalog[entry.key]
        templates.append(
            {
                "key": item.key,
                "name": item.name,
                "category": item.category,
                "thumbnail": item.thumbnail,
                "score": entry.score,
                "favorited": current.favorites.is_favorited(item.key),
            }
        )
    return {
        "tab": view.tab,
        "templates": templates,
        "order": [entry.key for entry in view.entries],
        "visible_count": view.visible_count,
        "total_count": view.total_count,
        "count_label": view.count_label,
        "is_empty": view.is_empty,
        "empty_message": view.empty_message,
    }


# HTML Template with embedded CSS and JavaScript
HTML_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Template Switcher</title>
    <style>
        * { margin: 0; padding: 0; box-sizing: border-box; }
        body { font-family: -apple-system, BlinkMacSystemFont, sans-serif; background: #1a1a1a; color: #eee; display: flex; height: 100vh; }
        .switcher { width: 380px; display: flex; flex-direction: column; border-right: 1px solid #333; }
        .switcher input { margin: 12px; padding: 10px; border-radius: 8px; border: 1px solid #444; background: #222; color: #eee; }
        .tabs, .filters { display: flex; flex-wrap: wrap; gap: 6px; padding: 0 12px 8px; }
        .tabs button, .filters button { padding: 4px 10px; border-radius: 12px; border: 1px solid #444; background: transparent; color: #aaa; cursor: pointer; }
        .tabs button.active, .filters button.active { background: #3498db; color: white; border-color: #3498db; }
        .count { padding: 4px 12px; color: #888; font-size: 13px; }
        .products { flex: 1; overflow-y: auto; padding: 8px 12px; }
        .product { display: flex; justify-content: space-between; padding: 8px; border-radius: 6px; cursor: pointer; }
        .product:hover { background: #2a2a2a; }
        .product .badge { color: #888; font-size: 12px; }
        .favorite-btn { background: none; border: none; color: #666; cursor: pointer; }
        .favorite-btn.favorited { color: #e74c3c; }
        .no-results { color: #888; padding: 20px 0; }
        iframe { flex: 1; border: none; background: white; }
    </style>
</head>
<body>
    <div class="switcher">
        <input id="template-search" type="search" placeholder="Search templates..." autocomplete="off">
        <div class="tabs" id="tabs">
            <button data-tab="all" class="active">All</button>
            <button data-tab="favorites">Favorites</button>
            <button data-tab="popular">Popular</button>
        </div>
        <div class="filters" id="category-filters"></div>
        <div class="filters" id="color-filters"></div>
        <div class="count" id="template-count"></div>
        <div class="products" id="products"></div>
    </div>
    <iframe id="product-iframe"></iframe>
    <script>
        const state = { q: '', category: 'All', color: 'all', tab: 'all' };
        const el = id => document.getElementById(id);

        function escapeHtml(text) {
            const div = document.createElement('div');
            div.textContent = text == null ? '' : String(text);
            return div.innerHTML;
        }

        async function refresh() {
            const params = new URLSearchParams(state);
            const response = await fetch(`/api/templates?${params}`);
            const view = await response.json();
            el('template-count').textContent = view.count_label;
            el('products').innerHTML = view.is_empty
                ? `<div class="no-results">${escapeHtml(view.empty_message)}</div>`
                : view.templates.map(t => `
                    <div class="product" data-id="${escapeHtml(t.key)}">
                        <span>${escapeHtml(t.name)} <span class="badge">${escapeHtml(t.category)}</span></span>
                        <button class="favorite-btn ${t.favorited ? 'favorited' : ''}" data-template-id="${escapeHtml(t.key)}">&#9829;</button>
                    </div>`).join('');
        }

        async function loadFacets() {
            const facets = await (await fetch('/api/facets')).json();
            el('category-filters').innerHTML = facets.categories.map(([label, count]) =>
                `<button data-category="${escapeHtml(label)}" class="${label === state.category ? 'active' : ''}">${escapeHtml(label)} ${count}</button>`).join('');
            el('color-filters').innerHTML = facets.colors.map(([color, count]) =>
                `<button data-color="${escapeHtml(color)}" class="${color === state.color ? 'active' : ''}">${escapeHtml(color)} ${count}</button>`).join('');
        }

        async function selectTemplate(key) {
            const response = await fetch(`/api/templates/${encodeURIComponent(key)}`);
            if (!response.ok) return false;
            const frame = await response.json();
            el('product-iframe').src = frame.url;
            history.replaceState(null, '', `#${key}`);
            return true;
        }

        async function selectInitial() {
            const candidates = [
                location.hash.slice(1),
                new URLSearchParams(location.search).get('product'),
                '{{ initial_key }}',
            ];
            for (const key of candidates) {
                if (key && await selectTemplate(key)) return;
            }
        }

        let searchTimeout;
        el('template-search').addEventListener('input', e => {
            clearTimeout(searchTimeout);
            searchTimeout = setTimeout(() => { state.q = e.target.value; refresh(); }, {{ debounce_ms }});
        });

        function activate(containerId, attr, value) {
            el(containerId).querySelectorAll('button').forEach(b => b.classList.toggle('active', b.dataset[attr] === value));
        }

        el('tabs').addEventListener('click', e => {
            const btn = e.target.closest('button');
            if (!btn || btn.dataset.tab === state.tab) return;
            state.tab = btn.dataset.tab;
            activate('tabs', 'tab', state.tab);
            refresh();
        });
        el('category-filters').addEventListener('click', e => {
            const btn = e.target.closest('button');
            if (!btn) return;
            state.category = btn.dataset.category;
            activate('category-filters', 'category', state.category);
            refresh();
        });
        el('color-filters').addEventListener('click', e => {
            const btn = e.target.closest('button');
            if (!btn) return;
            state.color = btn.dataset.color;
            activate('color-filters', 'color', state.color);
            refresh();
        });
        el('products').addEventListener('click', async e => {
            const fav = e.target.closest('.favorite-btn');
            if (fav) {
                e.stopPropagation();
                await fetch(`/api/favorites/${encodeURIComponent(fav.dataset.templateId)}`, { method: 'POST' });
                refresh();
                return;
            }
            const product = e.target.closest('.product');
            if (product) selectTemplate(product.dataset.id);
        });

        loadFacets();
        refresh();
        selectInitial();
    </script>
</body>
</html>
"""


@app.route("/")
def index():
    """Serve the switcher page."""
    current = get_session()
    return render_template_string(
        HTML_TEMPLATE,
        debounce_ms=current.settings.search.debounce_ms,
        initial_key=current.resolve_initial_key(
            product_param=request.args.get("product")
        )
        or "",
    )


@app.route("/api/templates")
def api_templates():
    """Ranked templates for the given search text, facets and tab."""
    current = get_session()
    tab = request.args.get("tab", "all")
    try:
        validate_tab(tab)
    except ValueError as e:
        return jsonify({"error": str(e)}), 400

    state = FilterState(
        search_text=request.args.get("q", ""),
        active_category=request.args.get("category", "All"),
        active_color=request.args.get("color", "all"),
        active_tab=tab,
    )
    view = select_view(
        state,
        current.catalog,
        current.selector.tag_index,
        current.favorites,
        current.selector.popular,
    )
    return jsonify(view_to_dict(current, view))


@app.route("/api/templates/<key>")
def api_template(key):
    """Select a template for the viewer iframe."""
    current = get_session()
    if key not in current.catalog:
        abort(404)
    return jsonify(current.select(key).to_dict())


@app.route("/api/templates/<key>/purchase")
def api_purchase(key):
    """Purchase link for a template."""
    current = get_session()
    if key not in current.catalog:
        abort(404)
    return jsonify({"key": key, "url": current.purchase_url(key)})


@app.route("/api/facets")
def api_facets():
    """Category and color facets with counts."""
    current = get_session()
    search = current.settings.search
    return jsonify(
        {
            "categories": current.catalog.category_facets(
                search.max_category_facets, search.pinned_category
            ),
            "colors": current.catalog.color_facets(),
        }
    )


@app.route("/api/favorites")
def api_favorites():
    current = get_session()
    return jsonify({"favorites": current.favorites.get_all()})


@app.route("/api/favorites/<key>", methods=["POST"])
def api_toggle_favorite(key):
    """Toggle a favorite."""
    current = get_session()
    if key not in current.catalog:
        abort(404)
    with _favorites_lock:
        favorited = current.selector.toggle_favorite(key)
    return jsonify(
        {"key": key, "favorited": favorited, "count": current.favorites.count}
    )


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Template Switcher - Web Viewer")
    parser.add_argument(
        "--port",
        type=int,
        default=config.viewer.port,
        help=f"Port to run the server on (default: {config.viewer.port})",
    )
    return parser.parse_args()


if __name__ == "__main__":
    args = parse_args()

    # ANSI color codes for terminal styling
    BOLD = "\033[1m"
    DIM = "\033[2m"
    RESET = "\033[0m"
    CYAN = "\033[36m"
    RED = "\033[31m"
    UNDERLINE = "\033[4m"

    print()
    print(f"{BOLD}╔══════════════════════════════════════════════════════╗{RESET}")
    print(f"{BOLD}║                 TEMPLATE SWITCHER                    ║{RESET}")
    print(f"{BOLD}╚══════════════════════════════════════════════════════╝{RESET}")

    try:
        current = init_viewer()
    except (OSError, ValueError) as e:
        print(f"{RED}✗ Failed to load catalog: {e}{RESET}")
        raise SystemExit(1)

    print(f"\n{DIM}Catalog:{RESET}     {config.storage.catalog_path}")
    print(f"{DIM}Templates:{RESET}   {BOLD}{len(current.catalog)}{RESET} loaded")
    print(f"{DIM}Favorites:{RESET}   {current.favorites.count}")
    print()
    print(f"   🌐  {UNDERLINE}{CYAN}http://localhost:{args.port}{RESET}")
    print(f"{DIM}Press CTRL+C to stop the server{RESET}")
    print()

    app.run(debug=config.viewer.debug, port=args.port)
