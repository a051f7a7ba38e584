"""
Tests for the switcher session and debounced search input.
"""

import pytest

from config.settings import SwitcherConfig
from switcher.debounce import SearchDebouncer
from switcher.session import SwitcherSession


class FakeClock:
    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now

    def advance(self, ms):
        self.now += ms / 1000.0


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def session(selector, clock):
    return SwitcherSession(
        selector, debouncer=SearchDebouncer(150, clock), settings=SwitcherConfig()
    )


class TestSearchDebouncer:
    def test_waits_for_quiet_period(self, clock):
        debouncer = SearchDebouncer(150, clock)
        debouncer.submit("sh")
        assert debouncer.poll() is None
        clock.advance(140)
        assert debouncer.poll() is None
        clock.advance(20)
        assert debouncer.poll() == "sh"
        assert debouncer.poll() is None

    def test_new_input_supersedes_pending(self, clock):
        debouncer = SearchDebouncer(150, clock)
        first = debouncer.submit("s")
        clock.advance(100)
        second = debouncer.submit("sho")
        assert not debouncer.is_current(first)
        assert debouncer.is_current(second)

        # the first deadline passes without firing
        clock.advance(100)
        assert debouncer.poll() is None
        clock.advance(60)
        assert debouncer.poll() == "sho"

    def test_flush_and_cancel(self, clock):
        debouncer = SearchDebouncer(150, clock)
        debouncer.submit("shop")
        assert debouncer.flush() == "shop"
        assert not debouncer.pending

        debouncer.submit("store")
        debouncer.cancel()
        clock.advance(500)
        assert debouncer.poll() is None


class TestSwitcherSession:
    def test_resolve_initial_key(self, session):
        assert session.resolve_initial_key("#dento") == "dento"
        assert session.resolve_initial_key("nope", "docmed") == "docmed"
        assert session.resolve_initial_key("dento", "docmed") == "dento"
        assert session.resolve_initial_key("nope", "nope") == "cozastore"
        assert session.resolve_initial_key() == "cozastore"

    def test_select_returns_frame_and_tracks_view(self, session, recorder):
        frame = session.select("coffeeblend")
        assert frame.key == "coffeeblend"
        assert frame.url == "https://example.com/preview/coffeeblend/"
        assert frame.viewport_enabled is False
        assert frame.favorited is False
        assert session.current_key == "coffeeblend"
        assert recorder.events == [
            (
                "template_view",
                {
                    "template_id": "coffeeblend",
                    "template_name": "Coffee Blend",
                    "template_category": "Restaurant",
                },
            )
        ]

    def test_select_unknown_raises(self, session):
        with pytest.raises(KeyError):
            session.select("missing")

    def test_open_preselects_current_category(self, session):
        session.select("dento")
        view = session.open_switcher()
        assert session.is_open
        assert session.selector.state.active_category == "medical"
        assert view.visible_keys == ["dento", "docmed"]

    def test_close_resets_filters_silently(self, session, recorder):
        session.select("dento")
        session.open_switcher()
        session.selector.set_tab("popular")
        session.type_search("shop")
        recorder.events.clear()

        view = session.close_switcher()
        assert not session.is_open
        assert session.selector.state.active_tab == "all"
        assert session.selector.state.active_category == "All"
        assert not session.debouncer.pending
        assert view.count_label == "7 templates available"
        assert recorder.events == []

    def test_debounced_search(self, session, clock):
        session.type_search("s")
        session.type_search("sh")
        session.type_search("shop")
        assert session.poll_search() is None
        clock.advance(200)
        view = session.poll_search()
        assert view.visible_keys == ["cozastore"]
        assert session.selector.state.search_text == "shop"

    def test_toggle_current_favorite(self, session):
        assert session.toggle_current_favorite() is None
        session.select("homeland")
        assert session.toggle_current_favorite() is True
        assert session.frame("homeland").favorited is True

    def test_purchase_url(self, session, recorder):
        assert session.purchase_url() is None
        session.select("dento")
        recorder.events.clear()
        assert session.purchase_url() == "https://colorlib.com/wp/template/dento/#pricing"
        assert recorder.names() == ["purchase_click"]

    def test_purchase_url_for_explicit_key(self, session, recorder):
        url = session.purchase_url("homeland")
        assert url == "https://colorlib.com/wp/template/homeland/#pricing"
        assert session.current_key is None
        assert recorder.names() == ["purchase_click"]
        assert session.purchase_url("missing") is None


class TestAnalyticsFailures:
    def test_failing_sink_does_not_break_core(self, catalog):
        from switcher.views import ViewSelector

        def broken_sink(name, params):
            raise RuntimeError("offline")

        selector = ViewSelector(catalog, analytics=broken_sink)
        assert selector.set_tab("favorites").is_empty
        assert selector.toggle_favorite("dento") is True
        assert selector.view.visible_keys == ["dento"]
