from __future__ import annotations

import re

import httpx
from sqlalchemy import select

from blog_funnel.db.models import AnalyticsEvent, EventType
from blog_funnel.providers.geo import GeoLookup
from blog_funnel.services.tracking import EventTracker, SessionContext, device_type, new_session_id

IPHONE = "Mozilla/5.0 (iPhone; CPU iPhone OS 17_0 like Mac OS X) Mobile/15E148"
IPAD = "Mozilla/5.0 (iPad; CPU OS 17_0 like Mac OS X) Mobile/15E148"
ANDROID_TABLET = "Mozilla/5.0 (Linux; Android 14; SM-X710) Safari/537.36"
DESKTOP = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) Chrome/126.0 Safari/537.36"


def test_device_type() -> None:
    assert device_type(IPHONE) == "mobile"
    assert device_type(IPAD) == "tablet"
    assert device_type(ANDROID_TABLET) == "tablet"
    assert device_type(DESKTOP) == "desktop"
    assert device_type(None) == "desktop"


def test_session_id_format() -> None:
    assert re.fullmatch(r"session_\d+_[0-9a-z]{9}", new_session_id())


def _geo(settings, handler) -> GeoLookup:
    return GeoLookup(settings, transport=httpx.MockTransport(handler))


def test_geo_resolved_once_per_session(db_session, settings) -> None:
    calls: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request.url.host)
        if request.url.host == "ip.test":
            return httpx.Response(200, json={"ip": "203.0.113.7"})
        return httpx.Response(200, json={"country_name": "Portugal"})

    tracker = EventTracker(db_session, _geo(settings, handler))
    context = SessionContext.start(user_agent=IPHONE, source="newsletter")

    assert tracker.page_view(context)
    assert tracker.related_search_click(context, related_search_id=None)

    events = db_session.execute(select(AnalyticsEvent)).scalars().all()
    assert [e.event_type for e in events] == [EventType.page_view, EventType.related_search_click]
    assert {(e.ip_address, e.country, e.device_type, e.source) for e in events} == {
        ("203.0.113.7", "Portugal", "mobile", "newsletter")
    }
    assert calls == ["ip.test", "geo.test"]


def test_geo_failure_falls_back_to_unknown(db_session, settings) -> None:
    tracker = EventTracker(db_session, _geo(settings, lambda request: httpx.Response(503)))
    context = SessionContext.start(user_agent=DESKTOP)

    assert tracker.page_view(context)

    event = db_session.execute(select(AnalyticsEvent)).scalar_one()
    assert event.ip_address == "unknown"
    assert event.country == "unknown"
    assert event.source == "direct"


def test_tracking_failure_is_swallowed(db_session) -> None:
    tracker = EventTracker(db_session)
    context = SessionContext.start()

    assert tracker.track("not-an-event", context) is False
    assert tracker.track(EventType.page_view, context) is True
    assert len(db_session.execute(select(AnalyticsEvent)).scalars().all()) == 1
