from __future__ import annotations

from datetime import timedelta

from blog_funnel.db.models import AnalyticsEvent, EmailSubmission, EventType
from blog_funnel.services import analytics_service
from conftest import BASE_TIME, add_blog, add_search


def _event(event_type, session_id, minutes, **kwargs) -> AnalyticsEvent:
    return AnalyticsEvent(
        event_type=event_type,
        session_id=session_id,
        created_at=BASE_TIME + timedelta(minutes=minutes),
        **kwargs,
    )


def test_session_summaries_count_per_type(db_session) -> None:
    db_session.add_all(
        [
            _event(EventType.page_view, "a", 1, country="Portugal", device_type="mobile", ip_address="1.1.1.1"),
            _event(EventType.page_view, "a", 2, country="Portugal", device_type="mobile", ip_address="1.1.1.1"),
            _event(EventType.blog_click, "a", 3),
            _event(EventType.related_search_click, "b", 4, source="newsletter"),
        ]
    )
    db_session.commit()

    summaries = {s.session_id: s for s in analytics_service.session_summaries(db_session)}

    assert (summaries["a"].page_views, summaries["a"].blog_clicks, summaries["a"].related_searches) == (2, 1, 0)
    assert summaries["b"].related_searches == 1
    assert summaries["b"].source == "newsletter"
    assert list(summaries) == ["b", "a"]


def test_click_breakdowns_count_unique_sessions(db_session, category) -> None:
    blog = add_blog(db_session, "Post", category)
    search = add_search(db_session, blog, "remote jobs", 1)
    db_session.add_all(
        [
            _event(EventType.blog_click, "a", 1, blog_id=blog.id),
            _event(EventType.blog_click, "a", 2, blog_id=blog.id),
            _event(EventType.blog_click, "b", 3, blog_id=blog.id),
            _event(EventType.related_search_click, "a", 4, related_search_id=search.id),
        ]
    )
    db_session.commit()

    [blog_row] = analytics_service.blog_click_breakdown(db_session)
    assert (blog_row.label, blog_row.total_clicks, blog_row.unique_clicks) == ("Post", 3, 2)

    [search_row] = analytics_service.related_search_breakdown(db_session)
    assert (search_row.label, search_row.parent_label) == ("remote jobs", "Post")
    assert (search_row.total_clicks, search_row.unique_clicks) == (1, 1)


def test_email_submissions_join_search_text(db_session, category) -> None:
    blog = add_blog(db_session, "Post", category)
    search = add_search(db_session, blog, "remote jobs", 1)
    db_session.add(EmailSubmission(email="reader@example.com", related_search_id=search.id, session_id="a"))
    db_session.commit()

    [(row, text)] = analytics_service.email_submissions(db_session)

    assert row.email == "reader@example.com"
    assert text == "remote jobs"
