from __future__ import annotations

import pytest
from sqlalchemy import func, select

from blog_funnel.db.models import (
    AnalyticsEvent,
    Blog,
    EmailSubmission,
    EventType,
    PreLandingConfig,
    RelatedSearch,
    WebResult,
)
from blog_funnel.errors import NotFoundError
from blog_funnel.services import cascade
from conftest import add_blog, add_full_search, random_id


def _count(session, model, *criteria) -> int:
    return session.execute(select(func.count()).select_from(model).where(*criteria)).scalar_one()


def test_delete_blog_removes_every_descendant(db_session, category) -> None:
    blog = add_blog(db_session, "Doomed Post", category)
    searches = [add_full_search(db_session, blog, f"search {wr}", wr) for wr in (1, 2)]
    db_session.add(AnalyticsEvent(event_type=EventType.blog_click, blog_id=blog.id, session_id="s"))
    keep = add_blog(db_session, "Kept Post", category)
    kept_search = add_full_search(db_session, keep, "kept", 1)
    db_session.commit()
    blog_id = blog.id
    search_ids = [s.id for s in searches]
    kept_search_id = kept_search.id

    cascade.delete_blog(db_session, blog_id)

    assert db_session.get(Blog, blog_id) is None
    assert _count(db_session, RelatedSearch, RelatedSearch.blog_id == blog_id) == 0
    for model in (WebResult, PreLandingConfig, EmailSubmission, AnalyticsEvent):
        assert _count(db_session, model, model.related_search_id.in_(search_ids)) == 0
    assert _count(db_session, AnalyticsEvent, AnalyticsEvent.blog_id == blog_id) == 0

    assert _count(db_session, WebResult, WebResult.related_search_id == kept_search_id) == 1
    assert _count(db_session, EmailSubmission, EmailSubmission.related_search_id == kept_search_id) == 1


def test_delete_related_search_keeps_blog(db_session, category) -> None:
    blog = add_blog(db_session, "Post", category)
    doomed = add_full_search(db_session, blog, "doomed", 1)
    sibling = add_full_search(db_session, blog, "sibling", 2)
    blog_id, doomed_id, sibling_id = blog.id, doomed.id, sibling.id

    cascade.delete_related_search(db_session, doomed_id)

    assert db_session.get(Blog, blog_id) is not None
    assert db_session.get(RelatedSearch, doomed_id) is None
    for model in (WebResult, PreLandingConfig, EmailSubmission, AnalyticsEvent):
        assert _count(db_session, model, model.related_search_id == doomed_id) == 0
        assert _count(db_session, model, model.related_search_id == sibling_id) >= 1


def test_delete_missing_blog_raises(db_session) -> None:
    with pytest.raises(NotFoundError):
        cascade.delete_blog(db_session, random_id())


def test_bulk_delete_continues_past_failures(db_session, category) -> None:
    first = add_blog(db_session, "First", category)
    second = add_blog(db_session, "Second", category)
    first_id, second_id, missing = first.id, second.id, random_id()

    result = cascade.delete_blogs(db_session, [first_id, missing, second_id])

    assert result.succeeded == [first_id, second_id]
    assert list(result.failed) == [missing]
    assert _count(db_session, Blog) == 0


def test_bulk_delete_related_searches(db_session, category) -> None:
    blog = add_blog(db_session, "Post", category)
    searches = [add_full_search(db_session, blog, f"s{wr}", wr) for wr in (1, 2, 3)]

    result = cascade.delete_related_searches(db_session, [s.id for s in searches[:2]])

    assert len(result.succeeded) == 2
    assert result.failed == {}
    assert _count(db_session, RelatedSearch) == 1
