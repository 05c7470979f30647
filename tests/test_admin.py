from __future__ import annotations

import pytest

from blog_funnel.db.models import BlogStatus, PreLandingConfig, WebResult
from blog_funnel.errors import FunnelError, PersistenceError
from blog_funnel.services import admin
from conftest import add_blog, add_result, add_search, random_id


def test_save_blog_defaults_slug_and_status(db_session, category) -> None:
    blog = admin.save_blog(
        db_session,
        {"title": " Remote Work 101 ", "author": "Editor", "content": "Body", "category_id": category.id},
    )

    assert blog.title == "Remote Work 101"
    assert blog.slug == "remote-work-101"
    assert blog.status == BlogStatus.published


def test_save_blog_requires_fields(db_session) -> None:
    with pytest.raises(FunnelError):
        admin.save_blog(db_session, {"title": "No body", "author": "Editor", "content": "  "})


def test_duplicate_slug_is_a_persistence_error(db_session, category) -> None:
    add_blog(db_session, "Same", category)

    with pytest.raises(PersistenceError):
        admin.save_blog(db_session, {"title": "Same", "author": "A", "content": "B", "slug": "same"})


def test_set_blog_status_in_bulk(db_session, category) -> None:
    blogs = [add_blog(db_session, f"Post {i}", category) for i in range(3)]

    changed = admin.set_blog_status(db_session, [b.id for b in blogs[:2]], BlogStatus.draft)

    assert changed == 2
    statuses = {b.title: b.status for b in admin.list_blogs(db_session)}
    assert statuses == {"Post 0": BlogStatus.draft, "Post 1": BlogStatus.draft, "Post 2": BlogStatus.published}


def test_blog_links(db_session, category) -> None:
    blog = add_blog(db_session, "Post", category)

    links = admin.blog_links(db_session, [blog.id], "https://site.example/")

    assert links == ["https://site.example/blog/job-seeking/post"]


def test_save_related_search_outside_wr_range_logs(db_session, category, caplog) -> None:
    blog = add_blog(db_session, "Post", category)

    search = admin.save_related_search(db_session, {"blog_id": blog.id, "search_text": "jobs", "wr": 7})

    assert search.wr == 7
    assert "outside 1..4" in caplog.text


def test_web_result_crud(db_session, category) -> None:
    blog = add_blog(db_session, "Post", category)
    search = add_search(db_session, blog, "jobs", 1)

    created = admin.save_web_result(
        db_session,
        {"related_search_id": search.id, "title": "Acme", "url": "https://acme.example", "is_sponsored": 1},
    )
    assert created.is_sponsored is True

    admin.save_web_result(db_session, {"title": "Acme Careers"}, result_id=created.id)
    assert [r.title for r in admin.list_web_results(db_session, search.id)] == ["Acme Careers"]

    other = add_result(db_session, search, "Other", 1)
    deleted = admin.delete_web_results(db_session, [created.id, random_id(), other.id])
    assert deleted == 2
    assert db_session.query(WebResult).count() == 0


def test_pre_landing_defaults(db_session, category) -> None:
    blog = add_blog(db_session, "Post", category)
    search = add_search(db_session, blog, "jobs", 1)

    config = admin.save_pre_landing(db_session, {"related_search_id": search.id, "headline": "Hi"})

    assert config.button_text == "Visit Now"
    assert config.background_color == "#ffffff"
    assert config.logo_position == "top-center"
    [(row, text)] = admin.list_pre_landing(db_session)
    assert text == "jobs"

    admin.delete_pre_landing(db_session, config.id)
    assert db_session.query(PreLandingConfig).count() == 0


def test_category_crud(db_session) -> None:
    row = admin.save_category(db_session, {"name": "Deals", "code_range": "401-500"})
    assert [c.name for c in admin.list_categories(db_session)] == ["Deals"]

    admin.delete_category(db_session, row.id)
    assert admin.list_categories(db_session) == []


def test_bulk_sponsorship_and_url_copy(db_session, category) -> None:
    blog = add_blog(db_session, "Post", category)
    search = add_search(db_session, blog, "jobs", 1)
    results = [add_result(db_session, search, f"Result {i}", i) for i in range(3)]
    picked = [results[2].id, results[0].id]

    assert admin.set_sponsored(db_session, picked, True) == 2
    flags = {r.title: r.is_sponsored for r in admin.list_web_results(db_session, search.id)}
    assert flags == {"Result 0": True, "Result 1": False, "Result 2": True}

    assert admin.set_sponsored(db_session, [results[0].id], False) == 1
    assert admin.set_sponsored(db_session, [], True) == 0
    assert [r.is_sponsored for r in admin.list_web_results(db_session, search.id)] == [False, False, True]

    assert admin.web_result_urls(db_session, picked) == ["https://result0.example", "https://result2.example"]
