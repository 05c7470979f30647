from __future__ import annotations

import re
import uuid
from dataclasses import dataclass, field

from sqlalchemy import ColumnElement, desc, select
from sqlalchemy.orm import Session

from blog_funnel.db.models import (
    Blog,
    BlogStatus,
    Category,
    PreLandingConfig,
    RelatedSearch,
    WebResult,
)
from blog_funnel.errors import FunnelError, NotFoundError
from blog_funnel.services.ordering import sort_web_results
from blog_funnel.services.routing import VisitAction, resolve_redirect, resolve_visit
from blog_funnel.services.tracking import EventTracker, SessionContext

RECENT_POSTS = 4

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def category_slug(name: str | None) -> str:
    if not name:
        return "uncategorized"
    return re.sub(r"\s+", "-", name.strip().lower())


def blog_path(category_name: str | None, slug: str) -> str:
    return f"/blog/{category_slug(category_name)}/{slug}"


@dataclass
class FeedItem:
    blog: Blog
    category_name: str | None

    @property
    def path(self) -> str:
        return blog_path(self.category_name, self.blog.slug)


@dataclass
class BlogPage:
    blog: Blog
    category_name: str | None
    related_searches: list[RelatedSearch] = field(default_factory=list)


@dataclass
class ResultsPage:
    search: RelatedSearch
    blog_title: str | None
    blog_slug: str | None
    category_name: str | None
    results: list[WebResult] = field(default_factory=list)
    pre_landing: PreLandingConfig | None = None

    @property
    def back_path(self) -> str | None:
        if not self.blog_slug:
            return None
        return blog_path(self.category_name, self.blog_slug)


def _published_feed(session: Session, *criteria, limit: int | None = None) -> list[FeedItem]:
    stmt = (
        select(Blog, Category.name)
        .outerjoin(Category, Category.id == Blog.category_id)
        .where(Blog.status == BlogStatus.published, *criteria)
        .order_by(desc(Blog.published_at))
    )
    if limit:
        stmt = stmt.limit(limit)
    return [FeedItem(blog=blog, category_name=name) for blog, name in session.execute(stmt).all()]


def list_categories(session: Session) -> list[Category]:
    return list(session.execute(select(Category).order_by(Category.id)).scalars())


def home_feed(session: Session) -> list[FeedItem]:
    return _published_feed(session)


def recent_posts(session: Session, limit: int = RECENT_POSTS) -> list[FeedItem]:
    return _published_feed(session, limit=limit)


def category_name_is(name: str) -> ColumnElement[bool]:
    """Case-insensitive exact match on ``Category.name``; ``%`` and ``_`` are literal."""
    escaped = name.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return Category.name.ilike(escaped, escape="\\")


def find_category(session: Session, slug: str) -> Category:
    name = " ".join(part for part in slug.split("-") if part)
    category = session.execute(
        select(Category).where(category_name_is(name)).limit(1)
    ).scalar_one_or_none()
    if category is None:
        raise NotFoundError(f"Category {slug!r} not found")
    return category


def category_feed(session: Session, slug: str) -> tuple[Category, list[FeedItem]]:
    category = find_category(session, slug)
    return category, _published_feed(session, Blog.category_id == category.id)


def blog_page(session: Session, slug: str) -> BlogPage:
    row = session.execute(
        select(Blog, Category.name)
        .outerjoin(Category, Category.id == Blog.category_id)
        .where(Blog.slug == slug, Blog.status == BlogStatus.published)
    ).one_or_none()
    if row is None:
        raise NotFoundError(f"Blog {slug!r} not found")
    blog, category_name = row
    searches = list(
        session.execute(
            select(RelatedSearch)
            .where(RelatedSearch.blog_id == blog.id)
            .order_by(RelatedSearch.order_index.asc())
        ).scalars()
    )
    return BlogPage(blog=blog, category_name=category_name, related_searches=searches)


def pre_landing_for(session: Session, search_id: uuid.UUID) -> PreLandingConfig | None:
    return session.execute(
        select(PreLandingConfig).where(PreLandingConfig.related_search_id == search_id).limit(1)
    ).scalar_one_or_none()


def results_page(session: Session, search_id: uuid.UUID) -> ResultsPage:
    row = session.execute(
        select(RelatedSearch, Blog.title, Blog.slug, Category.name)
        .outerjoin(Blog, Blog.id == RelatedSearch.blog_id)
        .outerjoin(Category, Category.id == Blog.category_id)
        .where(RelatedSearch.id == search_id)
    ).one_or_none()
    if row is None:
        raise NotFoundError(f"Related search {search_id} not found")
    search, blog_title, blog_slug, category_name = row
    results = session.execute(
        select(WebResult)
        .where(WebResult.related_search_id == search_id)
        .order_by(WebResult.order_index.asc())
    ).scalars()
    return ResultsPage(
        search=search,
        blog_title=blog_title,
        blog_slug=blog_slug,
        category_name=category_name,
        results=sort_web_results(results),
        pre_landing=pre_landing_for(session, search_id),
    )


def visit(
    session: Session,
    web_result_id: uuid.UUID,
    tracker: EventTracker | None = None,
    context: SessionContext | None = None,
) -> VisitAction:
    result = session.get(WebResult, web_result_id)
    if result is None:
        raise NotFoundError(f"Web result {web_result_id} not found")
    if tracker is not None and context is not None and result.related_search_id:
        tracker.visit_now_click(context, result.related_search_id)
    config = pre_landing_for(session, result.related_search_id) if result.related_search_id else None
    return resolve_visit(result, config)


def submit_email(
    session: Session,
    tracker: EventTracker,
    search_id: uuid.UUID,
    email: str,
    context: SessionContext,
    override_url: str | None = None,
) -> str | None:
    """Capture the reader's email and return where to send them next, if anywhere."""
    email = (email or "").strip()
    if not _EMAIL_RE.match(email):
        raise FunnelError("Please enter a valid email address")
    tracker.email_submission(email, context, related_search_id=search_id)
    return resolve_redirect(pre_landing_for(session, search_id), override_url)
