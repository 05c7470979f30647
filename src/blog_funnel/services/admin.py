from __future__ import annotations

import logging
import uuid
from collections.abc import Iterable
from typing import Any

from sqlalchemy import desc, select, update
from sqlalchemy.orm import Session

from blog_funnel.db.models import (
    Blog,
    BlogStatus,
    Category,
    PreLandingConfig,
    RelatedSearch,
    WebResult,
)
from blog_funnel.errors import FunnelError, NotFoundError, PersistenceError
from blog_funnel.services.funnel import blog_path, list_categories
from blog_funnel.services.wizard import slugify

logger = logging.getLogger(__name__)

BLOG_FIELDS = ("title", "slug", "category_id", "author", "content", "featured_image", "status")
SEARCH_FIELDS = ("blog_id", "search_text", "order_index", "wr")
WEB_RESULT_FIELDS = (
    "related_search_id",
    "title",
    "url",
    "description",
    "logo_url",
    "order_index",
    "is_sponsored",
)
PRE_LANDING_FIELDS = (
    "related_search_id",
    "logo_url",
    "logo_position",
    "main_image_url",
    "headline",
    "description",
    "background_color",
    "background_image_url",
    "button_text",
    "destination_url",
)


def _clean(data: dict[str, Any], fields: Iterable[str]) -> dict[str, Any]:
    cleaned: dict[str, Any] = {}
    for key in fields:
        if key not in data:
            continue
        value = data[key]
        if isinstance(value, str):
            value = value.strip() or None
        cleaned[key] = value
    return cleaned


def _save(session: Session, row: Any, label: str) -> Any:
    try:
        session.add(row)
        session.commit()
    except Exception as exc:  # noqa: BLE001
        session.rollback()
        raise PersistenceError(label, exc) from exc
    session.refresh(row)
    return row


def _get(session: Session, model: type, row_id: Any, label: str) -> Any:
    row = session.get(model, row_id)
    if row is None:
        raise NotFoundError(f"{label} {row_id} not found")
    return row


def _delete(session: Session, model: type, row_id: Any, label: str) -> None:
    row = _get(session, model, row_id, label)
    try:
        session.delete(row)
        session.commit()
    except Exception as exc:  # noqa: BLE001
        session.rollback()
        raise PersistenceError(label, exc) from exc


# categories


def save_category(session: Session, data: dict[str, Any], category_id: int | None = None) -> Category:
    values = _clean(data, ("name", "code_range"))
    if not values.get("name"):
        raise FunnelError("Category name is required")
    row = _get(session, Category, category_id, "category") if category_id else Category()
    for key, value in values.items():
        setattr(row, key, value)
    if row.code_range is None:
        row.code_range = ""
    return _save(session, row, "category")


def delete_category(session: Session, category_id: int) -> None:
    _delete(session, Category, category_id, "category")


# blogs


def list_blogs(session: Session) -> list[Blog]:
    return list(session.execute(select(Blog).order_by(desc(Blog.created_at))).scalars())


def save_blog(session: Session, data: dict[str, Any], blog_id: uuid.UUID | None = None) -> Blog:
    values = _clean(data, BLOG_FIELDS)
    row = _get(session, Blog, blog_id, "blog") if blog_id else Blog()
    for key, value in values.items():
        setattr(row, key, value)
    if not row.title or not row.author or not row.content:
        raise FunnelError("Title, author and content are required")
    if not row.slug:
        row.slug = slugify(row.title)
    if row.status is None:
        row.status = BlogStatus.published
    else:
        row.status = BlogStatus(row.status)
    return _save(session, row, "blog")


def set_blog_status(session: Session, blog_ids: Iterable[uuid.UUID], status: BlogStatus) -> int:
    ids = list(blog_ids)
    if not ids:
        return 0
    try:
        result = session.execute(
            update(Blog)
            .where(Blog.id.in_(ids))
            .values(status=BlogStatus(status))
            .execution_options(synchronize_session=False)
        )
        session.commit()
    except Exception as exc:  # noqa: BLE001
        session.rollback()
        raise PersistenceError("blog status", exc) from exc
    logger.info("Set %d blogs to %s", result.rowcount, status)
    return result.rowcount


def blog_links(session: Session, blog_ids: Iterable[uuid.UUID], base_url: str) -> list[str]:
    ids = list(blog_ids)
    if not ids:
        return []
    rows = session.execute(
        select(Blog.slug, Category.name)
        .outerjoin(Category, Category.id == Blog.category_id)
        .where(Blog.id.in_(ids))
    ).all()
    base = base_url.rstrip("/")
    return [f"{base}{blog_path(name, slug)}" for slug, name in rows]


# related searches


def list_related_searches(session: Session) -> list[tuple[RelatedSearch, str | None]]:
    rows = session.execute(
        select(RelatedSearch, Blog.title)
        .outerjoin(Blog, Blog.id == RelatedSearch.blog_id)
        .order_by(RelatedSearch.blog_id, RelatedSearch.order_index)
    ).all()
    return [(search, title) for search, title in rows]


def save_related_search(
    session: Session, data: dict[str, Any], search_id: uuid.UUID | None = None
) -> RelatedSearch:
    values = _clean(data, SEARCH_FIELDS)
    row = _get(session, RelatedSearch, search_id, "related search") if search_id else RelatedSearch()
    for key, value in values.items():
        setattr(row, key, value)
    if not row.search_text:
        raise FunnelError("Search text is required")
    if row.wr is not None and not 1 <= int(row.wr) <= 4:
        logger.warning("Related search %r saved with WR-%s outside 1..4", row.search_text, row.wr)
    return _save(session, row, "related search")


# web results


def list_web_results(session: Session, search_id: uuid.UUID | None = None) -> list[WebResult]:
    stmt = select(WebResult).order_by(WebResult.related_search_id, WebResult.order_index)
    if search_id:
        stmt = stmt.where(WebResult.related_search_id == search_id)
    return list(session.execute(stmt).scalars())


def save_web_result(
    session: Session, data: dict[str, Any], result_id: uuid.UUID | None = None
) -> WebResult:
    values = _clean(data, WEB_RESULT_FIELDS)
    row = _get(session, WebResult, result_id, "web result") if result_id else WebResult()
    for key, value in values.items():
        setattr(row, key, value)
    if not row.title or not row.url:
        raise FunnelError("Title and URL are required")
    row.is_sponsored = bool(row.is_sponsored)
    return _save(session, row, "web result")


def set_sponsored(session: Session, result_ids: Iterable[uuid.UUID], sponsored: bool) -> int:
    ids = list(result_ids)
    if not ids:
        return 0
    try:
        result = session.execute(
            update(WebResult)
            .where(WebResult.id.in_(ids))
            .values(is_sponsored=bool(sponsored))
            .execution_options(synchronize_session=False)
        )
        session.commit()
    except Exception as exc:  # noqa: BLE001
        session.rollback()
        raise PersistenceError("web result sponsorship", exc) from exc
    logger.info("Marked %d web results sponsored=%s", result.rowcount, bool(sponsored))
    return result.rowcount


def web_result_urls(session: Session, result_ids: Iterable[uuid.UUID]) -> list[str]:
    ids = list(result_ids)
    if not ids:
        return []
    return list(
        session.execute(
            select(WebResult.url)
            .where(WebResult.id.in_(ids))
            .order_by(WebResult.related_search_id, WebResult.order_index)
        ).scalars()
    )


def delete_web_result(session: Session, result_id: uuid.UUID) -> None:
    _delete(session, WebResult, result_id, "web result")


def delete_web_results(session: Session, result_ids: Iterable[uuid.UUID]) -> int:
    deleted = 0
    for result_id in result_ids:
        try:
            delete_web_result(session, result_id)
            deleted += 1
        except Exception:  # noqa: BLE001
            logger.exception("Failed to delete web result %s", result_id)
    return deleted


# pre-landing


def list_pre_landing(session: Session) -> list[tuple[PreLandingConfig, str | None]]:
    rows = session.execute(
        select(PreLandingConfig, RelatedSearch.search_text).outerjoin(
            RelatedSearch, RelatedSearch.id == PreLandingConfig.related_search_id
        )
    ).all()
    return [(config, text) for config, text in rows]


def save_pre_landing(
    session: Session, data: dict[str, Any], config_id: uuid.UUID | None = None
) -> PreLandingConfig:
    values = _clean(data, PRE_LANDING_FIELDS)
    row = _get(session, PreLandingConfig, config_id, "pre-landing") if config_id else PreLandingConfig()
    for key, value in values.items():
        setattr(row, key, value)
    if not row.related_search_id:
        raise FunnelError("A related search is required")
    row.logo_position = row.logo_position or "top-center"
    row.background_color = row.background_color or "#ffffff"
    row.button_text = row.button_text or "Visit Now"
    return _save(session, row, "pre-landing")


def delete_pre_landing(session: Session, config_id: uuid.UUID) -> None:
    _delete(session, PreLandingConfig, config_id, "pre-landing")
