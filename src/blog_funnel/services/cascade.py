from __future__ import annotations

import logging
import uuid
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from blog_funnel.db.models import (
    AnalyticsEvent,
    Blog,
    EmailSubmission,
    PreLandingConfig,
    RelatedSearch,
    WebResult,
)
from blog_funnel.errors import NotFoundError

logger = logging.getLogger(__name__)

# leaves first; email_submissions has no database-level cascade
_SEARCH_CHILDREN = (EmailSubmission, AnalyticsEvent, PreLandingConfig, WebResult)


@dataclass
class BulkResult:
    succeeded: list[uuid.UUID] = field(default_factory=list)
    failed: dict[uuid.UUID, str] = field(default_factory=dict)


def _delete_search_children(session: Session, search_ids: list[uuid.UUID]) -> None:
    if not search_ids:
        return
    for model in _SEARCH_CHILDREN:
        session.execute(
            delete(model)
            .where(model.related_search_id.in_(search_ids))
            .execution_options(synchronize_session=False)
        )


def delete_related_search(session: Session, search_id: uuid.UUID) -> None:
    try:
        if session.get(RelatedSearch, search_id) is None:
            raise NotFoundError(f"Related search {search_id} not found")
        _delete_search_children(session, [search_id])
        session.execute(
            delete(RelatedSearch)
            .where(RelatedSearch.id == search_id)
            .execution_options(synchronize_session=False)
        )
        session.commit()
    except Exception:
        session.rollback()
        raise
    logger.info("Deleted related search %s", search_id)


def delete_blog(session: Session, blog_id: uuid.UUID) -> None:
    try:
        if session.get(Blog, blog_id) is None:
            raise NotFoundError(f"Blog {blog_id} not found")
        search_ids = list(
            session.execute(
                select(RelatedSearch.id).where(RelatedSearch.blog_id == blog_id)
            ).scalars()
        )
        _delete_search_children(session, search_ids)
        session.execute(
            delete(AnalyticsEvent)
            .where(AnalyticsEvent.blog_id == blog_id)
            .execution_options(synchronize_session=False)
        )
        session.execute(
            delete(RelatedSearch)
            .where(RelatedSearch.blog_id == blog_id)
            .execution_options(synchronize_session=False)
        )
        session.execute(
            delete(Blog).where(Blog.id == blog_id).execution_options(synchronize_session=False)
        )
        session.commit()
    except Exception:
        session.rollback()
        raise
    logger.info("Deleted blog %s with %d related searches", blog_id, len(search_ids))


def _bulk(
    session: Session,
    ids: Iterable[uuid.UUID],
    action: Callable[[Session, uuid.UUID], None],
    label: str,
) -> BulkResult:
    result = BulkResult()
    for item_id in ids:
        try:
            action(session, item_id)
        except Exception as exc:  # noqa: BLE001
            logger.exception("Failed to delete %s %s", label, item_id)
            result.failed[item_id] = str(exc)
        else:
            result.succeeded.append(item_id)
    return result


def delete_blogs(session: Session, blog_ids: Iterable[uuid.UUID]) -> BulkResult:
    return _bulk(session, blog_ids, delete_blog, "blog")


def delete_related_searches(session: Session, search_ids: Iterable[uuid.UUID]) -> BulkResult:
    return _bulk(session, search_ids, delete_related_search, "related search")
