from __future__ import annotations

import uuid
from dataclasses import dataclass, field

from sqlalchemy import desc, select
from sqlalchemy.orm import Session

from blog_funnel.db.models import AnalyticsEvent, Blog, EmailSubmission, EventType, RelatedSearch


@dataclass
class SessionSummary:
    session_id: str
    ip_address: str
    country: str
    source: str
    device_type: str
    page_views: int = 0
    related_searches: int = 0
    blog_clicks: int = 0


@dataclass
class ClickBreakdown:
    key: uuid.UUID
    label: str
    parent_label: str | None = None
    total_clicks: int = 0
    sessions: set[str] = field(default_factory=set)

    @property
    def unique_clicks(self) -> int:
        return len(self.sessions)


def session_summaries(session: Session) -> list[SessionSummary]:
    """One row per reader session, newest activity first."""
    events = session.execute(
        select(AnalyticsEvent).order_by(desc(AnalyticsEvent.created_at))
    ).scalars()
    summaries: dict[str, SessionSummary] = {}
    for event in events:
        key = event.session_id or "unknown"
        summary = summaries.get(key)
        if summary is None:
            summary = summaries[key] = SessionSummary(
                session_id=key,
                ip_address=event.ip_address or "unknown",
                country=event.country or "unknown",
                source=event.source or "direct",
                device_type=event.device_type or "unknown",
            )
        if event.event_type == EventType.page_view:
            summary.page_views += 1
        elif event.event_type == EventType.related_search_click:
            summary.related_searches += 1
        elif event.event_type == EventType.blog_click:
            summary.blog_clicks += 1
    return list(summaries.values())


def blog_click_breakdown(session: Session) -> list[ClickBreakdown]:
    rows = session.execute(
        select(AnalyticsEvent.blog_id, AnalyticsEvent.session_id, Blog.title)
        .outerjoin(Blog, Blog.id == AnalyticsEvent.blog_id)
        .where(
            AnalyticsEvent.event_type == EventType.blog_click,
            AnalyticsEvent.blog_id.is_not(None),
        )
    ).all()
    breakdown: dict[uuid.UUID, ClickBreakdown] = {}
    for blog_id, session_id, title in rows:
        item = breakdown.setdefault(blog_id, ClickBreakdown(key=blog_id, label=title or "Unknown"))
        item.total_clicks += 1
        item.sessions.add(session_id or "unknown")
    return list(breakdown.values())


def related_search_breakdown(session: Session) -> list[ClickBreakdown]:
    rows = session.execute(
        select(
            AnalyticsEvent.related_search_id,
            AnalyticsEvent.session_id,
            RelatedSearch.search_text,
            Blog.title,
        )
        .outerjoin(RelatedSearch, RelatedSearch.id == AnalyticsEvent.related_search_id)
        .outerjoin(Blog, Blog.id == RelatedSearch.blog_id)
        .where(
            AnalyticsEvent.event_type == EventType.related_search_click,
            AnalyticsEvent.related_search_id.is_not(None),
        )
    ).all()
    breakdown: dict[uuid.UUID, ClickBreakdown] = {}
    for search_id, session_id, text, blog_title in rows:
        item = breakdown.setdefault(
            search_id,
            ClickBreakdown(key=search_id, label=text or "Unknown", parent_label=blog_title or "Unknown"),
        )
        item.total_clicks += 1
        item.sessions.add(session_id or "unknown")
    return list(breakdown.values())


def email_submissions(session: Session, limit: int = 500) -> list[tuple[EmailSubmission, str | None]]:
    rows = session.execute(
        select(EmailSubmission, RelatedSearch.search_text)
        .outerjoin(RelatedSearch, RelatedSearch.id == EmailSubmission.related_search_id)
        .order_by(desc(EmailSubmission.created_at))
        .limit(limit)
    ).all()
    return [(row, text) for row, text in rows]
