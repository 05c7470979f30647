from __future__ import annotations

import logging
import re
import secrets
import string
import time
import uuid
from dataclasses import dataclass

from sqlalchemy.orm import Session

from blog_funnel.db.models import AnalyticsEvent, EmailSubmission, EventType
from blog_funnel.providers.geo import UNKNOWN, GeoLookup

logger = logging.getLogger(__name__)

_TABLET_RE = re.compile(r"(tablet|ipad|playbook|silk)|(android(?!.*mobi))", re.IGNORECASE)
_MOBILE_RE = re.compile(
    r"Mobile|Android|iP(hone|od)|IEMobile|BlackBerry|Kindle|Silk-Accelerated|(hpw|web)OS|Opera M(obi|ini)"
)
_BASE36 = string.digits + string.ascii_lowercase


def new_session_id() -> str:
    suffix = "".join(secrets.choice(_BASE36) for _ in range(9))
    return f"session_{int(time.time() * 1000)}_{suffix}"


def device_type(user_agent: str | None) -> str:
    ua = user_agent or ""
    if _TABLET_RE.search(ua):
        return "tablet"
    if _MOBILE_RE.search(ua):
        return "mobile"
    return "desktop"


@dataclass
class SessionContext:
    """Per-reader state passed into every tracking call.

    ``ip_address`` and ``country`` are resolved on first use and then kept for
    the rest of the reader's session.
    """

    session_id: str
    user_agent: str | None = None
    source: str | None = None
    ip_address: str | None = None
    country: str | None = None

    @classmethod
    def start(cls, user_agent: str | None = None, source: str | None = None) -> "SessionContext":
        return cls(session_id=new_session_id(), user_agent=user_agent, source=source)


class EventTracker:
    def __init__(self, session: Session, geo: GeoLookup | None = None) -> None:
        self._session = session
        self._geo = geo

    def _resolve_ip(self, context: SessionContext) -> str:
        if context.ip_address is None:
            context.ip_address = self._geo.ip_address() if self._geo else UNKNOWN
        return context.ip_address

    def _resolve_country(self, context: SessionContext) -> str:
        if context.country is None:
            ip = self._resolve_ip(context)
            context.country = self._geo.country(ip) if self._geo else UNKNOWN
        return context.country

    def track(
        self,
        event_type: EventType,
        context: SessionContext,
        blog_id: uuid.UUID | None = None,
        related_search_id: uuid.UUID | None = None,
    ) -> bool:
        """Record one event. Never raises; returns whether the row was written."""
        try:
            event = AnalyticsEvent(
                event_type=EventType(event_type),
                blog_id=blog_id,
                related_search_id=related_search_id,
                session_id=context.session_id,
                ip_address=self._resolve_ip(context),
                user_agent=context.user_agent,
                device_type=device_type(context.user_agent),
                country=self._resolve_country(context),
                source=context.source or "direct",
            )
            self._session.add(event)
            self._session.commit()
            return True
        except Exception:  # noqa: BLE001
            self._rollback()
            logger.exception("Analytics tracking error for %s", event_type)
            return False

    def page_view(self, context: SessionContext, blog_id: uuid.UUID | None = None) -> bool:
        return self.track(EventType.page_view, context, blog_id=blog_id)

    def blog_click(self, context: SessionContext, blog_id: uuid.UUID) -> bool:
        return self.track(EventType.blog_click, context, blog_id=blog_id)

    def related_search_click(self, context: SessionContext, related_search_id: uuid.UUID) -> bool:
        return self.track(EventType.related_search_click, context, related_search_id=related_search_id)

    def visit_now_click(self, context: SessionContext, related_search_id: uuid.UUID) -> bool:
        return self.track(EventType.visit_now_click, context, related_search_id=related_search_id)

    def email_submission(
        self,
        email: str,
        context: SessionContext,
        related_search_id: uuid.UUID | None = None,
    ) -> bool:
        try:
            self._session.add(
                EmailSubmission(
                    email=email.strip(),
                    related_search_id=related_search_id,
                    session_id=context.session_id,
                    ip_address=self._resolve_ip(context),
                )
            )
            self._session.commit()
            return True
        except Exception:  # noqa: BLE001
            self._rollback()
            logger.exception("Email tracking error")
            return False

    def _rollback(self) -> None:
        try:
            self._session.rollback()
        except Exception:  # noqa: BLE001
            logger.exception("Rollback after tracking error failed")
