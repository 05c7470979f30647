from __future__ import annotations

import uuid
from datetime import datetime
from enum import Enum

from sqlalchemy import DateTime, Enum as SAEnum, ForeignKey, String, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from blog_funnel.db.base import Base


class EventType(str, Enum):
    page_view = "page_view"
    blog_click = "blog_click"
    related_search_click = "related_search_click"
    visit_now_click = "visit_now_click"


class AnalyticsEvent(Base):
    __tablename__ = "analytics_events"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    event_type: Mapped[EventType] = mapped_column(
        SAEnum(EventType, native_enum=False, length=32), index=True
    )
    blog_id: Mapped[uuid.UUID | None] = mapped_column(
        ForeignKey("blogs.id", ondelete="CASCADE"), index=True
    )
    related_search_id: Mapped[uuid.UUID | None] = mapped_column(
        ForeignKey("related_searches.id", ondelete="CASCADE"), index=True
    )
    session_id: Mapped[str | None] = mapped_column(String(64), index=True)
    ip_address: Mapped[str | None] = mapped_column(String(64))
    user_agent: Mapped[str | None] = mapped_column(String(1000))
    device_type: Mapped[str | None] = mapped_column(String(16))
    country: Mapped[str | None] = mapped_column(String(100))
    source: Mapped[str | None] = mapped_column(String(200), default="direct")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
