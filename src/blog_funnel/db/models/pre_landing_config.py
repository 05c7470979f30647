from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from blog_funnel.db.base import Base


class PreLandingConfig(Base):
    __tablename__ = "pre_landing_config"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    related_search_id: Mapped[uuid.UUID | None] = mapped_column(
        ForeignKey("related_searches.id", ondelete="CASCADE"), unique=True
    )
    logo_url: Mapped[str | None] = mapped_column(String(2000))
    logo_position: Mapped[str] = mapped_column(String(32), default="top-center")
    main_image_url: Mapped[str | None] = mapped_column(String(2000))
    headline: Mapped[str | None] = mapped_column(String(500))
    description: Mapped[str | None] = mapped_column(String(2000))
    background_color: Mapped[str] = mapped_column(String(32), default="#ffffff")
    background_image_url: Mapped[str | None] = mapped_column(String(2000))
    button_text: Mapped[str] = mapped_column(String(100), default="Visit Now")
    destination_url: Mapped[str | None] = mapped_column(String(2000))
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
