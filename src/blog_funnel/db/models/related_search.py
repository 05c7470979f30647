from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from blog_funnel.db.base import Base


class RelatedSearch(Base):
    __tablename__ = "related_searches"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    blog_id: Mapped[uuid.UUID | None] = mapped_column(
        ForeignKey("blogs.id", ondelete="CASCADE"), index=True
    )
    search_text: Mapped[str] = mapped_column(String(500))
    order_index: Mapped[int] = mapped_column(Integer, default=0)
    # web-result set this search activates; 1..4 by convention, not enforced
    wr: Mapped[int | None] = mapped_column(Integer, default=1)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
