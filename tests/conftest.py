from __future__ import annotations

import sys
import uuid
from collections.abc import Generator
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from blog_funnel.config.settings import Settings  # noqa: E402
from blog_funnel.db import models  # noqa: E402,F401
from blog_funnel.db.base import Base  # noqa: E402
from blog_funnel.db.models import (  # noqa: E402
    AnalyticsEvent,
    Blog,
    BlogStatus,
    Category,
    EmailSubmission,
    EventType,
    PreLandingConfig,
    RelatedSearch,
    WebResult,
)

BASE_TIME = datetime(2026, 1, 1, tzinfo=timezone.utc)


@pytest.fixture()
def db_session() -> Generator[Session, None, None]:
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    factory = sessionmaker(bind=engine, autoflush=False)
    session = factory()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        DATABASE_URL="sqlite://",
        GENERATOR_URL="https://generator.test/generate-blog",
        GENERATOR_API_KEY="test-key",
        IP_LOOKUP_URL="https://ip.test/",
        GEO_LOOKUP_URL="https://geo.test/{ip}",
        HTTP_TIMEOUT=5,
        HTTP_RETRIES=1,
    )


@pytest.fixture()
def category(db_session: Session) -> Category:
    row = Category(name="Job Seeking", code_range="501-600")
    db_session.add(row)
    db_session.commit()
    return row


def add_blog(
    session: Session,
    title: str,
    category: Category | None = None,
    status: BlogStatus = BlogStatus.published,
    minutes: int = 0,
) -> Blog:
    blog = Blog(
        title=title,
        slug=title.lower().replace(" ", "-"),
        category_id=category.id if category else None,
        author="Editor",
        content=f"Body of {title}",
        status=status,
        published_at=BASE_TIME + timedelta(minutes=minutes),
    )
    session.add(blog)
    session.commit()
    return blog


def add_search(session: Session, blog: Blog, text: str, wr: int) -> RelatedSearch:
    search = RelatedSearch(blog_id=blog.id, search_text=text, wr=wr, order_index=wr - 1)
    session.add(search)
    session.commit()
    return search


def add_result(
    session: Session,
    search: RelatedSearch,
    title: str,
    order_index: int,
    sponsored: bool = False,
    url: str | None = None,
) -> WebResult:
    result = WebResult(
        related_search_id=search.id,
        title=title,
        url=url or f"https://{title.lower().replace(' ', '')}.example",
        order_index=order_index,
        is_sponsored=sponsored,
    )
    session.add(result)
    session.commit()
    return result


def add_full_search(session: Session, blog: Blog, text: str, wr: int) -> RelatedSearch:
    """A related search with a web result, pre-landing page, events and an email."""
    search = add_search(session, blog, text, wr)
    add_result(session, search, f"{text} result", 0, url="https://offer.example")
    session.add_all(
        [
            PreLandingConfig(
                related_search_id=search.id,
                headline=f"{text} headline",
                destination_url="https://destination.example",
            ),
            AnalyticsEvent(
                event_type=EventType.related_search_click,
                related_search_id=search.id,
                session_id="session_1",
            ),
            AnalyticsEvent(
                event_type=EventType.visit_now_click,
                related_search_id=search.id,
                session_id="session_1",
            ),
            EmailSubmission(
                email="reader@example.com",
                related_search_id=search.id,
                session_id="session_1",
            ),
        ]
    )
    session.commit()
    return search


def random_id() -> uuid.UUID:
    return uuid.uuid4()
