from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

from blog_funnel.config import settings as settings_module
from blog_funnel.db import session as session_module
from blog_funnel.db.base import Base
from blog_funnel.db.models import Category
from conftest import add_blog, add_result, add_search

SITE_APP = Path(__file__).resolve().parents[1] / "src" / "blog_funnel" / "ui" / "site_app.py"


@pytest.fixture()
def site_db(tmp_path, monkeypatch) -> Generator[dict[str, str], None, None]:
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'site.db'}")
    # closed port, so ip lookups fail fast and fall back to "unknown"
    monkeypatch.setenv("IP_LOOKUP_URL", "http://127.0.0.1:9/")
    monkeypatch.setattr(settings_module, "_settings", None)
    monkeypatch.setattr(session_module, "_engine", None)
    monkeypatch.setattr(session_module, "_session_factory", None)

    engine = session_module.get_engine()
    Base.metadata.create_all(engine)
    with session_module.get_session() as session:
        lifestyle = Category(name="Lifestyle", code_range="100-200")
        session.add_all([lifestyle, Category(name="Education", code_range="201-300")])
        session.commit()
        blog = add_blog(session, "Slow Mornings", lifestyle)
        search = add_search(session, blog, "morning routine ideas", 1)
        add_result(session, search, "Routine Planner", 0)
        ids = {"search": str(search.id), "slug": blog.slug}
    yield ids
    engine.dispose()


def _params(app: AppTest) -> dict[str, str]:
    return {key: value[0] if isinstance(value, list) else value for key, value in app.query_params.items()}


def test_category_pick_does_not_trap_navigation(site_db) -> None:
    app = AppTest.from_file(str(SITE_APP), default_timeout=30)
    app.run()
    assert not app.exception

    app.selectbox(key="nav_category").select("Lifestyle").run()
    assert _params(app) == {"page": "category", "category": "lifestyle"}

    app.query_params = {"page": "results", "search": site_db["search"]}
    app.run()
    assert _params(app)["page"] == "results"
    assert any("morning routine ideas" in title.value for title in app.title)

    app.button(key="nav_home").click().run()
    assert _params(app)["page"] == "home"
    assert not app.exception


def test_all_categories_returns_home(site_db) -> None:
    app = AppTest.from_file(str(SITE_APP), default_timeout=30)
    app.run()

    app.selectbox(key="nav_category").select("Education").run()
    assert _params(app)["page"] == "category"

    app.selectbox(key="nav_category").select("All categories").run()
    assert _params(app) == {"page": "home"}
