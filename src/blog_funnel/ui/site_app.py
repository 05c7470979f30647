"""Public blog site: feeds, blog pages, related-search results and pre-landing capture."""

from __future__ import annotations

import json
import sys
import uuid
from pathlib import Path

import streamlit as st
import streamlit.components.v1 as components
from dotenv import load_dotenv

# Ensure src/ is on sys.path for Streamlit Cloud
_src_path = Path(__file__).resolve().parents[2]
if str(_src_path) not in sys.path:
    sys.path.insert(0, str(_src_path))

from blog_funnel.config.settings import get_settings
from blog_funnel.db.session import get_session
from blog_funnel.errors import FunnelError, NotFoundError
from blog_funnel.providers.geo import GeoLookup
from blog_funnel.services import funnel
from blog_funnel.services.routing import VisitKind, resolve_visit
from blog_funnel.services.tracking import EventTracker, SessionContext
from blog_funnel.utils.log import configure_logging

OVERRIDE_KEY = "pre_landing_override"
ALL_CATEGORIES = "All categories"


def _find_project_root() -> Path | None:
    current = Path(__file__).resolve()
    for parent in current.parents:
        if (parent / "pyproject.toml").exists():
            return parent
    return None


def _context() -> SessionContext:
    context = st.session_state.get("funnel_context")
    if context is None:
        headers = st.context.headers
        source = st.query_params.get("utm_source") or headers.get("Referer") or "direct"
        context = SessionContext.start(user_agent=headers.get("User-Agent"), source=source)
        st.session_state["funnel_context"] = context
    return context


def _track(action: str, *args, **kwargs) -> None:
    with get_session() as session:
        tracker = EventTracker(session, GeoLookup(get_settings()))
        getattr(tracker, action)(_context(), *args, **kwargs)


def _page_view(route: str, blog_id: uuid.UUID | None = None) -> None:
    # streamlit reruns the script on every interaction; count a view once per route
    if st.session_state.get("last_view") == route:
        return
    st.session_state["last_view"] = route
    _track("page_view", blog_id)


def _set_route(page: str, **params: str) -> None:
    st.query_params.clear()
    st.query_params["page"] = page
    for key, value in params.items():
        st.query_params[key] = value


def _go(page: str, **params: str) -> None:
    _set_route(page, **params)
    st.rerun()


def _pick_category() -> None:
    # runs only when the reader changes the selection
    choice = st.session_state.get("nav_category")
    if choice and choice != ALL_CATEGORIES:
        _set_route("category", category=funnel.category_slug(choice))
    else:
        _set_route("home")


def _redirect(url: str) -> None:
    components.html(f"<script>window.top.location.href = {json.dumps(url)};</script>", height=0)
    st.link_button("Continue", url)


def _header() -> None:
    cols = st.columns([3, 1])
    if cols[0].button("Home", key="nav_home"):
        _go("home")
    with get_session() as session:
        categories = funnel.list_categories(session)
    if categories:
        cols[1].selectbox(
            "Category",
            [ALL_CATEGORIES] + [c.name for c in categories],
            key="nav_category",
            on_change=_pick_category,
        )


def _recent_posts() -> None:
    st.subheader("Recent Posts")
    with get_session() as session:
        posts = funnel.recent_posts(session)
    for item in posts:
        if st.button(item.blog.title, key=f"recent_{item.blog.id}"):
            _track("blog_click", item.blog.id)
            _go("blog", category=funnel.category_slug(item.category_name), slug=item.blog.slug)


def _feed(items: list[funnel.FeedItem], key: str) -> None:
    if not items:
        st.info("No posts yet.")
        return
    for item in items:
        with st.container(border=True):
            if item.blog.featured_image:
                st.image(item.blog.featured_image, width="stretch")
            st.caption(item.category_name or "Uncategorized")
            st.markdown(f"### {item.blog.title}")
            st.write((item.blog.content or "")[:150] + "...")
            if st.button("Read more", key=f"{key}_{item.blog.id}"):
                _track("blog_click", item.blog.id)
                _go("blog", category=funnel.category_slug(item.category_name), slug=item.blog.slug)


def _home() -> None:
    _page_view("home")
    st.title("Latest Articles")
    with get_session() as session:
        items = funnel.home_feed(session)
    _feed(items, "home")


def _category(slug: str) -> None:
    _page_view(f"category:{slug}")
    try:
        with get_session() as session:
            category, items = funnel.category_feed(session, slug)
    except NotFoundError:
        st.warning("Category not found")
        return
    st.title(category.name)
    _feed(items, "category")


def _blog(slug: str) -> None:
    try:
        with get_session() as session:
            page = funnel.blog_page(session, slug)
    except NotFoundError:
        st.warning("Blog not found")
        return
    _page_view(f"blog:{slug}", page.blog.id)

    blog = page.blog
    st.caption(page.category_name or "Uncategorized")
    st.title(blog.title)
    published = blog.published_at.strftime("%B %d, %Y") if blog.published_at else ""
    st.caption(f"By {blog.author} • {published}")
    if blog.featured_image:
        st.image(blog.featured_image, width="stretch")
    for paragraph in (blog.content or "").split("\n\n"):
        st.write(paragraph)

    if page.related_searches:
        st.subheader("Related Searches")
        for search in page.related_searches:
            if st.button(search.search_text, key=f"search_{search.id}"):
                _track("related_search_click", search.id)
                _go("results", search=str(search.id))


def _results(search_id: uuid.UUID) -> None:
    _page_view(f"results:{search_id}")
    try:
        with get_session() as session:
            page = funnel.results_page(session, search_id)
    except NotFoundError:
        st.warning("Search not found")
        return

    if page.back_path and page.blog_slug:
        if st.button(f"← Back to: {page.blog_title}", key="back"):
            _go("blog", category=funnel.category_slug(page.category_name), slug=page.blog_slug)
    st.markdown(f"**WR-{page.search.wr}**")
    st.title(page.search.search_text)
    st.caption("Sponsored results")

    for result in page.results:
        action = resolve_visit(result, page.pre_landing)
        with st.container(border=True):
            cols = st.columns([1, 8])
            if result.logo_url:
                cols[0].image(result.logo_url, width=48)
            with cols[1]:
                st.markdown(f"#### {result.title}")
                if result.is_sponsored:
                    st.caption("Sponsored")
                st.caption(result.url)
                if result.description:
                    st.write(result.description)
                if action.kind is VisitKind.pre_landing:
                    if st.button("Visit Website", key=f"visit_{result.id}"):
                        _track("visit_now_click", search_id)
                        st.session_state[OVERRIDE_KEY] = {
                            "search": str(search_id),
                            "url": action.override_url,
                        }
                        _go("pre-landing", search=str(search_id))
                else:
                    st.link_button("Visit Website", action.url or result.url)


def _pre_landing(search_id: uuid.UUID) -> None:
    with get_session() as session:
        config = funnel.pre_landing_for(session, search_id)
    if config is None:
        st.warning("Page not found")
        return

    carried = st.session_state.get(OVERRIDE_KEY) or {}
    override = carried.get("url") if carried.get("search") == str(search_id) else None

    if config.background_image_url:
        st.image(config.background_image_url, width="stretch")
    if config.logo_url:
        st.image(config.logo_url, width=160)
    if config.main_image_url:
        st.image(config.main_image_url, width="stretch")
    if config.headline:
        st.title(config.headline)
    if config.description:
        st.write(config.description)

    with st.form("pre_landing_form"):
        email = st.text_input("Email", placeholder="Enter your email")
        submitted = st.form_submit_button(config.button_text or "Visit Now")

    if submitted:
        try:
            with get_session() as session:
                tracker = EventTracker(session, GeoLookup(get_settings()))
                destination = funnel.submit_email(
                    session, tracker, search_id, email, _context(), override_url=override
                )
        except FunnelError as exc:
            st.error(str(exc))
            return
        st.success("Thank you! Check your email.")
        st.session_state.pop(OVERRIDE_KEY, None)
        if destination:
            _redirect(destination)


def _search_param() -> uuid.UUID | None:
    try:
        return uuid.UUID(st.query_params.get("search", ""))
    except ValueError:
        return None


def main() -> None:
    root = _find_project_root()
    if root is not None:
        load_dotenv(root / ".env")
    configure_logging(get_settings().log_level)

    st.set_page_config(page_title="Blog", layout="wide")
    page = st.query_params.get("page", "home")

    if page == "pre-landing":
        search_id = _search_param()
        if search_id is None:
            st.warning("Page not found")
            return
        _pre_landing(search_id)
        return

    _header()
    main_col, side_col = st.columns([3, 1])
    with main_col:
        if page == "category":
            _category(st.query_params.get("category", ""))
        elif page == "blog":
            _blog(st.query_params.get("slug", ""))
        elif page == "results":
            search_id = _search_param()
            if search_id is None:
                st.warning("Search not found")
            else:
                _results(search_id)
        else:
            _home()
    with side_col:
        _recent_posts()


if __name__ == "__main__":
    main()
