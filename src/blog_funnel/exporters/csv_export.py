"""CSV exports for the admin console.

Free-text columns are always quoted and embedded quotes are doubled.
Identifiers, flags and numbers are written bare.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from blog_funnel.db.models import Blog, EmailSubmission, PreLandingConfig, RelatedSearch, WebResult
from blog_funnel.services.analytics_service import SessionSummary

CONTENT_PREVIEW = 100


def quote(value: Any) -> str:
    text = "" if value is None else str(value)
    return '"' + text.replace('"', '""') + '"'


def bare(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(getattr(value, "value", value))


def render(headers: Sequence[str], rows: Iterable[Sequence[str]]) -> str:
    lines = [",".join(headers)]
    lines.extend(",".join(row) for row in rows)
    return "\n".join(lines)


def blogs_csv(blogs: Iterable[Blog]) -> str:
    return render(
        ["ID", "Title", "Slug", "Author", "Status", "Content"],
        (
            [
                bare(blog.id),
                quote(blog.title),
                quote(blog.slug),
                quote(blog.author),
                bare(blog.status),
                quote((blog.content or "")[:CONTENT_PREVIEW] + "..."),
            ]
            for blog in blogs
        ),
    )


def web_results_csv(results: Iterable[WebResult], search_text: dict[Any, str]) -> str:
    return render(
        ["ID", "Related Search", "Title", "URL", "Description", "Is Sponsored", "Order Index"],
        (
            [
                bare(result.id),
                quote(search_text.get(result.related_search_id, "")),
                quote(result.title),
                quote(result.url),
                quote(result.description),
                bare(bool(result.is_sponsored)),
                bare(result.order_index),
            ]
            for result in results
        ),
    )


def related_searches_csv(searches: Iterable[tuple[RelatedSearch, str | None]]) -> str:
    return render(
        ["ID", "Blog", "Search Text", "WR", "Order Index"],
        (
            [
                bare(search.id),
                quote(blog_title),
                quote(search.search_text),
                bare(search.wr),
                bare(search.order_index),
            ]
            for search, blog_title in searches
        ),
    )


def pre_landing_csv(configs: Iterable[tuple[PreLandingConfig, str | None]]) -> str:
    return render(
        ["ID", "Related Search", "Headline", "Button Text", "Destination URL"],
        (
            [
                bare(config.id),
                quote(search_text),
                quote(config.headline),
                quote(config.button_text),
                quote(config.destination_url),
            ]
            for config, search_text in configs
        ),
    )


def sessions_csv(summaries: Iterable[SessionSummary]) -> str:
    return render(
        ["Session ID", "IP", "Country", "Source", "Device", "Page Views", "Related Searches", "Blog Clicks"],
        (
            [
                quote(item.session_id),
                quote(item.ip_address),
                quote(item.country),
                quote(item.source),
                quote(item.device_type),
                bare(item.page_views),
                bare(item.related_searches),
                bare(item.blog_clicks),
            ]
            for item in summaries
        ),
    )


def email_submissions_csv(rows: Iterable[tuple[EmailSubmission, str | None]]) -> str:
    return render(
        ["Email", "Related Search", "Session ID", "IP", "Submitted At"],
        (
            [
                quote(row.email),
                quote(search_text),
                quote(row.session_id),
                quote(row.ip_address),
                bare(row.created_at.isoformat() if row.created_at else None),
            ]
            for row, search_text in rows
        ),
    )
