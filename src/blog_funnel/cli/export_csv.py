"""CLI for CSV export."""

from __future__ import annotations

import argparse

from blog_funnel.config.settings import get_settings
from blog_funnel.db.session import get_session
from blog_funnel.exporters import csv_export
from blog_funnel.services import admin, analytics_service
from blog_funnel.utils.log import configure_logging

TABLES = ["blogs", "related-searches", "web-results", "pre-landing", "sessions", "emails"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Export funnel tables to CSV")
    parser.add_argument("--table", choices=TABLES, default="blogs", help="Table to export")
    parser.add_argument("--out", required=True, help="Output CSV path")
    return parser


def _render(session, table: str) -> tuple[str, int]:
    if table == "blogs":
        rows = admin.list_blogs(session)
        return csv_export.blogs_csv(rows), len(rows)
    if table == "related-searches":
        rows = admin.list_related_searches(session)
        return csv_export.related_searches_csv(rows), len(rows)
    if table == "web-results":
        rows = admin.list_web_results(session)
        texts = {search.id: search.search_text for search, _ in admin.list_related_searches(session)}
        return csv_export.web_results_csv(rows, texts), len(rows)
    if table == "pre-landing":
        rows = admin.list_pre_landing(session)
        return csv_export.pre_landing_csv(rows), len(rows)
    if table == "sessions":
        rows = analytics_service.session_summaries(session)
        return csv_export.sessions_csv(rows), len(rows)
    rows = analytics_service.email_submissions(session)
    return csv_export.email_submissions_csv(rows), len(rows)


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()
    configure_logging(get_settings().log_level)

    with get_session() as session:
        text, count = _render(session, args.table)

    with open(args.out, "w", newline="", encoding="utf-8") as handle:
        handle.write(text)

    print(f"Exported {count} rows to {args.out}")


if __name__ == "__main__":
    main()
