"""Seed categories from a yaml/json config."""

from __future__ import annotations

import argparse
from typing import Any

from sqlalchemy import select

from blog_funnel.config.loaders import load_list
from blog_funnel.config.settings import get_settings
from blog_funnel.db.models import Category
from blog_funnel.db.session import get_session
from blog_funnel.services.funnel import category_name_is
from blog_funnel.utils.log import configure_logging


def _load_categories(config_path: str) -> list[dict[str, Any]]:
    items = load_list(config_path, "categories")
    normalized: list[dict[str, Any]] = []
    for item in items:
        if isinstance(item, str):
            item = {"name": item}
        if not isinstance(item, dict):
            continue
        name = str(item.get("name") or "").strip()
        if not name:
            continue
        normalized.append({"name": name, "code_range": str(item.get("code_range") or "").strip()})
    return normalized


def sync_categories(session, categories: list[dict[str, Any]]) -> list[Category]:
    result: list[Category] = []
    for item in categories:
        existing = session.execute(
            select(Category).where(category_name_is(item["name"]))
        ).scalars().first()
        if existing:
            if item["code_range"] and existing.code_range != item["code_range"]:
                existing.code_range = item["code_range"]
            result.append(existing)
            continue
        row = Category(**item)
        session.add(row)
        session.flush()
        result.append(row)
    session.commit()
    return result


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Create or update blog categories")
    parser.add_argument("--config", required=True, help="Path to categories config (yaml/json)")
    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()
    configure_logging(get_settings().log_level)

    categories = _load_categories(args.config)
    if not categories:
        print("No categories found in config")
        return

    with get_session() as session:
        rows = sync_categories(session, categories)

    print(f"Synced {len(rows)} categories")


if __name__ == "__main__":
    main()
