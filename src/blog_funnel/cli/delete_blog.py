"""Delete blogs together with everything that hangs off them."""

from __future__ import annotations

import argparse
import uuid

from blog_funnel.config.settings import get_settings
from blog_funnel.db.session import get_session
from blog_funnel.services.cascade import delete_blogs
from blog_funnel.utils.log import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Cascade-delete one or more blogs")
    parser.add_argument("--id", dest="ids", action="append", required=True, type=uuid.UUID, help="Blog id (repeatable)")
    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()
    configure_logging(get_settings().log_level)

    with get_session() as session:
        result = delete_blogs(session, args.ids)

    print(f"Deleted {len(result.succeeded)} blogs")
    for blog_id, error in result.failed.items():
        print(f"Failed {blog_id}: {error}")
    if result.failed:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
