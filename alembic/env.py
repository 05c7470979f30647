from __future__ import annotations

import sys
from pathlib import Path

from alembic import context
from dotenv import load_dotenv

_root = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(_root / "src"))
load_dotenv(_root / ".env")

from blog_funnel.db import models  # noqa: E402,F401
from blog_funnel.db.base import Base  # noqa: E402
from blog_funnel.db.session import get_engine  # noqa: E402

target_metadata = Base.metadata


def run_migrations_offline() -> None:
    context.configure(
        url=str(get_engine().url),
        target_metadata=target_metadata,
        literal_binds=True,
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    with get_engine().connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata)
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
