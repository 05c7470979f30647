"""create funnel tables

Revision ID: 1d4e7a9c2b10
Revises:
Create Date: 2026-10-19 10:00:00.000000
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


revision = "1d4e7a9c2b10"
down_revision = None
branch_labels = None
depends_on = None


def _created_at() -> sa.Column:
    return sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False)


def upgrade() -> None:
    op.create_table(
        "categories",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("code_range", sa.String(length=64), nullable=False),
        _created_at(),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "blogs",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("title", sa.String(length=500), nullable=False),
        sa.Column("slug", sa.String(length=500), nullable=False),
        sa.Column("category_id", sa.Integer(), nullable=True),
        sa.Column("author", sa.String(length=200), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("featured_image", sa.String(length=2000), nullable=True),
        sa.Column("published_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.Column("status", sa.String(length=16), nullable=False),
        _created_at(),
        sa.ForeignKeyConstraint(["category_id"], ["categories.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_blogs_slug"), "blogs", ["slug"], unique=True)
    op.create_index(op.f("ix_blogs_category_id"), "blogs", ["category_id"], unique=False)
    op.create_index(op.f("ix_blogs_status"), "blogs", ["status"], unique=False)

    op.create_table(
        "related_searches",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("blog_id", sa.Uuid(), nullable=True),
        sa.Column("search_text", sa.String(length=500), nullable=False),
        sa.Column("order_index", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("wr", sa.Integer(), nullable=True, server_default="1"),
        _created_at(),
        sa.ForeignKeyConstraint(["blog_id"], ["blogs.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_related_searches_blog_id"), "related_searches", ["blog_id"], unique=False)

    op.create_table(
        "web_results",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("related_search_id", sa.Uuid(), nullable=True),
        sa.Column("title", sa.String(length=500), nullable=False),
        sa.Column("url", sa.String(length=2000), nullable=False),
        sa.Column("description", sa.String(length=2000), nullable=True),
        sa.Column("logo_url", sa.String(length=2000), nullable=True),
        sa.Column("order_index", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("is_sponsored", sa.Boolean(), nullable=False, server_default=sa.false()),
        _created_at(),
        sa.ForeignKeyConstraint(["related_search_id"], ["related_searches.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_web_results_related_search_id"), "web_results", ["related_search_id"], unique=False
    )

    op.create_table(
        "pre_landing_config",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("related_search_id", sa.Uuid(), nullable=True),
        sa.Column("logo_url", sa.String(length=2000), nullable=True),
        sa.Column("logo_position", sa.String(length=32), nullable=False, server_default="top-center"),
        sa.Column("main_image_url", sa.String(length=2000), nullable=True),
        sa.Column("headline", sa.String(length=500), nullable=True),
        sa.Column("description", sa.String(length=2000), nullable=True),
        sa.Column("background_color", sa.String(length=32), nullable=False, server_default="#ffffff"),
        sa.Column("background_image_url", sa.String(length=2000), nullable=True),
        sa.Column("button_text", sa.String(length=100), nullable=False, server_default="Visit Now"),
        sa.Column("destination_url", sa.String(length=2000), nullable=True),
        _created_at(),
        sa.ForeignKeyConstraint(["related_search_id"], ["related_searches.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("related_search_id"),
    )

    op.create_table(
        "analytics_events",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("event_type", sa.String(length=32), nullable=False),
        sa.Column("blog_id", sa.Uuid(), nullable=True),
        sa.Column("related_search_id", sa.Uuid(), nullable=True),
        sa.Column("session_id", sa.String(length=64), nullable=True),
        sa.Column("ip_address", sa.String(length=64), nullable=True),
        sa.Column("user_agent", sa.String(length=1000), nullable=True),
        sa.Column("device_type", sa.String(length=16), nullable=True),
        sa.Column("country", sa.String(length=100), nullable=True),
        sa.Column("source", sa.String(length=200), nullable=True, server_default="direct"),
        _created_at(),
        sa.ForeignKeyConstraint(["blog_id"], ["blogs.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["related_search_id"], ["related_searches.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_analytics_events_event_type"), "analytics_events", ["event_type"], unique=False)
    op.create_index(op.f("ix_analytics_events_blog_id"), "analytics_events", ["blog_id"], unique=False)
    op.create_index(
        op.f("ix_analytics_events_related_search_id"), "analytics_events", ["related_search_id"], unique=False
    )
    op.create_index(op.f("ix_analytics_events_session_id"), "analytics_events", ["session_id"], unique=False)

    op.create_table(
        "email_submissions",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column("related_search_id", sa.Uuid(), nullable=True),
        sa.Column("session_id", sa.String(length=64), nullable=True),
        sa.Column("ip_address", sa.String(length=64), nullable=True),
        _created_at(),
        sa.ForeignKeyConstraint(["related_search_id"], ["related_searches.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_email_submissions_related_search_id"), "email_submissions", ["related_search_id"], unique=False
    )

    categories = sa.table(
        "categories",
        sa.column("name", sa.String),
        sa.column("code_range", sa.String),
    )
    op.bulk_insert(
        categories,
        [
            {"name": "Lifestyle", "code_range": "100-200"},
            {"name": "Education", "code_range": "201-300"},
            {"name": "Wellness", "code_range": "301-400"},
            {"name": "Deals", "code_range": "401-500"},
            {"name": "Job Seeking", "code_range": "501-600"},
            {"name": "Alternative Learning", "code_range": "601-700"},
        ],
    )


def downgrade() -> None:
    op.drop_index(op.f("ix_email_submissions_related_search_id"), table_name="email_submissions")
    op.drop_table("email_submissions")
    op.drop_index(op.f("ix_analytics_events_session_id"), table_name="analytics_events")
    op.drop_index(op.f("ix_analytics_events_related_search_id"), table_name="analytics_events")
    op.drop_index(op.f("ix_analytics_events_blog_id"), table_name="analytics_events")
    op.drop_index(op.f("ix_analytics_events_event_type"), table_name="analytics_events")
    op.drop_table("analytics_events")
    op.drop_table("pre_landing_config")
    op.drop_index(op.f("ix_web_results_related_search_id"), table_name="web_results")
    op.drop_table("web_results")
    op.drop_index(op.f("ix_related_searches_blog_id"), table_name="related_searches")
    op.drop_table("related_searches")
    op.drop_index(op.f("ix_blogs_status"), table_name="blogs")
    op.drop_index(op.f("ix_blogs_category_id"), table_name="blogs")
    op.drop_index(op.f("ix_blogs_slug"), table_name="blogs")
    op.drop_table("blogs")
    op.drop_table("categories")
