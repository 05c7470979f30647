from blog_funnel.db.models.analytics_event import AnalyticsEvent, EventType
from blog_funnel.db.models.blog import Blog, BlogStatus
from blog_funnel.db.models.category import Category
from blog_funnel.db.models.email_submission import EmailSubmission
from blog_funnel.db.models.pre_landing_config import PreLandingConfig
from blog_funnel.db.models.related_search import RelatedSearch
from blog_funnel.db.models.web_result import WebResult

__all__ = [
    "AnalyticsEvent",
    "EventType",
    "Blog",
    "BlogStatus",
    "Category",
    "EmailSubmission",
    "PreLandingConfig",
    "RelatedSearch",
    "WebResult",
]
