from __future__ import annotations

import uuid
from dataclasses import dataclass
from enum import Enum

from blog_funnel.db.models import PreLandingConfig, WebResult


class VisitKind(str, Enum):
    pre_landing = "pre_landing"
    direct = "direct"


@dataclass(frozen=True)
class VisitAction:
    kind: VisitKind
    url: str | None = None
    related_search_id: uuid.UUID | None = None
    override_url: str | None = None


def resolve_visit(web_result: WebResult, config: PreLandingConfig | None) -> VisitAction:
    if config is not None:
        return VisitAction(
            kind=VisitKind.pre_landing,
            related_search_id=web_result.related_search_id,
            override_url=web_result.url,
        )
    return VisitAction(kind=VisitKind.direct, url=web_result.url)


def resolve_redirect(config: PreLandingConfig | None, override_url: str | None) -> str | None:
    """Per-click override, then the stored destination, else no redirect."""
    if override_url:
        return override_url
    if config is not None and config.destination_url:
        return config.destination_url
    return None
