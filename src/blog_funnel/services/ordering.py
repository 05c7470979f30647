from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

from blog_funnel.db.models import WebResult

R = TypeVar("R", bound=WebResult)


def display_key(result: WebResult) -> tuple[int, int]:
    return (0 if result.is_sponsored else 1, result.order_index or 0)


def sort_web_results(results: Iterable[R]) -> list[R]:
    """Sponsored results first, then organic; ``order_index`` ascending inside each group.

    ``sorted`` is stable, so equal keys keep their incoming order.
    """
    return sorted(results, key=display_key)
