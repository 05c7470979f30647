"""Multi-step authoring wizard: blog, related searches, web results, pre-landing, review.

Selections are kept as ordered lists of candidate indexes, so the rank of a
candidate is its position in the list. The first selected related search
becomes WR-1, the second WR-2 and so on; web results get ``order_index`` the
same way.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from sqlalchemy.orm import Session

from blog_funnel.db.models import Blog, BlogStatus, PreLandingConfig, RelatedSearch, WebResult
from blog_funnel.errors import PersistenceError, WizardError

logger = logging.getLogger(__name__)

SEARCHES_PER_BLOG = 4
WEB_RESULTS_PER_SEARCH = 4


def slugify(title: str) -> str:
    slug = re.sub(r"[^a-z0-9]+", "-", title.lower())
    return slug.strip("-")


class WizardStep(str, Enum):
    blog = "blog"
    related_searches = "related-searches"
    web_results = "web-results"
    pre_landing = "pre-landing"
    review = "review"


STEPS = list(WizardStep)


class OrderedSelection:
    def __init__(self, capacity: int, items: list[int] | None = None) -> None:
        self.capacity = capacity
        self._items: list[int] = list(items or [])[:capacity]

    def toggle(self, index: int) -> bool:
        """Select or deselect ``index``. Returns False when the selection is full."""
        if index in self._items:
            self._items.remove(index)
            return True
        if len(self._items) >= self.capacity:
            return False
        self._items.append(index)
        return True

    def rank(self, index: int) -> int | None:
        if index not in self._items:
            return None
        return self._items.index(index) + 1

    @property
    def items(self) -> list[int]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)


@dataclass
class BlogDraft:
    title: str = ""
    slug: str = ""
    category_id: int | None = None
    author: str = ""
    content: str = ""
    featured_image: str = ""
    status: BlogStatus = BlogStatus.published


@dataclass
class WizardState:
    blog: BlogDraft = field(default_factory=BlogDraft)
    step: WizardStep = WizardStep.blog
    candidates: list[str] = field(default_factory=list)
    searches: OrderedSelection = field(default_factory=lambda: OrderedSelection(SEARCHES_PER_BLOG))
    web_results: dict[int, list[dict[str, Any]]] = field(default_factory=dict)
    selected_results: dict[int, OrderedSelection] = field(default_factory=dict)
    pre_landing: dict[int, dict[str, str]] = field(default_factory=dict)

    def set_candidates(self, phrases: list[str]) -> None:
        self.candidates = list(phrases)
        self.searches = OrderedSelection(SEARCHES_PER_BLOG)
        self.web_results.clear()
        self.selected_results.clear()
        self.pre_landing.clear()

    def toggle_search(self, index: int) -> bool:
        if not 0 <= index < len(self.candidates):
            raise WizardError(f"No related search candidate #{index + 1}")
        return self.searches.toggle(index)

    def edit_candidate(self, index: int, text: str) -> None:
        text = " ".join(text.split())
        if not text:
            raise WizardError("Related search text cannot be empty")
        self.candidates[index] = text

    def set_web_results(self, search_index: int, results: list[dict[str, Any]]) -> None:
        self.web_results[search_index] = list(results)
        self.selected_results[search_index] = OrderedSelection(WEB_RESULTS_PER_SEARCH)
        self.pre_landing.pop(search_index, None)

    def result_selection(self, search_index: int) -> OrderedSelection:
        return self.selected_results.setdefault(
            search_index, OrderedSelection(WEB_RESULTS_PER_SEARCH)
        )

    def toggle_web_result(self, search_index: int, result_index: int) -> bool:
        if not 0 <= result_index < len(self.web_results.get(search_index, [])):
            raise WizardError(f"No web result #{result_index + 1} for this search")
        return self.result_selection(search_index).toggle(result_index)

    def edit_web_result(self, search_index: int, result_index: int, **changes: Any) -> None:
        current = dict(self.web_results[search_index][result_index])
        current.update({k: v for k, v in changes.items() if v is not None})
        self.web_results[search_index][result_index] = current

    def primary_web_result(self, search_index: int) -> dict[str, Any] | None:
        """First selected web result of a search; pre-landing content is generated for it."""
        selection = self.result_selection(search_index).items
        if not selection:
            return None
        return self.web_results[search_index][selection[0]]

    def set_pre_landing(self, search_index: int, config: dict[str, str]) -> None:
        self.pre_landing[search_index] = dict(config)

    def selected_searches(self) -> list[tuple[int, int, str]]:
        """``(wr, candidate_index, text)`` in WR order."""
        return [
            (rank, index, self.candidates[index])
            for rank, index in enumerate(self.searches.items, start=1)
        ]

    def blog_ready(self) -> bool:
        draft = self.blog
        return bool(
            draft.title.strip() and draft.content.strip() and draft.category_id and draft.author.strip()
        )

    def searches_ready(self) -> bool:
        return len(self.searches) == SEARCHES_PER_BLOG

    def web_results_ready(self) -> bool:
        return all(
            1 <= len(self.result_selection(index)) <= WEB_RESULTS_PER_SEARCH
            for index in self.searches.items
        )

    def check(self, step: WizardStep) -> None:
        if step is WizardStep.blog and not self.blog_ready():
            raise WizardError("Title, content, category and author are required")
        if step is WizardStep.related_searches and not self.searches_ready():
            raise WizardError(
                f"Select exactly {SEARCHES_PER_BLOG} related searches "
                f"({len(self.searches)} selected)"
            )
        if step is WizardStep.web_results and not self.web_results_ready():
            raise WizardError(
                f"Select 1 to {WEB_RESULTS_PER_SEARCH} web results for every related search"
            )

    def advance(self) -> WizardStep:
        position = STEPS.index(self.step)
        for step in STEPS[: position + 1]:
            self.check(step)
        if position + 1 < len(STEPS):
            self.step = STEPS[position + 1]
        return self.step

    def back(self) -> WizardStep:
        position = STEPS.index(self.step)
        if position > 0:
            self.step = STEPS[position - 1]
        return self.step


class FunnelAssembler:
    """Persists a finished wizard as one blog with its searches, results and pre-landing pages."""

    def save(self, session: Session, state: WizardState) -> Blog:
        for step in (WizardStep.blog, WizardStep.related_searches, WizardStep.web_results):
            state.check(step)

        draft = state.blog
        step = "blog"
        try:
            blog = Blog(
                title=draft.title.strip(),
                slug=draft.slug.strip() or slugify(draft.title),
                category_id=draft.category_id,
                author=draft.author.strip(),
                content=draft.content,
                featured_image=draft.featured_image or None,
                status=draft.status,
            )
            session.add(blog)
            session.flush()

            for wr, index, text in state.selected_searches():
                step = f"related search WR-{wr}"
                search = RelatedSearch(
                    blog_id=blog.id, search_text=text, order_index=wr - 1, wr=wr
                )
                session.add(search)
                session.flush()

                results = state.web_results.get(index, [])
                for position, result_index in enumerate(state.result_selection(index).items):
                    step = f"web result {position + 1} of WR-{wr}"
                    item = results[result_index]
                    session.add(
                        WebResult(
                            related_search_id=search.id,
                            title=item["title"],
                            description=item.get("description") or None,
                            url=item["url"],
                            logo_url=item.get("logo_url") or None,
                            is_sponsored=bool(item.get("is_sponsored")),
                            order_index=position,
                        )
                    )
                    session.flush()

                pre_landing = state.pre_landing.get(index)
                if pre_landing:
                    step = f"pre-landing of WR-{wr}"
                    session.add(
                        PreLandingConfig(
                            related_search_id=search.id,
                            headline=pre_landing.get("headline"),
                            description=pre_landing.get("description"),
                            button_text=pre_landing.get("button_text") or "Visit Now",
                            main_image_url=pre_landing.get("main_image_url") or None,
                            destination_url=pre_landing.get("destination_url") or None,
                            background_color="#ffffff",
                        )
                    )
                    session.flush()
            session.commit()
        except Exception as exc:  # noqa: BLE001
            session.rollback()
            logger.exception("Wizard save failed at %s", step)
            raise PersistenceError(step, exc) from exc
        logger.info("Created blog %s (%s) with %d related searches", blog.id, blog.slug, len(state.searches))
        return blog
