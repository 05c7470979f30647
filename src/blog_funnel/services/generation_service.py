from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from blog_funnel.errors import GenerationError
from blog_funnel.parsers.generator import (
    limit_words,
    parse_pre_landing,
    parse_related_searches,
    parse_web_results,
    plain_text,
    word_count,
)
from blog_funnel.providers.generator import GeneratorClient

logger = logging.getLogger(__name__)

CONTENT_WORDS = 100
SEARCH_PHRASE_WORDS = 5
CANDIDATE_SEARCHES = 6
CANDIDATE_WEB_RESULTS = 6


@dataclass
class GeneratedContent:
    content: str
    image_url: str | None
    related_searches: list[str] = field(default_factory=list)
    padded: int = 0


def placeholder_search(slot: int, topic: str) -> str:
    return f"Related search {slot} for {topic}"


def pad_searches(phrases: list[str], topic: str, size: int = CANDIDATE_SEARCHES) -> list[str]:
    padded = list(phrases[:size])
    while len(padded) < size:
        padded.append(placeholder_search(len(padded) + 1, topic))
    return padded


class GenerationService:
    def __init__(self, client: GeneratorClient) -> None:
        self._client = client

    def generate_content(self, title: str, category: str | None = None) -> GeneratedContent:
        title = title.strip()
        if not title:
            raise GenerationError("Please enter a title first")
        data = self._client.call(
            {
                "title": title,
                "category": category or "general",
                "imageOnly": False,
                "contentWords": CONTENT_WORDS,
                "searchPhraseWords": SEARCH_PHRASE_WORDS,
                "searchCount": CANDIDATE_SEARCHES,
            }
        )
        content = limit_words(plain_text(data.get("content")), CONTENT_WORDS)
        if not content:
            raise GenerationError("Generation service returned no content")
        if word_count(content) != CONTENT_WORDS:
            logger.warning(
                "Generated content for %r has %d words, expected %d",
                title,
                word_count(content),
                CONTENT_WORDS,
            )

        parsed = parse_related_searches(data.get("relatedSearches"), words=SEARCH_PHRASE_WORDS)
        if not parsed.ok:
            raise GenerationError(f"Could not read generated {parsed.error}")
        phrases = parsed.value or []
        if not phrases:
            raise GenerationError("Generation service returned no related searches")
        short = [p for p in phrases if word_count(p) != SEARCH_PHRASE_WORDS]
        if short:
            logger.warning(
                "%d related searches for %r are not %d words: %s",
                len(short),
                title,
                SEARCH_PHRASE_WORDS,
                short,
            )
        shortfall = max(0, CANDIDATE_SEARCHES - len(phrases))
        if shortfall:
            logger.warning(
                "Only %d related searches generated for %r; padding %d placeholders",
                len(phrases),
                title,
                shortfall,
            )
        return GeneratedContent(
            content=content,
            image_url=data.get("imageUrl") or None,
            related_searches=pad_searches(phrases, title),
            padded=shortfall,
        )

    def generate_image(self, title: str, category: str | None = None) -> str | None:
        title = title.strip()
        if not title:
            raise GenerationError("Please enter a title first")
        data = self._client.call(
            {"title": title, "category": category or "general", "imageOnly": True}
        )
        return data.get("imageUrl") or None

    def generate_web_results(self, search_text: str, category: str | None = None) -> list[dict[str, Any]]:
        data = self._client.call(
            {
                "generateWebResults": True,
                "searchText": search_text,
                "category": category or "general",
            }
        )
        parsed = parse_web_results(data.get("webResults"))
        if not parsed.ok:
            raise GenerationError(f"Could not read generated {parsed.error}")
        results = (parsed.value or [])[:CANDIDATE_WEB_RESULTS]
        if not results:
            raise GenerationError("Generation service returned no web results")
        return results

    def generate_pre_landing(self, web_result_title: str, category: str | None = None) -> dict[str, str]:
        data = self._client.call(
            {
                "generatePreLanding": True,
                "webResultTitle": web_result_title,
                "category": category or "general",
            }
        )
        parsed = parse_pre_landing(data.get("preLanding"))
        if not parsed.ok:
            raise GenerationError(f"Could not read generated {parsed.error}")
        return parsed.value or {}
