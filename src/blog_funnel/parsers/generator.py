from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from bs4 import BeautifulSoup

T = TypeVar("T")

_FENCE_RE = re.compile(r"```(?:json)?\s*(.*?)```", re.DOTALL | re.IGNORECASE)


@dataclass(frozen=True)
class ParseResult(Generic[T]):
    value: T | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "ParseResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: str) -> "ParseResult[T]":
        return cls(error=error)


def _decode(raw: Any) -> ParseResult[Any]:
    """Accept native JSON values, JSON text, or JSON wrapped in a ``` fence."""
    if raw is None:
        return ParseResult.failure("missing value")
    if not isinstance(raw, str):
        return ParseResult.success(raw)
    text = raw.strip()
    fenced = _FENCE_RE.search(text)
    if fenced:
        text = fenced.group(1).strip()
    if not text:
        return ParseResult.failure("empty value")
    try:
        return ParseResult.success(json.loads(text))
    except json.JSONDecodeError as exc:
        # some responses carry prose around the JSON body
        for opener, closer in (("[", "]"), ("{", "}")):
            start, end = text.find(opener), text.rfind(closer)
            if start != -1 and end > start:
                try:
                    return ParseResult.success(json.loads(text[start : end + 1]))
                except json.JSONDecodeError:
                    continue
        return ParseResult.failure(f"malformed JSON: {exc.msg}")


def plain_text(value: str | None) -> str:
    if not value:
        return ""
    if "<" not in value:
        return value.strip()
    soup = BeautifulSoup(value, "lxml")
    paragraphs = [p.get_text(" ", strip=True) for p in soup.find_all("p")]
    if paragraphs:
        return "\n\n".join(p for p in paragraphs if p)
    return soup.get_text(" ", strip=True)


def limit_words(text: str, limit: int) -> str:
    words = text.split()
    if len(words) <= limit:
        return text.strip()
    return " ".join(words[:limit])


def word_count(text: str) -> int:
    return len(text.split())


def parse_related_searches(raw: Any, words: int = 5) -> ParseResult[list[str]]:
    decoded = _decode(raw)
    if not decoded.ok:
        return ParseResult.failure(f"related searches: {decoded.error}")
    items = decoded.value
    if isinstance(items, dict):
        items = items.get("relatedSearches") or items.get("searches")
    if not isinstance(items, list):
        return ParseResult.failure("related searches: expected a list")
    phrases: list[str] = []
    for item in items:
        if isinstance(item, dict):
            item = item.get("text") or item.get("search_text") or item.get("searchText")
        if not isinstance(item, str):
            continue
        phrase = limit_words(" ".join(item.split()), words)
        if phrase:
            phrases.append(phrase)
    return ParseResult.success(phrases)


def parse_web_results(raw: Any) -> ParseResult[list[dict[str, Any]]]:
    decoded = _decode(raw)
    if not decoded.ok:
        return ParseResult.failure(f"web results: {decoded.error}")
    items = decoded.value
    if isinstance(items, dict):
        items = items.get("webResults") or items.get("results")
    if not isinstance(items, list):
        return ParseResult.failure("web results: expected a list")
    results: list[dict[str, Any]] = []
    for item in items:
        if not isinstance(item, dict):
            continue
        title = str(item.get("title") or "").strip()
        url = str(item.get("url") or item.get("link") or "").strip()
        if not title or not url:
            continue
        results.append(
            {
                "title": title,
                "description": str(item.get("description") or "").strip(),
                "url": url,
                "name": str(item.get("name") or "").strip(),
                "is_sponsored": bool(item.get("is_sponsored") or item.get("isSponsored")),
                "logo_url": item.get("logo_url") or item.get("logoUrl") or None,
            }
        )
    return ParseResult.success(results)


def parse_pre_landing(raw: Any) -> ParseResult[dict[str, str]]:
    decoded = _decode(raw)
    if not decoded.ok:
        return ParseResult.failure(f"pre-landing: {decoded.error}")
    item = decoded.value
    if not isinstance(item, dict):
        return ParseResult.failure("pre-landing: expected an object")
    headline = str(item.get("headline") or "").strip()
    if not headline:
        return ParseResult.failure("pre-landing: headline is missing")
    return ParseResult.success(
        {
            "headline": headline,
            "description": str(item.get("description") or "").strip(),
            "button_text": str(item.get("buttonText") or item.get("button_text") or "Visit Now").strip(),
            "main_image_url": str(item.get("mainImageUrl") or item.get("main_image_url") or "").strip(),
        }
    )
