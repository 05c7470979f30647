from __future__ import annotations

import json
import logging

import httpx
import pytest

from blog_funnel.errors import GenerationError
from blog_funnel.parsers.generator import parse_pre_landing, parse_related_searches, parse_web_results, plain_text
from blog_funnel.providers.generator import GeneratorClient
from blog_funnel.services.generation_service import CONTENT_WORDS, GenerationService

WORDS = " ".join(f"word{i}" for i in range(130))


def _service(settings, handler) -> tuple[GenerationService, list[dict]]:
    sent: list[dict] = []

    def record(request: httpx.Request) -> httpx.Response:
        sent.append({"body": json.loads(request.content), "headers": request.headers})
        return handler(request)

    client = GeneratorClient(settings, transport=httpx.MockTransport(record))
    return GenerationService(client), sent


def test_generate_content_limits_words_and_pads_searches(settings) -> None:
    service, sent = _service(
        settings,
        lambda request: httpx.Response(
            200,
            json={
                "content": f"<p>{WORDS}</p>",
                "imageUrl": "https://img.example/a.png",
                "relatedSearches": ["best remote jobs for new graduates today", "remote jobs"],
            },
        ),
    )

    generated = service.generate_content("Remote Work", "Job Seeking")

    assert len(generated.content.split()) == CONTENT_WORDS
    assert generated.image_url == "https://img.example/a.png"
    assert generated.related_searches[:2] == ["best remote jobs for new", "remote jobs"]
    assert generated.related_searches[2:] == [f"Related search {n} for Remote Work" for n in range(3, 7)]
    assert generated.padded == 4

    body = sent[0]["body"]
    assert body["title"] == "Remote Work"
    assert body["category"] == "Job Seeking"
    assert body["imageOnly"] is False
    assert body["contentWords"] == 100
    assert body["searchPhraseWords"] == 5
    assert sent[0]["headers"]["Authorization"] == "Bearer test-key"


def test_generate_content_warns_on_short_search_phrases(settings, caplog) -> None:
    service, _ = _service(
        settings,
        lambda request: httpx.Response(
            200,
            json={
                "content": WORDS,
                "relatedSearches": ["best remote jobs for graduates", "remote jobs"],
            },
        ),
    )

    with caplog.at_level(logging.WARNING, logger="blog_funnel.services.generation_service"):
        generated = service.generate_content("Remote Work")

    assert generated.related_searches[:2] == ["best remote jobs for graduates", "remote jobs"]
    assert "1 related searches for 'Remote Work' are not 5 words: ['remote jobs']" in caplog.text


def test_generate_content_accepts_fenced_json(settings) -> None:
    fenced = "Here you go:\n```json\n[\"a\", \"b\", \"c\", \"d\", \"e\", \"f\"]\n```"
    service, _ = _service(
        settings,
        lambda request: httpx.Response(200, json={"content": "short body", "relatedSearches": fenced}),
    )

    generated = service.generate_content("Topic")

    assert generated.related_searches == ["a", "b", "c", "d", "e", "f"]
    assert generated.padded == 0


def test_generate_content_rejects_malformed_searches(settings) -> None:
    service, _ = _service(
        settings,
        lambda request: httpx.Response(200, json={"content": "body", "relatedSearches": "[not json"}),
    )

    with pytest.raises(GenerationError, match="malformed JSON"):
        service.generate_content("Topic")


def test_generate_content_needs_a_title(settings) -> None:
    service, sent = _service(settings, lambda request: httpx.Response(200, json={}))

    with pytest.raises(GenerationError, match="title"):
        service.generate_content("   ")
    assert sent == []


def test_error_status_is_reported(settings) -> None:
    service, _ = _service(settings, lambda request: httpx.Response(500, json={"error": "model overloaded"}))

    with pytest.raises(GenerationError, match="500: model overloaded"):
        service.generate_image("Topic")


def test_error_field_in_body_is_reported(settings) -> None:
    service, _ = _service(settings, lambda request: httpx.Response(200, json={"error": "quota exceeded"}))

    with pytest.raises(GenerationError, match="quota exceeded"):
        service.generate_image("Topic")


def test_transport_failure_becomes_generation_error(settings) -> None:
    def fail(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    service, _ = _service(settings, fail)

    with pytest.raises(GenerationError, match="connection refused"):
        service.generate_image("Topic")


def test_generate_image_sends_image_only(settings) -> None:
    service, sent = _service(settings, lambda request: httpx.Response(200, json={"imageUrl": "https://i.example"}))

    assert service.generate_image("Topic") == "https://i.example"
    assert sent[0]["body"]["imageOnly"] is True


def test_generate_web_results(settings) -> None:
    items = [{"title": f"T{i}", "url": f"https://t{i}.example", "isSponsored": i == 0} for i in range(8)]
    items.append({"title": "", "url": "https://skip.example"})
    service, sent = _service(settings, lambda request: httpx.Response(200, json={"webResults": items}))

    results = service.generate_web_results("remote jobs", "Job Seeking")

    assert len(results) == 6
    assert results[0]["is_sponsored"] is True
    assert results[1]["is_sponsored"] is False
    assert sent[0]["body"]["generateWebResults"] is True
    assert sent[0]["body"]["searchText"] == "remote jobs"


def test_generate_pre_landing(settings) -> None:
    service, sent = _service(
        settings,
        lambda request: httpx.Response(
            200, json={"preLanding": {"headline": "Get hired", "description": "Now", "buttonText": "Apply"}}
        ),
    )

    config = service.generate_pre_landing("Acme Careers")

    assert config["headline"] == "Get hired"
    assert config["button_text"] == "Apply"
    assert sent[0]["body"]["webResultTitle"] == "Acme Careers"


def test_parsers_accept_alternate_shapes() -> None:
    searches = parse_related_searches({"relatedSearches": [{"text": "one"}, {"searchText": "two"}, 3]})
    assert searches.value == ["one", "two"]

    results = parse_web_results('Results: [{"title": "A", "link": "https://a.example"}] done')
    assert results.value[0]["url"] == "https://a.example"

    assert not parse_pre_landing({"description": "no headline"}).ok
    assert not parse_web_results(None).ok


def test_plain_text_joins_paragraphs() -> None:
    assert plain_text("<p>One <b>two</b></p><p>three</p>") == "One two\n\nthree"
    assert plain_text("already plain") == "already plain"
