from __future__ import annotations

from typing import Any

import httpx
from tenacity import RetryError, retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from blog_funnel.config.settings import Settings
from blog_funnel.errors import GenerationError


class GeneratorClient:
    """Posts mode-flagged JSON bodies to the content generation endpoint."""

    def __init__(self, settings: Settings, transport: httpx.BaseTransport | None = None) -> None:
        self._settings = settings
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self._settings.generator_api_key:
            headers["Authorization"] = f"Bearer {self._settings.generator_api_key}"
        return headers

    def _post(self, payload: dict[str, Any]) -> httpx.Response:
        timeout = httpx.Timeout(self._settings.http_timeout)
        with httpx.Client(timeout=timeout, transport=self._transport) as client:
            return client.post(self._settings.generator_url, headers=self._headers(), json=payload)

    def call(self, payload: dict[str, Any]) -> dict[str, Any]:
        attempts = max(1, self._settings.http_retries)
        fetch = retry(
            stop=stop_after_attempt(attempts),
            wait=wait_exponential(multiplier=1, min=1, max=8),
            retry=retry_if_exception_type(httpx.TransportError),
        )(self._post)
        try:
            response = fetch(payload)
        except RetryError as exc:
            raise GenerationError(f"Generation request failed: {exc.last_attempt.exception()}") from exc
        except httpx.HTTPError as exc:
            raise GenerationError(f"Generation request failed: {exc}") from exc

        if response.status_code >= 400:
            detail = _error_detail(response)
            raise GenerationError(f"Generation service returned {response.status_code}: {detail}")
        try:
            data = response.json()
        except ValueError as exc:
            raise GenerationError("Generation service returned malformed JSON") from exc
        if not isinstance(data, dict):
            raise GenerationError("Generation service returned an unexpected payload")
        if data.get("error"):
            raise GenerationError(str(data["error"]))
        return data


def _error_detail(response: httpx.Response) -> str:
    try:
        data = response.json()
    except ValueError:
        return response.text[:200]
    if isinstance(data, dict) and data.get("error"):
        return str(data["error"])
    return response.text[:200]
