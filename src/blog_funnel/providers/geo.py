from __future__ import annotations

import logging

import httpx

from blog_funnel.config.settings import Settings

logger = logging.getLogger(__name__)

UNKNOWN = "unknown"


class GeoLookup:
    """Best-effort public IP and country lookups; every failure degrades to ``"unknown"``."""

    def __init__(self, settings: Settings, transport: httpx.BaseTransport | None = None) -> None:
        self._settings = settings
        self._transport = transport

    def _get_json(self, url: str) -> dict:
        timeout = httpx.Timeout(self._settings.http_timeout)
        with httpx.Client(timeout=timeout, transport=self._transport) as client:
            response = client.get(url)
            response.raise_for_status()
            data = response.json()
        return data if isinstance(data, dict) else {}

    def ip_address(self) -> str:
        try:
            return str(self._get_json(self._settings.ip_lookup_url).get("ip") or UNKNOWN)
        except Exception as exc:  # noqa: BLE001
            logger.warning("IP lookup failed: %s", exc)
            return UNKNOWN

    def country(self, ip_address: str) -> str:
        if not ip_address or ip_address == UNKNOWN:
            return UNKNOWN
        try:
            url = self._settings.geo_lookup_url.format(ip=ip_address)
            return str(self._get_json(url).get("country_name") or UNKNOWN)
        except Exception as exc:  # noqa: BLE001
            logger.warning("Country lookup failed for %s: %s", ip_address, exc)
            return UNKNOWN
