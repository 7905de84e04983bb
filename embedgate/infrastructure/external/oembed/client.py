"""oEmbed content resolver using httpx.

Implements IContentResolver: one GET against the provider endpoint per
call, no retries. Every failure (transport error, non-2xx, bad JSON, no
html member) is logged and reported as None so the caller can fall back to
showing the raw URL.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import httpx

logger = logging.getLogger(__name__)

USER_AGENT = "embed-cache-gate/1.0"


class OEmbedClient:
    """Resolve a content URL to embed markup via an oEmbed provider."""

    def __init__(
        self,
        endpoint: str,
        *,
        timeout: float = 10.0,
        max_width: int | None = None,
        omit_script: bool = False,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.endpoint = endpoint
        self.timeout = timeout
        self.max_width = max_width
        self.omit_script = omit_script
        self._shared_http = http_client

    @asynccontextmanager
    async def _http_cm(self) -> AsyncIterator[httpx.AsyncClient]:
        """Yield shared HTTP client or a short-lived one (connection reuse when shared)."""
        if self._shared_http is not None:
            yield self._shared_http
            return
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            yield client

    def _params(self, url: str) -> dict[str, Any]:
        params: dict[str, Any] = {
            "url": url,
            "omit_script": "true" if self.omit_script else "false",
            "dnt": "true",
        }
        if self.max_width:
            params["maxwidth"] = self.max_width
        return params

    async def fetch_embed(self, url: str) -> str | None:
        """Return the provider's html for url, or None if it cannot be fetched."""
        try:
            async with self._http_cm() as client:
                response = await client.get(
                    self.endpoint,
                    params=self._params(url),
                    headers={"User-Agent": USER_AGENT, "Accept": "application/json"},
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            logger.warning("oEmbed request failed for %s: %s", url, e)
            return None

        if response.status_code != 200:
            logger.warning("oEmbed provider returned %s for %s", response.status_code, url)
            return None

        try:
            data = response.json()
        except ValueError:
            logger.warning("oEmbed provider returned non-JSON body for %s", url)
            return None

        html = data.get("html") if isinstance(data, dict) else None
        if not isinstance(html, str) or not html.strip():
            logger.warning("oEmbed response for %s has no html", url)
            return None
        return html.strip()
