"""Fetch the raw text of a recipe webpage."""

from __future__ import annotations

import time
from typing import Any

import httpx

from recipify.config import RecipifyConfig
from recipify.errors import NetworkError
from recipify.observability import get_logger

log = get_logger("recipify.fetcher")


class PageFetcher:
    """Download recipe pages with a single ``GET`` each.

    Redirects are followed.  Text longer than ``config.max_page_chars`` is
    truncated, since only the start of the page is sent to the model.

    Parameters
    ----------
    config:
        Supplies the timeout, user agent, proxy and truncation limit.
    transport:
        Optional ``httpx`` transport, e.g. :class:`httpx.MockTransport`.
    """

    def __init__(
        self,
        config: RecipifyConfig,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._config = config

        client_kwargs: dict[str, Any] = {}
        if transport is not None:
            client_kwargs["transport"] = transport
        elif config.http_proxy:
            client_kwargs["proxy"] = config.http_proxy

        self._client = httpx.Client(
            headers={
                "User-Agent": config.user_agent,
                "Accept": "text/html,application/xhtml+xml;q=0.9,*/*;q=0.8",
            },
            timeout=httpx.Timeout(config.timeout_seconds),
            follow_redirects=True,
            **client_kwargs,
        )

    def fetch(self, url: str) -> str:
        """Return the text of *url*.

        Raises
        ------
        NetworkError
            If httpx rejects the URL, the host is unreachable, the request
            times out, or the final response is not ``2xx``.
        """
        t0 = time.monotonic()
        try:
            response = self._client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise NetworkError(
                message=f"Could not fetch {url}: {exc}",
                context={"url": url},
                cause=exc,
            ) from exc

        if not response.is_success:
            raise NetworkError(
                message=f"Fetching {url} returned HTTP {response.status_code}",
                context={"url": url, "status_code": response.status_code},
            )

        text = response.text
        truncated = len(text) > self._config.max_page_chars
        if truncated:
            text = text[: self._config.max_page_chars]

        log.debug(
            "Page fetched",
            extra={
                "extra_fields": {
                    "op": "fetch",
                    "url": url,
                    "status_code": response.status_code,
                    "chars": len(text),
                    "truncated": truncated,
                    "elapsed_ms": round((time.monotonic() - t0) * 1000, 1),
                }
            },
        )
        return text

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> PageFetcher:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()
