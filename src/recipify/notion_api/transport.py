"""Synchronous HTTP transport for the Notion API.

Every request is a single attempt:

1. Send the HTTP request with auth and version headers.
2. On ``2xx`` -- return the parsed JSON response.
3. On any other status -- raise :class:`PublishError` carrying the status
   code and Notion's error code and message.
4. On a transport failure (timeout, DNS, connection reset) -- raise
   :class:`PublishError` chained to the ``httpx`` exception.

Nothing is retried; a failure surfaces to the pipeline immediately.
"""

from __future__ import annotations

import json as _json
import sys
import time
from typing import Any

import httpx

from recipify.config import RecipifyConfig
from recipify.errors import PublishError
from recipify.observability import NoopMetricsHook, get_logger
from recipify.utils.redact import redact

log = get_logger("recipify.notion")

_STATUS_DESCRIPTIONS: dict[int, str] = {
    400: "Validation error",
    401: "Authentication failed",
    403: "Permission denied",
    404: "Resource not found",
    409: "Conflict",
    429: "Rate limited",
}


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _raise_for_status(response: httpx.Response, method: str, path: str) -> None:
    """Raise :class:`PublishError` describing a non-2xx Notion response."""
    status = response.status_code
    try:
        body = response.json()
    except ValueError:
        body = {}
    if not isinstance(body, dict):
        body = {}

    notion_message = body.get("message", response.text[:500])
    notion_code = body.get("code", "")
    if status in _STATUS_DESCRIPTIONS:
        description = _STATUS_DESCRIPTIONS[status]
    elif status >= 500:
        description = f"Notion server error {status}"
    else:
        description = f"Client error {status}"

    raise PublishError(
        message=f"{description} on {method} {path}: {notion_message}",
        context={
            "status_code": status,
            "notion_code": notion_code,
            "operation": f"{method} {path}",
        },
    )


def _dump_payload(
    method: str,
    url: str,
    payload: dict | None,
    response_status: int,
    response_body: Any,
    secrets: list[str],
) -> None:
    """Write a redacted debug dump of the request/response to stderr."""
    dump: dict[str, Any] = {
        "method": method,
        "url": url,
        "response_status": response_status,
        "response_body": response_body,
    }
    if payload is not None:
        dump["request_body"] = payload
    print(
        _json.dumps(redact(dump, secrets), indent=2, default=str),
        file=sys.stderr,
    )


# ---------------------------------------------------------------------------
# Transport
# ---------------------------------------------------------------------------

class NotionTransport:
    """Synchronous HTTP transport with auth and typed errors.

    Parameters
    ----------
    config:
        A :class:`RecipifyConfig` providing the token, version header,
        base URL, timeout and proxy.
    transport:
        Optional ``httpx`` transport, e.g. :class:`httpx.MockTransport`
        in tests.
    """

    def __init__(
        self,
        config: RecipifyConfig,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._config = config
        self._metrics = config.metrics if config.metrics is not None else NoopMetricsHook()

        client_kwargs: dict[str, Any] = {}
        if transport is not None:
            client_kwargs["transport"] = transport
        elif config.http_proxy:
            client_kwargs["proxy"] = config.http_proxy

        self._client = httpx.Client(
            base_url=config.notion_base_url,
            headers={
                "Authorization": f"Bearer {config.notion_token}",
                "Notion-Version": config.notion_version,
                "Content-Type": "application/json",
            },
            timeout=httpx.Timeout(config.timeout_seconds),
            **client_kwargs,
        )

    def request(self, method: str, path: str, **kwargs: Any) -> dict:
        """Execute one HTTP request against the Notion API.

        Parameters
        ----------
        method:
            HTTP method (``GET``, ``POST``, ``PATCH``...).
        path:
            API path relative to ``notion_base_url`` (e.g. ``/pages``).
        **kwargs:
            Forwarded to :meth:`httpx.Client.request` (``json=``,
            ``params=``...).

        Returns
        -------
        dict
            Parsed JSON response body (``{}`` for empty responses).

        Raises
        ------
        PublishError
            On any non-2xx response or transport failure.
        """
        t0 = time.monotonic()
        try:
            response = self._client.request(method, path, **kwargs)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            self._metrics.increment(
                "recipify.notion_requests_total",
                tags={"method": method, "status": "error"},
            )
            log.warning(
                "Notion request failed",
                extra={
                    "extra_fields": {
                        "op": "notion_request",
                        "method": method,
                        "path": path,
                        "error": str(exc),
                    }
                },
            )
            raise PublishError(
                message=f"Network error on {method} {path}: {exc}",
                context={"operation": f"{method} {path}"},
                cause=exc,
            ) from exc

        elapsed_ms = (time.monotonic() - t0) * 1000
        self._metrics.increment(
            "recipify.notion_requests_total",
            tags={"method": method, "status": str(response.status_code)},
        )
        log.debug(
            "Notion request complete",
            extra={
                "extra_fields": {
                    "op": "notion_request",
                    "method": method,
                    "path": path,
                    "status_code": response.status_code,
                    "elapsed_ms": round(elapsed_ms, 1),
                }
            },
        )

        if self._config.debug_dump_payload:
            try:
                resp_body: Any = response.json()
            except ValueError:
                resp_body = response.text[:1000]
            _dump_payload(
                method, str(response.url), kwargs.get("json"),
                response.status_code, resp_body, self._config.secrets(),
            )

        if not 200 <= response.status_code < 300:
            _raise_for_status(response, method, path)

        if response.status_code == 204 or not response.content:
            return {}
        try:
            result: dict = response.json()
        except ValueError as exc:
            raise PublishError(
                message=f"Invalid JSON in Notion response to {method} {path}",
                context={"status_code": response.status_code, "operation": f"{method} {path}"},
                cause=exc,
            ) from exc
        return result

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()

    def __enter__(self) -> NotionTransport:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()
