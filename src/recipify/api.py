"""Request/response entry point.

:func:`handle_request` is the whole public surface of the service: it takes
a request method and body, runs the pipeline for ``POST {"url": ...}``, and
returns an :class:`~recipify.models.ApiResponse`.  :func:`create_app` wraps
it as a WSGI application for any WSGI server.

Success body::

    {"success": true, "publishedUrl": "https://www.notion.so/...",
     "recipeName": "Banana Bread"}

Failure body::

    {"success": false, "error": "EXTRACTION_ERROR",
     "details": "Model reply is not valid JSON: Expecting value"}
"""

from __future__ import annotations

import json
from collections.abc import Callable, Iterable
from typing import Any, Protocol
from urllib.parse import urlparse

from recipify.config import RecipifyConfig
from recipify.errors import ErrorCode, InternalError, InvalidRequestError, RecipifyError
from recipify.models import ApiResponse, PipelineResult
from recipify.observability import get_logger
from recipify.pipeline import RecipePipeline
from recipify.utils.redact import redact_text

log = get_logger("recipify.api")

_STATUS_BY_CODE: dict[str, int] = {
    ErrorCode.INVALID_REQUEST.value: 400,
    ErrorCode.CONFIG_ERROR.value: 500,
    ErrorCode.NETWORK_ERROR.value: 502,
    ErrorCode.EXTRACTION_ERROR.value: 502,
    ErrorCode.PUBLISH_ERROR.value: 502,
    ErrorCode.INTERNAL_ERROR.value: 500,
}

_REASONS: dict[int, str] = {
    200: "OK",
    400: "Bad Request",
    405: "Method Not Allowed",
    500: "Internal Server Error",
    502: "Bad Gateway",
}


class Runner(Protocol):
    def run(self, url: str) -> PipelineResult: ...


def error_response(error: RecipifyError, status: int | None = None) -> ApiResponse:
    """Build the failure response for *error*."""
    code = str(error.code)
    return ApiResponse(
        status=status if status is not None else _STATUS_BY_CODE.get(code, 500),
        body={"success": False, "error": code, "details": redact_text(error.message)},
    )


def parse_url(body: Any) -> str:
    """Return the ``url`` field of a request body.

    *body* may be a dict or a JSON document as ``str`` / ``bytes``.

    Raises
    ------
    InvalidRequestError
        If the body is not a JSON object or ``url`` is not an absolute
        ``http(s)`` URL.
    """
    if isinstance(body, (bytes, bytearray)):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InvalidRequestError("Request body is not UTF-8", cause=exc) from exc
    if isinstance(body, str):
        try:
            body = json.loads(body) if body.strip() else {}
        except json.JSONDecodeError as exc:
            raise InvalidRequestError(
                f"Request body is not valid JSON: {exc.msg}", cause=exc
            ) from exc
    if not isinstance(body, dict):
        raise InvalidRequestError("Request body must be a JSON object")

    url = body.get("url")
    if not isinstance(url, str) or not url.strip():
        raise InvalidRequestError("Recipe URL is required", context={"field": "url"})

    url = url.strip()
    try:
        parsed = urlparse(url)
    except ValueError as exc:
        raise InvalidRequestError(
            f"Recipe URL is malformed: {exc}", context={"field": "url"}, cause=exc
        ) from exc
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise InvalidRequestError(
            f"Recipe URL must be an absolute http(s) URL, got {url!r}",
            context={"field": "url"},
        )
    return url


def handle_request(method: str, body: Any, pipeline: Runner) -> ApiResponse:
    """Handle one request.

    Only ``POST`` is accepted; anything else is rejected with ``405``
    without touching the pipeline.  Every exception raised by the pipeline
    becomes a single failure response; anything that is not a
    :class:`RecipifyError` is reported as ``INTERNAL_ERROR`` with ``500``.
    """
    if (method or "").upper() != "POST":
        return error_response(
            InvalidRequestError("Method not allowed", context={"method": method}),
            status=405,
        )

    try:
        url = parse_url(body)
    except InvalidRequestError as exc:
        return error_response(exc)

    try:
        result = pipeline.run(url)
    except RecipifyError as exc:
        log.warning(
            "Failed to process recipe",
            extra={"extra_fields": {"url": url, "code": str(exc.code), "error": exc.message}},
        )
        return error_response(exc)
    except Exception as exc:
        log.error(
            "Unexpected error while processing recipe",
            exc_info=True,
            extra={"extra_fields": {"url": url, "error_type": type(exc).__name__}},
        )
        return error_response(InternalError(f"Unexpected error: {exc}", cause=exc))

    log.info(
        "Recipe published",
        extra={
            "extra_fields": {
                "url": url,
                "recipe": result.recipe_name,
                "published_url": result.published_url,
            }
        },
    )
    return ApiResponse(status=200, body=result.to_dict())


# ---------------------------------------------------------------------------
# WSGI
# ---------------------------------------------------------------------------

def _read_body(environ: dict[str, Any]) -> bytes:
    try:
        length = int(environ.get("CONTENT_LENGTH") or 0)
    except ValueError:
        length = 0
    if length <= 0:
        return b""
    return environ["wsgi.input"].read(length)


def create_app(
    config: RecipifyConfig | None = None,
    pipeline: Runner | None = None,
) -> Callable[[dict[str, Any], Callable[..., Any]], Iterable[bytes]]:
    """Build a WSGI application serving :func:`handle_request`.

    The pipeline is built immediately, so missing credentials fail at
    startup rather than on the first request.
    """
    if pipeline is None:
        pipeline = RecipePipeline.from_config(
            config if config is not None else RecipifyConfig.from_env()
        )
    runner = pipeline

    def app(environ: dict[str, Any], start_response: Callable[..., Any]) -> Iterable[bytes]:
        method = environ.get("REQUEST_METHOD", "GET")
        body = _read_body(environ) if method.upper() == "POST" else b""
        response = handle_request(method, body, runner)

        payload = json.dumps(response.body).encode("utf-8")
        headers = [
            ("Content-Type", "application/json"),
            ("Content-Length", str(len(payload))),
        ]
        if response.status == 405:
            headers.append(("Allow", "POST"))
        reason = _REASONS.get(response.status, "")
        start_response(f"{response.status} {reason}".rstrip(), headers)
        return [payload]

    return app
