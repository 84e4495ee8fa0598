"""Recipe extraction with Anthropic Claude."""

from __future__ import annotations

import json
import re
import time
from typing import Any

from anthropic import Anthropic, APIError

from recipify.config import RecipifyConfig
from recipify.errors import ExtractionError
from recipify.models import RecipeRecord
from recipify.observability import get_logger
from recipify.prompts import SYSTEM_PROMPT, build_extraction_prompt

log = get_logger("recipify.extractor")

_FENCE_RE = re.compile(r"^```[A-Za-z0-9_-]*[ \t]*\r?\n?(.*?)\r?\n?```$", re.DOTALL)


def strip_code_fence(text: str) -> str:
    """Remove a surrounding ```` ``` ```` / ```` ```json ```` fence, if any."""
    text = text.strip()
    match = _FENCE_RE.match(text)
    if match is not None:
        return match.group(1).strip()
    return text


def parse_recipe_reply(reply: str, source_url: str = "") -> RecipeRecord:
    """Parse the model's reply into a :class:`RecipeRecord`.

    Raises
    ------
    ExtractionError
        If the reply is not a JSON object with string ``name`` and
        ``content`` fields.
    """
    payload = strip_code_fence(reply)
    try:
        data = json.loads(payload)
    except json.JSONDecodeError as exc:
        raise ExtractionError(
            message=f"Model reply is not valid JSON: {exc.msg}",
            context={"source_url": source_url, "reason": "invalid_json"},
            cause=exc,
        ) from exc

    if not isinstance(data, dict):
        raise ExtractionError(
            message=f"Model reply is a JSON {type(data).__name__}, expected an object",
            context={"source_url": source_url, "reason": "not_an_object"},
        )

    for key in ("name", "content"):
        if not isinstance(data.get(key), str):
            raise ExtractionError(
                message=f"Model reply is missing string field '{key}'",
                context={"source_url": source_url, "reason": f"missing_{key}"},
            )

    return RecipeRecord(name=data["name"].strip(), content=data["content"])


class RecipeExtractor:
    """Turn page text into a :class:`RecipeRecord` with one Claude call.

    The Anthropic client's built-in retries are disabled; a failed call
    fails the pipeline.

    Parameters
    ----------
    config:
        Supplies the API key, model, ``max_tokens`` and timeout.
    client:
        Optional pre-built :class:`anthropic.Anthropic` client (tests pass
        a mock).
    """

    def __init__(self, config: RecipifyConfig, client: Any | None = None) -> None:
        self._config = config
        self._client = client if client is not None else Anthropic(
            api_key=config.anthropic_api_key,
            max_retries=0,
            timeout=config.timeout_seconds * 4,
        )

    def extract(self, page_text: str, source_url: str) -> RecipeRecord:
        """Extract the recipe on *page_text*, citing *source_url*.

        Raises
        ------
        ExtractionError
            If the API call fails, the reply has no text, or the text
            cannot be parsed into a recipe record.
        """
        prompt = build_extraction_prompt(page_text, source_url)
        t0 = time.monotonic()
        try:
            message = self._client.messages.create(
                model=self._config.model,
                max_tokens=self._config.max_tokens,
                system=SYSTEM_PROMPT,
                messages=[{"role": "user", "content": prompt}],
            )
        except APIError as exc:
            raise ExtractionError(
                message=f"Claude request failed: {exc}",
                context={"source_url": source_url, "reason": "api_error"},
                cause=exc,
            ) from exc

        reply = "".join(
            getattr(part, "text", "") for part in (message.content or [])
        )
        if not reply.strip():
            raise ExtractionError(
                message="Claude returned no text content",
                context={"source_url": source_url, "reason": "empty_reply"},
            )

        record = parse_recipe_reply(reply, source_url)
        log.debug(
            "Recipe extracted",
            extra={
                "extra_fields": {
                    "op": "extract",
                    "url": source_url,
                    "recipe": record.name,
                    "model": self._config.model,
                    "stop_reason": getattr(message, "stop_reason", None),
                    "elapsed_ms": round((time.monotonic() - t0) * 1000, 1),
                }
            },
        )
        return record

    def close(self) -> None:
        close = getattr(self._client, "close", None)
        if callable(close):
            close()
