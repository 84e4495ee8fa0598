"""Service configuration for recipify.

:class:`RecipifyConfig` is a dataclass that captures every tuneable knob of
the pipeline.  Instances are usually built from the process environment with
:meth:`RecipifyConfig.from_env` and passed to
:meth:`recipify.pipeline.RecipePipeline.from_config`.

Three values are credentials and have no default:

* ``anthropic_api_key`` (``ANTHROPIC_API_KEY``)
* ``notion_token`` (``NOTION_API_KEY``)
* ``notion_parent_page_id`` (``NOTION_PARENT_PAGE_ID``)

Their absence is reported by :meth:`RecipifyConfig.require_credentials`
before any network call is made.
"""

from __future__ import annotations

import dataclasses
import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from recipify.errors import ConfigurationError

DEFAULT_MODEL = "claude-sonnet-4-20250514"

# Fields that must never appear in logs or reprs.
_SECRET_FIELDS: frozenset[str] = frozenset({"anthropic_api_key", "notion_token"})

# Credential field -> environment variable it is read from.
_REQUIRED_ENV: dict[str, str] = {
    "anthropic_api_key": "ANTHROPIC_API_KEY",
    "notion_token": "NOTION_API_KEY",
    "notion_parent_page_id": "NOTION_PARENT_PAGE_ID",
}

_TRUTHY = frozenset({"1", "true", "yes", "on"})


@dataclass
class RecipifyConfig:
    """Complete configuration for a recipify pipeline.

    Parameters
    ----------
    anthropic_api_key:
        Anthropic API key used by the extractor.  Never logged.
    notion_token:
        Notion integration token used by the publisher.  Never logged.
    notion_parent_page_id:
        ID of the Notion page new recipe pages are created under.
    model:
        Claude model name used for extraction.
    max_tokens:
        Upper bound on the length of the model reply.
    max_page_chars:
        Fetched page text is truncated to this many characters before it is
        embedded in the extraction prompt.
    timeout_seconds:
        HTTP timeout applied to the fetcher, the Notion transport and the
        Anthropic client.
    notion_version:
        Value of the ``Notion-Version`` header.
    notion_base_url:
        Notion API root URL.  Override for proxies or tests.
    user_agent:
        ``User-Agent`` header sent when fetching recipe pages.
    http_proxy:
        Optional HTTP/HTTPS proxy URL for the fetcher and Notion transport.
    metrics:
        Optional :class:`~recipify.observability.MetricsHook` backend.
    debug_dump_payload:
        Write the (redacted) Notion API payload to *stderr*.
    """

    # ── Credentials ─────────────────────────────────────────────────────
    anthropic_api_key: str = ""

    notion_token: str = ""

    notion_parent_page_id: str = ""

    # ── Extraction ──────────────────────────────────────────────────────
    model: str = DEFAULT_MODEL

    max_tokens: int = 4096

    max_page_chars: int = 100_000

    # ── HTTP ────────────────────────────────────────────────────────────
    timeout_seconds: float = 30.0

    notion_version: str = "2022-06-28"

    notion_base_url: str = "https://api.notion.com/v1"

    user_agent: str = "recipify/0.1.0"

    http_proxy: str | None = None

    # ── Observability ──────────────────────────────────────────────────
    metrics: Any | None = None

    # ── Debug ───────────────────────────────────────────────────────────
    debug_dump_payload: bool = False

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        from urllib.parse import urlparse

        parsed = urlparse(self.notion_base_url)
        if parsed.scheme == "http" and parsed.hostname not in (
            "localhost",
            "127.0.0.1",
            "::1",
        ):
            raise ValueError(
                f"notion_base_url uses insecure HTTP for non-local host '{parsed.hostname}'. "
                "Use HTTPS to protect your API token, or target localhost for testing."
            )

        if self.max_tokens < 1:
            raise ValueError(f"max_tokens must be >= 1, got {self.max_tokens}")
        if self.max_page_chars < 1:
            raise ValueError(f"max_page_chars must be >= 1, got {self.max_page_chars}")
        if self.timeout_seconds <= 0:
            raise ValueError(f"timeout_seconds must be > 0, got {self.timeout_seconds}")

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        **overrides: Any,
    ) -> RecipifyConfig:
        """Build a config from environment variables.

        Missing credentials are left empty here; call
        :meth:`require_credentials` to enforce them.  Keyword *overrides*
        win over the environment.
        """
        env = os.environ if environ is None else environ
        values: dict[str, Any] = {
            field: env.get(var, "") for field, var in _REQUIRED_ENV.items()
        }
        if "RECIPIFY_MODEL" in env:
            values["model"] = env["RECIPIFY_MODEL"]
        if "RECIPIFY_MAX_TOKENS" in env:
            values["max_tokens"] = int(env["RECIPIFY_MAX_TOKENS"])
        if "RECIPIFY_MAX_PAGE_CHARS" in env:
            values["max_page_chars"] = int(env["RECIPIFY_MAX_PAGE_CHARS"])
        if "RECIPIFY_TIMEOUT_SECONDS" in env:
            values["timeout_seconds"] = float(env["RECIPIFY_TIMEOUT_SECONDS"])
        if env.get("RECIPIFY_HTTP_PROXY"):
            values["http_proxy"] = env["RECIPIFY_HTTP_PROXY"]
        if "RECIPIFY_DEBUG_DUMP_PAYLOAD" in env:
            values["debug_dump_payload"] = (
                env["RECIPIFY_DEBUG_DUMP_PAYLOAD"].strip().lower() in _TRUTHY
            )
        values.update(overrides)
        return cls(**values)

    def require_credentials(self) -> None:
        """Raise :class:`ConfigurationError` if any credential is missing.

        All missing names are reported at once, by environment variable.
        """
        missing = [
            var for field, var in _REQUIRED_ENV.items()
            if not getattr(self, field).strip()
        ]
        if missing:
            raise ConfigurationError(
                message=f"Missing required configuration: {', '.join(missing)}",
                context={"missing": missing},
            )

    def secrets(self) -> list[str]:
        """Return the non-empty secret values, for redaction."""
        return [
            getattr(self, name) for name in sorted(_SECRET_FIELDS)
            if getattr(self, name)
        ]

    def __repr__(self) -> str:
        """Mask secrets to prevent accidental credential leakage."""
        parts: list[str] = []
        for f in dataclasses.fields(self):
            val = getattr(self, f.name)
            if f.name in _SECRET_FIELDS:
                masked = f"...{val[-4:]}" if len(val) >= 4 else "****"
                parts.append(f"{f.name}='{masked}'")
            else:
                parts.append(f"{f.name}={val!r}")
        return f"RecipifyConfig({', '.join(parts)})"
