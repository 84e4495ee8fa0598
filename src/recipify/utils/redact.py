"""Credential redaction for safe logging and error reporting.

recipify holds two secrets (the Anthropic API key and the Notion token).
Anything that leaves the process (log lines, debug dumps, failure bodies)
goes through :func:`redact` or :func:`redact_text` first:

* Values under sensitive keys (``authorization``, ``api_key``, ``token``...)
  are masked.
* Every known secret is scrubbed from every string, showing at most its
  last four characters.
* Generic ``Bearer <tok>`` patterns are masked.
"""

from __future__ import annotations

import copy
import re
from collections.abc import Iterable
from typing import Any

# Substrings: if any of these appear in a key name (case-insensitive), the
# value is redacted.
_SENSITIVE_KEY_PATTERNS: frozenset[str] = frozenset({
    "token",
    "secret",
    "password",
    "credential",
    "authorization",
    "cookie",
    "api_key",
    "api-key",
    "x-api-key",
})

_BEARER_RE = re.compile(r"(Bearer\s+)\S+")


def _placeholder(secret: str) -> str:
    suffix = secret[-4:] if len(secret) >= 4 else "****"
    placeholder = f"<redacted:...{suffix}>"
    if secret in placeholder:
        placeholder = "<redacted>"
    return placeholder


def redact_text(text: str, secrets: Iterable[str] = ()) -> str:
    """Scrub every secret in *secrets* and any bearer token from *text*."""
    for secret in secrets:
        if secret and secret in text:
            text = text.replace(secret, _placeholder(secret))
    return _BEARER_RE.sub(lambda m: f"{m.group(1)}<redacted>", text)


def _redact_value(value: Any, secrets: tuple[str, ...]) -> Any:
    if isinstance(value, dict):
        return _redact_dict(value, secrets)
    if isinstance(value, list):
        return [_redact_value(item, secrets) for item in value]
    if isinstance(value, str):
        return redact_text(value, secrets)
    return value


def _redact_dict(d: dict, secrets: tuple[str, ...]) -> dict:
    result: dict = {}
    for key, value in d.items():
        key_lower = key.lower() if isinstance(key, str) else ""
        if any(pat in key_lower for pat in _SENSITIVE_KEY_PATTERNS):
            result[key] = "<redacted>"
        else:
            result[key] = _redact_value(value, secrets)
    return result


def redact(payload: dict, secrets: Iterable[str] = ()) -> dict:
    """Return a deep copy of *payload* with sensitive data redacted.

    Parameters
    ----------
    payload:
        The dictionary to sanitize (a Notion request body, headers, or a
        log record's structured fields).
    secrets:
        Secret strings to scrub wherever they appear.

    Returns
    -------
    dict
        A new dictionary; *payload* is never mutated.

    Examples
    --------
    >>> redact({"Authorization": "Bearer ntn_abc123"})
    {'Authorization': '<redacted>'}
    """
    safe = copy.deepcopy(payload)
    return _redact_dict(safe, tuple(s for s in secrets if s))
