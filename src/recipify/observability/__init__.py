"""Observability: structured logging and metrics hooks for recipify."""

from __future__ import annotations

from .logger import StructuredFormatter, get_logger, register_secrets
from .metrics import MetricsHook, NoopMetricsHook

__all__ = [
    "MetricsHook",
    "NoopMetricsHook",
    "StructuredFormatter",
    "get_logger",
    "register_secrets",
]
