"""Metrics hook protocol and no-op default.

The pipeline reports counters and timings through whatever object is set
as :attr:`RecipifyConfig.metrics`.  Without one, :class:`NoopMetricsHook`
discards everything.

Emitted metric names:

* ``recipify.pipeline_runs_total``   -- counter, tagged ``status``
* ``recipify.stage_duration_ms``     -- timing, tagged ``stage``
* ``recipify.stage_failures_total``  -- counter, tagged ``stage`` and ``code``
* ``recipify.blocks_created_total``  -- counter
* ``recipify.notion_requests_total`` -- counter, tagged ``method`` and ``status``
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class MetricsHook(Protocol):
    """Protocol that any metrics backend must satisfy.

    Tags are string key-value pairs; backends map them onto their own
    labelling scheme.
    """

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Increment a counter metric."""
        ...

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Record a duration in milliseconds."""
        ...


class NoopMetricsHook:
    """Metrics backend that silently discards all data points."""

    __slots__ = ()

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass
