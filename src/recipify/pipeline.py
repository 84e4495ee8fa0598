"""Fetch → extract → convert → publish.

:class:`RecipePipeline` runs the four stages once each, in order, and stops
at the first failure.  The Notion page is only created after extraction and
conversion have succeeded.

Usage::

    from recipify import RecipePipeline, RecipifyConfig

    with RecipePipeline.from_config(RecipifyConfig.from_env()) as pipeline:
        result = pipeline.run("https://example.com/best-banana-bread")
        print(result.published_url)
"""

from __future__ import annotations

import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any, Protocol

from recipify.config import RecipifyConfig
from recipify.converter.md_to_blocks import convert
from recipify.errors import RecipifyError
from recipify.extractor import RecipeExtractor
from recipify.fetcher import PageFetcher
from recipify.models import Block, PipelineResult, PublishResult, RecipeRecord
from recipify.observability import NoopMetricsHook, get_logger, register_secrets
from recipify.publisher import NotionPublisher

log = get_logger("recipify.pipeline")


class Fetcher(Protocol):
    def fetch(self, url: str) -> str: ...


class Extractor(Protocol):
    def extract(self, page_text: str, source_url: str) -> RecipeRecord: ...


class Publisher(Protocol):
    def publish(self, title: str, blocks: list[Block]) -> PublishResult: ...


class RecipePipeline:
    """Run one recipe URL through every stage.

    Parameters
    ----------
    fetcher, extractor, publisher:
        The stage collaborators.
    converter:
        Markdown → blocks function; :func:`recipify.converter.convert` by
        default.
    metrics:
        Optional :class:`~recipify.observability.MetricsHook`.
    """

    def __init__(
        self,
        fetcher: Fetcher,
        extractor: Extractor,
        publisher: Publisher,
        converter: Callable[[str], list[Block]] = convert,
        metrics: Any | None = None,
    ) -> None:
        self._fetcher = fetcher
        self._extractor = extractor
        self._publisher = publisher
        self._converter = converter
        self._metrics = metrics if metrics is not None else NoopMetricsHook()

    @classmethod
    def from_config(cls, config: RecipifyConfig) -> RecipePipeline:
        """Build the production pipeline.

        Raises
        ------
        ConfigurationError
            If a credential is missing.  Checked before any client is
            created, so nothing touches the network.
        """
        config.require_credentials()
        register_secrets(config.secrets())
        return cls(
            fetcher=PageFetcher(config),
            extractor=RecipeExtractor(config),
            publisher=NotionPublisher(config),
            metrics=config.metrics,
        )

    @contextmanager
    def _stage(self, name: str, **fields: Any) -> Iterator[None]:
        t0 = time.monotonic()
        try:
            yield
        except RecipifyError as exc:
            self._metrics.increment(
                "recipify.stage_failures_total",
                tags={"stage": name, "code": str(exc.code)},
            )
            log.warning(
                "Stage failed",
                extra={
                    "extra_fields": {
                        "op": name,
                        "code": str(exc.code),
                        "error": exc.message,
                        **fields,
                    }
                },
            )
            raise
        elapsed_ms = (time.monotonic() - t0) * 1000
        self._metrics.timing("recipify.stage_duration_ms", elapsed_ms, tags={"stage": name})
        log.info(
            "Stage complete",
            extra={
                "extra_fields": {
                    "op": name,
                    "elapsed_ms": round(elapsed_ms, 1),
                    **fields,
                }
            },
        )

    def run(self, url: str) -> PipelineResult:
        """Publish the recipe at *url* and return where it landed.

        Raises
        ------
        NetworkError, ExtractionError, PublishError
            From the failing stage; later stages are not run.
        """
        try:
            with self._stage("fetch", url=url):
                page_text = self._fetcher.fetch(url)

            with self._stage("extract", url=url):
                record = self._extractor.extract(page_text, url)

            with self._stage("convert", recipe=record.name):
                blocks = self._converter(record.content)

            with self._stage("publish", recipe=record.name, blocks=len(blocks)):
                published = self._publisher.publish(record.name, blocks)
        except RecipifyError:
            self._metrics.increment("recipify.pipeline_runs_total", tags={"status": "error"})
            raise

        self._metrics.increment("recipify.pipeline_runs_total", tags={"status": "success"})
        return PipelineResult(
            published_url=published.url,
            recipe_name=record.name,
            page_id=published.page_id,
            blocks_created=published.blocks_created,
        )

    def close(self) -> None:
        """Close any stage that holds network resources."""
        for stage in (self._fetcher, self._extractor, self._publisher):
            close = getattr(stage, "close", None)
            if callable(close):
                close()

    def __enter__(self) -> RecipePipeline:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()
