"""Publish converted recipe blocks as a Notion page."""

from __future__ import annotations

from recipify.config import RecipifyConfig
from recipify.converter.block_builder import build_blocks
from recipify.errors import PublishError
from recipify.models import Block, PublishResult
from recipify.notion_api import BlockAPI, NotionTransport, PageAPI, title_property
from recipify.observability import NoopMetricsHook, get_logger
from recipify.utils.chunk import chunk_children

log = get_logger("recipify.publisher")


class NotionPublisher:
    """Create one Notion page per recipe under the configured parent page.

    Parameters
    ----------
    config:
        Supplies ``notion_parent_page_id`` and the metrics backend.
    transport:
        A :class:`NotionTransport`; one is built from *config* if omitted.
    """

    def __init__(
        self,
        config: RecipifyConfig,
        transport: NotionTransport | None = None,
    ) -> None:
        self._config = config
        self._transport = transport if transport is not None else NotionTransport(config)
        self._pages = PageAPI(self._transport)
        self._blocks = BlockAPI(self._transport)
        self._metrics = config.metrics if config.metrics is not None else NoopMetricsHook()

    def publish(self, title: str, blocks: list[Block]) -> PublishResult:
        """Create a page titled *title* whose body is *blocks*.

        The page is created with the first 100 blocks; the remainder is
        appended in further batches of 100.

        Raises
        ------
        PublishError
            If Notion rejects any request or returns no page id.
        """
        payload = build_blocks(blocks)
        batches = chunk_children(payload)

        page = self._pages.create(
            parent={"page_id": self._config.notion_parent_page_id},
            properties=title_property(title),
            children=batches[0] if batches else [],
        )
        page_id = page.get("id")
        if not page_id:
            raise PublishError(
                message="Notion did not return a page id for the created page",
                context={"operation": "POST /pages"},
            )

        try:
            for batch in batches[1:]:
                self._blocks.append_children(page_id, batch)
        except PublishError:
            self._discard_partial_page(page_id)
            raise

        self._metrics.increment("recipify.blocks_created_total", value=len(payload))
        log.debug(
            "Page published",
            extra={
                "extra_fields": {
                    "op": "publish",
                    "page_id": page_id,
                    "title": title,
                    "blocks": len(payload),
                    "batches": len(batches),
                }
            },
        )
        return PublishResult(
            page_id=page_id,
            url=page.get("url", ""),
            blocks_created=len(payload),
        )

    def _discard_partial_page(self, page_id: str) -> None:
        """Archive a page whose body could not be fully written."""
        try:
            self._pages.archive(page_id)
        except PublishError as exc:
            log.warning(
                "Could not archive partially written page",
                extra={
                    "extra_fields": {
                        "op": "publish",
                        "page_id": page_id,
                        "error": exc.message,
                    }
                },
            )
        else:
            log.info(
                "Archived partially written page",
                extra={"extra_fields": {"op": "publish", "page_id": page_id}},
            )

    def close(self) -> None:
        self._transport.close()
