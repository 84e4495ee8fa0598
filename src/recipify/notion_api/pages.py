"""Page API wrapper for the Notion API.

:class:`PageAPI` is a thin wrapper around ``POST /pages``; all HTTP
concerns live in the transport.
"""

from __future__ import annotations

from typing import Any

from recipify.converter.rich_text import build_rich_text

from .transport import NotionTransport


def title_property(title: str) -> dict[str, Any]:
    """Build the minimal ``properties`` dict for a page titled *title*.

    Long titles are split into several segments like any block text.
    """
    return {"title": build_rich_text(title)}


class PageAPI:
    """Synchronous wrapper for the Notion Pages API.

    Parameters
    ----------
    transport:
        A configured :class:`NotionTransport` instance.
    """

    def __init__(self, transport: NotionTransport) -> None:
        self._transport = transport

    def create(
        self,
        parent: dict[str, Any],
        properties: dict[str, Any],
        children: list[dict[str, Any]] | None = None,
    ) -> dict[str, Any]:
        """Create a new page.

        Parameters
        ----------
        parent:
            Parent object, e.g. ``{"page_id": "..."}``.
        properties:
            Page properties; see :func:`title_property`.
        children:
            Optional block objects for the page body.  Notion accepts up to
            100 per call; append the rest with
            :meth:`BlockAPI.append_children`.

        Returns
        -------
        dict
            The created page object, including ``id`` and ``url``.
        """
        body: dict[str, Any] = {
            "parent": parent,
            "properties": properties,
        }
        if children is not None:
            body["children"] = children
        return self._transport.request("POST", "/pages", json=body)

    def archive(self, page_id: str) -> dict[str, Any]:
        """Archive (soft-delete) a page."""
        return self._transport.request(
            "PATCH", f"/pages/{page_id}", json={"archived": True}
        )
