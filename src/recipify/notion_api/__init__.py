"""recipify.notion_api -- Notion API transport and endpoint wrappers.

* :mod:`.transport` -- HTTP transport with auth and typed errors.
* :mod:`.pages` -- page creation.
* :mod:`.blocks` -- appending children to a page.
"""

from __future__ import annotations

from .blocks import BlockAPI
from .pages import PageAPI, title_property
from .transport import NotionTransport

__all__ = [
    "BlockAPI",
    "NotionTransport",
    "PageAPI",
    "title_property",
]
