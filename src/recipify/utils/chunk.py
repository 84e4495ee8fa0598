"""Batch Notion block payloads into groups the API will accept.

Both ``POST /pages`` (``children``) and ``PATCH /blocks/{id}/children``
take at most 100 blocks per request.  A long recipe can exceed that, so the
publisher creates the page with the first batch and appends the rest.
"""

from __future__ import annotations

from typing import Any

NOTION_CHILDREN_LIMIT = 100


def chunk_children(
    blocks: list[dict[str, Any]],
    size: int = NOTION_CHILDREN_LIMIT,
) -> list[list[dict[str, Any]]]:
    """Split *blocks* into consecutive batches of at most *size* items.

    An empty input returns an empty list (not ``[[]]``).

    Raises
    ------
    ValueError
        If *size* is less than 1.

    Examples
    --------
    >>> [len(b) for b in chunk_children([{"type": "paragraph"}] * 250)]
    [100, 100, 50]
    """
    if size < 1:
        raise ValueError(f"size must be >= 1, got {size}")

    return [blocks[i : i + size] for i in range(0, len(blocks), size)]
