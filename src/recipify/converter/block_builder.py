"""Convert :class:`Block` values to Notion block dicts.

Mapping:

- heading -> ``heading_1``
- paragraph -> ``paragraph``
- bulleted list item -> ``bulleted_list_item``
- numbered list item -> ``numbered_list_item``

Notion has no list wrapper block; consecutive list item blocks are grouped
into one list by Notion itself, which is why the converter keeps list runs
contiguous.
"""

from __future__ import annotations

from recipify.converter.rich_text import build_rich_text
from recipify.models import Block, BlockKind


def build_block(block: Block) -> dict:
    """Build the Notion API payload for a single block."""
    block_type = block.kind.value
    body: dict = {
        "rich_text": build_rich_text(block.text),
        "color": "default",
    }
    if block.kind is BlockKind.HEADING:
        body["is_toggleable"] = False
    return {
        "object": "block",
        "type": block_type,
        block_type: body,
    }


def build_blocks(blocks: list[Block]) -> list[dict]:
    """Build Notion API payloads for *blocks*, preserving order."""
    return [build_block(block) for block in blocks]
