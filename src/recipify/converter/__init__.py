"""Recipe Markdown <-> block conversion.

Public API:

- :func:`convert` — Markdown → list of :class:`~recipify.models.Block`.
- :func:`render_markdown` — blocks → Markdown.
- :func:`build_blocks` — blocks → Notion block dicts.
- :func:`build_rich_text` — text → Notion rich_text array.
- :func:`split_rich_text` — split oversized rich_text segments.
"""

from recipify.converter.block_builder import build_block, build_blocks
from recipify.converter.blocks_to_md import render_markdown
from recipify.converter.md_to_blocks import convert, split_lines
from recipify.converter.rich_text import build_rich_text, split_rich_text

__all__ = [
    "build_block",
    "build_blocks",
    "build_rich_text",
    "convert",
    "render_markdown",
    "split_lines",
    "split_rich_text",
]
