"""Render :class:`Block` values back to recipe Markdown.

This is the inverse of :func:`recipify.converter.md_to_blocks.convert`:
feeding the rendered text back through ``convert`` yields the same blocks.
Numbered items are renumbered from 1 at the start of every numbered run,
so the original step numbers are not preserved.

Usage::

    from recipify.converter import convert, render_markdown

    md = render_markdown(convert(text))
"""

from __future__ import annotations

from recipify.models import Block, BlockKind

_PREFIXES: dict[BlockKind, str] = {
    BlockKind.HEADING: "# ",
    BlockKind.BULLETED_LIST_ITEM: "- ",
    BlockKind.PARAGRAPH: "",
}


def render_block(block: Block, number: int = 1) -> str:
    """Render one block as a single Markdown line.

    *number* is only used for numbered list items.
    """
    if block.kind is BlockKind.NUMBERED_LIST_ITEM:
        return f"{number}. {block.text}"
    return _PREFIXES[block.kind] + block.text


def render_markdown(blocks: list[Block]) -> str:
    """Render *blocks* as Markdown, one line per block."""
    lines: list[str] = []
    numbered_counter = 0

    for block in blocks:
        if block.kind is BlockKind.NUMBERED_LIST_ITEM:
            numbered_counter += 1
        else:
            numbered_counter = 0
        lines.append(render_block(block, numbered_counter))

    return "\n".join(lines)
