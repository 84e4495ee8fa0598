"""Line-oriented Markdown to :class:`Block` conversion.

The extractor is instructed to produce a small, fixed subset of Markdown:
``# `` headings, ``- `` bullets, ``1. `` numbered steps and plain lines.
:func:`convert` turns that text into an ordered list of :class:`Block`
values in a single forward pass.  Consecutive list items of one kind are
held in a pending run and flushed into the output when the run ends (blank
line, heading, plain text, the other list kind, or end of input).

Anything that does not look like a heading or list item becomes a
paragraph, so the conversion never fails on model output.

Usage::

    from recipify.converter import convert

    blocks = convert("# Ingredients\\n- 2 eggs\\n- 1 cup flour")
"""

from __future__ import annotations

import re
from enum import Enum

from recipify.models import Block

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")

_NUMBERED_RE = re.compile(r"^[0-9]+\. (.*)$", re.DOTALL)

# A marker alone on a line loses its trailing space when the line is
# stripped; these still count as the marker with empty text.
_BARE_NUMBER_RE = re.compile(r"^[0-9]+\.$")

_HEADING_MARKER = "# "
_BULLET_MARKER = "- "


class ListKind(str, Enum):
    """Kind of list run currently being accumulated."""

    NONE = "none"
    BULLETED = "bulleted"
    NUMBERED = "numbered"


class _ConversionState:
    """Mutable accumulator for one :func:`convert` call."""

    __slots__ = ("output", "pending_items", "pending_kind")

    def __init__(self) -> None:
        self.output: list[Block] = []
        self.pending_items: list[Block] = []
        self.pending_kind: ListKind = ListKind.NONE

    def flush(self) -> None:
        """Move the pending list run into the output and reset."""
        if self.pending_items:
            self.output.extend(self.pending_items)
        self.pending_items = []
        self.pending_kind = ListKind.NONE

    def add_list_item(self, kind: ListKind, block: Block) -> None:
        if self.pending_kind not in (ListKind.NONE, kind):
            self.flush()
        self.pending_kind = kind
        self.pending_items.append(block)

    def emit(self, block: Block) -> None:
        self.flush()
        self.output.append(block)


def split_lines(markdown: str) -> list[str]:
    """Split *markdown* on ``\\r\\n``, ``\\r`` or ``\\n``."""
    return _LINE_BREAK_RE.split(markdown)


def _strip_marker(line: str, marker: str) -> str | None:
    """Return the text after *marker*, or ``None`` if *line* lacks it."""
    if line.startswith(marker):
        return line[len(marker):]
    if line == marker.rstrip():
        return ""
    return None


def _numbered_text(line: str) -> str | None:
    match = _NUMBERED_RE.match(line)
    if match is not None:
        return match.group(1)
    if _BARE_NUMBER_RE.match(line):
        return ""
    return None


def convert(markdown: str) -> list[Block]:
    """Convert recipe Markdown into an ordered list of blocks.

    Surrounding whitespace is ignored when classifying a line.  It is kept
    in paragraph text but never in marker text.  First match wins:

    1. blank: ends any list run, produces nothing
    2. ``# text``: heading
    3. ``- text``: bulleted list item
    4. ``<ASCII digits>. text``: numbered list item (the number is dropped)
    5. anything else: paragraph with the unstripped line as text

    Parameters
    ----------
    markdown:
        Markdown text, typically the ``content`` field of a
        :class:`~recipify.models.RecipeRecord`.

    Returns
    -------
    list[Block]
        Blocks in source order.  Never raises.
    """
    state = _ConversionState()

    for raw_line in split_lines(markdown):
        line = raw_line.strip()

        if not line:
            state.flush()
            continue

        text = _strip_marker(line, _HEADING_MARKER)
        if text is not None:
            state.emit(Block.heading(text))
            continue

        text = _strip_marker(line, _BULLET_MARKER)
        if text is not None:
            state.add_list_item(ListKind.BULLETED, Block.bulleted(text))
            continue

        text = _numbered_text(line)
        if text is not None:
            state.add_list_item(ListKind.NUMBERED, Block.numbered(text))
            continue

        state.emit(Block.paragraph(raw_line))

    state.flush()
    return state.output
