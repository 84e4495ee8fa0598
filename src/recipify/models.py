"""Public data models for recipify.

Plain dataclasses shared by the converter, the pipeline stages and the
request handler.  :class:`Block` and :class:`RecipeRecord` are frozen so
they can be compared and hashed structurally.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

# ---------------------------------------------------------------------------
# Blocks
# ---------------------------------------------------------------------------

class BlockKind(str, Enum):
    """The structural variants a converted line can become.

    Values are the Notion block type each variant is published as.
    """

    HEADING = "heading_1"
    PARAGRAPH = "paragraph"
    BULLETED_LIST_ITEM = "bulleted_list_item"
    NUMBERED_LIST_ITEM = "numbered_list_item"


@dataclass(frozen=True)
class Block:
    """One structural unit of output: a single line of text and its kind.

    Attributes
    ----------
    kind:
        Which variant this block is.
    text:
        The line's text with any leading marker (``"# "``, ``"- "``,
        ``"1. "``) removed.
    """

    kind: BlockKind
    text: str

    @classmethod
    def heading(cls, text: str) -> Block:
        return cls(BlockKind.HEADING, text)

    @classmethod
    def paragraph(cls, text: str) -> Block:
        return cls(BlockKind.PARAGRAPH, text)

    @classmethod
    def bulleted(cls, text: str) -> Block:
        return cls(BlockKind.BULLETED_LIST_ITEM, text)

    @classmethod
    def numbered(cls, text: str) -> Block:
        return cls(BlockKind.NUMBERED_LIST_ITEM, text)


# ---------------------------------------------------------------------------
# Pipeline records
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class RecipeRecord:
    """Structured recipe returned by the extractor.

    Attributes
    ----------
    name:
        Recipe title; becomes the Notion page title.
    content:
        Markdown body following the ``# Overview`` / ``# Notes`` /
        ``# Ingredients`` / ``# Supplies`` / ``# Instructions`` convention.
    """

    name: str
    content: str


@dataclass
class PublishResult:
    """Result of creating a Notion page.

    Attributes
    ----------
    page_id:
        The Notion UUID of the created page.
    url:
        The page URL as reported by Notion.
    blocks_created:
        Total number of child blocks written to the page.
    """

    page_id: str
    url: str
    blocks_created: int = 0


@dataclass
class PipelineResult:
    """Result of one successful pipeline run."""

    published_url: str
    recipe_name: str
    page_id: str = ""
    blocks_created: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Success body returned by the request handler."""
        return {
            "success": True,
            "publishedUrl": self.published_url,
            "recipeName": self.recipe_name,
        }


@dataclass
class ApiResponse:
    """Status code and JSON body produced by the request handler."""

    status: int
    body: dict[str, Any] = field(default_factory=dict)
