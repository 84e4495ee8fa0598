"""recipify — save recipe webpages as Notion pages.

A recipe URL is fetched, Claude rewrites the page as structured recipe
Markdown, the Markdown is converted into Notion blocks, and a new page is
created under a configured parent page.

Public re-exports
-----------------

* **Pipeline:** :class:`RecipePipeline`, :func:`handle_request`,
  :func:`create_app`
* **Conversion:** :func:`convert`, :func:`render_markdown`,
  :func:`build_blocks`
* **Configuration:** :class:`RecipifyConfig`
* **Errors:** every :class:`RecipifyError` subclass and :class:`ErrorCode`
* **Models:** :class:`Block`, :class:`BlockKind` and the result dataclasses

Usage::

    from recipify import convert

    blocks = convert("# Ingredients\\n- 2 eggs")
"""

from __future__ import annotations

__version__ = "0.1.0"

# ── Entry points ───────────────────────────────────────────────────────
from recipify.api import create_app, handle_request

# ── Configuration ───────────────────────────────────────────────────────
from recipify.config import RecipifyConfig

# ── Conversion ─────────────────────────────────────────────────────────
from recipify.converter import build_blocks, convert, render_markdown

# ── Errors ──────────────────────────────────────────────────────────────
from recipify.errors import (
    ConfigurationError,
    ErrorCode,
    ExtractionError,
    InternalError,
    InvalidRequestError,
    NetworkError,
    PublishError,
    RecipifyError,
)

# ── Stages ─────────────────────────────────────────────────────────────
from recipify.extractor import RecipeExtractor
from recipify.fetcher import PageFetcher

# ── Models ──────────────────────────────────────────────────────────────
from recipify.models import (
    ApiResponse,
    Block,
    BlockKind,
    PipelineResult,
    PublishResult,
    RecipeRecord,
)
from recipify.pipeline import RecipePipeline
from recipify.publisher import NotionPublisher

__all__ = [
    "__version__",
    # Entry points
    "RecipePipeline",
    "create_app",
    "handle_request",
    # Stages
    "PageFetcher",
    "RecipeExtractor",
    "NotionPublisher",
    # Conversion
    "convert",
    "render_markdown",
    "build_blocks",
    # Configuration
    "RecipifyConfig",
    # Errors
    "RecipifyError",
    "ErrorCode",
    "InvalidRequestError",
    "InternalError",
    "ConfigurationError",
    "NetworkError",
    "ExtractionError",
    "PublishError",
    # Models
    "Block",
    "BlockKind",
    "RecipeRecord",
    "PublishResult",
    "PipelineResult",
    "ApiResponse",
]
