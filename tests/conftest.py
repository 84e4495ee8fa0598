"""Shared test fixtures for the recipify test suite."""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from recipify.config import RecipifyConfig

RECIPE_MARKDOWN = """\
# Overview
Inspo: https://example.com/banana-bread
Time:
- Prep: 15 minutes
- Cook: 60 minutes
- Total: 1 hour 15 minutes
A moist loaf that uses up overripe bananas.

# Notes
- Freeze slices for up to 3 months.

# Ingredients
- 3 ripe bananas
- 1/3 cup melted butter
- 1 1/2 cups all-purpose flour

# Supplies
- 9x5 inch loaf pan

# Instructions
1. Preheat the oven to 350°F.
2. Mash the 3 bananas with the 1/3 cup butter.
3. Fold in the 1 1/2 cups flour and bake for 60 minutes.
"""


@pytest.fixture
def config() -> RecipifyConfig:
    """Test configuration with dummy credentials."""
    return RecipifyConfig(
        anthropic_api_key="sk-ant-test-key-1234",
        notion_token="ntn_test_token_5678",
        notion_parent_page_id="parent-page-id",
    )


@pytest.fixture
def recipe_markdown() -> str:
    return RECIPE_MARKDOWN


def _make_message(text: str, stop_reason: str = "end_turn") -> SimpleNamespace:
    return SimpleNamespace(
        content=[SimpleNamespace(type="text", text=text)],
        stop_reason=stop_reason,
    )


@pytest.fixture
def make_message():
    """Factory for objects shaped like an Anthropic ``Message``."""
    return _make_message


@pytest.fixture
def anthropic_client() -> MagicMock:
    """A stand-in Anthropic client whose ``messages.create`` is a mock."""
    return MagicMock()
