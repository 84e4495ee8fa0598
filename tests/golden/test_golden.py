"""Golden fixture tests.

Each ``fixtures/<name>.md`` is converted and compared with
``fixtures/<name>.json``, a list of ``[notion_type, text]`` pairs.  The
payloads sent to Notion must carry the same types and text, and rendering
the blocks back to Markdown must convert to the same blocks.
"""
from __future__ import annotations

import json
from pathlib import Path

import pytest

from recipify.converter.block_builder import build_blocks
from recipify.converter.blocks_to_md import render_markdown
from recipify.converter.md_to_blocks import convert

FIXTURES_DIR = Path(__file__).parent / "fixtures"

_FIXTURES = sorted(p.stem for p in FIXTURES_DIR.glob("*.md"))


def _load(name: str) -> tuple[str, list[list[str]]]:
    markdown = (FIXTURES_DIR / f"{name}.md").read_text(encoding="utf-8")
    expected = json.loads((FIXTURES_DIR / f"{name}.json").read_text(encoding="utf-8"))
    return markdown, expected


@pytest.mark.parametrize("name", _FIXTURES)
def test_blocks_match_golden(name):
    markdown, expected = _load(name)
    blocks = convert(markdown)
    assert [[b.kind.value, b.text] for b in blocks] == expected


@pytest.mark.parametrize("name", _FIXTURES)
def test_payloads_match_golden(name):
    markdown, expected = _load(name)
    payloads = build_blocks(convert(markdown))
    actual = []
    for payload in payloads:
        rich_text = payload[payload["type"]]["rich_text"]
        actual.append([payload["type"], "".join(s["text"]["content"] for s in rich_text)])
    assert actual == expected


@pytest.mark.parametrize("name", _FIXTURES)
def test_rendered_markdown_converts_back(name):
    markdown, _ = _load(name)
    blocks = convert(markdown)
    assert convert(render_markdown(blocks)) == blocks


def test_crlf_matches_lf():
    markdown, expected = _load("banana_bread")
    blocks = convert(markdown.replace("\n", "\r\n"))
    assert [[b.kind.value, b.text] for b in blocks] == expected
