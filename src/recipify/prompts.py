"""Instruction template for recipe extraction.

The template fixes the Markdown convention that
:func:`recipify.converter.convert` understands: ``# `` section headings,
``- `` bullets, ``1. `` numbered steps and plain lines.  The model must
answer with a single JSON object ``{"name": ..., "content": ...}``.
"""

from __future__ import annotations

SECTIONS: tuple[str, ...] = ("Overview", "Notes", "Ingredients", "Supplies", "Instructions")

SYSTEM_PROMPT = (
    "You extract recipes from webpages. You reply with a single JSON object "
    "and nothing else."
)

EXTRACTION_TEMPLATE = """\
Extract the recipe information from this webpage and format it according to these exact rules:

RULES:
1. "Inspo:" should be followed by the URL: {source_url}
2. "Time:" should indicate prep time, cook time, and total time in this format:
   - Prep: <prep time>
   - Cook: <cook time>
   - Total: <total time>
   Leave out any time the page does not state.
3. Organise the recipe into exactly these sections, in this order, each \
introduced by a level-one heading ("# " followed by the section name):
{section_list}
4. "# Overview" holds the Inspo and Time lines and a one or two sentence \
description of the dish as plain lines.
5. "# Notes" holds tips, substitutions and storage advice as "- " bullets. \
Omit the bullets if the page has none, but keep the heading.
6. "# Ingredients" lists every ingredient as a "- " bullet with its quantity \
inline, e.g. "- 2 cups all-purpose flour".
7. "# Supplies" lists equipment as "- " bullets.
8. "# Instructions" lists the steps as a numbered list ("1. ", "2. ", ...), \
one step per line, mentioning the quantity of each ingredient where it is used.
9. Use only these markers. No bold, italics, links, tables, nested lists or \
sub-headings. Separate sections with one empty line.

Reply with JSON only, in exactly this shape:
{{"name": "<recipe name>", "content": "<the markdown above, with newlines escaped as \\n>"}}

WEBPAGE:
{page_text}
"""


def build_extraction_prompt(page_text: str, source_url: str) -> str:
    """Fill the extraction template for one page."""
    section_list = "\n".join(f"   # {name}" for name in SECTIONS)
    return EXTRACTION_TEMPLATE.format(
        source_url=source_url,
        section_list=section_list,
        page_text=page_text,
    )
