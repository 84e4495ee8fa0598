"""Build Notion rich_text arrays from plain block text.

A rich_text segment is a dict of the form::

    {
        "type": "text",
        "text": {"content": "hello"}
    }

Recipe blocks carry no inline formatting, so every segment uses Notion's
default annotations and annotations are omitted from the payload.
"""

from __future__ import annotations

from recipify.utils.text_split import split_string

# Notion's limit on ``rich_text[].text.content``.
TEXT_CONTENT_LIMIT = 2000


def build_rich_text(text: str, limit: int = TEXT_CONTENT_LIMIT) -> list[dict]:
    """Convert *text* to a Notion rich_text array.

    Text longer than *limit* characters is spread across several segments.
    Empty text yields an empty array.
    """
    return split_rich_text([_make_text_segment(text)] if text else [], limit)


def split_rich_text(segments: list[dict], limit: int = TEXT_CONTENT_LIMIT) -> list[dict]:
    """Split any segment whose content exceeds *limit* characters.

    Never splits multi-byte characters (relies on :func:`split_string`
    which operates on Python code-points).

    Parameters
    ----------
    segments:
        List of Notion rich_text segment dicts.
    limit:
        Maximum character count per segment content.

    Returns
    -------
    list[dict]
        A new list where every segment's content is at most *limit* chars.
    """
    output: list[dict] = []

    for segment in segments:
        content = segment.get("text", {}).get("content", "")

        if len(content) <= limit:
            output.append(segment)
            continue

        for chunk in split_string(content, limit):
            output.append(_make_text_segment(chunk))

    return output


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _make_text_segment(content: str) -> dict:
    return {
        "type": "text",
        "text": {"content": content},
    }
