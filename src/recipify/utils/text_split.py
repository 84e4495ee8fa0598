"""Code-point safe string splitting.

Used to keep each rich_text segment under Notion's 2 000-character content
limit.  Python ``str`` slicing works on code-points, so no character is ever
cut in half.
"""

from __future__ import annotations


def split_string(text: str, limit: int = 2000) -> list[str]:
    """Split *text* into chunks of at most *limit* characters.

    Returns a list of non-empty chunks whose concatenation equals *text*;
    an empty *text* gives an empty list.

    Raises
    ------
    ValueError
        If *limit* is less than 1.

    Examples
    --------
    >>> split_string("hello world", 5)
    ['hello', ' worl', 'd']
    """
    if limit < 1:
        raise ValueError(f"limit must be >= 1, got {limit}")

    return [text[i : i + limit] for i in range(0, len(text), limit)]
