"""Tests for recipify.utils: chunking, string splitting and redaction."""

from __future__ import annotations

import pytest

from recipify.utils.chunk import NOTION_CHILDREN_LIMIT, chunk_children
from recipify.utils.redact import redact, redact_text
from recipify.utils.text_split import split_string


class TestChunkChildren:
    def test_default_limit(self):
        blocks = [{"type": "paragraph"}] * 250
        assert [len(b) for b in chunk_children(blocks)] == [100, 100, 50]
        assert NOTION_CHILDREN_LIMIT == 100

    def test_exact_multiple(self):
        assert [len(b) for b in chunk_children([{}] * 200)] == [100, 100]

    def test_empty(self):
        assert chunk_children([]) == []

    def test_invalid_size(self):
        with pytest.raises(ValueError):
            chunk_children([{}], 0)


class TestSplitString:
    def test_examples(self):
        assert split_string("hello world", 5) == ["hello", " worl", "d"]
        assert split_string("", 5) == []
        assert split_string("abc", 10) == ["abc"]

    def test_invalid_limit(self):
        with pytest.raises(ValueError):
            split_string("abc", 0)


class TestRedact:
    def test_sensitive_keys(self):
        out = redact({"Authorization": "Bearer x", "x-api-key": "k", "page": "p"})
        assert out == {"Authorization": "<redacted>", "x-api-key": "<redacted>", "page": "p"}

    def test_nested_secrets_scrubbed(self):
        payload = {"children": [{"text": {"content": "key sk-ant-secret-9876 here"}}]}
        out = redact(payload, ["sk-ant-secret-9876"])
        assert out["children"][0]["text"]["content"] == "key <redacted:...9876> here"

    def test_does_not_mutate_input(self):
        payload = {"token": "abc", "nested": {"v": "sk-1234"}}
        redact(payload, ["sk-1234"])
        assert payload == {"token": "abc", "nested": {"v": "sk-1234"}}

    def test_non_string_values_untouched(self):
        assert redact({"count": 3, "ok": True, "none": None}) == {
            "count": 3, "ok": True, "none": None,
        }

    def test_redact_text_bearer(self):
        assert redact_text("Authorization: Bearer ntn_abc") == "Authorization: Bearer <redacted>"

    def test_redact_text_short_secret(self):
        assert redact_text("pw=abc", ["abc"]) == "pw=<redacted:...****>"

    def test_redact_text_ignores_empty_secret(self):
        assert redact_text("hello", [""]) == "hello"
