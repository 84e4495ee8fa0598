"""Unit tests for PageAPI and BlockAPI.

All HTTP calls go through a transport mock.
"""

from __future__ import annotations

from unittest.mock import MagicMock

from recipify.notion_api.blocks import BlockAPI
from recipify.notion_api.pages import PageAPI, title_property


class TestPageAPI:
    def test_title_property(self):
        assert title_property("Soup") == {
            "title": [{"type": "text", "text": {"content": "Soup"}}]
        }

    def test_long_title_is_split(self):
        segments = title_property("x" * 4500)["title"]
        assert [len(s["text"]["content"]) for s in segments] == [2000, 2000, 500]

    def test_create_without_children(self):
        t = MagicMock()
        t.request.return_value = {"id": "pg-1"}
        api = PageAPI(t)
        result = api.create(parent={"page_id": "p1"}, properties=title_property("T"))
        t.request.assert_called_once_with(
            "POST",
            "/pages",
            json={
                "parent": {"page_id": "p1"},
                "properties": {"title": [{"type": "text", "text": {"content": "T"}}]},
            },
        )
        assert result == {"id": "pg-1"}

    def test_create_with_children(self):
        t = MagicMock()
        t.request.return_value = {"id": "pg-2"}
        children = [{"object": "block", "type": "paragraph"}]
        PageAPI(t).create(
            parent={"page_id": "p1"},
            properties=title_property("T"),
            children=children,
        )
        assert t.request.call_args.kwargs["json"]["children"] == children

    def test_archive(self):
        t = MagicMock()
        t.request.return_value = {"id": "pg-3", "archived": True}
        PageAPI(t).archive("pg-3")
        t.request.assert_called_once_with("PATCH", "/pages/pg-3", json={"archived": True})


class TestBlockAPI:
    def test_append_children(self):
        t = MagicMock()
        t.request.return_value = {"results": []}
        children = [{"object": "block", "type": "paragraph"}]
        BlockAPI(t).append_children("pg-1", children)
        t.request.assert_called_once_with(
            "PATCH", "/blocks/pg-1/children", json={"children": children}
        )
