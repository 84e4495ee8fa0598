"""Tests for the line-oriented Markdown → Block converter."""

import pytest

from recipify.converter.md_to_blocks import ListKind, _ConversionState, convert, split_lines
from recipify.models import Block, BlockKind

H = Block.heading
P = Block.paragraph
B = Block.bulleted
N = Block.numbered


# =========================================================================
# Line classification
# =========================================================================

class TestClassification:
    def test_heading(self):
        assert convert("# Ingredients") == [H("Ingredients")]

    def test_bullet(self):
        assert convert("- 2 eggs") == [B("2 eggs")]

    def test_numbered_drops_number(self):
        assert convert("12. Bake") == [N("Bake")]

    def test_plain_text_is_paragraph(self):
        assert convert("Serve warm.") == [P("Serve warm.")]

    def test_level_two_heading_is_paragraph(self):
        assert convert("## Tips") == [P("## Tips")]

    def test_star_bullet_is_paragraph(self):
        assert convert("* not a bullet") == [P("* not a bullet")]

    def test_number_without_space_is_paragraph(self):
        assert convert("1.5 cups sugar") == [P("1.5 cups sugar")]

    def test_number_with_paren_is_paragraph(self):
        assert convert("1) Step") == [P("1) Step")]

    @pytest.mark.parametrize("line", ["١. step", "१. step", "１. step", "١."])
    def test_non_ascii_digits_are_paragraph(self, line):
        assert convert(line) == [P(line)]

    def test_hash_without_space_is_paragraph(self):
        assert convert("#hashtag") == [P("#hashtag")]

    def test_heading_wins_over_list(self):
        assert convert("# - 1. x") == [H("- 1. x")]

    def test_bullet_wins_over_numbered(self):
        assert convert("- 1. x") == [B("1. x")]

    def test_numbered_text_keeps_interior_whitespace(self):
        assert convert("1.  two  spaces") == [N(" two  spaces")]


# =========================================================================
# Whitespace and empty markers
# =========================================================================

class TestWhitespace:
    def test_marker_detected_after_stripping(self):
        assert convert("   # Notes   ") == [H("Notes")]
        assert convert("\t- salt ") == [B("salt")]
        assert convert("  3. Stir") == [N("Stir")]

    def test_paragraph_text_is_not_trimmed(self):
        assert convert("  indented line  ") == [P("  indented line  ")]

    def test_interior_whitespace_preserved(self):
        assert convert("# Prep  and   cook") == [H("Prep  and   cook")]

    def test_bare_heading_marker(self):
        assert convert("# ") == [H("")]
        assert convert("#") == [H("")]

    def test_bare_bullet_marker(self):
        assert convert("- ") == [B("")]

    def test_bare_numbered_marker(self):
        assert convert("7. ") == [N("")]

    def test_whitespace_only_lines_are_blank(self):
        assert convert("  \n\t\n") == []


# =========================================================================
# Line splitting
# =========================================================================

class TestLineSplitting:
    def test_crlf(self):
        assert convert("# A\r\n- b\r\n") == [H("A"), B("b")]

    def test_lone_carriage_return(self):
        result = convert("a\r\nb\rc")
        assert result == [P("a"), P("b"), P("c")]
        assert all("\r" not in block.text for block in result)

    def test_split_lines(self):
        assert split_lines("a\r\nb\rc\nd") == ["a", "b", "c", "d"]

    def test_empty_input(self):
        assert convert("") == []


# =========================================================================
# List runs
# =========================================================================

class TestListRuns:
    def test_bullets_to_numbered_without_blank(self):
        assert convert("- a\n- b\n1. c\n2. d") == [B("a"), B("b"), N("c"), N("d")]

    def test_numbered_to_bullets_without_blank(self):
        assert convert("1. a\n- b") == [N("a"), B("b")]

    def test_full_scenario(self):
        md = "# Title\n\n- one\n- two\n\n3. first\n4. second\nplain text"
        assert convert(md) == [
            H("Title"),
            B("one"),
            B("two"),
            N("first"),
            N("second"),
            P("plain text"),
        ]

    def test_heading_ends_run(self):
        assert convert("- a\n# H\n- b") == [B("a"), H("H"), B("b")]

    def test_paragraph_ends_run(self):
        assert convert("1. a\nnote\n2. b") == [N("a"), P("note"), N("b")]

    def test_run_flushed_at_end_of_input(self):
        assert convert("- a\n- b") == [B("a"), B("b")]

    def test_blank_lines_never_emit_blocks(self):
        result = convert("\n\n- a\n\n\n- b\n\n")
        assert result == [B("a"), B("b")]

    def test_recipe_sections(self, recipe_markdown):
        blocks = convert(recipe_markdown)
        headings = [b.text for b in blocks if b.kind is BlockKind.HEADING]
        assert headings == ["Overview", "Notes", "Ingredients", "Supplies", "Instructions"]
        steps = [b.text for b in blocks if b.kind is BlockKind.NUMBERED_LIST_ITEM]
        assert steps[0] == "Preheat the oven to 350°F."
        assert len(steps) == 3
        assert P("Time:") in blocks
        assert B("Prep: 15 minutes") in blocks

    def test_malformed_input_degrades_to_paragraphs(self):
        md = "```json\n{\"name\": \"x\"}\n```"
        result = convert(md)
        assert [b.kind for b in result] == [BlockKind.PARAGRAPH] * 3


# =========================================================================
# Conversion state
# =========================================================================

class TestConversionState:
    def test_flush_resets_state(self):
        state = _ConversionState()
        state.add_list_item(ListKind.BULLETED, B("a"))
        state.flush()
        assert state.output == [B("a")]
        assert state.pending_items == []
        assert state.pending_kind is ListKind.NONE

    def test_switching_kind_flushes_previous_run(self):
        state = _ConversionState()
        state.add_list_item(ListKind.NUMBERED, N("a"))
        state.add_list_item(ListKind.BULLETED, B("b"))
        assert state.output == [N("a")]
        assert state.pending_items == [B("b")]
        assert state.pending_kind is ListKind.BULLETED

    def test_state_is_local_to_each_call(self):
        convert("- dangling")
        assert convert("plain") == [P("plain")]

    @pytest.mark.parametrize("md", ["- a\n- b", "1. a\n2. b"])
    def test_pending_items_share_kind(self, md):
        kinds = {b.kind for b in convert(md)}
        assert len(kinds) == 1
