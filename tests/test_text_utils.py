"""Tests for text utilities."""

import pytest
from srt_vocab.text_utils import (
    clean_translated_line,
    split_translated_lines,
    strip_added_numbering,
)


class TestCleanTranslatedLine:

    def test_dialogue_dash_preserved(self):
        assert clean_translated_line("- Hello") == "- Hello"
        assert clean_translated_line("• Hello") == "• Hello"

    def test_sentinel_preserved(self):
        assert clean_translated_line("¶ Hello") == "¶ Hello"
        assert clean_translated_line("Привет ¶ мир") == "Привет ¶ мир"

    def test_emphasis_preserved(self):
        assert clean_translated_line("**bold** and __this__") == "**bold** and __this__"
        assert clean_translated_line("*sighs*") == "*sighs*"

    def test_normalize_whitespace(self):
        assert clean_translated_line("  hello \t  world  ") == "hello world"

    def test_empty_input(self):
        assert clean_translated_line("") == ""
        assert clean_translated_line(None) == ""


class TestStripAddedNumbering:

    def test_sequential_numbering_removed(self):
        assert strip_added_numbering(["1. one", "2) two", "3. three"]) == ["one", "two", "three"]

    def test_partial_numbering_kept(self):
        lines = ["1. one", "two"]
        assert strip_added_numbering(lines) == lines

    def test_out_of_order_numbering_kept(self):
        lines = ["2. one", "3. two"]
        assert strip_added_numbering(lines) == lines

    def test_single_line_starting_with_year(self):
        # "1999." is not line number 1
        assert strip_added_numbering(["1999. Год"]) == ["1999. Год"]

    def test_numbers_inside_text_kept(self):
        assert strip_added_numbering(["В 1999 году"]) == ["В 1999 году"]

    def test_empty(self):
        assert strip_added_numbering([]) == []


class TestSplitTranslatedLines:

    def test_split(self):
        assert split_translated_lines("one\ntwo\r\nthree\n") == ["one", "two", "three"]

    def test_blank_lines_dropped(self):
        assert split_translated_lines("\n\none\n   \ntwo\n\n") == ["one", "two"]

    def test_code_fence_dropped(self):
        assert split_translated_lines("```text\none\n```") == ["one"]

    def test_numbering_removed_after_fences(self):
        assert split_translated_lines("```\n1. один\n2. два\n```") == ["один", "два"]

    @pytest.mark.parametrize("text", ["- Да.\n- Нет.", "1. Да.\nНет."])
    def test_dialogue_and_lone_numbers_untouched(self, text):
        assert split_translated_lines(text) == text.split("\n")
