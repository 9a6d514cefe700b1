"""Tests for reassembling translations onto entries."""

import pytest
from datetime import time

from srt_vocab.batcher import build_batches
from srt_vocab.dictionary import parse_dictionary
from srt_vocab.errors import ReassemblyError
from srt_vocab.models import SrtEntry
from srt_vocab.reassembler import collect_translated_lines, reassemble


def make_entries(*texts):
    return [
        SrtEntry(i, time(0, 0, i), time(0, 0, i, 500000), text)
        for i, text in enumerate(texts, 1)
    ]


@pytest.fixture
def dictionary():
    return parse_dictionary("k:hello\nk:world\n")


class TestReassemble:

    def test_appends_translation_to_flagged_entries(self, dictionary):
        entries = make_entries("hello world", "hello foo", "bar\nbaz")
        batches = build_batches(entries, dictionary)

        consumed = reassemble(entries, batches, ["привет фу\nбар ¶ баз\n"])

        assert consumed == 2
        assert entries[0].text == "hello world"
        assert entries[1].text.endswith("\nпривет фу")
        assert entries[2].text.endswith("\nбар\nбаз")

    def test_lines_consumed_across_batches_in_order(self, dictionary):
        entries = make_entries("alpha", "beta", "gamma")
        batches = build_batches(entries, dictionary, max_bytes=6)
        assert len(batches) == 3

        reassemble(entries, batches, ["один", "два", "три"])

        assert [e.text.split("\n")[-1] for e in entries] == ["один", "два", "три"]

    def test_consumed_equals_flagged(self, dictionary):
        entries = make_entries("foo", "hello", "bar", "world", "baz")
        batches = build_batches(entries, dictionary)

        consumed = reassemble(entries, batches, ["a\nb\nc"])

        assert consumed == sum(e.need_translation for e in entries) == 3

    def test_under_delivery_is_fatal(self, dictionary):
        entries = make_entries("foo", "bar")
        batches = build_batches(entries, dictionary)

        with pytest.raises(ReassemblyError) as exc_info:
            reassemble(entries, batches, ["only one"])
        assert exc_info.value.index == 2
        assert exc_info.value.consumed == 1

    def test_extra_lines_ignored(self, dictionary):
        entries = make_entries("foo")
        batches = build_batches(entries, dictionary)

        assert reassemble(entries, batches, ["фу\nлишнее"]) == 1
        assert entries[0].text.endswith("\nфу")

    def test_nothing_flagged(self, dictionary):
        entries = make_entries("hello")
        assert reassemble(entries, [], []) == 0
        assert entries[0].text == "hello"


class TestCollectTranslatedLines:

    def test_blank_lines_and_fences_dropped(self, dictionary):
        entries = make_entries("foo", "bar")
        batches = build_batches(entries, dictionary)

        lines = collect_translated_lines(batches, ["```\nфу\n\nбар\n```\n"])

        assert lines == ["фу", "бар"]

    def test_numbering_removed(self, dictionary):
        entries = make_entries("foo", "bar")
        batches = build_batches(entries, dictionary)

        lines = collect_translated_lines(batches, ["1. фу\n2) бар ¶ баз"])

        assert lines == ["фу", "бар ¶ баз"]

    def test_partial_numbering_kept(self, dictionary):
        entries = make_entries("foo", "bar")
        batches = build_batches(entries, dictionary)

        lines = collect_translated_lines(batches, ["фу\n2. бар"])

        assert lines == ["фу", "2. бар"]


class TestSubtitleMarkup:

    def test_dialogue_dashes_kept(self, dictionary):
        entries = make_entries("- Hi.\n- Hello.")
        batches = build_batches(entries, dictionary)
        assert batches[0].lines == ["- Hi. ¶ - Hello."]

        reassemble(entries, batches, ["- Привет. ¶ - Здравствуй.\n"])

        assert entries[0].text.endswith("\n- Привет.\n- Здравствуй.")

    def test_dash_first_line_kept(self, dictionary):
        entries = make_entries("- foo", "- bar")
        batches = build_batches(entries, dictionary)

        reassemble(entries, batches, ["- фу\n- бар"])

        assert entries[0].text.endswith("\n- фу")
        assert entries[1].text.endswith("\n- бар")

    def test_asterisks_kept(self, dictionary):
        entries = make_entries("*sighs* foo\n**bar**")
        batches = build_batches(entries, dictionary)

        reassemble(entries, batches, ["*вздыхает* фу ¶ **бар**"])

        assert entries[0].text.endswith("\n*вздыхает* фу\n**бар**")
        assert "\n\n" not in entries[0].text

    def test_empty_translation_adds_nothing(self, dictionary):
        entries = make_entries("foo")
        batches = build_batches(entries, dictionary)
        original = entries[0].text

        assert reassemble(entries, batches, [" ¶ "]) == 1
        assert entries[0].text == original
