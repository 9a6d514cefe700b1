"""Tests for word extraction and frequency statistics."""

from srt_vocab.words import extract_words, iter_word_spans, word_frequencies


class TestExtractWords:

    def test_lowercases(self):
        assert extract_words("Hello World") == ["hello", "world"]

    def test_apostrophes_are_part_of_words(self):
        assert extract_words("Don't stop, it's fine") == ["don't", "stop", "it's", "fine"]

    def test_digits_and_punctuation_separate(self):
        assert extract_words("abc123def, ghi!jkl") == ["abc", "def", "ghi", "jkl"]

    def test_non_ascii_letters_separate(self):
        assert extract_words("café naïve") == ["caf", "na", "ve"]

    def test_no_words(self):
        assert extract_words("") == []
        assert extract_words("123 -- 456 !?") == []

    def test_idempotent_under_lowercasing(self):
        source = "<i>Well, I'm NOT sure</i>\n- Really?"
        assert extract_words(source.lower()) == extract_words(source)

    def test_spans_keep_original_case(self):
        assert [m.group(0) for m in iter_word_spans("Hey YOU")] == ["Hey", "YOU"]


class TestWordFrequencies:

    def test_sorted_by_descending_frequency(self):
        stats = word_frequencies("the cat saw the dog, the dog ran")
        assert [(s.word, s.freq) for s in stats] == [
            ("the", 3),
            ("dog", 2),
            ("cat", 1),
            ("saw", 1),
            ("ran", 1),
        ]

    def test_case_insensitive(self):
        stats = word_frequencies("Yes yes YES")
        assert len(stats) == 1
        assert stats[0].freq == 3

    def test_empty(self):
        assert word_frequencies("") == []
