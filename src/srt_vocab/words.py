"""Word extraction and frequency statistics."""

from __future__ import annotations

import re
from collections import Counter
from typing import Iterator, List

from .models import WordStat

# 字母与撇号组成的最长连续片段
WORD_PATTERN = re.compile(r"[A-Za-z']+")


def iter_word_spans(text: str) -> Iterator[re.Match]:
    """Yield matches for every word run in original case."""
    return WORD_PATTERN.finditer(text)


def extract_words(text: str) -> List[str]:
    """
    Extract lowercase word tokens from arbitrary text.

    Digits, punctuation and whitespace separate tokens and never appear in
    one. Apostrophes are part of a word.
    """
    return [m.group(0).lower() for m in iter_word_spans(text)]


def word_frequencies(text: str) -> List[WordStat]:
    """
    Count word occurrences in text.

    Returns:
        WordStat list sorted by descending frequency; ties keep the order
        in which words were first seen.
    """
    counts = Counter(extract_words(text))
    return [WordStat(word, freq) for word, freq in counts.most_common()]
