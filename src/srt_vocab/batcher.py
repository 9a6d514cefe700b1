"""Selecting entries for translation and grouping them into batches."""

from __future__ import annotations

import re
import logging
from typing import List, Sequence

from .dictionary import WordDictionary
from .models import SrtEntry, TranslationBatch
from .words import WORD_PATTERN

logger = logging.getLogger(__name__)

MARKUP_PATTERN = re.compile(r'</?[ib]>')

# 多行字幕在批次中用哨兵字符连接，译文中再还原为换行。
# 原文中的哨兵字符写成两个，解码时还原为一个。
SENTINEL = "¶"
SENTINEL_RUN = re.compile(r'(\s*)(' + re.escape(SENTINEL) + r'+)(\s*)')

DEFAULT_MAX_BATCH_BYTES = 4000
DEFAULT_HIGHLIGHT_COLOR = "#FFFF80"


def strip_markup(text: str) -> str:
    """Remove <i> and <b> tags."""
    return MARKUP_PATTERN.sub('', text)


def encode_lines(lines: Sequence[str]) -> str:
    """Join entry lines into a single batch line."""
    escaped = (line.strip().replace(SENTINEL, SENTINEL * 2) for line in lines)
    return f" {SENTINEL} ".join(escaped)


def _expand_sentinels(match: re.Match) -> str:
    before, run, after = match.groups()
    literal = SENTINEL * (len(run) // 2)
    if len(run) % 2:
        return f"{literal}\n"
    return f"{before}{literal}{after}"


def decode_lines(text: str) -> str:
    """
    Reverse encode_lines on a translated line.

    The result never contains an empty line.
    """
    decoded = SENTINEL_RUN.sub(_expand_sentinels, text)
    return "\n".join(line.strip() for line in decoded.split("\n") if line.strip())


def highlight_words(
    text: str,
    dictionary: WordDictionary,
    color: str = DEFAULT_HIGHLIGHT_COLOR,
) -> tuple[str, bool]:
    """
    Wrap every word that is not known in a colored font tag.

    Returns:
        (highlighted text, whether any word was highlighted)
    """
    found = False

    def _wrap(match: re.Match) -> str:
        nonlocal found
        word = match.group(0)
        if dictionary.classify(word).triggers_translation:
            found = True
            return f'<font color="{color}">{word}</font>'
        return word

    return WORD_PATTERN.sub(_wrap, text), found


def highlight_entry(
    entry: SrtEntry,
    dictionary: WordDictionary,
    color: str = DEFAULT_HIGHLIGHT_COLOR,
) -> str | None:
    """
    Strip markup from the entry and highlight its unfamiliar words.

    The entry is modified in place. Line breaks are kept in the entry text.

    Returns:
        The sentinel-encoded text to translate, or None if every word is known
    """
    entry.text = strip_markup(entry.text)

    highlighted: List[str] = []
    need_translation = False
    for line in entry.lines:
        colored, found = highlight_words(line, dictionary, color)
        highlighted.append(colored)
        need_translation = need_translation or found

    if not need_translation:
        return None

    source_lines = entry.lines
    entry.text = "\n".join(highlighted)
    entry.need_translation = True
    return encode_lines(source_lines)


def build_batches(
    entries: Sequence[SrtEntry],
    dictionary: WordDictionary,
    max_bytes: int = DEFAULT_MAX_BATCH_BYTES,
    color: str = DEFAULT_HIGHLIGHT_COLOR,
) -> List[TranslationBatch]:
    """
    Walk the entries in order and collect flagged ones into batches.

    The size check happens before an entry is appended: if the entry would
    push a non-empty batch past max_bytes, that batch is closed first and
    the entry starts the next one. An entry larger than max_bytes on its
    own still goes whole into its own batch.
    """
    batches: List[TranslationBatch] = []
    current = TranslationBatch()
    current_size = 0

    for entry in entries:
        line = highlight_entry(entry, dictionary, color)
        if line is None:
            continue

        line_size = len(f"{line}\n".encode("utf-8"))
        if current and current_size + line_size > max_bytes:
            batches.append(current)
            current = TranslationBatch()
            current_size = 0

        current.append(entry, line)
        current_size += line_size

    if current:
        batches.append(current)

    flagged = sum(len(b) for b in batches)
    logger.info(f"{flagged}/{len(entries)} entries need translation, {len(batches)} batches")
    return batches
