"""Word dictionary loading, classification and persistence."""

from __future__ import annotations

import re
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Sequence

from .errors import WordFileError
from .models import PERSIST_ORDER, WordKind, WordStat
from .words import extract_words, word_frequencies

logger = logging.getLogger(__name__)

DICTIONARY_LINE = re.compile(r'^([?ku]):(\S.*?)\s*$')


class WordDictionary:
    """词库：小写单词到分类的映射。"""

    def __init__(self):
        self._words: Dict[str, WordKind] = {}

    def add(self, word: str, kind: WordKind) -> None:
        """添加或覆盖一个单词。"""
        word = word.strip().lower()
        if word:
            self._words[word] = kind

    def classify(self, word: str) -> WordKind:
        """Classify a word; words absent from the dictionary are new."""
        return self._words.get(word.lower(), WordKind.NEW)

    def merge_observed(self, words: Iterable[str]) -> int:
        """
        Insert observed words that are not yet in the dictionary as NEW.

        Existing records are never reclassified.

        Returns:
            Number of words added
        """
        added = 0
        for word in words:
            key = word.lower()
            if key and key not in self._words:
                self._words[key] = WordKind.NEW
                added += 1
        return added

    def mark_known(self, words: Iterable[str]) -> int:
        """Promote words to KNOWN. Returns how many records changed."""
        changed = 0
        for word in words:
            key = word.lower()
            if key and self._words.get(key) is not WordKind.KNOWN:
                self._words[key] = WordKind.KNOWN
                changed += 1
        return changed

    def counts(self) -> Dict[WordKind, int]:
        result = {kind: 0 for kind in PERSIST_ORDER}
        for kind in self._words.values():
            result[kind] += 1
        return result

    def serialize(self) -> str:
        """
        Render the dictionary in its persisted form.

        One ``<code>:<word>`` line per word, grouped NEW, UNKNOWN, KNOWN and
        sorted alphabetically within each group.
        """
        lines: List[str] = []
        for kind in PERSIST_ORDER:
            group = sorted(w for w, k in self._words.items() if k is kind)
            lines.extend(f"{kind.code}:{w}\n" for w in group)
        return "".join(lines)

    def __len__(self) -> int:
        return len(self._words)

    def __bool__(self) -> bool:
        return len(self._words) > 0


def parse_dictionary(text: str) -> WordDictionary:
    """Parse persisted dictionary text. Malformed lines are skipped."""
    dictionary = WordDictionary()

    for line_num, line in enumerate(text.splitlines(), 1):
        if not line.strip():
            continue

        match = DICTIONARY_LINE.match(line)
        if match:
            code, word = match.groups()
            dictionary.add(word, WordKind.from_code(code))
        else:
            logger.debug(f"Skipping invalid line {line_num}: {line}")

    return dictionary


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding='utf-8-sig')
    except (OSError, UnicodeDecodeError) as e:
        raise WordFileError(path, str(e)) from e


def _write_text(path: Path, content: str) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding='utf-8')
    except OSError as e:
        raise WordFileError(path, str(e)) from e


def load_dictionary(path: Path) -> WordDictionary:
    """
    Load the word dictionary from a file.

    A missing file yields an empty dictionary.

    Raises:
        WordFileError: the file exists but cannot be read
    """
    if not path.exists():
        logger.info(f"Dictionary file not found, starting empty: {path}")
        return WordDictionary()

    dictionary = parse_dictionary(_read_text(path))
    logger.info(f"Loaded {len(dictionary)} words from {path}")
    return dictionary


def save_dictionary(dictionary: WordDictionary, path: Path) -> None:
    """Rewrite the dictionary file."""
    _write_text(path, dictionary.serialize())
    logger.info(f"Saved {len(dictionary)} words to {path}")


def load_known_words(path: Path) -> List[str]:
    """Read every word of a plain-text vocabulary list."""
    words = extract_words(_read_text(path))
    logger.info(f"Read {len(set(words))} known words from {path}")
    return words


def unfamiliar_word_stats(
    dictionary: WordDictionary,
    texts: Sequence[str],
) -> List[WordStat]:
    """Frequency of the words in texts that still trigger translation."""
    stats = word_frequencies("\n".join(texts))
    return [s for s in stats if dictionary.classify(s.word).triggers_translation]


def save_word_stats(stats: Sequence[WordStat], path: Path) -> None:
    """Write ``word<TAB>freq`` lines."""
    _write_text(path, "".join(f"{s.word}\t{s.freq}\n" for s in stats))
    logger.info(f"Saved {len(stats)} word statistics to {path}")
