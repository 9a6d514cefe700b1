"""Data models for subtitle entries, words and translation batches."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import time
from enum import Enum
from typing import List


def format_timestamp(value: time) -> str:
    """Render a time of day as an SRT timestamp (HH:MM:SS,mmm)."""
    return f"{value:%H:%M:%S},{value.microsecond // 1000:03d}"


@dataclass
class SrtEntry:
    """Represents a single subtitle entry in SRT format."""

    index: int
    start: time
    end: time
    text: str
    need_translation: bool = False

    @property
    def timecode(self) -> str:
        """Return the timecode line in SRT format."""
        return f"{format_timestamp(self.start)} --> {format_timestamp(self.end)}"

    @property
    def lines(self) -> List[str]:
        return self.text.split("\n")

    def to_srt(self) -> str:
        """Convert entry to SRT format string."""
        return f"{self.index}\n{self.timecode}\n{self.text}\n\n"


class WordKind(Enum):
    """词汇分类。值即词库文件中的类别字符。"""
    NEW = "?"
    UNKNOWN = "u"
    KNOWN = "k"

    @classmethod
    def from_code(cls, code: str) -> "WordKind":
        return cls(code)

    @property
    def code(self) -> str:
        return self.value

    @property
    def triggers_translation(self) -> bool:
        """Only known words are exempt from translation."""
        return self is not WordKind.KNOWN


# 词库文件中的分组顺序
PERSIST_ORDER = (WordKind.NEW, WordKind.UNKNOWN, WordKind.KNOWN)


@dataclass
class WordStat:
    """单词频率统计。"""
    word: str
    freq: int


@dataclass
class TranslationBatch:
    """A size-bounded group of flagged entries sent in one translation call."""

    entries: List[SrtEntry] = field(default_factory=list)
    lines: List[str] = field(default_factory=list)

    def append(self, entry: SrtEntry, line: str) -> None:
        self.entries.append(entry)
        self.lines.append(line)

    @property
    def text(self) -> str:
        return "".join(f"{line}\n" for line in self.lines)

    @property
    def size(self) -> int:
        """UTF-8 byte length of the batch text."""
        return len(self.text.encode("utf-8"))

    def __len__(self) -> int:
        return len(self.lines)

    def __bool__(self) -> bool:
        return len(self.lines) > 0
