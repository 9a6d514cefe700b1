"""Text processing utilities for translated output."""

from __future__ import annotations

import re
from typing import List

# 模型自行添加的行号 (如 "1.", "2)")
LINE_NUMBER = re.compile(r'^(\d+)[\.\)]\s+')

CODE_FENCE = re.compile(r'^\s*```')


def clean_translated_line(text: str) -> str:
    """
    Clean a single translated line.

    只标准化空白，保留标点、对话破折号和哨兵字符。
    """
    if not text or not isinstance(text, str):
        return ""

    return re.sub(r'[ \t]+', ' ', text).strip()


def strip_added_numbering(lines: List[str]) -> List[str]:
    """
    Remove line numbers the model added on its own.

    Numbers are removed only when every line is numbered 1..n in order.
    """
    numbers = [LINE_NUMBER.match(line) for line in lines]
    if not lines or not all(numbers):
        return lines
    if [int(m.group(1)) for m in numbers] != list(range(1, len(lines) + 1)):
        return lines
    return [line[m.end():] for line, m in zip(lines, numbers)]


def split_translated_lines(text: str) -> List[str]:
    """
    Split a translation response into non-empty cleaned lines.

    Markdown code fences and blank lines are dropped.
    """
    lines: List[str] = []
    for raw in text.strip().splitlines():
        if CODE_FENCE.match(raw):
            continue
        line = clean_translated_line(raw)
        if line:
            lines.append(line)
    return strip_added_numbering(lines)
