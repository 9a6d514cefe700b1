"""SRT file parsing and saving utilities."""

from __future__ import annotations

import re
import logging
from datetime import datetime, time
from pathlib import Path
from typing import List, Sequence, Optional

from .errors import TimestampError
from .models import SrtEntry

logger = logging.getLogger(__name__)

# 序号行、时间行、一行或多行文本、空行
BLOCK_PATTERN = re.compile(
    r"^(\d+)[ \t]*\n"                                          # 序号
    r"(\d{2}:\d{2}:\d{2},\d{3})[ \t]*-->[ \t]*"                # 开始时间
    r"(\d{2}:\d{2}:\d{2},\d{3})[ \t]*\n"                       # 结束时间
    r"([^\n]+(?:\n[^\n]+)*)\n[ \t]*\n",                        # 文本内容
    re.MULTILINE,
)

TIMESTAMP_FORMAT = "%H:%M:%S,%f"


def parse_timestamp(value: str, index: int) -> time:
    """Parse an SRT timestamp into a time of day."""
    try:
        return datetime.strptime(value, TIMESTAMP_FORMAT).time()
    except ValueError:
        raise TimestampError(index, value) from None


def parse_srt(content: str) -> List[SrtEntry]:
    """
    Parse SRT file content into list of SrtEntry objects.

    Blocks that do not match the index / time range / text layout are
    skipped without error.

    Args:
        content: Raw SRT file content as string

    Returns:
        List of parsed SrtEntry objects

    Raises:
        TimestampError: a matched block carries an impossible timestamp
    """
    if not content or not content.strip():
        return []

    # 预处理：标准化换行符，确保末尾有空行
    content = content.lstrip('\ufeff')
    content = content.replace('\r\n', '\n').replace('\r', '\n')
    content = content.rstrip() + '\n\n'

    entries: List[SrtEntry] = []

    for match in BLOCK_PATTERN.finditer(content):
        idx, start, end, text = match.groups()
        index = int(idx)
        entries.append(SrtEntry(
            index=index,
            start=parse_timestamp(start, index),
            end=parse_timestamp(end, index),
            text=text,
        ))

    if not entries:
        logger.warning("No valid SRT entries found in content")
    else:
        logger.debug(f"Matched {len(entries)} SRT blocks")

    return entries


def validate_srt_file(path: Path) -> Optional[str]:
    """
    Validate SRT file before processing.

    Args:
        path: Path to SRT file

    Returns:
        Error message if invalid, None if valid
    """
    if not path.exists():
        return f"File not found: {path}"

    if not path.is_file():
        return f"Not a file: {path}"

    suffix = path.suffix.lower()
    if suffix != '.srt':
        return f"Invalid file extension: {suffix} (expected .srt)"

    size = path.stat().st_size
    if size == 0:
        return "File is empty"
    if size > 50 * 1024 * 1024:  # 50MB
        return f"File too large: {size / 1024 / 1024:.1f}MB (max 50MB)"

    return None


def render_srt(entries: Sequence[SrtEntry]) -> str:
    """Render entries back to SRT text in their original order."""
    return "".join(e.to_srt() for e in entries)


def save_srt(entries: Sequence[SrtEntry], path: Path) -> None:
    """
    Save SrtEntry list to SRT file.

    Args:
        entries: Sequence of SrtEntry objects to save
        path: Output file path
    """
    # 先完整渲染，再一次写入
    content = render_srt(entries)

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")

    logger.info(f"Saved {len(entries)} entries to {path}")
