"""Attaching translated lines back onto their subtitle entries."""

from __future__ import annotations

import logging
from typing import List, Sequence

from .batcher import decode_lines
from .errors import ReassemblyError
from .models import SrtEntry, TranslationBatch
from .text_utils import split_translated_lines

logger = logging.getLogger(__name__)


def collect_translated_lines(
    batches: Sequence[TranslationBatch],
    translated: Sequence[str],
) -> List[str]:
    """Split every batch result into lines and concatenate them in batch order."""
    lines: List[str] = []

    for i, (batch, result) in enumerate(zip(batches, translated), 1):
        batch_lines = split_translated_lines(result)
        if len(batch_lines) != len(batch):
            logger.warning(
                f"Batch {i} returned {len(batch_lines)} lines, expected {len(batch)}"
            )
        lines.extend(batch_lines)

    return lines


def reassemble(
    entries: Sequence[SrtEntry],
    batches: Sequence[TranslationBatch],
    translated: Sequence[str],
) -> int:
    """
    Append translated text to every entry flagged for translation.

    Flagged entries consume translated lines in source order, one line each.

    Returns:
        Number of translated lines consumed

    Raises:
        ReassemblyError: fewer translated lines than flagged entries
    """
    lines = collect_translated_lines(batches, translated)
    consumed = 0

    for entry in entries:
        if not entry.need_translation:
            continue

        if consumed >= len(lines):
            raise ReassemblyError(entry.index, consumed)

        translation = decode_lines(lines[consumed])
        consumed += 1
        if not translation:
            logger.warning(f"Empty translation for subtitle #{entry.index}")
            continue
        entry.text = f"{entry.text}\n{translation}"

    if consumed < len(lines):
        logger.warning(f"Ignoring {len(lines) - consumed} extra translated lines")

    return consumed
