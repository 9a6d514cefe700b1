"""Exception hierarchy for fatal pipeline conditions."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .llm_client import APIErrorType


class SrtVocabError(Exception):
    """Base class for all errors that abort a run."""


class InputFileError(SrtVocabError):
    def __init__(self, path: Path, detail: str) -> None:
        super().__init__(f"Cannot read subtitle file '{path}': {detail}")
        self.path = path
        self.detail = detail


class TimestampError(SrtVocabError):
    def __init__(self, index: int, value: str) -> None:
        super().__init__(f"Invalid timestamp '{value}' in subtitle #{index}")
        self.index = index
        self.value = value


class TranslationError(SrtVocabError):
    def __init__(self, detail: str, error_type: Optional["APIErrorType"] = None) -> None:
        prefix = f"Translation failed ({error_type.value})" if error_type else "Translation failed"
        super().__init__(f"{prefix}: {detail}")
        self.detail = detail
        self.error_type = error_type


class ReassemblyError(SrtVocabError):
    def __init__(self, index: int, consumed: int) -> None:
        super().__init__(
            f"Ran out of translated lines at subtitle #{index} "
            f"after {consumed} lines"
        )
        self.index = index
        self.consumed = consumed


class WordFileError(SrtVocabError):
    def __init__(self, path: Path, detail: str) -> None:
        super().__init__(f"Cannot access word file '{path}': {detail}")
        self.path = path
        self.detail = detail
