"""Configuration and constants."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional
from pathlib import Path

from dotenv import load_dotenv

from .batcher import DEFAULT_HIGHLIGHT_COLOR, DEFAULT_MAX_BATCH_BYTES
from .llm_client import DEFAULT_BASE_URL, DEFAULT_MODEL

# Load environment variables once
load_dotenv()

# Default dictionary filename
DEFAULT_DICTIONARY_FILENAME = "words.db"

# Suffix for the default output path
OUTPUT_SUFFIX = ".out.srt"

API_KEY_ENV_VARS = ("SRT_VOCAB_API_KEY", "OPENAI_API_KEY")


def api_key_from_env() -> Optional[str]:
    for name in API_KEY_ENV_VARS:
        value = os.environ.get(name)
        if value:
            return value
    return None


@dataclass
class TranslatorConfig:
    """Configuration for a selective translation run."""

    # Files
    input_path: Path = Path()
    output_path: Optional[Path] = None
    dictionary_path: Path = Path(DEFAULT_DICTIONARY_FILENAME)
    known_words_path: Optional[Path] = None
    new_words_path: Optional[Path] = None
    analyze: bool = False

    # API settings
    api_key: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL
    model_name: str = DEFAULT_MODEL
    timeout: float = 60.0

    # Translation settings
    source_lang: str = "en"
    target_lang: str = "ru"
    max_batch_bytes: int = DEFAULT_MAX_BATCH_BYTES
    request_pause: float = 1.0

    # Output settings
    highlight_color: str = DEFAULT_HIGHLIGHT_COLOR

    def __post_init__(self):
        """Load API key from environment if not provided."""
        if self.api_key is None:
            self.api_key = api_key_from_env()

    @classmethod
    def from_args(cls, args) -> "TranslatorConfig":
        """Create config from argparse namespace."""
        def _path(name: str) -> Optional[Path]:
            value = getattr(args, name, None)
            return Path(value).expanduser() if value else None

        return cls(
            input_path=Path(args.input_path).expanduser(),
            output_path=_path('output_path'),
            dictionary_path=_path('dictionary_path') or Path(DEFAULT_DICTIONARY_FILENAME),
            known_words_path=_path('known_words_path'),
            new_words_path=_path('new_words_path'),
            analyze=getattr(args, 'analyze', False),
            api_key=getattr(args, 'api_key', None) or api_key_from_env(),
            base_url=getattr(args, 'base_url', DEFAULT_BASE_URL),
            model_name=getattr(args, 'model_name', DEFAULT_MODEL),
            source_lang=getattr(args, 'source_lang', "en"),
            target_lang=getattr(args, 'target_lang', "ru"),
            max_batch_bytes=getattr(args, 'max_batch_bytes', DEFAULT_MAX_BATCH_BYTES),
            request_pause=getattr(args, 'request_pause', 1.0),
        )

    def resolve_output_path(self) -> Path:
        """Explicit output path, or ``<input stem>.out.srt`` next to the input."""
        if self.output_path:
            return self.output_path
        return self.input_path.with_name(self.input_path.stem + OUTPUT_SUFFIX)

    def validate(self, require_api_key: bool = True) -> Optional[str]:
        """
        Validate configuration.

        Returns:
            Error message if invalid, None if valid
        """
        if require_api_key and not self.analyze and not self.api_key:
            return "API key is required. Set SRT_VOCAB_API_KEY or use --api-key"

        if self.max_batch_bytes < 1:
            return f"Batch size must be positive, got {self.max_batch_bytes}"

        if self.request_pause < 0:
            return f"Pause must not be negative, got {self.request_pause}"

        if self.source_lang.lower() == self.target_lang.lower():
            return f"Source and target language are both '{self.source_lang}'"

        return None
