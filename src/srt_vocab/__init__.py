"""
SRT Vocab Translator - selective subtitle translation driven by a word dictionary.

Features:
- Persistent dictionary of new, unknown and known words
- Highlighting of unfamiliar words in the subtitle text
- Translation of only the lines that contain unfamiliar words
- Size-bounded, paced batches sent to an OpenAI-compatible API
- Word frequency statistics for building the dictionary
"""

__version__ = "1.0.0"

from .models import SrtEntry, WordKind, WordStat, TranslationBatch
from .errors import (
    SrtVocabError,
    InputFileError,
    TimestampError,
    TranslationError,
    ReassemblyError,
    WordFileError,
)
from .parser import parse_srt, render_srt, save_srt, validate_srt_file
from .words import extract_words, word_frequencies
from .dictionary import WordDictionary, parse_dictionary, load_dictionary, save_dictionary
from .batcher import build_batches, highlight_entry, strip_markup
from .reassembler import reassemble
from .translator import LLMTranslator, translate_batches
from .config import TranslatorConfig
from .pipeline import run_pipeline, PipelineResult

__all__ = [
    # Models
    "SrtEntry",
    "WordKind",
    "WordStat",
    "TranslationBatch",
    "TranslatorConfig",
    "PipelineResult",
    # Errors
    "SrtVocabError",
    "InputFileError",
    "TimestampError",
    "TranslationError",
    "ReassemblyError",
    "WordFileError",
    # Parsing
    "parse_srt",
    "render_srt",
    "save_srt",
    "validate_srt_file",
    # Words
    "extract_words",
    "word_frequencies",
    "WordDictionary",
    "parse_dictionary",
    "load_dictionary",
    "save_dictionary",
    # Translation
    "build_batches",
    "highlight_entry",
    "strip_markup",
    "LLMTranslator",
    "translate_batches",
    "reassemble",
    "run_pipeline",
]
