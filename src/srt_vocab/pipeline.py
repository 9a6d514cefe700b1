"""End-to-end selective translation run."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

from .batcher import build_batches, strip_markup
from .config import TranslatorConfig
from .dictionary import (
    load_dictionary,
    save_dictionary,
    load_known_words,
    unfamiliar_word_stats,
    save_word_stats,
)
from .errors import InputFileError
from .llm_client import create_client
from .models import WordKind
from .parser import parse_srt, save_srt, validate_srt_file
from .reassembler import reassemble
from .translator import LLMTranslator, TranslateFn, translate_batches
from .words import extract_words

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    """Summary of one run."""
    entries: int = 0
    dictionary_size: int = 0
    word_counts: Dict[WordKind, int] = field(default_factory=dict)
    words_added: int = 0
    flagged: int = 0
    batches: int = 0
    output_path: Optional[Path] = None
    elapsed: float = 0.0


def run_pipeline(config: TranslatorConfig, translate: TranslateFn | None = None) -> PipelineResult:
    """
    Run the whole pipeline for one subtitle file.

    The dictionary is persisted before any translation request, so its
    updates survive a failed translation. The output file is written only
    after every batch has been translated and reassembled.

    Args:
        config: Run configuration
        translate: Translation capability; an LLMTranslator is created from
            the config when omitted

    Returns:
        PipelineResult with run statistics
    """
    started = time.monotonic()
    result = PipelineResult()

    in_path = config.input_path.resolve()
    error = validate_srt_file(in_path)
    if error:
        raise InputFileError(in_path, error)

    logger.info(f"Reading: {in_path}")
    try:
        content = in_path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise InputFileError(in_path, str(e)) from e

    entries = parse_srt(content)
    result.entries = len(entries)
    logger.info(f"Parsed {len(entries)} subtitle entries")

    # 词库：加载、导入已知词、合并新词、保存
    dictionary = load_dictionary(config.dictionary_path)

    if config.known_words_path:
        promoted = dictionary.mark_known(load_known_words(config.known_words_path))
        logger.info(f"Marked {promoted} words as known")

    texts = [strip_markup(e.text) for e in entries]
    observed = extract_words("\n".join(texts))
    logger.info(f"Found {len(set(observed))} unique words in subtitles")

    result.words_added = dictionary.merge_observed(observed)
    if result.words_added:
        logger.info(f"Add {result.words_added} new words to the dictionary")
    else:
        logger.info("No new words found")

    save_dictionary(dictionary, config.dictionary_path)
    result.dictionary_size = len(dictionary)
    result.word_counts = dictionary.counts()
    logger.info(
        "Dictionary: "
        + ", ".join(f"{n} {kind.name.lower()}" for kind, n in result.word_counts.items())
    )

    if config.new_words_path:
        save_word_stats(unfamiliar_word_stats(dictionary, texts), config.new_words_path)

    if config.analyze:
        logger.info("Analysis mode: skipping translation")
        result.elapsed = time.monotonic() - started
        return result

    batches = build_batches(
        entries, dictionary, config.max_batch_bytes, config.highlight_color
    )
    result.batches = len(batches)

    if translate is None:
        client = create_client(config.api_key, config.base_url, config.timeout)
        translate = LLMTranslator(client, config.model_name).translate

    translated = translate_batches(
        batches, translate, config.source_lang, config.target_lang, config.request_pause
    )
    result.flagged = reassemble(entries, batches, translated)

    out_path = config.resolve_output_path()
    save_srt(entries, out_path)
    result.output_path = out_path

    result.elapsed = time.monotonic() - started
    return result
