"""Sequential batch translation using an LLM."""

from __future__ import annotations

import time
import logging
from typing import Callable, List, Sequence

from openai import OpenAI
from tqdm import tqdm

from .llm_client import call_llm
from .models import TranslationBatch
from .batcher import SENTINEL

logger = logging.getLogger(__name__)

# translate(text, source_lang, target_lang) -> translated text
TranslateFn = Callable[[str, str, str], str]

LANGUAGE_NAMES = {
    "en": "English",
    "ru": "Russian",
    "uk": "Ukrainian",
    "de": "German",
    "fr": "French",
    "es": "Spanish",
    "it": "Italian",
    "pt": "Portuguese",
    "pl": "Polish",
    "zh": "Simplified Chinese",
    "ja": "Japanese",
    "ko": "Korean",
}


def language_name(code: str) -> str:
    return LANGUAGE_NAMES.get(code.lower(), code)


def _build_translation_prompt(text: str, source_lang: str, target_lang: str) -> tuple[str, str]:
    """Build translation prompts."""
    source = language_name(source_lang)
    target = language_name(target_lang)

    system_prompt = f"""You are a professional subtitle translator. Translate {source} to {target}.

## Rules:
1. Translate each input line into exactly one output line
2. Keep the same number of lines and the same order as the input
3. Keep every "{SENTINEL}" marker where it is; it separates subtitle lines
4. Do not number lines, do not add notes or explanations
5. Keep translations concise for subtitles"""

    line_count = len(text.splitlines())
    user_prompt = f"""## Translate ({line_count} lines):
{text}
Output the {line_count} translated lines only:"""

    return system_prompt, user_prompt


class LLMTranslator:
    """Translation capability backed by an OpenAI-compatible chat API."""

    def __init__(self, client: OpenAI, model: str, temperature: float = 0.3):
        self.client = client
        self.model = model
        self.temperature = temperature

    def translate(self, text: str, source_lang: str, target_lang: str) -> str:
        """Translate text; raises TranslationError on any failure."""
        system_prompt, user_prompt = _build_translation_prompt(text, source_lang, target_lang)
        return call_llm(
            self.client,
            self.model,
            [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt}
            ],
            temperature=self.temperature,
        )

    __call__ = translate


def translate_batches(
    batches: Sequence[TranslationBatch],
    translate: TranslateFn,
    source_lang: str,
    target_lang: str,
    pause: float = 1.0,
    sleep: Callable[[float], None] = time.sleep,
) -> List[str]:
    """
    Translate batches one at a time, in order.

    Consecutive requests are separated by ``pause`` seconds. A failing
    request propagates immediately; later batches are not sent.

    Returns:
        One translated string per batch
    """
    results: List[str] = []

    for i, batch in enumerate(tqdm(batches, desc="Translating", unit="batch")):
        if i > 0 and pause > 0:
            sleep(pause)

        logger.debug(f"Batch {i + 1}/{len(batches)}: {len(batch)} entries, {batch.size} bytes")
        results.append(translate(batch.text, source_lang, target_lang))

    return results
