"""Command-line interface for SRT Vocab Translator."""

from __future__ import annotations

import argparse
import logging
import sys

from .batcher import DEFAULT_MAX_BATCH_BYTES
from .config import TranslatorConfig, DEFAULT_DICTIONARY_FILENAME
from .errors import SrtVocabError
from .llm_client import DEFAULT_BASE_URL, DEFAULT_MODEL
from .pipeline import run_pipeline


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="srt-vocab",
        description="Translate subtitle lines that contain words you do not know yet",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s movie.srt                        # Translate into movie.out.srt
  %(prog)s movie.srt out.srt -d my.db       # Custom output and dictionary
  %(prog)s movie.srt -a                     # Only update the dictionary
  %(prog)s movie.srt -a --new-words new.tsv # Frequency list of unfamiliar words
  %(prog)s movie.srt --known-words vocab.txt
        """
    )

    # Positional arguments
    parser.add_argument("input_path", help="Input SRT file path")
    parser.add_argument("output_path", nargs='?', default=None,
                        help="Output SRT file path (default: <input>.out.srt)")

    # Word lists
    parser.add_argument("-d", "--database-file", dest="dictionary_path",
                        default=DEFAULT_DICTIONARY_FILENAME, help="Word dictionary file")
    parser.add_argument("--known-words", dest="known_words_path",
                        help="Text file whose words are marked as known")
    parser.add_argument("--new-words", dest="new_words_path",
                        help="Write unfamiliar words with their frequency to this file")
    parser.add_argument("-a", "--analyze", action="store_true",
                        help="Skip translation and only update the dictionary")

    # API options
    parser.add_argument("--api-key", help="API key (or set SRT_VOCAB_API_KEY)")
    parser.add_argument("--base-url", default=DEFAULT_BASE_URL)
    parser.add_argument("--model", dest="model_name", default=DEFAULT_MODEL)
    parser.add_argument("--source-lang", default="en")
    parser.add_argument("--target-lang", default="ru")

    # Batching
    parser.add_argument("--max-bytes", dest="max_batch_bytes", type=int,
                        default=DEFAULT_MAX_BATCH_BYTES, help="Maximum request size in bytes")
    parser.add_argument("--pause", dest="request_pause", type=float, default=1.0,
                        help="Seconds to wait between requests")

    # Misc
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")

    return parser


def parse_arguments(argv=None) -> argparse.Namespace:
    """Parse command line arguments."""
    return build_parser().parse_args(argv)


def run(args: argparse.Namespace) -> int:
    """Main workflow."""
    logger = logging.getLogger(__name__)
    config = TranslatorConfig.from_args(args)

    error = config.validate()
    if error:
        logger.error(error)
        return 1

    if config.analyze:
        logger.info("Analysis mode")

    result = run_pipeline(config)

    if result.output_path:
        logger.info(
            f"Done! {result.flagged}/{result.entries} entries translated "
            f"in {result.batches} batches. Saved to {result.output_path}"
        )
    logger.info(f"Succeeded in {result.elapsed * 1000:.0f} ms")
    return 0


def main(argv=None) -> None:
    """CLI entry point."""
    args = parse_arguments(argv)
    setup_logging(args.verbose)

    try:
        sys.exit(run(args))
    except KeyboardInterrupt:
        print("\nInterrupted by user.")
        sys.exit(130)
    except SrtVocabError as e:
        logging.error(str(e))
        if args.verbose:
            import traceback
            traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
