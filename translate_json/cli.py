"""
translate-json command line.

Translates the string values of a JSON localization file into one or more
languages, writing `<lang>.json` files next to the source file.

Usage:
    translate-json --input=locales/sk.json --output=en,de,CS
    translate-json --input=locales/sk.json --output=en --dry-run
    python -m translate_json --input=locales/sk.json --output=en --env-file prod.env

Configuration (environment or .env):
    TRANSLATION_EMAIL        contact address sent with every request
    TRANSLATION_ENDPOINT     translation endpoint (default: MyMemory)
    TRANSLATION_SOURCE_LANG  language of the source file (default: sk)
    TRANSLATION_TIMEOUT      request timeout in seconds (default: 30)
    LOG_LEVEL                log level (default: INFO)
"""

from __future__ import annotations

import argparse
import concurrent.futures
import logging
import sys
from pathlib import Path
from typing import Optional

from .client import DryRunClient, TranslationClient
from .config import Settings, load_settings, setup_logging
from .errors import TranslateJsonError
from .merge import MergeResult, merge_and_write

logger = logging.getLogger(__name__)


def parse_languages(raw: str) -> list[str]:
    """Split a comma-separated language list, dropping blanks and case-insensitive repeats."""
    languages: list[str] = []
    seen = set()
    for part in raw.split(","):
        lang = part.strip()
        if not lang or lang.lower() in seen:
            continue
        seen.add(lang.lower())
        languages.append(lang)
    return languages


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="translate-json",
        description="Translate a JSON localization file into other languages.",
    )
    parser.add_argument(
        "--input",
        required=True,
        type=Path,
        metavar="PATH",
        help="Source-language JSON file.",
    )
    parser.add_argument(
        "--output",
        required=True,
        metavar="LANGS",
        help="Comma-separated target language codes (e.g. en,de,cs).",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Merge with marked placeholders instead of calling the API; write nothing.",
    )
    parser.add_argument(
        "--env-file",
        type=Path,
        default=Path(".env"),
        metavar="PATH",
        help="dotenv file to load before reading the environment. Default: .env",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser


def run_language(
    source_path: Path,
    language: str,
    settings: Settings,
    dry_run: bool,
) -> MergeResult:
    client = DryRunClient() if dry_run else TranslationClient.from_settings(settings)
    try:
        return merge_and_write(source_path, language, client, dry_run=dry_run)
    finally:
        client.close()


def translate_file(
    source_path: Path,
    languages: list[str],
    settings: Settings,
    dry_run: bool = False,
) -> int:
    """Run every language concurrently and wait for all of them. Returns the failure count."""
    results: list[MergeResult] = []
    errors = 0

    with concurrent.futures.ThreadPoolExecutor(max_workers=max(len(languages), 1)) as executor:
        future_map = {
            executor.submit(run_language, source_path, lang, settings, dry_run): lang
            for lang in languages
        }
        for future in concurrent.futures.as_completed(future_map):
            lang = future_map[future]
            try:
                results.append(future.result())
            except TranslateJsonError as exc:
                logger.error("Translation to %s aborted: %s", lang.lower(), exc)
                errors += 1
            except Exception:
                logger.exception("Translation to %s error", lang.lower())
                errors += 1

    write_failures = sum(1 for r in results if not r.written and not dry_run)
    logger.info(
        "Done. %d language(s) processed, %d unique string(s) translated, %d error(s).",
        len(results),
        sum(r.translated_strings for r in results),
        errors + write_failures,
    )
    return errors


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(args.env_file)
    except TranslateJsonError as exc:
        setup_logging("INFO")
        logger.error("%s", exc)
        return 1

    setup_logging("DEBUG" if args.verbose else settings.log_level)
    if not settings.email and not args.dry_run:
        logger.warning("TRANSLATION_EMAIL is not set; requests are sent without a contact address.")

    languages = parse_languages(args.output)
    if not languages:
        logger.error("No target languages given in --output=%s", args.output)
        return 1

    errors = translate_file(args.input, languages, settings, dry_run=args.dry_run)
    return 1 if errors else 0


if __name__ == "__main__":
    sys.exit(main())
