"""
Merge translated values into a per-language JSON file.

The target file lives next to the source file as `<lang>.json`. Values that
already match the fresh translation are kept, new or changed keys are
overwritten, keys that disappeared from the source are dropped, and the
output follows the source file's top-level key order.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .errors import SourceDocumentError
from .tree import TranslationCache, Translator, translate_tree

logger = logging.getLogger(__name__)


@dataclass
class MergeStats:
    added: int = 0
    updated: int = 0
    kept: int = 0
    removed: int = 0


@dataclass
class MergeResult:
    language: str
    target_path: Path
    stats: MergeStats
    translated_strings: int
    written: bool


def target_path_for(source_path: Path, target_language: str) -> Path:
    return source_path.parent / f"{target_language.lower()}.json"


def load_source_document(path: Path) -> dict[str, Any]:
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except OSError as exc:
        raise SourceDocumentError(f"Cannot read {path}: {exc}") from exc
    except ValueError as exc:
        raise SourceDocumentError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise SourceDocumentError(
            f"Top level of {path} must be an object, got {type(data).__name__}"
        )
    return data


def load_existing_target(path: Path) -> dict[str, Any]:
    """Previously written target document, or {} if it is absent or unusable."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError):
        logger.debug("No usable target file at %s; starting empty", path)
        return {}
    if not isinstance(data, dict):
        return {}
    return data


def same_json(a: Any, b: Any) -> bool:
    """Equality as JSON sees it: 1, 1.0 and true are all different values."""
    return json.dumps(a, ensure_ascii=False) == json.dumps(b, ensure_ascii=False)


def merge_documents(
    source: dict[str, Any],
    translated: dict[str, Any],
    existing: dict[str, Any],
) -> tuple[dict[str, Any], MergeStats]:
    stats = MergeStats()

    updates: dict[str, Any] = {}
    for key in source:
        value = translated.get(key)
        if key in existing and same_json(existing[key], value):
            stats.kept += 1
            continue
        if key in existing:
            stats.updated += 1
        else:
            stats.added += 1
        updates[key] = value

    remaining = {}
    for key, value in existing.items():
        if key in translated:
            remaining[key] = value
        else:
            stats.removed += 1

    merged = {**remaining, **updates}

    # Source order is authoritative and doubles as the final key filter.
    ordered = {key: merged[key] for key in source if key in merged}
    return ordered, stats


def write_document(path: Path, document: dict[str, Any]) -> bool:
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(json.dumps(document, ensure_ascii=False, indent=2))
    except OSError as exc:
        logger.error("Failed to write %s: %s", path, exc)
        return False
    return True


def merge_and_write(
    source_path: Path,
    target_language: str,
    client: Translator,
    dry_run: bool = False,
) -> MergeResult:
    """
    Translate `source_path` into `target_language` and merge the result into
    the target file. Raises SourceDocumentError if the source is unusable;
    every other failure is logged and reported in the result.
    """
    source_path = Path(source_path)
    language = target_language.lower()

    source = load_source_document(source_path)
    target_path = target_path_for(source_path, target_language)
    existing = load_existing_target(target_path)

    cache: TranslationCache = {}
    translated = translate_tree(source, target_language, client, cache)

    ordered, stats = merge_documents(source, translated, existing)

    if dry_run:
        written = False
        logger.info(
            "[dry-run] %s: %d added, %d updated, %d kept, %d removed -> %s",
            language, stats.added, stats.updated, stats.kept, stats.removed, target_path,
        )
    else:
        written = write_document(target_path, ordered)
        if written:
            logger.info(
                "Translation to %s completed. Output saved to %s", language, target_path
            )

    return MergeResult(
        language=language,
        target_path=target_path,
        stats=stats,
        translated_strings=len(cache),
        written=written,
    )
