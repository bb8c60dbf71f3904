"""
Recursive translation of a Localization Tree.

A tree is any JSON value. Only string leaves are translated; the cache maps a
source string to its translation so every distinct string is sent to the
client at most once per run, wherever it appears in the tree.
"""

from __future__ import annotations

import enum
import logging
from typing import Any, Protocol, Union

logger = logging.getLogger(__name__)

LocalizationTree = Union[dict[str, Any], list[Any], str, int, float, bool, None]
TranslationCache = dict[str, str]


class Translator(Protocol):
    def translate(self, text: str, target_language: str) -> str: ...


class NodeKind(enum.Enum):
    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"


def node_kind(node: LocalizationTree) -> NodeKind:
    # bool is a subclass of int, so it has to be checked first.
    if node is None:
        return NodeKind.NULL
    if isinstance(node, bool):
        return NodeKind.BOOLEAN
    if isinstance(node, (int, float)):
        return NodeKind.NUMBER
    if isinstance(node, str):
        return NodeKind.STRING
    if isinstance(node, list):
        return NodeKind.ARRAY
    if isinstance(node, dict):
        return NodeKind.OBJECT
    raise TypeError(f"Not a JSON value: {type(node).__name__}")


def translate_string(
    text: str,
    target_language: str,
    client: Translator,
    cache: TranslationCache,
) -> str:
    if text in cache:
        logger.debug("Cache hit for '%s'", text[:50])
        return cache[text]
    if not text.strip():
        translated = text
    else:
        translated = client.translate(text, target_language)
    cache[text] = translated
    return translated


def translate_tree(
    node: LocalizationTree,
    target_language: str,
    client: Translator,
    cache: TranslationCache,
) -> LocalizationTree:
    """
    Return a structurally identical copy of `node` with every string leaf
    translated. `cache` is mutated in place and shared by the whole walk.
    """
    kind = node_kind(node)
    if kind is NodeKind.OBJECT:
        return {
            key: translate_tree(value, target_language, client, cache)
            for key, value in node.items()
        }
    if kind is NodeKind.ARRAY:
        return [translate_tree(item, target_language, client, cache) for item in node]
    if kind is NodeKind.STRING:
        return translate_string(node, target_language, client, cache)
    return node
