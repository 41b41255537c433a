"""
Localized string lookup over the static translation table.

The table maps a language code to a nested tree whose leaves are strings,
sequences of strings or sequences of records. Keys are dot-paths such as
``nav.useCases``. A key missing from the requested language is looked up
again in the fallback language; a key missing from both resolves to a
sentinel (the key itself for strings, an empty list for sequences).
Lookups never raise.
"""
from __future__ import annotations
from collections.abc import Mapping, Sequence
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Optional, Tuple
import logging

import streamlit as st

from .utils import read_yaml_file
from .constants import I18N_DIR, DEFAULT_LANGUAGE, FALLBACK_LANGUAGE, SUPPORTED_LANGUAGES

logger = logging.getLogger(__name__)

TranslationTable = Mapping[str, Mapping[str, Any]]

_MISSING = object()
_EMPTY_TREE: Mapping[str, Any] = MappingProxyType({})


class NodeKind(Enum):
    STRING = "string"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    MISSING = "missing"


# --- Table Loading ---

def freeze(node: Any) -> Any:
    """Recursively turns mappings into read-only proxies and lists into tuples."""
    if isinstance(node, Mapping):
        return MappingProxyType({str(k): freeze(v) for k, v in node.items()})
    if isinstance(node, (list, tuple)):
        return tuple(freeze(v) for v in node)
    return node

def load_translation_table(
    languages: Tuple[str, ...] = SUPPORTED_LANGUAGES,
    i18n_dir: str | Path = I18N_DIR,
) -> TranslationTable:
    """Reads ``<lang>.yaml`` for every language and returns the frozen table."""
    table: Dict[str, Any] = {}
    for lang in languages:
        path = Path(i18n_dir) / f"{lang}.yaml"
        if not path.exists():
            logger.warning("Translation file for '%s' not found at %s", lang, path)
            table[lang] = {}
            continue
        table[lang] = read_yaml_file(path)
    return freeze(table)

@st.cache_resource(show_spinner=False)
def get_translation_table() -> TranslationTable:
    """The process-wide translation table, loaded once."""
    table = load_translation_table()
    logger.info("Loaded translations for languages: %s", ", ".join(table.keys()))
    return table


# --- Key Resolution ---

def node_kind(node: Any) -> NodeKind:
    if isinstance(node, str):
        return NodeKind.STRING
    if isinstance(node, Mapping):
        return NodeKind.MAPPING
    if isinstance(node, Sequence):
        return NodeKind.SEQUENCE
    return NodeKind.MISSING

def _walk(tree: Any, segments: List[str]) -> Any:
    node = tree
    for segment in segments:
        if isinstance(node, Mapping) and segment in node:
            node = node[segment]
        else:
            return _MISSING
    return node

def lookup(key: str, lang: str, table: Optional[TranslationTable] = None,
           fallback: str = FALLBACK_LANGUAGE) -> Any:
    """
    Walks ``key`` in the tree of ``lang`` and, on any missing segment, in the
    fallback language tree. Returns the terminal node, or a missing marker.
    A walk that completes is final even if its terminal has the wrong type.
    """
    if table is None:
        table = get_translation_table()
    segments = key.split(".")

    node = _walk(table.get(lang, _EMPTY_TREE), segments)
    if node is _MISSING and lang != fallback:
        node = _walk(table.get(fallback, _EMPTY_TREE), segments)
    return node

def t(key: str, lang: str = DEFAULT_LANGUAGE, table: Optional[TranslationTable] = None,
      default: Optional[str] = None, fallback: str = FALLBACK_LANGUAGE) -> str:
    """
    Translates a dot-path key. Returns ``default`` (or the key itself) when the
    key is missing in both languages or does not point at a string.
    """
    node = lookup(key, lang, table, fallback)
    if node_kind(node) is NodeKind.STRING:
        return node
    return key if default is None else default

def t_array(key: str, lang: str = DEFAULT_LANGUAGE, table: Optional[TranslationTable] = None,
            fallback: str = FALLBACK_LANGUAGE) -> List[str]:
    """Returns the list of strings at ``key``, or an empty list on miss or type mismatch."""
    node = lookup(key, lang, table, fallback)
    if node_kind(node) is not NodeKind.SEQUENCE:
        return []
    if not all(isinstance(item, str) for item in node):
        return []
    return list(node)

def t_records(key: str, lang: str = DEFAULT_LANGUAGE, table: Optional[TranslationTable] = None,
              fallback: str = FALLBACK_LANGUAGE) -> List[Dict[str, Any]]:
    """Returns the list of records (e.g. feature cards) at ``key``, or an empty list."""
    node = lookup(key, lang, table, fallback)
    if node_kind(node) is not NodeKind.SEQUENCE:
        return []
    if not all(isinstance(item, Mapping) for item in node):
        return []
    return [dict(item) for item in node]
