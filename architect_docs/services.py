from __future__ import annotations
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple
import logging

import streamlit as st
import yaml
from pydantic import ValidationError

from .models import SiteConfig, ContentEntry, COLLECTION_SCHEMAS
from .utils import read_text_file, read_yaml_file
from .constants import CONFIG_DIR, CONTENT_DIR, DEFAULT_LANGUAGE

logger = logging.getLogger(__name__)

FRONTMATTER_DELIMITER = "---"


# --- Configuration Loading ---

@st.cache_data(show_spinner=False)
def load_site_config(config_path: str | Path = CONFIG_DIR / "site.yaml") -> SiteConfig:
    """Loads the main site configuration from site.yaml."""
    config_path = Path(config_path)
    if not config_path.exists():
        logger.error("%s not found, using default SiteConfig.", config_path.name)
        return SiteConfig()

    data = read_yaml_file(config_path)
    return SiteConfig.model_validate(data)


# --- Markdown Parsing ---

def parse_markdown(text: str) -> Tuple[Dict[str, Any], str]:
    """
    Splits a markdown document into its YAML frontmatter and body.
    A document that does not open with a ``---`` line has no frontmatter.
    """
    lines = text.splitlines(keepends=True)
    if not lines or lines[0].strip() != FRONTMATTER_DELIMITER:
        return {}, text

    for idx in range(1, len(lines)):
        if lines[idx].strip() == FRONTMATTER_DELIMITER:
            raw = "".join(lines[1:idx])
            body = "".join(lines[idx + 1:])
            data = yaml.safe_load(raw) or {}
            if not isinstance(data, dict):
                raise ValueError("Frontmatter must be a YAML mapping")
            return data, body.lstrip("\n")

    # An unterminated block is treated as plain markdown.
    return {}, text


# --- Collection Loading ---

def collection_name(base_name: str, lang: str, default_lang: str = DEFAULT_LANGUAGE) -> str:
    """
    Returns the collection that holds ``base_name`` content in ``lang`` (e.g. docs -> docs-en).
    Unsuffixed collections on disk hold ``default_lang`` content, which does not follow the URL default.
    """
    if lang == default_lang:
        return base_name
    return f"{base_name}-{lang}"

@st.cache_data(ttl=3600, show_spinner=False)
def load_collection(name: str, content_dir: str | Path = CONTENT_DIR) -> List[ContentEntry]:
    """
    Scans ``content_dir/<name>`` for markdown files and validates each
    frontmatter against the collection schema. Invalid entries are skipped.
    """
    schema = COLLECTION_SCHEMAS[name]
    root = Path(content_dir) / name
    if not root.exists():
        logger.warning("Content collection directory not found: %s", root)
        return []

    entries: List[ContentEntry] = []
    for path in sorted(root.rglob("*.md")):
        entry_id = path.relative_to(root).with_suffix("").as_posix()
        try:
            data, body = parse_markdown(read_text_file(path))
            frontmatter = schema.model_validate(data)
        except (ValidationError, ValueError, yaml.YAMLError):
            logger.error("Skipping '%s' in collection '%s': invalid frontmatter", entry_id, name, exc_info=True)
            continue
        entries.append(ContentEntry(id=entry_id, collection=name, frontmatter=frontmatter, body=body, source=path))

    entries.sort(key=lambda e: (e.order, e.id))
    logger.info("Loaded %d entries from collection '%s'.", len(entries), name)
    return entries


# --- Single Entity Retrieval ---

def get_entry(entries: Sequence[ContentEntry], entry_id: str) -> Optional[ContentEntry]:
    """Finds an entry in a list by its slug."""
    normalized_id = (entry_id or "").strip("/")
    for entry in entries:
        if entry.id == normalized_id:
            return entry
    return None
