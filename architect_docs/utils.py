from __future__ import annotations
from typing import Any, Dict
from pathlib import Path
import yaml
import logging

import streamlit as st
from slugify import slugify as python_slugify

# Setup a logger for this module
logger = logging.getLogger(__name__)

# --- Caching Primitives ---

@st.cache_data(show_spinner=False)
def read_text_file(path: str | Path) -> str:
    """Cached function to read a text file."""
    p = Path(path)
    return p.read_text(encoding="utf-8")

@st.cache_data(show_spinner=False)
def read_yaml_file(path: str | Path) -> Dict[str, Any]:
    """Cached function to read a YAML file."""
    p = Path(path)
    with p.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}

def clear_all_caches() -> None:
    """Clears all Streamlit caches."""
    st.cache_data.clear()
    st.cache_resource.clear()
    logger.info("All Streamlit caches have been cleared.")


# --- String Utilities ---

def slugify(text: str) -> str:
    """Generates a URL-friendly slug from a string, with accent folding."""
    return python_slugify(text)
