# architect_docs/state.py

from __future__ import annotations
from typing import Any, Dict, List, Optional

import streamlit as st
from pydantic import BaseModel

from .constants import FALLBACK_LANGUAGE
from .i18n import t, t_array, t_records
from .models import SiteConfig
from .routing import Route, resolve_route
from .versions import get_doc_slug, get_latest_version, get_version_by_id


class AppState(BaseModel):
    """
    A single source of truth for the application's request-scoped state.
    The site path is the URL the static site would serve; language and page
    are derived from it.
    """

    path: str
    language: str
    neutral_path: str = ""
    version: str
    fallback_language: str = FALLBACK_LANGUAGE

    @classmethod
    def from_path(cls, path: str, site_config: SiteConfig, version: str = "") -> AppState:
        """Builds the state for a site path, falling back to the latest version."""
        lang, neutral = site_config.split_path(path or site_config.routing.base)
        if not get_version_by_id(site_config.versions, version):
            version = get_latest_version(site_config.versions).id
        return cls(
            path=site_config.localize_path(neutral, lang),
            language=lang,
            neutral_path=neutral,
            version=version,
            fallback_language=site_config.i18n.fallback,
        )

    @classmethod
    def from_streamlit(cls, site_config: SiteConfig) -> AppState:
        """
        Factory method to initialize the state from Streamlit's query params.
        This should be called once at the beginning of each script run.
        """
        path = _get_query_param("path", default=site_config.routing.base)
        version = _get_query_param("version")
        return cls.from_path(path, site_config, version)

    def apply_to_streamlit(self) -> None:
        """Writes the current state back to Streamlit's query parameters."""
        _set_query_param("path", self.path)
        _set_query_param("version", self.version)

    @property
    def route(self) -> Route:
        return resolve_route(self.neutral_path)

    # --- Translations in the current language ---

    def t(self, key: str, default: Optional[str] = None) -> str:
        return t(key, self.language, default=default, fallback=self.fallback_language)

    def t_array(self, key: str) -> List[str]:
        return t_array(key, self.language, fallback=self.fallback_language)

    def t_records(self, key: str) -> List[Dict[str, Any]]:
        return t_records(key, self.language, fallback=self.fallback_language)

    # --- Transitions ---

    def set_language(self, lang_code: str, site_config: SiteConfig):
        """Moves to the same page in another language."""
        if self.language == lang_code:
            return
        new_path = site_config.alternate_path(self.path, lang_code)
        _, self.neutral_path = site_config.split_path(new_path)
        self.path = new_path
        self.language = lang_code

    def set_version(self, version: str, site_config: SiteConfig):
        """
        Selects another docs version. On a doc page the path moves to the same
        doc in the new version, e.g. docs/v0-16-1/ralph-loop/ -> docs/v0-15-3/ralph-loop/.
        """
        if self.version == version or not get_version_by_id(site_config.versions, version):
            return
        self.version = version
        route = self.route
        if route.name != "doc":
            return
        doc_slug = get_doc_slug(route.slug + "/").strip("/")
        self.neutral_path = "/".join(part for part in ("docs", version, doc_slug) if part) + "/"
        self.path = site_config.localize_path(self.neutral_path, self.language)

# --- Helper functions to interact with Streamlit's query params ---
def _get_query_param(name: str, default: str = "") -> str:
    """A robust way to get a single query parameter."""
    params = st.query_params
    value = params.get(name)
    if isinstance(value, list):
        return str(value[0]) if value else default
    return str(value) if value is not None else default

def _set_query_param(name: str, value: str):
    """Sets a query parameter."""
    st.query_params[name] = value
