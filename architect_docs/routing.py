"""
URL helpers for the two-language site.

Every path lives under the base prefix. The default language has no marker,
the other language is reached through a leading path segment
(``/architect-docs/en/...``). All helpers are pure and never raise; a path
they do not understand is passed through as best they can.
"""
from __future__ import annotations
from typing import Dict, Mapping, NamedTuple, Optional, Sequence, Tuple
from urllib.parse import urlsplit, SplitResult

from .constants import BASE_URL, DEFAULT_LANGUAGE, PREFIXED_LANGUAGES, SLUG_MAP


class Route(NamedTuple):
    name: str
    slug: str = ""


# --- Path Primitives ---

def get_pathname(url: str | SplitResult) -> str:
    """Returns the pathname of a full URL or of a bare path, without query or fragment."""
    if isinstance(url, SplitResult):
        return url.path
    text = str(url or "")
    if "://" in text:
        return urlsplit(text).path or "/"
    return text.split("#", 1)[0].split("?", 1)[0]

def strip_base(pathname: str, base: str = BASE_URL) -> str:
    """Removes the base prefix and returns the remainder without a leading slash."""
    if pathname.startswith(base):
        pathname = pathname[len(base):]
    elif pathname == base.rstrip("/"):
        pathname = ""
    return pathname.lstrip("/")

def split_language(clean_path: str, prefixed_languages: Sequence[str] = PREFIXED_LANGUAGES) -> Tuple[Optional[str], str]:
    """
    Splits a leading language segment off a base-relative path.
    Only an exact segment matches: ``en`` and ``en/x`` do, ``engage/`` does not.
    """
    for code in prefixed_languages:
        if clean_path == code:
            return code, ""
        if clean_path.startswith(code + "/"):
            return code, clean_path[len(code) + 1:]
    return None, clean_path

def split_path(url: str | SplitResult, base: str = BASE_URL,
               prefixed_languages: Sequence[str] = PREFIXED_LANGUAGES,
               default_language: str = DEFAULT_LANGUAGE) -> Tuple[str, str]:
    """Returns ``(language, language-neutral path)`` for a site URL."""
    lang, neutral = split_language(strip_base(get_pathname(url), base), prefixed_languages)
    return lang or default_language, neutral


# --- Public Helpers ---

def detect_language(url: str | SplitResult, base: str = BASE_URL,
                    prefixed_languages: Sequence[str] = PREFIXED_LANGUAGES,
                    default_language: str = DEFAULT_LANGUAGE) -> str:
    """Returns the language a URL is served in."""
    lang, _ = split_path(url, base, prefixed_languages, default_language)
    return lang

def localize_path(path: str, lang: str, base: str = BASE_URL,
                  prefixed_languages: Sequence[str] = PREFIXED_LANGUAGES,
                  default_language: str = DEFAULT_LANGUAGE) -> str:
    """
    Builds the URL of ``path`` in ``lang``. An existing base prefix and language
    segment are dropped first, so the result always carries at most one
    language segment and localizing twice gives the same URL.
    """
    _, clean_path = split_language(strip_base(get_pathname(path), base), prefixed_languages)
    if lang == default_language:
        return f"{base}{clean_path}"
    return f"{base}{lang}/{clean_path}"

def translate_slug(neutral_path: str, target_lang: str, slug_map: Mapping[str, str] = SLUG_MAP,
                   default_language: str = DEFAULT_LANGUAGE) -> str:
    """
    Swaps the first path segment for its counterpart in ``target_lang``.
    ``slug_map`` holds default-language -> other-language pairs; the inverse
    direction is derived. Unknown segments are left alone.
    """
    if target_lang == default_language:
        lookup: Dict[str, str] = {other: default for default, other in slug_map.items()}
    else:
        lookup = dict(slug_map)
    head, sep, tail = neutral_path.partition("/")
    return lookup.get(head, head) + sep + tail

def alternate_path(url: str | SplitResult, target_lang: str, base: str = BASE_URL,
                   slug_map: Optional[Mapping[str, str]] = None,
                   prefixed_languages: Sequence[str] = PREFIXED_LANGUAGES,
                   default_language: str = DEFAULT_LANGUAGE) -> str:
    """Returns the URL of the current page in ``target_lang`` (used by the language toggle)."""
    if slug_map is None:
        slug_map = SLUG_MAP
    _, neutral = split_path(url, base, prefixed_languages, default_language)
    neutral = translate_slug(neutral, target_lang, slug_map, default_language)
    return localize_path(neutral, target_lang, base, prefixed_languages, default_language)


# --- Site Routes ---

_STATIC_ROUTES = {
    "": "home",
    "docs": "docs_hub",
    "architectures": "architectures",
    "casos-de-uso": "use_cases",
    "use-cases": "use_cases",
    "why-architect": "why",
    "roadmap": "roadmap",
}

def resolve_route(neutral_path: str) -> Route:
    """Maps a language-neutral path to a page name and, for detail pages, a slug."""
    clean = neutral_path.strip("/")
    if clean in _STATIC_ROUTES:
        return Route(_STATIC_ROUTES[clean])

    head, _, rest = clean.partition("/")
    if head == "docs" and rest:
        return Route("doc", rest)
    if head == "architectures" and rest:
        return Route("architecture", rest)
    return Route("not_found", clean)
