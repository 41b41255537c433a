from __future__ import annotations
from typing import List, Sequence

from .models import ContentEntry
from .versions import get_doc_slug


def normalize_query(query: str) -> str:
    """Lowercases and trims a search query."""
    return (query or "").strip().lower()

def entry_matches_query(entry: ContentEntry, query: str) -> bool:
    """Checks if an entry matches a free-text query. An empty query matches everything."""
    normalized_query = normalize_query(query)
    if not normalized_query:
        return True

    # Text search: check against title, description, slug and body
    haystack = " ".join([
        entry.title.lower(),
        entry.description.lower(),
        get_doc_slug(entry.id).replace("-", " ").lower(),
        entry.body.lower(),
    ])

    return normalized_query in haystack

def filter_entries(entries: Sequence[ContentEntry], query: str) -> List[ContentEntry]:
    """Returns the entries matching the query, keeping their order."""
    return [e for e in entries if entry_matches_query(e, query)]
