import pathlib
import sys

sys.path.append(str(pathlib.Path(__file__).resolve().parents[1]))

from architect_docs.models import ContentEntry, DocFrontmatter
from architect_docs.search import entry_matches_query, filter_entries, normalize_query


def _entry(entry_id, title=None, description=None, body=""):
    return ContentEntry(
        id=entry_id,
        collection="docs",
        frontmatter=DocFrontmatter(title=title, description=description),
        body=body,
    )


ENTRIES = [
    _entry("v0-16-1/ralph-loop", "Ralph Loop", "Iteración autónoma"),
    _entry("v0-16-1/guardrails", "Guardrails", body="Archivos protegidos y quality gates"),
    _entry("v0-16-1/parallel-runs"),
]


def test_normalize_query():
    assert normalize_query("  Ralph ") == "ralph"
    assert normalize_query(None) == ""


def test_empty_query_matches_everything():
    assert filter_entries(ENTRIES, "") == ENTRIES


def test_matches_title_description_and_body():
    assert entry_matches_query(ENTRIES[0], "RALPH")
    assert entry_matches_query(ENTRIES[0], "autónoma")
    assert entry_matches_query(ENTRIES[1], "quality gates")


def test_matches_slug_without_version():
    assert [e.id for e in filter_entries(ENTRIES, "parallel runs")] == ["v0-16-1/parallel-runs"]
    assert filter_entries(ENTRIES, "v0-16-1") == []


def test_no_match():
    assert filter_entries(ENTRIES, "kubernetes") == []
