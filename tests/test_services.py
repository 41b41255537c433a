import pathlib
import sys

sys.path.append(str(pathlib.Path(__file__).resolve().parents[1]))

import pytest

from architect_docs.constants import CONFIG_DIR
from architect_docs.models import ArchitectureFrontmatter, DocFrontmatter
from architect_docs.services import (
    collection_name,
    get_entry,
    load_collection,
    load_site_config,
    parse_markdown,
)


def _write(path, text):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def test_parse_markdown_with_frontmatter():
    data, body = parse_markdown('---\ntitle: "Intro"\norder: 1\n---\n\n## Hola\n')
    assert data == {"title": "Intro", "order": 1}
    assert body == "## Hola\n"


def test_parse_markdown_without_frontmatter():
    assert parse_markdown("## Hola\n") == ({}, "## Hola\n")
    assert parse_markdown("---\ntitle: x\n") == ({}, "---\ntitle: x\n")
    assert parse_markdown("") == ({}, "")


def test_parse_markdown_rejects_non_mapping():
    with pytest.raises(ValueError):
        parse_markdown("---\n- a\n- b\n---\nbody")


def test_collection_name():
    assert collection_name("docs", "es") == "docs"
    assert collection_name("docs", "en") == "docs-en"
    assert collection_name("architectures", "en") == "architectures-en"


def test_load_collection_sorts_and_skips_invalid(tmp_path):
    _write(tmp_path / "docs" / "v0-16-1" / "b.md", "---\ntitle: B\norder: 2\n---\nbody b")
    _write(tmp_path / "docs" / "v0-16-1" / "a.md", "---\ntitle: A\norder: 1\n---\nbody a")
    _write(tmp_path / "docs" / "v0-16-1" / "bad.md", "---\norder: [1, 2]\n---\nbody")
    _write(tmp_path / "docs" / "v0-16-1" / "plain.md", "no frontmatter")

    entries = load_collection("docs", tmp_path)
    assert [e.id for e in entries] == ["v0-16-1/a", "v0-16-1/b", "v0-16-1/plain"]
    assert isinstance(entries[0].frontmatter, DocFrontmatter)
    assert entries[0].body == "body a"


def test_load_collection_validates_architecture_difficulty(tmp_path):
    frontmatter = (
        "---\ntitle: T\ndescription: D\ndomain: CI/CD\ndifficulty: {difficulty}\n"
        "icon: x\norder: 1\nfeatures: [a]\n---\n"
    )
    _write(tmp_path / "architectures" / "ok.md", frontmatter.format(difficulty="Avanzado"))
    _write(tmp_path / "architectures" / "english.md", frontmatter.format(difficulty="Advanced"))
    _write(tmp_path / "architectures-en" / "english.md", frontmatter.format(difficulty="Advanced"))

    assert [e.id for e in load_collection("architectures", tmp_path)] == ["ok"]
    assert [e.id for e in load_collection("architectures-en", tmp_path)] == ["english"]


def test_load_collection_missing_directory(tmp_path):
    assert load_collection("pages", tmp_path) == []


def test_load_collection_unknown_name(tmp_path):
    with pytest.raises(KeyError):
        load_collection("blog", tmp_path)


def test_bundled_content_is_valid():
    docs = load_collection("docs")
    assert get_entry(docs, "v0-16-1/introduccion") is not None
    architectures = load_collection("architectures")
    assert isinstance(get_entry(architectures, "ci-review").frontmatter, ArchitectureFrontmatter)
    assert get_entry(load_collection("pages-en"), "use-cases/") is not None


def test_get_entry_missing():
    assert get_entry([], "nothing") is None


def test_load_site_config():
    config = load_site_config(CONFIG_DIR / "site.yaml")
    assert config.routing.base == "/architect-docs/"
    assert config.routing.slug_map["casos-de-uso"] == "use-cases"
    assert [v.id for v in config.versions if v.is_latest] == ["v0-16-1"]


def test_load_site_config_missing_file(tmp_path):
    config = load_site_config(tmp_path / "missing.yaml")
    assert config.site_name == "Architect"
