import pathlib
import sys

ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.append(str(ROOT))
sys.path.append(str(ROOT / "scripts"))

import pytest

from architect_docs.models import DocFrontmatter, PageFrontmatter
from architect_docs.services import parse_markdown
from new_doc import build_target, render_template


def test_build_target_with_version(tmp_path):
    target = build_target("docs", "Guardrails Avanzados", "v0-16-1", tmp_path)
    assert target == tmp_path / "docs" / "v0-16-1" / "guardrails-avanzados.md"


def test_build_target_without_slug(tmp_path):
    with pytest.raises(ValueError):
        build_target("docs", "???", "", tmp_path)


def test_doc_template_is_valid_frontmatter():
    data, body = parse_markdown(render_template("docs", "Hooks", "Eventos del agente", 3, "🪝"))
    fm = DocFrontmatter.model_validate(data)
    assert fm.title == "Hooks"
    assert fm.order == 3
    assert body.startswith("## Hooks")


def test_page_template_is_valid_frontmatter():
    data, _ = parse_markdown(render_template("pages-en", "Roadmap", "Plans", 1, ""))
    assert PageFrontmatter.model_validate(data).description == "Plans"
