import pathlib
import sys

sys.path.append(str(pathlib.Path(__file__).resolve().parents[1]))

import pytest
from pydantic import ValidationError

from architect_docs.models import (
    ArchitectureFrontmatter,
    ArchitectureFrontmatterEn,
    ContentEntry,
    DocFrontmatter,
    LanguageEntry,
    PageFrontmatter,
    SiteConfig,
)

ARCHITECTURE = {
    "title": "Review automático",
    "description": "Revisión en cada PR",
    "domain": "CI/CD",
    "difficulty": "Básico",
    "icon": "🔍",
    "order": 1,
    "features": ["--agent review"],
}


def test_default_site_config():
    config = SiteConfig()
    assert config.routing.base == "/architect-docs/"
    assert config.routing.slug_map == {"casos-de-uso": "use-cases"}
    assert config.i18n.default == "es"
    assert config.i18n.prefixed_languages == ("en",)


def test_versions_accept_camel_case_alias():
    config = SiteConfig.model_validate({
        "versions": [
            {"id": "v1-0-0", "label": "v1.0.0", "isLatest": True},
            {"id": "v0-9-0", "label": "v0.9.0", "isLatest": False},
        ]
    })
    assert [v.is_latest for v in config.versions] == [True, False]


def test_versions_need_exactly_one_latest():
    with pytest.raises(ValidationError):
        SiteConfig.model_validate({"versions": [{"id": "v1", "label": "v1", "isLatest": False}]})
    with pytest.raises(ValidationError):
        SiteConfig.model_validate({
            "versions": [
                {"id": "v1", "label": "v1", "isLatest": True},
                {"id": "v2", "label": "v2", "isLatest": True},
            ]
        })


def test_base_is_normalized():
    config = SiteConfig.model_validate({"routing": {"base": "architect-docs"}})
    assert config.routing.base == "/architect-docs/"
    assert SiteConfig.model_validate({"routing": {"base": "/"}}).routing.base == "/"


def test_doc_and_page_fields_are_optional():
    assert DocFrontmatter.model_validate({}).title is None
    assert DocFrontmatter.model_validate({"order": 2}).order == 2
    assert PageFrontmatter.model_validate({"title": "Roadmap"}).title == "Roadmap"


def test_architecture_difficulty_per_language():
    assert ArchitectureFrontmatter.model_validate(ARCHITECTURE).difficulty == "Básico"
    with pytest.raises(ValidationError):
        ArchitectureFrontmatter.model_validate({**ARCHITECTURE, "difficulty": "Basic"})

    english = ArchitectureFrontmatterEn.model_validate({**ARCHITECTURE, "difficulty": "Advanced"})
    assert english.difficulty == "Advanced"
    with pytest.raises(ValidationError):
        ArchitectureFrontmatterEn.model_validate(ARCHITECTURE)


def test_architecture_requires_all_fields():
    data = dict(ARCHITECTURE)
    del data["features"]
    with pytest.raises(ValidationError):
        ArchitectureFrontmatter.model_validate(data)
    with pytest.raises(ValidationError):
        ArchitectureFrontmatter.model_validate({**ARCHITECTURE, "features": "not-a-list"})


def test_content_entry_defaults():
    entry = ContentEntry(id="/v0-16-1/getting-started/", collection="docs", frontmatter=DocFrontmatter())
    assert entry.id == "v0-16-1/getting-started"
    assert entry.title == "Getting started"
    assert entry.description == ""
    assert entry.order == 9999


def test_language_display_label_shows_flag():
    config = SiteConfig()
    labels = {lang.code: lang.display_label for lang in config.i18n.languages}
    assert labels == {"es": "🇪🇸 Español", "en": "🇬🇧 English"}
    assert LanguageEntry(code="eo", label="Esperanto").display_label == "Esperanto"
    assert LanguageEntry(code="eo", label="Esperanto", flag="eo-x").display_label == "Esperanto"


def test_site_config_url_helpers_follow_i18n_default():
    config = SiteConfig.model_validate({"i18n": {"default": "en"}})
    assert config.i18n.prefixed_languages == ("es",)
    assert config.split_path("/architect-docs/roadmap/") == ("en", "roadmap/")
    assert config.split_path("/architect-docs/es/roadmap/") == ("es", "roadmap/")
    assert config.localize_path("roadmap/", "es") == "/architect-docs/es/roadmap/"
    assert config.localize_path("/architect-docs/es/roadmap/", "en") == "/architect-docs/roadmap/"
