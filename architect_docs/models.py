# architect_docs/models.py

from __future__ import annotations
from typing import List, Optional, Literal, Dict, Tuple, Type
from pathlib import Path
import logging

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings

from .constants import (
    BASE_URL,
    DEFAULT_LANGUAGE,
    DEFAULT_ORDER,
    FALLBACK_LANGUAGE,
    SLUG_MAP,
)
from . import routing as urls

logger = logging.getLogger(__name__)


# --- Version Models ---

class VersionConfig(BaseModel):
    """One published documentation version, e.g. ``v0-16-1`` labelled ``v0.16.1``."""
    id: str
    label: str
    is_latest: bool = Field(default=False, alias="isLatest")

    class Config:
        populate_by_name = True


DEFAULT_VERSIONS: List[VersionConfig] = [
    VersionConfig(id="v0-16-1", label="v0.16.1", is_latest=True),
    VersionConfig(id="v0-15-3", label="v0.15.3", is_latest=False),
]


# --- Site Configuration Models ---

class LanguageEntry(BaseModel):
    code: str
    label: str
    flag: str = ""  # ISO 3166 country code, e.g. "gb"

    @property
    def display_label(self) -> str:
        """The label shown in the language switcher, led by the flag emoji when one is set."""
        if len(self.flag) != 2 or not self.flag.isalpha() or not self.flag.isascii():
            return self.label
        emoji = "".join(chr(0x1F1E6 + ord(c) - ord("a")) for c in self.flag.lower())
        return f"{emoji} {self.label}"

class I18nConfig(BaseModel):
    default: str = DEFAULT_LANGUAGE
    fallback: str = FALLBACK_LANGUAGE
    languages: List[LanguageEntry] = [
        LanguageEntry(code="es", label="Español", flag="es"),
        LanguageEntry(code="en", label="English", flag="gb"),
    ]

    @property
    def prefixed_languages(self) -> tuple[str, ...]:
        """Languages whose URLs carry a leading path segment."""
        return tuple(lang.code for lang in self.languages if lang.code != self.default)

class RoutingConfig(BaseModel):
    base: str = BASE_URL
    slug_map: Dict[str, str] = dict(SLUG_MAP)

    @field_validator("base")
    @classmethod
    def validate_base(cls, v: str) -> str:
        # The base is always "/<segment>/" or "/" so that prefix stripping stays exact.
        return "/" + v.strip("/") + "/" if v.strip("/") else "/"

class SiteFeatures(BaseModel):
    developer_mode: bool = False
    show_version_selector: bool = True

class SiteConfig(BaseSettings):
    site_name: str = "Architect"
    tagline: str = ""
    site: str = ""
    repo_url: str = ""
    i18n: I18nConfig = I18nConfig()
    routing: RoutingConfig = RoutingConfig()
    versions: List[VersionConfig] = list(DEFAULT_VERSIONS)
    features: SiteFeatures = SiteFeatures()

    class Config:
        env_prefix = 'ARCHITECT_DOCS_'
        env_nested_delimiter = '__'

    @field_validator("versions")
    @classmethod
    def validate_versions(cls, v: List[VersionConfig]) -> List[VersionConfig]:
        latest = [version.id for version in v if version.is_latest]
        if len(latest) != 1:
            raise ValueError(
                f"Exactly one version must be marked as latest, found {len(latest)}: {latest}"
            )
        return v

    # --- URL helpers bound to the configured base and languages ---

    def split_path(self, url: str) -> Tuple[str, str]:
        return urls.split_path(url, self.routing.base, self.i18n.prefixed_languages, self.i18n.default)

    def localize_path(self, path: str, lang: str) -> str:
        return urls.localize_path(path, lang, self.routing.base, self.i18n.prefixed_languages, self.i18n.default)

    def alternate_path(self, url: str, target_lang: str) -> str:
        return urls.alternate_path(
            url,
            target_lang,
            base=self.routing.base,
            slug_map=self.routing.slug_map,
            prefixed_languages=self.i18n.prefixed_languages,
            default_language=self.i18n.default,
        )


# --- Content Collection Schemas ---

class DocFrontmatter(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    order: Optional[float] = None
    icon: Optional[str] = None

class PageFrontmatter(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None

class ArchitectureFrontmatter(BaseModel):
    title: str
    description: str
    domain: str
    difficulty: Literal["Básico", "Intermedio", "Avanzado"]
    icon: str
    order: float
    features: List[str]

class ArchitectureFrontmatterEn(ArchitectureFrontmatter):
    difficulty: Literal["Basic", "Intermediate", "Advanced"]


# Collection name -> frontmatter schema. English collections carry an "-en" suffix.
COLLECTION_SCHEMAS: Dict[str, Type[BaseModel]] = {
    "docs": DocFrontmatter,
    "pages": PageFrontmatter,
    "architectures": ArchitectureFrontmatter,
    "docs-en": DocFrontmatter,
    "pages-en": PageFrontmatter,
    "architectures-en": ArchitectureFrontmatterEn,
}


# --- Core Domain Model ---

class ContentEntry(BaseModel):
    """
    A single markdown document from a content collection.
    The frontmatter is already validated against the collection's schema.
    """
    id: str
    collection: str
    frontmatter: BaseModel
    body: str = ""
    source: Optional[Path] = None

    @field_validator("id")
    @classmethod
    def validate_id(cls, v: str) -> str:
        # Slugs are always forward-slash separated, without leading or trailing slashes.
        return v.replace("\\", "/").strip("/")

    @property
    def title(self) -> str:
        title = getattr(self.frontmatter, "title", None)
        if title:
            return title
        return self.id.rsplit("/", 1)[-1].replace("-", " ").capitalize()

    @property
    def description(self) -> str:
        return getattr(self.frontmatter, "description", None) or ""

    @property
    def order(self) -> float:
        order = getattr(self.frontmatter, "order", None)
        return DEFAULT_ORDER if order is None else order

    @property
    def icon(self) -> str:
        return getattr(self.frontmatter, "icon", None) or ""
