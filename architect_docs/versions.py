from __future__ import annotations
from typing import List, Optional, Sequence
import re

from .models import ContentEntry, VersionConfig, DEFAULT_VERSIONS

# Doc slugs are stored as "<version>/<path>", e.g. "v0-16-1/intro".
VERSION_PREFIX_RE = re.compile(r"^(v[\d-]+)/")

VERSIONS: List[VersionConfig] = list(DEFAULT_VERSIONS)


def get_latest_version(versions: Sequence[VersionConfig] = VERSIONS) -> VersionConfig:
    """Returns the version flagged as latest. The list is validated to hold exactly one."""
    for version in versions:
        if version.is_latest:
            return version
    raise ValueError("No version is marked as latest.")


LATEST_VERSION = get_latest_version(VERSIONS)
DEFAULT_VERSION_ID = LATEST_VERSION.id


def get_version_from_slug(slug: str) -> Optional[str]:
    """Extracts the version tag from a doc slug, or None when the slug is unversioned."""
    match = VERSION_PREFIX_RE.match(slug or "")
    return match.group(1) if match else None

def get_doc_slug(slug: str) -> str:
    """Strips the version tag from a doc slug."""
    return VERSION_PREFIX_RE.sub("", slug or "", count=1)

def get_version_by_id(versions: Sequence[VersionConfig], version_id: str) -> Optional[VersionConfig]:
    for version in versions:
        if version.id == version_id:
            return version
    return None

def entries_for_version(entries: Sequence[ContentEntry], version_id: str) -> List[ContentEntry]:
    """Returns the doc entries published under the given version."""
    return [e for e in entries if get_version_from_slug(e.id) == version_id]
