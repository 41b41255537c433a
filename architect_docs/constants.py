from pathlib import Path

# --- Project Paths ---
# Defines the absolute root path of the project.
ROOT_DIR = Path(__file__).resolve().parents[1]
CONFIG_DIR = ROOT_DIR / "config"
CONTENT_DIR = ROOT_DIR / "content"
I18N_DIR = ROOT_DIR / "i18n"
ASSETS_DIR = ROOT_DIR / "assets"

# --- Languages ---
# The default language is served without a path segment.
DEFAULT_LANGUAGE = "es"
# Its translation tree is the complete one; other languages may be partial.
FALLBACK_LANGUAGE = "es"
SUPPORTED_LANGUAGES = ("es", "en")
# Languages reachable through a leading path segment, checked in this order.
PREFIXED_LANGUAGES = ("en",)

# --- URL Surface ---
BASE_URL = "/architect-docs/"
# Page slugs that differ per language, stored as default-language -> other.
SLUG_MAP = {
    "casos-de-uso": "use-cases",
}

# --- Content ---
# Entries without an explicit order sort after the ordered ones.
DEFAULT_ORDER = 9999
