import pathlib
import sys

sys.path.append(str(pathlib.Path(__file__).resolve().parents[1]))

from architect_docs.models import SiteConfig
from architect_docs.state import AppState


def _english_default_config():
    return SiteConfig.model_validate({
        "i18n": {"default": "en", "fallback": "en"},
        "routing": {"slug_map": {"use-cases": "casos-de-uso"}},
    })


def test_state_from_localized_path():
    state = AppState.from_path("/architect-docs/en/use-cases/", SiteConfig())
    assert state.language == "en"
    assert state.neutral_path == "use-cases/"
    assert state.route.name == "use_cases"
    assert state.version == "v0-16-1"


def test_state_defaults_to_home_and_latest_version():
    state = AppState.from_path("", SiteConfig(), version="v9-9-9")
    assert state.path == "/architect-docs/"
    assert state.language == "es"
    assert state.route.name == "home"
    assert state.version == "v0-16-1"
    assert state.fallback_language == "es"


def test_state_keeps_known_version():
    state = AppState.from_path("/architect-docs/docs/intro/", SiteConfig(), version="v0-15-3")
    assert state.version == "v0-15-3"
    assert state.route == ("doc", "intro")


def test_state_follows_configured_default_language():
    config = _english_default_config()
    state = AppState.from_path("/architect-docs/roadmap/", config)
    assert state.language == "en"
    assert state.path == "/architect-docs/roadmap/"
    assert state.fallback_language == "en"

    state = AppState.from_path("/architect-docs/es/roadmap/", config)
    assert state.language == "es"
    assert state.neutral_path == "roadmap/"
    assert state.path == "/architect-docs/es/roadmap/"


def test_set_language_with_configured_default_language():
    config = _english_default_config()
    state = AppState.from_path("/architect-docs/use-cases/", config)
    state.set_language("es", config)
    assert state.path == "/architect-docs/es/casos-de-uso/"
    assert state.neutral_path == "casos-de-uso/"
    state.set_language("en", config)
    assert state.path == "/architect-docs/use-cases/"


def test_set_language_moves_to_alternate_page():
    config = SiteConfig()
    state = AppState.from_path("/architect-docs/en/use-cases/", config)
    state.set_language("es", config)
    assert state.path == "/architect-docs/casos-de-uso/"
    assert state.language == "es"
    assert state.neutral_path == "casos-de-uso/"


def test_set_same_language_is_a_no_op():
    config = SiteConfig()
    state = AppState.from_path("/architect-docs/roadmap/", config)
    before = state.model_copy(deep=True)
    state.set_language("es", config)
    assert state == before


def test_set_version_moves_doc_page_to_new_version():
    config = SiteConfig()
    state = AppState.from_path("/architect-docs/en/docs/v0-16-1/introduccion/", config)
    state.set_version("v0-15-3", config)
    assert state.version == "v0-15-3"
    assert state.neutral_path == "docs/v0-15-3/introduccion/"
    assert state.path == "/architect-docs/en/docs/v0-15-3/introduccion/"
    assert state.route == ("doc", "v0-15-3/introduccion")


def test_set_version_on_unversioned_doc_path():
    config = SiteConfig()
    state = AppState.from_path("/architect-docs/docs/ralph-loop/", config)
    state.set_version("v0-15-3", config)
    assert state.path == "/architect-docs/docs/v0-15-3/ralph-loop/"


def test_set_version_keeps_path_outside_docs():
    config = SiteConfig()
    state = AppState.from_path("/architect-docs/docs/", config)
    state.set_version("v0-15-3", config)
    assert state.version == "v0-15-3"
    assert state.path == "/architect-docs/docs/"


def test_set_version_ignores_unknown_version():
    config = SiteConfig()
    state = AppState.from_path("/architect-docs/docs/v0-16-1/introduccion/", config)
    state.set_version("v9-9-9", config)
    assert state.version == "v0-16-1"
    assert state.path == "/architect-docs/docs/v0-16-1/introduccion/"


def test_state_translates_in_its_language():
    state = AppState.from_path("/architect-docs/en/", SiteConfig())
    assert state.t("nav.useCases") == "Use Cases"
    assert state.t("nav.nothing", default="-") == "-"
    assert state.t_array("elevator.badges")[0] == "Multi-model"
    assert len(state.t_records("comparison.rows")) == 23
