import streamlit as st
import logging

from architect_docs.state import AppState
from architect_docs.services import load_site_config, load_collection, collection_name, get_entry
from architect_docs.versions import entries_for_version
from architect_docs.constants import ASSETS_DIR
from architect_docs.utils import read_text_file
from view.components import render_header, render_footer, render_sidebar
from view.presentation import (
    render_home_page,
    render_docs_hub,
    render_doc_page,
    render_architectures_page,
    render_architecture_detail,
    render_page,
    render_roadmap_page,
    render_not_found,
)

# --- Basic Configuration ---
logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")

def apply_global_styles():
    """Reads and injects global CSS styles."""
    try:
        css = read_text_file(ASSETS_DIR / "style.css")
        st.markdown(f"<style>{css}</style>", unsafe_allow_html=True)
    except FileNotFoundError:
        logging.warning("assets/style.css not found. Global styles will not be applied.")

def render_route(state: AppState, site_config):
    """Dispatches the current route to its page renderer."""
    lang = state.language
    route = state.route

    if route.name == "home":
        render_home_page(site_config, state)
    elif route.name == "docs_hub":
        docs = entries_for_version(load_collection(collection_name("docs", lang)), state.version)
        render_docs_hub(docs, site_config, state)
    elif route.name == "doc":
        docs = load_collection(collection_name("docs", lang))
        if not render_doc_page(docs, route.slug, state):
            render_not_found(state)
    elif route.name == "architectures":
        render_architectures_page(load_collection(collection_name("architectures", lang)), site_config, state)
    elif route.name == "architecture":
        entry = get_entry(load_collection(collection_name("architectures", lang)), route.slug)
        if entry:
            render_architecture_detail(entry, state)
        else:
            render_not_found(state)
    elif route.name == "use_cases":
        pages = load_collection(collection_name("pages", lang))
        render_page(get_entry(pages, state.neutral_path), "casosDeUso.title", ["casosDeUso.subtitle"], state)
    elif route.name == "why":
        pages = load_collection(collection_name("pages", lang))
        render_page(get_entry(pages, "why-architect"), "whyArchitect.title",
                    ["whyArchitect.subtitle1", "whyArchitect.subtitle2"], state)
    elif route.name == "roadmap":
        render_roadmap_page(site_config, state)
    else:
        render_not_found(state)

def main():
    """
    The main execution flow of the Streamlit application.
    """
    # --- 1. Initial Setup ---
    site_config = load_site_config()

    # --- 2. State Initialization ---
    state = AppState.from_streamlit(site_config)

    st.set_page_config(
        page_title=state.t("layout.title"),
        page_icon="📐",
        layout="wide",
        initial_sidebar_state="expanded",
    )
    apply_global_styles()

    # --- 3. Sidebar Rendering and State Update ---
    original_state = state.model_copy(deep=True)
    docs = load_collection(collection_name("docs", state.language))
    render_sidebar(entries_for_version(docs, state.version), site_config, state)

    # --- 4. State Reconciliation and Rerun ---
    if state != original_state:
        state.apply_to_streamlit()
        st.rerun()

    # --- 5. Main Content Rendering ---
    render_header(site_config, state)
    render_route(state, site_config)

    # --- 6. Footer ---
    render_footer(site_config, state)


if __name__ == "__main__":
    main()
