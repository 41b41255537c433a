# view/components.py

from __future__ import annotations
from typing import List
import html

import streamlit as st

from architect_docs.models import SiteConfig, ContentEntry
from architect_docs.state import AppState
from architect_docs.utils import clear_all_caches


def page_link(path: str, version: str) -> str:
    """Builds an in-app link to a site path, keeping the selected version."""
    return f"?path={html.escape(path)}&version={html.escape(version)}"


def render_header(site_config: SiteConfig, state: AppState):
    """Renders the top navigation bar."""
    def href(target: str) -> str:
        return page_link(site_config.localize_path(target, state.language), state.version)

    links = [
        (state.t("nav.why"), href(state.t("nav.whyHref"))),
        (state.t("nav.docs"), href("docs/")),
        (state.t("nav.architectures"), href("architectures/")),
        (state.t("nav.useCases"), href(state.t("nav.useCasesHref"))),
        (state.t("nav.roadmap"), href("roadmap/")),
    ]
    nav_html = " &nbsp;•&nbsp; ".join(
        f'<a href="{link}" target="_self">{html.escape(label)}</a>' for label, link in links
    )

    left, right = st.columns([1, 3])
    with left:
        st.markdown(f'### <a href="{href("")}" target="_self">{html.escape(site_config.site_name)}</a>',
                    unsafe_allow_html=True)
    with right:
        st.markdown(f'<nav aria-label="{html.escape(state.t("nav.aria"))}">{nav_html}</nav>',
                    unsafe_allow_html=True)

    if site_config.features.developer_mode:
        st.caption(f"Developer mode is ON · path={state.path} · route={state.route.name}")


def render_footer(site_config: SiteConfig, state: AppState):
    """Renders the page footer."""
    st.write("---")
    parts = [state.t("footer.copyright"), state.t("footer.tagline")]
    if site_config.repo_url:
        parts.append(f"[GitHub]({site_config.repo_url})")
    st.caption(" ".join(parts))


def render_language_switcher(site_config: SiteConfig, state: AppState) -> str:
    """Renders the language toggle and returns the selected language code."""
    languages = site_config.i18n.languages
    if len(languages) <= 1:
        return state.language

    codes = [lang.code for lang in languages]
    labels = [lang.display_label for lang in languages]

    try:
        current_idx = codes.index(state.language)
    except ValueError:
        current_idx = 0

    selected_label = st.sidebar.selectbox(
        label=state.t("nav.language"),
        options=labels,
        index=current_idx,
    )
    return codes[labels.index(selected_label)]


def render_alternate_link(site_config: SiteConfig, state: AppState):
    """Renders a plain link to the current page in the other language."""
    for lang in site_config.i18n.languages:
        if lang.code == state.language:
            continue
        target = site_config.alternate_path(state.path, lang.code)
        st.sidebar.markdown(
            f'<a href="{page_link(target, state.version)}" target="_self" hreflang="{lang.code}">{html.escape(lang.display_label)}</a>',
            unsafe_allow_html=True,
        )


def render_version_selector(site_config: SiteConfig, state: AppState) -> str:
    """Renders the version dropdown and returns the selected version id."""
    versions = site_config.versions
    ids = [v.id for v in versions]
    latest_suffix = state.t("version.latest")
    labels = {v.id: f"{v.label} {latest_suffix}" if v.is_latest else v.label for v in versions}

    selected = st.sidebar.selectbox(
        label=state.t("version.label"),
        options=ids,
        index=ids.index(state.version) if state.version in ids else 0,
        format_func=lambda version_id: labels.get(version_id, version_id),
    )
    return selected


def render_docs_sidebar(entries: List[ContentEntry], site_config: SiteConfig, state: AppState):
    """Renders the index of the docs in the selected version."""
    hub = page_link(site_config.localize_path("docs/", state.language), state.version)
    st.sidebar.markdown(f'<a href="{hub}" target="_self">← {html.escape(state.t("sidebar.backToDocs"))}</a>',
                        unsafe_allow_html=True)
    st.sidebar.markdown(f"**{state.t('sidebar.index')}**")
    for entry in entries:
        target = site_config.localize_path(f"docs/{entry.id}/", state.language)
        label = f"{entry.icon} {entry.title}".strip()
        st.sidebar.markdown(f'- <a href="{page_link(target, state.version)}" target="_self">{html.escape(label)}</a>',
                            unsafe_allow_html=True)


def render_sidebar(entries: List[ContentEntry], site_config: SiteConfig, state: AppState) -> AppState:
    """Renders the sidebar controls and returns the updated app state."""
    new_lang = render_language_switcher(site_config, state)
    if new_lang != state.language:
        state.set_language(new_lang, site_config)

    render_alternate_link(site_config, state)

    if site_config.features.show_version_selector:
        state.set_version(render_version_selector(site_config, state), site_config)

    if state.route.name in ("docs_hub", "doc") and entries:
        render_docs_sidebar(entries, site_config, state)

    if site_config.features.developer_mode:
        st.sidebar.button("Clear App Caches", on_click=clear_all_caches, use_container_width=True)

    return state
