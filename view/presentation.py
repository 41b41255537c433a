from __future__ import annotations
from typing import Dict, List, Any
import html

import streamlit as st

from architect_docs.models import SiteConfig, ContentEntry
from architect_docs.state import AppState
from architect_docs.search import filter_entries
from architect_docs.services import get_entry
from architect_docs.versions import get_version_from_slug
from view.components import page_link

COMPARISON_COLUMNS = ("claude", "cursor", "aider", "architect")
COMPARISON_HEADERS = ("Claude Code", "Cursor", "Aider", "architect")
PARALLEL_MODELS = "gpt-4.1,claude-sonnet-4,deepseek-chat"

# Roadmap sections in display order: (key prefix, badge key). The milestone and
# stabilization blocks sit between phase D and phase E.
ROADMAP_PHASES = [
    ("phaseA", "badgeCompleted"),
    ("phaseB", "badgeCompleted"),
    ("phaseC", "badgeCompleted"),
    ("phaseD", "badgeCompleted"),
]
ROADMAP_LATER_PHASES = [
    ("phaseE", "badgePlanned"),
    ("phaseF", "badgePlanned"),
    ("phaseG", "badgePlanned"),
    ("phaseH", "badgePlanned"),
]


def _render_card(title: str, description: str, link: str = ""):
    """Renders a single card as a self-contained HTML block."""
    title_safe = html.escape(title)
    card_html = f"""
    <div class="doc-card">
        <h5>{title_safe}</h5>
        <p class="caption">{html.escape(description)}</p>
    </div>
    """
    if link:
        card_html = f'<a href="{link}" target="_self" class="doc-card-link">{card_html}</a>'
    st.markdown(card_html, unsafe_allow_html=True)

def _render_badge(text: str):
    st.markdown(f'<span class="chip">{html.escape(text)}</span>', unsafe_allow_html=True)

def _markdown_cell(text: Any) -> str:
    return str(text).replace("|", "\\|").replace("\n", " ")


# --- Home Page Sections ---

def _render_hero(site_config: SiteConfig, state: AppState):
    st.markdown(f"# {state.t('hero.titleLine1')} **{state.t('hero.titleHighlight')}**")
    st.markdown(state.t("hero.subtitle"), unsafe_allow_html=True)

    docs_link = page_link(site_config.localize_path("docs/", state.language), state.version)
    buttons = [f'<a href="{docs_link}" target="_self" class="btn">{html.escape(state.t("hero.btnDocs"))}</a>']
    if site_config.repo_url:
        buttons.append(f'<a href="{html.escape(site_config.repo_url)}" class="btn">{html.escape(state.t("hero.btnGithub"))}</a>')
    st.markdown(" ".join(buttons), unsafe_allow_html=True)

    terminal = "\n".join([
        f"$ {state.t('hero.terminalCmd')}",
        "",
        state.t("hero.terminalStep1"),
        f"  {state.t('hero.terminalStep1Detail')}",
        f"  {state.t('hero.terminalTool1')}",
        f"  {state.t('hero.terminalTool2')}",
        f"  {state.t('hero.terminalHook')} ✓",
        state.t("hero.terminalStep2"),
        f"  {state.t('hero.terminalStep2Detail')}",
        "",
        f"✓ {state.t('hero.terminalDone')}",
        f"  {state.t('hero.terminalReason')}",
        f"  {state.t('hero.terminalCost')} $0.0042",
    ])
    st.caption(state.t("hero.terminalHeader"))
    st.code(terminal, language="text")

def _render_architectures_banner(site_config: SiteConfig, state: AppState):
    with st.container(border=True):
        _render_badge(state.t("archBanner.label"))
        st.markdown(f"### {state.t('archBanner.title')}")
        st.write(state.t("archBanner.desc"))
        link = page_link(site_config.localize_path("architectures/", state.language), state.version)
        st.markdown(f'<a href="{link}" target="_self">{html.escape(state.t("nav.architectures"))} →</a>',
                    unsafe_allow_html=True)

def _render_elevator(state: AppState):
    st.markdown(f"## {state.t('elevator.title')}")
    badges = state.t_array("elevator.badges")
    if badges:
        chips_html = "".join(f'<span class="chip">{html.escape(b)}</span>' for b in badges)
        st.markdown(f'<div class="chips-line">{chips_html}</div>', unsafe_allow_html=True)
    st.markdown(state.t("elevator.lead"), unsafe_allow_html=True)
    st.markdown(state.t("elevator.body1"), unsafe_allow_html=True)
    st.markdown(state.t("elevator.body2"), unsafe_allow_html=True)

    cols = st.columns(4)
    for idx in range(1, 5):
        with cols[idx - 1]:
            _render_card(state.t(f"elevator.value{idx}Title"), state.t(f"elevator.value{idx}Desc"))

def _render_features(state: AppState):
    st.markdown(f"## {state.t('features.title')}")
    items = state.t_records("features.items")
    cols = st.columns(2)
    for idx, item in enumerate(items):
        with cols[idx % 2]:
            _render_card(str(item.get("title", "")), str(item.get("description", "")))

def _render_spotlights(state: AppState):
    """The three feature spotlights: Ralph Loop, guardrails and parallel runs."""
    text, figure = st.columns([3, 2])
    with text:
        st.markdown(f"### {state.t('features.ralphTitle')}")
        st.markdown(state.t("features.ralphDesc1"), unsafe_allow_html=True)
        st.markdown(state.t("features.ralphDesc2"), unsafe_allow_html=True)
    with figure:
        st.caption(state.t("features.ralphFigureTitle"))
        st.code("\n".join([
            f'$ architect loop "{state.t("features.ralphCmd")}" \\',
            '    --check "pytest tests/ -q" --check "ruff check src/"',
            "",
            f"→ {state.t('features.ralphLine1')}",
            f"✓ {state.t('features.ralphLine2')}",
            state.t("features.ralphVerification"),
            f"  pytest: {state.t('features.ralphTestPass')}",
            f"  ruff: {state.t('features.ralphLintPass')}",
            f"✓ {state.t('features.ralphDone')}",
        ]), language="text")

    st.markdown(f"### {state.t('features.guardrailsTitle')}")
    st.markdown(state.t("features.guardrailsDesc1"), unsafe_allow_html=True)
    st.markdown(state.t("features.guardrailsDesc2"), unsafe_allow_html=True)

    text, figure = st.columns([3, 2])
    with text:
        st.markdown(f"### {state.t('features.parallelTitle')}")
        st.markdown(state.t("features.parallelDesc1"), unsafe_allow_html=True)
        st.markdown(state.t("features.parallelDesc2"), unsafe_allow_html=True)
    with figure:
        st.caption(state.t("features.parallelFigureTitle"))
        st.code(f'$ architect parallel "{state.t("features.parallelCmd")}" \\\n    --models {PARALLEL_MODELS}',
                language="bash")

def _render_comparison(state: AppState):
    st.markdown(f"## {state.t('comparison.title')}")
    st.markdown(state.t("comparison.intro"), unsafe_allow_html=True)

    rows = state.t_records("comparison.rows")
    if rows:
        lines = [
            "| | " + " | ".join(COMPARISON_HEADERS) + " |",
            "|---" * (len(COMPARISON_HEADERS) + 1) + "|",
        ]
        for row in rows:
            cells = [f"**{_markdown_cell(row.get('label', ''))}**"]
            cells += [_markdown_cell(row.get(column, "")) for column in COMPARISON_COLUMNS]
            lines.append("| " + " | ".join(cells) + " |")
        st.markdown("\n".join(lines))

    for key in ("quoteVsClaude", "quoteVsCursor", "quoteVsAider"):
        st.markdown(f"<blockquote>{state.t(f'comparison.{key}')}</blockquote>", unsafe_allow_html=True)

def _render_use_case_group(title: str, description: str, cases: List[Dict[str, Any]]):
    st.markdown(f"### {title}")
    st.write(description)
    if not cases:
        return
    tabs = st.tabs([str(case.get("label", "")) for case in cases])
    for tab, case in zip(tabs, cases):
        with tab:
            st.code(str(case.get("cmd", "")), language="bash")

def _render_use_cases(state: AppState):
    st.markdown(f"## {state.t('useCases.title')}")
    _render_use_case_group(state.t("useCases.devTitle"), state.t("useCases.devDesc"),
                           state.t_records("useCases.devCases"))
    _render_use_case_group(state.t("useCases.teamTitle"), state.t("useCases.teamDesc"),
                           state.t_records("useCases.teamCases"))
    st.caption(state.t("useCases.teamFigureTitle"))
    st.code("\n".join([
        "- name: Architect review",
        "  run: |",
        f'    architect run "{state.t("useCases.teamGhActionCmd")}" \\',
        "      --agent review --context-git-diff origin/main \\",
        "      --report github > review.md",
    ]), language="yaml")
    _render_use_case_group(state.t("useCases.ciTitle"), state.t("useCases.ciDesc"),
                           state.t_records("useCases.ciCases"))

def _render_quickstart(site_config: SiteConfig, state: AppState):
    st.markdown(f"## {state.t('quickstart.title')}")
    steps = [
        ("step1Title", state.t("quickstart.step1Cmd"), "step1Note"),
        ("step2Title", state.t("quickstart.step2Cmd"), "step2Note"),
        ("step3Title", f'architect run "{state.t("quickstart.step3Cmd")}"', ""),
    ]
    cols = st.columns(3)
    for idx, (title_key, command, note_key) in enumerate(steps):
        with cols[idx]:
            st.markdown(f"**{idx + 1}. {state.t(f'quickstart.{title_key}')}**")
            st.code(command, language="bash")
            if note_key:
                st.caption(state.t(f"quickstart.{note_key}"))

    st.caption(state.t("quickstart.figureTitle"))
    st.code("\n".join([
        state.t("quickstart.comment1"),
        f'architect run "{state.t("quickstart.exCmd1")}" --dry-run',
        "",
        state.t("quickstart.comment2"),
        f'architect loop "{state.t("quickstart.exCmd2")}" --check "ruff check ."',
        "",
        state.t("quickstart.comment3"),
        f'architect parallel "{state.t("quickstart.exCmd3")}" --models {PARALLEL_MODELS}',
        "",
        state.t("quickstart.comment4"),
        f'architect run "{state.t("quickstart.exCmd4")}" --budget 1.00 --report github',
        "",
        state.t("quickstart.comment5"),
        state.t("quickstart.exitCodes"),
    ]), language="bash")

    st.write(state.t("quickstart.ctaText"))
    link = page_link(site_config.localize_path(state.t("quickstart.ctaHref"), state.language), state.version)
    st.markdown(f'<a href="{link}" target="_self" class="btn">{html.escape(state.t("quickstart.ctaButton"))}</a>',
                unsafe_allow_html=True)


def render_home_page(site_config: SiteConfig, state: AppState):
    """Renders the landing page."""
    _render_hero(site_config, state)
    _render_architectures_banner(site_config, state)
    _render_elevator(state)
    _render_features(state)
    _render_spotlights(state)
    _render_comparison(state)
    _render_use_cases(state)
    _render_quickstart(site_config, state)


# --- Docs, Architectures and Pages ---

def render_docs_hub(entries: List[ContentEntry], site_config: SiteConfig, state: AppState):
    """Renders the searchable documentation index of the selected version."""
    st.markdown(f"# {state.t('docsHub.title')}")
    query = st.text_input(
        state.t("docsHub.searchPlaceholder"),
        label_visibility="collapsed",
        placeholder=state.t("docsHub.searchPlaceholder"),
    )

    matches = filter_entries(entries, query)
    if not matches:
        st.info(state.t("docsHub.noResults"))
        return

    cols = st.columns(3)
    for idx, entry in enumerate(matches):
        target = site_config.localize_path(f"docs/{entry.id}/", state.language)
        with cols[idx % 3]:
            _render_card(
                f"{entry.icon} {entry.title}".strip(),
                entry.description or state.t("docsHub.defaultDesc"),
                page_link(target, state.version),
            )


def render_doc_page(entries: List[ContentEntry], slug: str, state: AppState) -> bool:
    """
    Renders a single doc. An unversioned slug is looked up in the selected
    version. Returns False when no such doc exists.
    """
    if get_version_from_slug(slug + "/") is None:
        slug = f"{state.version}/{slug}"

    entry = get_entry(entries, slug)
    if not entry:
        return False

    st.markdown(f"# {entry.icon} {entry.title}".strip())
    if entry.description:
        st.caption(entry.description)
    st.markdown(entry.body, unsafe_allow_html=True)
    return True


def render_architectures_page(entries: List[ContentEntry], site_config: SiteConfig, state: AppState):
    """Renders the reference architectures overview."""
    st.markdown(f"# {state.t('archPage.title')}")
    st.write(state.t("archPage.intro"))

    domains = {getattr(e.frontmatter, "domain", "") for e in entries}
    c1, c2 = st.columns(2)
    c1.metric(state.t("archBanner.statArchitectures"), len(entries))
    c2.metric(state.t("archBanner.statDomains"), len(domains))

    for entry in entries:
        target = site_config.localize_path(f"architectures/{entry.id}/", state.language)
        _render_card(f"{entry.icon} {entry.title}".strip(), entry.description, page_link(target, state.version))


def render_architecture_detail(entry: ContentEntry, state: AppState):
    """Renders one reference architecture with its metadata."""
    fm = entry.frontmatter
    st.markdown(f"# {entry.icon} {entry.title}".strip())
    st.caption(entry.description)
    st.markdown(
        f"**{state.t('archPage.domain')}:** {html.escape(fm.domain)} &nbsp;•&nbsp; "
        f"**{state.t('archPage.difficulty')}:** {html.escape(fm.difficulty)}",
        unsafe_allow_html=True,
    )
    if fm.features:
        st.markdown(f"**{state.t('archPage.features')}:** " + ", ".join(f"`{f}`" for f in fm.features))
    st.markdown(entry.body, unsafe_allow_html=True)


def render_page(entry: ContentEntry | None, title_key: str, subtitle_keys: List[str], state: AppState):
    """Renders a standalone page: translated heading plus the page's markdown body."""
    st.markdown(f"# {state.t(title_key)}")
    for key in subtitle_keys:
        st.markdown(state.t(key), unsafe_allow_html=True)
    if entry:
        st.markdown(entry.body, unsafe_allow_html=True)


# --- Roadmap ---

def _render_roadmap_phase(state: AppState, phase: str, badge_key: str):
    st.markdown(f"### {state.t(f'roadmap.{phase}')}: {state.t(f'roadmap.{phase}Title')}")
    _render_badge(state.t(f"roadmap.{badge_key}"))
    st.write(state.t(f"roadmap.{phase}Desc"))
    items = state.t_array(f"roadmap.{phase}Items")
    st.markdown("\n".join(f"- {item}" for item in items), unsafe_allow_html=True)

def render_roadmap_page(site_config: SiteConfig, state: AppState):
    """Renders the roadmap from the translation table."""
    st.markdown(f"# {state.t('roadmap.heroTitle')} **{state.t('roadmap.heroHighlight')}**")
    st.markdown(state.t("roadmap.heroSubtitle"), unsafe_allow_html=True)

    with st.expander(state.t("roadmap.tocTitle")):
        toc_keys = ["tocPhaseA", "tocPhaseB", "tocPhaseC", "tocPhaseD", "tocMilestone", "tocStabilization",
                    "tocPhaseE", "tocPhaseF", "tocPhaseG", "tocPhaseH", "tocFuture"]
        st.markdown("\n".join(f"- {state.t(f'roadmap.{key}')}" for key in toc_keys))

    for phase, badge_key in ROADMAP_PHASES:
        _render_roadmap_phase(state, phase, badge_key)

    with st.container(border=True):
        st.caption(state.t("roadmap.milestoneLabel"))
        st.markdown(f"### {state.t('roadmap.milestoneTitle')}")
        _render_badge(state.t("roadmap.milestoneBadge"))

    st.caption(state.t("roadmap.stabilizationLabel"))
    st.markdown(f"### {state.t('roadmap.stabilizationTitle')}")
    _render_badge(state.t("roadmap.badgeMonitoring"))
    st.write(state.t("roadmap.stabilizationDesc"))
    st.caption(state.t("roadmap.gaugeLabel"))

    for phase, badge_key in ROADMAP_LATER_PHASES:
        _render_roadmap_phase(state, phase, badge_key)

    st.markdown(f"### {state.t('roadmap.future')}: {state.t('roadmap.futureTitle')}")
    _render_badge(state.t("roadmap.badgeFuture"))
    st.write(state.t("roadmap.futureDesc"))
    st.markdown("\n".join(f"- {item}" for item in state.t_array("roadmap.futureItems")), unsafe_allow_html=True)

    st.markdown(f"### {state.t('roadmap.ctaTitle')}")
    st.write(state.t("roadmap.ctaDesc"))
    if site_config.repo_url:
        issues_url = site_config.repo_url.rstrip("/") + "/issues"
        st.markdown(f'<a href="{html.escape(issues_url)}" class="btn">{html.escape(state.t("roadmap.ctaButton"))}</a>',
                    unsafe_allow_html=True)


def render_not_found(state: AppState):
    """Renders the not-found notice with the requested path."""
    st.markdown(f"# {state.t('notFound.title')}")
    st.write(state.t("notFound.desc"))
    st.code(state.path)
