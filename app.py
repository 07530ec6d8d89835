from typing import List, Optional

import streamlit as st

from profile_parsing.models import Company, ExperienceSection, ResumeDraft
from services.errors import ProfileDocumentError
from services.logging_config import configure_logging
from services.pdf_loader import get_resume_from_pdf
from services.settings import resolve_pdf_path

# --- Page Config & Theme ---
st.set_page_config(
    page_title="Profile",
    page_icon="📄",
    layout="centered",
)

CUSTOM_CSS = """
<style>
:root { --radius: 16px; --ring: 1px solid rgba(148,163,184,0.25); }
.block-container { padding-top: 1.5rem; max-width: 960px; }
header { visibility: hidden; }

.meta { opacity: .85; margin: .15rem 0; }
.meta.prominent { font-size: 1.2rem; font-weight: 600; opacity: 1; }

.company-card { border-radius: var(--radius); border: var(--ring); padding: 1rem 1.2rem; margin-bottom: 1rem; }
.role { margin: .35rem 0; }
.small { opacity: 0.75; font-size: 0.9rem; }

.pill {
  display:inline-block; padding:.2rem .65rem; margin:.15rem .2rem .15rem 0;
  border-radius:999px; border: var(--ring); font-size:.85rem;
}
</style>
"""
st.markdown(CUSTOM_CSS, unsafe_allow_html=True)

configure_logging()


@st.cache_data(show_spinner=False)
def _cached_draft(path: str, mtime: float) -> dict:
    # keyed by path + mtime so a replaced PDF is parsed again
    return get_resume_from_pdf(path).model_dump()


def load_draft(file_name: Optional[str] = None) -> ResumeDraft:
    path = resolve_pdf_path(file_name)
    mtime = path.stat().st_mtime if path.exists() else 0.0
    return ResumeDraft.model_validate(_cached_draft(str(path), mtime))


def pills(items: List[str]) -> str:
    return "".join(f"<span class='pill'>{i}</span>" for i in items)


# --- Sections ---
def render_about(draft: ResumeDraft):
    st.title(draft.name or "")
    if draft.career:
        st.markdown(f"<div class='meta prominent'>💼 {draft.career}</div>", unsafe_allow_html=True)
    if draft.location:
        st.markdown(f"<div class='meta'>📍 {draft.location}</div>", unsafe_allow_html=True)

    details = draft.summary_details
    if not details:
        return
    for p in details.intro:
        st.write(p)
    if details.bullets:
        st.markdown("#### What I bring")
        st.markdown("\n".join(f"- {b}" for b in details.bullets))
    if details.toolbox:
        st.markdown("#### Toolbox")
        st.markdown(pills(details.toolbox), unsafe_allow_html=True)


def _render_section(section: ExperienceSection):
    if section.kind == "narrative":
        st.markdown("**The project**")
        for p in section.paragraphs:
            st.write(p)
    elif section.kind == "techStack":
        st.markdown("**Tech-stack**")
        st.markdown(pills(section.items), unsafe_allow_html=True)
    else:
        st.markdown("**Highlights**")
        st.markdown("\n".join(f"- {b}" for b in section.bullets))


def render_company(company: Company):
    with st.container(border=True):
        title = f"### {company.name}"
        if company.tenure_summary:
            title += f"  \n<span class='small'>{company.tenure_summary}</span>"
        st.markdown(title, unsafe_allow_html=True)
        for role in company.roles:
            where = f" · {role.location}" if role.location else ""
            st.markdown(
                f"<div class='role'><b>{role.title}</b><br><span class='small'>{role.date_range}{where}</span></div>",
                unsafe_allow_html=True,
            )
        for section in company.sections:
            _render_section(section)


def render_experience(draft: ResumeDraft):
    if draft.experience is None:
        return
    st.header("Experience")
    if not draft.experience and draft.experience_raw:
        st.text(draft.experience_raw)
    for company in draft.experience:
        render_company(company)


def render_education(draft: ResumeDraft):
    if draft.education:
        st.header("Education")
        st.text(draft.education)


def render_skills(draft: ResumeDraft):
    if not draft.skills and not draft.languages:
        return
    st.header("Skills & Languages")
    col_s, col_l = st.columns(2)
    with col_s:
        st.markdown("#### Top Skills")
        if draft.skills:
            st.markdown(pills(draft.skills), unsafe_allow_html=True)
        else:
            st.caption("No skills provided")
    with col_l:
        st.markdown("#### Languages")
        if draft.languages:
            st.markdown(pills(draft.languages), unsafe_allow_html=True)
        else:
            st.caption("No languages provided")


def render_links(draft: ResumeDraft):
    if not draft.links:
        return
    st.header("Links")
    for href in draft.links:
        label = href[len("mailto:"):] if href.lower().startswith("mailto:") else href
        st.markdown(f"↗ [{label}]({href})")


def render_contact(draft: ResumeDraft):
    if not draft.email and not draft.linkedin:
        return
    st.header("Contact")
    if draft.email:
        st.markdown(f"Email: [{draft.email}](mailto:{draft.email})")
    else:
        st.markdown(f"Connect via LinkedIn: [{draft.linkedin}]({draft.linkedin})")


# --- Page ---
try:
    draft = load_draft()
except ProfileDocumentError as e:
    st.error(e.message)
    st.stop()

if draft.summary or draft.name:
    render_about(draft)
render_experience(draft)
render_education(draft)
render_skills(draft)
render_links(draft)
render_contact(draft)
