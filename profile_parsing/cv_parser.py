from typing import Optional

import structlog

from .experience import parse_experience
from .identity import find_pre_summary_trio
from .links import extract_emails, extract_links, pick_linkedin
from .lists import extract_list
from .models import ResumeDraft, SectionKey
from .normalizers import normalize_text
from .sections import PROFILE_SECTIONS, bounded_content, split_sections_with_ranges
from .summary import parse_summary

logger = structlog.get_logger()


def extract_resume_draft(raw_text: Optional[str]) -> ResumeDraft:
    """Run the whole pipeline over one extracted profile text.

    Never raises on odd input: anything that cannot be found comes back as
    ``None`` (or an empty ``links`` list).
    """
    text = normalize_text(raw_text or "")
    parts = split_sections_with_ranges(text, PROFILE_SECTIONS)

    trio = find_pre_summary_trio(text)
    cut = trio.start_offset if trio else None

    summary_part = parts.get(SectionKey.SUMMARY)
    summary = summary_part.content if summary_part and summary_part.content else None
    experience_part = parts.get(SectionKey.EXPERIENCE)
    education_part = parts.get(SectionKey.EDUCATION)

    # sidebar blocks sit above the trio; never let them swallow it
    contact = bounded_content(text, parts.get(SectionKey.CONTACT), cut)
    skills = extract_list(bounded_content(text, parts.get(SectionKey.TOP_SKILLS), cut))
    languages = extract_list(bounded_content(text, parts.get(SectionKey.LANGUAGES), cut))

    links = extract_links(text, contact)
    emails = extract_emails(contact, text)

    draft = ResumeDraft(
        name=trio.name if trio else None,
        career=trio.headline if trio else None,
        location=trio.location if trio else None,
        summary=summary,
        summary_details=parse_summary(summary),
        links=links,
        email=emails[0] if emails else None,
        linkedin=pick_linkedin(links),
        experience=parse_experience(experience_part.content) if experience_part else None,
        experience_raw=experience_part.content if experience_part else None,
        education=education_part.content if education_part and education_part.content else None,
        skills=skills,
        languages=languages,
    )
    logger.info(
        "resume_draft_extracted",
        sections=[k.value for k in parts],
        companies=len(draft.experience or []),
        links=len(links),
    )
    return draft
