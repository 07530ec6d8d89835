import re
from typing import Dict, List, NamedTuple, Optional, Sequence, Set, Tuple

import structlog

from .models import SectionKey, SectionSlice

logger = structlog.get_logger()


class SectionConfig(NamedTuple):
    key: SectionKey
    label: str
    optional: bool = False


# Enumeration order decides ties when two labels match the same line.
PROFILE_SECTIONS: Tuple[SectionConfig, ...] = (
    SectionConfig(SectionKey.CONTACT, "Contact", optional=True),
    SectionConfig(SectionKey.TOP_SKILLS, "Top Skills", optional=True),
    SectionConfig(SectionKey.LANGUAGES, "Languages", optional=True),
    SectionConfig(SectionKey.SUMMARY, "Summary"),
    SectionConfig(SectionKey.EXPERIENCE, "Experience"),
    SectionConfig(SectionKey.EDUCATION, "Education"),
)


def header_pattern(label: str) -> "re.Pattern[str]":
    return re.compile(rf"^[^\S\n]*{re.escape(label)}[^\S\n]*$", re.IGNORECASE | re.MULTILINE)


def find_header(text: str, label: str, skip: Optional[Set[int]] = None) -> Optional[Tuple[int, int]]:
    """Return ``(line_start, line_end)`` of the first line that is exactly ``label``."""
    for m in header_pattern(label).finditer(text):
        if skip and m.start() in skip:
            continue
        return m.start(), m.end()
    return None


def split_sections_with_ranges(
    text: str, sections: Sequence[SectionConfig] = PROFILE_SECTIONS
) -> Dict[SectionKey, SectionSlice]:
    hits: List[Tuple[int, int, SectionKey]] = []
    claimed: Set[int] = set()
    for cfg in sections:
        found = find_header(text, cfg.label, skip=claimed)
        if found is None:
            if not cfg.optional:
                logger.debug("required_section_missing", section=cfg.key.value)
            continue
        claimed.add(found[0])
        hits.append((found[0], found[1], cfg.key))

    hits.sort(key=lambda h: h[0])

    out: Dict[SectionKey, SectionSlice] = {}
    for i, (_, line_end, key) in enumerate(hits):
        start = min(line_end + 1, len(text))
        end = hits[i + 1][0] if i + 1 < len(hits) else len(text)
        end = max(start, end)
        out[key] = SectionSlice(key=key, start=start, end=end, content=text[start:end].strip())
    logger.debug("sections_located", keys=[k.value for k in out])
    return out


def bounded_content(text: str, part: Optional[SectionSlice], cut: Optional[int]) -> Optional[str]:
    """Slice content, truncated at ``cut`` when it falls inside the slice."""
    if part is None:
        return None
    end = cut if cut is not None and part.start < cut <= part.end else part.end
    return text[part.start:end].strip()
