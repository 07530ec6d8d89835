"""Experience block -> companies, roles and labelled sub-sections.

Company and role boundaries have no delimiter in the exported text, so the
parser anchors on date-range lines (``Jan 2020 - Present (2 years)``) and
reads outward from each one:

    Acme Corp                <- company name
    3 years 2 months         <- optional tenure summary
    Senior Engineer          <- role title
    Jan 2022 - Present       <- date anchor
    Berlin, Germany          <- optional role location

All scanning is index arithmetic over one immutable list of lines.
"""

import re
from typing import Dict, List, NamedTuple, Optional, Sequence

import structlog

from .models import Company, ExperienceSection, HighlightsSection, NarrativeSection, Role, TechStackSection
from .normalizers import DATE_RANGE_LINE_RE, MONTH_YEAR, normalize_date_range, normalize_spaces_dashes

logger = structlog.get_logger()

NARRATIVE = "narrative"
TECH_STACK = "techStack"
HIGHLIGHTS = "highlights"

SUBSECTION_LABELS: Dict[str, str] = {
    "The project:": NARRATIVE,
    "Tech-stack:": TECH_STACK,
    "Highlights:": HIGHLIGHTS,
}

LABEL_RE = re.compile(
    r"[ \t]*(" + "|".join(re.escape(l) for l in SUBSECTION_LABELS) + r")[ \t]*",
    re.IGNORECASE,
)
# a month-year token glued to preceding text, unless it is the end of a range
INLINE_DATE_RE = re.compile(rf"(?<=[^\s-])[ \t]*(?={MONTH_YEAR})")
TENURE_RE = re.compile(r"year|month", re.IGNORECASE)
BULLET_START_RE = re.compile(r"^-\s*")


class Anchor(NamedTuple):
    date_idx: int
    title_idx: int
    company_idx: int
    tenure_idx: Optional[int]
    location_idx: Optional[int]

    @property
    def trailing_idx(self) -> int:
        return self.location_idx if self.location_idx is not None else self.date_idx


def is_date_line(line: str) -> bool:
    return bool(DATE_RANGE_LINE_RE.match(line))


def label_kind(line: str) -> Optional[str]:
    stripped = line.strip().lower()
    for label, kind in SUBSECTION_LABELS.items():
        if stripped == label.lower():
            return kind
    return None


def _canonical_label(match: "re.Match[str]") -> str:
    text = match.string
    found = match.group(1).lower()
    label = next(l for l in SUBSECTION_LABELS if l.lower() == found)
    before = "" if match.start() == 0 or text[match.start() - 1] == "\n" else "\n"
    after = "" if match.end() == len(text) or text[match.end()] == "\n" else "\n"
    return f"{before}{label}{after}"


def prepare_experience_text(block: str) -> str:
    """Plain spaces and hyphens, labels and month-year tokens at line starts."""
    text = normalize_spaces_dashes(block)
    text = LABEL_RE.sub(_canonical_label, text)
    return INLINE_DATE_RE.sub("\n", text)


def _prev_nonblank(lines: Sequence[str], idx: int) -> Optional[int]:
    for i in range(idx, -1, -1):
        if lines[i].strip():
            return i
    return None


def _next_nonblank(lines: Sequence[str], idx: int) -> Optional[int]:
    for i in range(idx, len(lines)):
        if lines[i].strip():
            return i
    return None


def _location_idx(lines: Sequence[str], date_idx: int) -> Optional[int]:
    idx = _next_nonblank(lines, date_idx + 1)
    if idx is None:
        return None
    line = lines[idx]
    if "," not in line or is_date_line(line) or label_kind(line):
        return None
    # a comma line directly followed by a date line is the next role's title
    after = _next_nonblank(lines, idx + 1)
    if after is not None and is_date_line(lines[after]):
        return None
    return idx


def _inside_labelled_run(lines: Sequence[str], idx: int, prev: Anchor) -> bool:
    """A bullet, a label, or the first body line of a label after the previous role."""
    if idx <= prev.trailing_idx:
        return False
    line = lines[idx].strip()
    if line.startswith("-") or label_kind(line):
        return True
    above = _prev_nonblank(lines, idx - 1)
    return above is not None and above > prev.trailing_idx and bool(label_kind(lines[above]))


def locate_anchors(lines: Sequence[str]) -> List[Anchor]:
    anchors: List[Anchor] = []
    for date_idx, line in enumerate(lines):
        if not is_date_line(line):
            continue

        title_idx = _prev_nonblank(lines, date_idx - 1)
        if title_idx is None or is_date_line(lines[title_idx]):
            logger.debug("date_anchor_discarded", line=date_idx, reason="no_title")
            continue

        cand = _prev_nonblank(lines, title_idx - 1)
        prev = anchors[-1] if anchors else None
        tenure_idx = None
        if cand is not None and prev is not None and (
            cand in (prev.date_idx, prev.location_idx) or _inside_labelled_run(lines, cand, prev)
        ):
            company_idx, tenure_idx = prev.company_idx, prev.tenure_idx
        elif cand is None:
            logger.debug("date_anchor_discarded", line=date_idx, reason="no_company")
            continue
        elif TENURE_RE.search(lines[cand]) and not is_date_line(lines[cand]):
            tenure_idx = cand
            company_idx = _prev_nonblank(lines, cand - 1)
            if company_idx is None:
                logger.debug("date_anchor_discarded", line=date_idx, reason="no_company")
                continue
        else:
            company_idx = cand

        anchors.append(Anchor(date_idx, title_idx, company_idx, tenure_idx, _location_idx(lines, date_idx)))
    return anchors


def _narrative(lines: Sequence[str]) -> List[str]:
    paragraphs: List[str] = []
    current: List[str] = []
    for line in lines:
        if line.strip():
            current.append(line.strip())
        elif current:
            paragraphs.append(" ".join(current))
            current = []
    if current:
        paragraphs.append(" ".join(current))
    return paragraphs


def _tech_stack(lines: Sequence[str]) -> List[str]:
    joined = " ".join(l.strip() for l in lines if l.strip())
    return [t.strip() for t in joined.split(",") if t.strip()]


def _highlights(lines: Sequence[str]) -> List[str]:
    bullets: List[List[str]] = []
    for line in lines:
        line = line.strip()
        if not line:
            continue
        if line.startswith("-"):
            bullets.append([BULLET_START_RE.sub("", line)])
        elif bullets:
            bullets[-1].append(line)
        else:
            bullets.append([line])
    return [" ".join(p for p in parts if p) for parts in bullets if any(parts)]


def _build_section(kind: str, body: Sequence[str]) -> Optional[ExperienceSection]:
    if kind == NARRATIVE:
        paragraphs = _narrative(body)
        return NarrativeSection(paragraphs=paragraphs) if paragraphs else None
    if kind == TECH_STACK:
        items = _tech_stack(body)
        return TechStackSection(items=items) if items else None
    bullets = _highlights(body)
    return HighlightsSection(bullets=bullets) if bullets else None


def parse_subsections(lines: Sequence[str]) -> List[ExperienceSection]:
    """Labelled runs, in document order; text before the first label is ignored."""
    sections: List[ExperienceSection] = []
    kind: Optional[str] = None
    body: List[str] = []
    for line in list(lines) + [None]:
        next_kind = label_kind(line) if line is not None else None
        if line is None or next_kind:
            if kind:
                section = _build_section(kind, body)
                if section is not None:
                    sections.append(section)
            kind, body = next_kind, []
        elif kind:
            body.append(line)
    return sections


def _role(lines: Sequence[str], anchor: Anchor) -> Role:
    date_line = lines[anchor.date_idx].strip()
    start, end = normalize_date_range(date_line)
    m = DATE_RANGE_LINE_RE.match(date_line)
    return Role(
        title=lines[anchor.title_idx].strip(),
        date_range=date_line,
        location=lines[anchor.location_idx].strip() if anchor.location_idx is not None else "",
        start=start,
        end=end,
        current=m.group("end").lower() == "present",
        duration=(m.group("duration") or "").strip() or None,
    )


def parse_experience(block: Optional[str]) -> List[Company]:
    if not block:
        return []
    lines = prepare_experience_text(block).split("\n")
    anchors = locate_anchors(lines)

    grouped: Dict[int, List[Anchor]] = {}
    for anchor in anchors:
        grouped.setdefault(anchor.company_idx, []).append(anchor)
    company_idxs = sorted(grouped, key=lambda c: min(a.date_idx for a in grouped[c]))

    companies: List[Company] = []
    for pos, company_idx in enumerate(company_idxs):
        members = sorted(grouped[company_idx], key=lambda a: a.date_idx)
        region_end = company_idxs[pos + 1] if pos + 1 < len(company_idxs) else len(lines)
        # labelled runs may follow any role, up to the next role's title
        sections: List[ExperienceSection] = []
        for i, anchor in enumerate(members):
            gap_end = members[i + 1].title_idx if i + 1 < len(members) else region_end
            sections.extend(parse_subsections(lines[anchor.trailing_idx + 1:gap_end]))
        tenure_idx = next((a.tenure_idx for a in members if a.tenure_idx is not None), None)
        companies.append(Company(
            name=lines[company_idx].strip(),
            tenure_summary=lines[tenure_idx].strip() if tenure_idx is not None else None,
            roles=[_role(lines, a) for a in members],
            sections=sections,
        ))

    logger.debug("experience_parsed", companies=len(companies), roles=len(anchors))
    return companies
