import re
from typing import List, Optional, Sequence, Tuple

import dateparser

from .sections import PROFILE_SECTIONS

NEWLINE_RE = re.compile(r"\r\n?")
NOISE_LINE_PATTERNS: List[re.Pattern] = [
    re.compile(r"^\s*Page\s+\d+\s+of\s+\d+\s*$", re.IGNORECASE),  # "Page 1 of 3"
]
WWW_TAIL_RE = re.compile(r"(?:^|\s)(www\.\S+)$", re.IGNORECASE)
ANNOTATED_TOKEN_RE = re.compile(r"^\S+\s+\(")
URL_CONTINUATION_CHARS = "/-._=?&#%"
HEADER_LABELS = frozenset(cfg.label.lower() for cfg in PROFILE_SECTIONS)

SPACE_VARIANTS_RE = re.compile(r"[\t\u00a0\u1680\u2000-\u200a\u202f\u205f\u3000]")
DASH_VARIANTS_RE = re.compile(r"[\u2010-\u2015\u2212\ufe58\ufe63\uff0d]")

MONTHS = (
    r"(?:Jan(?:uary)?|Feb(?:ruary)?|Mar(?:ch)?|Apr(?:il)?|May|June?|July?|Aug(?:ust)?"
    r"|Sep(?:t(?:ember)?)?|Oct(?:ober)?|Nov(?:ember)?|Dec(?:ember)?)"
)
MONTH_YEAR = rf"\b{MONTHS}\s+\d{{4}}\b"
DATE_RANGE_LINE_RE = re.compile(
    rf"^\s*(?P<start>{MONTH_YEAR})\s*-\s*(?P<end>Present|{MONTH_YEAR})"
    r"(?:\s*\((?P<duration>[^)]*)\))?\s*$"
)


def unify_newlines(txt: str) -> str:
    return NEWLINE_RE.sub("\n", txt)


def drop_noise_lines(txt: str, patterns: Optional[Sequence[re.Pattern]] = None) -> str:
    patterns = NOISE_LINE_PATTERNS if patterns is None else patterns
    kept = [line for line in txt.split("\n") if not any(rx.match(line.strip()) for rx in patterns)]
    return "\n".join(kept)


def _continues_url(token: str, next_line: str) -> bool:
    if next_line.strip().lower() in HEADER_LABELS:
        return False
    starts_lower = next_line[0].islower() or next_line[0].isdigit()
    # a trailing dot is usually the end of a sentence
    if token[-1] == ".":
        return starts_lower
    if token[-1] in URL_CONTINUATION_CHARS:
        return True
    if ANNOTATED_TOKEN_RE.match(next_line):
        return True
    return len(next_line.split()) == 1 and starts_lower


def join_broken_urls(txt: str) -> str:
    """Glue a line-final ``www.`` token to the head of the next non-empty line.

    Repeats on the same line until nothing more can be joined, so running it
    twice gives the same text.
    """
    lines = txt.split("\n")
    out: List[str] = []
    i = 0
    while i < len(lines):
        line = lines[i]
        while True:
            m = WWW_TAIL_RE.search(line)
            if not m:
                break
            j = i + 1
            while j < len(lines) and lines[j] == "":
                j += 1
            if j >= len(lines):
                break
            nxt = lines[j].lstrip()
            if not nxt or not _continues_url(m.group(1), nxt):
                break
            line = line + nxt
            i = j
        out.append(line)
        i += 1
    return "\n".join(out)


def normalize_text(txt: str, noise_patterns: Optional[Sequence[re.Pattern]] = None) -> str:
    txt = unify_newlines(txt or "")
    txt = drop_noise_lines(txt, noise_patterns)
    txt = join_broken_urls(txt)
    return txt.strip()


def normalize_spaces_dashes(txt: str) -> str:
    return DASH_VARIANTS_RE.sub("-", SPACE_VARIANTS_RE.sub(" ", txt))


def parse_ym(s: str) -> Optional[str]:
    if not s:
        return None
    dt = dateparser.parse(s, languages=["en"], settings={"PREFER_DAY_OF_MONTH": "first"})
    if not dt:
        return None
    return f"{dt.year:04d}-{dt.month:02d}"


def normalize_date_range(line: str) -> Tuple[Optional[str], Optional[str]]:
    """``"Jan 2020 - Present"`` -> ``("2020-01", None)``; no match -> ``(None, None)``."""
    m = DATE_RANGE_LINE_RE.match(normalize_spaces_dashes(line))
    if not m:
        return None, None
    start = parse_ym(m.group("start"))
    end_raw = m.group("end")
    end = None if end_raw.lower() == "present" else parse_ym(end_raw)
    return start, end
