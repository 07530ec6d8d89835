import re
from typing import Optional

from .models import SummaryDetails

WHAT_I_BRING = "What I bring:"
TOOLBOX = "Toolbox:"

SUMMARY_BULLET_RE = re.compile(r"^[-–•]\s+")
PARAGRAPH_BREAK_RE = re.compile(r"\n{2,}")
TOOL_SPLIT_RE = re.compile(r",|\n")


def parse_summary(summary: Optional[str]) -> Optional[SummaryDetails]:
    """Split a summary into intro paragraphs, "What I bring:" bullets and a toolbox list."""
    if not summary or not summary.strip():
        return None
    text = summary.replace("\r", "").strip()

    i_what = text.find(WHAT_I_BRING)
    i_tools = text.find(TOOLBOX)
    markers = sorted(i for i in (i_what, i_tools) if i >= 0)
    intro = text[: markers[0] if markers else len(text)].strip()

    what_block = ""
    if i_what >= 0:
        what_end = i_tools if i_tools > i_what else len(text)
        what_block = text[i_what + len(WHAT_I_BRING): what_end].strip()
    bullets = [
        SUMMARY_BULLET_RE.sub("", l.strip())
        for l in what_block.split("\n")
        if SUMMARY_BULLET_RE.match(l.strip())
    ]

    tools_block = ""
    if i_tools >= 0:
        tools_end = i_what if i_what > i_tools else len(text)
        tools_block = text[i_tools + len(TOOLBOX): tools_end].strip()
    toolbox = [s.strip() for s in TOOL_SPLIT_RE.split(tools_block) if s.strip()]

    paragraphs = [p.strip() for p in PARAGRAPH_BREAK_RE.split(intro) if p.strip()]
    return SummaryDetails(intro=paragraphs, bullets=bullets, toolbox=toolbox)
