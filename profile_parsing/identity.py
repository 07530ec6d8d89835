from typing import List, Optional

from .models import PreSummaryTrio
from .sections import PROFILE_SECTIONS, SectionKey

SUMMARY_LABEL = next(cfg.label for cfg in PROFILE_SECTIONS if cfg.key is SectionKey.SUMMARY)


def find_pre_summary_trio(text: str, label: str = SUMMARY_LABEL) -> Optional[PreSummaryTrio]:
    """Name / headline / location: the three non-blank lines right above the Summary header.

    All or nothing: fewer than three lines above the header gives ``None``.
    """
    lines = text.split("\n")

    offsets: List[int] = []
    acc = 0
    for line in lines:
        offsets.append(acc)
        acc += len(line) + 1

    target = label.strip().lower()
    idx_summary = next((i for i, l in enumerate(lines) if l.strip().lower() == target), -1)
    if idx_summary < 0:
        return None

    trio_idxs: List[int] = []
    for i in range(idx_summary - 1, -1, -1):
        if len(trio_idxs) == 3:
            break
        if not lines[i].strip():
            continue
        trio_idxs.insert(0, i)
    if len(trio_idxs) != 3:
        return None

    name, headline, location = (lines[i].strip() for i in trio_idxs)
    return PreSummaryTrio(name=name, headline=headline, location=location, start_offset=offsets[trio_idxs[0]])
