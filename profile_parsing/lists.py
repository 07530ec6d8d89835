import re
from typing import Hashable, Iterable, List, Optional, TypeVar

T = TypeVar("T", bound=Hashable)

MAX_ITEM_LENGTH = 80

BULLET_VARIANTS = ["â€¢", "-", "*", "•", "‣", "⁃", "▪", "●", "◦", "·"]
BULLET_RE = re.compile(r"^(?:" + "|".join(re.escape(b) for b in BULLET_VARIANTS) + r")+\s*")
MULTISPACES_RE = re.compile(r"\s{2,}")
TRAILING_SEP_RE = re.compile(r"[;,]\s*$")


def dedupe(xs: Iterable[T]) -> List[T]:
    seen = set()
    out = []
    for x in xs:
        if x not in seen:
            out.append(x)
            seen.add(x)
    return out


def clean_item(line: str) -> str:
    line = BULLET_RE.sub("", line.strip())
    line = MULTISPACES_RE.sub(" ", line)
    return TRAILING_SEP_RE.sub("", line).strip()


def extract_list(block: Optional[str]) -> Optional[List[str]]:
    """Short one-liners from a sidebar block, e.g. Top Skills or Languages.

    Lines longer than ``MAX_ITEM_LENGTH`` after cleanup are prose bleeding in
    from a neighbouring column and are dropped, not truncated.
    """
    if not block:
        return None
    items = [clean_item(l) for l in block.split("\n") if l.strip()]
    items = [i for i in items if 0 < len(i) <= MAX_ITEM_LENGTH]
    return dedupe(items) or None
