import re
from typing import List, Optional

from .lists import dedupe

EMAIL_RE = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")
URL_RE = re.compile(r"\b(?:https?://|www\.)[^\s)]+", re.IGNORECASE)
BARE_DOMAIN_RE = re.compile(
    r"(?<![\w@/.-])(?:[a-z0-9](?:[a-z0-9-]*[a-z0-9])?\.)+[a-z]{2,24}\b(?:/[^\s)]*)?",
    re.IGNORECASE,
)
LEADING_JUNK_RE = re.compile(r"^[(\[<{\"']+")
TRAILING_JUNK_RE = re.compile(r"[)\]>}\"'.,;:!?]+$")
SCHEME_RE = re.compile(r"^(?:https?|mailto):", re.IGNORECASE)


def extract_emails(*blocks: Optional[str]) -> List[str]:
    found: List[str] = []
    for block in blocks:
        if block:
            found.extend(EMAIL_RE.findall(block))
    return dedupe(found)


def clean_url(raw: str) -> str:
    url = TRAILING_JUNK_RE.sub("", LEADING_JUNK_RE.sub("", raw.strip()))
    if url and not SCHEME_RE.match(url):
        url = "https://" + url
    return url


def _scheme_links(block: Optional[str]) -> List[str]:
    return [clean_url(m) for m in URL_RE.findall(block or "")]


def extract_links(text: str, contact: Optional[str] = None) -> List[str]:
    """All contact links, ``mailto:`` first, then Contact links, then the rest.

    Bare domains (``alice.dev``) are only trusted inside the Contact block;
    anywhere else they are too easy to hit in running prose.
    """
    emails = extract_emails(contact, text)

    contact_text = contact or ""
    for email in emails:
        contact_text = contact_text.replace(email, " ")

    contact_links = _scheme_links(contact_text)
    document_links = _scheme_links(text)

    bare_source = URL_RE.sub(" ", contact_text)
    bare_links = [clean_url(m) for m in BARE_DOMAIN_RE.findall(bare_source)]

    merged = ["mailto:" + e for e in emails] + contact_links + document_links + bare_links
    return dedupe(u for u in merged if u and u not in ("https://", "mailto:"))


def pick_linkedin(links: List[str]) -> Optional[str]:
    return next((u for u in links if "linkedin.com" in u.lower()), None)
