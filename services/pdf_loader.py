import io
from pathlib import Path
from typing import Optional, Union

import structlog
from pypdf import PdfReader

from profile_parsing.cv_parser import extract_resume_draft
from profile_parsing.models import ResumeDraft

from .errors import DocumentEmpty, DocumentUnavailable
from .settings import resolve_pdf_path

logger = structlog.get_logger()

MIN_RICH_TEXT = 500


def _pypdf_extract(data: bytes) -> str:
    reader = PdfReader(io.BytesIO(data))
    pages = [p.extract_text() or "" for p in reader.pages]
    return "\n".join(pages)


def _pdfminer_extract(data: bytes) -> str:
    from pdfminer.high_level import extract_text
    return extract_text(io.BytesIO(data))


def read_pdf_text(data: bytes) -> str:
    """Text of a PDF: pypdf first, pdfminer when pypdf fails or comes back thin."""
    text = ""
    try:
        text = _pypdf_extract(data)
    except Exception as e:
        logger.warning("pypdf_extract_failed", error=str(e))

    if len(text.strip()) < MIN_RICH_TEXT:
        try:
            alt = _pdfminer_extract(data)
        except Exception as e:
            logger.warning("pdfminer_extract_failed", error=str(e))
        else:
            if len(alt.strip()) > len(text.strip()):
                logger.debug("pdfminer_text_preferred", chars=len(alt))
                text = alt
    return text


def load_profile_text(path: Union[str, Path]) -> str:
    path = Path(path)
    if not path.is_file():
        logger.error("profile_pdf_missing", path=str(path))
        raise DocumentUnavailable(str(path))
    try:
        data = path.read_bytes()
    except OSError as e:
        logger.error("profile_pdf_unreadable", path=str(path), error=str(e))
        raise DocumentUnavailable(str(path), reason=str(e)) from e

    if not data:
        logger.error("profile_pdf_empty", path=str(path))
        raise DocumentEmpty(str(path))

    text = read_pdf_text(data)
    if not text.strip():
        logger.error("profile_pdf_no_text", path=str(path))
        raise DocumentEmpty(str(path))
    return text


def get_resume_from_pdf(file_name: Optional[str] = None) -> ResumeDraft:
    path = resolve_pdf_path(file_name)
    text = load_profile_text(path)
    logger.info("profile_pdf_loaded", path=str(path), chars=len(text))
    return extract_resume_draft(text)
