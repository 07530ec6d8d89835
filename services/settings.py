import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_PDF_DIR = "public"
DEFAULT_PDF_NAME = "Profile.pdf"
TRUTHY = {"1", "true", "yes", "on"}


def resolve_pdf_path(file_name: Optional[str] = None) -> Path:
    """``<PROFILE_PDF_DIR>/<file_name or PROFILE_PDF_NAME>``, relative dirs against the cwd."""
    base = Path(os.getenv("PROFILE_PDF_DIR", DEFAULT_PDF_DIR))
    name = file_name or os.getenv("PROFILE_PDF_NAME", DEFAULT_PDF_NAME)
    return (Path.cwd() / base / name).resolve()


def get_log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()


def use_json_logs() -> bool:
    return os.getenv("LOG_JSON", "").strip().lower() in TRUTHY
