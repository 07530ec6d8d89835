"""
Loader failures. The parser itself never raises; these stop a render before it starts.
"""
from typing import Any, Dict, Optional


class ProfileDocumentError(Exception):
    """Base error for profile documents that cannot be turned into text"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class DocumentUnavailable(ProfileDocumentError):
    """File missing or unreadable"""

    def __init__(self, path: str, reason: Optional[str] = None):
        message = f"PDF not found at: {path}"
        if reason:
            message = f"PDF at {path} is unreadable: {reason}"
        super().__init__(message, details={"path": path})


class DocumentEmpty(ProfileDocumentError):
    """File present but without extractable text"""

    def __init__(self, path: str):
        super().__init__(f"PDF at {path} is empty or unreadable", details={"path": path})
