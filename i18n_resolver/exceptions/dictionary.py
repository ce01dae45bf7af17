"""
Dictionary load exceptions

Load-time failures are fatal to provisioning. Resolution-time conditions
(missing key, missing language) are never raised.
"""

from typing import Optional

from .base import DomainException


class DictionaryLoadError(DomainException):
    """Base exception for dictionary load failures"""

    def __init__(self, message: str, source: Optional[str] = None,
                 code: str = "DICTIONARY_LOAD_ERROR", details: Optional[dict] = None):
        merged = {"source": source} if source is not None else {}
        merged.update(details or {})
        super().__init__(message=message, code=code, details=merged)
        self.source = source


class SourceNotFoundError(DictionaryLoadError):
    """The dictionary source does not exist"""

    def __init__(self, source: str):
        super().__init__(
            message=f"dictionary file not found: {source}",
            source=source,
            code="SOURCE_NOT_FOUND"
        )


class SourceUnreadableError(DictionaryLoadError):
    """The dictionary source exists but cannot be read"""

    def __init__(self, source: str, reason: str):
        super().__init__(
            message=f"failed to read dictionary file {source}: {reason}",
            source=source,
            code="SOURCE_UNREADABLE",
            details={"reason": reason}
        )


class MalformedDocumentError(DictionaryLoadError):
    """The dictionary document is not a key -> language -> text mapping"""

    def __init__(self, reason: str, source: Optional[str] = None, path: Optional[str] = None):
        details = {"reason": reason}
        if path is not None:
            details["path"] = path
        super().__init__(
            message=f"failed to parse JSON dictionary: {reason}",
            source=source,
            code="MALFORMED_DOCUMENT",
            details=details
        )
