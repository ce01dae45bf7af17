"""
Base domain exceptions
"""

from typing import Optional


class DomainException(Exception):
    """Base domain exception"""

    def __init__(self, message: str, code: str = "DOMAIN_ERROR",
                 details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}


class ProvisionError(DomainException):
    """Raised when the i18n module cannot be provisioned"""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(
            message=f"failed to load i18n dictionary: {message}",
            code="PROVISION_ERROR",
            details=details or {}
        )


class ConfigBlockError(DomainException):
    """Invalid i18n configuration block"""

    def __init__(self, message: str, line: Optional[int] = None):
        details = {"line": line} if line is not None else {}
        if line is not None:
            message = f"{message} (line {line})"
        super().__init__(
            message=message,
            code="CONFIG_BLOCK_ERROR",
            details=details
        )
