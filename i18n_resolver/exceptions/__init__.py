"""
Domain exceptions for the i18n resolver
"""

from .base import ConfigBlockError, DomainException, ProvisionError
from .dictionary import (
    DictionaryLoadError,
    MalformedDocumentError,
    SourceNotFoundError,
    SourceUnreadableError,
)

__all__ = [
    # Base
    "DomainException",
    "ProvisionError",
    "ConfigBlockError",

    # Dictionary
    "DictionaryLoadError",
    "SourceNotFoundError",
    "SourceUnreadableError",
    "MalformedDocumentError",
]
