from __future__ import annotations

from contextvars import ContextVar, Token
from typing import Optional

from i18n_resolver.utils.language import get_default_language, normalize_language

_LANGUAGE: ContextVar[str] = ContextVar("i18n_language", default=get_default_language())


def set_language(lang: Optional[str]) -> Token:
    return _LANGUAGE.set(normalize_language(lang))


def reset_language(token: Token) -> None:
    _LANGUAGE.reset(token)


def get_language() -> str:
    return _LANGUAGE.get()
