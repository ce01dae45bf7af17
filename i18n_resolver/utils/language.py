"""
Language utilities for the i18n resolver

Language codes are not validated against a fixed set: any code present in
the dictionary is a valid target.
"""

from __future__ import annotations

from typing import List, Optional

from fastapi import Request

DEFAULT_LANGUAGE = "en"


def get_default_language() -> str:
    """
    Get default (fallback) language.

    Returns:
        Default language code
    """
    return DEFAULT_LANGUAGE


def normalize_language(lang: Optional[str], default: Optional[str] = None) -> str:
    """
    Normalize language code.

    Supports:
    - quality values ("de;q=0.9" -> "de")
    - region codes (en-US -> en, de_AT -> de)
    - case folding (DE -> de)
    """
    fallback = default or get_default_language()
    if not lang:
        return fallback

    raw = str(lang).strip().lower()
    if ";" in raw:
        raw = raw.split(";", 1)[0].strip()
    if "-" in raw:
        raw = raw.split("-", 1)[0].strip()
    if "_" in raw:
        raw = raw.split("_", 1)[0].strip()

    if not raw or raw == "*":
        return fallback
    return raw


def _parse_accept_language_header(value: str) -> List[str]:
    """
    Parse Accept-Language into a list of language codes ordered by preference.

    Very small parser; we don't implement full RFC behavior, but we respect q=.
    """
    if not value:
        return []

    parts = [p.strip() for p in value.split(",") if p.strip()]
    weighted: List[tuple[float, str]] = []
    for part in parts:
        lang = part
        q = 1.0
        if ";" in part:
            lang, params = part.split(";", 1)
            lang = lang.strip()
            params = params.strip()
            if params.startswith("q="):
                try:
                    q = float(params[2:])
                except ValueError:
                    q = 1.0
        if q <= 0 or not lang or lang == "*":
            continue
        weighted.append((q, normalize_language(lang)))

    # Sort by q desc, stable otherwise
    weighted.sort(key=lambda item: item[0], reverse=True)
    return [lang for _, lang in weighted]


def get_accept_language(request: Request, default: Optional[str] = None) -> str:
    """
    Get the preferred language from the request.

    Args:
        request: FastAPI request object
        default: Language used when the request expresses no preference

    Returns:
        Language code (e.g., 'en', 'de')
    """
    # Explicit override (query param) beats header.
    query_lang = request.query_params.get("lang") or request.query_params.get("language")
    if query_lang:
        return normalize_language(query_lang, default)

    accept_language = request.headers.get("Accept-Language", "")
    candidates = _parse_accept_language_header(accept_language)
    if candidates:
        return candidates[0]

    return default or get_default_language()
