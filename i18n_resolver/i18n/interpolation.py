"""
Positional placeholder interpolation.

Placeholders are ``{0}``, ``{1}``, ... indexed into the argument list. The
template is scanned once; text produced by a substitution is never scanned
again, so a nested translation containing ``{n}`` is inserted literally.
"""

from __future__ import annotations

import logging
import re
from typing import Sequence

from .arguments import Argument, KeyRef
from .store import DictionaryView

logger = logging.getLogger(__name__)

FALLBACK_LANGUAGE = "en"

# Nested references are resolved one level deep and never re-interpolated.
MAX_NESTED_DEPTH = 1

PLACEHOLDER_RE = re.compile(r"\{([0-9]+)\}")


def has_placeholders(template: str) -> bool:
    return PLACEHOLDER_RE.search(template) is not None


def _index_in_range(digits: str, count: int) -> int:
    """Return the placeholder index, or -1 when it cannot address an argument."""
    significant = digits.lstrip("0") or "0"
    # Avoid converting absurdly long digit runs.
    if len(significant) > len(str(count)):
        return -1
    idx = int(significant)
    return idx if idx < count else -1


def resolve_nested(
    view: DictionaryView,
    key: str,
    lang: str,
    fallback_language: str = FALLBACK_LANGUAGE,
) -> str:
    """
    Resolve a nested key: requested language, then the fallback language,
    then the key itself. The result is not interpolated.
    """
    entry, found = view.get(key)
    if found:
        text = entry.get(lang)
        if text is not None:
            return text
        text = entry.get(fallback_language)
        if text is not None:
            return text
    logger.debug(
        "nested translation key unresolved, using key as fallback: %s",
        key,
        extra={"translation_key": key, "requested_lang": lang},
    )
    return key


def interpolate(
    template: str,
    lang: str,
    args: Sequence[Argument],
    view: DictionaryView,
    fallback_language: str = FALLBACK_LANGUAGE,
) -> str:
    """
    Replace ``{n}`` tokens in ``template`` with ``args[n]``.

    Out-of-range tokens are left untouched. KeyRef arguments are translated
    with ``lang`` (falling back to ``fallback_language``); other arguments are
    rendered as text.
    """
    count = len(args)
    if not count:
        return template

    def _replace(match: re.Match) -> str:
        idx = _index_in_range(match.group(1), count)
        if idx < 0:
            return match.group(0)
        arg = args[idx]
        if isinstance(arg, KeyRef):
            return resolve_nested(view, arg.key, lang, fallback_language)
        return arg.render()

    return PLACEHOLDER_RE.sub(_replace, template)
