"""
Translation resolver.

``Resolver.translate`` never raises for missing data: an unknown key, or a
key with neither the requested language nor English, resolves to the key
itself. Each of these conditions is logged; none is an error.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from .arguments import coerce_arguments
from .interpolation import FALLBACK_LANGUAGE, has_placeholders, interpolate
from .store import DictionaryStore


class Resolver:
    """Resolves ``(key, lang, *args)`` against a DictionaryStore."""

    def __init__(
        self,
        store: DictionaryStore,
        fallback_language: str = FALLBACK_LANGUAGE,
        logger: Optional[logging.Logger] = None,
    ):
        self.store = store
        self.fallback_language = fallback_language
        self._logger = logger or logging.getLogger(__name__)

    def translate(self, key: str, lang: str, *args: Any) -> str:
        """
        Translate ``key`` into ``lang`` and substitute positional arguments.

        Lookup order: requested language, then the fallback language, then
        the key itself. String arguments starting with ``i18n:`` are
        translated as nested keys (one level, not interpolated).
        """
        arguments = coerce_arguments(args)

        with self.store.snapshot() as view:
            entry, found = view.get(key)
            if not found:
                self._logger.warning(
                    "translation key not found, using key as fallback: %s",
                    key,
                    extra={"translation_key": key},
                )
                return key

            text = entry.get(lang)
            if text is None:
                text = entry.get(self.fallback_language)
                if text is None:
                    self._logger.warning(
                        "no translation for requested language or '%s', using key as fallback: %s (%s)",
                        self.fallback_language,
                        key,
                        lang,
                        extra={"translation_key": key, "requested_lang": lang},
                    )
                    return key
                self._logger.info(
                    "requested language not found, falling back to '%s': %s (%s)",
                    self.fallback_language,
                    key,
                    lang,
                    extra={"translation_key": key, "requested_lang": lang},
                )

            if not arguments or not has_placeholders(text):
                return text
            return interpolate(text, lang, arguments, view, self.fallback_language)

    __call__ = translate
