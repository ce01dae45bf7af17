"""
Translation dictionary store.

The dictionary has the shape ``{key: {language: text}}`` and is loaded once
from a JSON document. Reads go through a shared lock; replacing the
dictionary takes the lock exclusively.
"""

from __future__ import annotations

import errno
import json
import logging
import os
from contextlib import contextmanager
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple, Union

from i18n_resolver.exceptions import (
    MalformedDocumentError,
    SourceNotFoundError,
    SourceUnreadableError,
)
from i18n_resolver.utils.rwlock import ReadWriteLock

logger = logging.getLogger(__name__)

LocaleMap = Dict[str, str]
Dictionary = Dict[str, LocaleMap]

PathLike = Union[str, os.PathLike]


def parse_dictionary(document: Any, source: Optional[str] = None) -> Dictionary:
    """
    Validate a decoded JSON document and copy it into the Dictionary shape.

    Raises:
        MalformedDocumentError: if the document is not an object of objects of strings
    """
    if not isinstance(document, dict):
        raise MalformedDocumentError(
            f"top level must be an object, got {type(document).__name__}", source=source
        )

    dictionary: Dictionary = {}
    for key, locale_map in document.items():
        if not isinstance(key, str):
            raise MalformedDocumentError("translation keys must be strings", source=source)
        if not isinstance(locale_map, dict):
            raise MalformedDocumentError(
                f"entry must be an object of language -> text, got {type(locale_map).__name__}",
                source=source,
                path=key,
            )
        entry: LocaleMap = {}
        for lang, text in locale_map.items():
            if not isinstance(text, str):
                raise MalformedDocumentError(
                    f"translation text must be a string, got {type(text).__name__}",
                    source=source,
                    path=f"{key}.{lang}",
                )
            entry[lang] = text
        dictionary[key] = entry
    return dictionary


def loads_dictionary(data: Union[str, bytes], source: Optional[str] = None) -> Dictionary:
    """Parse a JSON text into a Dictionary. Blank input is an empty dictionary."""
    if isinstance(data, bytes):
        try:
            data = data.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise SourceUnreadableError(source or "<bytes>", f"invalid UTF-8: {e}") from e
    if not data.strip():
        return {}
    try:
        document = json.loads(data)
    except (ValueError, RecursionError) as e:
        # JSONDecodeError is a ValueError; so are int-digit limit overflows.
        raise MalformedDocumentError(str(e) or type(e).__name__, source=source) from e
    return parse_dictionary(document, source=source)


def load_dictionary(path: PathLike) -> Dictionary:
    """
    Read and parse a JSON dictionary file.

    Raises:
        SourceNotFoundError: the file does not exist
        SourceUnreadableError: any other I/O failure
        MalformedDocumentError: invalid JSON or wrong structure
    """
    source = os.fspath(path)
    try:
        with open(source, "rb") as handle:
            raw = handle.read()
    except FileNotFoundError as e:
        raise SourceNotFoundError(source) from e
    except OSError as e:
        if e.errno == errno.ENOENT:
            raise SourceNotFoundError(source) from e
        raise SourceUnreadableError(source, e.strerror or str(e)) from e
    return loads_dictionary(raw, source=source)


class DictionaryStore:
    """
    Owns a translation dictionary and serializes access to it.

    Any number of readers may look up entries concurrently. ``replace`` waits
    for in-flight readers to finish and blocks new ones until the swap is
    complete.
    """

    def __init__(self, dictionary: Optional[Mapping[str, Mapping[str, str]]] = None):
        self._lock = ReadWriteLock()
        self._translations: Dictionary = self._copy(dictionary) if dictionary else {}

    @classmethod
    def from_file(cls, path: PathLike) -> "DictionaryStore":
        return cls(load_dictionary(path))

    @staticmethod
    def _copy(dictionary: Mapping[str, Mapping[str, str]]) -> Dictionary:
        return {key: dict(entry) for key, entry in dictionary.items()}

    @contextmanager
    def snapshot(self) -> Iterator["DictionaryView"]:
        """Hold the read lock and expose lock-free lookups for the duration."""
        with self._lock.read_locked():
            yield DictionaryView(self._translations)

    def get(self, key: str) -> Tuple[Optional[Mapping[str, str]], bool]:
        """Return the read-only Locale Map for ``key`` and whether it was found."""
        with self.snapshot() as view:
            return view.get(key)

    def lookup(self, key: str, lang: str) -> Optional[str]:
        with self.snapshot() as view:
            return view.lookup(key, lang)

    def replace(self, dictionary: Mapping[str, Mapping[str, str]]) -> None:
        copied = self._copy(dictionary)
        with self._lock.write_locked():
            self._translations = copied
        logger.debug("translation dictionary replaced (%d keys)", len(copied))

    def clear(self) -> None:
        self.replace({})

    def keys(self) -> List[str]:
        with self._lock.read_locked():
            return list(self._translations)

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._translations)

    def __contains__(self, key: object) -> bool:
        with self._lock.read_locked():
            return key in self._translations


class DictionaryView:
    """Lookups against a dictionary whose read lock is already held."""

    __slots__ = ("_translations",)

    def __init__(self, translations: Dictionary):
        self._translations = translations

    def get(self, key: str) -> Tuple[Optional[Mapping[str, str]], bool]:
        entry = self._translations.get(key)
        if entry is None:
            return None, False
        return MappingProxyType(entry), True

    def lookup(self, key: str, lang: str) -> Optional[str]:
        entry = self._translations.get(key)
        if entry is None:
            return None
        return entry.get(lang)
