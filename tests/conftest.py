from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest

from i18n_resolver.i18n import DictionaryStore, Resolver

SAMPLE_DICTIONARY = {
    "hello": {"de": "Hallo", "en": "Hello"},
    "account": {"de": "Konto", "en": "Account"},
    "system": {"en": "System"},
    "error.invalidAmount": {"de": "Ungültiger Betrag: {0}", "en": "Invalid amount: {0}"},
    "error.detailed": {"en": "Error: {0} with code {1} for user {2}"},
    "price": {"en": "Price: {0} EUR"},
    "french.only": {"fr": "Bonjour"},
}


@pytest.fixture
def sample_dictionary() -> dict:
    return json.loads(json.dumps(SAMPLE_DICTIONARY))


@pytest.fixture
def store(sample_dictionary) -> DictionaryStore:
    return DictionaryStore(sample_dictionary)


@pytest.fixture
def resolver(store) -> Resolver:
    return Resolver(store)


@pytest.fixture
def write_dict_file(tmp_path: Path) -> Callable[[Any], str]:
    """Write a dictionary document (object or raw text) and return its path."""

    def _write(content: Any, name: str = "translations.json") -> str:
        path = tmp_path / name
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(json.dumps(content, ensure_ascii=False), encoding="utf-8")
        return str(path)

    return _write
