"""
Dictionary-based i18n resolution.

- DictionaryStore: key -> language -> text, guarded by a reader/writer lock
- Resolver: key/language fallback and positional interpolation
- I18nModule: provisioning and the ``i18nTranslate`` template function
"""

from .arguments import KeyRef, Number, Text, coerce_argument
from .context import get_language, reset_language, set_language
from .module import TRANSLATE_FUNCTION_NAME, I18nModule
from .resolver import Resolver
from .store import DictionaryStore, load_dictionary, loads_dictionary

__all__ = [
    "DictionaryStore",
    "load_dictionary",
    "loads_dictionary",
    "Resolver",
    "I18nModule",
    "TRANSLATE_FUNCTION_NAME",
    "Text",
    "Number",
    "KeyRef",
    "coerce_argument",
    "get_language",
    "set_language",
    "reset_language",
]
