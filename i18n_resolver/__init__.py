"""
i18n resolver: dictionary-based translation with language fallback and
recursive placeholder interpolation.
"""

from i18n_resolver.i18n import DictionaryStore, I18nModule, Resolver

__version__ = "0.1.0"

__all__ = ["DictionaryStore", "I18nModule", "Resolver", "__version__"]
