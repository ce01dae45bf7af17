"""
Provisionable i18n module.

Holds the configured dictionary path, loads the dictionary once during
provisioning and exposes the ``i18nTranslate`` function for registration in
a template engine's function namespace:

    module = I18nModule(dict_file="/etc/i18n/translations.json")
    module.provision()
    env.globals.update(module.template_functions())

Template usage:

    {{ i18nTranslate("hello", "de") }}
    {{ i18nTranslate("error.invalidAmount", "en", "i18n:finance.account") }}
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional

from i18n_resolver.config.block import I18nBlockConfig
from i18n_resolver.config.settings import I18nSettings
from i18n_resolver.exceptions import DictionaryLoadError, ProvisionError

from .resolver import Resolver
from .store import DictionaryStore, load_dictionary

logger = logging.getLogger(__name__)

TRANSLATE_FUNCTION_NAME = "i18nTranslate"


class I18nModule:
    """Dictionary-based translation functions for a template host."""

    MODULE_ID = "http.handlers.templates.functions.i18n"

    def __init__(
        self,
        dict_file: Optional[str] = None,
        store: Optional[DictionaryStore] = None,
        log: Optional[logging.Logger] = None,
    ):
        self.dict_file = dict_file or None
        self.store = store if store is not None else DictionaryStore()
        self.logger = log or logger
        self.resolver = Resolver(self.store, logger=self.logger)
        self._provisioned = False

    @classmethod
    def from_settings(cls, settings: I18nSettings, **kwargs: Any) -> "I18nModule":
        return cls(dict_file=settings.dict_file, **kwargs)

    @classmethod
    def from_config_block(cls, block: I18nBlockConfig, **kwargs: Any) -> "I18nModule":
        return cls(dict_file=block.dict_file, **kwargs)

    @property
    def provisioned(self) -> bool:
        return self._provisioned

    def provision(self) -> None:
        """
        Load the dictionary from ``dict_file``.

        Without a configured file the dictionary is empty and every lookup
        falls back to the key.

        Raises:
            ProvisionError: wrapping the underlying DictionaryLoadError
        """
        if not self.dict_file:
            self.store.clear()
            self._provisioned = True
            self.logger.info("i18n module provisioned without dict_file; dictionary is empty")
            return

        try:
            dictionary = load_dictionary(self.dict_file)
        except DictionaryLoadError as e:
            raise ProvisionError(e.message, details={"dict_file": self.dict_file, "code": e.code}) from e

        self.store.replace(dictionary)
        self._provisioned = True
        self.logger.info(
            "i18n dictionary loaded successfully: %s (%d keys)",
            self.dict_file,
            len(dictionary),
            extra={"dict_file": self.dict_file},
        )

    def cleanup(self) -> None:
        self.store.clear()
        self._provisioned = False

    def translate(self, key: str, lang: str, *args: Any) -> str:
        return self.resolver.translate(key, lang, *args)

    def template_functions(self) -> Dict[str, Callable[..., str]]:
        """Function map for a template engine's function registry."""

        def i18n_translate(key: str, lang: str, *args: Any) -> str:
            return self.resolver.translate(key, lang, *args)

        return {TRANSLATE_FUNCTION_NAME: i18n_translate}
