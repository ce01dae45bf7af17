"""
Unified configuration access point

    from i18n_resolver.config import get_settings

    dict_file = get_settings().i18n.dict_file
"""

from .block import I18nBlockConfig, load_config_block, parse_config_block
from .settings import (
    ApplicationSettings,
    I18nSettings,
    ServiceSettings,
    get_settings,
    reload_settings,
)

__all__ = [
    "ApplicationSettings",
    "I18nSettings",
    "ServiceSettings",
    "get_settings",
    "reload_settings",
    "I18nBlockConfig",
    "parse_config_block",
    "load_config_block",
]
