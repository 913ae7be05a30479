"""Configuration package.

Example:
    from docsite_i18n.configuration import settings
"""

from docsite_i18n.configuration.i18n import (
    BUNDLED_MESSAGES_DIR,
    DEFAULT_LOCALE_CODE,
    DEFAULT_SUPPORTED_LOCALES,
    I18nSettings,
)
from docsite_i18n.configuration.settings import Settings, settings

__all__ = [
    "BUNDLED_MESSAGES_DIR",
    "DEFAULT_LOCALE_CODE",
    "DEFAULT_SUPPORTED_LOCALES",
    "I18nSettings",
    "Settings",
    "settings",
]
