"""Localization feature settings."""

from pathlib import Path
from typing import List, Optional

from pydantic import Field, field_validator

from docsite_i18n.configuration.base import FeatureSettings

DEFAULT_LOCALE_CODE = "en"

# Registration order is the order used for alternate links and listings.
DEFAULT_SUPPORTED_LOCALES = (
    "af-ZA",
    "ar-SA",
    "de-DE",
    "en",
    "es-ES",
    "fr-FR",
    "hi-IN",
    "id-ID",
    "it-IT",
    "ja-JP",
    "lv-LV",
    "lt-LT",
    "nl-NL",
    "pt-BR",
    "pt-PT",
    "pl-PL",
    "ro-RO",
    "ru-RU",
    "tr-TR",
    "uk-UA",
    "vi-VN",
)

BUNDLED_MESSAGES_DIR = Path(__file__).resolve().parents[1] / "locales"


class I18nSettings(FeatureSettings):
    """Locale registry, message catalog and tree localization configuration.

    Environment Variables:
        I18N_DEFAULT_LOCALE: Locale every other locale falls back to (default: en)
        I18N_SUPPORTED_LOCALES: Comma-separated locale codes, in listing order
        I18N_STRICT_MESSAGES: Raise on missing messages instead of returning
            the key path (default: True)
        I18N_CACHE_TREES: Memoize localized navigation trees per locale
            (default: True)
        I18N_MESSAGES_DIR: Directory with <domain>.<locale>.yml catalogs
            (default: bundled locales/ directory)
        I18N_CONTENT_DIR: Directory with tree.yml and titles.<locale>.yml

    Example:
        ```python
        from docsite_i18n.configuration import settings

        if settings.i18n.strict_messages:
            # Missing keys surface as MissingMessageError
            ...
        ```
    """

    default_locale: str = Field(
        default=DEFAULT_LOCALE_CODE,
        alias="I18N_DEFAULT_LOCALE",
        description="Default locale code",
    )
    supported_locales: str = Field(
        default=",".join(DEFAULT_SUPPORTED_LOCALES),
        alias="I18N_SUPPORTED_LOCALES",
        description="Comma-separated supported locale codes",
    )
    strict_messages: bool = Field(
        default=True,
        alias="I18N_STRICT_MESSAGES",
        description="Raise MissingMessageError when a key is missing after fallback",
    )
    cache_trees: bool = Field(
        default=True,
        alias="I18N_CACHE_TREES",
        description="Memoize localized trees for the process lifetime",
    )
    messages_dir: Path = Field(
        default=BUNDLED_MESSAGES_DIR,
        alias="I18N_MESSAGES_DIR",
        description="Directory containing YAML message catalogs",
    )
    content_dir: Optional[Path] = Field(
        default=None,
        alias="I18N_CONTENT_DIR",
        description="Directory containing the canonical tree and title translations",
    )

    @field_validator("default_locale")
    @classmethod
    def strip_default_locale(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("I18N_DEFAULT_LOCALE must not be empty")
        return value

    @property
    def supported_locale_codes(self) -> List[str]:
        """Parsed supported locale codes, in configured order.

        Returns:
            List of locale codes with blanks removed.
        """
        return [
            code.strip() for code in self.supported_locales.split(",") if code.strip()
        ]
