"""Locale registry: supported locales, the default locale and fallback rules.

Every requested locale code enters the system through this registry so that
fallback to the default locale happens in one place.
"""

from typing import Dict, Iterable, Optional, Tuple

from docsite_i18n.i18n.exceptions import UnsupportedLocaleError
from docsite_i18n.i18n.models import Locale
from docsite_i18n.logging import get_module_logger

logger = get_module_logger()


def _normalize(code: str) -> str:
    return code.strip().replace("_", "-").lower()


class LocaleRegistry:
    """Registered locales with a single default locale.

    Every non-default locale falls back to the default; there are no deeper
    chains.

    Attributes:
        default: The default Locale.
    """

    def __init__(self, codes: Iterable[str], default_code: str):
        """Initialize the registry.

        Args:
            codes: Supported locale codes, in listing order.
            default_code: Code of the default locale; must be among ``codes``.

        Raises:
            ValueError: If codes are empty, duplicated, or the default is not
                registered.
        """
        ordered = list(codes)
        if not ordered:
            raise ValueError("At least one locale must be registered")
        if any(not isinstance(code, str) or not code.strip() for code in ordered):
            raise ValueError(f"Locale codes must be non-empty strings: {ordered}")
        if len({_normalize(code) for code in ordered}) != len(ordered):
            raise ValueError(f"Locale codes must be unique: {ordered}")
        if default_code not in ordered:
            raise ValueError(
                f"Default locale {default_code} is not among supported locales"
            )

        self._locales: Tuple[Locale, ...] = tuple(
            Locale(code=code, is_default=code == default_code) for code in ordered
        )
        self._by_code: Dict[str, Locale] = {loc.code: loc for loc in self._locales}
        self._by_normalized: Dict[str, Locale] = {
            _normalize(loc.code): loc for loc in self._locales
        }
        self.default = self._by_code[default_code]
        self.log = logger.bind(default_locale=default_code)

    def default_locale(self) -> Locale:
        return self.default

    def supported_locales(self) -> Tuple[Locale, ...]:
        """Registered locales in registration order."""
        return self._locales

    def is_supported(self, code: Optional[str]) -> bool:
        return self._lookup(code) is not None

    def get(self, code: str) -> Locale:
        """Strict lookup of a registered locale.

        Args:
            code: Locale code; matched exactly, then case/separator-insensitively.

        Returns:
            Registered Locale.

        Raises:
            UnsupportedLocaleError: If the code is not registered.
        """
        locale = self._lookup(code)
        if locale is None:
            raise UnsupportedLocaleError(code)
        return locale

    def resolve_locale(self, code: Optional[str]) -> Locale:
        """Resolve a requested locale code, falling back to the default.

        Exact matches win; otherwise "de_de" or " DE-de " style variants of a
        registered code match it. Anything else, including None and
        non-string input, resolves to the default locale. Never raises.

        Args:
            code: Requested locale code (typically a URL segment).

        Returns:
            Resolved Locale.
        """
        try:
            return self.get(code)
        except UnsupportedLocaleError:
            self.log.info("unsupported_locale_requested", requested=repr(code))
            return self.default

    def fallback_chain(self, locale: Locale) -> Tuple[Locale, ...]:
        """Locales to consult for ``locale``, in order (at most two)."""
        if locale.code == self.default.code:
            return (self.default,)
        return (locale, self.default)

    def resolve_from_header(self, accept_language: Optional[str]) -> Locale:
        """Resolve locale from an HTTP Accept-Language header.

        Tries each language range by descending quality: exact match first,
        then a language-only match ("pt" matches the first registered "pt-*").

        Args:
            accept_language: Accept-Language header value.

        Returns:
            Resolved Locale, or default if none match.
        """
        if not accept_language:
            return self.default

        # Parse "de-DE,de;q=0.9,en;q=0.8" -> [(de-DE, 1.0), (de, 0.9), (en, 0.8)]
        preferences = []
        for part in accept_language.split(","):
            lang_range = part.split(";")[0].strip()
            if not lang_range or lang_range == "*":
                continue
            quality = 1.0
            if ";" in part and "q=" in part:
                try:
                    quality = float(part.split("q=")[1])
                except ValueError:
                    quality = 1.0
            preferences.append((lang_range, quality))

        for lang_range, _ in sorted(preferences, key=lambda x: x[1], reverse=True):
            locale = self._lookup(lang_range)
            if locale is not None:
                self.log.debug("resolved_from_header", locale=locale.code)
                return locale

            lang_code = lang_range.split("-")[0].lower()
            for locale in self._locales:
                if locale.language.lower() == lang_code:
                    self.log.debug("resolved_from_header", locale=locale.code)
                    return locale

        self.log.info("no_matching_locale_in_header", header=accept_language)
        return self.default

    def alternate_links(self, site_url: str) -> Dict[str, str]:
        """Build the hreflang -> URL map for alternate-language links.

        The key is the bare language ("de") unless several registered locales
        share that language ("pt-BR", "pt-PT"), in which case the full code is
        used.

        Args:
            site_url: Public base URL of the site.

        Returns:
            Dict in registration order.
        """
        base = site_url.rstrip("/")
        language_counts: Dict[str, int] = {}
        for locale in self._locales:
            language_counts[locale.language] = language_counts.get(locale.language, 0) + 1

        links = {}
        for locale in self._locales:
            key = locale.language if language_counts[locale.language] == 1 else locale.code
            links[key] = f"{base}/{locale.code}"
        return links

    def _lookup(self, code: Optional[str]) -> Optional[Locale]:
        if not isinstance(code, str):
            return None
        locale = self._by_code.get(code)
        if locale is not None:
            return locale
        return self._by_normalized.get(_normalize(code))

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and self.is_supported(code)

    def __len__(self) -> int:
        return len(self._locales)
