"""Custom exceptions for the i18n system.

Locale and translation fallbacks are recovered where they happen; only the
conditions below reach callers.
"""

from typing import Sequence


class I18nError(Exception):
    """Base exception for all i18n errors.

    Example:
        try:
            service.message("misc.title", "de-DE")
        except I18nError as e:
            logger.error("i18n_error", error=str(e))
    """

    pass


class UnsupportedLocaleError(I18nError, ValueError):
    """Raised by strict registry lookups for an unregistered locale code.

    ``LocaleRegistry.resolve_locale`` never raises this; it falls back to the
    default locale instead.
    """

    def __init__(self, code: object):
        self.code = code
        super().__init__(f"Unsupported locale: {code!r}")


class MissingMessageError(I18nError, KeyError):
    """Raised when a key path has no message in the target or default locale.

    Attributes:
        key_path: Dotted key path that was requested.
        attempted_locales: Locale codes looked up, in order.
    """

    def __init__(self, key_path: str, attempted_locales: Sequence[str]):
        self.key_path = key_path
        self.attempted_locales = tuple(attempted_locales)
        super().__init__(key_path)

    def __str__(self) -> str:
        return (
            f"Message not found for key {self.key_path} "
            f"in {', '.join(self.attempted_locales)}"
        )


class InvalidContentError(I18nError, ValueError):
    """Raised when canonical tree or translation input is malformed."""

    pass
