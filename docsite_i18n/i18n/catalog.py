"""Message resolution with default-locale fallback and variable interpolation."""

import re
from typing import Any, Callable, Dict, List, Mapping, Optional

from docsite_i18n.i18n.exceptions import MissingMessageError
from docsite_i18n.i18n.models import (
    Locale,
    MessageCatalog,
    MessageKey,
    MissingTranslation,
    unflatten_messages,
)
from docsite_i18n.i18n.registry import LocaleRegistry
from docsite_i18n.logging import get_module_logger

logger = get_module_logger()

_DOUBLE_BRACE = re.compile(r"\{\{(\w+)\}\}")
_SINGLE_BRACE = re.compile(r"\{(\w+)\}")


class MessageResolver:
    """Resolves UI messages for a locale, falling back to the default locale.

    Resolution terminates after at most two lookups: the target locale's
    catalog, then the default locale's catalog.

    Attributes:
        registry: LocaleRegistry providing the default locale.
        catalogs: Read-only catalogs keyed by locale code.
        strict: When True, a key missing after fallback raises
            MissingMessageError; when False, the key path itself is returned.
    """

    def __init__(
        self,
        catalogs: Mapping[str, MessageCatalog],
        registry: LocaleRegistry,
        strict: bool = True,
        on_missing: Optional[Callable[[MissingTranslation], None]] = None,
    ):
        """Initialize MessageResolver.

        Args:
            catalogs: Catalogs keyed by locale code.
            registry: Locale registry.
            strict: Missing-message policy (see class docstring).
            on_missing: Optional callback for fallback events.
        """
        self.catalogs: Dict[str, MessageCatalog] = dict(catalogs)
        self.registry = registry
        self.strict = strict
        self.on_missing = on_missing
        logger.info(
            "initialized_message_resolver",
            locale_count=len(self.catalogs),
            default_locale=registry.default.code,
            strict=strict,
        )

    def resolve(
        self,
        key_path: str,
        locale: Locale,
        variables: Optional[Dict[str, Any]] = None,
    ) -> str:
        """Retrieve and interpolate a message.

        Args:
            key_path: Dotted key path (e.g., "misc.officialDocumentationNotice.title").
            locale: Target Locale.
            variables: Optional values for {{name}} / {name} placeholders. When
                omitted the message is returned verbatim, braces included.

        Returns:
            Message from the target locale, else from the default locale. In
            non-strict mode a missing message or malformed key returns
            ``key_path``.

        Raises:
            ValueError: If a placeholder has no variable, or in strict mode if
                key_path is malformed.
            MissingMessageError: In strict mode, if no catalog has the key.
        """
        key = self._checked_key(key_path)
        if key is None:
            return key_path
        message = self._lookup(key, locale)

        if message is None:
            attempted = [loc.code for loc in self.registry.fallback_chain(locale)]
            if self.strict:
                logger.error(
                    "message_not_found", key=key, attempted_locales=attempted
                )
                raise MissingMessageError(key, attempted)
            logger.warning("message_not_found", key=key, attempted_locales=attempted)
            return key

        if variables is None:
            return message
        return self._interpolate(message, variables)

    def resolve_namespace(self, prefix: str, locale: Locale) -> Dict[str, Any]:
        """Resolve every message below ``prefix`` as a nested mapping.

        The set of leaves is the union of the target and default catalogs;
        each leaf is resolved with the same fallback rule as ``resolve``. When
        the catalogs nest a key differently (a leaf in one, a branch in the
        other), the target locale's shape is kept.

        Args:
            prefix: Dotted namespace (e.g., "misc.officialDocumentationNotice").
            locale: Target Locale.

        Returns:
            Nested dict relative to ``prefix``
            (e.g., {"title": "...", "description": "..."}).

        Raises:
            ValueError: In strict mode, if prefix is malformed.
            MissingMessageError: In strict mode, if no leaf exists below prefix.
            InvalidContentError: If one catalog holds a key both as a leaf and
                as a branch.
        """
        namespace = self._checked_key(prefix)
        if namespace is None:
            return {}

        paths: List[str] = []
        for position, loc in enumerate(self.registry.fallback_chain(locale)):
            catalog = self.catalogs.get(loc.code)
            if catalog is None:
                continue
            for path in catalog.leaves(namespace):
                if path in paths:
                    continue
                # The target locale's nesting wins over the default's
                if position > 0 and _conflicts(path, paths):
                    logger.warning(
                        "skipped_conflicting_message",
                        key=path,
                        locale=loc.code,
                        requested_locale=locale.code,
                    )
                    continue
                paths.append(path)

        if not paths:
            attempted = [loc.code for loc in self.registry.fallback_chain(locale)]
            if self.strict:
                logger.error(
                    "namespace_not_found",
                    namespace=namespace,
                    attempted_locales=attempted,
                )
                raise MissingMessageError(namespace, attempted)
            logger.warning(
                "namespace_not_found", namespace=namespace, attempted_locales=attempted
            )
            return {}

        start = len(namespace) + 1
        flat = {path[start:]: self._lookup(path, locale) for path in paths}
        return unflatten_messages(flat)

    def has_message(self, key_path: str, locale: Locale) -> bool:
        """Check if the target locale's own catalog has ``key_path``.

        Returns:
            True if present without fallback, False otherwise.
        """
        catalog = self.catalogs.get(locale.code)
        return catalog.has(key_path) if catalog else False

    def get_catalog(self, locale: Locale) -> Optional[MessageCatalog]:
        return self.catalogs.get(locale.code)

    def available_locales(self) -> List[str]:
        """Locale codes with a loaded catalog."""
        return list(self.catalogs.keys())

    def _checked_key(self, key_path: str) -> Optional[str]:
        """Validate ``key_path``; in non-strict mode a malformed key yields None."""
        try:
            return str(MessageKey.from_string(key_path))
        except ValueError as e:
            if self.strict:
                logger.error("invalid_message_key", key=key_path, error=str(e))
                raise
            logger.warning("invalid_message_key", key=key_path, error=str(e))
            return None

    def _lookup(self, key: str, locale: Locale) -> Optional[str]:
        chain = self.registry.fallback_chain(locale)
        for position, loc in enumerate(chain):
            catalog = self.catalogs.get(loc.code)
            message = catalog.get(key) if catalog else None
            if message is None:
                continue
            if position > 0:
                event = MissingTranslation(
                    subject="message",
                    key=key,
                    locale_code=locale.code,
                    fallback_locale_code=loc.code,
                )
                logger.info(
                    "used_fallback_message",
                    key=key,
                    requested_locale=locale.code,
                    fallback_locale=loc.code,
                )
                if self.on_missing is not None:
                    self.on_missing(event)
            return message
        return None

    def _interpolate(self, message: str, variables: Dict[str, Any]) -> str:
        """Replace {{name}} and {name} placeholders with values from variables.

        Raises:
            ValueError: If a placeholder has no matching variable.
        """
        double_matches = _DOUBLE_BRACE.findall(message)
        single_matches = _SINGLE_BRACE.findall(message)

        for var_name in dict.fromkeys(double_matches + single_matches):
            if var_name not in variables:
                logger.error(
                    "missing_interpolation_variable",
                    variable=var_name,
                    available_variables=list(variables.keys()),
                )
                raise ValueError(f"Missing interpolation variable: {var_name}")

        # Double-brace first so "{{x}}" is not left as "{value}"
        for var_name in double_matches:
            message = message.replace(f"{{{{{var_name}}}}}", str(variables[var_name]))
        for var_name in single_matches:
            message = message.replace(f"{{{var_name}}}", str(variables[var_name]))

        return message


def _conflicts(path: str, paths: List[str]) -> bool:
    # A leaf in one catalog may be a branch in another
    return any(
        other.startswith(f"{path}.") or path.startswith(f"{other}.") for other in paths
    )
