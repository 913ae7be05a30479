"""Localization service facade.

Single entry point for the page-rendering layer: it hands in a requested
locale code and gets back a localized navigation tree, resolved messages or
rich-text segments.
"""

from typing import Any, Dict, List, Optional, Tuple

from docsite_i18n.i18n.catalog import MessageResolver
from docsite_i18n.i18n.models import ContentNode, Locale, MissingTranslation, Segment
from docsite_i18n.i18n.registry import LocaleRegistry
from docsite_i18n.i18n.rich_text import segment
from docsite_i18n.i18n.tree import TreeLocalizer
from docsite_i18n.logging import bind_locale_context, get_module_logger

logger = get_module_logger()


def log_missing_translation(event: MissingTranslation) -> None:
    """Report a fallback event upstream as a non-blocking debug log."""
    logger.debug(
        "missing_translation",
        subject=event.subject,
        key=event.key,
        locale=event.locale_code,
        fallback_locale=event.fallback_locale_code,
    )


class LocalizationService:
    """Facade over the registry, message resolver and tree localizer.

    All components are built once at startup and passed in explicitly; the
    service holds no global state of its own.

    Usage:
        service = create_localization_service()

        tree = service.navigation_tree("de-DE")
        notice = service.messages("misc.officialDocumentationNotice", "de-DE")
        parts = service.rich_message(
            "misc.officialDocumentationNotice.description", "de-DE"
        )
    """

    def __init__(
        self,
        registry: LocaleRegistry,
        resolver: MessageResolver,
        localizer: TreeLocalizer,
        tree: Optional[ContentNode] = None,
        site_url: Optional[str] = None,
    ):
        self.registry = registry
        self.resolver = resolver
        self.localizer = localizer
        self.tree = tree
        self.site_url = site_url

    def resolve_locale(self, code: Optional[str]) -> Locale:
        return self.registry.resolve_locale(code)

    def supported_locales(self) -> Tuple[Locale, ...]:
        return self.registry.supported_locales()

    def navigation_tree(
        self, code: Optional[str], tree: Optional[ContentNode] = None
    ) -> ContentNode:
        """Localize the canonical tree (or ``tree``) for the requested locale.

        Raises:
            ValueError: If no tree was given and none was loaded.
        """
        source = tree if tree is not None else self.tree
        if source is None:
            raise ValueError("No canonical content tree loaded")
        locale = self.resolve_locale(code)
        with bind_locale_context(locale.code, requested_locale=code):
            return self.localizer.localize(source, locale)

    def message(
        self,
        key_path: str,
        code: Optional[str],
        variables: Optional[Dict[str, Any]] = None,
    ) -> str:
        """Resolve one message for the requested locale.

        Raises:
            MissingMessageError: In strict mode, if the key is missing after
                fallback.
        """
        locale = self.resolve_locale(code)
        with bind_locale_context(locale.code, requested_locale=code):
            return self.resolver.resolve(key_path, locale, variables)

    def messages(self, prefix: str, code: Optional[str]) -> Dict[str, Any]:
        """Resolve a whole message namespace for the requested locale."""
        locale = self.resolve_locale(code)
        with bind_locale_context(locale.code, requested_locale=code):
            return self.resolver.resolve_namespace(prefix, locale)

    def rich_message(
        self,
        key_path: str,
        code: Optional[str],
        variables: Optional[Dict[str, Any]] = None,
    ) -> List[Segment]:
        """Resolve a message and split its ``**bold**`` markup into segments."""
        return segment(self.message(key_path, code, variables))

    def alternate_links(self, site_url: Optional[str] = None) -> Dict[str, str]:
        """hreflang -> URL map for every supported locale.

        Raises:
            ValueError: If no site URL was given or configured.
        """
        base = site_url or self.site_url
        if not base:
            raise ValueError("A site URL is required for alternate links")
        return self.registry.alternate_links(base)
