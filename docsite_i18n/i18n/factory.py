"""Factory functions for creating i18n components.

Wires the registry, loaders, resolver and localizer from settings so the
surrounding application gets a ready LocalizationService at startup.
"""

from pathlib import Path
from typing import Optional

import structlog

from docsite_i18n.configuration import Settings, settings as default_settings
from docsite_i18n.i18n.catalog import MessageResolver
from docsite_i18n.i18n.loader import YAMLContentLoader, YAMLMessageLoader
from docsite_i18n.i18n.models import TranslationTable
from docsite_i18n.i18n.registry import LocaleRegistry
from docsite_i18n.i18n.service import LocalizationService, log_missing_translation
from docsite_i18n.i18n.tree import TreeLocalizer

logger = structlog.get_logger()


def create_registry(settings: Optional[Settings] = None) -> LocaleRegistry:
    """Create the LocaleRegistry from I18N_SUPPORTED_LOCALES / I18N_DEFAULT_LOCALE.

    Raises:
        ValueError: If the configured locales are inconsistent.
    """
    settings = settings or default_settings
    return LocaleRegistry(
        codes=settings.i18n.supported_locale_codes,
        default_code=settings.i18n.default_locale,
    )


def create_message_resolver(
    registry: LocaleRegistry,
    messages_dir: Optional[Path] = None,
    strict: bool = True,
    use_cache: bool = True,
) -> MessageResolver:
    """Load every catalog in ``messages_dir`` and build a MessageResolver.

    Args:
        registry: Locale registry.
        messages_dir: Directory with YAML catalogs (default: bundled locales/).
        strict: Missing-message policy.
        use_cache: Whether the loader caches parsed YAML.

    Returns:
        MessageResolver with all catalogs preloaded.
    """
    if messages_dir is None:
        # This file is at .../docsite_i18n/i18n/factory.py
        messages_dir = Path(__file__).resolve().parents[1] / "locales"

    loader = YAMLMessageLoader(messages_dir, use_cache=use_cache, registry=registry)
    return MessageResolver(
        catalogs=loader.load_all(),
        registry=registry,
        strict=strict,
        on_missing=log_missing_translation,
    )


def create_localization_service(
    settings: Optional[Settings] = None,
    messages_dir: Optional[Path] = None,
    content_dir: Optional[Path] = None,
) -> LocalizationService:
    """Create and configure a LocalizationService.

    Args:
        settings: Settings to use (default: module-level settings).
        messages_dir: Override for I18N_MESSAGES_DIR.
        content_dir: Override for I18N_CONTENT_DIR. When neither is set, no
            canonical tree is loaded and callers pass trees explicitly.

    Returns:
        LocalizationService: Configured service.

    Usage:
        # Use defaults (bundled catalogs, no content index)
        service = create_localization_service()

        # With a content index
        service = create_localization_service(content_dir=Path("content"))
    """
    settings = settings or default_settings
    registry = create_registry(settings)
    resolver = create_message_resolver(
        registry,
        messages_dir=messages_dir or settings.i18n.messages_dir,
        strict=settings.i18n.strict_messages,
    )

    content_dir = content_dir or settings.i18n.content_dir
    tree = None
    translations = TranslationTable()
    if content_dir is not None:
        content_loader = YAMLContentLoader(content_dir, registry=registry)
        tree = content_loader.load_tree()
        translations = content_loader.load_translations()

    localizer = TreeLocalizer(
        translations,
        cache=settings.i18n.cache_trees,
        on_missing=log_missing_translation,
    )

    logger.info(
        "localization_service_created",
        locale_count=len(registry),
        default_locale=registry.default.code,
        catalog_count=len(resolver.available_locales()),
        content_loaded=tree is not None,
    )
    return LocalizationService(
        registry=registry,
        resolver=resolver,
        localizer=localizer,
        tree=tree,
        site_url=settings.SITE_URL,
    )
