"""i18n system - locale registry, message catalogs, rich text and tree localization.

Main components:
- models: Locale, ContentNode, TranslationEntry, TranslationTable,
  MessageCatalog, MessageKey, Segment, MissingTranslation
- registry: LocaleRegistry with default-locale fallback
- catalog: MessageResolver with two-step lookup and interpolation
- rich_text: segment() for **bold** markup
- tree: TreeLocalizer for navigation trees
- loader: MessageLoader / ContentLoader and their YAML implementations
- service: LocalizationService facade
"""

from docsite_i18n.i18n.catalog import MessageResolver
from docsite_i18n.i18n.exceptions import (
    I18nError,
    InvalidContentError,
    MissingMessageError,
    UnsupportedLocaleError,
)
from docsite_i18n.i18n.loader import (
    ContentLoader,
    MessageLoader,
    YAMLContentLoader,
    YAMLMessageLoader,
)
from docsite_i18n.i18n.models import (
    ContentNode,
    Locale,
    MessageCatalog,
    MessageKey,
    MissingTranslation,
    NodeKind,
    Segment,
    TranslationEntry,
    TranslationTable,
)
from docsite_i18n.i18n.registry import LocaleRegistry
from docsite_i18n.i18n.rich_text import plain_text, segment
from docsite_i18n.i18n.service import LocalizationService
from docsite_i18n.i18n.tree import TreeLocalizer

__all__ = [
    "ContentLoader",
    "ContentNode",
    "I18nError",
    "InvalidContentError",
    "Locale",
    "LocaleRegistry",
    "LocalizationService",
    "MessageCatalog",
    "MessageKey",
    "MessageLoader",
    "MessageResolver",
    "MissingMessageError",
    "MissingTranslation",
    "NodeKind",
    "Segment",
    "TranslationEntry",
    "TranslationTable",
    "TreeLocalizer",
    "UnsupportedLocaleError",
    "YAMLContentLoader",
    "YAMLMessageLoader",
    "plain_text",
    "segment",
]
