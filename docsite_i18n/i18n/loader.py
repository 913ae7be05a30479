"""Content loading interfaces and YAML implementations.

Message catalogs, the canonical content tree and node title translations are
supplied by an external content source. This module defines the loading
contract and ships the YAML-file implementation used by the site build.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional

import structlog
import yaml

from docsite_i18n.i18n.exceptions import InvalidContentError
from docsite_i18n.i18n.models import (
    ContentNode,
    MessageCatalog,
    TranslationTable,
    flatten_messages,
)
from docsite_i18n.i18n.registry import LocaleRegistry

logger = structlog.get_logger()

TREE_FILE = "tree.yml"
TITLES_PREFIX = "titles"


def _read_yaml(path: Path) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.error("yaml_parse_error", file=str(path), error=str(e))
        raise ValueError(f"Failed to parse {path}: {e}") from e


def _is_registered(registry: Optional[LocaleRegistry], locale_code: str) -> bool:
    # Exact codes only; file names must use the registered spelling
    if registry is None:
        return True
    return any(loc.code == locale_code for loc in registry.supported_locales())


def _locale_from_filename(path: Path) -> str:
    # "misc.pt-BR.yml" -> "pt-BR", "pt-BR.yml" -> "pt-BR"
    return path.stem.split(".")[-1]


class MessageLoader(ABC):
    """Abstract base for message catalog loaders."""

    @abstractmethod
    def load(self, locale_code: str) -> MessageCatalog:
        """Load the catalog for a specific locale.

        Raises:
            FileNotFoundError: If no messages exist for the locale.
            ValueError: If the source format is invalid.
        """
        pass

    @abstractmethod
    def load_all(self) -> Dict[str, MessageCatalog]:
        """Load catalogs for every available locale, keyed by locale code."""
        pass


class YAMLMessageLoader(MessageLoader):
    """Loader for YAML message catalogs.

    Expects files named ``<domain>.<locale>.yml`` or ``<locale>.yml`` holding
    nested mappings with string leaves. All files for a locale are merged in
    sorted filename order, later files overriding earlier keys.

    Attributes:
        messages_dir: Directory containing YAML files.
        use_cache: Whether loaded catalogs are kept in memory.
        cache: Loaded catalogs by locale code.
        registry: Optional registry; files for unregistered locales are skipped.
    """

    def __init__(
        self,
        messages_dir: Path,
        use_cache: bool = True,
        registry: Optional[LocaleRegistry] = None,
    ):
        """Initialize YAML message loader.

        Args:
            messages_dir: Path to directory with YAML message files.
            use_cache: Whether to cache loaded catalogs in memory.
            registry: Optional locale registry used to filter locales.

        Raises:
            ValueError: If messages_dir does not exist.
        """
        self.messages_dir = Path(messages_dir)
        self.use_cache = use_cache
        self.registry = registry
        self.cache: Dict[str, MessageCatalog] = {}

        if not self.messages_dir.is_dir():
            raise ValueError(f"Messages directory not found: {self.messages_dir}")

        logger.info(
            "initialized_yaml_message_loader",
            messages_dir=str(self.messages_dir),
            use_cache=use_cache,
        )

    def load(self, locale_code: str) -> MessageCatalog:
        """Load and merge all YAML files for ``locale_code``.

        Returns:
            MessageCatalog with flattened messages.

        Raises:
            FileNotFoundError: If no YAML files exist for the locale.
            ValueError: If YAML parsing fails.
        """
        if self.use_cache and locale_code in self.cache:
            logger.debug("loaded_from_cache", locale=locale_code)
            return self.cache[locale_code]

        yaml_files = self._files_for(locale_code)
        if not yaml_files:
            raise FileNotFoundError(
                f"No message files found for locale {locale_code} in {self.messages_dir}"
            )

        catalog = MessageCatalog(locale_code=locale_code)
        for yaml_file in yaml_files:
            data = _read_yaml(yaml_file)
            if data is None:
                continue
            if not isinstance(data, dict):
                logger.warning(
                    "invalid_yaml_format", file=str(yaml_file), expected="dict"
                )
                continue
            messages = flatten_messages(
                data,
                on_invalid=lambda path, value, source=yaml_file: logger.warning(
                    "invalid_message_value",
                    file=str(source),
                    key=path,
                    value_type=type(value).__name__,
                ),
            )
            catalog = catalog.merged(
                MessageCatalog(locale_code=locale_code, messages=messages)
            )

        logger.info(
            "loaded_messages",
            locale=locale_code,
            file_count=len(yaml_files),
            message_count=len(catalog.messages),
        )

        if self.use_cache:
            self.cache[locale_code] = catalog
        return catalog

    def load_all(self) -> Dict[str, MessageCatalog]:
        """Load catalogs for every locale found in the directory.

        Returns:
            Dict of locale code -> MessageCatalog.

        Raises:
            ValueError: If no usable message files are found.
        """
        locales_found = []
        for yaml_file in sorted(self.messages_dir.glob("*.yml")):
            locale_code = _locale_from_filename(yaml_file)
            if locale_code in locales_found:
                continue
            if not _is_registered(self.registry, locale_code):
                logger.warning(
                    "skipped_unsupported_locale_file",
                    file=str(yaml_file),
                    locale=locale_code,
                )
                continue
            locales_found.append(locale_code)

        if not locales_found:
            raise ValueError(f"No message files found in {self.messages_dir}")

        return {code: self.load(code) for code in locales_found}

    def clear_cache(self) -> None:
        """Clear all cached catalogs."""
        self.cache.clear()
        logger.info("cleared_message_cache")

    def _files_for(self, locale_code: str) -> List[Path]:
        return [
            path
            for path in sorted(self.messages_dir.glob("*.yml"))
            if _locale_from_filename(path) == locale_code
        ]


class ContentLoader(ABC):
    """Abstract base for canonical tree and title translation loaders."""

    @abstractmethod
    def load_tree(self) -> ContentNode:
        """Load the canonical content tree."""
        pass

    @abstractmethod
    def load_translations(self) -> TranslationTable:
        """Load node translation entries for all locales."""
        pass


class YAMLContentLoader(ContentLoader):
    """Loader for a YAML content index.

    Layout:
        tree.yml                canonical root node (see ContentNode.from_dict)
        titles.<locale>.yml     node id -> title, or node id -> {title, url}

    Attributes:
        content_dir: Directory holding the files above.
        registry: Optional registry; title files for unregistered locales are
            skipped.
    """

    def __init__(self, content_dir: Path, registry: Optional[LocaleRegistry] = None):
        self.content_dir = Path(content_dir)
        self.registry = registry
        if not self.content_dir.is_dir():
            raise ValueError(f"Content directory not found: {self.content_dir}")

    def load_tree(self) -> ContentNode:
        """Load ``tree.yml``.

        Raises:
            FileNotFoundError: If tree.yml is missing.
            ValueError: If the YAML is invalid.
            InvalidContentError: If the tree structure is invalid.
        """
        tree_file = self.content_dir / TREE_FILE
        if not tree_file.is_file():
            raise FileNotFoundError(f"Canonical tree not found: {tree_file}")

        tree = ContentNode.from_dict(_read_yaml(tree_file))
        logger.info(
            "loaded_content_tree",
            file=str(tree_file),
            node_count=sum(1 for _ in tree.walk()),
        )
        return tree

    def load_translations(self) -> TranslationTable:
        """Load every ``titles.<locale>.yml`` into one TranslationTable."""
        by_locale: Dict[str, Dict[str, Any]] = {}
        for titles_file in sorted(self.content_dir.glob(f"{TITLES_PREFIX}.*.yml")):
            locale_code = _locale_from_filename(titles_file)
            if not _is_registered(self.registry, locale_code):
                logger.warning(
                    "skipped_unsupported_locale_file",
                    file=str(titles_file),
                    locale=locale_code,
                )
                continue

            data = _read_yaml(titles_file) or {}
            if not isinstance(data, dict):
                raise InvalidContentError(
                    f"{titles_file} must map node ids to titles"
                )
            by_locale.setdefault(locale_code, {}).update(data)

        table = TranslationTable.from_locale_mapping(by_locale)
        logger.info(
            "loaded_title_translations",
            locale_count=len(by_locale),
            entry_count=len(table),
        )
        return table
