"""Navigation tree localization.

Maps the canonical content tree to an isomorphic, locale-specific tree: same
nodes, same kinds, same order, same ids and slugs. Only titles (and link
targets, when an entry carries one) are substituted.
"""

from typing import Callable, Dict, Optional, Tuple

from docsite_i18n.i18n.models import (
    ContentNode,
    Locale,
    MissingTranslation,
    TranslationTable,
)

MissingHandler = Callable[[MissingTranslation], None]

DEFAULT_MAX_CACHED_TREES = 64


class TreeLocalizer:
    """Produces localized copies of the canonical content tree.

    Localized trees are memoized per (tree, locale code) when ``cache`` is
    enabled. At most ``max_cached_trees`` results are kept; the oldest entry
    is evicted first, so callers that build a fresh tree per request cannot
    grow the cache without bound. The tree and translation table are
    read-only after load, so a recomputed result is identical to a cached one
    and concurrent writers need no lock.

    Attributes:
        translations: Sparse table of (node id, locale code) -> entry.
        cache_enabled: Whether localized trees are memoized.
        max_cached_trees: Upper bound on memoized results.
    """

    def __init__(
        self,
        translations: TranslationTable,
        cache: bool = True,
        on_missing: Optional[MissingHandler] = None,
        max_cached_trees: int = DEFAULT_MAX_CACHED_TREES,
    ):
        """Initialize TreeLocalizer.

        Args:
            translations: Translation entries for node titles.
            cache: Memoize localized trees per locale.
            on_missing: Optional callback receiving a MissingTranslation for
                every node that keeps its canonical title.
            max_cached_trees: Upper bound on memoized results.

        Raises:
            ValueError: If max_cached_trees is not positive.
        """
        if max_cached_trees < 1:
            raise ValueError("max_cached_trees must be at least 1")
        self.translations = translations
        self.cache_enabled = cache
        self.on_missing = on_missing
        self.max_cached_trees = max_cached_trees
        self._cache: Dict[Tuple[int, str], Tuple[ContentNode, ContentNode]] = {}

    def localize(self, tree: ContentNode, locale: Locale) -> ContentNode:
        """Localize ``tree`` for ``locale``.

        The default locale returns the canonical tree unchanged. For other
        locales each node's title comes from its translation entry when one
        exists and stays canonical otherwise; nodes are never dropped or
        reordered.

        Args:
            tree: Canonical root node.
            locale: Target Locale (already resolved by the registry).

        Returns:
            Root of the localized tree.
        """
        if locale.is_default:
            return tree

        if not self.cache_enabled:
            return self._localize_node(tree, locale.code)

        cache_key = (id(tree), locale.code)
        cached = self._cache.get(cache_key)
        # The canonical tree is stored alongside so a reused id() cannot match
        if cached is not None and cached[0] is tree:
            return cached[1]

        localized = self._localize_node(tree, locale.code)
        self._cache.pop(cache_key, None)
        while len(self._cache) >= self.max_cached_trees:
            self._cache.pop(next(iter(self._cache), None), None)
        self._cache[cache_key] = (tree, localized)
        return localized

    def clear_cache(self) -> None:
        """Drop all memoized trees."""
        self._cache.clear()

    def _localize_node(self, node: ContentNode, locale_code: str) -> ContentNode:
        entry = self.translations.get(node.id, locale_code)
        if entry is None and self.on_missing is not None:
            self.on_missing(
                MissingTranslation(subject="node", key=node.id, locale_code=locale_code)
            )

        return ContentNode(
            id=node.id,
            kind=node.kind,
            title=entry.title if entry else node.title,
            slug=node.slug,
            children=tuple(
                self._localize_node(child, locale_code) for child in node.children
            ),
            url=entry.url if entry and entry.url else node.url,
        )
