"""Data models for the i18n system.

Defines locales, the canonical content tree, translation entries, message
catalogs and rich-text segments. Every model is immutable once built so it
can be shared across requests for the whole process lifetime.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import (
    Any,
    Callable,
    Dict,
    Iterator,
    Mapping,
    Optional,
    Tuple,
)

from docsite_i18n.i18n.exceptions import InvalidContentError


@dataclass(frozen=True)
class Locale:
    """A registered locale.

    Uses BCP 47-like tags (e.g., "en", "de-DE", "pt-BR").

    Attributes:
        code: Locale tag.
        is_default: True for the single locale every other locale falls back to.
    """

    code: str
    is_default: bool = False

    def __str__(self) -> str:
        return self.code

    @property
    def language(self) -> str:
        """Get language part of locale (e.g., "pt" from "pt-BR").

        Returns:
            Language code.
        """
        return self.code.split("-")[0]


class NodeKind(str, Enum):
    """Kind of a content tree node."""

    FOLDER = "folder"
    PAGE = "page"


@dataclass(frozen=True)
class ContentNode:
    """A node of the canonical (or a localized) content tree.

    ``id`` and ``slug`` never vary by locale and are used as cross-locale join
    keys; only ``title`` and ``url`` are substituted by localization.

    Attributes:
        id: Stable, locale-independent identifier.
        kind: Folder or Page.
        title: Display title.
        slug: Stable path segment.
        children: Ordered child nodes (folders only).
        url: Optional link target.
    """

    id: str
    kind: NodeKind
    title: str
    slug: str
    children: Tuple["ContentNode", ...] = ()
    url: Optional[str] = None

    def __post_init__(self):
        if not self.id:
            raise InvalidContentError("Content node id must not be empty")
        if not isinstance(self.kind, NodeKind):
            try:
                object.__setattr__(self, "kind", NodeKind(self.kind))
            except ValueError as e:
                raise InvalidContentError(
                    f"Unknown node kind for {self.id}: {self.kind!r}"
                ) from e
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))
        if self.kind is NodeKind.PAGE and self.children:
            raise InvalidContentError(f"Page {self.id} cannot have children")

    @property
    def is_folder(self) -> bool:
        return self.kind is NodeKind.FOLDER

    def walk(self) -> Iterator["ContentNode"]:
        """Iterate over this node and its descendants, depth-first pre-order."""
        yield self
        for child in self.children:
            yield from child.walk()

    def find(self, node_id: str) -> Optional["ContentNode"]:
        """Return the first node with ``node_id`` in this subtree, if any."""
        for node in self.walk():
            if node.id == node_id:
                return node
        return None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ContentNode":
        """Build a tree from nested mappings.

        Expected format:
            id: guide
            kind: folder          # optional, inferred from children
            title: Guide
            slug: guide           # optional, defaults to id
            url: /docs/guide      # optional
            children: [...]

        Args:
            data: Mapping describing the node.

        Returns:
            ContentNode with its children built recursively.

        Raises:
            InvalidContentError: If required fields are missing or malformed.
        """
        if not isinstance(data, Mapping):
            raise InvalidContentError(
                f"Content node must be a mapping, got {type(data).__name__}"
            )
        if "id" not in data or "title" not in data:
            raise InvalidContentError(f"Content node requires id and title: {data!r}")

        raw_children = data.get("children") or []
        if not isinstance(raw_children, (list, tuple)):
            raise InvalidContentError(f"Children of {data['id']} must be a list")

        kind = data.get("kind") or (NodeKind.FOLDER if raw_children else NodeKind.PAGE)
        return cls(
            id=str(data["id"]),
            kind=kind,
            title=str(data["title"]),
            slug=str(data.get("slug") or data["id"]),
            children=tuple(cls.from_dict(child) for child in raw_children),
            url=data.get("url"),
        )


@dataclass(frozen=True)
class TranslationEntry:
    """Locale-specific values for one content node."""

    title: str
    url: Optional[str] = None


class TranslationTable:
    """Sparse, read-only table of translation entries keyed by (node id, locale code).

    Absence of an entry is expected and triggers fallback to the canonical
    values.
    """

    def __init__(
        self,
        entries: Optional[Mapping[Tuple[str, str], TranslationEntry]] = None,
    ):
        self._entries: Mapping[Tuple[str, str], TranslationEntry] = MappingProxyType(
            dict(entries or {})
        )

    @classmethod
    def from_locale_mapping(
        cls, data: Mapping[str, Mapping[str, Any]]
    ) -> "TranslationTable":
        """Build a table from ``{locale_code: {node_id: title | {title, url}}}``.

        Raises:
            InvalidContentError: If an entry has no usable title.
        """
        entries: Dict[Tuple[str, str], TranslationEntry] = {}
        for locale_code, nodes in data.items():
            for node_id, value in nodes.items():
                entries[(str(node_id), locale_code)] = _to_entry(
                    node_id, locale_code, value
                )
        return cls(entries)

    def get(self, node_id: str, locale_code: str) -> Optional[TranslationEntry]:
        return self._entries.get((node_id, locale_code))

    def locales(self) -> Tuple[str, ...]:
        """Locale codes that have at least one entry, sorted."""
        return tuple(sorted({code for _, code in self._entries}))

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)


def _to_entry(node_id: Any, locale_code: str, value: Any) -> TranslationEntry:
    if isinstance(value, TranslationEntry):
        return value
    if isinstance(value, str):
        return TranslationEntry(title=value)
    if isinstance(value, Mapping) and isinstance(value.get("title"), str):
        return TranslationEntry(title=value["title"], url=value.get("url"))
    raise InvalidContentError(
        f"Invalid translation entry for {node_id} in {locale_code}: {value!r}"
    )


@dataclass(frozen=True)
class MessageKey:
    """A dotted message key path (e.g., "misc.officialDocumentationNotice.title").

    Attributes:
        parts: Non-empty path segments.
    """

    parts: Tuple[str, ...]

    def __str__(self) -> str:
        return ".".join(self.parts)

    @classmethod
    def from_string(cls, key_path: str) -> "MessageKey":
        """Parse and validate a dotted key path.

        Raises:
            ValueError: If the path is empty or has an empty segment.
        """
        if not isinstance(key_path, str) or not key_path:
            raise ValueError(f"Message key must be a non-empty string: {key_path!r}")
        parts = tuple(key_path.split("."))
        if any(not part for part in parts):
            raise ValueError(f"Message key has an empty segment: {key_path!r}")
        return cls(parts=parts)


def flatten_messages(
    data: Mapping[str, Any],
    prefix: str = "",
    on_invalid: Optional[Callable[[str, Any], None]] = None,
) -> Dict[str, str]:
    """Collapse a nested mapping of mappings to dotted key paths.

    Args:
        data: Nested mapping with string leaves.
        prefix: Path prepended to every key.
        on_invalid: Called with (path, value) for non-string leaves, which are
            then skipped. When omitted, such leaves raise.

    Returns:
        Flat dict of dotted key path -> message.

    Raises:
        InvalidContentError: For non-string leaves when on_invalid is None.
    """
    flat: Dict[str, str] = {}
    for key, value in data.items():
        path = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, Mapping):
            flat.update(flatten_messages(value, path, on_invalid))
        elif isinstance(value, str):
            flat[path] = value
        elif on_invalid is not None:
            on_invalid(path, value)
        else:
            raise InvalidContentError(f"Message {path} must be a string: {value!r}")
    return flat


def unflatten_messages(flat: Mapping[str, str]) -> Dict[str, Any]:
    """Expand dotted key paths back into nested dicts.

    Raises:
        InvalidContentError: If a path is both a message and a parent of
            other messages (e.g., "a" and "a.b").
    """
    nested: Dict[str, Any] = {}
    for path, value in flat.items():
        node = nested
        *parents, leaf = path.split(".")
        for part in parents:
            node = node.setdefault(part, {})
            if not isinstance(node, dict):
                raise InvalidContentError(
                    f"Message {path} is nested below another message"
                )
        if isinstance(node.get(leaf), dict):
            raise InvalidContentError(f"Message {path} is also a message namespace")
        node[leaf] = value
    return nested


@dataclass(frozen=True)
class MessageCatalog:
    """Read-only messages for a single locale, keyed by dotted path.

    Attributes:
        locale_code: Locale this catalog is for.
        messages: Flat mapping of dotted key path -> message template.
    """

    locale_code: str
    messages: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "messages", MappingProxyType(dict(self.messages)))

    @classmethod
    def from_nested(cls, locale_code: str, data: Mapping[str, Any]) -> "MessageCatalog":
        return cls(locale_code=locale_code, messages=flatten_messages(data))

    def get(self, key_path: str) -> Optional[str]:
        return self.messages.get(key_path)

    def has(self, key_path: str) -> bool:
        return key_path in self.messages

    def leaves(self, prefix: str) -> Dict[str, str]:
        """All messages strictly below ``prefix``, keyed by full path."""
        start = f"{prefix}."
        return {
            path: value for path, value in self.messages.items() if path.startswith(start)
        }

    def merged(self, other: "MessageCatalog") -> "MessageCatalog":
        """Return a new catalog with ``other``'s messages overriding this one's."""
        combined = dict(self.messages)
        combined.update(other.messages)
        return MessageCatalog(locale_code=self.locale_code, messages=combined)


@dataclass(frozen=True)
class Segment:
    """A contiguous run of plain or emphasized text."""

    text: str
    emphasized: bool = False


@dataclass(frozen=True)
class MissingTranslation:
    """Fallback event: a value was missing for the target locale.

    Attributes:
        subject: "node" for tree titles, "message" for catalog messages.
        key: Node id or message key path.
        locale_code: Locale that lacked the value.
        fallback_locale_code: Locale whose value was used instead.
    """

    subject: str
    key: str
    locale_code: str
    fallback_locale_code: Optional[str] = None
