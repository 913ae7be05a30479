"""Tests for docsite_i18n.i18n.models module."""

import dataclasses

import pytest

from docsite_i18n.i18n import (
    ContentNode,
    InvalidContentError,
    Locale,
    MessageCatalog,
    MessageKey,
    NodeKind,
    TranslationEntry,
    TranslationTable,
)
from docsite_i18n.i18n.models import flatten_messages, unflatten_messages
from tests.factories.i18n import make_page


class TestLocale:
    """Tests for Locale model."""

    def test_language(self):
        """language is the tag before the first hyphen."""
        assert Locale("pt-BR").language == "pt"
        assert Locale("en", is_default=True).language == "en"

    def test_str_is_code(self):
        """str() returns the code."""
        assert str(Locale("de-DE")) == "de-DE"

    def test_immutable(self):
        """Locale is frozen."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            Locale("en").code = "fr"


class TestContentNode:
    """Tests for ContentNode model."""

    def test_page_with_children_rejected(self):
        """Pages are leaves."""
        with pytest.raises(InvalidContentError):
            ContentNode(
                id="p",
                kind=NodeKind.PAGE,
                title="P",
                slug="p",
                children=(make_page("child"),),
            )

    def test_empty_id_rejected(self):
        """Node ids must not be empty."""
        with pytest.raises(InvalidContentError):
            make_page("")

    def test_kind_coerced_from_string(self):
        """String kinds are converted to NodeKind."""
        node = ContentNode(id="f", kind="folder", title="F", slug="f")
        assert node.kind is NodeKind.FOLDER
        assert node.is_folder

    def test_unknown_kind_rejected(self):
        """Unknown kinds raise InvalidContentError."""
        with pytest.raises(InvalidContentError):
            ContentNode(id="x", kind="separator", title="X", slug="x")

    def test_children_list_converted_to_tuple(self):
        """Children are stored as a tuple."""
        node = ContentNode(
            id="f", kind=NodeKind.FOLDER, title="F", slug="f", children=[make_page("a")]
        )
        assert isinstance(node.children, tuple)

    def test_walk_is_preorder(self, content_tree):
        """walk() yields nodes depth-first, parents first."""
        assert [node.id for node in content_tree.walk()] == [
            "docs",
            "intro",
            "guide",
            "setup",
        ]

    def test_find(self, content_tree):
        """find() locates nodes by id."""
        assert content_tree.find("setup").title == "Setup"
        assert content_tree.find("missing") is None

    def test_from_dict(self):
        """from_dict() builds nested nodes, inferring kind and slug."""
        tree = ContentNode.from_dict(
            {
                "id": "docs",
                "title": "Docs",
                "children": [
                    {"id": "intro", "title": "Intro", "url": "/docs/intro"},
                    {"id": "guide", "title": "Guide", "slug": "guides", "kind": "folder"},
                ],
            }
        )
        assert tree.kind is NodeKind.FOLDER
        intro, guide = tree.children
        assert intro.kind is NodeKind.PAGE
        assert intro.slug == "intro"
        assert intro.url == "/docs/intro"
        assert guide.kind is NodeKind.FOLDER
        assert guide.slug == "guides"
        assert guide.children == ()

    @pytest.mark.parametrize(
        "data",
        [
            {"title": "No id"},
            {"id": "no-title"},
            {"id": "x", "title": "X", "children": "nope"},
            ["not", "a", "mapping"],
        ],
    )
    def test_from_dict_invalid(self, data):
        """from_dict() rejects malformed input."""
        with pytest.raises(InvalidContentError):
            ContentNode.from_dict(data)


class TestTranslationTable:
    """Tests for TranslationTable."""

    def test_from_locale_mapping(self):
        """Strings and {title, url} mappings become entries."""
        table = TranslationTable.from_locale_mapping(
            {
                "de-DE": {"intro": "Einführung"},
                "fr-FR": {"intro": {"title": "Introduction", "url": "/fr-FR/intro"}},
            }
        )
        assert table.get("intro", "de-DE") == TranslationEntry(title="Einführung")
        assert table.get("intro", "fr-FR").url == "/fr-FR/intro"
        assert table.get("intro", "pt-BR") is None
        assert ("intro", "de-DE") in table
        assert len(table) == 2
        assert table.locales() == ("de-DE", "fr-FR")

    def test_invalid_entry_rejected(self):
        """Entries without a string title are rejected."""
        with pytest.raises(InvalidContentError):
            TranslationTable.from_locale_mapping({"de-DE": {"intro": {"url": "/x"}}})


class TestMessageKey:
    """Tests for MessageKey."""

    def test_from_string(self):
        """Dotted paths split into parts."""
        key = MessageKey.from_string("misc.officialDocumentationNotice.title")
        assert key.parts == ("misc", "officialDocumentationNotice", "title")
        assert str(key) == "misc.officialDocumentationNotice.title"

    def test_single_segment_allowed(self):
        """A top-level key is valid."""
        assert str(MessageKey.from_string("title")) == "title"

    @pytest.mark.parametrize("value", ["", "a..b", ".a", "a.", None])
    def test_invalid(self, value):
        """Empty paths or segments raise ValueError."""
        with pytest.raises(ValueError):
            MessageKey.from_string(value)


class TestMessageCatalog:
    """Tests for MessageCatalog and the flatten helpers."""

    def test_from_nested_flattens(self):
        """Nested mappings collapse to dotted paths."""
        catalog = MessageCatalog.from_nested(
            "en", {"misc": {"notice": {"title": "T"}, "label": "L"}}
        )
        assert dict(catalog.messages) == {"misc.notice.title": "T", "misc.label": "L"}
        assert catalog.get("misc.label") == "L"
        assert catalog.get("misc.notice") is None
        assert catalog.has("misc.notice.title")

    def test_messages_read_only(self):
        """Catalog messages cannot be modified."""
        catalog = MessageCatalog("en", {"a": "b"})
        with pytest.raises(TypeError):
            catalog.messages["a"] = "c"

    def test_leaves(self):
        """leaves() returns only keys strictly below the prefix."""
        catalog = MessageCatalog("en", {"a.b": "1", "a.c.d": "2", "ab": "3", "a": "4"})
        assert catalog.leaves("a") == {"a.b": "1", "a.c.d": "2"}

    def test_merged_overrides(self):
        """merged() returns a new catalog with later values winning."""
        base = MessageCatalog("en", {"a": "1", "b": "2"})
        merged = base.merged(MessageCatalog("en", {"b": "3"}))
        assert dict(merged.messages) == {"a": "1", "b": "3"}
        assert base.get("b") == "2"

    def test_non_string_leaf_rejected(self):
        """Non-string leaves raise without an on_invalid callback."""
        with pytest.raises(InvalidContentError):
            flatten_messages({"a": {"b": 1}})

    def test_non_string_leaf_reported(self):
        """on_invalid receives skipped leaves."""
        skipped = []
        flat = flatten_messages(
            {"a": {"b": 1, "c": "ok"}}, on_invalid=lambda p, v: skipped.append(p)
        )
        assert flat == {"a.c": "ok"}
        assert skipped == ["a.b"]

    def test_unflatten(self):
        """unflatten_messages() rebuilds the nesting."""
        assert unflatten_messages({"a.b": "1", "a.c": "2", "d": "3"}) == {
            "a": {"b": "1", "c": "2"},
            "d": "3",
        }

    @pytest.mark.parametrize(
        "flat",
        [
            {"a": "1", "a.b": "2"},
            {"a.b": "2", "a": "1"},
        ],
    )
    def test_unflatten_leaf_and_branch_conflict(self, flat):
        """A path that is both a message and a namespace is rejected."""
        with pytest.raises(InvalidContentError):
            unflatten_messages(flat)
