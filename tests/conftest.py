"""Shared fixtures for the docsite-i18n test suite."""

import pytest

from tests.factories.i18n import (
    make_content_tree,
    make_message_catalogs,
    make_registry,
    make_translation_table,
)


@pytest.fixture
def registry():
    """Registry with en (default), de-DE, fr-FR, pt-BR and pt-PT."""
    return make_registry()


@pytest.fixture
def content_tree():
    """Canonical tree: docs/{intro, guide/{setup}}."""
    return make_content_tree()


@pytest.fixture
def translation_table():
    """Only intro has a de-DE title."""
    return make_translation_table()


@pytest.fixture
def message_catalogs():
    """Catalogs for en, de-DE and fr-FR (fr-FR lacks misc.title)."""
    return make_message_catalogs()
