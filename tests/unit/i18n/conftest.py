"""Feature-level fixtures for i18n system tests.

Provides YAML message and content directories written to tmp_path.
"""

import pytest
import yaml


def _dump(path, data):
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(data, f, allow_unicode=True)


@pytest.fixture
def messages_dir(tmp_path):
    """Create a directory with sample YAML message catalogs.

    Returns a directory structure like:
    - misc.en.yml
    - nav.en.yml
    - misc.de-DE.yml
    - misc.xx-XX.yml (unregistered locale)
    """
    directory = tmp_path / "messages"
    directory.mkdir()
    _dump(
        directory / "misc.en.yml",
        {
            "misc": {
                "title": "Notice",
                "officialDocumentationNotice": {
                    "title": "Official Documentation",
                    "description": "This page is **official** documentation.",
                },
            }
        },
    )
    _dump(directory / "nav.en.yml", {"nav": {"home": "Home", "search": "Search"}})
    _dump(
        directory / "misc.de-DE.yml",
        {
            "misc": {
                "officialDocumentationNotice": {
                    "title": "Offizielle Dokumentation",
                    "description": "Dies ist **offizielle** Dokumentation.",
                },
            }
        },
    )
    _dump(directory / "misc.xx-XX.yml", {"misc": {"title": "???"}})
    return directory


@pytest.fixture
def content_dir(tmp_path):
    """Create a content index with tree.yml and title translations."""
    directory = tmp_path / "content"
    directory.mkdir()
    _dump(
        directory / "tree.yml",
        {
            "id": "docs",
            "title": "Documentation",
            "children": [
                {"id": "intro", "title": "Introduction", "url": "/docs/intro"},
                {
                    "id": "guide",
                    "title": "Guide",
                    "children": [{"id": "setup", "title": "Setup"}],
                },
            ],
        },
    )
    _dump(directory / "titles.de-DE.yml", {"intro": "Einführung"})
    _dump(
        directory / "titles.fr-FR.yml",
        {"guide": {"title": "Guide FR", "url": "/fr-FR/docs/guide"}},
    )
    return directory
