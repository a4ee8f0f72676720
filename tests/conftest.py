"""
Shared fixtures.
"""

from xml.dom import minidom

import pytest

import tag_editor.config
from tag_editor.config import ConfigManager, EditorConfig
from tag_editor.editor import DocumentEditor


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep tests away from the user's config file and environment."""
    for var in ("TAG_EDITOR_NULL_MARKER", "TAG_EDITOR_LOG_LEVEL", "TAG_EDITOR_PRETTY", "TAG_EDITOR_INDENT"):
        monkeypatch.delenv(var, raising=False)
    manager = ConfigManager(config_dir=tmp_path / "config")
    monkeypatch.setattr(tag_editor.config, "_config_manager", manager)
    return manager


@pytest.fixture
def parse():
    return minidom.parseString


@pytest.fixture
def editor():
    return DocumentEditor(EditorConfig())


@pytest.fixture
def ports_doc():
    return minidom.parseString("<cfg><port>8080</port><port>9090</port></cfg>")
