"""Tests for the remembered queue directories."""

import pytest

from jiratools.exceptions import ConfigurationError
from jiratools.queue import QueueSettings, QueueSettingsStore


def test_explicit_directories_are_persisted(tmp_path):
    store = QueueSettingsStore(tmp_path / "config")

    resolved = store.resolve(scan_dir=tmp_path / "scan", processed_dir=tmp_path / "done")

    assert resolved == QueueSettings(scan_dir=tmp_path / "scan", processed_dir=tmp_path / "done")
    assert (tmp_path / "config" / "scan_dir").read_text(encoding="utf-8") == f"{tmp_path / 'scan'}\n"
    assert store.load() == resolved


def test_omitted_directories_fall_back_to_saved(tmp_path):
    store = QueueSettingsStore(tmp_path / "config")
    store.resolve(scan_dir=tmp_path / "scan", processed_dir=tmp_path / "done")

    resolved = store.resolve(processed_dir=tmp_path / "other")

    assert resolved.scan_dir == tmp_path / "scan"
    assert resolved.processed_dir == tmp_path / "other"
    assert store.load().processed_dir == tmp_path / "other"


def test_relative_directories_are_made_absolute(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    store = QueueSettingsStore(tmp_path / "config")

    resolved = store.resolve(scan_dir="scan", require_processed=False)

    assert resolved.scan_dir == tmp_path / "scan"
    assert store.load().scan_dir == tmp_path / "scan"


def test_missing_scan_dir_is_a_configuration_error(tmp_path):
    store = QueueSettingsStore(tmp_path / "config")
    with pytest.raises(ConfigurationError, match="scan directory"):
        store.resolve(processed_dir=tmp_path / "done")


def test_nothing_saved_when_processed_dir_unresolved(tmp_path):
    store = QueueSettingsStore(tmp_path / "config")

    with pytest.raises(ConfigurationError, match="processed directory"):
        store.resolve(scan_dir=tmp_path / "scan")

    assert store.load() == QueueSettings()


def test_processed_dir_optional_for_composer(tmp_path):
    store = QueueSettingsStore(tmp_path / "config")
    resolved = store.resolve(scan_dir=tmp_path / "scan", require_processed=False)
    assert resolved.processed_dir is None
