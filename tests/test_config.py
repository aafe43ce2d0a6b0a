"""Tests for YAML configuration loading."""

import tempfile
from pathlib import Path

import pytest

from highlight_sync.config import AppConfig, load_config


def _config_file(tmpdir: str, text: str) -> str:
    path = Path(tmpdir) / "config.yaml"
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_defaults_without_path():
    cfg = load_config(None)
    assert cfg == AppConfig()
    assert cfg.sync.dry_run is False
    assert cfg.sync.extension == "md"
    assert cfg.sync.key_field == "source_url"
    assert cfg.sync.follow_links is True
    assert cfg.logging.file is False


def test_default_config_is_not_shared():
    first = load_config(None)
    first.sync.dry_run = True
    assert load_config(None).sync.dry_run is False


def test_partial_sections_merge_over_defaults():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = _config_file(tmpdir, "sync:\n  key_field: url\nlogging:\n  level: DEBUG\n")

        cfg = load_config(path)

        assert cfg.sync.key_field == "url"
        assert cfg.sync.extension == "md"
        assert cfg.logging.level == "DEBUG"
        assert cfg.logging.console is True


def test_unknown_sections_are_ignored():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = _config_file(tmpdir, "watch:\n  interval: 5\n")
        assert load_config(path) == AppConfig()


def test_empty_file_gives_defaults():
    with tempfile.TemporaryDirectory() as tmpdir:
        assert load_config(_config_file(tmpdir, "")) == AppConfig()


def test_non_mapping_file_is_rejected():
    with tempfile.TemporaryDirectory() as tmpdir:
        with pytest.raises(ValueError):
            load_config(_config_file(tmpdir, "- a\n- b\n"))


def test_unknown_option_in_section_is_rejected():
    with tempfile.TemporaryDirectory() as tmpdir:
        with pytest.raises(TypeError):
            load_config(_config_file(tmpdir, "sync:\n  watch: true\n"))
