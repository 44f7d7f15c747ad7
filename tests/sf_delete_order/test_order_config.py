"""Tests for .sf-delete-order/config.yaml loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from sf_delete_order.config import OrderConfig, default_config_path, load_config, save_config
from sf_delete_order.exceptions import ConfigError


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / ".sf-delete-order" / "config.yaml"
    path.parent.mkdir()
    return path


class TestLoadConfig:
    def test_missing_default_file_gives_defaults(self, tmp_path: Path, monkeypatch) -> None:
        monkeypatch.chdir(tmp_path)
        config = load_config()

        assert config == OrderConfig()
        assert config.template is None
        assert config.exclude_suffixes == ["__e"]

    def test_default_location(self, tmp_path: Path, monkeypatch) -> None:
        monkeypatch.chdir(tmp_path)
        assert default_config_path() == tmp_path / ".sf-delete-order" / "config.yaml"

    def test_missing_explicit_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "missing.yaml")

    def test_full_config(self, config_file: Path) -> None:
        config_file.write_text(
            'template: "delete [SELECT Id FROM {name}];"\n'
            "exclude_suffixes:\n  - __e\n  - __b\n"
        )
        config = load_config(config_file)

        assert config.template == "delete [SELECT Id FROM {name}];"
        assert config.exclude_suffixes == ["__e", "__b"]

    def test_single_suffix_string(self, config_file: Path) -> None:
        config_file.write_text("exclude_suffixes: __x\n")
        assert load_config(config_file).exclude_suffixes == ["__x"]

    def test_empty_file(self, config_file: Path) -> None:
        config_file.write_text("")
        assert load_config(config_file) == OrderConfig()

    def test_invalid_yaml(self, config_file: Path) -> None:
        config_file.write_text("template: [unclosed\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(config_file)

    def test_invalid_utf8(self, config_file: Path) -> None:
        config_file.write_bytes(b"template: \xff\xfe{name}\n")
        with pytest.raises(ConfigError, match="Cannot read"):
            load_config(config_file)

    def test_directory_instead_of_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="Cannot read"):
            load_config(tmp_path)

    def test_top_level_list_rejected(self, config_file: Path) -> None:
        config_file.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_config(config_file)

    def test_template_wrong_type(self, config_file: Path) -> None:
        config_file.write_text("template: 42\n")
        with pytest.raises(ConfigError, match="template"):
            load_config(config_file)

    def test_suffixes_wrong_type(self, config_file: Path) -> None:
        config_file.write_text("exclude_suffixes:\n  - 1\n")
        with pytest.raises(ConfigError, match="exclude_suffixes"):
            load_config(config_file)


class TestSaveConfig:
    def test_round_trip(self, tmp_path: Path) -> None:
        path = tmp_path / "nested" / "config.yaml"
        saved = save_config(OrderConfig(template="{name};", exclude_suffixes=["__e"]), path)

        assert saved == path
        assert load_config(path) == OrderConfig(template="{name};", exclude_suffixes=["__e"])

    def test_template_omitted_when_unset(self, tmp_path: Path) -> None:
        path = save_config(OrderConfig(), tmp_path / "config.yaml")
        assert "template" not in path.read_text()
