"""Tests for configuration loading, persistence and recovery."""

import json

import pytest

from aniprov.core import ConfigManager
from aniprov.core.exceptions import ConfigurationError


class TestDefaults:
    def test_creates_default_files(self, config_dir):
        manager = ConfigManager(config_dir)

        assert (config_dir / "settings.json").exists()
        assert (config_dir / "sources.json").exists()
        assert list(manager.get_enabled_sources()) == ["darkmahou", "q1n", "animesroll", "mangalivre"]
        assert manager.settings.logging.level == "WARNING"

    def test_creates_missing_directory(self, tmp_path):
        ConfigManager(tmp_path / "nested" / "config")
        assert (tmp_path / "nested" / "config" / "sources.json").exists()


class TestRecovery:
    def test_corrupt_file_backed_up(self, config_dir):
        (config_dir / "settings.json").write_text("{not json", encoding="utf-8")

        manager = ConfigManager(config_dir)

        assert (config_dir / "settings.json.backup").read_text(encoding="utf-8") == "{not json"
        assert manager.settings.display.max_rows == 50
        json.loads((config_dir / "settings.json").read_text(encoding="utf-8"))

    def test_invalid_values_backed_up(self, config_dir):
        (config_dir / "settings.json").write_text(json.dumps({"display": {"max_rows": 0}}), encoding="utf-8")

        manager = ConfigManager(config_dir)

        assert (config_dir / "settings.json.backup").exists()
        assert manager.settings.display.max_rows == 50

    def test_undecodable_file_backed_up(self, config_dir):
        raw = b'{"logging": "\xff\xfe"}'
        (config_dir / "settings.json").write_bytes(raw)

        manager = ConfigManager(config_dir)

        assert (config_dir / "settings.json.backup").read_bytes() == raw
        assert manager.settings.logging.level == "WARNING"

    def test_lowercase_log_level_accepted(self, config_dir):
        (config_dir / "settings.json").write_text(json.dumps({"logging": {"level": "debug"}}), encoding="utf-8")
        assert ConfigManager(config_dir).settings.logging.level == "DEBUG"


class TestSources:
    def test_disable_persists(self, config_dir):
        ConfigManager(config_dir).set_source_enabled("q1n", False)

        reloaded = ConfigManager(config_dir)
        assert not reloaded.sources.get_source("q1n").enabled
        assert "q1n" not in reloaded.get_enabled_sources()

    def test_invalid_update_rejected(self, config_dir):
        manager = ConfigManager(config_dir)
        with pytest.raises(ConfigurationError):
            manager.update_source("q1n", {"config": {"base_url": "ftp://q1n.net"}})
        assert manager.sources.get_source("q1n").config["base_url"] == "https://q1n.net"

    def test_provider_config_layers_network_then_source(self, config_dir):
        (config_dir / "settings.json").write_text(
            json.dumps({"network": {"timeout": 15, "user_agent": "Custom/1.0"}}), encoding="utf-8"
        )
        manager = ConfigManager(config_dir)
        manager.update_source("q1n", {"config": {"base_url": "https://q1n.net", "timeout": 20}})

        config = manager.get_provider_config("q1n")

        assert config["timeout"] == 20
        assert config["user_agent"] == "Custom/1.0"
        assert manager.get_provider_config("darkmahou")["timeout"] == 15

    def test_validation_report(self, config_dir):
        manager = ConfigManager(config_dir)
        assert manager.validate_configuration() == {"valid": True, "issues": [], "warnings": []}

        for name in ["darkmahou", "q1n", "animesroll", "mangalivre"]:
            manager.set_source_enabled(name, False)
        assert manager.validate_configuration()["warnings"] == ["No sources are enabled"]
