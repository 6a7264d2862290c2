"""Tests for provider discovery and lookup."""

import asyncio

import pytest

from aniprov.core import ConfigManager, ProviderManager
from aniprov.core.exceptions import ProviderError
from aniprov.providers.base import ProviderKind
from aniprov.providers.darkmahou import DarkMahouProvider
from aniprov.providers.mangalivre import MangaLivreProvider
from aniprov.providers.q1n import Q1NProvider


@pytest.fixture
def manager(config_dir):
    return ProviderManager(ConfigManager(config_dir))


class TestDiscovery:
    def test_builtin_providers_discovered(self, manager):
        available = manager.available_providers

        assert set(available) == {"darkmahou", "q1n", "animesroll", "mangalivre"}
        assert available["q1n"] is Q1NProvider

    def test_provider_name(self):
        assert ProviderManager.provider_name("darkmahou_provider") == "darkmahou"
        assert ProviderManager.provider_name("custom") == "custom"

    def test_missing_directory(self, config_dir, tmp_path):
        manager = ProviderManager(ConfigManager(config_dir), providers_dir=tmp_path / "missing")
        manager.discover_providers()
        assert manager.available_providers == {}


class TestLookup:
    def test_get_by_kind(self, manager):
        assert isinstance(manager.get_torrent_provider("darkmahou"), DarkMahouProvider)
        assert isinstance(manager.get_manga_provider("mangalivre"), MangaLivreProvider)

    def test_instances_cached(self, manager):
        assert manager.get_provider("q1n") is manager.get_provider("q1n")

    def test_unknown_provider(self, manager):
        with pytest.raises(ProviderError) as exc:
            manager.get_provider("nyaa")
        assert "available" in exc.value.message

    def test_wrong_kind(self, manager):
        with pytest.raises(ProviderError) as exc:
            manager.get_streaming_provider("darkmahou")
        assert "anime_torrent" in exc.value.message

    def test_disabled_provider(self, manager):
        manager.config_manager.set_source_enabled("q1n", False)
        with pytest.raises(ProviderError) as exc:
            manager.get_provider("q1n")
        assert "disabled" in exc.value.message

    def test_source_config_reaches_provider(self, manager):
        manager.config_manager.update_source("q1n", {"config": {"base_url": "https://mirror.q1n.net/", "timeout": 7}})
        provider = manager.get_provider("q1n")
        assert provider.base_url == "https://mirror.q1n.net"
        assert provider.timeout == 7

    def test_enabled_providers_by_kind(self, manager):
        streaming = manager.get_enabled_providers(ProviderKind.ONLINE_STREAMING)
        assert list(streaming) == ["q1n", "animesroll"]


class TestStatusAndCleanup:
    def test_status(self, manager):
        status = manager.get_provider_status()

        assert status["discovered"] == 4
        assert status["errors"] == 0
        info = status["providers"]["darkmahou"]
        assert info["enabled"] is True
        assert info["kind"] == "anime_torrent"
        assert info["metadata"]["website"] == "https://darkmahou.org"

    def test_cleanup_drops_loaded(self, manager):
        manager.get_provider("q1n")
        asyncio.run(manager.cleanup())
        assert manager._loaded_providers == {}

    def test_status_does_not_instantiate_disabled(self, manager):
        manager.config_manager.set_source_enabled("q1n", False)
        status = manager.get_provider_status()

        assert "q1n" not in manager._loaded_providers
        info = status["providers"]["q1n"]
        assert info["enabled"] is False
        assert info["loaded"] is False
        assert info["kind"] == "online_streaming"
        assert info["metadata"]["name"] == "Q1N"

    def test_reload_applies_new_configuration(self, config_dir):
        manager = ProviderManager(ConfigManager(config_dir))
        original = manager.get_provider("q1n")

        # Another process edits the sources file on disk
        ConfigManager(config_dir).update_source("q1n", {"config": {"timeout": 9}})

        assert asyncio.run(manager.reload_provider("q1n")) is True
        reloaded = manager.get_provider("q1n")
        assert reloaded is not original
        assert reloaded.timeout == 9

    def test_reload_unknown_provider(self, manager):
        assert asyncio.run(manager.reload_provider("nyaa")) is False
