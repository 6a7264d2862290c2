"""Tests for the Q1N streaming provider."""

import asyncio
from unittest.mock import AsyncMock, patch

import pytest

from aniprov.core.exceptions import NetworkError, ProviderError, ValidationError
from aniprov.core.models import EpisodeDetails, Media, SearchOptions, VideoSourceType

from tests.html_fixtures import Q1N_ANIME_PAGE, Q1N_EPISODE_PAGE, Q1N_SEARCH, SECVIDEO_MP4, SECVIDEO_PLAYER


EPISODE = EpisodeDetails(
    id="one-piece-episodio-1",
    number=1,
    url="https://q1n.net/episodio/one-piece-episodio-1/",
)


class TestSearch:
    def test_search(self, q1n):
        mock_get = AsyncMock(return_value=Q1N_SEARCH)
        with patch.object(q1n, "_try_get_text", mock_get):
            results = asyncio.run(q1n.search(SearchOptions(query="One Piece")))

        assert len(results) == 2
        assert mock_get.await_args.args[0] == "https://q1n.net/?s=One%20Piece"

    def test_dub_appends_dublado(self, q1n):
        mock_get = AsyncMock(return_value=Q1N_SEARCH)
        with patch.object(q1n, "_try_get_text", mock_get):
            asyncio.run(q1n.search(SearchOptions(query="One Piece", dub=True)))

        assert mock_get.await_args.args[0] == "https://q1n.net/?s=One%20Piece%20dublado"

    def test_query_falls_back_to_media_title(self, q1n):
        mock_get = AsyncMock(return_value=Q1N_SEARCH)
        with patch.object(q1n, "_try_get_text", mock_get):
            asyncio.run(q1n.search(SearchOptions(media=Media(english_title="Naruto"))))

        assert mock_get.await_args.args[0] == "https://q1n.net/?s=Naruto"

    def test_failed_fetch_returns_empty(self, q1n):
        with patch.object(q1n, "_try_get_text", AsyncMock(return_value=None)):
            assert asyncio.run(q1n.search(SearchOptions(query="One Piece"))) == []


class TestFindEpisodes:
    def test_episode_list(self, q1n):
        mock_get = AsyncMock(return_value=Q1N_ANIME_PAGE)
        with patch.object(q1n, "_try_get_text", mock_get):
            episodes = asyncio.run(q1n.find_episodes("one-piece"))

        assert [e.number for e in episodes] == [1, 2, 7]
        assert mock_get.await_args.args[0] == "https://q1n.net/animes/one-piece/"

    def test_numeric_id_rejected(self, q1n):
        mock_get = AsyncMock()
        with patch.object(q1n, "_try_get_text", mock_get):
            assert asyncio.run(q1n.find_episodes("12345")) == []
        mock_get.assert_not_awaited()

    def test_probes_episode_pages_when_list_missing(self, q1n):
        reachable = {
            "https://q1n.net/episodio/show-episodio-1/",
            "https://q1n.net/episodio/show-episodio-2/",
        }
        head = AsyncMock(side_effect=lambda url, timeout=None: url in reachable)
        with patch.object(q1n, "_try_get_text", AsyncMock(return_value=None)), \
                patch.object(q1n, "_head_ok", head):
            episodes = asyncio.run(q1n.find_episodes("show"))

        assert [e.id for e in episodes] == ["show-episodio-1", "show-episodio-2"]
        assert episodes[1].title == "Episódio 2"
        assert head.await_count == 3


class TestFindEpisodeServer:
    def test_resolves_requested_server(self, q1n):
        pages = {"https://csst.online/embed/123": SECVIDEO_PLAYER}
        with patch.object(q1n, "_get_text", AsyncMock(return_value=Q1N_EPISODE_PAGE)), \
                patch.object(q1n, "_try_get_text", AsyncMock(side_effect=lambda url, timeout=None: pages.get(url))):
            server = asyncio.run(q1n.find_episode_server(EPISODE, "ruplay"))

        assert server.server == "ruplay"
        assert server.headers["Referer"] == "https://q1n.net"
        source = server.video_sources[0]
        assert source.url == SECVIDEO_MP4
        assert source.type == VideoSourceType.MP4
        assert source.quality == "1080p"

    def test_default_server_uses_player_page_fallback(self, q1n):
        with patch.object(q1n, "_get_text", AsyncMock(return_value="<html></html>")):
            server = asyncio.run(q1n.find_episode_server(EPISODE, "default"))

        assert server.server == "chplay"
        assert server.video_sources[0].url == "https://q1n.net/player/chplay/one-piece-episodio-1"
        assert server.video_sources[0].type == VideoSourceType.M3U8

    def test_missing_url(self, q1n):
        with pytest.raises(ValidationError):
            asyncio.run(q1n.find_episode_server(EpisodeDetails(id="x", number=1), "chplay"))

    def test_page_failure_is_provider_error(self, q1n):
        failing = AsyncMock(side_effect=NetworkError("HTTP 404", url=EPISODE.url, status_code=404))
        with patch.object(q1n, "_get_text", failing):
            with pytest.raises(ProviderError) as exc:
                asyncio.run(q1n.find_episode_server(EPISODE, "chplay"))

        assert exc.value.provider_name == "Q1N"


def test_settings(q1n):
    settings = q1n.get_settings()
    assert settings.episode_servers == ["chplay", "ruplay"]
    assert settings.to_host() == {"episodeServers": ["chplay", "ruplay"], "supportsDub": True}
