"""Tests for the AnimesROLL parser, API client and provider."""

import asyncio
import json
from unittest.mock import AsyncMock, patch

import pytest

from aniprov.core.exceptions import ExtractionError, NetworkError
from aniprov.core.models import EpisodeDetails, SearchOptions, VideoSourceType
from aniprov.providers.animesroll.parser import AnimesRollParser, parse_episode_number


SEARCH_PAYLOAD = {
    "data_anime": [
        {"titulo": "Naruto Shippuden", "slug_serie": "naruto-shippuden", "generate_id": "g1"},
        {"titulo": "Broken entry"},
    ],
    "data_filme": [
        {"nome_filme": "Naruto the Movie", "generate_id": "m42"},
    ],
}


def next_data_page(data):
    payload = {"props": {"pageProps": {"data": data}}, "page": "/anime/[id]"}
    return f'<html><script id="__NEXT_DATA__" type="application/json">{json.dumps(payload)}</script></html>'


class TestParsing:
    def test_episode_numbers(self):
        assert parse_episode_number("12") == 12
        assert parse_episode_number(" 12.5 ") == 12.5
        assert parse_episode_number("extra") is None

    def test_search_results(self):
        results = AnimesRollParser().parse_search_results(SEARCH_PAYLOAD)

        assert [r.id for r in results] == ["anime/naruto-shippuden", "f/m42"]
        assert results[0].url == "https://www.anroll.net/anime/naruto-shippuden"
        assert results[1].title == "Naruto the Movie"

    def test_next_data(self):
        html = next_data_page({"generate_id": "g1", "slug_serie": "naruto"})
        assert AnimesRollParser.parse_next_data(html)["generate_id"] == "g1"

    def test_next_data_missing(self):
        with pytest.raises(ExtractionError):
            AnimesRollParser.parse_next_data("<html><body>Not found</body></html>")

    def test_next_data_without_page_data(self):
        html = '<script id="__NEXT_DATA__">{"props": {"pageProps": {}}}</script>'
        with pytest.raises(ExtractionError):
            AnimesRollParser.parse_next_data(html)

    def test_movie_episode(self):
        episodes = AnimesRollParser().build_movie_episodes({"data_movie": {"od": "abc"}})

        assert len(episodes) == 1
        assert episodes[0].id == "abc/filme"
        assert episodes[0].url == "https://apiv2-prd.anroll.net/od/abc/filme.mp4"
        assert episodes[0].title == "Filme"

    def test_movie_without_file(self):
        assert AnimesRollParser().build_movie_episodes({"data_movie": {}}) == []

    def test_series_episodes_sorted_and_invalid_skipped(self):
        items = [{"n_episodio": "2"}, {"n_episodio": "1"}, {"n_episodio": "x"}]
        episodes = AnimesRollParser().build_series_episodes({"slug_serie": "naruto"}, items)

        assert [e.number for e in episodes] == [1, 2]
        assert episodes[0].id == "naruto/1"
        assert episodes[0].title == "Episódio #1"
        assert episodes[0].url == "https://cdn-01.gamabunta.xyz/hls/animes/naruto/1.mp4/media-1/stream.m3u8"

    def test_series_episodes_skip_non_object_items(self):
        items = [None, "2", {"n_episodio": "1"}]
        episodes = AnimesRollParser().build_series_episodes({"slug_serie": "x"}, items)

        assert [e.id for e in episodes] == ["x/1"]


class TestProvider:
    def test_search_uses_api(self, animesroll):
        mock_json = AsyncMock(return_value=SEARCH_PAYLOAD)
        with patch.object(animesroll, "_get_json", mock_json):
            results = asyncio.run(animesroll.search(SearchOptions(query="naruto shippuden")))

        assert len(results) == 2
        assert mock_json.await_args.args[0] == "https://apiv2-prd.anroll.net/search?q=naruto%20shippuden"

    def test_search_failure_returns_empty(self, animesroll):
        with patch.object(animesroll, "_get_json", AsyncMock(side_effect=NetworkError("down"))):
            assert asyncio.run(animesroll.search(SearchOptions(query="naruto"))) == []

    def test_series_episodes_follow_pagination(self, animesroll):
        pages = [
            {"data": [{"n_episodio": "3"}, {"n_episodio": "2"}], "meta": {"totalOfPages": 2}},
            {"data": [{"n_episodio": "1"}], "meta": {"totalOfPages": 2}},
        ]
        html = next_data_page({"generate_id": "g1", "slug_serie": "naruto"})
        mock_json = AsyncMock(side_effect=pages)
        with patch.object(animesroll, "_get_text", AsyncMock(return_value=html)), \
                patch.object(animesroll, "_get_json", mock_json):
            episodes = asyncio.run(animesroll.find_episodes("anime/naruto"))

        assert [e.number for e in episodes] == [1, 2, 3]
        assert mock_json.await_args_list[1].args[0] == (
            "https://apiv3-prd.anroll.net/animes/g1/episodes?page=2&order=desc"
        )

    def test_failing_episode_page_keeps_collected(self, animesroll):
        html = next_data_page({"generate_id": "g1", "slug_serie": "naruto"})
        pages = [
            {"data": [{"n_episodio": "1"}], "meta": {"totalOfPages": 3}},
            NetworkError("HTTP 500", status_code=500),
        ]
        with patch.object(animesroll, "_get_text", AsyncMock(return_value=html)), \
                patch.object(animesroll, "_get_json", AsyncMock(side_effect=pages)):
            episodes = asyncio.run(animesroll.find_episodes("anime/naruto"))

        assert [e.number for e in episodes] == [1]

    def test_malformed_episode_payload(self, animesroll):
        html = next_data_page({"generate_id": "g1", "slug_serie": "naruto"})
        pages = [{"data": [None, {"n_episodio": "1"}], "meta": "n/a"}]
        with patch.object(animesroll, "_get_text", AsyncMock(return_value=html)), \
                patch.object(animesroll, "_get_json", AsyncMock(side_effect=pages)):
            episodes = asyncio.run(animesroll.find_episodes("anime/naruto"))

        assert [e.number for e in episodes] == [1]

    def test_movie_episodes(self, animesroll):
        html = next_data_page({"data_movie": {"od": "abc"}})
        with patch.object(animesroll, "_get_text", AsyncMock(return_value=html)):
            episodes = asyncio.run(animesroll.find_episodes("f/m42"))

        assert [e.id for e in episodes] == ["abc/filme"]

    def test_page_failure_returns_empty(self, animesroll):
        with patch.object(animesroll, "_get_text", AsyncMock(side_effect=NetworkError("down"))):
            assert asyncio.run(animesroll.find_episodes("anime/naruto")) == []

    def test_episode_server_types(self, animesroll):
        movie = EpisodeDetails(id="abc/filme", number=1, url="https://apiv2-prd.anroll.net/od/abc/filme.mp4")
        series = EpisodeDetails(id="naruto/1", number=1, url="https://cdn.example/naruto/1/stream.m3u8")

        movie_server = asyncio.run(animesroll.find_episode_server(movie, "default"))
        series_server = asyncio.run(animesroll.find_episode_server(series, "default"))

        assert movie_server.video_sources[0].type == VideoSourceType.MP4
        assert series_server.video_sources[0].type == VideoSourceType.M3U8
        assert series_server.video_sources[0].url == series.url
        assert series_server.headers["Referer"] == "https://www.anroll.net"
