"""Tests for torrent name heuristics."""

import pytest

from aniprov.providers.darkmahou.torrent_parser import TorrentNameParser

from tests.html_fixtures import HASH_A


class TestInfoHash:
    def test_extracts_btih(self):
        magnet = f"magnet:?xt=urn:btih:{HASH_A}&dn=Show"
        assert TorrentNameParser.extract_info_hash(magnet) == HASH_A

    def test_not_a_magnet(self):
        assert TorrentNameParser.extract_info_hash(f"https://x/btih:{HASH_A}") == ""
        assert TorrentNameParser.extract_info_hash("") == ""

    def test_short_hash_ignored(self):
        assert TorrentNameParser.extract_info_hash("magnet:?xt=urn:btih:abc123&dn=x") == ""


class TestResolutionAndGroup:
    def test_resolution_lowercased(self):
        assert TorrentNameParser.parse_resolution("[G] Show - 05 [1080P]") == "1080p"

    def test_unknown_resolution(self):
        assert TorrentNameParser.parse_resolution("Show 2160p") == ""
        assert TorrentNameParser.parse_resolution("Show") == ""

    def test_release_group(self):
        assert TorrentNameParser.extract_release_group("[Erai-raws] Show - 01") == "Erai-raws"
        assert TorrentNameParser.extract_release_group("Show [Group]") == ""


class TestBatch:
    @pytest.mark.parametrize("name", [
        "Show Batch [1080p]",
        "Show Complete Series",
        "Show 01-12 [720p]",
        "[G] Show S2 [1080p]",
    ])
    def test_batch_names(self, name):
        assert TorrentNameParser.is_batch(name)

    def test_tilde_in_heading(self):
        assert TorrentNameParser.is_batch("Show - 1080p", "Show Episódio 01 ~ 12")

    @pytest.mark.parametrize("name", [
        "[G] Show - 05 [1080p]",
        "Show S02E05 720p",
        "Show 12-05 [720p]",
        "Show 00-12 [720p]",
    ])
    def test_single_episodes(self, name):
        assert not TorrentNameParser.is_batch(name)


class TestEpisodeNumber:
    def test_portuguese_heading_wins(self):
        assert TorrentNameParser.extract_episode_number("Show - 1080p", "Show Episódio 7") == 7

    def test_dash_number(self):
        assert TorrentNameParser.extract_episode_number("[G] Show - 05 [1080p]") == 5

    def test_season_episode(self):
        assert TorrentNameParser.extract_episode_number("Show S01E03 720p") == 3

    def test_ep_prefix(self):
        assert TorrentNameParser.extract_episode_number("Show Ep 12 720p") == 12

    def test_isolated_number_skips_years(self):
        assert TorrentNameParser.extract_episode_number("Show 2019 720p 08") == 8

    def test_batch_is_minus_one(self):
        assert TorrentNameParser.extract_episode_number("Show Batch 1080p") == -1

    def test_unknown_is_minus_one(self):
        assert TorrentNameParser.extract_episode_number("Show") == -1
