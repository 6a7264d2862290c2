"""Tests for the Q1N HTML parser."""

from aniprov.core.models import SubOrDub
from aniprov.providers.q1n.parser import (
    Q1NParser,
    anime_id_from_url,
    detect_sub_or_dub,
    episode_id_from_url,
)

from tests.html_fixtures import Q1N_ANIME_PAGE, Q1N_EPISODE_PAGE, Q1N_SEARCH, Q1N_SEARCH_ARTICLES


class TestIds:
    def test_anime_id(self):
        assert anime_id_from_url("https://q1n.net/animes/one-piece/") == "one-piece"

    def test_episode_id(self):
        assert episode_id_from_url("https://q1n.net/episodio/one-piece-episodio-3/") == "one-piece-episodio-3"

    def test_falls_back_to_last_segment(self):
        assert anime_id_from_url("https://q1n.net/filmes/your-name/") == "your-name"

    def test_sub_or_dub(self):
        assert detect_sub_or_dub("One Piece Dublado") == SubOrDub.DUB
        assert detect_sub_or_dub("One Piece") == SubOrDub.SUB


class TestSearchResults:
    def test_items_container(self):
        results = Q1NParser().parse_search_results(Q1N_SEARCH)

        assert [r.id for r in results] == ["one-piece", "one-piece-dublado"]
        assert results[0].title == "One Piece"
        assert results[0].url == "https://q1n.net/animes/one-piece/"
        assert results[0].sub_or_dub == SubOrDub.SUB
        assert results[1].sub_or_dub == SubOrDub.DUB

    def test_fallback_container_picks_anime_link(self):
        results = Q1NParser().parse_search_results(Q1N_SEARCH_ARTICLES)

        assert len(results) == 1
        assert results[0].id == "naruto"
        assert results[0].title == "Naruto"

    def test_no_results(self):
        assert Q1NParser().parse_search_results("<html><body><p>Nada</p></body></html>") == []


class TestEpisodes:
    def test_sorted_with_numbers_from_url_or_numerando(self):
        episodes = Q1NParser().parse_episodes(Q1N_ANIME_PAGE)

        assert [e.number for e in episodes] == [1, 2, 7]
        assert episodes[0].id == "one-piece-episodio-1"
        assert episodes[0].title == "Episódio 1"
        assert episodes[2].id == "one-piece-especial"
        assert episodes[2].title == "Episódio 7"

    def test_missing_number_defaults_to_one(self):
        html = ('<ul class="episodios"><li><div class="episodiotitle">'
                '<a href="https://q1n.net/episodio/ova/">OVA</a></div></li></ul>')
        episodes = Q1NParser().parse_episodes(html)
        assert episodes[0].number == 1

    def test_no_list(self):
        assert Q1NParser().parse_episodes("<html></html>") == []


class TestPlayerIframes:
    def test_aviso_and_direct(self):
        aviso, direct = Q1NParser.find_player_iframes(Q1N_EPISODE_PAGE)

        assert aviso == ["https://q1n.net/aviso/?url=https%3A%2F%2Fcsst.online%2Fembed%2F123"]
        assert direct == ["https://www.blogger.com/video.g?token=abc"]
