"""Tests for the DarkMahou query translator."""

import pytest

from aniprov.providers.darkmahou.translator import PortugueseQueryTranslator


convert = PortugueseQueryTranslator.convert


class TestSeasons:
    def test_ordinal_suffix(self):
        assert convert("Kimetsu no Yaiba 2nd Season") == "Kimetsu no Yaiba 2ª temporada"

    def test_season_number(self):
        assert convert("Overlord season 3") == "Overlord 3ª temporada"

    @pytest.mark.parametrize("word, expected", [
        ("First", "1ª"),
        ("second", "2ª"),
        ("THIRD", "3ª"),
    ])
    def test_spelled_ordinal(self, word, expected):
        assert convert(f"Show {word} Season") == f"Show {expected} temporada"


class TestTerms:
    def test_movie_and_special(self):
        assert convert("Jujutsu Kaisen Movie") == "Jujutsu Kaisen filme"
        assert convert("Bocchi Special") == "Bocchi especial"

    def test_part(self):
        assert convert("Shingeki no Kyojin Part 2") == "Shingeki no Kyojin parte 2"

    def test_words_inside_other_words_untouched(self):
        assert convert("Movies of Youth") == "Movies of Youth"


class TestNormalisation:
    def test_whitespace_collapsed(self):
        assert convert("  One   Piece  ") == "One Piece"

    def test_empty_and_none(self):
        assert convert("") == ""
        assert convert(None) == ""

    def test_plain_query_unchanged(self):
        assert convert("Sousou no Frieren") == "Sousou no Frieren"
