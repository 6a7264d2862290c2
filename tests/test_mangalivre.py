"""Tests for the MangaLivre parser and provider."""

import asyncio
from unittest.mock import AsyncMock, patch

from aniprov.core.exceptions import NetworkError
from aniprov.providers.mangalivre.parser import MangaLivreParser

from tests.html_fixtures import (
    MANGALIVRE_CHAPTERS_AJAX,
    MANGALIVRE_MANGA_PAGE,
    MANGALIVRE_READER,
    MANGALIVRE_SEARCH,
)


CHAPTER_URL = "https://mangalivre.tv/manga/dandadan/capitulo-1/"


class TestParser:
    def test_search_results(self):
        results = MangaLivreParser().parse_search_results(MANGALIVRE_SEARCH)

        assert len(results) == 1
        assert results[0].id == "dandadan"
        assert results[0].title == "Dandadan"
        assert results[0].image == "https://cdn.mangalivre.tv/dandadan.jpg"

    def test_chapters_skip_items_without_number(self):
        parser = MangaLivreParser()
        chapters = parser.parse_chapters(parser.find_chapter_elements(MANGALIVRE_CHAPTERS_AJAX))

        assert [c.chapter for c in chapters] == ["10", "2", "2,5"]
        assert chapters[0].id == chapters[0].url
        assert chapters[0].language == "pt-BR"

    def test_sort_and_index(self):
        parser = MangaLivreParser()
        chapters = parser.sort_and_index(parser.parse_chapters(parser.find_chapter_elements(MANGALIVRE_CHAPTERS_AJAX)))

        assert [c.chapter for c in chapters] == ["2", "2,5", "10"]
        assert [c.index for c in chapters] == [0, 1, 2]

    def test_chapter_number_from_url(self):
        parser = MangaLivreParser()
        chapters = parser.parse_chapters(parser.find_chapter_elements(MANGALIVRE_MANGA_PAGE))
        assert chapters[0].chapter == "1"

    def test_pages_sequential_and_headers(self):
        pages = MangaLivreParser().parse_pages(MANGALIVRE_READER, CHAPTER_URL, "UA")

        assert [p.url for p in pages] == ["https://cdn.mangalivre.tv/1.jpg", "https://cdn.mangalivre.tv/2.jpg"]
        assert [p.index for p in pages] == [0, 1]
        assert pages[0].headers == {"Referer": CHAPTER_URL, "User-Agent": "UA"}


class TestProvider:
    def test_search(self, mangalivre):
        mock_get = AsyncMock(return_value=MANGALIVRE_SEARCH)
        with patch.object(mangalivre, "_get_text", mock_get):
            results = asyncio.run(mangalivre.search("dandadan"))

        assert [r.id for r in results] == ["dandadan"]
        assert mock_get.await_args.args[0] == "https://mangalivre.tv/?s=dandadan&post_type=wp-manga"

    def test_blank_search(self, mangalivre):
        assert asyncio.run(mangalivre.search("   ")) == []

    def test_chapters_from_ajax(self, mangalivre):
        mock_post = AsyncMock(return_value=MANGALIVRE_CHAPTERS_AJAX)
        with patch.object(mangalivre, "_get_text", AsyncMock(return_value=MANGALIVRE_MANGA_PAGE)), \
                patch.object(mangalivre, "_post_text", mock_post):
            chapters = asyncio.run(mangalivre.find_chapters("dandadan"))

        assert [c.chapter for c in chapters] == ["2", "2,5", "10"]
        assert mock_post.await_args.args[0] == "https://mangalivre.tv/manga/dandadan/ajax/chapters/"
        headers = mock_post.await_args.kwargs["headers"]
        assert headers["X-Requested-With"] == "XMLHttpRequest"
        assert headers["Referer"] == "https://mangalivre.tv/manga/dandadan/"

    def test_chapters_fall_back_to_manga_page(self, mangalivre):
        with patch.object(mangalivre, "_get_text", AsyncMock(return_value=MANGALIVRE_MANGA_PAGE)), \
                patch.object(mangalivre, "_post_text", AsyncMock(side_effect=NetworkError("HTTP 400", status_code=400))):
            chapters = asyncio.run(mangalivre.find_chapters("dandadan"))

        assert [c.url for c in chapters] == [CHAPTER_URL]
        assert chapters[0].index == 0

    def test_chapters_need_manga_page(self, mangalivre):
        mock_post = AsyncMock()
        with patch.object(mangalivre, "_get_text", AsyncMock(side_effect=NetworkError("HTTP 404", status_code=404))), \
                patch.object(mangalivre, "_post_text", mock_post):
            assert asyncio.run(mangalivre.find_chapters("dandadan")) == []
        mock_post.assert_not_awaited()

    def test_numeric_manga_id_rejected(self, mangalivre):
        assert asyncio.run(mangalivre.find_chapters("12345")) == []

    def test_pages(self, mangalivre):
        with patch.object(mangalivre, "_get_text", AsyncMock(return_value=MANGALIVRE_READER)):
            pages = asyncio.run(mangalivre.find_chapter_pages(CHAPTER_URL))

        assert len(pages) == 2
        assert pages[0].headers["Referer"] == CHAPTER_URL

    def test_pages_need_full_url(self, mangalivre):
        assert asyncio.run(mangalivre.find_chapter_pages("capitulo-1")) == []
