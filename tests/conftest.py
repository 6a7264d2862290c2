"""
Shared pytest fixtures for provider tests.

Providers are built with default configuration; their network seam
(``_get_text``, ``_try_get_text``, ``_get_json``, ``_post_text``, ``_head_ok``)
is patched per test so nothing touches the network.
"""

import pytest

from aniprov.providers.animesroll import AnimesRollProvider
from aniprov.providers.darkmahou import DarkMahouProvider
from aniprov.providers.mangalivre import MangaLivreProvider
from aniprov.providers.q1n import Q1NProvider


@pytest.fixture
def darkmahou():
    return DarkMahouProvider()


@pytest.fixture
def q1n():
    return Q1NProvider()


@pytest.fixture
def animesroll():
    return AnimesRollProvider()


@pytest.fixture
def mangalivre():
    return MangaLivreProvider()


@pytest.fixture
def config_dir(tmp_path):
    """Empty configuration directory."""
    path = tmp_path / "config"
    path.mkdir()
    return path
