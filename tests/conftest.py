"""
Fixtures pytest partagees pour les tests Dynamic Library.

Ce module contient les fixtures communes utilisees dans les tests:
- Fabrique de Settings isolee de l'environnement et du fichier .env
- Mock de APICache (miss par defaut)
- Cache reel sur disque dans un repertoire temporaire
"""

import os
from pathlib import Path
from typing import Any, Callable, Iterator
from unittest.mock import AsyncMock

import pytest

from dynamic_library.adapters.api.cache import APICache
from dynamic_library.config import Settings


@pytest.fixture
def make_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Callable[..., Settings]:
    """
    Fabrique de Settings pour les tests.

    Ignore le fichier .env et les variables DYNLIB_ de l'environnement,
    et place le cache et les logs dans tmp_path.

    Usage:
        settings = make_settings(tmdb_api_key="key", language_mode="override")
    """
    for name in list(os.environ):
        if name.upper().startswith("DYNLIB_"):
            monkeypatch.delenv(name, raising=False)

    def factory(**overrides: Any) -> Settings:
        values: dict[str, Any] = {
            "cache_dir": tmp_path / "cache",
            "log_file": tmp_path / "logs" / "test.log",
            "plugin_configurations_path": tmp_path / "plugins",
        }
        values.update(overrides)
        return Settings(_env_file=None, **values)

    return factory


@pytest.fixture
def settings(make_settings: Callable[..., Settings]) -> Settings:
    """Settings avec toutes les sources configurees."""
    return make_settings(
        tmdb_api_key="tmdb_test_key",
        tvdb_api_key="tvdb_test_key",
        opensubtitles_api_key="os_test_key",
    )


@pytest.fixture
def mock_cache() -> AsyncMock:
    """Mock APICache : chaque lecture est un miss."""
    cache = AsyncMock(spec=APICache)
    cache.get.return_value = (None, False)
    return cache


@pytest.fixture
def api_cache(tmp_path: Path) -> Iterator[APICache]:
    """Cache reel dans un repertoire temporaire."""
    cache = APICache(cache_dir=str(tmp_path / "api_cache"))
    yield cache
    cache.close()
