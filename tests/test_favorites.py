"""Tests for favorites and recent searches."""

import pytest

from lazy_cwl.core.errors import NotFoundError
from lazy_cwl.features.favorites.favorites import FavoritesService


@pytest.fixture
def favorites(store):
    return FavoritesService(store)


def test_add_then_resolve_returns_log_group(favorites):
    favorites.add("api", "/aws/lambda/production-api-service")

    assert favorites.resolve("api") == "/aws/lambda/production-api-service"


def test_remove_then_resolve_raises_not_found(favorites):
    favorites.add("api", "/aws/lambda/production-api-service")
    favorites.remove("api")

    with pytest.raises(NotFoundError, match='No favorite found with keyword "api"'):
        favorites.resolve("api")


def test_add_overwrites_existing_keyword(favorites):
    favorites.add("api", "/aws/lambda/old")
    favorites.add("api", "/aws/lambda/new")

    assert favorites.list_favorites() == {"api": "/aws/lambda/new"}


def test_add_rejects_blank_keyword(favorites):
    with pytest.raises(ValueError, match="Keyword cannot be empty"):
        favorites.add("  ", "/aws/lambda/api")


def test_remove_unknown_keyword_raises_not_found(favorites):
    with pytest.raises(NotFoundError) as exc_info:
        favorites.remove("missing")

    assert exc_info.value.keyword == "missing"
    assert exc_info.value.exit_code == 1


def test_resolve_or_passthrough(favorites):
    favorites.add("api", "/aws/lambda/api")

    assert favorites.resolve_or_passthrough("api") == "/aws/lambda/api"
    assert favorites.resolve_or_passthrough("/ecs/web") == "/ecs/web"


def test_save_recent_search_puts_newest_first(favorites):
    favorites.save_recent_search("ERROR")
    favorites.save_recent_search("timeout")

    assert favorites.list_recent_searches() == ["timeout", "ERROR"]


def test_save_existing_recent_search_moves_it_to_front(favorites, store):
    initial = [f"pattern-{i}" for i in range(1, 11)]
    store.set_recent_searches(initial)

    updated = favorites.save_recent_search("pattern-5")

    assert len(updated) == 10
    assert updated[0] == "pattern-5"
    assert updated.count("pattern-5") == 1
    assert favorites.list_recent_searches() == updated


def test_save_new_recent_search_drops_oldest(favorites, store):
    store.set_recent_searches([f"pattern-{i}" for i in range(1, 11)])

    updated = favorites.save_recent_search("new")

    assert len(updated) == 10
    assert updated[0] == "new"
    assert "pattern-10" not in updated
