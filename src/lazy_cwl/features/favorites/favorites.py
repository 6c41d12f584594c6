"""Favorites and recent searches backed by the local config store."""

from __future__ import annotations

import logging

from ...core.errors import NotFoundError
from ...core.store import MAX_RECENT_SEARCHES, ConfigStore

logger = logging.getLogger(__name__)


class FavoritesService:
    """Keyword aliases for log groups, plus the recent filter pattern history."""

    def __init__(self, store: ConfigStore) -> None:
        self.store = store

    def add(self, keyword: str, log_group: str) -> None:
        """Add or overwrite a favorite."""
        if not keyword.strip():
            raise ValueError("Keyword cannot be empty")
        if not log_group.strip():
            raise ValueError("Log group name cannot be empty")
        favorites = self.store.get_favorites()
        favorites[keyword] = log_group
        self.store.set_favorites(favorites)
        logger.debug("Added favorite %s -> %s", keyword, log_group)

    def remove(self, keyword: str) -> None:
        favorites = self.store.get_favorites()
        if keyword not in favorites:
            raise NotFoundError(keyword)
        del favorites[keyword]
        self.store.set_favorites(favorites)

    def resolve(self, keyword: str) -> str:
        """Return the log group for a favorite keyword or raise NotFoundError."""
        log_group = self.store.get_favorites().get(keyword)
        if not log_group:
            raise NotFoundError(keyword)
        return log_group

    def resolve_or_passthrough(self, name: str) -> str:
        """Treat `name` as a favorite keyword if one exists, otherwise as a log group name."""
        return self.store.get_favorites().get(name) or name

    def list_favorites(self) -> dict[str, str]:
        return self.store.get_favorites()

    def save_recent_search(self, pattern: str) -> list[str]:
        """Move `pattern` to the front of the history, dropping duplicates and the oldest overflow."""
        recent = self.store.get_recent_searches()
        updated = [pattern, *(search for search in recent if search != pattern)][:MAX_RECENT_SEARCHES]
        self.store.set_recent_searches(updated)
        return updated

    def list_recent_searches(self) -> list[str]:
        return self.store.get_recent_searches()
