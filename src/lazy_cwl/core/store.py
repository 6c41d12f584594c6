"""Local JSON store for favorites and recent searches."""

from __future__ import annotations

import contextlib
import json
import logging
import tempfile
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigStoreError

logger = logging.getLogger(__name__)

MAX_RECENT_SEARCHES = 10


class StoreSchema(BaseModel):
    """On-disk layout of the store file."""

    model_config = ConfigDict(populate_by_name=True)

    favorites: dict[str, str] = Field(default_factory=dict)
    recent_searches: list[str] = Field(default_factory=list, alias="recentSearches")

    @field_validator("favorites")
    @classmethod
    def _keywords_not_empty(cls, value: dict[str, str]) -> dict[str, str]:
        if any(not keyword.strip() for keyword in value):
            raise ValueError("favorite keywords cannot be empty")
        return value

    @field_validator("recent_searches")
    @classmethod
    def _cap_recent_searches(cls, value: list[str]) -> list[str]:
        return value[:MAX_RECENT_SEARCHES]


class ConfigStore:
    """Whole-value reads and atomic writes of the store file.

    Each accessor reads the file fresh and each setter rewrites it, so a
    single CLI invocation never works from stale data.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def load(self) -> StoreSchema:
        if not self.path.exists():
            return StoreSchema()
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
            return StoreSchema.model_validate(raw)
        except (OSError, json.JSONDecodeError, ValidationError) as e:
            raise ConfigStoreError(f"Could not read config store {self.path}: {e}") from e

    def save(self, data: StoreSchema) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = data.model_dump(by_alias=True)

        with tempfile.NamedTemporaryFile(
            mode="w", dir=self.path.parent, prefix="config_", suffix=".tmp", delete=False, encoding="utf-8"
        ) as tmp_file:
            temp_path = Path(tmp_file.name)
            try:
                json.dump(payload, tmp_file, indent=2, ensure_ascii=False)
                tmp_file.flush()
            except Exception as e:
                with contextlib.suppress(Exception):
                    temp_path.unlink()
                raise ConfigStoreError(f"Could not write config store {self.path}: {e}") from e

        temp_path.replace(self.path)
        logger.debug("Saved config store to %s", self.path)

    def get_favorites(self) -> dict[str, str]:
        return dict(self.load().favorites)

    def set_favorites(self, favorites: dict[str, str]) -> None:
        data = self.load()
        self.save(data.model_copy(update={"favorites": dict(favorites)}))

    def get_recent_searches(self) -> list[str]:
        return list(self.load().recent_searches)

    def set_recent_searches(self, searches: list[str]) -> None:
        data = self.load()
        self.save(data.model_copy(update={"recent_searches": list(searches)[:MAX_RECENT_SEARCHES]}))
