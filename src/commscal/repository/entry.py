# SPDX-License-Identifier: MIT

import datetime
import logging
from copy import deepcopy
from pathlib import Path
from typing import Any, Optional, cast

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]

from commscal import configuration
from commscal.model.entry import Entry

logger = logging.getLogger(__name__)


class EntryRepository:
    """Read-only access to the communication entries stored in entries.yaml."""

    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = path
        self._entries: Optional[list[Entry]] = None
        self._loaded_path: Optional[Path] = None

    @property
    def path(self) -> Path:
        if self._path is not None:
            return self._path
        return configuration.DATA_ENTRIES_PATH

    @property
    def entries(self) -> list[Entry]:
        if self._entries is None or self._loaded_path != self.path:
            self.__load_data()
        if self._entries is None:
            raise ValueError()
        return self._entries

    def __load_data(self) -> None:
        logger.debug("loading entries from %s", self.path)
        raw_entries = load(self.path.read_text(), Loader=Loader)
        if raw_entries is None:
            raw_entries = []
        if not isinstance(raw_entries, list):
            raise ValueError(f"{self.path}: expected a list of entries")
        self._entries = [
            self.__convert_entry_for_deserialization(raw_entry)
            for raw_entry in raw_entries
        ]
        self._loaded_path = self.path
        logger.debug("loaded %d entries", len(self._entries))

    def __convert_entry_for_deserialization(self, entry: dict[str, Any]) -> Entry:
        # unquoted YAML timestamps arrive as datetime objects
        for field in ("start_date", "end_date", "created_at", "updated_at"):
            if isinstance(entry.get(field), datetime.date):
                entry[field] = entry[field].isoformat()
        if entry.get("id") is not None:
            entry["id"] = str(entry["id"])
        if isinstance(entry.get("category"), str):
            entry["category"] = [entry["category"]]
        return cast(Entry, entry)

    def get_all_entries(self) -> list[Entry]:
        return deepcopy(self.entries)

    def get_entry(self, id: str) -> Entry:
        matching_entries = [entry for entry in self.entries if entry.get("id") == id]
        if len(matching_entries) == 0:
            raise KeyError(f"no entry with id {id}")
        return deepcopy(matching_entries[0])


ENTRY_REPO = EntryRepository()
