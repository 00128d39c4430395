from __future__ import annotations

import json
import os
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

from ..errors import HistoryError
from ..export import iso_timestamp, utc_now
from ..logger import get_logger
from ..models import HistoryEntry

logger = get_logger(__name__)

MAX_HISTORY_ITEMS = 10
PREVIEW_LENGTH = 100


def make_entry(text: str, results: Dict[str, Any], moment: datetime, entry_id: int) -> HistoryEntry:
    stripped = text.strip()
    preview = text[:PREVIEW_LENGTH] + ('...' if len(text) > PREVIEW_LENGTH else '')
    return HistoryEntry(
        id=entry_id,
        timestamp=iso_timestamp(moment),
        text=text,
        text_preview=preview,
        results=results,
        word_count=len(stripped.split()),
        char_count=len(text),
    )


class HistoryStore:
    """Most-recent-first list of past analyses persisted as a JSON array."""

    def __init__(self, path: str, max_items: int = MAX_HISTORY_ITEMS):
        self.path = path
        self.max_items = max_items
        self._entries: List[HistoryEntry] = self._load()

    def _load(self) -> List[HistoryEntry]:
        if not os.path.exists(self.path):
            return []
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                raw = json.load(f)
            return [HistoryEntry.from_dict(item) for item in raw][:self.max_items]
        except (OSError, ValueError, TypeError, KeyError) as e:
            logger.warning("Error loading history from %s: %s", self.path, e)
            return []

    def _save(self, entries: List[HistoryEntry]) -> None:
        directory = os.path.dirname(self.path)
        try:
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self.path, 'w', encoding='utf-8') as f:
                json.dump([entry.to_dict() for entry in entries], f, indent=2, ensure_ascii=False)
        except (OSError, TypeError) as e:
            raise HistoryError(f"Failed to save history to {self.path}: {e}") from e

    def entries(self) -> List[HistoryEntry]:
        return list(self._entries)

    def __len__(self):
        return len(self._entries)

    def add(self, text: str, results: Dict[str, Any],
            clock: Optional[Callable[[], datetime]] = None) -> HistoryEntry:
        moment = (clock or utc_now)()
        entry_id = int(moment.timestamp() * 1000)
        if self._entries and entry_id <= self._entries[0].id:
            # two saves within the same millisecond still get distinct ids
            entry_id = self._entries[0].id + 1
        entry = make_entry(text, results, moment, entry_id)
        updated = ([entry] + self._entries)[:self.max_items]
        # memory only changes once the file has been written
        self._save(updated)
        self._entries = updated
        return entry

    def get(self, entry_id: int) -> Optional[HistoryEntry]:
        for entry in self._entries:
            if entry.id == entry_id:
                return entry
        return None

    def delete(self, entry_id: int) -> bool:
        remaining = [entry for entry in self._entries if entry.id != entry_id]
        if len(remaining) == len(self._entries):
            return False
        self._save(remaining)
        self._entries = remaining
        return True

    def clear(self) -> None:
        self._save([])
        self._entries = []
