"""Random and date-seeded hadith selection."""

from __future__ import annotations

import threading
from datetime import date, datetime, timezone
from typing import Sequence

import numpy as np

from sunnah.errors import ChapterUnavailable, CollectionUnavailable
from sunnah.index.store import CollectionStore
from sunnah.models import Hadith


def day_seed(day: date) -> int:
    """Integer seed for a calendar day, e.g. 2024-03-07 -> 20240307."""
    return day.year * 10000 + day.month * 100 + day.day


class RandomSelector:
    """Uniform draws share one generator guarded by a lock.

    ``record_of_day`` uses a fresh generator seeded from the date only, so it
    is deterministic and never touches the shared generator.
    """

    def __init__(self, store: CollectionStore, *, seed: int | None = None) -> None:
        self.store = store
        self._rng = np.random.default_rng(seed)
        self._lock = threading.Lock()

    def _next_index(self, size: int) -> int:
        with self._lock:
            return int(self._rng.integers(size))

    def _pick(self, items: Sequence[Hadith]) -> Hadith:
        return items[self._next_index(len(items))]

    def random_from_collection(self, collection_id: str) -> Hadith:
        items = self.store.all_records(collection_id)
        if not items:
            raise CollectionUnavailable(f"No hadith data available for {collection_id}.")
        return self._pick(items)

    def random_from_any(self) -> Hadith:
        available = self.store.available_collections()
        if not available:
            raise CollectionUnavailable("No hadith data is available in any collection.")
        collection_id = available[self._next_index(len(available))]
        return self.random_from_collection(collection_id)

    def random_from_chapter(self, collection_id: str, chapter_number: int) -> Hadith:
        items = self.store.records_in_chapter(collection_id, chapter_number)
        if not items:
            raise ChapterUnavailable(
                f"No hadith found in book {chapter_number} of {collection_id}."
            )
        return self._pick(items)

    def record_of_day(self, collection_id: str, day: date | None = None) -> Hadith:
        """Same collection and day always give the same hadith.

        Without ``day`` the current UTC date is used.
        """
        items = self.store.all_records(collection_id)
        if not items:
            raise CollectionUnavailable(f"No hadith data available for {collection_id}.")
        if day is None:
            day = datetime.now(timezone.utc).date()
        elif isinstance(day, datetime):
            day = day.date()

        rng = np.random.default_rng(day_seed(day))
        return items[int(rng.integers(len(items)))]
