"""Lazy, thread-safe in-memory store of hadith collections."""

from __future__ import annotations

import logging
import threading
from functools import partial
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Tuple

from sunnah.catalog import CATALOG, CollectionCatalog
from sunnah.errors import DuplicateRecordError
from sunnah.grading import classify_grade
from sunnah.ingestion.json_source import (
    JsonRecordSource,
    RecordSource,
    int_field,
    normalize_keys,
    text_field,
)
from sunnah.models import Chapter, CollectionSnapshot, Hadith

LOGGER = logging.getLogger(__name__)


def build_hadith(collection_id: str, fields: Mapping[str, Any]) -> Hadith:
    """Create a :class:`Hadith` from a raw record with lowercased keys."""
    number = int_field(fields, "hadithNumber")
    if number < 1:
        raise ValueError(f"Invalid hadith number {number} in {collection_id}")

    grade_text = text_field(fields, "grade")
    return Hadith(
        collection_id=collection_id,
        number=number,
        arabic_text=text_field(fields, "arabicText"),
        arabic_text_plain=text_field(fields, "arabicTextNoTashkeel"),
        preprocessed_text=text_field(fields, "preprocessedText"),
        english_text=text_field(fields, "englishText"),
        chapter_number=int_field(fields, "bookNumber", default=0),
        chapter_name=text_field(fields, "bookName"),
        grade=classify_grade(grade_text),
        grade_text=grade_text,
        reference=text_field(fields, "reference"),
        in_book_reference=text_field(fields, "inBookReference"),
    )


def build_snapshot(collection_id: str, entries: Iterable[Mapping[str, Any]]) -> CollectionSnapshot:
    """Materialize a collection and its indices from raw records.

    Raises :class:`DuplicateRecordError` when two records share a number.
    """
    hadith: List[Hadith] = []
    by_number: Dict[int, Hadith] = {}
    by_chapter: Dict[int, List[Hadith]] = {}
    chapter_names: Dict[int, Tuple[str, str]] = {}

    for raw in entries:
        fields = normalize_keys(raw)
        item = build_hadith(collection_id, fields)
        if item.number in by_number:
            raise DuplicateRecordError(
                f"Hadith #{item.number} appears more than once in {collection_id}"
            )

        hadith.append(item)
        by_number[item.number] = item
        by_chapter.setdefault(item.chapter_number, []).append(item)
        chapter_names.setdefault(
            item.chapter_number, (item.chapter_name, text_field(fields, "bookArabicName"))
        )

    chapters: List[Chapter] = []
    for chapter_number in sorted(by_chapter):
        members = by_chapter[chapter_number]
        numbers = [item.number for item in members]
        english_name, arabic_name = chapter_names[chapter_number]
        chapters.append(
            Chapter(
                collection_id=collection_id,
                number=chapter_number,
                english_name=english_name,
                arabic_name=arabic_name,
                hadith_count=len(members),
                first_number=min(numbers),
                last_number=max(numbers),
            )
        )

    return CollectionSnapshot(
        collection_id=collection_id,
        hadith=tuple(hadith),
        by_number=MappingProxyType(by_number),
        by_chapter=MappingProxyType(
            {number: tuple(members) for number, members in by_chapter.items()}
        ),
        chapters=tuple(chapters),
        chapter_by_number=MappingProxyType({chapter.number: chapter for chapter in chapters}),
    )


class _SnapshotCell:
    """Runs its factory at most once; every caller sees the same result."""

    __slots__ = ("_factory", "_lock", "_snapshot")

    def __init__(self, factory: Callable[[], CollectionSnapshot]) -> None:
        self._factory = factory
        self._lock = threading.Lock()
        self._snapshot: Optional[CollectionSnapshot] = None

    def get(self) -> CollectionSnapshot:
        snapshot = self._snapshot
        if snapshot is None:
            with self._lock:
                snapshot = self._snapshot
                if snapshot is None:
                    snapshot = self._factory()
                    self._snapshot = snapshot
        return snapshot


class CollectionStore:
    """Loads each collection on first access and keeps it for the process lifetime.

    Loading never raises: an unknown collection, a missing data file or a
    corrupt one all produce an empty snapshot, so catalog browsing keeps
    working when record data is absent.
    """

    def __init__(
        self,
        source: RecordSource | None = None,
        catalog: CollectionCatalog = CATALOG,
    ) -> None:
        self.source = source if source is not None else JsonRecordSource()
        self.catalog = catalog
        self._cells: Dict[str, _SnapshotCell] = {}
        self._cells_lock = threading.Lock()

    def _cell(self, collection_id: str) -> _SnapshotCell:
        cell = self._cells.get(collection_id)
        if cell is None:
            with self._cells_lock:
                cell = self._cells.get(collection_id)
                if cell is None:
                    cell = _SnapshotCell(partial(self._load, collection_id))
                    self._cells[collection_id] = cell
        return cell

    def _load(self, collection_id: str) -> CollectionSnapshot:
        info = self.catalog.by_id(collection_id)
        if info is None:
            LOGGER.debug("Unknown collection %s, nothing to load", collection_id)
            return CollectionSnapshot.empty(collection_id)

        try:
            entries = self.source.load(info.resource_key)
            if not entries:
                LOGGER.debug("No hadith data provisioned for %s", collection_id)
                return CollectionSnapshot.empty(collection_id)
            snapshot = build_snapshot(collection_id, entries)
        except Exception:
            LOGGER.exception("Failed to load collection %s", collection_id)
            return CollectionSnapshot.empty(collection_id)

        LOGGER.info(
            "Loaded %s: %d hadith in %d chapters",
            collection_id,
            len(snapshot.hadith),
            len(snapshot.chapters),
        )
        return snapshot

    def get_snapshot(self, collection_id: str) -> CollectionSnapshot:
        return self._cell(collection_id).get()

    def record(self, collection_id: str, number: int) -> Optional[Hadith]:
        return self.get_snapshot(collection_id).by_number.get(number)

    def records_in_chapter(self, collection_id: str, chapter_number: int) -> Tuple[Hadith, ...]:
        return self.get_snapshot(collection_id).by_chapter.get(chapter_number, ())

    def records_in_range(self, collection_id: str, start: int, end: int) -> Tuple[Hadith, ...]:
        """Hadith numbered ``start..end`` inclusive, in collection order."""
        return tuple(
            item
            for item in self.get_snapshot(collection_id).hadith
            if start <= item.number <= end
        )

    def all_records(self, collection_id: str) -> Tuple[Hadith, ...]:
        return self.get_snapshot(collection_id).hadith

    def chapters(self, collection_id: str) -> Tuple[Chapter, ...]:
        return self.get_snapshot(collection_id).chapters

    def chapter(self, collection_id: str, chapter_number: int) -> Optional[Chapter]:
        return self.get_snapshot(collection_id).chapter_by_number.get(chapter_number)

    def is_available(self, collection_id: str) -> bool:
        return not self.get_snapshot(collection_id).is_empty

    def count(self, collection_id: str) -> int:
        return len(self.get_snapshot(collection_id).hadith)

    def available_collections(self) -> List[str]:
        """Ids of catalog collections that hold data, in declaration order."""
        return [info.id for info in self.catalog.all() if self.is_available(info.id)]


_DEFAULT_STORE: CollectionStore | None = None
_DEFAULT_STORE_LOCK = threading.Lock()


def get_default_store() -> CollectionStore:
    """Process-wide store backed by the packaged sample corpus."""
    global _DEFAULT_STORE
    with _DEFAULT_STORE_LOCK:
        if _DEFAULT_STORE is None:
            _DEFAULT_STORE = CollectionStore()
        return _DEFAULT_STORE
