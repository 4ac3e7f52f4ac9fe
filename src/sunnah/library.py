"""High-level API over the catalog, store, search and selection layers."""

from __future__ import annotations

from collections import Counter
from datetime import date
from typing import Dict, List, Optional

from sunnah.catalog import TOTAL_COLLECTIONS, TOTAL_CORE_SIX
from sunnah.errors import ChapterUnavailable, CollectionNotFound, RecordNotFound
from sunnah.index.search import SearchEngine
from sunnah.index.selection import RandomSelector
from sunnah.index.store import CollectionStore, get_default_store
from sunnah.models import Chapter, CollectionInfo, Grade, Hadith, Reference, SearchHit
from sunnah.references import parse_reference
from sunnah.utils.text import total_words

AUTHENTIC_GRADES = frozenset({Grade.AUTHENTIC, Grade.AUTHENTIC_BY_SUPPORT})
GOOD_GRADES = frozenset({Grade.GOOD, Grade.AUTHENTIC_GOOD, Grade.GOOD_BY_SUPPORT})
WEAK_GRADES = frozenset({Grade.WEAK})


class HadithLibrary:
    """Named operations for browsing, looking up and searching hadith.

    Methods ending in ``_or_none`` return None for absent data; their
    counterparts raise a :class:`~sunnah.errors.SunnahError` subclass.
    """

    total_collections = TOTAL_COLLECTIONS
    total_core_six = TOTAL_CORE_SIX

    def __init__(
        self, store: CollectionStore | None = None, *, selector_seed: int | None = None
    ) -> None:
        self.store = store if store is not None else get_default_store()
        self.catalog = self.store.catalog
        self.searcher = SearchEngine(self.store)
        self.selector = RandomSelector(self.store, seed=selector_seed)

    # Collections

    def get_collection(self, collection_id: str) -> CollectionInfo:
        info = self.catalog.by_id(collection_id)
        if info is None:
            raise CollectionNotFound(f"Collection '{collection_id}' was not found.")
        return info

    def get_collection_or_none(self, collection_id: str) -> Optional[CollectionInfo]:
        return self.catalog.by_id(collection_id)

    def get_collection_by_name(self, english_name: str) -> CollectionInfo:
        if not english_name or english_name.isspace():
            raise ValueError("Collection name must not be empty")
        info = self.catalog.by_name(english_name)
        if info is None:
            raise CollectionNotFound(f"Collection with name '{english_name}' was not found.")
        return info

    def all_collections(self) -> List[CollectionInfo]:
        return self.catalog.all()

    def core_six(self) -> List[CollectionInfo]:
        return self.catalog.core_six()

    def is_available(self, collection_id: str) -> bool:
        return self.store.is_available(collection_id)

    # Chapters

    def chapters(self, collection_id: str) -> List[Chapter]:
        return list(self.store.chapters(collection_id))

    def get_chapter(self, collection_id: str, chapter_number: int) -> Chapter:
        chapter = self.store.chapter(collection_id, chapter_number)
        if chapter is None:
            raise ChapterUnavailable(
                f"Book {chapter_number} was not found in {collection_id}."
            )
        return chapter

    def get_chapter_or_none(self, collection_id: str, chapter_number: int) -> Optional[Chapter]:
        return self.store.chapter(collection_id, chapter_number)

    # Hadith

    def get_hadith(self, collection_id: str, number: int) -> Hadith:
        item = self.store.record(collection_id, number)
        if item is None:
            raise RecordNotFound(f"Hadith #{number} was not found in {collection_id}.")
        return item

    def get_hadith_or_none(self, collection_id: str, number: int) -> Optional[Hadith]:
        return self.store.record(collection_id, number)

    def all_hadith(self, collection_id: str) -> List[Hadith]:
        return list(self.store.all_records(collection_id))

    def hadith_in_chapter(self, collection_id: str, chapter_number: int) -> List[Hadith]:
        items = self.store.records_in_chapter(collection_id, chapter_number)
        if not items:
            # Raises when the chapter does not exist at all.
            self.get_chapter(collection_id, chapter_number)
        return list(items)

    def hadith_range(self, collection_id: str, start: int, end: int) -> List[Hadith]:
        return list(self.store.records_in_range(collection_id, start, end))

    def hadith_count(self, collection_id: str) -> int:
        return self.store.count(collection_id)

    def arabic_text_plain(self, collection_id: str, number: int) -> str:
        return self.get_hadith(collection_id, number).arabic_text_plain

    def preprocessed_text(self, collection_id: str, number: int) -> str:
        return self.get_hadith(collection_id, number).preprocessed_text

    # References

    def parse_reference(self, reference: str) -> Reference:
        return parse_reference(reference)

    def get_by_reference(self, reference: str) -> Hadith:
        parsed = parse_reference(reference)
        return self.get_hadith(parsed.collection_id, parsed.number)

    def get_range_by_reference(self, reference: str) -> List[Hadith]:
        parsed = parse_reference(reference)
        if parsed.end_number is not None:
            return self.hadith_range(parsed.collection_id, parsed.number, parsed.end_number)
        return [self.get_hadith(parsed.collection_id, parsed.number)]

    # Grades

    def hadith_by_grade(self, collection_id: str, grade: Grade) -> List[Hadith]:
        return [item for item in self.store.all_records(collection_id) if item.grade == grade]

    def _with_grades(self, collection_id: str, grades: frozenset) -> List[Hadith]:
        return [item for item in self.store.all_records(collection_id) if item.grade in grades]

    def authentic_hadith(self, collection_id: str) -> List[Hadith]:
        return self._with_grades(collection_id, AUTHENTIC_GRADES)

    def good_hadith(self, collection_id: str) -> List[Hadith]:
        return self._with_grades(collection_id, GOOD_GRADES)

    def weak_hadith(self, collection_id: str) -> List[Hadith]:
        return self._with_grades(collection_id, WEAK_GRADES)

    # Search

    def search(
        self, term: str, collection_id: str, chapter_number: int | None = None
    ) -> List[SearchHit]:
        if chapter_number is not None:
            return self.searcher.search_translated_in_chapter(term, collection_id, chapter_number)
        return self.searcher.search_translated(term, collection_id)

    def search_arabic(self, term: str, collection_id: str) -> List[SearchHit]:
        return self.searcher.search_native(term, collection_id)

    def search_preprocessed(self, term: str, collection_id: str) -> List[SearchHit]:
        return self.searcher.search_preprocessed_native(term, collection_id)

    def search_all(self, term: str) -> List[SearchHit]:
        return self.searcher.search_all_collections(term)

    def search_all_arabic(self, term: str) -> List[SearchHit]:
        return self.searcher.search_all_collections_native(term)

    def search_all_preprocessed(self, term: str) -> List[SearchHit]:
        return self.searcher.search_all_collections_preprocessed(term)

    # Random selection

    def random_hadith(
        self, collection_id: str | None = None, chapter_number: int | None = None
    ) -> Hadith:
        if collection_id is None:
            return self.selector.random_from_any()
        if chapter_number is not None:
            return self.selector.random_from_chapter(collection_id, chapter_number)
        return self.selector.random_from_collection(collection_id)

    def hadith_of_the_day(self, collection_id: str, day: date | None = None) -> Hadith:
        return self.selector.record_of_day(collection_id, day)

    # Statistics

    def word_count(self, collection_id: str) -> int:
        return total_words(item.english_text for item in self.store.all_records(collection_id))

    def arabic_word_count(self, collection_id: str) -> int:
        return total_words(item.arabic_text for item in self.store.all_records(collection_id))

    def grade_distribution(self, collection_id: str) -> Dict[Grade, int]:
        return dict(Counter(item.grade for item in self.store.all_records(collection_id)))
