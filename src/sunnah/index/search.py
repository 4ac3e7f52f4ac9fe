"""Substring search over loaded collections."""

from __future__ import annotations

from typing import Callable, Iterable, List

from sunnah.index.store import CollectionStore
from sunnah.models import Hadith, Language, SearchHit
from sunnah.utils.arabic import normalize_for_search


class SearchEngine:
    """Containment search on English, Arabic and preprocessed Arabic text.

    Hits keep collection order; cross-collection searches walk the catalog in
    declaration order and skip collections without data. Blank queries give
    no hits.
    """

    def __init__(self, store: CollectionStore) -> None:
        self.store = store

    def _collection_name(self, collection_id: str) -> str:
        info = self.store.catalog.by_id(collection_id)
        return info.english_name if info is not None else collection_id

    def _hit(self, item: Hadith, text: str, term: str, language: Language) -> SearchHit:
        return SearchHit(
            collection_id=item.collection_id,
            number=item.number,
            text=text,
            collection_name=self._collection_name(item.collection_id),
            chapter_name=item.chapter_name,
            matched_term=term,
            language=language,
        )

    def _match_english(self, term: str, candidates: Iterable[Hadith]) -> List[SearchHit]:
        needle = term.casefold()
        return [
            self._hit(item, item.english_text, term, Language.ENGLISH)
            for item in candidates
            if needle in item.english_text.casefold()
        ]

    def search_translated(self, term: str, collection_id: str) -> List[SearchHit]:
        """Case-insensitive match on the English translation."""
        if not term or term.isspace():
            return []
        return self._match_english(term, self.store.all_records(collection_id))

    def search_translated_in_chapter(
        self, term: str, collection_id: str, chapter_number: int
    ) -> List[SearchHit]:
        if not term or term.isspace():
            return []
        return self._match_english(
            term, self.store.records_in_chapter(collection_id, chapter_number)
        )

    def search_native(self, term: str, collection_id: str) -> List[SearchHit]:
        """Match Arabic text ignoring tashkeel and alef/hamza variants.

        Hits report the original vocalized text and the query as typed.
        """
        if not term or term.isspace():
            return []
        needle = normalize_for_search(term)
        if not needle:
            return []

        return [
            self._hit(item, item.arabic_text, term, Language.ARABIC)
            for item in self.store.all_records(collection_id)
            if needle in normalize_for_search(item.arabic_text)
        ]

    def search_preprocessed_native(self, term: str, collection_id: str) -> List[SearchHit]:
        """Exact substring match against the lemmatized Arabic text."""
        if not term or term.isspace():
            return []
        return [
            self._hit(item, item.preprocessed_text, term, Language.ARABIC)
            for item in self.store.all_records(collection_id)
            if term in item.preprocessed_text
        ]

    def _across_collections(
        self, term: str, search: Callable[[str, str], List[SearchHit]]
    ) -> List[SearchHit]:
        if not term or term.isspace():
            return []
        hits: List[SearchHit] = []
        for collection_id in self.store.available_collections():
            hits.extend(search(term, collection_id))
        return hits

    def search_all_collections(self, term: str) -> List[SearchHit]:
        return self._across_collections(term, self.search_translated)

    def search_all_collections_native(self, term: str) -> List[SearchHit]:
        return self._across_collections(term, self.search_native)

    def search_all_collections_preprocessed(self, term: str) -> List[SearchHit]:
        return self._across_collections(term, self.search_preprocessed_native)
