"""Core sunnah data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Tuple


class Grade(str, Enum):
    """Authenticity grade assigned to a hadith."""

    UNKNOWN = "unknown"
    AUTHENTIC = "sahih"
    GOOD = "hasan"
    WEAK = "daif"
    AUTHENTIC_GOOD = "hasan_sahih"
    AUTHENTIC_BY_SUPPORT = "sahih_li_ghayrihi"
    GOOD_BY_SUPPORT = "hasan_li_ghayrihi"
    FABRICATED = "mawdu"


class Language(str, Enum):
    ARABIC = "arabic"
    ENGLISH = "english"


@dataclass(frozen=True, slots=True)
class CollectionInfo:
    """Static metadata describing one hadith collection."""

    id: str
    english_name: str
    arabic_name: str
    short_name: str
    author: str
    total_hadith: int
    total_chapters: int
    is_core_six: bool
    resource_key: str

    def __str__(self) -> str:
        return (
            f"{self.english_name} ({self.arabic_name}) - "
            f"{self.total_hadith} hadith in {self.total_chapters} books"
        )


@dataclass(frozen=True, slots=True)
class Hadith:
    """A single hadith with its Arabic text, translation and grading."""

    collection_id: str
    number: int
    arabic_text: str
    arabic_text_plain: str
    preprocessed_text: str
    english_text: str
    chapter_number: int
    chapter_name: str
    grade: Grade
    grade_text: str
    reference: str
    in_book_reference: str

    def __str__(self) -> str:
        preview = self.english_text
        if len(preview) > 80:
            preview = preview[:80] + "..."
        return f"[{self.collection_id} #{self.number}] {preview}"


@dataclass(frozen=True, slots=True)
class Chapter:
    """A numbered book within a collection, derived from its hadith."""

    collection_id: str
    number: int
    english_name: str
    arabic_name: str
    hadith_count: int
    first_number: int
    last_number: int

    def __contains__(self, number: object) -> bool:
        return isinstance(number, int) and self.first_number <= number <= self.last_number


@dataclass(frozen=True, slots=True)
class Reference:
    """Parsed ``collection:number`` or ``collection:start-end`` reference."""

    collection_id: str
    number: int
    end_number: int | None = None

    @property
    def is_range(self) -> bool:
        return self.end_number is not None

    def __str__(self) -> str:
        if self.end_number is None:
            return f"{self.collection_id}:{self.number}"
        return f"{self.collection_id}:{self.number}-{self.end_number}"


@dataclass(frozen=True, slots=True)
class SearchHit:
    """One hadith matched by a search."""

    collection_id: str
    number: int
    text: str
    collection_name: str
    chapter_name: str
    matched_term: str
    language: Language


@dataclass(frozen=True, slots=True)
class CollectionSnapshot:
    """Materialized, read-only state of one collection.

    ``hadith`` keeps source order. The mappings are read-only views and the
    sequences are tuples, so a snapshot can be shared between threads.
    """

    collection_id: str
    hadith: Tuple[Hadith, ...] = ()
    by_number: Mapping[int, Hadith] = field(default_factory=lambda: MappingProxyType({}))
    by_chapter: Mapping[int, Tuple[Hadith, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    chapters: Tuple[Chapter, ...] = ()
    chapter_by_number: Mapping[int, Chapter] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @classmethod
    def empty(cls, collection_id: str) -> "CollectionSnapshot":
        return cls(collection_id=collection_id)

    @property
    def is_empty(self) -> bool:
        return not self.hadith
