"""Shared fixtures for the sunnah test-suite."""

from __future__ import annotations

from collections import Counter
from typing import Any, Dict, List, Mapping, Optional

import pytest

from sunnah.index.store import CollectionStore


def make_raw(
    number: int,
    *,
    chapter: Optional[int] = 1,
    english: str = "",
    arabic: str = "",
    preprocessed: str = "",
    grade: Optional[str] = "Sahih",
    book_name: Optional[str] = None,
    book_arabic_name: str = "",
) -> Dict[str, Any]:
    """Build a raw record in the JSON source format."""
    return {
        "hadithNumber": number,
        "arabicText": arabic,
        "arabicTextNoTashkeel": arabic,
        "preprocessedText": preprocessed,
        "englishText": english or f"Text of hadith {number}",
        "bookNumber": chapter,
        "bookName": book_name if book_name is not None else f"Book {chapter}",
        "bookArabicName": book_arabic_name,
        "grade": grade,
        "reference": f"Test {number}",
        "inBookReference": f"Book {chapter}, Hadith {number}",
    }


class FakeSource:
    """In-memory record source that counts loads per resource key."""

    def __init__(self, data: Mapping[str, Optional[List[Dict[str, Any]]]]) -> None:
        self.data = dict(data)
        self.calls: Counter[str] = Counter()

    def load(self, resource_key: str) -> Optional[List[Dict[str, Any]]]:
        self.calls[resource_key] += 1
        return self.data.get(resource_key)


BUKHARI_RECORDS = [
    make_raw(
        1,
        chapter=1,
        english="Deeds are judged by intentions.",
        arabic="إِنَّمَا الأَعْمَالُ بِالنِّيَّاتِ",
        preprocessed="عمل نية",
        book_name="Revelation",
        book_arabic_name="كتاب بدء الوحى",
    ),
    make_raw(
        8,
        chapter=2,
        english="Islam is built on five, including establishing the PRAYER.",
        arabic="بُنِيَ الإِسْلاَمُ عَلَى خَمْسٍ وَإِقَامِ الصَّلاَةِ",
        preprocessed="بنى اسلام خمس اقام صلاة",
        book_name="Belief",
    ),
    make_raw(
        527,
        chapter=9,
        english="The dearest deed is prayer at its time.",
        arabic="الصَّلاَةُ عَلَى وَقْتِهَا",
        preprocessed="صلاة وقت",
        grade="Hasan",
        book_name="Times of the Prayers",
    ),
    make_raw(
        9,
        chapter=2,
        english="Faith has over sixty branches.",
        arabic="الإِيمَانُ بِضْعٌ وَسِتُّونَ شُعْبَةً",
        preprocessed="ايمان بضع ستون شعبة",
        grade="Da'if",
        book_name="Belief",
    ),
    make_raw(
        2,
        chapter=1,
        english="Revelation came like the ringing of a bell.",
        arabic="مِثْلَ صَلْصَلَةِ الْجَرَسِ",
        preprocessed="مثل صلصلة جرس",
        grade=None,
        book_name="Revelation",
    ),
]

MUSLIM_RECORDS = [
    make_raw(number, chapter=1, english=f"Muslim hadith {number} about faith")
    for number in range(1, 8)
] + [
    make_raw(650, chapter=5, english="Prayer in congregation is better.", arabic="صَلاَةُ الْجَمَاعَةِ"),
]


@pytest.fixture
def fake_source() -> FakeSource:
    return FakeSource({"bukhari": BUKHARI_RECORDS, "muslim": MUSLIM_RECORDS})


@pytest.fixture
def store(fake_source: FakeSource) -> CollectionStore:
    return CollectionStore(fake_source)
