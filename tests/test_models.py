"""Tests for core data models."""

from __future__ import annotations

from dataclasses import FrozenInstanceError, replace

import pytest

from sunnah.models import Chapter, CollectionSnapshot, Grade, Hadith, Language, SearchHit


def _hadith(**overrides) -> Hadith:
    values = dict(
        collection_id="bukhari",
        number=1,
        arabic_text="إِنَّمَا الأَعْمَالُ",
        arabic_text_plain="إنما الأعمال",
        preprocessed_text="عمل",
        english_text="Deeds are judged by intentions.",
        chapter_number=1,
        chapter_name="Revelation",
        grade=Grade.AUTHENTIC,
        grade_text="Sahih",
        reference="Sahih al-Bukhari 1",
        in_book_reference="Book 1, Hadith 1",
    )
    values.update(overrides)
    return Hadith(**values)


class TestHadith:
    """Test Hadith dataclass."""

    def test_equality(self) -> None:
        """Should compare hadith by value."""
        assert _hadith() == _hadith()
        assert _hadith() != _hadith(number=2)

    def test_frozen(self) -> None:
        """Records are immutable."""
        item = _hadith()
        with pytest.raises(FrozenInstanceError):
            item.number = 5  # type: ignore[misc]

    def test_replace(self) -> None:
        item = replace(_hadith(), grade=Grade.WEAK)
        assert item.grade == Grade.WEAK
        assert item.number == 1

    def test_str_preview(self) -> None:
        """Long translations are cut in the preview."""
        assert str(_hadith()) == "[bukhari #1] Deeds are judged by intentions."
        long_text = "word " * 40
        preview = str(_hadith(english_text=long_text))
        assert preview.endswith("...")
        assert len(preview) == len("[bukhari #1] ") + 83


class TestChapter:
    """Test Chapter bounds."""

    def test_contains(self) -> None:
        chapter = Chapter("bukhari", 2, "Belief", "", 2, 8, 58)
        assert 8 in chapter
        assert 58 in chapter
        assert 30 in chapter
        assert 7 not in chapter
        assert 59 not in chapter
        assert "8" not in chapter


class TestGrade:
    """Test Grade enum."""

    def test_string_values(self) -> None:
        """Grades serialize as their lowercase value."""
        assert Grade.AUTHENTIC == "sahih"
        assert Grade("hasan_sahih") is Grade.AUTHENTIC_GOOD
        assert Grade.UNKNOWN.value == "unknown"

    def test_language_values(self) -> None:
        assert Language.ARABIC.value == "arabic"
        assert Language("english") is Language.ENGLISH


class TestCollectionSnapshot:
    """Test CollectionSnapshot defaults."""

    def test_empty(self) -> None:
        snapshot = CollectionSnapshot.empty("malik")
        assert snapshot.collection_id == "malik"
        assert snapshot.is_empty
        assert snapshot.hadith == ()
        assert snapshot.chapters == ()
        assert dict(snapshot.by_number) == {}

    def test_mappings_are_read_only(self) -> None:
        snapshot = CollectionSnapshot.empty("malik")
        with pytest.raises(TypeError):
            snapshot.by_number[1] = _hadith()  # type: ignore[index]


class TestSearchHit:
    def test_fields(self) -> None:
        hit = SearchHit("muslim", 3, "text", "Sahih Muslim", "Faith", "term", Language.ENGLISH)
        assert hit.collection_name == "Sahih Muslim"
        assert hit.language is Language.ENGLISH
