"""Static catalog of the supported hadith collections."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Tuple

from sunnah.models import CollectionInfo

TOTAL_COLLECTIONS = 16
TOTAL_CORE_SIX = 6

# Declaration order is the order used by listings and cross-collection search.
COLLECTIONS: Tuple[CollectionInfo, ...] = (
    CollectionInfo("bukhari", "Sahih al-Bukhari", "صحيح البخاري", "Bukhari",
                   "Imam Muhammad al-Bukhari", 7563, 97, True, "bukhari"),
    CollectionInfo("muslim", "Sahih Muslim", "صحيح مسلم", "Muslim",
                   "Imam Muslim ibn al-Hajjaj", 7563, 56, True, "muslim"),
    CollectionInfo("abudawud", "Sunan Abu Dawud", "سنن أبي داود", "Abu Dawud",
                   "Imam Abu Dawud al-Sijistani", 5274, 43, True, "abudawud"),
    CollectionInfo("tirmidhi", "Jami at-Tirmidhi", "جامع الترمذي", "Tirmidhi",
                   "Imam al-Tirmidhi", 3956, 49, True, "tirmidhi"),
    CollectionInfo("nasai", "Sunan an-Nasa'i", "سنن النسائي", "Nasai",
                   "Imam an-Nasa'i", 5758, 51, True, "nasai"),
    CollectionInfo("ibnmajah", "Sunan Ibn Majah", "سنن ابن ماجه", "Ibn Majah",
                   "Imam Ibn Majah", 4341, 37, True, "ibnmajah"),
    CollectionInfo("malik", "Muwatta Malik", "موطأ مالك", "Malik",
                   "Imam Malik ibn Anas", 1832, 61, False, "malik"),
    CollectionInfo("ahmad", "Musnad Ahmad", "مسند أحمد", "Ahmad",
                   "Imam Ahmad ibn Hanbal", 28199, 6, False, "ahmad"),
    CollectionInfo("darimi", "Sunan ad-Darimi", "سنن الدارمي", "Darimi",
                   "Imam ad-Darimi", 3367, 23, False, "darimi"),
    CollectionInfo("riyadussalihin", "Riyad as-Salihin", "رياض الصالحين", "Riyad",
                   "Imam an-Nawawi", 1896, 19, False, "riyadussalihin"),
    CollectionInfo("bulughalmaram", "Bulugh al-Maram", "بلوغ المرام", "Bulugh",
                   "Ibn Hajar al-Asqalani", 1582, 16, False, "bulughalmaram"),
    CollectionInfo("adab", "Al-Adab Al-Mufrad", "الأدب المفرد", "Adab",
                   "Imam al-Bukhari", 1322, 57, False, "adab"),
    CollectionInfo("mishkat", "Mishkat al-Masabih", "مشكاة المصابيح", "Mishkat",
                   "al-Khatib al-Tabrizi", 6294, 30, False, "mishkat"),
    CollectionInfo("shamail", "Shama'il Muhammadiyah", "الشمائل المحمدية", "Shamail",
                   "Imam al-Tirmidhi", 396, 56, False, "shamail"),
    CollectionInfo("nawawi40", "40 Hadith Nawawi", "الأربعون النووية", "Nawawi",
                   "Imam an-Nawawi", 42, 1, False, "nawawi40"),
    CollectionInfo("qudsi40", "40 Hadith Qudsi", "الأحاديث القدسية", "Qudsi",
                   "Various", 40, 1, False, "qudsi40"),
)


class CollectionCatalog:
    """Immutable lookup over collection metadata."""

    def __init__(self, collections: Iterable[CollectionInfo]) -> None:
        self._collections: Tuple[CollectionInfo, ...] = tuple(collections)
        self._by_id: Dict[str, CollectionInfo] = {}
        self._by_name: Dict[str, CollectionInfo] = {}
        for info in self._collections:
            name_key = info.english_name.lower()
            if info.id in self._by_id:
                raise ValueError(f"Duplicate collection id: {info.id}")
            if name_key in self._by_name:
                raise ValueError(f"Duplicate collection name: {info.english_name}")
            self._by_id[info.id] = info
            self._by_name[name_key] = info

    def __len__(self) -> int:
        return len(self._collections)

    def __contains__(self, collection_id: object) -> bool:
        return collection_id in self._by_id

    def by_id(self, collection_id: str) -> Optional[CollectionInfo]:
        return self._by_id.get(collection_id)

    def by_name(self, english_name: str) -> Optional[CollectionInfo]:
        """Case-insensitive exact match on the English display name."""
        if not english_name:
            return None
        return self._by_name.get(english_name.strip().lower())

    def all(self) -> List[CollectionInfo]:
        return list(self._collections)

    def core_six(self) -> List[CollectionInfo]:
        """The Kutub al-Sittah, in declaration order."""
        return [info for info in self._collections if info.is_core_six]


CATALOG = CollectionCatalog(COLLECTIONS)
