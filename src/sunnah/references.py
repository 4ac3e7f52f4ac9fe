"""Parsing of compact hadith references such as ``bukhari:1`` or ``muslim:1-5``."""

from __future__ import annotations

from typing import Dict, Optional

from sunnah.errors import ReferenceFormatError
from sunnah.models import Reference

# Keys are lowercased with spaces, dashes and underscores removed.
COLLECTION_ALIASES: Dict[str, str] = {
    "bukhari": "bukhari",
    "sahihbukhari": "bukhari",
    "muslim": "muslim",
    "sahihmuslim": "muslim",
    "abudawud": "abudawud",
    "abudawood": "abudawud",
    "tirmidhi": "tirmidhi",
    "tirmizi": "tirmidhi",
    "nasai": "nasai",
    "nisai": "nasai",
    "ibnmajah": "ibnmajah",
    "ibnmaja": "ibnmajah",
    "malik": "malik",
    "muwatta": "malik",
    "ahmad": "ahmad",
    "musnad": "ahmad",
    "darimi": "darimi",
    "riyadussalihin": "riyadussalihin",
    "riyadassalihin": "riyadussalihin",
    "bulughalmaram": "bulughalmaram",
    "adab": "adab",
    "adabalmufrad": "adab",
    "mishkat": "mishkat",
    "mishkatalmasabih": "mishkat",
    "shamail": "shamail",
    "shamailmuhammadiyah": "shamail",
    "nawawi": "nawawi40",
    "nawawi40": "nawawi40",
    "40nawawi": "nawawi40",
    "fortynawawi": "nawawi40",
    "qudsi": "qudsi40",
    "qudsi40": "qudsi40",
    "40qudsi": "qudsi40",
    "fortyqudsi": "qudsi40",
}


def resolve_collection_alias(name: str) -> str:
    key = name.lower().replace("-", "").replace("_", "").replace(" ", "")
    try:
        return COLLECTION_ALIASES[key]
    except KeyError:
        raise ReferenceFormatError(
            f"Unknown collection: '{name}'. Supported: bukhari, muslim, abudawud, "
            "tirmidhi, nasai, ibnmajah, malik, ahmad, darimi, riyadussalihin, nawawi, qudsi, etc."
        ) from None


def _parse_number(text: str, label: str) -> int:
    text = text.strip()
    if not text.isdecimal():
        raise ReferenceFormatError(f"Invalid {label}: '{text}'.")
    return int(text)


def parse_reference(reference: str) -> Reference:
    """Parse ``"<collection>:<n>"`` or ``"<collection>:<n>-<m>"``.

    Raises :class:`ReferenceFormatError` for anything else, including ranges
    whose end is before their start and non-positive numbers.
    """
    if not reference or reference.isspace():
        raise ReferenceFormatError("Hadith reference cannot be empty.")

    parts = reference.strip().split(":")
    if len(parts) != 2:
        raise ReferenceFormatError(
            f"Invalid hadith reference format: '{reference}'. "
            "Expected 'collection:number' or 'collection:start-end'."
        )

    collection_id = resolve_collection_alias(parts[0].strip())
    number_part = parts[1].strip()

    if "-" in number_part:
        bounds = number_part.split("-")
        if len(bounds) != 2:
            raise ReferenceFormatError(
                f"Invalid hadith range: '{number_part}'. Expected 'start-end'."
            )
        start = _parse_number(bounds[0], "start hadith number")
        end = _parse_number(bounds[1], "end hadith number")
        if start < 1:
            raise ReferenceFormatError(f"Invalid start hadith number: '{bounds[0]}'.")
        if end < start:
            raise ReferenceFormatError(
                f"Invalid end hadith number: '{bounds[1]}'. Must be >= start number."
            )
        return Reference(collection_id, start, end)

    number = _parse_number(number_part, "hadith number")
    if number < 1:
        raise ReferenceFormatError(f"Invalid hadith number: '{number_part}'.")
    return Reference(collection_id, number)


def try_parse_reference(reference: str) -> Optional[Reference]:
    """Like :func:`parse_reference` but returns None on malformed input."""
    try:
        return parse_reference(reference)
    except ReferenceFormatError:
        return None
