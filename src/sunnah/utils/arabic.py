"""Arabic text normalization used for loose matching.

Both the indexed text and the query go through the same functions, so a
query typed without tashkeel still finds a fully vocalized hadith.
"""

from __future__ import annotations

import re

# Inclusive code point ranges of the marks removed by ``strip_diacritics``:
# quranic annotation signs, harakat with shadda and sukun, superscript alef,
# small high/low quranic marks and the isolated presentation forms.
DIACRITIC_RANGES: tuple[tuple[int, int], ...] = (
    (0x0610, 0x061A),
    (0x064B, 0x0655),
    (0x0670, 0x0670),
    (0x06D6, 0x06ED),
    (0xFE70, 0xFE7F),
)

# Alef with madda, hamza above, hamza below, and alef wasla.
ALEF_VARIANTS = "آأإٱ"
ALEF = "ا"

_DIACRITICS = re.compile(
    "[" + "".join(f"\\u{start:04X}-\\u{end:04X}" for start, end in DIACRITIC_RANGES) + "]"
)
_ALEF_VARIANTS = re.compile(f"[{ALEF_VARIANTS}]")


def is_diacritic_mark(char: str) -> bool:
    """Return True if ``char`` is one of the stripped diacritical marks."""
    code = ord(char)
    return any(start <= code <= end for start, end in DIACRITIC_RANGES)


def strip_diacritics(text: str) -> str:
    """Remove tashkeel and quranic annotation marks."""
    if not text:
        return text
    return _DIACRITICS.sub("", text)


def fold_letter_variants(text: str) -> str:
    """Map the hamza and madda forms of alef to a bare alef."""
    if not text:
        return text
    return _ALEF_VARIANTS.sub(ALEF, text)


def normalize_for_search(text: str) -> str:
    """Canonical comparison form: no diacritics, folded alef, trimmed.

    Empty and whitespace-only input is returned unchanged.
    """
    if not text or text.isspace():
        return text
    return fold_letter_variants(strip_diacritics(text)).strip()
