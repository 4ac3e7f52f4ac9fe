"""Heuristic mapping of free-text grade labels to :class:`Grade`.

Labels come from several graders and are not normalized ("Sahih",
"Hasan Sahih (Darussalam)", "Da'if Jiddan", ...). ``GRADE_RULES`` is
evaluated top to bottom and the first keyword contained in the lowercased
label wins. The order is part of the contract: combined and "by support"
grades contain the plain keywords ("hasan sahih" contains "sahih") and must
be tested first, and fabricated wins over everything because labels such as
"Da'if / Mawdu'" name the harsher verdict too.
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

from sunnah.models import Grade

GRADE_RULES: Sequence[Tuple[str, Grade]] = (
    ("mawdu", Grade.FABRICATED),
    ("fabricat", Grade.FABRICATED),
    ("موضوع", Grade.FABRICATED),
    ("hasan sahih", Grade.AUTHENTIC_GOOD),
    ("hasan/sahih", Grade.AUTHENTIC_GOOD),
    ("حسن صحيح", Grade.AUTHENTIC_GOOD),
    ("sahih li ghayrihi", Grade.AUTHENTIC_BY_SUPPORT),
    ("sahih lighairihi", Grade.AUTHENTIC_BY_SUPPORT),
    ("صحيح لغيره", Grade.AUTHENTIC_BY_SUPPORT),
    ("hasan li ghayrihi", Grade.GOOD_BY_SUPPORT),
    ("hasan lighairihi", Grade.GOOD_BY_SUPPORT),
    ("حسن لغيره", Grade.GOOD_BY_SUPPORT),
    ("sahih", Grade.AUTHENTIC),
    ("صحيح", Grade.AUTHENTIC),
    ("hasan", Grade.GOOD),
    ("حسن", Grade.GOOD),
    ("da'if", Grade.WEAK),
    ("daif", Grade.WEAK),
    ("da`if", Grade.WEAK),
    ("weak", Grade.WEAK),
    ("ضعيف", Grade.WEAK),
)


def classify_grade(label: Optional[str]) -> Grade:
    """Return the grade named by ``label``, or ``Grade.UNKNOWN``."""
    if not label or label.isspace():
        return Grade.UNKNOWN

    lowered = label.strip().lower()
    for keyword, grade in GRADE_RULES:
        if keyword in lowered:
            return grade
    return Grade.UNKNOWN
