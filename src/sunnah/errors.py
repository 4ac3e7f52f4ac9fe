"""Exceptions raised by the sunnah library."""

from __future__ import annotations


class SunnahError(Exception):
    """Base class for every library error."""


class CollectionNotFound(SunnahError):
    """Unknown collection identifier or name."""


class CollectionUnavailable(SunnahError):
    """The collection exists but has no hadith loaded."""


class ChapterUnavailable(SunnahError):
    """The chapter is absent or holds no hadith."""


class RecordNotFound(SunnahError):
    """A specific hadith number is absent from a collection."""


class ReferenceFormatError(SunnahError, ValueError):
    """Malformed reference string such as ``"bukhari:x"``."""


class DuplicateRecordError(SunnahError):
    """Two source records share a hadith number."""
