"""Loading of raw hadith records from JSON files.

Each collection is a JSON array stored as ``<resource_key>.json``, either in
a user supplied directory or in the ``sunnah.resources`` package.
"""

from __future__ import annotations

import json
import logging
from importlib.resources import files
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Protocol

LOGGER = logging.getLogger(__name__)

RESOURCE_PACKAGE = "sunnah.resources"


class RecordSource(Protocol):
    """Provider of raw record field sets for a collection."""

    def load(self, resource_key: str) -> Optional[List[Mapping[str, Any]]]:
        """Return the records in source order, or None when none are provisioned."""
        ...


class JsonRecordSource:
    """Read ``<resource_key>.json`` arrays from a directory or the package."""

    def __init__(self, data_dir: Path | None = None) -> None:
        self.data_dir = Path(data_dir) if data_dir is not None else None

    def _read_text(self, resource_key: str) -> Optional[str]:
        file_name = f"{resource_key}.json"
        if self.data_dir is not None:
            path = self.data_dir / file_name
            if not path.is_file():
                return None
            return path.read_text(encoding="utf-8")

        resource = files(RESOURCE_PACKAGE).joinpath(file_name)
        if not resource.is_file():
            return None
        return resource.read_text(encoding="utf-8")

    def load(self, resource_key: str) -> Optional[List[Mapping[str, Any]]]:
        text = self._read_text(resource_key)
        if text is None:
            LOGGER.debug("No data file for %s", resource_key)
            return None

        entries = json.loads(text)
        if not isinstance(entries, list):
            raise ValueError(f"{resource_key}.json must hold a JSON array")
        return entries


def text_field(raw: Mapping[str, Any], name: str) -> str:
    """Read a text field; absent or null becomes an empty string."""
    value = raw.get(name.lower())
    return "" if value is None else str(value)


def int_field(raw: Mapping[str, Any], name: str, default: Optional[int] = None) -> int:
    """Read an integer field.

    Absent or null values fall back to ``default``; without one the field
    is required.
    """
    value = raw.get(name.lower())
    if isinstance(value, bool):
        raise ValueError(f"Integer field '{name}' holds a boolean")
    if value is None:
        if default is None:
            raise ValueError(f"Record is missing integer field '{name}'")
        return default
    return int(value)


def normalize_keys(raw: Mapping[str, Any]) -> Dict[str, Any]:
    """Lowercase field names so lookups ignore the source's key casing."""
    return {str(key).lower(): value for key, value in raw.items()}
