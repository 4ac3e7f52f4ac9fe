"""Application configuration defaults."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


def _get_default_data_dir() -> Path | None:
    """Get the default collection data directory.

    When running from a checkout that holds a local ``data/collections``
    directory, prefer it. Otherwise return None, which selects the sample
    corpus shipped inside the package.
    """
    local_dir = Path("data/collections")
    if local_dir.is_dir():
        return local_dir
    return None


@dataclass(slots=True)
class AppConfig:
    data_dir: Path | None = None
    search_limit: int = 50

    def __post_init__(self) -> None:
        if self.data_dir is None:
            self.data_dir = _get_default_data_dir()

    def resolve_data_dir(self, base_dir: Path | None = None) -> Path | None:
        if self.data_dir is None:
            return None
        if Path(self.data_dir).is_absolute() or base_dir is None:
            return Path(self.data_dir)
        return base_dir / self.data_dir
