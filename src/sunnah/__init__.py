"""Read-only access to the major hadith collections."""

__version__ = "0.1.0"
