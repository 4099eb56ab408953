"""Process-wide cache of loaded locale dictionaries.

Entries are keyed by normalized dictionary location and written at most once
per location. Engines sharing one LocaleCache reuse each other's loads.
"""

from functools import lru_cache
from typing import Dict, Optional

from infrastructure.i18n.models import Dictionary


class LocaleCache:
    """Write-once mapping from dictionary location to Dictionary.

    The first writer for a location wins; later writes for the same location
    are no-ops. Concurrent first loads of one location therefore only cost
    redundant reads.

    Usage:
        cache = LocaleCache()
        cache.put("locales/en.json", {"Hello": "Hello"})
        cache.get("locales/en.json")
    """

    def __init__(self) -> None:
        self._entries: Dict[str, Dictionary] = {}

    def get(self, location: str) -> Optional[Dictionary]:
        """Get the cached dictionary for a location.

        Args:
            location: Normalized dictionary location.

        Returns:
            Cached Dictionary or None if the location was never loaded.
        """
        return self._entries.get(location)

    def put(self, location: str, dictionary: Dictionary) -> Dictionary:
        """Cache a dictionary unless the location is already cached.

        Args:
            location: Normalized dictionary location.
            dictionary: Loaded dictionary.

        Returns:
            The dictionary stored for the location (the existing one if an
            earlier writer won).
        """
        return self._entries.setdefault(location, dictionary)

    def clear(self) -> None:
        """Drop all cached dictionaries."""
        self._entries.clear()

    def __contains__(self, location: object) -> bool:
        return location in self._entries

    def __len__(self) -> int:
        return len(self._entries)


@lru_cache
def get_locale_cache() -> LocaleCache:
    """Get the application-scoped LocaleCache singleton.

    Engines constructed without an explicit cache share this instance. Tests
    inject a fresh LocaleCache instead, or call ``get_locale_cache.cache_clear()``.

    Returns:
        LocaleCache: Cached process-wide instance.
    """
    return LocaleCache()
