"""Tests for infrastructure.i18n.cache module."""

from infrastructure.i18n import LocaleCache, get_locale_cache


class TestLocaleCache:
    """Tests for LocaleCache."""

    def test_get_missing_location(self):
        """get() returns None for a location never written."""
        cache = LocaleCache()
        assert cache.get("locales/en.json") is None
        assert "locales/en.json" not in cache

    def test_put_then_get(self):
        """put() stores a dictionary retrievable by location."""
        cache = LocaleCache()
        dictionary = {"Hello": "Hallo"}

        stored = cache.put("locales/de.json", dictionary)

        assert stored is dictionary
        assert cache.get("locales/de.json") is dictionary
        assert "locales/de.json" in cache
        assert len(cache) == 1

    def test_put_first_writer_wins(self):
        """put() keeps the first dictionary written for a location."""
        cache = LocaleCache()
        first = {"Hello": "Hallo"}
        second = {"Hello": "Servus"}

        cache.put("locales/de.json", first)
        stored = cache.put("locales/de.json", second)

        assert stored is first
        assert cache.get("locales/de.json") == {"Hello": "Hallo"}

    def test_clear(self):
        """clear() drops every entry."""
        cache = LocaleCache()
        cache.put("locales/en.json", {})
        cache.put("locales/de.json", {})

        cache.clear()

        assert len(cache) == 0


class TestGetLocaleCache:
    """Tests for the application-scoped cache provider."""

    def test_returns_same_instance(self):
        """get_locale_cache() is a process-wide singleton."""
        assert get_locale_cache() is get_locale_cache()

    def test_cache_clear_creates_new_instance(self):
        """cache_clear() resets the singleton for tests."""
        first = get_locale_cache()
        get_locale_cache.cache_clear()
        assert get_locale_cache() is not first
