import sys
from pathlib import Path

# Ensure the application package root is on sys.path so importing application
# modules (e.g. `infrastructure.i18n`) works during pytest collection.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import json

import pytest

from infrastructure.i18n import LocaleCache, get_locale_cache
from infrastructure.services.providers import get_settings
from tests.factories.i18n import make_dictionaries


@pytest.fixture(autouse=True)
def reset_application_singletons():
    """Drop the process-wide cache and settings between tests."""
    get_locale_cache.cache_clear()
    get_settings.cache_clear()
    yield
    get_locale_cache.cache_clear()
    get_settings.cache_clear()


@pytest.fixture
def locale_cache():
    """Fresh LocaleCache isolated from the application-scoped one."""
    return LocaleCache()


@pytest.fixture
def temp_locales_dir(tmp_path):
    """Create a directory with JSON dictionary files.

    Returns a directory structure like:
    - en.json
    - de.json
    """
    for locale, content in make_dictionaries().items():
        with open(tmp_path / f"{locale}.json", "w", encoding="utf-8") as f:
            json.dump(content, f)
    return tmp_path
