"""Feature-level fixtures for i18n system tests.

Provides YAML dictionary files and in-memory sources for locale loading
and resolution scenarios.
"""

import pytest
import yaml

from tests.factories.i18n import make_locale_source


@pytest.fixture
def temp_yaml_locales_dir(tmp_path):
    """Create a directory with YAML dictionary files (en.yml, fr.yml)."""
    en = {"Hello": "Hello", "%s apple": {"one": "%s apple", "other": "%s apples"}}
    fr = {"Hello": "Bonjour", "%s apple": {"one": "%s pomme", "other": "%s pommes"}}
    with open(tmp_path / "en.yml", "w", encoding="utf-8") as f:
        yaml.dump(en, f)
    with open(tmp_path / "fr.yml", "w", encoding="utf-8") as f:
        yaml.dump(fr, f, allow_unicode=True)
    return tmp_path


@pytest.fixture
def locale_source():
    """In-memory source serving the sample en/de dictionaries."""
    return make_locale_source()


@pytest.fixture
def accept_language_headers():
    """Collection of Accept-Language headers for testing."""
    return {
        "simple_de": "de",
        "region_de": "de-CH",
        "with_quality": "de-CH,de;q=0.9,en;q=0.8",
        "unknown_first": "fr-FR,fr;q=0.9,en-US;q=0.8",
        "wildcard": "*,de;q=0.5",
        "uppercase": "DE-AT",
    }
