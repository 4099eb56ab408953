"""Fixtures for server module unit tests."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from infrastructure.configuration import I18nSettings
from infrastructure.services import I18nDep, TranslationHelpersDep
from server.i18n_middleware import install_i18n


@pytest.fixture
def i18n_settings(temp_locales_dir):
    """I18nSettings pointing at the temporary en/de dictionaries."""
    return I18nSettings(
        I18N_LOCALES=["en", "de"],
        I18N_DIRECTORY=str(temp_locales_dir),
    )


@pytest.fixture
def localized_app(i18n_settings, locale_cache):
    """FastAPI application with LocaleMiddleware and a few localized routes."""
    app = FastAPI()
    install_i18n(app, i18n_settings=i18n_settings, cache=locale_cache)

    @app.get("/greeting")
    def greeting(translations: TranslationHelpersDep, name: str = "World") -> dict:
        return {
            "locale": translations.get_locale(),
            "text": translations.translate_simple("Hello %s", name),
            "preferred": translations.is_preferred_locale(),
        }

    @app.get("/cats/{count}")
    def cats(count: int, translations: TranslationHelpersDep) -> dict:
        return {"text": translations.translate_plural("%s cat", "%s cats", count)}

    @app.get("/engine")
    def engine(i18n: I18nDep) -> dict:
        return {"locales": i18n.known_locales(), "pref_locale": i18n.pref_locale}

    return app


@pytest.fixture
def client(localized_app):
    with TestClient(localized_app) as test_client:
        yield test_client
