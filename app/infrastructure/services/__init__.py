"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from infrastructure.services.dependencies import (
    SettingsDep,
    LocaleCacheDep,
    I18nDep,
    TranslationHelpersDep,
)
from infrastructure.services.providers import (
    get_settings,
    get_locale_cache,
)

__all__ = [
    "SettingsDep",
    "LocaleCacheDep",
    "I18nDep",
    "TranslationHelpersDep",
    "get_settings",
    "get_locale_cache",
]
