"""Infrastructure modules for the request i18n library.

Centralized infrastructure components:
- configuration: Settings management (settings, I18nSettings)
- logging: Structured logging (get_module_logger, bind_request_context)
- i18n: Locale loading, resolution and translation (I18n, LocaleCache)
- services: Dependency injection services (SettingsDep, I18nDep, get_settings)
"""

# Configuration
from infrastructure.configuration import settings

# Logging
from infrastructure.logging import get_module_logger

# Internationalization
from infrastructure.i18n import I18n, LocaleCache, TranslationHelpers

# Dependency Injection Services
from infrastructure.services import (
    I18nDep,
    SettingsDep,
    TranslationHelpersDep,
    get_locale_cache,
    get_settings,
)

__all__ = [
    # Configuration
    "settings",
    # Logging
    "get_module_logger",
    # Internationalization
    "I18n",
    "LocaleCache",
    "TranslationHelpers",
    # Dependency Injection Services
    "I18nDep",
    "SettingsDep",
    "TranslationHelpersDep",
    "get_locale_cache",
    "get_settings",
]
