"""Localization settings."""

from typing import List, Optional

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class I18nSettings(InfrastructureSettings):
    """Locale loading and resolution configuration.

    Environment Variables:
        I18N_LOCALES: JSON list of locales to preload; the first one becomes
            the default locale (e.g. '["en", "de"]')
        I18N_DEFAULT_LOCALE: Default locale when no list is given (default: en)
        I18N_DIRECTORY: Directory holding dictionary files (default: ./locales)
        I18N_EXTENSION: Dictionary file suffix (default: .json)
        I18N_COOKIE_NAME: Cookie consulted by set_locale_from_cookie (default: lang)
        I18N_DEV_MODE: Bypass the locale cache and emit diagnostics
        I18N_SUBDOMAIN: Resolve the locale from the leading host label
        I18N_QUERY: Resolve the locale from the ``lang`` query parameter

    Example:
        ```python
        from infrastructure.services import get_settings

        i18n_settings = get_settings().i18n
        directory = i18n_settings.DIRECTORY
        ```
    """

    LOCALES: Optional[List[str]] = Field(default=None, alias="I18N_LOCALES")
    DEFAULT_LOCALE: str = Field(default="en", alias="I18N_DEFAULT_LOCALE")
    DIRECTORY: str = Field(default="./locales", alias="I18N_DIRECTORY")
    EXTENSION: str = Field(default=".json", alias="I18N_EXTENSION")
    COOKIE_NAME: Optional[str] = Field(default="lang", alias="I18N_COOKIE_NAME")
    DEV_MODE: bool = Field(default=False, alias="I18N_DEV_MODE")
    SUBDOMAIN: bool = Field(default=False, alias="I18N_SUBDOMAIN")
    QUERY: bool = Field(default=True, alias="I18N_QUERY")
