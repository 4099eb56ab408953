"""Factory functions for creating i18n components.

Builds engines from the application settings so callers only supply the
request.
"""

from typing import Any, Optional

from infrastructure.configuration import I18nSettings, settings
from infrastructure.i18n.cache import LocaleCache
from infrastructure.i18n.loader import LocaleSource
from infrastructure.i18n.models import I18nOptions
from infrastructure.i18n.translator import I18n


def options_from_settings(
    i18n_settings: I18nSettings,
    request: Any = None,
) -> I18nOptions:
    """Build engine options from I18nSettings.

    Args:
        i18n_settings: Localization settings section.
        request: Optional request-like object.

    Returns:
        I18nOptions populated from settings.
    """
    return I18nOptions(
        locales=i18n_settings.LOCALES,
        default_locale=i18n_settings.DEFAULT_LOCALE,
        directory=i18n_settings.DIRECTORY,
        extension=i18n_settings.EXTENSION,
        cookie_name=i18n_settings.COOKIE_NAME,
        dev_mode=i18n_settings.DEV_MODE,
        subdomain=i18n_settings.SUBDOMAIN,
        query=i18n_settings.QUERY,
        request=request,
    )


def create_i18n(
    request: Any = None,
    i18n_settings: Optional[I18nSettings] = None,
    cache: Optional[LocaleCache] = None,
    source: Optional[LocaleSource] = None,
) -> I18n:
    """Create an I18n engine configured from settings.

    Args:
        request: Request-like object to resolve the locale from.
        i18n_settings: Localization settings (default: application settings).
        cache: LocaleCache to share (default: application-scoped cache).
        source: LocaleSource to read dictionaries with (default: files).

    Returns:
        I18n: Configured engine.

    Usage:
        i18n = create_i18n(request=request)
        i18n.translate_simple("Hello")
    """
    if i18n_settings is None:
        i18n_settings = settings.i18n

    return I18n(
        options_from_settings(i18n_settings, request=request),
        cache=cache,
        source=source,
    )
