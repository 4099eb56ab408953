"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for common infrastructure dependencies.
"""

from typing import Annotated

from fastapi import Depends, Request

from infrastructure.configuration import Settings
from infrastructure.i18n import I18n, LocaleCache, TranslationHelpers
from infrastructure.i18n.factory import create_i18n
from infrastructure.services.providers import get_locale_cache, get_settings


def get_i18n(
    request: Request,
    settings: Annotated[Settings, Depends(get_settings)],
    cache: Annotated[LocaleCache, Depends(get_locale_cache)],
) -> I18n:
    """
    Get the request-scoped I18n engine.

    Reuses the engine LocaleMiddleware stored on ``request.state``; builds one
    from settings when the middleware is not installed.

    Returns:
        I18n: Engine resolved for the current request.
    """
    i18n = getattr(request.state, "i18n", None)
    if i18n is None:
        i18n = create_i18n(request=request, i18n_settings=settings.i18n, cache=cache)
        request.state.i18n = i18n
    return i18n


def get_translation_helpers(
    i18n: Annotated[I18n, Depends(get_i18n)],
) -> TranslationHelpers:
    """Get the translation helpers bound to the request-scoped engine."""
    return TranslationHelpers.from_engine(i18n)


# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# Process-wide locale dictionary cache
LocaleCacheDep = Annotated[LocaleCache, Depends(get_locale_cache)]

# Request-scoped engine
I18nDep = Annotated[I18n, Depends(get_i18n)]

# The four rendering helpers: translate_simple, translate_plural, get_locale,
# is_preferred_locale
TranslationHelpersDep = Annotated[TranslationHelpers, Depends(get_translation_helpers)]

__all__ = [
    "SettingsDep",
    "LocaleCacheDep",
    "I18nDep",
    "TranslationHelpersDep",
    "get_i18n",
    "get_translation_helpers",
]
