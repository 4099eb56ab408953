"""i18n system - locale resolution and translation.

Resolves the locale of a request from its subdomain, query string, cookie and
Accept-Language header, and translates message keys with auto-registration,
plural selection and positional substitution.

Main components:
- models: I18nOptions, Dictionary, PluralForms
- cache: LocaleCache shared by engines in one process
- loader: LocaleSource, FileLocaleSource, DictLocaleSource
- resolvers: RequestSignals and pure request parsing
- translator: I18n engine
- service: TranslationHelpers for the rendering layer
"""

from infrastructure.i18n.cache import LocaleCache, get_locale_cache
from infrastructure.i18n.exceptions import (
    ConfigurationError,
    I18nError,
    LocaleSourceError,
    SourceParseError,
    SourceReadError,
)
from infrastructure.i18n.loader import (
    DictLocaleSource,
    FileLocaleSource,
    LocaleSource,
    locate_file,
)
from infrastructure.i18n.models import Dictionary, I18nOptions, PluralForms
from infrastructure.i18n.resolvers import (
    RequestSignals,
    negotiate_locale,
    parse_accept_language,
    parse_subdomain,
)
from infrastructure.i18n.service import TranslationHelpers
from infrastructure.i18n.translator import I18n

__all__ = [
    "I18n",
    "I18nOptions",
    "Dictionary",
    "PluralForms",
    "LocaleCache",
    "get_locale_cache",
    "LocaleSource",
    "FileLocaleSource",
    "DictLocaleSource",
    "locate_file",
    "RequestSignals",
    "parse_subdomain",
    "parse_accept_language",
    "negotiate_locale",
    "TranslationHelpers",
    "I18nError",
    "ConfigurationError",
    "LocaleSourceError",
    "SourceReadError",
    "SourceParseError",
]
