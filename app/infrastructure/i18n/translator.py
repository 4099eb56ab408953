"""Per-request translation engine.

Resolves the active locale from request signals and translates message keys
with auto-registration of missing keys, count-driven plural selection and
positional substitution.
"""

from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import ValidationError

from infrastructure.i18n.cache import LocaleCache, get_locale_cache
from infrastructure.i18n.exceptions import (
    ConfigurationError,
    LocaleSourceError,
    SourceParseError,
)
from infrastructure.i18n.formatting import is_plural_count, vsprintf
from infrastructure.i18n.loader import FileLocaleSource, LocaleSource, locate_file
from infrastructure.i18n.models import (
    Dictionary,
    I18nOptions,
    Message,
    is_plural,
    make_plural,
)
from infrastructure.i18n.resolvers import (
    RequestSignals,
    negotiate_locale,
    normalize_locale,
    parse_accept_language,
    parse_subdomain,
)
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class I18n:
    """Translation engine bound to one request or session.

    Construction preloads the configured locales (through the shared
    LocaleCache unless in development mode), activates the default locale and,
    when a request is supplied, applies the subdomain and query signals and
    records the client's preferred locale.

    Attributes:
        options: Validated I18nOptions.
        locales: Translation store mapping locale to Dictionary.
        locale: Active locale.
        pref_locale: Locale implied by Accept-Language, if a request was given.
        request: RequestSignals extracted from the request, if any.

    Usage:
        i18n = I18n({"locales": ["en", "de"], "directory": "./locales"})
        i18n.translate_simple("Hello %s", "World")
        i18n.translate_plural("%s cat", "%s cats", 3)
    """

    version = "0.5.0"

    def __init__(
        self,
        options: Union[I18nOptions, Mapping[str, Any], None] = None,
        cache: Optional[LocaleCache] = None,
        source: Optional[LocaleSource] = None,
    ):
        """Initialize the engine.

        Args:
            options: I18nOptions or a mapping of option names to values.
            cache: Shared LocaleCache (default: application-scoped cache).
            source: LocaleSource used to read dictionaries (default: files).

        Raises:
            ConfigurationError: If options contain unknown or ill-typed keys.
        """
        self.options = self._validate_options(options)

        self.cache = cache if cache is not None else get_locale_cache()
        self.source = source or FileLocaleSource()

        self.default_locale = self.options.effective_default_locale
        self.directory = self.options.directory
        self.extension = self.options.extension
        self.cookie_name = self.options.cookie_name
        self.dev_mode = self.options.dev_mode

        self.locales: Dict[str, Dictionary] = {}
        self.locale: Optional[str] = None
        self.pref_locale: Optional[str] = None
        self.request: Optional[RequestSignals] = None

        for locale in self.options.locales or []:
            self.load_locale(locale)

        self.set_locale(self.default_locale)

        if self.default_locale not in self.locales:
            logger.error(
                "invalid_default_locale",
                default_locale=self.default_locale,
                directory=self.directory,
            )

        if self.options.request is not None:
            self.request = RequestSignals.from_request(self.options.request)

            if self.options.subdomain:
                self.set_locale_from_subdomain()

            if self.options.query:
                self.set_locale_from_query()

            self.pref_locale = self.preferred_locale()

    @staticmethod
    def _validate_options(
        options: Union[I18nOptions, Mapping[str, Any], None],
    ) -> I18nOptions:
        if isinstance(options, I18nOptions):
            return options
        try:
            return I18nOptions.model_validate(dict(options or {}))
        except ValidationError as e:
            raise ConfigurationError(f"Invalid i18n configuration: {e}") from e

    # Loading

    def locate_file(self, locale: str) -> str:
        """Normalized dictionary location for a locale."""
        return locate_file(self.directory, locale, self.extension)

    def load_locale(self, locale: str) -> None:
        """Populate the store entry for a locale.

        Adopts the cached dictionary when available (outside development
        mode), otherwise reads it from the locale source. Read and parse
        failures are logged and leave the entry absent. Never replaces an
        entry that already exists.

        Args:
            locale: Locale identifier to load.
        """
        if locale in self.locales:
            return

        location = self.locate_file(locale)

        if not self.dev_mode:
            cached = self.cache.get(location)
            if cached is not None:
                logger.debug("loaded_from_cache", locale=locale, location=location)
                self.init_locale(locale, cached)
                return

        try:
            dictionary = self.source.load(location)
        except LocaleSourceError as e:
            event = (
                "locale_source_parse_failed"
                if isinstance(e, SourceParseError)
                else "locale_source_read_failed"
            )
            logger.error(event, locale=locale, location=location, error=str(e))
            return

        logger.debug("loaded_locale", locale=locale, location=location)
        self.init_locale(locale, dictionary)

    def init_locale(self, locale: str, dictionary: Dictionary) -> None:
        """Set a store entry and write it through to the cache.

        No-op if the locale is already populated. Outside development mode the
        cache keeps the first dictionary written for a location, and the store
        adopts that one so every engine shares it.

        Args:
            locale: Locale identifier.
            dictionary: Dictionary to adopt.
        """
        if locale in self.locales:
            return

        if not self.dev_mode:
            dictionary = self.cache.put(self.locate_file(locale), dictionary)

        self.locales[locale] = dictionary

    def known_locales(self) -> List[str]:
        """List locales with a populated dictionary."""
        return list(self.locales.keys())

    def has_locale(self, locale: Optional[str]) -> bool:
        return locale is not None and locale in self.locales

    # Translation

    def translate(
        self,
        locale: Optional[str],
        singular: Optional[str],
        plural: Optional[str] = None,
    ) -> Message:
        """Resolve a key in a locale, registering it when missing.

        Unknown or empty locales fall back to the default locale, which gets
        an empty dictionary if it was never loaded. A missing key is stored
        with its own text as translation (a plural pair when ``plural`` is
        given) and is returned from then on.

        Args:
            locale: Locale to translate into.
            singular: Translation key; None yields "".
            plural: Plural text used when registering a missing key.

        Returns:
            Stored message: a string or a {one, other} pair.
        """
        if singular is None:
            return ""

        if not locale or locale not in self.locales:
            if self.dev_mode:
                logger.warning(
                    "no_locale_found_using_default",
                    requested_locale=locale,
                    default_locale=self.default_locale,
                )
            locale = self.default_locale
            self.locales.setdefault(locale, {})

        dictionary = self.locales[locale]

        if singular not in dictionary:
            if self.dev_mode:
                logger.warning("translation_key_missing", key=singular, locale=locale)
            dictionary.setdefault(
                singular, make_plural(singular, plural) if plural else singular
            )

        return dictionary[singular]

    def translate_simple(self, key: Optional[str], *args: Any) -> str:
        """Translate a key in the active locale and substitute arguments.

        Args:
            key: Translation key (the source text).
            *args: Positional arguments for %s / %d placeholders.

        Returns:
            Translated, formatted string.
        """
        message = self.translate(self.locale, key)
        if is_plural(message):
            message = message["one"]

        if args:
            message = vsprintf(message, args)

        return message

    def translate_plural(
        self,
        singular: Optional[str],
        plural: Optional[str],
        count: Any,
        *args: Any,
    ) -> str:
        """Translate a key with count-driven plural selection.

        The "other" form is selected iff the integer parse of ``count`` is
        greater than one. The count is substituted first, then any further
        arguments in a second pass.

        Args:
            singular: Singular key (the source text).
            plural: Plural source text, used when registering the key.
            count: Count; unparseable values select the singular form.
            *args: Arguments for a second substitution pass.

        Returns:
            Translated, formatted string.
        """
        message = self.translate(self.locale, singular, plural)

        if is_plural(message):
            form = message["other"] if is_plural_count(count) else message["one"]
        else:
            form = message

        result = vsprintf(form, [count], keep_escapes=bool(args))

        if args:
            result = vsprintf(result, args)

        return result

    # Locale resolution

    def get_locale(self) -> Optional[str]:
        """Get the active locale."""
        return self.locale

    def set_locale(self, locale: Optional[str]) -> Optional[str]:
        """Set the active locale.

        Unknown locales are replaced by the default locale. An empty value
        leaves the active locale unchanged.

        Args:
            locale: Locale to activate (already normalized).

        Returns:
            The active locale.
        """
        if not locale:
            return self.locale

        if locale not in self.locales:
            if self.dev_mode:
                logger.warning(
                    "locale_not_found",
                    locale=locale,
                    default_locale=self.default_locale,
                )
            locale = self.default_locale

        self.locale = locale
        return self.locale

    def _signals(self, request: Any = None) -> Optional[RequestSignals]:
        if request is not None:
            return RequestSignals.from_request(request)
        return self.request

    def _apply_candidate(self, candidate: Optional[str], source: str) -> None:
        if not candidate or candidate not in self.locales:
            return

        if self.dev_mode:
            logger.debug("locale_overridden", source=source, locale=candidate)

        self.set_locale(candidate)

    def set_locale_from_query(self, request: Any = None) -> None:
        """Apply the ``lang`` query parameter when it names a known locale.

        Args:
            request: Request-like object (default: construction request).
        """
        signals = self._signals(request)
        if signals is None:
            return
        self._apply_candidate(normalize_locale(signals.query_param("lang")), "query")

    def set_locale_from_subdomain(self, request: Any = None) -> None:
        """Apply the leading host label when it names a known locale.

        Args:
            request: Request-like object (default: construction request).
        """
        signals = self._signals(request)
        if signals is None:
            return
        self._apply_candidate(parse_subdomain(signals.host), "subdomain")

    def set_locale_from_cookie(self, request: Any = None) -> None:
        """Apply the configured cookie when it names a known locale.

        Args:
            request: Request-like object (default: construction request).
        """
        signals = self._signals(request)
        if signals is None:
            return
        self._apply_candidate(
            normalize_locale(signals.cookie(self.cookie_name)), "cookie"
        )

    def preferred_locale(self, request: Any = None) -> Optional[str]:
        """Compute the locale implied by the Accept-Language header.

        Does not change the active locale.

        Args:
            request: Request-like object (default: construction request).

        Returns:
            First header tag matching a known locale (exactly or by primary
            subtag), the default locale when none matches, or None without a
            request.
        """
        signals = self._signals(request)
        if signals is None:
            return None

        return negotiate_locale(
            parse_accept_language(signals.accept_language),
            self.locales,
            default=self.default_locale,
        )

    def is_preferred_locale(self) -> bool:
        """Check whether the active locale is the client's preferred one.

        Returns:
            True when no preferred locale was computed or it equals the
            active locale.
        """
        return not self.pref_locale or self.pref_locale == self.get_locale()
