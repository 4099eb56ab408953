"""Custom exceptions for the i18n system.

Source errors are raised by locale sources and reported by the engine; they
never reach callers of the translation operations.
"""


class I18nError(Exception):
    """Base exception for all i18n errors.

    Example:
        try:
            i18n = I18n({"locales": ["en"], "unknown": True})
        except I18nError as e:
            logger.error("i18n_error", error=str(e))
    """

    pass


class ConfigurationError(I18nError):
    """Raised when engine options are structurally invalid.

    Example:
        >>> I18n({"locale": "en"})
        Traceback (most recent call last):
        ...
        ConfigurationError: Invalid i18n configuration: ...
    """

    pass


class LocaleSourceError(I18nError):
    """Base for failures while loading a dictionary from a locale source.

    Attributes:
        location: Normalized dictionary location that failed.
    """

    def __init__(self, location: str, message: str):
        super().__init__(message)
        self.location = location


class SourceReadError(LocaleSourceError):
    """Raised when a dictionary file is missing or unreadable."""

    pass


class SourceParseError(LocaleSourceError):
    """Raised when dictionary content is not a valid key to message mapping."""

    pass
