"""Translation models for the i18n system.

Defines the dictionary value shapes and the enumerated engine configuration.
"""

from typing import Any, Dict, List, Optional, TypedDict, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PluralForms(TypedDict):
    """Count-driven pair of messages.

    Attributes:
        one: Message used when the count is not greater than one.
        other: Message used when the count is greater than one.
    """

    one: str
    other: str


Message = Union[str, PluralForms]

# Translation key -> plain message or plural pair
Dictionary = Dict[str, Message]


def make_plural(one: str, other: str) -> PluralForms:
    """Build a PluralForms pair.

    Args:
        one: Singular text.
        other: Plural text.

    Returns:
        PluralForms mapping.
    """
    return PluralForms(one=one, other=other)


def is_plural(message: Any) -> bool:
    """Check whether a stored message is a PluralForms pair.

    Args:
        message: Stored dictionary value.

    Returns:
        True if the value is a mapping with string ``one`` and ``other``.
    """
    return (
        isinstance(message, dict)
        and isinstance(message.get("one"), str)
        and isinstance(message.get("other"), str)
    )


class I18nOptions(BaseModel):
    """Enumerated constructor configuration for the I18n engine.

    Unknown keys are rejected. Both snake_case names and the camelCase aliases
    (``defaultLocale``, ``cookieName``, ``devMode``) are accepted.

    Attributes:
        locales: Ordered locales to preload; the first becomes the default.
        default_locale: Default locale when ``locales`` is not given.
        extension: Dictionary file suffix.
        directory: Root directory holding dictionary files.
        cookie_name: Cookie consulted by ``set_locale_from_cookie``.
        dev_mode: Bypass the locale cache and emit diagnostics.
        subdomain: Apply the host subdomain signal at construction.
        query: Apply the ``lang`` query signal at construction.
        request: Request-like object supplying headers, query and cookies.
    """

    model_config = ConfigDict(
        extra="forbid",
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )

    locales: Optional[List[str]] = None
    default_locale: str = Field(default="en", alias="defaultLocale")
    extension: str = ".json"
    directory: str = "./locales"
    cookie_name: Optional[str] = Field(default="lang", alias="cookieName")
    dev_mode: bool = Field(default=False, alias="devMode")
    subdomain: bool = False
    query: bool = True
    request: Any = None

    @field_validator("locales")
    @classmethod
    def _lowercase_locales(cls, value: Optional[List[str]]) -> Optional[List[str]]:
        if value is None:
            return value
        return [locale.lower() for locale in value]

    @field_validator("default_locale")
    @classmethod
    def _lowercase_default(cls, value: str) -> str:
        return value.lower()

    @property
    def effective_default_locale(self) -> str:
        """Default locale after applying the ``locales`` list rule.

        Returns:
            First entry of ``locales`` when given, else ``default_locale``.
        """
        if self.locales:
            return self.locales[0]
        return self.default_locale
