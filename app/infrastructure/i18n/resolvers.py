"""Request signal extraction and language negotiation.

Pure helpers that turn request data into locale candidates. None of them
touch engine state; the I18n engine decides whether a candidate is applied.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Mapping, Optional

LANGUAGE_TAG_PATTERN = re.compile(r"[a-z-]+", re.IGNORECASE)


def _lower_keys(values: Any) -> dict:
    if not values:
        return {}
    return {str(key).lower(): value for key, value in values.items()}


@dataclass(frozen=True)
class RequestSignals:
    """Locale-relevant data extracted from a request.

    Attributes:
        headers: Request headers with lowercased names.
        query: Query string parameters.
        cookies: Request cookies.
    """

    headers: Mapping[str, str] = field(default_factory=dict)
    query: Mapping[str, Any] = field(default_factory=dict)
    cookies: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_request(cls, request: Any) -> "RequestSignals":
        """Build signals from a request-like object.

        Accepts a RequestSignals, a mapping with ``headers``/``query``/``cookies``
        keys, a Starlette/FastAPI Request (``query_params``), or any object
        exposing ``headers``, ``query`` and ``cookies`` attributes.

        Args:
            request: Request-like object.

        Returns:
            RequestSignals instance.
        """
        if isinstance(request, RequestSignals):
            return request

        # Starlette requests are Mappings over the ASGI scope, check them first
        if hasattr(request, "query_params"):
            headers = request.headers
            query = request.query_params
            cookies = request.cookies
        elif isinstance(request, Mapping):
            headers = request.get("headers")
            query = request.get("query")
            cookies = request.get("cookies")
        else:
            headers = getattr(request, "headers", None)
            query = getattr(request, "query", None)
            cookies = getattr(request, "cookies", None)

        return cls(
            headers=_lower_keys(headers),
            query=dict(query or {}),
            cookies=dict(cookies or {}),
        )

    @property
    def host(self) -> Optional[str]:
        return self.headers.get("host")

    @property
    def accept_language(self) -> Optional[str]:
        return self.headers.get("accept-language")

    def query_param(self, name: str) -> Optional[str]:
        value = self.query.get(name)
        return value if isinstance(value, str) else None

    def cookie(self, name: Optional[str]) -> Optional[str]:
        if not name:
            return None
        value = self.cookies.get(name)
        return value if isinstance(value, str) else None


def normalize_locale(value: Optional[str]) -> Optional[str]:
    """Lowercase a locale candidate, mapping empty values to None.

    Args:
        value: Raw candidate (e.g. "DE").

    Returns:
        Lowercased candidate or None.
    """
    if not value:
        return None
    return value.strip().lower() or None


def parse_subdomain(host: Optional[str]) -> Optional[str]:
    """Extract the leading host label as a locale candidate.

    Args:
        host: Host header value (e.g. "de.example.com").

    Returns:
        Lowercased text before the first ".", or None for an empty host.
    """
    if not host:
        return None
    return normalize_locale(host.split(".", 1)[0])


def parse_accept_language(header: Optional[str]) -> List[str]:
    """Parse an Accept-Language header into ordered language tags.

    Quality weights are ignored; order of appearance is preference order.
    Entries that do not start with a language tag (e.g. "*") are skipped.

    Args:
        header: Header value (e.g. "de-CH,de;q=0.9,en;q=0.8").

    Returns:
        Lowercased tags in header order (e.g. ["de-ch", "de", "en"]).
    """
    if not header:
        return []

    tags = []
    for part in header.split(","):
        match = LANGUAGE_TAG_PATTERN.match(part.strip())
        if match:
            tags.append(match.group(0).lower())
    return tags


def negotiate_locale(
    tags: Iterable[str],
    known_locales: Iterable[str],
    default: Optional[str] = None,
) -> Optional[str]:
    """Pick the first tag that maps onto a known locale.

    Tags are examined in order; each one matches either exactly or through
    its primary subtag ("de-ch" -> "de"). The first tag that matches wins.

    Args:
        tags: Language tags in preference order.
        known_locales: Locales with loaded dictionaries.
        default: Returned when no tag matches.

    Returns:
        Matching known locale, or default.
    """
    known = set(known_locales)
    for tag in tags:
        if tag in known:
            return tag
        primary = tag.split("-", 1)[0]
        if primary != tag and primary in known:
            return primary
    return default
