"""Locale source interface and implementations.

A locale source turns a normalized dictionary location into a Dictionary or
fails with SourceReadError / SourceParseError.
"""

import json
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from infrastructure.i18n.exceptions import SourceParseError, SourceReadError
from infrastructure.i18n.models import Dictionary, is_plural
from infrastructure.logging import get_module_logger

logger = get_module_logger()

YAML_SUFFIXES = frozenset({".yml", ".yaml"})


def locate_file(directory: str, locale: str, extension: str) -> str:
    """Compute the normalized dictionary location for a locale.

    Args:
        directory: Dictionary root directory.
        locale: Locale identifier.
        extension: Dictionary file suffix (e.g. ".json").

    Returns:
        Normalized path string, e.g. "locales/en.json".
    """
    return os.path.normpath(f"{directory}/{locale}{extension}")


def validate_dictionary(location: str, data: Any) -> Dictionary:
    """Check that parsed content is a key to message mapping.

    Args:
        location: Location the data was read from (for error reporting).
        data: Parsed file content.

    Returns:
        The data as a Dictionary.

    Raises:
        SourceParseError: If the content is not a mapping of string keys to
            strings or {one, other} pairs.
    """
    if not isinstance(data, dict):
        raise SourceParseError(
            location,
            f"Expected a mapping in {location}, got {type(data).__name__}",
        )

    for key, value in data.items():
        if not isinstance(key, str):
            raise SourceParseError(location, f"Non-string key {key!r} in {location}")
        if not isinstance(value, str) and not is_plural(value):
            raise SourceParseError(
                location,
                f"Invalid message for key {key!r} in {location}: "
                "expected a string or a mapping with 'one' and 'other'",
            )

    return data


class LocaleSource(ABC):
    """Abstract base for locale sources.

    Implementations must define how a dictionary is read for a location.
    """

    @abstractmethod
    def load(self, location: str) -> Dictionary:
        """Load the dictionary stored at a location.

        Args:
            location: Normalized dictionary location.

        Returns:
            Dictionary with loaded messages.

        Raises:
            SourceReadError: If the location is missing or unreadable.
            SourceParseError: If the content is malformed.
        """
        pass


class FileLocaleSource(LocaleSource):
    """Reads dictionaries from JSON or YAML files.

    Files ending in .yml/.yaml are parsed with ``yaml.safe_load``; every other
    suffix is parsed as JSON.
    """

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def load(self, location: str) -> Dictionary:
        path = Path(location)
        try:
            with open(path, "r", encoding=self.encoding) as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise SourceReadError(
                location, f"Unable to read file {location}: {e}"
            ) from e

        if path.suffix.lower() in YAML_SUFFIXES:
            try:
                data = yaml.safe_load(content)
            except yaml.YAMLError as e:
                raise SourceParseError(
                    location, f"Failed to parse {location}: {e}"
                ) from e
        else:
            try:
                data = json.loads(content)
            except json.JSONDecodeError as e:
                raise SourceParseError(
                    location,
                    f"Unable to parse locales from file (maybe {location} "
                    f"is empty or invalid json?): {e}",
                ) from e

        dictionary = validate_dictionary(location, data)
        logger.debug("read_locale_file", location=location, key_count=len(dictionary))
        return dictionary


class DictLocaleSource(LocaleSource):
    """Serves dictionaries held in memory, keyed by location.

    Each successful load returns a fresh copy. ``reads`` counts load calls per
    location, which makes cache behavior observable.

    Attributes:
        dictionaries: Mapping of location to Dictionary content.
        reads: Number of load() calls per location.
    """

    def __init__(self, dictionaries: Optional[Mapping[str, Any]] = None):
        self.dictionaries: Dict[str, Any] = {
            os.path.normpath(location): content
            for location, content in (dictionaries or {}).items()
        }
        self.reads: Dict[str, int] = {}

    def load(self, location: str) -> Dictionary:
        self.reads[location] = self.reads.get(location, 0) + 1

        if location not in self.dictionaries:
            raise SourceReadError(location, f"No dictionary registered for {location}")

        data = self.dictionaries[location]
        if isinstance(data, dict):
            data = dict(data)
        return validate_dictionary(location, data)
