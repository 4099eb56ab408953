"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_dictionaries,
    make_i18n,
    make_locale_source,
    make_request,
)

__all__ = [
    "make_dictionaries",
    "make_i18n",
    "make_locale_source",
    "make_request",
]
