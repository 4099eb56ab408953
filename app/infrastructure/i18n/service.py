"""Translation helpers handed to the rendering layer.

Exposes exactly the four per-request operations templates and views need,
without giving them the rest of the engine.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from infrastructure.i18n.translator import I18n


@dataclass(frozen=True)
class TranslationHelpers:
    """Capability object bound to one I18n engine.

    Usage:
        # In a FastAPI route
        @router.get("/")
        def index(translations: TranslationHelpersDep):
            return {"greeting": translations.translate_simple("Hello %s", "World")}

        # As template globals
        templates.env.globals.update(translations.as_dict())
    """

    translate_simple: Callable[..., str]
    translate_plural: Callable[..., str]
    get_locale: Callable[[], Optional[str]]
    is_preferred_locale: Callable[[], bool]

    @classmethod
    def from_engine(cls, i18n: I18n) -> "TranslationHelpers":
        """Bind helpers to an engine's methods."""
        return cls(
            translate_simple=i18n.translate_simple,
            translate_plural=i18n.translate_plural,
            get_locale=i18n.get_locale,
            is_preferred_locale=i18n.is_preferred_locale,
        )

    def as_dict(self) -> Dict[str, Callable[..., Any]]:
        """Helpers keyed by name, for template contexts."""
        return {
            "translate_simple": self.translate_simple,
            "translate_plural": self.translate_plural,
            "get_locale": self.get_locale,
            "is_preferred_locale": self.is_preferred_locale,
        }
