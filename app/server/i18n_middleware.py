"""Per-request i18n binding for Starlette/FastAPI applications."""

import asyncio
from typing import Optional

from fastapi import FastAPI
from starlette.middleware.base import BaseHTTPMiddleware

from infrastructure.configuration import I18nSettings
from infrastructure.i18n import LocaleCache, RequestSignals, TranslationHelpers
from infrastructure.i18n.factory import create_i18n
from infrastructure.logging import bind_request_context


class LocaleMiddleware(BaseHTTPMiddleware):
    """Builds an I18n engine for every incoming request.

    The engine is stored on ``request.state.i18n`` and its helpers on
    ``request.state.translations``.
    """

    def __init__(
        self,
        app,
        i18n_settings: Optional[I18nSettings] = None,
        cache: Optional[LocaleCache] = None,
    ):
        super().__init__(app)
        self.i18n_settings = i18n_settings
        self.cache = cache

    async def dispatch(self, request, call_next):
        # Dictionary loads read files, keep them off the event loop
        i18n = await asyncio.to_thread(
            create_i18n,
            request=RequestSignals.from_request(request),
            i18n_settings=self.i18n_settings,
            cache=self.cache,
        )
        request.state.i18n = i18n
        request.state.translations = TranslationHelpers.from_engine(i18n)

        with bind_request_context(
            request_path=request.url.path,
            locale=i18n.get_locale(),
        ):
            response = await call_next(request)
        return response


def install_i18n(
    app: FastAPI,
    i18n_settings: Optional[I18nSettings] = None,
    cache: Optional[LocaleCache] = None,
) -> None:
    """Register LocaleMiddleware on an application.

    Args:
        app: FastAPI application.
        i18n_settings: Localization settings (default: application settings).
        cache: LocaleCache to share (default: application-scoped cache).
    """
    app.add_middleware(LocaleMiddleware, i18n_settings=i18n_settings, cache=cache)
