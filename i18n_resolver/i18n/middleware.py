from __future__ import annotations

from typing import Optional

from fastapi import FastAPI, Request

from i18n_resolver.i18n.context import reset_language, set_language
from i18n_resolver.utils.language import get_accept_language


def install_i18n_middleware(app: FastAPI, *, default_language: Optional[str] = None) -> None:
    """
    Install request-scoped language negotiation.

    The language comes from ``?lang=`` / ``?language=``, then Accept-Language,
    then ``default_language``. It is available via
    ``i18n_resolver.i18n.get_language`` while the request is handled and is
    echoed in the Content-Language response header.
    """

    @app.middleware("http")
    async def _i18n_middleware(request: Request, call_next):
        lang = get_accept_language(request, default_language)
        token = set_language(lang)
        try:
            response = await call_next(request)
        finally:
            reset_language(token)

        response.headers.setdefault("Content-Language", lang)
        return response
