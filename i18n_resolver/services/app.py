"""
HTTP host for the translation functions.

The lifespan provisions the I18nModule once before the first request; a
dictionary that cannot be loaded aborts startup.
"""

# Load environment variables first (before settings are read)
from dotenv import load_dotenv
load_dotenv()

import logging
from contextlib import asynccontextmanager
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Query, Request, status

from i18n_resolver.config.settings import ApplicationSettings, get_settings
from i18n_resolver.i18n.context import get_language
from i18n_resolver.i18n.middleware import install_i18n_middleware
from i18n_resolver.i18n.module import I18nModule
from i18n_resolver.services.service_factory import ServiceInfo, create_fastapi_service, run_service
from i18n_resolver.utils.app_logger import configure_logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/i18n", tags=["Translation"])


def get_i18n_module(request: Request) -> I18nModule:
    module = getattr(request.app.state, "i18n", None)
    if module is None or not module.provisioned:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="i18n module is not provisioned",
        )
    return module


@router.get("/translate")
async def translate(
    key: str = Query(..., description="Translation key"),
    lang: Optional[str] = Query(None, description="Language code; defaults to the negotiated request language"),
    arg: List[str] = Query(default=[], description="Positional arguments; 'i18n:<key>' translates a nested key"),
    module: I18nModule = Depends(get_i18n_module),
) -> Dict[str, Any]:
    target = lang or get_language()
    return {
        "key": key,
        "lang": target,
        "text": module.translate(key, target, *arg),
    }


def build_service_info(settings: ApplicationSettings) -> ServiceInfo:
    return ServiceInfo(
        name="i18n",
        title="i18n Resolver Service",
        description="Dictionary-based translation with language fallback and placeholder interpolation",
        version="0.1.0",
        port=settings.service.port,
        host=settings.service.host,
        tags=[{"name": "Translation", "description": "Translation lookups"}],
    )


def create_app(
    settings: Optional[ApplicationSettings] = None,
    module: Optional[I18nModule] = None,
) -> FastAPI:
    settings = settings or get_settings()
    module = module or I18nModule.from_settings(settings.i18n)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(settings.i18n.log_level)
        module.provision()
        app.state.i18n = module
        logger.info("i18n service ready (%d keys)", len(module.store))
        try:
            yield
        finally:
            module.cleanup()
            app.state.i18n = None

    app = create_fastapi_service(build_service_info(settings), lifespan=lifespan)
    install_i18n_middleware(app, default_language=settings.i18n.default_language)
    app.include_router(router)
    return app


app = create_app()


def main() -> None:
    settings = get_settings()
    run_service(
        build_service_info(settings),
        "i18n_resolver.services.app:app",
        reload=settings.service.reload,
        log_level=settings.i18n.log_level,
    )


if __name__ == "__main__":
    main()
