"""
Service Factory Module

FastAPI application and uvicorn configuration helpers for hosting the
translation functions over HTTP.
"""

import logging
import time
from typing import Any, Callable, Dict, List, Optional

import uvicorn
from fastapi import FastAPI, Request

logger = logging.getLogger(__name__)


class ServiceInfo:
    """Service configuration container"""

    def __init__(
        self,
        name: str,
        title: str,
        description: str,
        version: str = "1.0.0",
        port: int = 8080,
        host: str = "localhost",
        tags: Optional[List[Dict[str, str]]] = None
    ):
        self.name = name
        self.title = title
        self.description = description
        self.version = version
        self.port = port
        self.host = host
        self.tags = tags or []


def create_fastapi_service(service_info: ServiceInfo, lifespan: Callable) -> FastAPI:
    """
    Create a FastAPI application with request logging and health endpoints.

    Args:
        service_info: Service configuration
        lifespan: Lifespan context manager that provisions the service

    Returns:
        Configured FastAPI application
    """
    openapi_tags = [
        {"name": "Health", "description": "Health check and service status"}
    ]
    openapi_tags.extend(service_info.tags)

    app = FastAPI(
        title=service_info.title,
        description=service_info.description,
        version=service_info.version,
        lifespan=lifespan,
        openapi_tags=openapi_tags
    )

    _add_logging_middleware(app)
    _add_health_check(app, service_info)

    return app


def _add_logging_middleware(app: FastAPI) -> None:
    """Add request logging middleware"""
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time
        logger.info(
            f"Request: {request.method} {request.url.path} - Response: {response.status_code} - Time: {process_time:.4f}s"
        )
        return response


def _add_health_check(app: FastAPI, service_info: ServiceInfo) -> None:
    """Add standardized health check endpoints"""

    @app.get("/", tags=["Health"])
    async def root():
        return {
            "service": service_info.name,
            "title": service_info.title,
            "version": service_info.version,
            "description": service_info.description,
            "status": "running"
        }

    @app.get("/health", tags=["Health"])
    async def health_check(request: Request):
        module = getattr(request.app.state, "i18n", None)
        return {
            "status": "healthy",
            "service": service_info.name,
            "version": service_info.version,
            "i18n": {
                "provisioned": bool(module and module.provisioned),
                "keys": len(module.store) if module else 0,
            },
        }


def _get_logging_config(service_name: str, level: str = "INFO") -> Dict[str, Any]:
    """Get standardized logging configuration for uvicorn"""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "()": "uvicorn.logging.DefaultFormatter",
                "fmt": "%(levelprefix)s %(asctime)s - %(name)s - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "access": {
                "()": "uvicorn.logging.AccessFormatter",
                "fmt": '%(levelprefix)s %(asctime)s - %(client_addr)s - "%(request_line)s" %(status_code)s',
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "default": {
                "formatter": "default",
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stderr",
            },
            "access": {
                "formatter": "access",
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stdout",
            },
        },
        "loggers": {
            "uvicorn": {"handlers": ["default"], "level": "INFO", "propagate": False},
            "uvicorn.error": {"level": "INFO"},
            "uvicorn.access": {"handlers": ["access"], "level": "INFO", "propagate": False},
            "i18n_resolver": {"handlers": ["default"], "level": level, "propagate": False},
            service_name.lower(): {"handlers": ["default"], "level": level, "propagate": False},
        },
    }


def create_uvicorn_config(service_info: ServiceInfo, reload: bool = False, log_level: str = "INFO") -> Dict[str, Any]:
    """
    Create standardized uvicorn configuration.

    Args:
        service_info: Service configuration
        reload: Enable auto-reload for development
        log_level: Level for the service and i18n loggers

    Returns:
        Uvicorn configuration dictionary
    """
    return {
        "host": service_info.host,
        "port": service_info.port,
        "reload": reload,
        "log_config": _get_logging_config(service_info.name, log_level),
    }


def run_service(
    service_info: ServiceInfo,
    app_module_path: str,
    reload: bool = False,
    log_level: str = "INFO",
) -> None:
    """
    Run the service with standardized uvicorn configuration.

    Args:
        service_info: Service configuration
        app_module_path: Module path for uvicorn (e.g., "i18n_resolver.services.app:app")
        reload: Enable auto-reload for development
        log_level: Level for the service and i18n loggers
    """
    config = create_uvicorn_config(service_info, reload, log_level)
    uvicorn.run(app_module_path, **config)
