# journal_analyzer/app/main.py
from __future__ import annotations
import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from journal_analyzer.core.config import CORS_ORIGINS, LOG_LEVEL
from journal_analyzer.exceptions import ConfigError
from journal_analyzer.app.routes_analysis import router as analysis_router
from journal_analyzer.app.routes_categories import router as categories_router
from journal_analyzer.app.routes_summary import router as summary_router
from journal_analyzer.app.routes_health import router as health_router
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
)

logger = logging.getLogger(__name__)


async def _http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def _validation_error_handler(request: Request, exc: RequestValidationError):
    # ctx may hold exception objects, keep only the serialisable parts
    details = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
        for err in exc.errors()
    ]
    logger.warning("Request validation failed on %s: %s", request.url.path, details)
    return JSONResponse(status_code=400, content={"error": "Invalid input", "details": details})


async def _config_error_handler(request: Request, exc: ConfigError):
    logger.error("Configuration error: %s", exc)
    return JSONResponse(status_code=500, content={"error": "Server misconfiguration"})


def create_app() -> FastAPI:
    app = FastAPI(
        title="Journal Analyzer",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, _http_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(ConfigError, _config_error_handler)

    app.include_router(analysis_router)
    app.include_router(categories_router)
    app.include_router(summary_router)
    app.include_router(health_router)

    logger.info("FastAPI app initialised (log_level=%s)", LOG_LEVEL)
    return app

app = create_app()
