# skyculture/main.py
import logging
import os
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from .config import load_config, print_config
from .assets import FileAssetProvider
from .identifiers import load_registry
from .culture.catalog import create_skyculture
from .errors import SkyCultureError
from .obs.logging import setup_logging, StructuredLogger
from . import api

logger = logging.getLogger(__name__)
business_logger = StructuredLogger(__name__)

CONFIG = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Build the sky culture catalog once at startup.

    A catalog that cannot be built aborts startup; requests never see a
    partially loaded culture.
    """
    global CONFIG

    CONFIG = load_config(os.environ.get("SKYCULTURE_CONFIG", "config.yaml"))
    setup_logging(level=CONFIG.logging.level, enable_json=CONFIG.logging.json_format)
    print_config(CONFIG)

    business_logger.startup_event("application", "starting")

    try:
        registry_start = time.perf_counter()
        registry = load_registry(CONFIG.identifiers.registry_file)
        business_logger.startup_event(
            "identifier_registry", "ready",
            duration_ms=(time.perf_counter() - registry_start) * 1000,
            details={"registry_file": CONFIG.identifiers.registry_file}
        )

        catalog_start = time.perf_counter()
        assets = FileAssetProvider(CONFIG.skyculture.asset_root)
        catalog = create_skyculture(assets, registry, CONFIG.skyculture)
        business_logger.startup_event(
            "catalog", "ready",
            duration_ms=(time.perf_counter() - catalog_start) * 1000,
            details={"culture": CONFIG.skyculture.name, **catalog.get_stats()}
        )
    except SkyCultureError as e:
        business_logger.startup_event("catalog", "error", details=e.to_dict())
        logger.error(f"Failed to build sky culture catalog: {e}")
        raise

    api.CATALOG = catalog
    logger.info("Sky culture service startup complete")

    yield

    logger.info("Shutting down sky culture service...")
    api.CATALOG = None


app = FastAPI(
    title="Sky Culture Catalog",
    description="Star names, constellation figures and boundaries",
    version="1.0.0",
    lifespan=lifespan
)

app.include_router(api.router)


@app.exception_handler(HTTPException)
async def structured_http_exception_handler(request: Request, exc: HTTPException):
    """
    Return structured error bodies at the top level of the response.
    """
    content = exc.detail if isinstance(exc.detail, dict) else {
        "code": "HTTP.ERROR",
        "title": str(exc.detail),
        "detail": "",
        "tip": ""
    }
    return JSONResponse(status_code=exc.status_code, content=content)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """
    Global exception handler for unhandled errors.
    """
    logger.error(f"Unhandled exception in {request.method} {request.url}: {exc}")

    return JSONResponse(
        status_code=500,
        content={
            "code": "SERVER.ERROR",
            "title": "Internal server error",
            "detail": "An unexpected error occurred",
            "tip": "Please try again or contact support if the problem persists"
        }
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=int(os.environ.get("PORT", "8080")))
