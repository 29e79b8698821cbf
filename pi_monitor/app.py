# -*- coding: utf-8 -*-

# stdlib imports
from pathlib import Path
from typing import Optional, Union

# third party imports
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address
from starlette.staticfiles import StaticFiles

# app imports
from pi_monitor.__version__ import __license__, __license_url__, __version__
from pi_monitor.api.api import api_router, endpoint_routers
from pi_monitor.core.config import endpoints, settings
from pi_monitor.core.logging import configure_logging, get_logger
from pi_monitor.services import system_service
from pi_monitor.streaming.metrics_stream import MetricsStreamManager
from pi_monitor.views.api import router as views_router


def create_app(
    debug: bool = False,
    static_dir: Optional[Union[str, Path]] = None,
    rate_limit: Optional[str] = None,
):
    configure_logging(debug_mode=debug, log_dir=settings.LOG_DIR)
    log = get_logger(__name__)

    if debug:
        log.debug("Starting application in DEBUG mode")

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description=settings.PROJECT_DESCRIPTION,
        version=__version__,
        license_info={"name": __license__, "url": __license_url__},
        docs_url="/docs",
        redoc_url=None,
        openapi_url=f"{settings.API_STR}/openapi.json",
        openapi_tags=settings.TAGS_METADATA,
        debug=debug,
    )

    # every probe reads the host through this source
    app.state.source = system_service.default_source
    app.state.stream_manager = MetricsStreamManager(
        lambda: system_service.collect_metrics(app.state.source),
        interval=settings.STREAM_INTERVAL,
    )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        log.error(f"Unhandled error on {request.url.path}: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500, content={"detail": "Internal Server Error"}
        )

    # setup slowapi
    limiter = Limiter(
        key_func=get_remote_address, default_limits=[rate_limit or settings.RATE_LIMIT]
    )
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # setup router
    app.include_router(api_router, prefix=settings.API_STR)
    endpoints.clear()
    for router in endpoint_routers:
        for route in router.routes:
            if isinstance(route, APIRoute):
                endpoints.append(
                    {
                        "path": f"{settings.API_STR}{route.path}",
                        "methods": "".join(sorted(route.methods)),
                        "description": route.description.strip().split("\n")[0],
                    }
                )

    app.include_router(views_router)

    # the static mount catches every path, so it goes last
    static_dir = Path(static_dir) if static_dir is not None else settings.STATIC_DIR
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
        log.debug(f"Serving static files from {static_dir}")

    @app.on_event("startup")
    async def startup():
        log.info(f"{settings.PROJECT_NAME} {__version__} starting")

    @app.on_event("shutdown")
    async def shutdown():
        log.info("Application shutting down")
        await app.state.stream_manager.close_all()

    return app
