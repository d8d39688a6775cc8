import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.router import build_api_router, site_router
from app.core.config import Settings, settings
from app.core.logging import console_logger
from app.core.middleware import RequestLoggingMiddleware, ErrorHandlingMiddleware, register_exception_handlers
from app.core.store import StoreProvider, build_store_provider
from app.services.keep_alive import KeepAlivePinger


def create_app(app_settings: Optional[Settings] = None, store_provider: Optional[StoreProvider] = None) -> FastAPI:
    app_settings = app_settings or settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):

        # Startup: storage backend is picked once and injected per request
        provider = app.state.store_provider
        await provider.startup()

        # Startup: optional self ping against idle shutdown
        pinger = None
        if app_settings.KEEP_ALIVE_URL:
            pinger = KeepAlivePinger(app_settings.KEEP_ALIVE_URL, app_settings.KEEP_ALIVE_INTERVAL_SECONDS)
            pinger.start()

        console_logger.info(
            "TreloarAI dashboard ready",
            environment=app_settings.ENVIRONMENT,
            storage=provider.backend.value,
            port=app_settings.PORT,
        )

        yield

        # Shutdown
        if pinger:
            await pinger.stop()
        await provider.shutdown()

    app = FastAPI(
        title="TreloarAI Call Screening Dashboard",
        description="Trusted contacts, blocked numbers, call history and a canned assistant",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.store_provider = store_provider or build_store_provider(app_settings)
    app.state.started_at = time.monotonic()

    app.add_middleware(RequestLoggingMiddleware, enabled=app_settings.REQUEST_LOGGING_ENABLED)
    app.add_middleware(ErrorHandlingMiddleware, debug=app_settings.DEBUG)

    # Credentials cannot be combined with a wildcard origin
    origins = app_settings.cors_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(build_api_router(app_settings.API_PREFIX))
    app.include_router(site_router)
    return app


app = create_app()
