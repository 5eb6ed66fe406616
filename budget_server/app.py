from contextlib import asynccontextmanager
from collections.abc import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from budget_server.config import Settings, settings as default_settings
from budget_server.db import connect as db
from budget_server.log import setup_logging
from budget_server.routers import greeting


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or default_settings
    setup_logging(settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifetime(app: FastAPI) -> AsyncGenerator[None, None]:
        if settings.DISABLE_PERSISTENCE_AUTOWIRING:
            logger.info("Persistence autowiring is disabled - no database will be connected")
        else:
            await db.connect(settings.DATABASE_URL)
        yield
        if not settings.DISABLE_PERSISTENCE_AUTOWIRING:
            await db.disconnect()

    app = FastAPI(title="Budget Management", lifespan=lifetime)
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(greeting.router)
    return app