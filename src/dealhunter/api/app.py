"""Factory de la aplicación FastAPI.

Lifespan
--------
Al arrancar configura structlog con el nivel de los settings. Los
clientes externos (Supabase, OpenAI) se crean por request a través de
`dealhunter.api.dependencies`.

Routers
-------
    /deals    catálogo admitido, reporte y CRUD del dueño
    /search   búsqueda asistida por LLM
    /cron     chequeo de links
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dealhunter.api.routers import cron as cron_router
from dealhunter.api.routers import deals as deals_router
from dealhunter.api.routers import search as search_router
from dealhunter.config import get_settings
from dealhunter.logging_config import configure_logging

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    configure_logging(get_settings().log_level)
    logger.info("API iniciada")
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="Deal Hunter API",
        description="Deals de alojamiento en Israel con admisión por ubicación, presupuesto y link.",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(deals_router.router, prefix="/deals", tags=["deals"])
    app.include_router(search_router.router, prefix="/search", tags=["search"])
    app.include_router(cron_router.router, prefix="/cron", tags=["cron"])

    return app


# uvicorn dealhunter.api.app:app --reload
app = create_app()
