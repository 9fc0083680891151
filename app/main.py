from __future__ import annotations
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from app.api import collect_router, query_router, router
from logging_config import configure_logging
from services.query_engine import build_default_engine


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    engine = build_default_engine()
    try:
        yield
    finally:
        engine.reset()
        build_default_engine.cache_clear()


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(
        title="Airport Weather Service",
        description="In-memory airport weather collection and radius query service.",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.include_router(collect_router)
    app.include_router(query_router)
    app.include_router(router)
    return app

app = create_app()
