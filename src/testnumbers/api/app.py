"""FastAPI application with lifespan and router mounting."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from testnumbers import __version__
from testnumbers.api.routes import health, history, numbers
from testnumbers.core.config import AppSettings
from testnumbers.core.logging_setup import configure_logging
from testnumbers.engines import create_engines
from testnumbers.models.numbers import GenerationHistory


def init_state(app: FastAPI, settings: AppSettings) -> None:
    """Attach settings, engines and an empty history to ``app.state``."""
    bsn, iban, loonheffing = create_engines(settings)
    app.state.settings = settings
    app.state.bsn = bsn
    app.state.iban = iban
    app.state.loonheffingennummer = loonheffing
    app.state.history = GenerationHistory(max_items=settings.history.max_items)


def create_app(settings: AppSettings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Initialize and tear down application resources."""
        resolved = settings or AppSettings()
        configure_logging(resolved.log_level)
        init_state(app, resolved)
        yield
        app.state.history.clear()

    app = FastAPI(
        title="Dutch Test Numbers",
        version=__version__,
        lifespan=lifespan,
    )
    app.include_router(health.router)
    app.include_router(numbers.router)
    app.include_router(history.router, prefix="/history")
    return app
