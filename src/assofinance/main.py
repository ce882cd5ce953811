from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import IntegrityError

from assofinance.api.middleware.error_handler import (
    handle_finance_error,
    handle_generic_error,
    handle_integrity_error,
    handle_validation_error,
)
from assofinance.api.middleware.logging import RequestLoggingMiddleware, configure_logging
from assofinance.api.v1 import router as v1_router
from assofinance.api.v1.health import router as health_router
from assofinance.config import settings
from assofinance.core.exceptions import FinanceError


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    configure_logging(settings.log_level)
    yield
    # Shutdown


def create_app() -> FastAPI:
    app = FastAPI(
        title="Association Finance API",
        description="Accounts, transactions and keyword-based categorization for associations",
        version="0.1.0",
        debug=settings.debug,
        lifespan=lifespan,
    )

    # Add request logging middleware
    app.add_middleware(RequestLoggingMiddleware)

    # Register exception handlers (order matters - most specific first)
    app.add_exception_handler(FinanceError, handle_finance_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(IntegrityError, handle_integrity_error)
    app.add_exception_handler(Exception, handle_generic_error)

    # Register routers
    app.include_router(health_router)
    app.include_router(v1_router)

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the API with uvicorn."""
    import uvicorn

    uvicorn.run("assofinance.main:app", host=settings.host, port=settings.port)
