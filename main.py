# main.py
# Role: Application entry point for the finance ledger API.
#       Initializes the FastAPI app, configures logging and CORS,
#       creates database tables on startup, and registers all route modules.

"""
Main FastAPI app for the personal finance ledger.

Here we only:
- create the FastAPI app
- set up logging, CORS and error handlers
- create DB tables
- include route modules
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from db import init_db
from app import settings
from app.errors import register_exception_handlers
from app.logging_setup import configure_logging, get_logger
from app.routes_root import router as root_router
from app.routes_transactions import router as transactions_router
from app.routes_report import router as report_router

logger = get_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Create database tables (only if they don't exist yet).
    init_db()
    logger.info("Database ready")
    yield


def create_app() -> FastAPI:
    configure_logging()

    app = FastAPI(title="Finance Ledger", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # -------------------------------------------------------------------
    # Include routers
    # -------------------------------------------------------------------

    # Root / health
    app.include_router(root_router)

    # Transactions CRUD
    app.include_router(transactions_router)

    # Weekly and breakdown reports
    app.include_router(report_router)

    return app


# FastAPI application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
