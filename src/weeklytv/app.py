from __future__ import annotations

import logging

from fastapi import FastAPI

from weeklytv.api import routes
from weeklytv.logging import configure_logging


def create_app() -> FastAPI:
    """Build the timetable service with logging configured and routes mounted."""
    configure_logging()
    logger = logging.getLogger(__name__)
    logger.info("Initializing WeeklyTV FastAPI application")

    app = FastAPI(title="WeeklyTV", description="Deterministic weekly broadcast timetables")
    app.include_router(routes.router)

    logger.info("Application routes registered")
    return app


app = create_app()
