"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from webvis import __version__
from webvis.config import settings
from webvis.scenario.errors import ScenarioError

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.webvis_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


async def scenario_error_handler(request: Request, exc: ScenarioError) -> JSONResponse:
    logger.warning("Scenario load failed: %s", exc)
    return JSONResponse(
        status_code=422,
        content={
            "error": type(exc).__name__,
            "message": exc.message,
            "line_number": exc.line_number,
        },
    )


def create_app() -> FastAPI:
    app = FastAPI(
        title="WebVis",
        description="Scenario parser and move-sequence model for modular robot visualization",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ScenarioError, scenario_error_handler)

    from webvis.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
