"""
Parity Validator 3000: HTTP Server
==================================

Endpoints:
- GET  /                -> form with an idle terminal
- POST /                -> run the machine on the ``number`` form field
- POST /api/v1/parity   -> run the machine, answer with the MachineResult JSON
- GET  /health          -> liveness

Usage:
    uvicorn web.server:app --reload
"""
import logging

from fastapi import FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import HTMLResponse
from pydantic import BaseModel

from models.result import MachineResult
from pipeline import machine
from settings import Settings
from web.render import render_page

logger = logging.getLogger(__name__)


class ParityRequest(BaseModel):
    number: str


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application. ``settings`` defaults to the environment."""
    app = FastAPI(
        title="Parity Validator 3000",
        version="1.0.0",
        description="Determines whether an integer is even or odd, eventually.",
    )
    app.state.settings = settings or Settings()

    # The gravity sleeps block, so the machine always runs in the worker pool.

    @app.get("/health")
    def health_check():
        return {"status": "online"}

    @app.get("/", response_class=HTMLResponse)
    def index(request: Request):
        return render_page(None, request.app.state.settings)

    @app.post("/", response_class=HTMLResponse)
    async def submit(request: Request):
        settings = request.app.state.settings
        form = await request.form()
        # A present but empty field still runs the machine (and jams it).
        if "number" not in form:
            return render_page(None, settings)
        number = str(form["number"])
        logger.info("Form submission received (%d chars)", len(number))
        result = await run_in_threadpool(machine.run, number, settings)
        return render_page(result, settings)

    @app.post("/api/v1/parity", response_model=MachineResult)
    def parity(body: ParityRequest, request: Request):
        return machine.run(body.number, request.app.state.settings)

    return app


app = create_app()
