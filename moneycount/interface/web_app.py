"""Mini README: FastAPI front end for the Moneycount widgets.

Structure:
    * create_application - application factory wiring pages, API and runtimes.
    * EventPayload - validated body of a browser interaction.

The dual-currency ledger lives at ``/`` and the counter variant at
``/counter``. Each page posts its input and keypress events to
``/api/<widget>/events``; the server maps them to ledger messages, runs the
transition, saves best-effort and answers with the freshly built view. The
API handlers are plain functions, so FastAPI runs them on its worker
threadpool and file storage never blocks the event loop; ``LedgerRuntime``
serialises the resulting concurrent dispatches.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Dict, Literal, Optional, Tuple

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from pydantic import BaseModel, Field

from ..configuration import MoneycountSettings, get_settings
from ..ledger import Column
from ..logging_utils import get_logger
from ..persistence import JsonFileStorage, KeyValueStorage
from ..runtime import LedgerRuntime, counter_runtime, ledger_runtime
from .view import build_counter_view, build_ledger_view, message_for_event

LOGGER = get_logger(__name__)

ViewBuilder = Callable[[Any, MoneycountSettings], Dict[str, Any]]


class EventPayload(BaseModel):
    """One interaction reported by the page script."""

    kind: Literal["input", "keypress"]
    target: Literal["draft", "entry", "rate"] = "draft"
    column: Optional[str] = None
    value: str = ""
    key: str = ""
    entry_id: Optional[int] = Field(None, ge=0)


def create_application(
    settings: Optional[MoneycountSettings] = None,
    storage: Optional[KeyValueStorage] = None,
) -> FastAPI:
    """Create the FastAPI application; state is loaded once per widget here."""

    settings = settings or get_settings()
    storage = storage if storage is not None else JsonFileStorage(settings.storage_path)

    app = FastAPI(title="Moneycount", version="0.1.0")
    templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))
    static_directory = Path(__file__).parent / "static"
    app.mount("/static", StaticFiles(directory=str(static_directory)), name="static")

    widgets: Dict[str, Tuple[LedgerRuntime[Any], ViewBuilder]] = {
        "ledger": (ledger_runtime(storage), build_ledger_view),
        "counter": (counter_runtime(storage), build_counter_view),
    }
    app.state.runtimes = {name: runtime for name, (runtime, _) in widgets.items()}

    def current_view(widget: str) -> Dict[str, Any]:
        runtime, build_view = widgets[widget]
        return build_view(runtime.state, settings)

    def render_page(request: Request, widget: str) -> HTMLResponse:
        view = current_view(widget)
        LOGGER.debug("Rendering %s page with %s rows", widget, len(view["rows"]))
        return templates.TemplateResponse(
            request,
            "ledger.html",
            {"view": view, "widget": widget, "confirm_key": settings.confirm_key},
        )

    def apply_event(widget: str, payload: EventPayload) -> JSONResponse:
        runtime, build_view = widgets[widget]
        try:
            column = Column.from_str(payload.column) if payload.column is not None else None
            message = message_for_event(
                payload.kind,
                target=payload.target,
                value=payload.value,
                key=payload.key,
                column=column,
                entry_id=payload.entry_id,
                confirm_key=settings.confirm_key,
            )
        except ValueError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        state = runtime.dispatch(message)
        LOGGER.info("Applied %s to %s widget", type(message).__name__, widget)
        return JSONResponse(build_view(state, settings))

    @app.get("/", response_class=HTMLResponse)
    async def ledger_page(request: Request) -> HTMLResponse:
        """Render the dual-currency ledger."""

        return render_page(request, "ledger")

    @app.get("/counter", response_class=HTMLResponse)
    async def counter_page(request: Request) -> HTMLResponse:
        """Render the counter variant."""

        return render_page(request, "counter")

    @app.get("/api/ledger")
    def ledger_view() -> JSONResponse:
        return JSONResponse(current_view("ledger"))

    @app.get("/api/counter")
    def counter_view() -> JSONResponse:
        return JSONResponse(current_view("counter"))

    @app.post("/api/ledger/events")
    def ledger_event(payload: EventPayload) -> JSONResponse:
        """Dispatch a browser interaction to the dual-currency ledger."""

        return apply_event("ledger", payload)

    @app.post("/api/counter/events")
    def counter_event(payload: EventPayload) -> JSONResponse:
        """Dispatch a browser interaction to the counter."""

        return apply_event("counter", payload)

    return app
