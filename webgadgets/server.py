"""Serve a gadget page with FastAPI and wait for its result."""

from __future__ import annotations

import json
import logging
import socket
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Callable, Dict, Optional

import uvicorn
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from .config import GadgetSettings, load_settings
from .dependencies import find_dependencies
from .markup import Node
from .page import render_page
from .tracing import log_event, trace
from .viewer import Viewer, viewer_by_name

_LOGGER = logging.getLogger("webgadgets.server")


def create_app(
    ui: Node,
    *,
    title: Optional[str] = None,
    on_done: Optional[Callable[[Any], None]] = None,
    on_startup: Optional[Callable[[], None]] = None,
) -> FastAPI:
    """Build an app serving ``ui`` at ``/``.

    Local dependency files are mounted under their asset paths. A ``POST`` to
    ``/done`` with a JSON body hands the decoded value to ``on_done``.
    """

    page_html = render_page(ui, title=title)

    @asynccontextmanager
    async def _lifespan(_: FastAPI) -> AsyncIterator[None]:
        if on_startup is not None:
            on_startup()
        yield

    app = FastAPI(title=title or "Gadget", docs_url=None, redoc_url=None, openapi_url=None, lifespan=_lifespan)

    for dependency in find_dependencies(ui):
        if dependency.src is None:
            continue
        app.mount(
            dependency.mount_path,
            StaticFiles(directory=str(dependency.src)),
            name=f"{dependency.name}-assets",
        )

    @app.get("/", response_class=HTMLResponse, include_in_schema=False)
    async def index() -> HTMLResponse:
        return HTMLResponse(page_html)

    @app.post("/done", include_in_schema=False)
    async def done(request: Request) -> JSONResponse:
        raw = await request.body()
        try:
            value = json.loads(raw) if raw else None
        except json.JSONDecodeError as exc:
            raise HTTPException(status_code=400, detail="Result must be JSON") from exc
        log_event(_LOGGER, logging.INFO, "gadget.done", has_value=value is not None)
        if on_done is not None:
            on_done(value)
        return JSONResponse({"status": "ok"})

    return app


def _free_port(host: str) -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind((host, 0))
        return sock.getsockname()[1]


def run_gadget(
    ui: Node,
    *,
    port: Optional[int] = None,
    host: Optional[str] = None,
    viewer: Optional[Viewer] = None,
    title: Optional[str] = None,
    settings: Optional[GadgetSettings] = None,
) -> Any:
    """Serve ``ui`` until the gadget posts its result, then return that result.

    Unset arguments come from :class:`GadgetSettings`; a port of ``0`` picks a
    free port. The viewer is invoked with the gadget URL once the server is up.
    """

    settings = settings or load_settings()
    host = host or settings.host
    port = settings.port if port is None else port
    if port == 0:
        port = _free_port(host)
    url = f"http://{host}:{port}/"
    opener = viewer or viewer_by_name(settings.viewer, title=title or "Gadget")

    outcome: Dict[str, Any] = {}
    server: Optional[uvicorn.Server] = None

    def _on_done(value: Any) -> None:
        outcome["value"] = value
        if server is not None:
            server.should_exit = True

    def _on_startup() -> None:
        log_event(_LOGGER, logging.INFO, "gadget.listening", url=url)
        opener(url)

    app = create_app(ui, title=title, on_done=_on_done, on_startup=_on_startup)
    server = uvicorn.Server(uvicorn.Config(app, host=host, port=port, log_level="warning"))

    with trace("gadget.run", logger=_LOGGER, url=url):
        server.run()
    return outcome.get("value")


__all__ = ["create_app", "run_gadget"]
