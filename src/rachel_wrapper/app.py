from __future__ import annotations
import logging
from pathlib import Path

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles

from .config import Settings, get_settings
from .identifiers import ModulePaths, sanitize_identifier
from .registry import ModuleRegistry, discover_modules
from .schemas import HealthResponse, ModuleIndex
from .shell import render_shell, render_viewer

logger = logging.getLogger("rachel_wrapper")

STATIC_DIR = Path(__file__).parent / "static"
NOT_FOUND_BODY = "404 - Not Found"


def _not_found() -> PlainTextResponse:
    return PlainTextResponse(NOT_FOUND_BODY, status_code=404)


def create_app(settings: Settings | None = None, registry: ModuleRegistry | None = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level.upper())

    registry = discover_modules(settings, registry)

    app = FastAPI(
        title="RACHEL Module Wrapper",
        version="0.1.0",
        docs_url="/__docs",
        redoc_url="/__redoc",
    )
    app.state.settings = settings
    app.state.registry = registry

    @app.get("/healthz", response_model=HealthResponse, tags=["ops"])
    async def health() -> HealthResponse:
        return HealthResponse(status="ok", module_count=len(registry))

    @app.get("/modules", response_model=ModuleIndex, tags=["ops"])
    async def list_modules() -> ModuleIndex:
        return ModuleIndex(
            modules=registry.identifiers(),
            web_module_root=settings.web_module_root,
        )

    @app.get("/wrap", tags=["modules"])
    def wrap_module(request: Request, moddir: str | None = None):
        """
        Wrap a module's index fragment in the shared page shell.
        Unknown or unreadable modules still get the shell with an empty content area.
        """
        if moddir is None:
            logger.info("Wrap requested without moddir from %s", request.client.host if request.client else "-")
            return _not_found()

        paths = ModulePaths.for_identifier(sanitize_identifier(moddir), settings)
        content = registry.render(paths)
        logger.debug("Wrapping module %r (%d bytes of content)", paths.identifier, len(content))
        return HTMLResponse(render_shell(paths, content, settings.asset_prefix))

    @app.get("/viewmod", tags=["modules"])
    def view_module(moddir: str | None = None):
        if moddir is None:
            return _not_found()

        paths = ModulePaths.for_identifier(sanitize_identifier(moddir), settings)
        wrap_url = app.url_path_for("wrap_module") + f"?moddir={paths.identifier}"
        return HTMLResponse(render_viewer(paths, wrap_url, settings.asset_prefix))

    # mounts go last: an asset prefix of "/" matches every path
    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")
    if settings.assets_dir:
        app.mount(
            settings.asset_prefix.rstrip("/"),
            StaticFiles(directory=settings.assets_dir),
            name="assets",
        )

    return app


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "rachel_wrapper.app:create_app",
        factory=True,
        host=settings.wrapper_host,
        port=settings.wrapper_port,
        log_level=settings.log_level,
        reload=False,
    )


if __name__ == "__main__":
    main()
