import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import HTMLResponse, Response
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from keepclicking import __version__
from keepclicking.api.deps import (
    STATIC_DIR,
    build_preference_storage,
    build_theme_store,
    get_settings,
    load_context,
)
from keepclicking.api.routes import public_ssr, theme
from keepclicking.app_shell.context import ServiceContext

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    if getattr(app.state, "context", None) is None:
        settings = get_settings()

        # Load config and content sources on startup (fail-fast)
        try:
            app.state.context = load_context()
        except (FileNotFoundError, ValueError) as e:
            logger.critical("Site config load failed (%s): %s", settings.config_path, e)
            raise

    yield


async def not_found_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """Render the site's 404 page for page requests; JSON errors for the API."""
    if exc.status_code != 404 or request.url.path.startswith("/api/"):
        return await http_exception_handler(request, exc)

    context: ServiceContext | None = getattr(request.app.state, "context", None)
    if context is None:
        return await http_exception_handler(request, exc)

    store = build_theme_store(build_preference_storage(request, context.config), context.config)
    html = context.site.not_found(request.url.path, store)
    return HTMLResponse(html, status_code=404)


def create_app(context: ServiceContext | None = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        context: Prebuilt service context. When omitted the context is
            loaded from KEEPCLICKING_CONFIG at startup.
    """
    app = FastAPI(
        title="keepclicking",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url=None,
    )
    app.state.context = context

    app.add_exception_handler(StarletteHTTPException, not_found_handler)  # type: ignore[arg-type]

    # --- Routers ---
    app.include_router(theme.router, prefix="/api/theme", tags=["Theme"])
    app.include_router(theme.toggle_router, prefix="", tags=["Theme"])

    @app.get("/health")
    def health_check() -> dict[str, Any]:
        """Health check endpoint."""
        return {"status": "ok", "service": "keepclicking"}

    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

    # Catch-all slug route goes last
    app.include_router(public_ssr.router, prefix="", tags=["SSR"])

    return app


app = create_app()
