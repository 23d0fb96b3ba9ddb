"""FastAPI application factory and configuration."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from starlette.middleware.sessions import SessionMiddleware

from app import models  # noqa: F401  (registers tables)
from app.config import settings
from app.database import init_db
from app.exceptions import AuthenticationRequired, BadRequestError
from app.hooks import ScriptHooks
from app.schemas.common import ErrorDetail, ErrorResponse
from app.utils.flash import pop_flashes

logger = logging.getLogger(__name__)

templates = Jinja2Templates(directory=Path(__file__).resolve().parent / "templates")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info(f"Starting hosting panel in {settings.ENVIRONMENT} mode")
    logger.info(f"Database: {settings.DATABASE_URL.split('@')[-1]}")  # Hide credentials
    await init_db()
    yield
    # Shutdown
    logger.info("Shutting down hosting panel")


def create_app(hooks: dict[str, ScriptHooks] | None = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        hooks: Start/end callbacks per panel area ("admin", "reseller");
            areas left out get an empty ScriptHooks.
    """
    app = FastAPI(
        title="Hosting Panel",
        description="Hosting control panel admin and reseller pages",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.state.hooks = {"admin": ScriptHooks(), "reseller": ScriptHooks()}
    app.state.hooks.update(hooks or {})

    @app.middleware("http")
    async def flash_messages(request: Request, call_next):
        """Move queued flash messages from the session to request.state."""
        request.state.flash_messages = pop_flashes(request)
        return await call_next(request)

    # Added last so it wraps the flash middleware
    app.add_middleware(SessionMiddleware, secret_key=settings.SESSION_SECRET)

    @app.exception_handler(BadRequestError)
    async def bad_request_handler(request: Request, exc: BadRequestError) -> HTMLResponse:
        logger.warning(f"Bad request on {request.url.path}: {exc}")
        return templates.TemplateResponse(
            request,
            "errors/bad_request.html",
            {"page_title": "Bad Request", "messages": []},
            status_code=400,
        )

    @app.exception_handler(AuthenticationRequired)
    async def authentication_handler(request: Request, exc: AuthenticationRequired):
        # 401 for JSON clients, redirect for HTML clients
        if "application/json" in request.headers.get("accept", ""):
            body = ErrorResponse(
                error=ErrorDetail(code="NOT_AUTHENTICATED", message=str(exc))
            )
            return JSONResponse(body.model_dump(), status_code=401)
        return RedirectResponse(url=settings.LOGIN_URL, status_code=303)

    # Health check endpoint
    @app.get("/health", tags=["Health"])
    async def health_check() -> dict[str, Any]:
        """Health check endpoint."""
        return {
            "status": "healthy",
            "service": "hosting-panel",
            "version": "0.1.0",
            "environment": settings.ENVIRONMENT,
        }

    # Mount routes
    from app.routes import admin, reseller

    app.include_router(admin.router, tags=["Admin"])
    app.include_router(reseller.router, tags=["Reseller"])

    return app


# Create application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.ENVIRONMENT == "development",
        log_level=settings.LOG_LEVEL.lower(),
    )
