"""
FastAPI application factory.

Wires the record store into ``app.state``, applies middleware, registers
error handlers and routers.
"""

import contextlib
import logging
import traceback

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.adapters.supabase_adapter import SupabasePostAdapter
from app.config import Settings, get_settings
from app.domain.errors import PostError
from app.ports.post_port import PostPort
from app.routers import posts

logger = logging.getLogger(__name__)


def _describe_validation_error(exc: RequestValidationError) -> str:
    messages = []
    for err in exc.errors():
        field = ".".join(str(part) for part in err["loc"] if part != "body")
        if err["type"] == "json_invalid":
            messages.append("Request body is not valid JSON")
        elif not field:
            messages.append("Request body must be a JSON object")
        elif err["type"] == "missing":
            messages.append(f"Missing `{field}` in request body")
        else:
            messages.append(f"Invalid `{field}`: {err['msg']}")
    return "; ".join(messages)


def create_app(store: PostPort | None = None, settings: Settings | None = None) -> FastAPI:
    """
    Build the application.

    When ``store`` is given it is used as-is and the caller owns its
    lifecycle. Otherwise the lifespan connects to Supabase on startup and
    closes the connection on shutdown.
    """
    settings = settings or get_settings()

    @contextlib.asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"🚀 {settings.app_name} is starting up")
        owned = None
        if getattr(app.state, "post_store", None) is None:
            owned = SupabasePostAdapter.connect(
                settings.supabase_url,
                settings.supabase_service_role_key,
                table=settings.posts_table,
            )
            app.state.post_store = owned
        yield
        if owned is not None:
            await owned.close()
            app.state.post_store = None
        logger.info(f"🛑 {settings.app_name} is shutting down")

    app = FastAPI(
        title=settings.app_name,
        description="Create, read, update and delete blog posts.",
        version="0.1.0",
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.post_store = store

    # ── CORS ──────────────────────────────────────────────────
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Error handlers ────────────────────────────────────────
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        detail = _describe_validation_error(exc)
        logger.warning(f"Rejected {request.method} {request.url.path}: {detail}")
        return JSONResponse(status_code=400, content={"detail": detail})

    @app.exception_handler(PostError)
    async def post_exception_handler(request: Request, exc: PostError):
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.detail}")
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})

    # Ensures ALL unhandled errors return proper JSON with CORS headers
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled exception on {request.method} {request.url.path}: "
            f"{type(exc).__name__}: {exc}\n{traceback.format_exc()}"
        )
        return JSONResponse(
            status_code=500,
            content={"detail": f"Internal server error: {type(exc).__name__}"},
        )

    # ── Routers ───────────────────────────────────────────────
    app.include_router(posts.router)

    @app.get("/", tags=["Health"])
    async def health_check():
        return {"status": "ok", "service": settings.app_name}

    return app
