# main.py
import logging
from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv

# Ensure repo-root .env is loaded for the running server process.
load_dotenv(dotenv_path=Path(__file__).resolve().parents[1] / ".env")

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import build_sqlalchemy_db_url, settings
from app.database import Base, SessionLocal, engine
from app.errors import CatalogError, ValidationError
from app.models import Combination, Job, Program, School, Subject, User  # noqa: F401 - register tables
from app.api.routes.combinations import router as combinations_router
from app.api.routes.health import router as health_router
from app.api.routes.jobs import router as jobs_router
from app.api.routes.programs import router as programs_router
from app.api.routes.schools import router as schools_router
from app.api.routes.search import router as search_router
from app.api.routes.subjects import router as subjects_router
from app.routers import admin, auth, users
from app.routers.dependencies import authorize_mutation, mutation_resource, oauth2_scheme


logger = logging.getLogger(__name__)


def _format_validation_errors(exc: RequestValidationError) -> str:
    parts: list[str] = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        msg = str(err.get("msg") or "invalid value")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts) or ValidationError.default_message


def install_exception_handlers(application: FastAPI) -> None:
    @application.exception_handler(CatalogError)
    async def _catalog_error(request: Request, exc: CatalogError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

    @application.exception_handler(RequestValidationError)
    async def _request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        # An undecodable body is rejected before dependencies run; the credential
        # and role checks still come first on gated routes.
        resource = mutation_resource(request.method, request.url.path)
        if resource is not None:
            try:
                with SessionLocal() as db:
                    authorize_mutation(db, await oauth2_scheme(request), resource)
            except CatalogError as denied:
                return await _catalog_error(request, denied)
        return JSONResponse(
            status_code=ValidationError.status_code,
            content={"message": _format_validation_errors(exc)},
        )

    @application.exception_handler(StarletteHTTPException)
    async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"message": str(exc.detail)}, headers=exc.headers)

    @application.exception_handler(Exception)
    async def _unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Internal server error"},
        )


def create_app() -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Avoid accidental schema changes in shared MySQL databases.
        # For local/test sqlite usage, auto-create ORM tables is still convenient.
        if build_sqlalchemy_db_url(settings).startswith("sqlite"):
            Base.metadata.create_all(bind=engine)
        yield

    application = FastAPI(
        title=settings.app_name,
        version=settings.version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    install_exception_handlers(application)

    # Health endpoints (do not depend on API_PREFIX)
    application.include_router(health_router)

    application.include_router(auth.router, prefix=f"{settings.api_prefix}/auth", tags=["auth"])
    application.include_router(users.router, prefix=f"{settings.api_prefix}/users", tags=["users"])
    application.include_router(admin.router, prefix=settings.api_prefix)
    application.include_router(subjects_router, prefix=settings.api_prefix)
    application.include_router(combinations_router, prefix=settings.api_prefix)
    application.include_router(programs_router, prefix=settings.api_prefix)
    application.include_router(schools_router, prefix=settings.api_prefix)
    application.include_router(jobs_router, prefix=settings.api_prefix)
    application.include_router(search_router, prefix=settings.api_prefix)
    return application


app = create_app()
