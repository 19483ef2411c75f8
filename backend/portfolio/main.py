"""FastAPI application entry point. Registers middleware, exception handlers and API routers."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from portfolio.config import settings
from portfolio.database import Base, dispose_engine, engine
import portfolio.models  # noqa: F401 - registers models on the metadata
from portfolio.middleware.auth_middleware import AdminGateMiddleware
from portfolio.routers import admin, auth, content, projects, revalidate
from portfolio.utils.errors import PortfolioError, StorageError, ValidationError, field_errors_from_pydantic

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(level=settings.LOG_LEVEL.upper(), format=LOG_FORMAT)


@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(bind=engine)
    if settings.uses_default_secret:
        logger.warning("[auth] JWT_SECRET is not set, session tokens are signed with the insecure default secret")
    yield
    dispose_engine()


configure_logging()

app = FastAPI(
    title="Portfolio Content Service",
    description="Portfolio site content API with an authenticated admin editing surface",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(AdminGateMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(PortfolioError)
async def portfolio_error_handler(request: Request, exc: PortfolioError):
    if isinstance(exc, StorageError):
        logger.error("[storage] %s %s failed: %s", request.method, request.url.path, exc.detail)
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    error = ValidationError("Validation failed", errors=field_errors_from_pydantic(exc.errors()))
    return JSONResponse(status_code=error.status_code, content=error.to_payload())


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception("[storage] document store error on %s %s", request.method, request.url.path)
    error = StorageError("Document store unavailable")
    return JSONResponse(status_code=error.status_code, content=error.to_payload())


# Register all routers
app.include_router(auth.router)
app.include_router(content.router)
app.include_router(projects.router)
app.include_router(revalidate.router)
app.include_router(admin.router)


@app.get("/api/health")
def health_check():
    return {"status": "ok", "service": "portfolio-content"}
