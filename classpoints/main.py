import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from classpoints.api.router import api_router
from classpoints.core.config import get_settings
from classpoints.core.exceptions import ServiceError
from classpoints.db.init_db import init_db
from classpoints.db.session import create_db_engine, create_session_factory

logger = logging.getLogger(__name__)


def _error_response(status_code: int, kind: str, message: str, **extra) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": {"error": kind, "message": message, **extra}})


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    logger.warning("%s %s -> %s: %s", request.method, request.url.path, exc.kind, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.to_detail()})


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    fields = [".".join(str(part) for part in error["loc"] if part != "body") for error in exc.errors()]
    return _error_response(422, "validation_error", "Invalid request", fields=fields)


async def storage_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("Storage failure on %s %s", request.method, request.url.path)
    return _error_response(503, "storage_error", f"Storage failure: {exc.__class__.__name__}")


def create_app() -> FastAPI:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        engine = create_db_engine(settings)
        app.state.engine = engine
        app.state.session_factory = create_session_factory(engine)
        init_db(engine, app.state.session_factory, seed_sample_students=settings.seed_sample_students)
        logger.info("%s started (%s)", settings.app_name, settings.app_env)
        yield
        engine.dispose()

    app = FastAPI(title=settings.app_name, version=settings.app_version, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(SQLAlchemyError, storage_error_handler)
    app.include_router(api_router, prefix=settings.api_v1_prefix)

    return app


app = create_app()
