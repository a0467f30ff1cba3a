# barbershop/main.py

from contextlib import asynccontextmanager
import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .config import Settings, get_settings
from .db import init_db
from .errors import SERVER_ERROR_MESSAGE, UnexpectedStoreError
from .logging_config import setup_logging
from .routers import barbers_routes, clients_routes, services_routes, turns_routes

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # malformed bodies are a 400 with the list of field errors
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"errors": jsonable_encoder(exc.errors())},
    )


async def server_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": SERVER_ERROR_MESSAGE},
    )


def create_app(settings: Optional[Settings] = None, run_migrations: bool = True) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        lifespan=lifespan if run_migrations else None,
    )

    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(UnexpectedStoreError, server_error_handler)
    app.add_exception_handler(Exception, server_error_handler)

    @app.get("/health")
    def health_check():
        return {"status": "ok"}

    app.include_router(clients_routes.router)
    app.include_router(barbers_routes.router)
    app.include_router(services_routes.router)
    app.include_router(turns_routes.router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("barbershop.main:app", host="0.0.0.0", port=8000)
