import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .error import ClientError, ServerError

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    error_dict = {"code": exc.base_error.code, "message": exc.base_error.message}
    logger.warning(f"Client error: {error_dict}")
    return JSONResponse(status_code=exc.status_code, content={"error": error_dict})


async def handle_server_error(request: Request, exc: ServerError):
    error_dict = {"code": exc.base_error.code, "message": "Internal server error"}
    logger.error(f"Server error: {exc.base_error.code}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )


def create_app(ApplicationConfig, init_database: bool = True) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if init_database:
            from gatepass.depends import init_database as init_db

            await init_db(ApplicationConfig.DEPARTMENTS)
        yield

    app = FastAPI(title="Gate Pass API", version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from gatepass.api.routes import (
        applications,
        auth,
        department,
        departments,
        health_check,
        profile,
        security,
    )

    prefix = ApplicationConfig.API_PREFIX
    app.include_router(health_check.router, tags=["Health"])
    app.include_router(auth.router, prefix=prefix, tags=["Authentication"])
    app.include_router(profile.router, prefix=prefix, tags=["Profile"])
    app.include_router(departments.router, prefix=prefix, tags=["Departments"])
    app.include_router(applications.router, prefix=prefix, tags=["Applications"])
    app.include_router(security.router, prefix=prefix, tags=["Security"])
    app.include_router(department.router, prefix=prefix, tags=["Department"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)

    return app
