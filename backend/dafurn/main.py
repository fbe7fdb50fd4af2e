# dafurn/main.py
import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from dafurn.config import Settings, settings
from dafurn.core.db import init_db, close_db
from dafurn.core.errors import StorageUnavailableError
from dafurn.repositories.user_repository import UserRepository

from dafurn.api.routers import health, users

logger = logging.getLogger("uvicorn.error")


async def storage_unavailable_handler(request: Request, exc: StorageUnavailableError):
    logger.error("[db] %s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "STORAGE_UNAVAILABLE"},
    )


def create_app(config: Settings = settings) -> FastAPI:
    """
    Build the FastAPI application.

    The user repository is created here and kept on app.state; handlers
    receive it through the get_user_repository dependency.
    """
    app = FastAPI(title=config.APP_NAME)
    app.state.settings = config
    app.state.user_repository = UserRepository()

    app.add_exception_handler(StorageUnavailableError, storage_unavailable_handler)

    @app.on_event("startup")
    async def on_startup():
        # A missing DATABASE_URL raises here and aborts startup;
        # an unreachable database is only logged
        try:
            await init_db(config.database_url, generate_schemas=config.generate_schemas)
        except StorageUnavailableError as e:
            logger.error("[db] Connection error, requests will fail until it is reachable: %s", e)
        else:
            logger.info("[db] Database connected")

    @app.on_event("shutdown")
    async def on_shutdown():
        await close_db()

    # REST
    app.include_router(health.router)
    app.include_router(users.router, prefix="/api")

    return app


app = create_app()
