import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from core import db
from core.logging import configure_logging
from core.settings import Settings, load_settings
from users import router as users_router

logger = logging.getLogger(__name__)

INVALID_BODY_MESSAGE = "Corpo da requisição inválido"


async def invalid_body_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": INVALID_BODY_MESSAGE, "details": jsonable_errors(exc)},
    )


def jsonable_errors(exc: RequestValidationError) -> list[dict]:
    # Drop the raw input/context objects; they are not always JSON-serializable.
    return [
        {"loc": list(err.get("loc", ())), "msg": str(err.get("msg", "")), "type": str(err.get("type", ""))}
        for err in exc.errors()
    ]


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or load_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # One pool per process, handed to handlers through core.db.get_pool.
        app.state.pool = await db.create_pool(settings)
        try:
            yield
        finally:
            await db.close_pool(app.state.pool)
            app.state.pool = None

    app = FastAPI(
        title="API de Usuários",
        version="1.0.0",
        description="API para gerenciamento de usuários",
        docs_url="/api-docs",
        openapi_url="/api-docs/openapi.json",
        redoc_url=None,
        lifespan=lifespan,
    )
    app.add_exception_handler(RequestValidationError, invalid_body_handler)
    app.include_router(users_router.router, prefix="/api/users", tags=["users"])
    return app


def run() -> None:
    settings = load_settings()
    configure_logging(settings.log_level)
    logger.info("Servidor rodando na porta %s", settings.port)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
