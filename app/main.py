from contextlib import asynccontextmanager
from typing import Optional
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.router import api_router, not_found
from app.core.config import Settings, settings as default_settings
from app.core.db import Database
from app.core.errors import AppError
from app.core.templates import build_template_store

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Сборка приложения: шаблоны, БД, маршруты и обработчики ошибок"""
    settings = settings or default_settings

    # Ошибка в шаблоне фатальна и всплывает до начала приёма соединений
    templates = build_template_store()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        db = Database.from_url(settings.database_url, echo=settings.db_echo)
        await db.init()
        app.state.db = db
        logger.info(f"Application started, templates: {', '.join(templates.names())}")
        try:
            yield
        finally:
            await db.close()
            logger.info("Application stopped")

    app = FastAPI(
        title="Posts",
        description="Минимальный сервис записей с рендерингом через шаблоны",
        version="1.0.0",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )
    app.state.templates = templates

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc}", exc_info=exc)
        else:
            logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc}")
        return PlainTextResponse(exc.public_body, status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.info(f"{request.method} {request.url.path} -> 400: {exc.errors()}")
        return Response(status_code=400)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        # Неверный метод для известного пути - тоже 404
        if exc.status_code in (404, 405):
            return await not_found()
        return Response(status_code=exc.status_code)

    app.include_router(api_router)

    return app


app = create_app()
