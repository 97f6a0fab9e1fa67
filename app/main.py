# app/main.py

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Конфигурация и ядро
from app.core.config import settings as config
from app.core.exceptions import ServiceError
from app.core.logging_config import setup_logging

# Роутеры FastAPI
from app.routers.v1.api import api_router as api_v1_router

# --- Инициализация ---
logger = logging.getLogger(__name__)


# --- Обработчики ошибок ---
async def service_error_handler(request: Request, exc: ServiceError):
    """Ошибки бизнес-правил из сервисов превращаются в ответ с их статусом."""
    logger.warning(f"{type(exc).__name__} on {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


async def unhandled_exception_handler(request: Request, exc: Exception):
    """
    Глобальный обработчик для всех необработанных исключений.
    Логирует ошибку с трейсбеком, клиенту отдает только 500.
    """
    logger.critical(f"Unhandled exception for request: {request.method} {request.url}", exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal Server Error"},
    )


# --- Lifespan Manager (запуск и остановка приложения) ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    logger.info("Application lifespan startup...")
    yield
    logger.info("Application shutting down.")


# --- Создание FastAPI приложения ---
app = FastAPI(
    title="Membership & Affiliate Service",
    description="Backend for a membership site with gated content and an affiliate program",
    version="0.1.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Регистрация обработчиков исключений ---
app.add_exception_handler(ServiceError, service_error_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)

# --- Подключение роутеров FastAPI ---
# /api/v1/...
app.include_router(api_v1_router, prefix="/api")


@app.get("/health", tags=["Health"])
def health_check():
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}
