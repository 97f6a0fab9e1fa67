# app/routers/v1/api.py

from fastapi import APIRouter

from app.routers.v1.endpoints import affiliate, auth, content, membership, subscription, user
from app.routers.v1.endpoints import admin as admin_v1_router

# Главный роутер API v1, в main.py подключается с префиксом /api
api_router = APIRouter(prefix="/v1")

# Пользовательские и публичные эндпоинты
api_router.include_router(auth.router, tags=["Authentication"])
api_router.include_router(user.router, tags=["Users"])
api_router.include_router(membership.router, tags=["Memberships"])
api_router.include_router(content.router, tags=["Content"])
api_router.include_router(subscription.router, tags=["Subscriptions"])
api_router.include_router(affiliate.router, tags=["Affiliates"])

# Админские эндпоинты
api_router.include_router(admin_v1_router.router, prefix="/admin")
