# app/routers/v1/endpoints/admin/__init__.py

from fastapi import APIRouter, Depends

from app.dependencies import get_admin_user

from . import (
    general,
    users,
    memberships,
    content,
    affiliates,
    referrals,
    payouts,
    subscriptions,
)

# Зависимость get_admin_user применяется ко ВСЕМ эндпоинтам этого роутера:
# доступ к админке только у пользователей с флагом is_admin.
router = APIRouter(
    tags=["Admin"],
    dependencies=[Depends(get_admin_user)]
)

# /admin/dashboard, /admin/revenue, /admin/top-affiliates
router.include_router(general.router)

# /admin/users, /admin/users/{id}, /admin/users/{id}/deactivate
router.include_router(users.router, prefix="/users")

# /admin/membership-levels, /admin/memberships
router.include_router(memberships.router)

router.include_router(content.router, prefix="/content")
router.include_router(affiliates.router, prefix="/affiliates")
router.include_router(referrals.router, prefix="/referrals")
router.include_router(payouts.router, prefix="/payouts")
router.include_router(subscriptions.router, prefix="/subscriptions")
