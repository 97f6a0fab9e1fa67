# app/routers/v1/endpoints/admin/general.py

import logging
from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.core.config import settings
from app.dependencies import get_db
from app.schemas.analytics import DashboardStats, MonthlyRevenue, TopAffiliate
from app.services import analytics as analytics_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/dashboard", response_model=DashboardStats)
def get_dashboard(db: Session = Depends(get_db)):
    """
    [АДМИН] Ключевые метрики: пользователи, партнеры, подписки, выручка
    и сумма ожидающих выплат.
    """
    return analytics_service.get_dashboard_stats(db)


@router.get("/revenue", response_model=List[MonthlyRevenue])
def get_revenue(
    months: int = Query(settings.REVENUE_MONTHS_DEFAULT, ge=1, le=120),
    db: Session = Depends(get_db)
):
    """[АДМИН] Выручка по месяцам за последние `months` месяцев."""
    return analytics_service.get_revenue_by_month(db, months=months)


@router.get("/top-affiliates", response_model=List[TopAffiliate])
def get_top_affiliates(
    limit: int = Query(settings.TOP_AFFILIATES_DEFAULT, ge=1, le=100),
    db: Session = Depends(get_db)
):
    return analytics_service.get_top_affiliates(db, limit=limit)
