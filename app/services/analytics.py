# app/services/analytics.py
"""
Сводная статистика для админки и кабинета партнера.
Только чтение: все цифры считаются на лету из основных таблиц.
"""
import logging
from sqlalchemy.orm import Session

from app.crud import affiliate as crud_affiliate
from app.crud import payout as crud_payout
from app.crud import referral as crud_referral
from app.crud import subscription as crud_subscription
from app.crud import user as crud_user
from app.schemas.analytics import AffiliateStats, DashboardStats, MonthlyRevenue, TopAffiliate
from app.services import affiliate as affiliate_service
from app.utils.dates import month_start, shift_months, utcnow

logger = logging.getLogger(__name__)


def get_dashboard_stats(db: Session) -> DashboardStats:
    """Ключевые метрики для главной страницы админки."""
    current_month_start = month_start(utcnow())

    stats = DashboardStats(
        total_users=crud_user.count_all_users(db),
        total_affiliates=crud_affiliate.count_all_affiliates(db),
        total_subscriptions=crud_subscription.count_all_subscriptions(db),
        total_revenue=crud_subscription.sum_amount(db),
        monthly_revenue=crud_subscription.sum_amount(db, created_since=current_month_start),
        active_subscriptions=crud_subscription.count_subscriptions_by_status(db, "active"),
        pending_payouts=crud_payout.sum_amount_by_status(db, "pending"),
    )
    logger.info(f"Calculated dashboard stats: users={stats.total_users}, revenue={stats.total_revenue}")
    return stats


def get_affiliate_stats(db: Session, affiliate_id: int) -> AffiliateStats:
    """Статистика партнера. total_earnings берется из хранимого поля, а не пересчитывается."""
    affiliate = affiliate_service.require_affiliate(db, affiliate_id)
    current_month_start = month_start(utcnow())

    total_referrals = crud_referral.count_referrals(db, affiliate_id=affiliate.id)
    converted = crud_referral.count_referrals(db, affiliate_id=affiliate.id, with_purchase_only=True)
    conversion_rate = round(converted / total_referrals * 100, 2) if total_referrals > 0 else 0.0

    return AffiliateStats(
        total_earnings=affiliate.total_earnings,
        pending_earnings=crud_referral.sum_commission(db, affiliate_id=affiliate.id, status="pending"),
        total_referrals=total_referrals,
        conversion_rate=conversion_rate,
        monthly_earnings=crud_referral.sum_commission(
            db, affiliate_id=affiliate.id, status="approved", created_since=current_month_start
        ),
        clicks_this_month=0,
    )


def get_revenue_by_month(db: Session, months: int = 12) -> list[MonthlyRevenue]:
    """
    Выручка по календарным месяцам за последние `months` месяцев, включая текущий.
    Месяцы без подписок в ответ не попадают.
    """
    window_start = shift_months(month_start(utcnow()), -(months - 1))
    rows = crud_subscription.get_revenue_by_month(db, created_since=window_start)
    return [
        MonthlyRevenue(month=f"{year:04d}-{month:02d}", revenue=revenue)
        for year, month, revenue in rows
    ]


def get_top_affiliates(db: Session, limit: int = 10) -> list[TopAffiliate]:
    """Рейтинг активных партнеров по накопленному заработку."""
    return [
        TopAffiliate(
            affiliate_id=affiliate.id,
            name=user.display_name,
            earnings=affiliate.total_earnings,
            referrals=affiliate.total_referrals,
        )
        for affiliate, user in crud_affiliate.get_top_affiliates(db, limit=limit)
    ]
