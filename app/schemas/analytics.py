# app/schemas/analytics.py
from decimal import Decimal
from pydantic import BaseModel


class DashboardStats(BaseModel):
    total_users: int
    total_affiliates: int
    total_subscriptions: int
    total_revenue: Decimal
    monthly_revenue: Decimal    # Выручка текущего календарного месяца
    active_subscriptions: int
    pending_payouts: Decimal    # Сумма выплат в статусе 'pending'

class AffiliateStats(BaseModel):
    total_earnings: Decimal     # Хранимое поле партнера, не пересчитывается
    pending_earnings: Decimal
    total_referrals: int
    conversion_rate: float      # Проценты, 0..100
    monthly_earnings: Decimal
    clicks_this_month: int = 0  # Клики нигде не отслеживаются

class MonthlyRevenue(BaseModel):
    month: str                  # 'YYYY-MM'
    revenue: Decimal

class TopAffiliate(BaseModel):
    affiliate_id: int
    name: str
    earnings: Decimal
    referrals: int
