# app/crud/subscription.py
from datetime import datetime
from decimal import Decimal
from typing import List, Tuple
from sqlalchemy import func, extract
from sqlalchemy.orm import Session
from app.models.subscription import Subscription


def create_subscription(
    db: Session,
    user_id: int,
    membership_level_id: int,
    status: str,
    current_period_start: datetime,
    current_period_end: datetime,
    amount: Decimal,
    currency: str,
    affiliate_id: int | None = None,
    provider_subscription_id: str | None = None
) -> Subscription:
    db_subscription = Subscription(
        user_id=user_id,
        membership_level_id=membership_level_id,
        status=status,
        current_period_start=current_period_start,
        current_period_end=current_period_end,
        amount=amount,
        currency=currency,
        affiliate_id=affiliate_id,
        provider_subscription_id=provider_subscription_id
    )
    db.add(db_subscription)
    db.commit()
    db.refresh(db_subscription)
    return db_subscription

def get_subscription_by_id(db: Session, subscription_id: int) -> Subscription | None:
    return db.query(Subscription).filter(Subscription.id == subscription_id).first()

def get_user_subscriptions(db: Session, user_id: int) -> list[Subscription]:
    return db.query(Subscription).filter(
        Subscription.user_id == user_id
    ).order_by(Subscription.created_at.desc(), Subscription.id.desc()).all()

def get_active_subscription(db: Session, user_id: int) -> Subscription | None:
    """Подписка со статусом 'active'. Дата окончания периода здесь НЕ проверяется."""
    return db.query(Subscription).filter(
        Subscription.user_id == user_id,
        Subscription.status == "active"
    ).order_by(Subscription.created_at.desc(), Subscription.id.desc()).first()

def set_subscription_status(db: Session, subscription: Subscription, status: str, now: datetime) -> Subscription:
    subscription.status = status
    subscription.updated_at = now
    db.commit()
    db.refresh(subscription)
    return subscription

def set_subscription_period(
    db: Session,
    subscription: Subscription,
    period_start: datetime,
    period_end: datetime,
    status: str
) -> Subscription:
    subscription.current_period_start = period_start
    subscription.current_period_end = period_end
    subscription.status = status
    subscription.updated_at = period_start
    db.commit()
    db.refresh(subscription)
    return subscription

# --- Агрегаты для аналитики ---

def count_all_subscriptions(db: Session) -> int:
    return db.query(Subscription).count()

def count_subscriptions_by_status(db: Session, status: str) -> int:
    return db.query(Subscription).filter(Subscription.status == status).count()

def sum_amount(db: Session, created_since: datetime | None = None) -> Decimal:
    query = db.query(func.sum(Subscription.amount))
    if created_since is not None:
        query = query.filter(Subscription.created_at >= created_since)
    total = query.scalar()
    return total if total is not None else Decimal("0.00")

def get_revenue_by_month(db: Session, created_since: datetime) -> List[Tuple[int, int, Decimal]]:
    """Сумма подписок по календарным месяцам создания, в хронологическом порядке."""
    year = extract("year", Subscription.created_at)
    month = extract("month", Subscription.created_at)
    rows = db.query(
        year.label("year"),
        month.label("month"),
        func.sum(Subscription.amount).label("revenue")
    ).filter(
        Subscription.created_at >= created_since
    ).group_by(year, month).order_by(year, month).all()
    return [(int(row.year), int(row.month), row.revenue) for row in rows]
