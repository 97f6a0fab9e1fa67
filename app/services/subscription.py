# app/services/subscription.py
import logging
from datetime import timedelta
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.exceptions import NotFoundError
from app.crud import subscription as crud_subscription
from app.models.subscription import Subscription
from app.schemas.subscription import SubscriptionCreate
from app.services import affiliate as affiliate_service
from app.services import membership as membership_service
from app.services import user as user_service
from app.utils.dates import utcnow

logger = logging.getLogger(__name__)


def create_subscription(db: Session, data: SubscriptionCreate) -> Subscription:
    """
    Оформляет подписку сразу в статусе 'active' (подтверждения от платежки нет).
    Период: [сейчас, сейчас + duration_days уровня).
    """
    # Порядок проверок фиксирован: пользователь -> уровень -> партнер
    user_service.require_user(db, data.user_id)
    level = membership_service.require_membership_level(db, data.membership_level_id)
    if data.affiliate_id is not None:
        affiliate_service.require_affiliate(db, data.affiliate_id)

    period_start = utcnow()
    period_end = period_start + timedelta(days=level.duration_days)

    subscription = crud_subscription.create_subscription(
        db,
        user_id=data.user_id,
        membership_level_id=level.id,
        status="active",
        current_period_start=period_start,
        current_period_end=period_end,
        amount=data.amount,
        currency=data.currency or settings.DEFAULT_CURRENCY,
        affiliate_id=data.affiliate_id,
        provider_subscription_id=data.provider_subscription_id
    )
    logger.info(
        f"Created subscription {subscription.id} for user {data.user_id} on level {level.id}: "
        f"{subscription.amount} {subscription.currency}, affiliate={data.affiliate_id}"
    )
    return subscription

def require_subscription(db: Session, subscription_id: int) -> Subscription:
    subscription = crud_subscription.get_subscription_by_id(db, subscription_id)
    if not subscription:
        raise NotFoundError("subscription not found")
    return subscription

def list_user_subscriptions(db: Session, user_id: int) -> list[Subscription]:
    return crud_subscription.get_user_subscriptions(db, user_id)

def get_active_subscription(db: Session, user_id: int) -> Subscription | None:
    """
    Подписка со статусом 'active'. В отличие от членства, конец периода не проверяется:
    'active' подписка с истекшим периодом по-прежнему считается активной.
    """
    return crud_subscription.get_active_subscription(db, user_id)

def cancel_subscription(db: Session, subscription_id: int) -> Subscription:
    """Меняет только статус, период остается как был."""
    subscription = require_subscription(db, subscription_id)
    subscription = crud_subscription.set_subscription_status(db, subscription, "cancelled", now=utcnow())
    logger.info(f"Subscription {subscription.id} cancelled.")
    return subscription

def update_subscription_status(db: Session, subscription_id: int, status: str) -> Subscription:
    """
    Безусловная перезапись статуса (в т.ч. cancelled -> active) - используется
    для корректировок по вебхукам платежной системы.
    """
    subscription = require_subscription(db, subscription_id)
    previous_status = subscription.status
    subscription = crud_subscription.set_subscription_status(db, subscription, status, now=utcnow())
    logger.info(f"Subscription {subscription.id} status changed: '{previous_status}' -> '{status}'")
    return subscription

def renew_subscription(db: Session, subscription_id: int) -> Subscription:
    """Новый период от текущего момента, статус принудительно 'active' из любого состояния."""
    subscription = require_subscription(db, subscription_id)
    level = membership_service.require_membership_level(db, subscription.membership_level_id)

    period_start = utcnow()
    period_end = period_start + timedelta(days=level.duration_days)
    subscription = crud_subscription.set_subscription_period(
        db, subscription, period_start=period_start, period_end=period_end, status="active"
    )
    logger.info(f"Subscription {subscription.id} renewed until {period_end.isoformat()}")
    return subscription
