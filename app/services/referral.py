# app/services/referral.py
import logging
from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError
from app.crud import referral as crud_referral
from app.models.referral import AffiliateReferral
from app.schemas.referral import AffiliateReferralCreate
from app.services import affiliate as affiliate_service
from app.services import subscription as subscription_service
from app.services import user as user_service
from app.utils.dates import utcnow

logger = logging.getLogger(__name__)


def create_affiliate_referral(db: Session, data: AffiliateReferralCreate) -> AffiliateReferral:
    """Засчитывает действие приглашенного пользователя партнеру. Статус всегда 'pending'."""
    # Порядок проверок фиксирован: партнер -> пользователь -> подписка
    affiliate_service.require_affiliate(db, data.affiliate_id)
    user_service.require_user(db, data.referred_user_id)
    if data.membership_purchase_id is not None:
        subscription_service.require_subscription(db, data.membership_purchase_id)

    referral = crud_referral.create_referral(
        db,
        affiliate_id=data.affiliate_id,
        referred_user_id=data.referred_user_id,
        commission_amount=data.commission_amount,
        membership_purchase_id=data.membership_purchase_id
    )
    logger.info(
        f"Referral {referral.id} created: affiliate_id={data.affiliate_id} -> referred_user_id={data.referred_user_id}, "
        f"commission={referral.commission_amount}"
    )
    return referral

def list_affiliate_referrals(db: Session, affiliate_id: int) -> list[AffiliateReferral]:
    return crud_referral.get_referrals_by_affiliate(db, affiliate_id)

def list_pending_referrals(db: Session) -> list[AffiliateReferral]:
    return crud_referral.get_referrals_by_status(db, "pending")

def update_referral_status(db: Session, referral_id: int, status: str) -> AffiliateReferral:
    """Безусловная перезапись статуса комиссии."""
    referral = crud_referral.get_referral_by_id(db, referral_id)
    if not referral:
        raise NotFoundError("referral not found")
    previous_status = referral.commission_status
    referral = crud_referral.set_referral_status(db, referral, status, now=utcnow())
    logger.info(f"Referral {referral.id} status changed: '{previous_status}' -> '{status}'")
    return referral

def approve_referral(db: Session, referral_id: int) -> AffiliateReferral:
    """
    Одобряет комиссию. Разрешено только из 'pending': реферал в любом другом
    статусе для этой операции считается ненайденным.
    """
    referral = crud_referral.get_referral_by_id_and_status(db, referral_id, "pending")
    if not referral:
        raise NotFoundError("pending referral not found")
    referral = crud_referral.set_referral_status(db, referral, "approved", now=utcnow())
    logger.info(f"Referral {referral.id} approved (commission {referral.commission_amount}).")
    return referral
